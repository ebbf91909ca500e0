"""Exceptions raised by commands and reported to the user."""

from typing import Optional


class JiraHelperError(Exception):
    """Base class. The message is what the user sees."""


class MissingCredentials(JiraHelperError):
    def __init__(self) -> None:
        super().__init__('Jira credentials not configured. Run "jira setup".')


class KeyNotFound(JiraHelperError):
    def __init__(self) -> None:
        super().__init__(
            'Could not detect Issue Key. Please provide it explicitly (e.g. "TASK-123") '
            "or run inside a Git branch."
        )


class NoTransitionsAvailable(JiraHelperError):
    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(f"No transitions found for {key} or ticket is closed.")


class TransitionNotMatched(JiraHelperError):
    def __init__(self, key: str, term: str, options: list[str]) -> None:
        self.key = key
        self.term = term
        self.options = options
        super().__init__(f'Transition "{term}" not found for {key}.')


class DirectMoveRejected(JiraHelperError):
    """First transition attempt failed; handled locally by Rescue Mode."""


class RescueFieldUpdateExhausted(JiraHelperError):
    def __init__(self, field_id: str, last_error: Optional[str] = None) -> None:
        self.field_id = field_id
        self.last_error = last_error
        super().__init__(f"Failed to update field {field_id}: every payload shape was rejected.")


class RescueRetryFailed(JiraHelperError):
    """Transition retry after a successful field update failed."""


class JiraApiError(JiraHelperError):
    def __init__(self, message: str, status: Optional[int] = None) -> None:
        self.status = status
        super().__init__(message)
