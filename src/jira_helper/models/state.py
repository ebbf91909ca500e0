"""State models for the status transition state machine."""

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, Optional

from jira_helper.errors import DirectMoveRejected, JiraHelperError
from jira_helper.git import branch
from jira_helper.models.core import Transition
from jira_helper.ui.prompt import Chooser


class MoveState(Enum):
    """States of one `jira status` invocation."""

    RESOLVING_TARGET = auto()  # Apply alias map
    MATCHING = auto()  # Pick transition by substring
    ATTEMPTING_DIRECT_MOVE = auto()  # First transition attempt
    RESCUE_SELECTING_VALUE = auto()  # Ask user for the missing value
    RESCUE_UPDATING_FIELD = auto()  # Try payload shapes until one sticks
    RESCUE_RETRY_MOVE = auto()  # One-shot retry of the transition
    SUCCESS = auto()  # Terminal
    FAILURE = auto()  # Terminal


TERMINAL_STATES = (MoveState.SUCCESS, MoveState.FAILURE)


@dataclass
class MoveContext:
    """Everything one transition attempt reads and writes."""

    gateway: Any
    chooser: Chooser
    key: str
    term: str
    aliases: dict[str, str] = field(default_factory=dict)
    field_id: str = "components"

    search_term: str = ""
    transitions: list[Transition] = field(default_factory=list)
    match: Optional[Transition] = None

    rejection: Optional[DirectMoveRejected] = None
    chosen_value: Optional[str] = None
    accepted_payload: Optional[dict] = None
    attempted_payloads: list[dict] = field(default_factory=list)

    final_status: Optional[str] = None
    failure: Optional[JiraHelperError] = None
    state: MoveState = MoveState.RESOLVING_TARGET

    @property
    def project_key(self) -> str:
        return branch.project_key(self.key)

    @property
    def rescued(self) -> bool:
        return self.rejection is not None
