"""Data models for jira-helper."""

from jira_helper.models.core import Transition, WorklogEntry, parse_timestamp
from jira_helper.models.state import TERMINAL_STATES, MoveContext, MoveState

__all__ = [
    # Core
    "Transition",
    "WorklogEntry",
    "parse_timestamp",
    # State
    "MoveState",
    "MoveContext",
    "TERMINAL_STATES",
]
