"""UI components for terminal output and prompts."""

from jira_helper.ui.output import (
    BLUE,
    BOLD,
    CYAN,
    GRAY,
    GREEN,
    MAGENTA,
    NC,
    RED,
    YELLOW,
    bold,
    dim,
    error,
    hyperlink,
    log,
    rule,
    success,
    warn,
)
from jira_helper.ui.prompt import Chooser, choose, confirm, prompt_secret, prompt_text

__all__ = [
    # Colors
    "RED",
    "GREEN",
    "YELLOW",
    "BLUE",
    "CYAN",
    "GRAY",
    "MAGENTA",
    "BOLD",
    "NC",
    # Functions
    "hyperlink",
    "dim",
    "bold",
    "log",
    "success",
    "warn",
    "error",
    "rule",
    # Prompts
    "Chooser",
    "choose",
    "confirm",
    "prompt_secret",
    "prompt_text",
]
