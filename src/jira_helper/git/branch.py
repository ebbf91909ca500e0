"""Issue key detection from explicit input or the current git branch."""

import re
import subprocess
from typing import Optional

from jira_helper.errors import KeyNotFound
from jira_helper.ui.output import BOLD, GRAY, NC

ISSUE_KEY_PATTERN = r"[A-Z]+-\d+"
# Explicit input is case-insensitive; branch names must carry an uppercase key
_EXPLICIT_KEY_RE = re.compile(ISSUE_KEY_PATTERN, re.IGNORECASE)
_BRANCH_KEY_RE = re.compile(f"({ISSUE_KEY_PATTERN})")


def get_current_branch() -> str:
    """Current branch name. Raises CalledProcessError/OSError outside a repository."""
    result = subprocess.run(
        ["git", "rev-parse", "--abbrev-ref", "HEAD"],
        capture_output=True,
        text=True,
        check=True,
    )
    return result.stdout.strip()


def is_issue_key(text: Optional[str]) -> bool:
    return bool(text and _EXPLICIT_KEY_RE.fullmatch(text.strip()))


def find_key_in_branch() -> Optional[str]:
    """First issue key embedded in the branch name, or None."""
    try:
        branch = get_current_branch()
    except (subprocess.CalledProcessError, OSError):
        return None
    match = _BRANCH_KEY_RE.search(branch)
    return match.group(1).upper() if match else None


def resolve_key(explicit: Optional[str] = None) -> str:
    """Explicit key if it looks like one, else the key from the branch name.

    Non-key explicit input is ignored so callers can pass positional values
    (a time, a status) through the same slot.
    """
    if is_issue_key(explicit):
        return explicit.strip().upper()  # type: ignore[union-attr]

    branch_key = find_key_in_branch()
    if branch_key:
        print(f"{GRAY}Detected ticket from branch: {BOLD}{branch_key}{NC}")
        return branch_key

    raise KeyNotFound()


def split_key_and_arg(arg1: Optional[str], arg2: Optional[str]) -> tuple[str, Optional[str]]:
    """`cmd KEY value` or `cmd value` (key from branch). Returns (key, value)."""
    if is_issue_key(arg1):
        return resolve_key(arg1), arg2
    return resolve_key(), arg1


def project_key(issue_key: str) -> str:
    return issue_key.split("-")[0]
