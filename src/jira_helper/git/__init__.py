"""Git integration: issue key detection from branch names."""

from jira_helper.git.branch import (
    ISSUE_KEY_PATTERN,
    find_key_in_branch,
    get_current_branch,
    is_issue_key,
    project_key,
    resolve_key,
    split_key_and_arg,
)

__all__ = [
    "ISSUE_KEY_PATTERN",
    "get_current_branch",
    "find_key_in_branch",
    "is_issue_key",
    "resolve_key",
    "split_key_and_arg",
    "project_key",
]
