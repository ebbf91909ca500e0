"""Multi-step command flows."""

from jira_helper.phases.transition import (
    MANUAL_ENTRY,
    build_field_payloads,
    find_transition,
    handle_direct_move,
    handle_matching,
    handle_resolving_target,
    handle_retry_move,
    handle_selecting_value,
    handle_updating_field,
    move_issue,
    report_outcome,
    resolve_search_term,
    run_move,
)

__all__ = [
    "MANUAL_ENTRY",
    "resolve_search_term",
    "find_transition",
    "build_field_payloads",
    "handle_resolving_target",
    "handle_matching",
    "handle_direct_move",
    "handle_selecting_value",
    "handle_updating_field",
    "handle_retry_move",
    "report_outcome",
    "run_move",
    "move_issue",
]
