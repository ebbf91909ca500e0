"""Status transition state machine with Rescue Mode.

A direct transition that Jira rejects (usually a mandatory field left empty)
drops into Rescue Mode: ask the user for a value, write it to the configured
field, then retry the transition once.
"""

from typing import Any, Callable, Optional

from jira_helper.config.store import COMPONENTS_FIELD
from jira_helper.errors import (
    DirectMoveRejected,
    JiraHelperError,
    NoTransitionsAvailable,
    RescueFieldUpdateExhausted,
    RescueRetryFailed,
    TransitionNotMatched,
)
from jira_helper.models.core import Transition
from jira_helper.models.state import TERMINAL_STATES, MoveContext, MoveState
from jira_helper.ui.output import BOLD, NC, dim, error, success, warn
from jira_helper.ui.prompt import Chooser
from jira_helper.utils.adf import paragraph_doc

MANUAL_ENTRY = "[Manual Text Entry]"


def resolve_search_term(term: str, aliases: dict[str, str]) -> str:
    """Alias target if term is an alias, else term unchanged."""
    return aliases.get(term, term)


def find_transition(transitions: list[Transition], term: str) -> Optional[Transition]:
    """First transition whose name or target status contains term (case-insensitive)."""
    needle = term.lower()
    for t in transitions:
        if needle in t.name.lower() or needle in t.to_name.lower():
            return t
    return None


def build_field_payloads(field_id: str, value: str) -> list[dict]:
    """Candidate `fields` payloads for one value, in the order they are tried.

    Custom field types aren't known up front, so the same value is offered as
    a rich-text document, a plain string, a multi-select list and a single
    select. The built-in components field has exactly one valid shape.
    """
    if field_id == COMPONENTS_FIELD:
        return [{COMPONENTS_FIELD: [{"name": value}]}]
    return [
        {field_id: paragraph_doc(value)},
        {field_id: value},
        {field_id: [{"value": value}]},
        {field_id: {"value": value}},
    ]


def handle_resolving_target(ctx: MoveContext) -> MoveState:
    ctx.search_term = resolve_search_term(ctx.term, ctx.aliases)
    return MoveState.MATCHING


def handle_matching(ctx: MoveContext) -> MoveState:
    """Fetch transitions for the current status and pick one."""
    ctx.transitions = ctx.gateway.get_transitions(ctx.key)
    if not ctx.transitions:
        raise NoTransitionsAvailable(ctx.key)

    ctx.match = find_transition(ctx.transitions, ctx.search_term)
    if ctx.match is None or not ctx.match.id:
        raise TransitionNotMatched(ctx.key, ctx.search_term, [t.name for t in ctx.transitions])

    return MoveState.ATTEMPTING_DIRECT_MOVE


def handle_direct_move(ctx: MoveContext) -> MoveState:
    assert ctx.match is not None
    print(dim(f"Attempting move: {ctx.match.name} on {ctx.key}..."))
    try:
        ctx.gateway.execute_transition(ctx.key, ctx.match.id)
    except Exception as e:
        # Jira gives no structured reason; any rejection goes to Rescue Mode
        ctx.rejection = DirectMoveRejected(str(e))
        warn("Transition failed. Entering Rescue Mode...")
        return MoveState.RESCUE_SELECTING_VALUE

    try:
        ctx.final_status = ctx.gateway.get_status_name(ctx.key)
    except Exception as e:
        warn(f"Moved, but could not read the new status: {e}")
    return MoveState.SUCCESS


def handle_selecting_value(ctx: MoveContext) -> MoveState:
    """Offer project components, or free text via the manual entry option."""
    try:
        components = ctx.gateway.get_project_components(ctx.project_key)
    except JiraHelperError as e:
        ctx.failure = e
        return MoveState.FAILURE
    except Exception as e:
        ctx.failure = JiraHelperError(f"Could not load components: {e}")
        return MoveState.FAILURE

    choices = [MANUAL_ENTRY] + [c.get("name") or "Unnamed" for c in components]
    value = ctx.chooser.choose("Select Affected Area:", choices)
    if value == MANUAL_ENTRY:
        value = ctx.chooser.prompt_text("Enter text:")

    if not value:
        ctx.failure = JiraHelperError("No value entered.")
        return MoveState.FAILURE

    ctx.chosen_value = value
    return MoveState.RESCUE_UPDATING_FIELD


def handle_updating_field(ctx: MoveContext) -> MoveState:
    """Try each payload shape; stop at the first Jira accepts."""
    assert ctx.chosen_value is not None
    last_error: Optional[str] = None
    for fields in build_field_payloads(ctx.field_id, ctx.chosen_value):
        ctx.attempted_payloads.append(fields)
        try:
            ctx.gateway.edit_fields(ctx.key, fields)
        except Exception as e:
            last_error = str(e)
            continue
        ctx.accepted_payload = fields
        success("  Field updated.")
        return MoveState.RESCUE_RETRY_MOVE

    ctx.failure = RescueFieldUpdateExhausted(ctx.field_id, last_error)
    return MoveState.FAILURE


def handle_retry_move(ctx: MoveContext) -> MoveState:
    """Single retry after the field update. Failure here is final."""
    assert ctx.match is not None
    try:
        ctx.gateway.execute_transition(ctx.key, ctx.match.id)
    except Exception as e:
        ctx.failure = RescueRetryFailed(str(e))
        return MoveState.FAILURE
    return MoveState.SUCCESS


def report_outcome(ctx: MoveContext) -> None:
    """One status line per terminal state."""
    if ctx.state == MoveState.SUCCESS:
        if ctx.final_status:
            success(f"Success! Moved to {BOLD}[{ctx.final_status}]{NC}.")
        else:
            success("Success! Ticket moved.")
        return

    if isinstance(ctx.failure, RescueFieldUpdateExhausted):
        error(f"Failed to update field {ctx.failure.field_id}.")
        if ctx.failure.last_error:
            print(dim(f"  Last error: {ctx.failure.last_error}"))
    elif isinstance(ctx.failure, RescueRetryFailed):
        error(f"Field updated but the transition still failed: {ctx.failure}")
    else:
        error(f"Rescue Mode failed: {ctx.failure}")


# State handler dispatch table
STATE_HANDLERS: dict[MoveState, Callable[[MoveContext], MoveState]] = {
    MoveState.RESOLVING_TARGET: handle_resolving_target,
    MoveState.MATCHING: handle_matching,
    MoveState.ATTEMPTING_DIRECT_MOVE: handle_direct_move,
    MoveState.RESCUE_SELECTING_VALUE: handle_selecting_value,
    MoveState.RESCUE_UPDATING_FIELD: handle_updating_field,
    MoveState.RESCUE_RETRY_MOVE: handle_retry_move,
}


def run_move(ctx: MoveContext) -> MoveState:
    """Run the state machine to SUCCESS or FAILURE.

    NoTransitionsAvailable and TransitionNotMatched propagate: nothing was
    attempted, so there is no outcome to report.
    """
    while ctx.state not in TERMINAL_STATES:
        ctx.state = STATE_HANDLERS[ctx.state](ctx)
    report_outcome(ctx)
    return ctx.state


def move_issue(
    gateway: Any,
    key: str,
    term: str,
    aliases: Optional[dict[str, str]] = None,
    field_id: str = COMPONENTS_FIELD,
    chooser: Optional[Chooser] = None,
) -> MoveContext:
    """Move `key` to the status matching `term`. Returns the finished context."""
    ctx = MoveContext(
        gateway=gateway,
        chooser=chooser or Chooser(),
        key=key,
        term=term,
        aliases=aliases or {},
        field_id=field_id,
    )
    run_move(ctx)
    return ctx
