"""CLI entry point and argument parsing."""

import argparse
import sys
import webbrowser
from datetime import datetime
from importlib.metadata import version as get_version
from typing import Optional

try:
    __version__ = get_version("jira-helper")
except Exception:
    __version__ = "dev"

from jira_helper.auth import clear_creds, run_setup
from jira_helper.clients.jira import get_client
from jira_helper.config.settings import get_config, get_config_loaded_sources
from jira_helper.config.store import (
    get_affected_field_id,
    get_aliases,
    get_user_aliases,
    remove_alias,
    save_alias,
    set_affected_field_id,
)
from jira_helper.errors import JiraHelperError, TransitionNotMatched
from jira_helper.git.branch import resolve_key, split_key_and_arg
from jira_helper.models.state import MoveState
from jira_helper.phases.transition import move_issue
from jira_helper.reports.worklog import collect_report_seconds, report_start, worklog_rows
from jira_helper.ui.output import (
    BLUE,
    BOLD,
    CYAN,
    GRAY,
    GREEN,
    MAGENTA,
    NC,
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
from jira_helper.ui.prompt import prompt_text
from jira_helper.update import run_upgrade
from jira_helper.utils.debug import DEBUG_LOG, debug_log, is_debug, set_debug
from jira_helper.utils.fields import format_field
from jira_helper.utils.formatting import fmt_clock, fmt_work_time

INFO_FIELDS = ["summary", "status", "assignee", "priority", "timetracking", "components"]
INFO_EXTRA = [
    ("Assignee", "assignee"),
    ("Priority", "priority"),
    ("Time", "timetracking"),
    ("Components", "components"),
]


# --- credentials ---


def cmd_setup(args: argparse.Namespace) -> int:
    run_setup()
    return 0


def cmd_logout(args: argparse.Namespace) -> int:
    clear_creds()
    success("Logged out. Stored credentials cleared.")
    return 0


# --- issue inspection ---


def cmd_info(args: argparse.Namespace) -> int:
    key = resolve_key(args.issue_key)
    issue = get_client().get_issue(key, fields=INFO_FIELDS)
    fields = issue.get("fields") or {}

    print(f"\n{GREEN}Found issue: {issue.get('key', key)}{NC}")
    print(bold(fields.get("summary", "")))
    print(f"Status: [{format_field(fields.get('status'))}]")
    for label, field_id in INFO_EXTRA:
        value = format_field(fields.get(field_id))
        if value:
            print(f"{GRAY}{label}:{NC} {value}")
    return 0


def cmd_options(args: argparse.Namespace) -> int:
    key = resolve_key(args.issue_key)
    client = get_client()
    log(f"Fetching options for {key}...")

    transitions = client.get_transitions(key)
    if not transitions:
        warn("No transitions available.")
        return 0
    for t in transitions:
        print(f"- {BOLD}{t.name}{NC} {dim(f'(Moves to: {t.to_name})')}")
    return 0


def cmd_open(args: argparse.Namespace) -> int:
    key = resolve_key(args.issue_key)
    url = get_client().browse_url(key)
    log(f"Opening {bold(hyperlink(url, key))} in browser...")
    webbrowser.open(url)
    return 0


def status_color(status_name: str) -> str:
    name = status_name.lower()
    color = ""
    if "progress" in name:
        color = YELLOW
    if "review" in name:
        color = MAGENTA
    if "todo" in name or "open" in name:
        color = BLUE
    return color


def cmd_mine(args: argparse.Namespace) -> int:
    mine_cfg = get_config().get("mine") or {}
    client = get_client()
    log("Fetching your open tasks...")

    issues = client.search_issues(
        mine_cfg.get("jql", "assignee = currentUser() AND statusCategory != Done"),
        fields=["summary", "status", "priority"],
        limit=mine_cfg.get("max_results", 15),
    )
    if not issues:
        warn("No open tasks assigned to you!")
        return 0

    print(f"\n{BOLD}My Open Tasks ({len(issues)}){NC}")
    rule()
    for issue in issues:
        fields = issue.get("fields") or {}
        status = ((fields.get("status") or {}).get("name")) or ""
        label = f"[{status}]"
        print(
            f"{BOLD}{CYAN}{issue.get('key', ''):<12}{NC} "
            f"{status_color(status)}{label:<18}{NC} {fields.get('summary', '')}"
        )
    rule()
    return 0


def cmd_scan(args: argparse.Namespace) -> int:
    client = get_client()
    log(f'Scanning for "{args.keyword}"...')
    needle = args.keyword.lower()
    for f in client.get_fields():
        name = f.get("name") or ""
        if needle in name.lower():
            print(f"{name} -> ID: {f.get('id')} ({(f.get('schema') or {}).get('type')})")
    return 0


# --- issue changes ---


def cmd_status(args: argparse.Namespace) -> int:
    key, term = split_key_and_arg(args.arg1, args.arg2)
    if not term:
        raise JiraHelperError("Target status is required.")

    try:
        ctx = move_issue(
            get_client(),
            key,
            term,
            aliases=get_aliases(),
            field_id=get_affected_field_id(),
        )
    except TransitionNotMatched as e:
        warn(str(e))
        print(dim("Available options:"))
        for name in e.options:
            print(f" - {name}")
        return 1
    return 0 if ctx.state == MoveState.SUCCESS else 1


def cmd_log(args: argparse.Namespace) -> int:
    key, time_spent = split_key_and_arg(args.arg1, args.arg2)
    if not time_spent:
        raise JiraHelperError('Time spent is required (e.g. "30m", "1h")')

    client = get_client()
    log(f"Logging {time_spent} to {key}...")
    client.add_worklog(key, time_spent, comment=args.comment)
    success("Success! Time logged.")
    return 0


def cmd_update(args: argparse.Namespace) -> int:
    key = resolve_key(args.issue_key)
    if not args.component:
        warn('Please specify a component with --component "Name"')
        return 1

    get_client().edit_fields(key, {"components": [{"name": args.component}]})
    success(f"Updated {key} successfully.")
    return 0


def cmd_comment(args: argparse.Namespace) -> int:
    key, text = split_key_and_arg(args.arg1, args.arg2)
    if not text:
        text = prompt_text("Enter your comment:")
    if not text:
        return 0

    client = get_client()
    log(f"Adding comment to {key}...")
    client.add_comment(key, text)
    success("Comment added successfully!")
    return 0


# --- time reporting ---


def cmd_report(args: argparse.Namespace) -> int:
    report_cfg = get_config().get("report") or {}
    client = get_client()
    account_id = client.get_myself().get("accountId")
    if not account_id:
        raise JiraHelperError("Could not retrieve your Jira Account ID.")

    mode = "Month" if args.month else "Today"
    start = report_start(datetime.now(), month=args.month)
    log(f"Fetching worklogs for [{mode}]...")

    issues = client.search_issues(
        f'worklogAuthor = currentUser() AND worklogDate >= "{start:%Y-%m-%d}"',
        fields=["worklog"],
        limit=report_cfg.get("max_results", 100),
    )
    if not issues:
        warn(f"No worklogs found for {mode}.")
        return 0

    total = collect_report_seconds(
        client, issues, account_id, start, max_workers=report_cfg.get("max_workers")
    )
    print(
        f"\n{BOLD}Total [{mode}]: {GREEN}{fmt_clock(total)}{NC}"
        f"  {dim(f'({fmt_work_time(total)})')}"
    )
    return 0


def cmd_worklogs(args: argparse.Namespace) -> int:
    key = resolve_key(args.issue_key)
    client = get_client()
    log(f"Fetching history for {key}...")

    entries = client.get_worklogs(key)
    if not entries:
        warn(f"No worklogs found for {key}.")
        return 0

    print(f"\n{BOLD}Time History for {key}{NC}")
    rule()
    print(dim("Date       | Time    | Author          | Description"))
    rule()
    for date, spent, author, desc in worklog_rows(entries):
        print(
            f"{GRAY}{date}{NC} | {CYAN}{spent:<7}{NC} | {MAGENTA}{author:<15}{NC} | {desc}"
        )
    rule()
    total = sum(e.seconds or 0 for e in entries)
    print(f"Total: {GREEN}{BOLD}{fmt_clock(total)}{NC}")
    return 0


# --- local settings ---


def cmd_alias_add(args: argparse.Namespace) -> int:
    save_alias(args.short, args.long)
    success("Alias saved.")
    return 0


def cmd_alias_ls(args: argparse.Namespace) -> int:
    aliases = get_user_aliases()
    print(f"{BLUE}Shortcuts:{NC}")
    if not aliases:
        print(dim("  (none - built-ins: todo, progress, review, cr, done)"))
    for short, long in aliases.items():
        print(f"  {BOLD}{short}{NC} -> {long}")
    return 0


def cmd_alias_rm(args: argparse.Namespace) -> int:
    if not remove_alias(args.short):
        warn(f"No alias named {args.short}.")
        return 1
    success("Removed.")
    return 0


def cmd_config_field(args: argparse.Namespace) -> int:
    set_affected_field_id(args.field_id)
    success("Field ID saved.")
    return 0


def cmd_upgrade(args: argparse.Namespace) -> int:
    run_upgrade()
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="jira",
        description="Jira CLI Helper - manage tickets without leaving the terminal.",
        epilog="""
Issue keys:
  Commands taking [KEY] fall back to the key in the current git branch
  (e.g. feature/AD-62-daily-sync -> AD-62).

Examples:
  %(prog)s s review                 Move the branch ticket to Code Review
  %(prog)s s PROJ-123 done          Move PROJ-123 to Done
  %(prog)s l 30m -c "pairing"       Log 30m on the branch ticket
  %(prog)s r -m                     Hours logged this month

Rescue Mode:
  When Jira rejects a transition (usually a mandatory field is empty), you
  pick a value for the field set with `config-field` (default: components),
  it is written, and the transition is retried once.
        """,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("-v", "--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--debug",
        action="store_true",
        help=f"Log raw API requests and responses to {DEBUG_LOG}",
    )
    sub = parser.add_subparsers(dest="command", metavar="COMMAND")

    p = sub.add_parser("setup", help="Configure your Jira credentials")
    p.set_defaults(func=cmd_setup)

    p = sub.add_parser("logout", help="Clear stored credentials")
    p.set_defaults(func=cmd_logout)

    p = sub.add_parser("info", aliases=["i"], help="Get info about a ticket")
    p.add_argument("issue_key", nargs="?", metavar="KEY")
    p.set_defaults(func=cmd_info)

    p = sub.add_parser("options", aliases=["opt"], help="List all available transitions")
    p.add_argument("issue_key", nargs="?", metavar="KEY")
    p.set_defaults(func=cmd_options)

    p = sub.add_parser("log", aliases=["l"], help="Log work (jira l 30m OR jira l PROJ-123 30m)")
    p.add_argument("arg1", nargs="?")
    p.add_argument("arg2", nargs="?")
    p.add_argument("-c", "--comment", help="Worklog comment")
    p.set_defaults(func=cmd_log)

    p = sub.add_parser("update", aliases=["u"], help="Update issue component")
    p.add_argument("issue_key", nargs="?", metavar="KEY")
    p.add_argument("--component", help="Name of the component")
    p.set_defaults(func=cmd_update)

    p = sub.add_parser(
        "status", aliases=["s"], help="Move ticket (jira s review OR jira s PROJ-123 review)"
    )
    p.add_argument("arg1", nargs="?")
    p.add_argument("arg2", nargs="?")
    p.set_defaults(func=cmd_status)

    p = sub.add_parser("alias", help="Manage transition shortcuts")
    alias_sub = p.add_subparsers(dest="alias_command", metavar="ACTION", required=True)
    a = alias_sub.add_parser("add", help="Add or replace a shortcut")
    a.add_argument("short")
    a.add_argument("long")
    a.set_defaults(func=cmd_alias_add)
    a = alias_sub.add_parser("ls", help="List your shortcuts")
    a.set_defaults(func=cmd_alias_ls)
    a = alias_sub.add_parser("rm", help="Remove a shortcut")
    a.add_argument("short")
    a.set_defaults(func=cmd_alias_rm)

    p = sub.add_parser("config-field", help="Set the field Rescue Mode fills in")
    p.add_argument("field_id", metavar="ID")
    p.set_defaults(func=cmd_config_field)

    p = sub.add_parser("scan", help="Find field IDs")
    p.add_argument("keyword")
    p.set_defaults(func=cmd_scan)

    p = sub.add_parser(
        "report", aliases=["r"], help="Show hours logged (default: today, -m for month)"
    )
    p.add_argument("-m", "--month", action="store_true", help="Show stats for the current month")
    p.set_defaults(func=cmd_report)

    p = sub.add_parser("worklogs", aliases=["wl"], help="List all worklogs for a ticket")
    p.add_argument("issue_key", nargs="?", metavar="KEY")
    p.set_defaults(func=cmd_worklogs)

    p = sub.add_parser("comment", aliases=["c"], help="Add a comment to a ticket")
    p.add_argument("arg1", nargs="?")
    p.add_argument("arg2", nargs="?")
    p.set_defaults(func=cmd_comment)

    p = sub.add_parser("open", aliases=["o"], help="Open ticket in browser")
    p.add_argument("issue_key", nargs="?", metavar="KEY")
    p.set_defaults(func=cmd_open)

    p = sub.add_parser("mine", aliases=["m"], help="List open tasks assigned to me")
    p.set_defaults(func=cmd_mine)

    p = sub.add_parser("upgrade", help="Pull latest main and reinstall")
    p.set_defaults(func=cmd_upgrade)

    return parser


def run(argv: Optional[list[str]] = None) -> int:
    """Parse args and dispatch. Returns the exit status."""
    parser = build_parser()
    args = parser.parse_args(argv)
    set_debug(args.debug)

    if not getattr(args, "func", None):
        parser.print_help()
        return 1

    try:
        if is_debug():
            get_config()
            debug_log("config sources", get_config_loaded_sources())
        return int(args.func(args))
    except JiraHelperError as e:
        error(str(e))
        return 1
    except (KeyboardInterrupt, EOFError):
        print()
        return 130


def main() -> None:
    sys.exit(run())


if __name__ == "__main__":
    main()
