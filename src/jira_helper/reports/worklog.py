"""Worklog totals and history rows."""

from concurrent.futures import ThreadPoolExecutor, as_completed
from datetime import datetime
from typing import Any, Iterable, Optional

from jira_helper.models.core import WorklogEntry
from jira_helper.utils.adf import extract_text
from jira_helper.utils.formatting import truncate

DEFAULT_MAX_WORKERS = 8


def _aware(dt: datetime) -> datetime:
    """Naive datetimes are taken as local time."""
    return dt if dt.tzinfo is not None else dt.astimezone()


def sum_worklog_seconds(entries: Iterable[WorklogEntry], user_id: str, start: datetime) -> int:
    """Seconds logged by user_id on or after start. Malformed entries are skipped."""
    start = _aware(start)
    total = 0
    for entry in entries:
        if entry.author_id is None or entry.author_id != user_id:
            continue
        if entry.started is None:
            continue
        if _aware(entry.started) < start:
            continue
        total += entry.seconds or 0
    return total


def report_start(now: datetime, month: bool = False) -> datetime:
    """Local midnight today, or on the 1st of the month."""
    local = now.astimezone()
    # Naive midnight first so the offset is the one in force on that day
    return datetime(local.year, local.month, 1 if month else local.day).astimezone()


def _issue_worklogs(gateway: Any, issue: dict) -> list[WorklogEntry]:
    """Worklogs embedded in a search hit; the full list only when the page is truncated."""
    worklog = (issue.get("fields") or {}).get("worklog") or {}
    embedded = worklog.get("worklogs") or []
    if worklog.get("total", 0) > len(embedded) and issue.get("id"):
        return gateway.get_worklogs(issue["id"])  # type: ignore[no-any-return]
    return [WorklogEntry.from_api(w) for w in embedded]


def collect_report_seconds(
    gateway: Any,
    issues: list[dict],
    user_id: str,
    start: datetime,
    max_workers: Optional[int] = None,
) -> int:
    """Sum the user's time across issues, fetching worklog pages in parallel."""
    if not issues:
        return 0

    def _issue_total(issue: dict) -> int:
        return sum_worklog_seconds(_issue_worklogs(gateway, issue), user_id, start)

    workers = min(max_workers or DEFAULT_MAX_WORKERS, len(issues))
    total = 0
    with ThreadPoolExecutor(max_workers=workers) as executor:
        futures = [executor.submit(_issue_total, issue) for issue in issues]
        for future in as_completed(futures):
            total += future.result()
    return total


def worklog_rows(entries: list[WorklogEntry]) -> list[tuple[str, str, str, str]]:
    """(date, time spent, author, description) for the history table."""
    rows = []
    for entry in entries:
        date = entry.started.strftime("%Y-%m-%d") if entry.started else "Unknown   "
        author = (entry.author_name or "Unknown")[:15]
        desc = extract_text(entry.comment).strip().replace("\n", " ")
        rows.append((date, entry.time_spent or "0m", author, truncate(desc, 40)))
    return rows
