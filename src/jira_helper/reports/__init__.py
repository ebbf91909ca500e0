"""Time reporting over worklogs."""

from jira_helper.reports.worklog import (
    collect_report_seconds,
    report_start,
    sum_worklog_seconds,
    worklog_rows,
)

__all__ = [
    "sum_worklog_seconds",
    "report_start",
    "collect_report_seconds",
    "worklog_rows",
]
