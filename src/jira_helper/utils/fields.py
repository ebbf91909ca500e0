"""Render arbitrary Jira field values as one line of text."""

import json
from typing import Any

from jira_helper.ui.output import BLUE, BOLD, GRAY, NC, YELLOW

_TIME_TRACKING_KEYS = ("originalEstimate", "timeSpent", "remainingEstimate")


def _format_time_tracking(value: dict) -> str:
    parts = []
    if value.get("originalEstimate"):
        parts.append(f"{GRAY}Est:{NC} {value['originalEstimate']}")
    if value.get("timeSpent"):
        parts.append(f"{BLUE}Spent:{NC} {BOLD}{value['timeSpent']}{NC}")
    if value.get("remainingEstimate"):
        parts.append(f"{YELLOW}Rem:{NC} {value['remainingEstimate']}")
    return f"{GRAY} | {NC}".join(parts)


def format_field(value: Any) -> str:
    """Best-effort display of a field value.

    Order matters: time tracking first, then name (status, priority),
    displayName (users), key (+ summary) for linked issues, value (select
    lists), and JSON for anything else.
    """
    if value is None:
        return ""
    if isinstance(value, (str, int, float)) and not isinstance(value, bool):
        return str(value)
    if isinstance(value, list):
        return ", ".join(format_field(v) for v in value)
    if isinstance(value, dict):
        if any(k in value for k in _TIME_TRACKING_KEYS):
            return _format_time_tracking(value)
        if "name" in value:
            return str(value["name"])
        if "displayName" in value:
            return str(value["displayName"])
        if "key" in value:
            summary = (value.get("fields") or {}).get("summary")
            return f"{value['key']} - {summary}" if summary else str(value["key"])
        if "value" in value:
            return str(value["value"])
    return json.dumps(value)
