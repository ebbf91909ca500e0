"""Core data models built from Jira REST responses."""

import re
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Optional

_COMPACT_OFFSET = re.compile(r"([+-]\d{2})(\d{2})$")


def parse_timestamp(value: Optional[str]) -> Optional[datetime]:
    """Parse Jira timestamps ('2026-01-15T10:00:00.000+0000'). Returns None if unparseable."""
    if not value:
        return None
    text = value.strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    text = _COMPACT_OFFSET.sub(r"\1:\2", text)
    try:
        return datetime.fromisoformat(text)
    except ValueError:
        return None


@dataclass
class Transition:
    """One workflow edge available from the issue's current status."""

    id: str
    name: str
    to_name: str = ""

    @classmethod
    def from_api(cls, data: dict) -> "Transition":
        to = data.get("to") or {}
        # Server/DC may send the target status as a bare string
        to_name = to.get("name", "") if isinstance(to, dict) else str(to)
        return cls(id=str(data.get("id", "")), name=data.get("name") or "", to_name=to_name or "")


@dataclass
class WorklogEntry:
    """Time logged by one user on an issue."""

    author_id: Optional[str]
    started: Optional[datetime]
    seconds: int = 0
    comment: Any = None
    author_name: str = ""
    time_spent: str = ""

    @classmethod
    def from_api(cls, data: dict) -> "WorklogEntry":
        author = data.get("author") or {}
        return cls(
            author_id=author.get("accountId"),
            started=parse_timestamp(data.get("started")),
            seconds=data.get("timeSpentSeconds") or 0,
            comment=data.get("comment"),
            author_name=author.get("displayName") or "",
            time_spent=data.get("timeSpent") or "",
        )
