"""Debug logging of raw API traffic."""

import json
import time
from pathlib import Path

from jira_helper.ui.output import GRAY, MAGENTA, NC

DEBUG_LOG = Path.home() / ".config" / "jira-helper" / "debug.log"

_enabled = False


def set_debug(enabled: bool) -> None:
    global _enabled
    _enabled = enabled


def is_debug() -> bool:
    return _enabled


def debug_log(label: str, data) -> None:
    """Append debug info to log file if debug mode enabled."""
    if not _enabled:
        return

    DEBUG_LOG.parent.mkdir(parents=True, exist_ok=True)
    timestamp = time.strftime("%Y-%m-%d %H:%M:%S", time.localtime())
    with open(DEBUG_LOG, "a") as f:
        f.write(f"\n{'=' * 60}\n")
        f.write(f"[{timestamp}] {label}\n")
        f.write(f"{'=' * 60}\n")
        if isinstance(data, (str, bytes)):
            try:
                parsed = json.loads(data)
                f.write(json.dumps(parsed, indent=2))
            except json.JSONDecodeError:
                f.write(data.decode(errors="replace") if isinstance(data, bytes) else data)
        else:
            f.write(json.dumps(data, indent=2, default=str))
        f.write("\n")
    print(f"\r\033[K{MAGENTA}[debug]{NC} {label}  {GRAY}-> {DEBUG_LOG}{NC}")
