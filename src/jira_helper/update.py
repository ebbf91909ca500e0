"""Self-update for a git checkout install."""

import subprocess
import sys
from pathlib import Path

from jira_helper.errors import JiraHelperError
from jira_helper.ui.output import log, success

# src/jira_helper/update.py -> repo root
SOURCE_ROOT = Path(__file__).resolve().parent.parent.parent


def run_upgrade(root: Path = SOURCE_ROOT) -> None:
    """Pull latest main and reinstall. Raises JiraHelperError on failure."""
    if not (root / ".git").exists():
        raise JiraHelperError(f"Update failed: {root} is not a git checkout")

    try:
        log("Checking for updates...")
        subprocess.run(["git", "pull", "origin", "main"], cwd=root, check=True)

        log("Installing dependencies...")
        subprocess.run(
            [sys.executable, "-m", "pip", "install", "-e", str(root)], cwd=root, check=True
        )
    except (subprocess.CalledProcessError, OSError) as e:
        raise JiraHelperError(f"Update failed: {e}") from e

    success("Update complete!")
