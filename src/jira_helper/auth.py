"""Jira Cloud credentials: email + API token, stored locally or read from env."""

import json
import os
import webbrowser
from pathlib import Path
from typing import Optional

from jira_helper.ui.output import BLUE, NC, success
from jira_helper.ui.prompt import confirm, prompt_secret, prompt_text

CREDS_DIR = Path.home() / ".config" / "jira-helper"
CREDS_FILE = CREDS_DIR / "auth.json"

TOKEN_PAGE_URL = "https://id.atlassian.com/manage-profile/security/api-tokens"

ENV_URL = "JIRA_URL"
ENV_EMAIL = "JIRA_EMAIL"
ENV_TOKEN = "JIRA_API_TOKEN"


def _save_creds_file(data: dict) -> None:
    """Save credentials to disk with restricted permissions."""
    CREDS_DIR.mkdir(parents=True, exist_ok=True)
    fd = os.open(CREDS_FILE, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o600)
    try:
        os.write(fd, json.dumps(data).encode())
    finally:
        os.close(fd)


def _load_creds_file() -> Optional[dict]:
    """Load credentials from disk."""
    if not CREDS_FILE.exists():
        return None
    try:
        return json.loads(CREDS_FILE.read_text())  # type: ignore[no-any-return]
    except (json.JSONDecodeError, OSError):
        return None


def _creds_from_env() -> Optional[dict]:
    creds = {
        "jira_url": os.environ.get(ENV_URL, ""),
        "email": os.environ.get(ENV_EMAIL, ""),
        "api_token": os.environ.get(ENV_TOKEN, ""),
    }
    return creds if all(creds.values()) else None


def normalize_url(url: str) -> str:
    return url.strip().rstrip("/")


def get_creds() -> Optional[dict]:
    """Return {jira_url, email, api_token} or None if incomplete. Env vars win over the file."""
    creds = _creds_from_env() or _load_creds_file()
    if not creds:
        return None
    if not creds.get("jira_url") or not creds.get("email") or not creds.get("api_token"):
        return None
    return {
        "jira_url": normalize_url(creds["jira_url"]),
        "email": creds["email"],
        "api_token": creds["api_token"],
    }


def save_creds(jira_url: str, email: str, api_token: str) -> None:
    _save_creds_file(
        {"jira_url": normalize_url(jira_url), "email": email.strip(), "api_token": api_token}
    )


def clear_creds() -> None:
    """Delete stored credentials."""
    if CREDS_FILE.exists():
        CREDS_FILE.unlink()


def run_setup() -> None:
    """Interactive credential setup."""
    print(f"{BLUE}Welcome to Jira CLI Setup!{NC}")

    while True:
        jira_url = prompt_text("Jira Base URL (e.g. https://company.atlassian.net):")
        if "http" in jira_url:
            break
        print("Valid URL required")

    email = prompt_text("Your Jira Email Address:")

    if confirm("Generate API Token?", default=False):
        webbrowser.open(TOKEN_PAGE_URL)

    api_token = prompt_secret("Paste API Token:")

    save_creds(jira_url, email, api_token)
    success(f"Credentials saved to {CREDS_FILE}")
