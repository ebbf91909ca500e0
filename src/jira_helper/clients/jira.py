"""Jira Cloud REST v3 client."""

import base64
import http.client
import json
import urllib.error
import urllib.parse
import urllib.request
from typing import Any, Optional

from jira_helper.auth import get_creds
from jira_helper.config.settings import get_config
from jira_helper.errors import JiraApiError, MissingCredentials
from jira_helper.models.core import Transition, WorklogEntry
from jira_helper.utils.adf import build_doc
from jira_helper.utils.debug import debug_log

API_PREFIX = "/rest/api/3"
DEFAULT_TIMEOUT = 30
WORKLOG_PAGE_SIZE = 1000


def _error_message(body: bytes, fallback: str) -> str:
    """Pull errorMessages/errors out of a Jira error body."""
    try:
        data = json.loads(body)
    except (json.JSONDecodeError, UnicodeDecodeError):
        return fallback
    if not isinstance(data, dict):
        return fallback
    messages = list(data.get("errorMessages") or [])
    for field_id, msg in (data.get("errors") or {}).items():
        messages.append(f"{field_id}: {msg}")
    return "; ".join(messages) or fallback


class JiraClient:
    """Thin wrapper over the endpoints this CLI uses. Errors raise JiraApiError."""

    def __init__(self, base_url: str, email: str, api_token: str, timeout: int = DEFAULT_TIMEOUT):
        self.base_url = base_url.rstrip("/")
        token = base64.b64encode(f"{email}:{api_token}".encode()).decode()
        self._auth = f"Basic {token}"
        self.timeout = timeout

    def request(
        self,
        method: str,
        path: str,
        params: Optional[dict] = None,
        body: Optional[Any] = None,
    ) -> Any:
        """Call the API. Returns parsed JSON, or None for empty responses."""
        url = f"{self.base_url}{API_PREFIX}{path}"
        if params:
            url = f"{url}?{urllib.parse.urlencode(params)}"
        data = json.dumps(body).encode() if body is not None else None
        req = urllib.request.Request(
            url,
            data=data,
            method=method,
            headers={
                "Authorization": self._auth,
                "Accept": "application/json",
                "Content-Type": "application/json",
            },
        )
        debug_log(f"{method} {path}", body if body is not None else (params or {}))
        try:
            with urllib.request.urlopen(
                req, timeout=self.timeout
            ) as resp:  # nosemgrep: dynamic-urllib-use-detected
                raw = resp.read()
        except urllib.error.HTTPError as e:
            err_body = e.read() if e.fp else b""
            debug_log(f"{method} {path} -> HTTP {e.code}", err_body or str(e.reason))
            raise JiraApiError(
                _error_message(err_body, f"Jira API HTTP {e.code}: {e.reason}"), status=e.code
            ) from e
        except urllib.error.URLError as e:
            raise JiraApiError(f"Jira API connection error: {e.reason}") from e
        except (OSError, http.client.HTTPException) as e:
            # Read timeouts and dropped connections are not wrapped in URLError
            raise JiraApiError(f"Jira API connection error: {e}") from e

        if not raw:
            return None
        try:
            result = json.loads(raw)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            debug_log(f"{method} {path} -> unreadable response", raw)
            raise JiraApiError(f"Jira API returned a non-JSON response for {path}") from e
        debug_log(f"{method} {path} -> response", result)
        return result

    # --- issues ---

    def get_issue(self, key: str, fields: Optional[list[str]] = None) -> dict:
        params = {"fields": ",".join(fields)} if fields else None
        return self.request("GET", f"/issue/{key}", params=params)  # type: ignore[no-any-return]

    def get_status_name(self, key: str) -> str:
        issue = self.get_issue(key, fields=["status"])
        return ((issue.get("fields") or {}).get("status") or {}).get("name", "")

    def edit_fields(self, key: str, fields: dict) -> None:
        self.request("PUT", f"/issue/{key}", body={"fields": fields})

    def add_comment(self, key: str, text: str) -> None:
        body = {"update": {"comment": [{"add": {"body": build_doc(text)}}]}}
        self.request("PUT", f"/issue/{key}", body=body)

    def browse_url(self, key: str) -> str:
        return f"{self.base_url}/browse/{key}"

    # --- transitions ---

    def get_transitions(self, key: str) -> list[Transition]:
        data = self.request("GET", f"/issue/{key}/transitions") or {}
        return [Transition.from_api(t) for t in data.get("transitions") or []]

    def execute_transition(self, key: str, transition_id: str) -> None:
        self.request("POST", f"/issue/{key}/transitions", body={"transition": {"id": transition_id}})

    # --- projects and fields ---

    def get_project_components(self, project_key: str) -> list[dict]:
        return self.request("GET", f"/project/{project_key}/components") or []

    def get_fields(self) -> list[dict]:
        return self.request("GET", "/field") or []

    def get_myself(self) -> dict:
        return self.request("GET", "/myself") or {}

    # --- worklogs ---

    def get_worklogs(self, key: str) -> list[WorklogEntry]:
        """All worklogs on an issue, following pagination."""
        entries: list[WorklogEntry] = []
        start_at = 0
        while True:
            page = self.request(
                "GET",
                f"/issue/{key}/worklog",
                params={"startAt": start_at, "maxResults": WORKLOG_PAGE_SIZE},
            ) or {}
            logs = page.get("worklogs") or []
            entries.extend(WorklogEntry.from_api(w) for w in logs)
            start_at += len(logs)
            if not logs or start_at >= page.get("total", 0):
                return entries

    def add_worklog(self, key: str, time_spent: str, comment: Optional[str] = None) -> None:
        body: dict[str, Any] = {"timeSpent": time_spent}
        if comment:
            body["comment"] = build_doc(comment)
        self.request("POST", f"/issue/{key}/worklog", body=body)

    # --- search ---

    def search_issues(self, jql: str, fields: list[str], limit: int = 50) -> list[dict]:
        data = self.request(
            "POST", "/search/jql", body={"jql": jql, "fields": fields, "maxResults": limit}
        ) or {}
        return data.get("issues") or []  # type: ignore[no-any-return]


def get_client() -> JiraClient:
    """Client from stored credentials. Raises MissingCredentials when not set up."""
    creds = get_creds()
    if not creds:
        raise MissingCredentials()
    timeout = (get_config().get("api") or {}).get("timeout", DEFAULT_TIMEOUT)
    return JiraClient(creds["jira_url"], creds["email"], creds["api_token"], timeout=timeout)
