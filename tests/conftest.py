"""Shared test fixtures."""

import subprocess
from datetime import datetime, timezone

import pytest

from jira_helper.errors import JiraApiError
from jira_helper.models.core import Transition, WorklogEntry
from jira_helper.ui.prompt import Chooser


class FakeGateway:
    """In-memory stand-in for JiraClient covering what the status flow calls."""

    def __init__(
        self,
        transitions=None,
        components=None,
        status="Code Review",
        transition_errors=None,
        accept_payload=None,
        component_error=None,
    ):
        self.transitions = transitions if transitions is not None else []
        self.components = components if components is not None else []
        self.status = status
        # One entry consumed per execute_transition call; None means accepted
        self.transition_errors = list(transition_errors or [])
        self.accept_payload = accept_payload or (lambda fields: True)
        self.component_error = component_error
        self.executed: list[tuple[str, str]] = []
        self.edits: list[dict] = []
        self.component_projects: list[str] = []

    def get_transitions(self, key):
        return list(self.transitions)

    def execute_transition(self, key, transition_id):
        self.executed.append((key, transition_id))
        if self.transition_errors:
            err = self.transition_errors.pop(0)
            if err is not None:
                raise err

    def edit_fields(self, key, fields):
        self.edits.append(fields)
        if not self.accept_payload(fields):
            raise JiraApiError("Field value has the wrong shape", status=400)

    def get_project_components(self, project_key):
        self.component_projects.append(project_key)
        if self.component_error:
            raise self.component_error
        return self.components

    def get_status_name(self, key):
        return self.status


@pytest.fixture
def make_gateway():
    return FakeGateway


@pytest.fixture
def make_chooser():
    """Chooser answering with fixed values; records the prompts shown."""

    def _make(choice="", text=""):
        seen: dict = {"choose": [], "text": []}

        def _choose(prompt, options):
            seen["choose"].append((prompt, list(options)))
            return choice

        def _text(prompt):
            seen["text"].append(prompt)
            return text

        chooser = Chooser(choose=_choose, prompt_text=_text)
        chooser.seen = seen  # type: ignore[attr-defined]
        return chooser

    return _make


@pytest.fixture
def review_transitions():
    return [
        Transition(id="11", name="Back to Todo", to_name="To Do"),
        Transition(id="21", name="Start Review", to_name="Code Review"),
        Transition(id="31", name="Finish", to_name="Done"),
    ]


@pytest.fixture
def sample_worklogs():
    day = datetime(2026, 1, 15, tzinfo=timezone.utc)
    return [
        WorklogEntry(author_id="user-123", started=day.replace(hour=10), seconds=3600),
        WorklogEntry(author_id="other-user", started=day.replace(hour=11), seconds=1800),
        WorklogEntry(author_id="user-123", started=day.replace(day=14, hour=10), seconds=7200),
    ]


@pytest.fixture
def reset_config_cache():
    import jira_helper.config.settings as settings

    settings._config = None
    settings._loaded_sources = []
    yield
    settings._config = None
    settings._loaded_sources = []


@pytest.fixture
def user_config(tmp_path, monkeypatch, reset_config_cache):
    """Point the user and project config files at tmp_path. Returns the user file path."""
    import jira_helper.config.settings as settings

    path = tmp_path / "config.yaml"
    monkeypatch.setattr(settings, "GLOBAL_CONFIG", path)
    monkeypatch.setattr(settings, "PROJECT_CONFIG", tmp_path / "project" / "config.yaml")
    return path


@pytest.fixture
def creds_file(tmp_path, monkeypatch):
    import jira_helper.auth as auth_mod

    monkeypatch.setattr(auth_mod, "CREDS_DIR", tmp_path)
    monkeypatch.setattr(auth_mod, "CREDS_FILE", tmp_path / "auth.json")
    for var in ("JIRA_URL", "JIRA_EMAIL", "JIRA_API_TOKEN"):
        monkeypatch.delenv(var, raising=False)
    return tmp_path / "auth.json"


@pytest.fixture
def mock_subprocess(mocker):
    """Mock subprocess.run returning success by default."""
    mock = mocker.patch("subprocess.run")
    mock.return_value = subprocess.CompletedProcess([], 0, stdout="", stderr="")
    return mock


@pytest.fixture(autouse=True)
def debug_off():
    from jira_helper.utils.debug import set_debug

    set_debug(False)
    yield
    set_debug(False)
