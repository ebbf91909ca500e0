"""Tests for jira_helper.config.store."""

from jira_helper.config.store import (
    delete_setting,
    get_affected_field_id,
    get_aliases,
    get_setting,
    get_user_aliases,
    remove_alias,
    save_alias,
    set_affected_field_id,
    set_setting,
)
from jira_helper.config.utils import load_yaml


class TestSettings:
    def test_set_then_get(self, user_config):
        set_setting("affected_field_id", "customfield_10050")
        assert get_setting("affected_field_id") == "customfield_10050"
        assert load_yaml(user_config) == {"affected_field_id": "customfield_10050"}

    def test_unknown_key(self, user_config):
        assert get_setting("nope") is None

    def test_delete(self, user_config):
        set_setting("x", 1)
        delete_setting("x")
        assert get_setting("x") is None

    def test_delete_missing_is_noop(self, user_config):
        delete_setting("x")
        assert not user_config.exists()

    def test_project_file_wins(self, user_config, tmp_path):
        set_setting("affected_field_id", "customfield_1")
        project = tmp_path / "project" / "config.yaml"
        project.parent.mkdir()
        project.write_text("affected_field_id: customfield_2\n")
        set_setting("other", True)  # drops cache
        assert get_setting("affected_field_id") == "customfield_2"


class TestAliases:
    def test_builtins_present(self, user_config):
        aliases = get_aliases()
        assert aliases["cr"] == "Code Review"
        assert aliases["progress"] == "In Progress"

    def test_user_alias_added(self, user_config):
        save_alias("qa", "Testing")
        assert get_aliases()["qa"] == "Testing"
        assert get_user_aliases() == {"qa": "Testing"}

    def test_user_alias_overrides_builtin(self, user_config):
        save_alias("cr", "Peer Review")
        assert get_aliases()["cr"] == "Peer Review"

    def test_remove_alias(self, user_config):
        save_alias("qa", "Testing")
        assert remove_alias("qa") is True
        assert "qa" not in get_aliases()

    def test_remove_missing_alias(self, user_config):
        assert remove_alias("qa") is False

    def test_builtin_not_removable(self, user_config):
        assert remove_alias("cr") is False
        assert get_aliases()["cr"] == "Code Review"

    def test_other_settings_preserved(self, user_config):
        set_affected_field_id("customfield_10050")
        save_alias("qa", "Testing")
        assert get_affected_field_id() == "customfield_10050"


class TestAffectedField:
    def test_defaults_to_components(self, user_config):
        assert get_affected_field_id() == "components"

    def test_configured(self, user_config):
        set_affected_field_id("customfield_10050")
        assert get_affected_field_id() == "customfield_10050"
