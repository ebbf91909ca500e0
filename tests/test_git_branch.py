"""Tests for jira_helper.git.branch."""

import subprocess

import pytest

from jira_helper.errors import KeyNotFound
from jira_helper.git.branch import (
    find_key_in_branch,
    get_current_branch,
    is_issue_key,
    project_key,
    resolve_key,
    split_key_and_arg,
)


def _branch(mocker, name):
    return mocker.patch(
        "jira_helper.git.branch.subprocess.run",
        return_value=subprocess.CompletedProcess([], 0, stdout=f"{name}\n", stderr=""),
    )


def _not_a_repo(mocker):
    return mocker.patch(
        "jira_helper.git.branch.subprocess.run",
        side_effect=subprocess.CalledProcessError(128, ["git"], stderr="not a git repository"),
    )


class TestGetCurrentBranch:
    def test_returns_branch(self, mocker):
        run = _branch(mocker, "feature/AD-62-daily-sync")
        assert get_current_branch() == "feature/AD-62-daily-sync"
        assert run.call_args[0][0] == ["git", "rev-parse", "--abbrev-ref", "HEAD"]

    def test_outside_repo_raises(self, mocker):
        _not_a_repo(mocker)
        with pytest.raises(subprocess.CalledProcessError):
            get_current_branch()


class TestIsIssueKey:
    @pytest.mark.parametrize("text", ["PROJ-123", "proj-1", "Ad-62", " AD-62 "])
    def test_valid(self, text):
        assert is_issue_key(text)

    @pytest.mark.parametrize("text", [None, "", "30m", "review", "PROJ", "123", "PROJ-"])
    def test_invalid(self, text):
        assert not is_issue_key(text)


class TestFindKeyInBranch:
    def test_key_in_feature_branch(self, mocker):
        _branch(mocker, "feature/AD-62-daily-sync")
        assert find_key_in_branch() == "AD-62"

    def test_first_key_wins(self, mocker):
        _branch(mocker, "AB-1-and-CD-2")
        assert find_key_in_branch() == "AB-1"

    def test_no_key(self, mocker):
        _branch(mocker, "main")
        assert find_key_in_branch() is None

    def test_lowercase_branch_key_ignored(self, mocker):
        _branch(mocker, "ad-62-daily-sync")
        assert find_key_in_branch() is None

    def test_not_a_repo(self, mocker):
        _not_a_repo(mocker)
        assert find_key_in_branch() is None

    def test_git_missing(self, mocker):
        mocker.patch("jira_helper.git.branch.subprocess.run", side_effect=FileNotFoundError("git"))
        assert find_key_in_branch() is None


class TestResolveKey:
    @pytest.mark.parametrize("text", ["PROJ-123", "proj-123", "Proj-123"])
    def test_explicit_wins_and_uppercases(self, mocker, text):
        run = _branch(mocker, "feature/AD-62-daily-sync")
        assert resolve_key(text) == "PROJ-123"
        run.assert_not_called()

    def test_falls_back_to_branch(self, mocker, capsys):
        _branch(mocker, "feature/AD-62-daily-sync")
        assert resolve_key() == "AD-62"
        assert "Detected ticket from branch" in capsys.readouterr().out

    def test_non_key_input_uses_branch(self, mocker):
        _branch(mocker, "feature/AD-62-daily-sync")
        assert resolve_key("30m") == "AD-62"

    def test_no_key_on_main(self, mocker):
        _branch(mocker, "main")
        with pytest.raises(KeyNotFound, match="Could not detect Issue Key"):
            resolve_key()

    def test_git_failure(self, mocker):
        _not_a_repo(mocker)
        with pytest.raises(KeyNotFound):
            resolve_key()


class TestSplitKeyAndArg:
    def test_key_then_value(self, mocker):
        _branch(mocker, "main")
        assert split_key_and_arg("proj-9", "30m") == ("PROJ-9", "30m")

    def test_value_only_uses_branch(self, mocker):
        _branch(mocker, "feature/AD-62-daily-sync")
        assert split_key_and_arg("review", None) == ("AD-62", "review")

    def test_nothing_given(self, mocker):
        _branch(mocker, "feature/AD-62-daily-sync")
        assert split_key_and_arg(None, None) == ("AD-62", None)


class TestProjectKey:
    def test_prefix(self):
        assert project_key("AD-62") == "AD"
