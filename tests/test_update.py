"""Tests for jira_helper.update."""

import subprocess
import sys

import pytest

from jira_helper.errors import JiraHelperError
from jira_helper.update import run_upgrade


class TestRunUpgrade:
    def test_not_a_checkout(self, tmp_path, mock_subprocess):
        with pytest.raises(JiraHelperError, match="not a git checkout"):
            run_upgrade(tmp_path)
        mock_subprocess.assert_not_called()

    def test_pull_then_install(self, tmp_path, mock_subprocess, capsys):
        (tmp_path / ".git").mkdir()
        run_upgrade(tmp_path)
        calls = [c[0][0] for c in mock_subprocess.call_args_list]
        assert calls[0] == ["git", "pull", "origin", "main"]
        assert calls[1] == [sys.executable, "-m", "pip", "install", "-e", str(tmp_path)]
        assert "Update complete" in capsys.readouterr().out

    def test_pull_failure(self, tmp_path, mock_subprocess):
        (tmp_path / ".git").mkdir()
        mock_subprocess.side_effect = subprocess.CalledProcessError(1, ["git"])
        with pytest.raises(JiraHelperError, match="Update failed"):
            run_upgrade(tmp_path)
        assert mock_subprocess.call_count == 1
