"""Tests for jira_helper.ui.output."""

from jira_helper.ui.output import GRAY, NC, dim, error, hyperlink, log, rule, success, warn


class TestHyperlink:
    def test_format(self):
        result = hyperlink("https://acme.atlassian.net/browse/AD-1", "AD-1")
        assert result == "\033]8;;https://acme.atlassian.net/browse/AD-1\007AD-1\033]8;;\007"


class TestLogFunctions:
    def test_prefix(self, capsys):
        log("hello")
        assert "[jira]" in capsys.readouterr().out

    def test_success(self, capsys):
        success("done")
        assert "done" in capsys.readouterr().out

    def test_warn(self, capsys):
        warn("careful")
        assert "careful" in capsys.readouterr().out

    def test_error(self, capsys):
        error("broke")
        assert "broke" in capsys.readouterr().out


class TestDecorations:
    def test_dim(self):
        assert dim("x") == f"{GRAY}x{NC}"

    def test_rule_width(self, capsys):
        rule(10)
        assert "-" * 10 in capsys.readouterr().out
