"""Tests for the nested token replacement command."""

import io
import pytest
from unittest.mock import patch
from click.testing import CliRunner
from rich.console import Console
from mailscan.mailscan import cli


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def captured_output() -> io.StringIO:
    """Capture console output."""
    output = io.StringIO()
    console = Console(file=output)
    with patch("mailscan.commands.nested.console", console):
        yield output


def test_replace_with_defaults(runner, captured_output):
    result = runner.invoke(
        cli, ["replace", "{a} b {c {d}}", "--depth", "1", "--format", "<{}>"]
    )
    assert result.exit_code == 0
    assert captured_output.getvalue().strip() == "{<a>} b {<c> {d}}"


def test_replace_with_custom_markers(runner, captured_output):
    result = runner.invoke(
        cli,
        [
            "replace",
            "[#a# [#b#]]",
            "--depth",
            "2",
            "--open",
            "[",
            "--close",
            "]",
            "--pattern",
            r"#\w#",
            "--format",
            "*{}*",
        ],
    )
    assert result.exit_code == 0
    assert captured_output.getvalue().strip() == "[#a# [*#b#*]]"


def test_replace_unbalanced(runner, captured_output):
    result = runner.invoke(cli, ["replace", "{unclosed"])
    assert result.exit_code == 1
    output = captured_output.getvalue()
    assert "open token without closed token" in output
    assert "{unclosed" in output


def test_replace_negative_depth(runner, captured_output):
    result = runner.invoke(cli, ["replace", "{a}", "--depth=-1"])
    assert result.exit_code == 1
    assert "target_depth" in captured_output.getvalue()


@pytest.mark.parametrize(
    "option, argument",
    [("--open", "open_marker"), ("--close", "close_marker"), ("--pattern", "target_pattern")],
)
def test_replace_explicit_empty_option_is_reported(
    runner, captured_output, option, argument
):
    result = runner.invoke(cli, ["replace", "{a}", option, ""])
    assert result.exit_code == 1
    assert f"{argument} cannot be empty" in captured_output.getvalue()
