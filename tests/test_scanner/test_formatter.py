"""Tests for substitution callbacks."""

from mailscan.lib.scanner.formatter import StringFormatter, Substitution


def test_formatter_for_pattern():
    formatter = StringFormatter.formatterForPattern("'{}'")
    assert formatter.apply("name") == "'name'"
    assert formatter("name") == "'name'"


def test_formatter_with_plain_pattern():
    assert StringFormatter.formatterForPattern("{}")("x") == "x"


def test_callables_satisfy_substitution_protocol():
    assert isinstance(StringFormatter("{}"), Substitution)
    assert isinstance(str.upper, Substitution)
