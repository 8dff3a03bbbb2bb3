"""Tests for address list tokenizer functionality."""

import pytest
from mailscan.lib.exceptions import InvalidArgument
from mailscan.lib.scanner.addresses import (
    ENTRY_SENTINEL,
    AddressListTokenizer,
    addressList_split,
)


@pytest.fixture
def tokenizer() -> AddressListTokenizer:
    return AddressListTokenizer()


def test_single_address(tokenizer):
    assert tokenizer.split("a@b.com") == ["a@b.com"]


def test_single_entry_is_trimmed(tokenizer):
    assert tokenizer.split('  "Doe" <a@b.com>  ') == ['"Doe" <a@b.com>']


def test_text_without_delimiters(tokenizer):
    assert tokenizer.split("  not an address  ") == ["not an address"]


def test_comma_inside_quoted_name_is_kept(tokenizer):
    result = tokenizer.split('a@b.com, "Doe, John" <c@d.com>')
    assert result == ["a@b.com", '"Doe, John" <c@d.com>']


def test_semicolon_after_angle_bracket(tokenizer):
    result = tokenizer.split("Jane <jane@x.org>; John <john@y.org>")
    assert result == ["Jane <jane@x.org>", "John <john@y.org>"]


def test_mixed_delimiters(tokenizer):
    result = tokenizer.split("a@b.com;c@d.com , e@f.com")
    assert result == ["a@b.com", "c@d.com", "e@f.com"]


def test_trailing_delimiter_produces_no_empty_entry(tokenizer):
    assert tokenizer.split("x@y.com;") == ["x@y.com"]


def test_trailing_delimiter_with_whitespace(tokenizer):
    assert tokenizer.split("x@y.com, a@b.com ;  ") == ["x@y.com", "a@b.com"]


def test_delimiter_not_following_address_stays_in_entry(tokenizer):
    assert tokenizer.split("a@b.com,,c@d.com") == ["a@b.com", ",c@d.com"]


def test_names_with_semicolons(tokenizer):
    result = tokenizer.split("Doe; John <j@d.com>, Roe; Jane <j@r.com>")
    assert result == ["Doe; John <j@d.com>", "Roe; Jane <j@r.com>"]


def test_order_is_preserved(tokenizer):
    addresses = [f"user{i}@example.com" for i in range(5)]
    assert tokenizer.split(", ".join(addresses)) == addresses


def test_entries_reconstruct_the_list(tokenizer):
    raw = 'a@b.com, "Doe, John" <c@d.com>; e@f.com'
    entries = tokenizer.split(raw)
    assert "".join(entries) == raw.replace(", ", "", 1).replace("; ", "")


def test_sentinel_never_leaks(tokenizer):
    for entry in tokenizer.split("a@b.com, c@d.com; e@f.com;"):
        assert ENTRY_SENTINEL not in entry


@pytest.mark.parametrize("raw", ["", None])
def test_empty_input_is_rejected(tokenizer, raw):
    with pytest.raises(InvalidArgument, match="raw_list"):
        tokenizer.split(raw)


def test_invalid_argument_is_a_value_error():
    with pytest.raises(ValueError):
        addressList_split("")


def test_module_function_matches_tokenizer(tokenizer):
    raw = "Jane <jane@x.org>; John <john@y.org>"
    assert addressList_split(raw) == tokenizer.split(raw)


def test_sentinel_character_in_input_is_rejected(tokenizer):
    with pytest.raises(InvalidArgument, match="U\\+E000"):
        tokenizer.split(f"a@b.com, c{ENTRY_SENTINEL}@d.com")
