"""
Substitution callbacks for the nested token replacer.

Any callable taking the matched token and returning its replacement satisfies
the `Substitution` protocol. `StringFormatter` is the stock implementation
that drops the token into a `{}` format pattern.

Example:
    quote = StringFormatter.formatterForPattern("'{}'")
    quote("name")  # "'name'"
"""

from typing import Protocol, runtime_checkable, Self


@runtime_checkable
class Substitution(Protocol):
    """Protocol for the replacement of a matched token.

    Implementations must be free of side effects visible to the scanner. The
    returned text is emitted as is and never scanned again.
    """

    def __call__(self: Self, token: str) -> str:
        ...


class StringFormatter:
    """Substitution that formats each token into a fixed pattern.

    Attributes:
        format_pattern: A `str.format` pattern with one positional field
    """

    def __init__(self: Self, format_pattern: str) -> None:
        self.format_pattern: str = format_pattern

    @classmethod
    def formatterForPattern(cls, pattern: str) -> "StringFormatter":
        """Create a formatter for `pattern`, e.g. `"<b>{}</b>"`."""
        return cls(pattern)

    def apply(self: Self, token: str) -> str:
        return self.format_pattern.format(token)

    def __call__(self: Self, token: str) -> str:
        return self.apply(token)

    def __repr__(self: Self) -> str:
        return f"StringFormatter({self.format_pattern!r})"
