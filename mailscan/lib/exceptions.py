"""
Exceptions raised by the mailscan scanners.

Both error kinds signal a contract violation at the call site. They are raised
at the point of detection and never recovered inside the scanners.
"""

from mailscan.models.dataModel import UnbalanceKind


class ScanError(Exception):
    """Base exception for all mailscan scanner errors."""


class InvalidArgument(ScanError, ValueError):
    """Raised when a required input is missing or empty."""

    def __init__(self, message: str, argument: str | None = None) -> None:
        super().__init__(message)
        self.argument = argument


class UnbalancedTokens(ScanError):
    """Raised when open and close markers in a line do not balance.

    Attributes:
        kind: Which side of the nesting is missing
        line: The original input line, for diagnostics
    """

    def __init__(self, kind: UnbalanceKind, line: str) -> None:
        super().__init__(f"Unbalanced token sets: {kind.value}\n\t{line}")
        self.kind = kind
        self.line = line
