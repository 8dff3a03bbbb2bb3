r"""
Depth-scoped token replacement.

Scans a line containing literal text, open/close markers and occurrences of a
target pattern, and replaces only the target matches found at one nesting
depth. Markers and all other text are copied through untouched.

At each position the scanner tries, in order:
1. the open marker (depth + 1)
2. the close marker (depth - 1)
3. the target pattern, only when the current depth is the target depth
4. a single literal character

Markers always take priority over the target pattern, even when the pattern
could match the marker text itself, so a pattern match never swallows a
bracket. Identical open and close markers are allowed; the open marker then
always wins, so a line containing the marker never balances.

Example:
    replacer = NestedTokenReplacer("[", "]", r"#\w#", str.upper)
    replacer.replace("[#a# [#b#]]", 1)  # "[#A# [#b#]]"
"""

import re
from typing import Self
from mailscan.lib.exceptions import InvalidArgument, UnbalancedTokens
from mailscan.lib.log import LOG
from mailscan.lib.scanner.formatter import Substitution
from mailscan.lib.validators import argument_checkNonEmpty
from mailscan.models.dataModel import UnbalanceKind


class NestedTokenReplacer:
    """Replaces target tokens found at a given nesting depth.

    Holds only immutable configuration; every call to `replace` owns its own
    scan state, so one instance can be reused and shared between threads.

    Attributes:
        open_marker: Literal string opening a nesting level
        close_marker: Literal string closing a nesting level
        token_pattern: Compiled target pattern
        substitution: Callback producing the replacement for a matched token
    """

    def __init__(
        self: Self,
        open_marker: str,
        close_marker: str,
        target_pattern: str,
        substitution: Substitution,
    ) -> None:
        """Initialize replacer with marker and target configuration.

        Args:
            open_marker: Literal string opening a nesting level
            close_marker: Literal string closing a nesting level
            target_pattern: Regular expression for the tokens to replace
            substitution: Callable mapping a matched token to its replacement

        Raises:
            InvalidArgument: If a marker is empty, the pattern is empty or
                invalid, or substitution is not callable
        """
        argument_checkNonEmpty(open_marker, "open_marker")
        argument_checkNonEmpty(close_marker, "close_marker")
        argument_checkNonEmpty(target_pattern, "target_pattern")
        if not callable(substitution):
            raise InvalidArgument(
                "substitution must be callable", argument="substitution"
            )
        try:
            self.token_pattern: re.Pattern = re.compile(target_pattern)
        except re.error as e:
            raise InvalidArgument(
                f"Invalid target pattern {target_pattern!r}: {e}",
                argument="target_pattern",
            ) from e

        self.open_marker: str = open_marker
        self.close_marker: str = close_marker
        self.substitution: Substitution = substitution

    def replace(self: Self, line: str, target_depth: int) -> str:
        """Rewrite `line`, substituting target tokens at `target_depth`.

        Args:
            line: Text to scan; may be empty
            target_depth: Nesting depth whose tokens are replaced, 0 being
                outside all markers

        Returns:
            The rewritten line

        Raises:
            InvalidArgument: If line is None or target_depth is negative
            UnbalancedTokens: If a close marker precedes its open marker, or
                an open marker is never closed
        """
        if line is None:
            raise InvalidArgument("line cannot be None", argument="line")
        if target_depth < 0:
            raise InvalidArgument(
                f"target_depth cannot be negative: {target_depth}",
                argument="target_depth",
            )

        result: list[str] = []
        depth: int = 0
        pos: int = 0

        while pos < len(line):
            if line.startswith(self.open_marker, pos):
                depth += 1
                result.append(self.open_marker)
                pos += len(self.open_marker)
            elif line.startswith(self.close_marker, pos):
                depth -= 1
                result.append(self.close_marker)
                pos += len(self.close_marker)
            else:
                match: re.Match | None = None
                if depth == target_depth:
                    # the rest of the line is matched as a fresh string, so `^`
                    # anchors at the scan position
                    match = self.token_pattern.match(line[pos:])
                if match and match.group(0):
                    result.append(self.substitution(match.group(0)))
                    pos += len(match.group(0))
                else:
                    # zero-length matches fall through so the scan always advances
                    result.append(line[pos])
                    pos += 1

            if depth < 0:
                LOG(f"Close marker without open marker at {pos}: {line}")
                raise UnbalancedTokens(UnbalanceKind.CLOSE_WITHOUT_OPEN, line)

        if depth != 0:
            LOG(f"{depth} open marker(s) left unclosed: {line}")
            raise UnbalancedTokens(UnbalanceKind.OPEN_WITHOUT_CLOSE, line)

        return "".join(result)


def nestedTokens_replace(
    line: str,
    target_depth: int,
    open_marker: str,
    close_marker: str,
    target_pattern: str,
    substitution: Substitution,
) -> str:
    """One-shot form of `NestedTokenReplacer(...).replace(line, target_depth)`."""
    replacer = NestedTokenReplacer(
        open_marker, close_marker, target_pattern, substitution
    )
    return replacer.replace(line, target_depth)
