"""
Argument checks shared by the scanners.

Emptiness is a capability check: anything exposing a length counts as empty
when that length is zero.
"""

from typing import Any, TypeVar
from mailscan.lib.exceptions import InvalidArgument

T = TypeVar("T")


def value_isEmpty(value: Any) -> bool:
    """Return True for None or for any sized value of length zero."""
    if value is None:
        return True
    try:
        return len(value) == 0
    except TypeError:
        return False


def argument_checkNonEmpty(value: T, name: str) -> T:
    """
    Return `value` unchanged, or fail when it is missing or empty.

    :param value: The argument to check.
    :param name: Argument name used in the error message.
    :return: The unchanged value.
    :raises InvalidArgument: If the value is None or has length zero.
    """
    if value_isEmpty(value):
        raise InvalidArgument(f"{name} cannot be empty", argument=name)
    return value
