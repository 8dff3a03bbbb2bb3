"""
Address list tokenizer and single-entry helpers.

Splits a delimited list of address entries where `,` and `;` may also occur
inside display names. A delimiter only counts as a separator when it follows
the tail of an address (an `@` part and an optional closing `>`), so names
such as `"Doe, John" <john@doe.com>` survive the split intact.

Implementation:
1. Replace recognized delimiters with a private sentinel
2. Drop a sentinel left at the very end of the list
3. Split on the sentinel and trim every entry

Example:
    addressList_split('a@b.com, "Doe, John" <c@d.com>;')
    # ['a@b.com', '"Doe, John" <c@d.com>']
"""

import re
from email.utils import parseaddr
from typing import Final, Self
from mailscan.lib.exceptions import InvalidArgument
from mailscan.lib.log import LOG
from mailscan.lib.validators import argument_checkNonEmpty
from mailscan.models.dataModel import Recipient, RecipientType

# Unicode private-use code point; lists that contain it are rejected
ENTRY_SENTINEL: Final[str] = "\ue000"

DELIMITER_AFTER_ADDRESS: Final[re.Pattern] = re.compile(r"(@.*?>?)\s*[,;]")
TRAILING_SENTINEL: Final[re.Pattern] = re.compile(
    re.escape(ENTRY_SENTINEL) + r"\s*$"
)
SENTINEL_SPLIT: Final[re.Pattern] = re.compile(
    r"\s*" + re.escape(ENTRY_SENTINEL) + r"\s*"
)
INSIDE_CID_BRACKETS: Final[re.Pattern] = re.compile(r"<?([^>]*)>?")


class AddressListTokenizer:
    """Splits a raw address list into its entries.

    Stateless; one instance can be shared between threads.
    """

    def split(self: Self, raw_list: str) -> list[str]:
        """Split `raw_list` into trimmed address entries.

        Args:
            raw_list: The delimited list of addresses (or a single address),
                optionally including display names

        Returns:
            Entries in input order. Entries between two recognized delimiters
            are kept even when empty.

        Raises:
            InvalidArgument: If raw_list is None or empty, or contains the
                private-use character U+E000 used as the entry sentinel
        """
        argument_checkNonEmpty(raw_list, "raw_list")
        if ENTRY_SENTINEL in raw_list:
            raise InvalidArgument(
                "raw_list cannot contain the private-use character U+E000",
                argument="raw_list",
            )

        unambiguous: str = DELIMITER_AFTER_ADDRESS.sub(
            lambda match: match.group(1) + ENTRY_SENTINEL, raw_list
        )
        unambiguous = TRAILING_SENTINEL.sub("", unambiguous)
        entries: list[str] = [
            entry.strip() for entry in SENTINEL_SPLIT.split(unambiguous)
        ]
        LOG(f"Split address list into {len(entries)} entries")
        return entries


_tokenizer: Final[AddressListTokenizer] = AddressListTokenizer()


def addressList_split(raw_list: str) -> list[str]:
    """Split a delimited address list; see `AddressListTokenizer.split`."""
    return _tokenizer.split(raw_list)


def recipient_interpret(
    name: str | None,
    fixed_name: bool,
    email_address: str,
    type: RecipientType | None = None,
) -> Recipient:
    """Interpret one address entry as a recipient.

    Args:
        name: Name to use as override or as default, depending on `fixed_name`.
            When either this or the parsed display name is missing, the other
            one is used.
        fixed_name: Whether `name` overrides the display name in the entry
        email_address: One address entry, possibly with a display name
        type: Header the recipient belongs to

    Returns:
        Recipient with the resolved name and bare address. If the entry cannot
        be parsed, the whole entry is kept as the address with `name`.
    """
    argument_checkNonEmpty(email_address, "email_address")
    parsed_name, parsed_address = parseaddr(email_address)
    if not parsed_address:
        LOG(f"Could not parse address entry, keeping it verbatim: {email_address}")
        return Recipient(name=name, address=email_address, type=type)

    parsed_name = parsed_name or None
    if fixed_name or parsed_name is None:
        relevant_name = name or parsed_name
    else:
        relevant_name = parsed_name or name
    return Recipient(name=relevant_name, address=parsed_address, type=type)


def cid_extract(cid: str | None) -> str | None:
    """Strip the angle brackets around a content-id, e.g. `<a@b>` -> `a@b`."""
    if cid is None:
        return None
    return INSIDE_CID_BRACKETS.sub(r"\1", cid)
