"""
Scanner package for mailscan.

Provides the address list tokenizer and the depth-scoped nested token
replacer, together with the substitution callbacks the replacer accepts.
"""

from .addresses import (
    AddressListTokenizer,
    addressList_split,
    cid_extract,
    recipient_interpret,
)
from .formatter import StringFormatter, Substitution
from .nested import NestedTokenReplacer, nestedTokens_replace

__all__ = [
    "AddressListTokenizer",
    "addressList_split",
    "cid_extract",
    "recipient_interpret",
    "StringFormatter",
    "Substitution",
    "NestedTokenReplacer",
    "nestedTokens_replace",
]
