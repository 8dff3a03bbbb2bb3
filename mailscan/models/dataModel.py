"""
dataModel.py

Data models shared by the mailscan scanners and commands. The models leverage
Pydantic for validation and type safety.

Features:
- Enum describing how a nested token line is unbalanced.
- Enum and model for interpreted address entries.
"""

from email.utils import formataddr
from enum import Enum
from pydantic import BaseModel, ConfigDict, Field


class UnbalanceKind(Enum):
    """
    Enum for the structural violation found while scanning nested tokens.
    """

    OPEN_WITHOUT_CLOSE = "open token without closed token"
    CLOSE_WITHOUT_OPEN = "closed token without open token"


class RecipientType(Enum):
    """
    Enum for the header an address entry belongs to.
    """

    TO = "to"
    CC = "cc"
    BCC = "bcc"


class Recipient(BaseModel):
    """
    Model for one interpreted address entry.

    Attributes:
        name (str | None): Display name, if any.
        address (str): The bare address, or the raw entry when it could not be parsed.
        type (RecipientType | None): Header the entry belongs to.
    """

    model_config = ConfigDict(frozen=True)

    name: str | None = Field(default=None, description="Display name, if any.")
    address: str = Field(..., description="Bare address or unparsed entry.")
    type: RecipientType | None = Field(
        default=None, description="Header the entry belongs to."
    )

    def __str__(self) -> str:
        return formataddr((self.name or "", self.address))
