"""
Message headers.

The set of supported headers is closed: adding one means adding a HeaderKind
member and a branch in both Header.name and Header.body.
See RFC 2076 for the common Internet message headers.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Union

from .models import Address, Mailbox


class HeaderKind(Enum):
    # Conveys the MAIL FROM envelope address on final delivery
    RETURN_PATH = 'return_path'


@dataclass(frozen=True)
class Header:
    """
    A named, renderable header.

    Attributes:
        kind: Which header this is
        payload: Mailbox or Address carried by the header
    """
    kind: HeaderKind
    payload: Union[Mailbox, Address]

    @classmethod
    def return_path(cls, payload: Union[Mailbox, Address]) -> 'Header':
        """Create a Return-Path header."""
        return cls(HeaderKind.RETURN_PATH, payload)

    @property
    def address(self) -> Address:
        """Address carried by the payload."""
        if isinstance(self.payload, Mailbox):
            return self.payload.address
        return self.payload

    @property
    def name(self) -> str:
        """Canonical header name."""
        if self.kind is HeaderKind.RETURN_PATH:
            return 'Return-Path'
        raise NotImplementedError(f"No name mapping for header kind {self.kind}")

    @property
    def body(self) -> str:
        """Rendered header body."""
        if self.kind is HeaderKind.RETURN_PATH:
            return f"<{self.address}>"
        raise NotImplementedError(f"No body mapping for header kind {self.kind}")

    def __str__(self) -> str:
        return f"{self.name}: {self.body}"
