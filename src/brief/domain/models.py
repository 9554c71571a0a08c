"""
Data models for addresses, mailboxes and messages.

All models are immutable value objects. Addresses and mailboxes validate their
parts on construction, so every instance in circulation is known to be valid.
"""

from dataclasses import dataclass
from typing import Iterator, Optional, Tuple

from brief import config
from brief.domain.errors import (
    InvalidFieldError,
    InvalidPartError,
    ParseAddressError,
    ParseMailboxError,
)
from .validate import validate_part


@dataclass(frozen=True, order=True)
class Address:
    """
    Email address made of a user and a domain.

    Equality and ordering compare user first, then domain.

    Attributes:
        user: Local part before the '@'
        domain: Domain part after the '@'

    Raises:
        ParseAddressError: INVALID_USER or INVALID_DOMAIN on construction
    """
    user: str
    domain: str

    def __post_init__(self) -> None:
        try:
            validate_part(self.user)
        except InvalidPartError as e:
            raise ParseAddressError.invalid_user(e) from e
        try:
            validate_part(self.domain)
        except InvalidPartError as e:
            raise ParseAddressError.invalid_domain(e) from e

    def __str__(self) -> str:
        return f"{self.user}@{self.domain}"


@dataclass(frozen=True)
class Mailbox:
    """
    Address with an optional human-readable display name.

    Attributes:
        name: Display name (None when absent)
        address: Validated Address

    Raises:
        ParseMailboxError: INVALID_NAME on construction
    """
    name: Optional[str]
    address: Address

    def __post_init__(self) -> None:
        if self.name is not None:
            try:
                validate_part(self.name)
            except InvalidPartError as e:
                raise ParseMailboxError.invalid_name(e) from e

    def render(self, angle_brackets: Optional[bool] = None) -> str:
        """
        Render the mailbox as text.

        A mailbox with a name always renders as 'name <user@domain>'.
        Without a name, angle_brackets selects '<user@domain>' or
        'user@domain'.

        Args:
            angle_brackets: Override for the configured render mode

        Returns:
            str: Rendered mailbox
        """
        if self.name is not None:
            return f"{self.name} <{self.address}>"

        if angle_brackets is None:
            angle_brackets = config.mailbox_angle_brackets()
        return f"<{self.address}>" if angle_brackets else str(self.address)

    def __str__(self) -> str:
        return self.render()


@dataclass(frozen=True)
class MailboxList:
    """Ordered, immutable collection of mailboxes."""
    mailboxes: Tuple[Mailbox, ...] = ()

    def __iter__(self) -> Iterator[Mailbox]:
        return iter(self.mailboxes)

    def __len__(self) -> int:
        return len(self.mailboxes)

    def __getitem__(self, index: int) -> Mailbox:
        return self.mailboxes[index]

    def __str__(self) -> str:
        return ", ".join(str(m) for m in self.mailboxes)


@dataclass(frozen=True)
class Message:
    """
    Minimal message record.

    Produced by MessageBuilder once both addresses have been supplied.

    Attributes:
        from_address: Sender address
        to_address: Recipient address

    Raises:
        InvalidFieldError: If either field is not an Address
    """
    from_address: Address
    to_address: Address

    def __post_init__(self) -> None:
        if not isinstance(self.from_address, Address):
            raise InvalidFieldError('from', self.from_address)
        if not isinstance(self.to_address, Address):
            raise InvalidFieldError('to', self.to_address)

    def __repr__(self) -> str:
        return f"Message(from={self.from_address}, to={self.to_address})"
