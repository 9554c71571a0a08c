"""
Error taxonomy for address, mailbox and message construction.

Every error is a closed set of kinds (an Enum) plus the context needed to
pinpoint the failure: the offending character, or the lower-level error that
caused a user, domain, name or address to be rejected. Wrapped errors are kept
both as attributes and as ``__cause__``.
"""

from enum import Enum
from typing import Optional, Tuple


class BriefError(ValueError):
    """Base class for all errors raised by this package."""

    def _payload(self) -> Tuple:
        return ()

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._payload() == other._payload()

    def __hash__(self) -> int:
        return hash((type(self), self._payload()))


class PartErrorKind(Enum):
    IS_EMPTY = 'is_empty'
    CONTAINS_FORBIDDEN_CHARACTER = 'contains_forbidden_character'
    CONTAINS_NON_ASCII_CHARACTER = 'contains_non_ascii_character'


class AddressErrorKind(Enum):
    MISSING_USER_OR_DOMAIN = 'missing_user_or_domain'
    INVALID_USER = 'invalid_user'
    INVALID_DOMAIN = 'invalid_domain'


class MailboxErrorKind(Enum):
    MISSING_ANGLE_BRACKETS = 'missing_angle_brackets'
    MISSING_OPENING_ANGLE_BRACKET = 'missing_opening_angle_bracket'
    MISSING_CLOSING_ANGLE_BRACKET = 'missing_closing_angle_bracket'
    INVALID_ORDER_OF_ANGLE_BRACKETS = 'invalid_order_of_angle_brackets'
    INVALID_NAME = 'invalid_name'
    INVALID_ADDRESS = 'invalid_address'


class MailboxListErrorKind(Enum):
    IS_EMPTY = 'is_empty'
    INVALID_MAILBOX = 'invalid_mailbox'


class InvalidPartError(BriefError):
    """
    A user, domain or display name failed validation.

    Attributes:
        kind: Which rule was broken
        character: Offending character (None for IS_EMPTY)
    """

    def __init__(self, kind: PartErrorKind, character: Optional[str] = None):
        self.kind = kind
        self.character = character
        super().__init__(self._describe())

    @classmethod
    def is_empty(cls) -> 'InvalidPartError':
        return cls(PartErrorKind.IS_EMPTY)

    @classmethod
    def forbidden_character(cls, character: str) -> 'InvalidPartError':
        return cls(PartErrorKind.CONTAINS_FORBIDDEN_CHARACTER, character)

    @classmethod
    def non_ascii_character(cls, character: str) -> 'InvalidPartError':
        return cls(PartErrorKind.CONTAINS_NON_ASCII_CHARACTER, character)

    def _payload(self) -> Tuple:
        return (self.kind, self.character)

    def _describe(self) -> str:
        if self.kind is PartErrorKind.IS_EMPTY:
            return "Part is empty"
        if self.kind is PartErrorKind.CONTAINS_FORBIDDEN_CHARACTER:
            return f"Part contains forbidden character {self.character!r}"
        return f"Part contains non-ASCII character {self.character!r}"

    def __repr__(self) -> str:
        if self.character is None:
            return f"InvalidPartError({self.kind.name})"
        return f"InvalidPartError({self.kind.name}, {self.character!r})"


class ParseAddressError(BriefError):
    """
    An address string or user/domain pair was rejected.

    Attributes:
        kind: Which stage failed
        part_error: Underlying part error for INVALID_USER / INVALID_DOMAIN
    """

    def __init__(self, kind: AddressErrorKind, part_error: Optional[InvalidPartError] = None):
        self.kind = kind
        self.part_error = part_error
        super().__init__(self._describe())

    @classmethod
    def missing_user_or_domain(cls) -> 'ParseAddressError':
        return cls(AddressErrorKind.MISSING_USER_OR_DOMAIN)

    @classmethod
    def invalid_user(cls, part_error: InvalidPartError) -> 'ParseAddressError':
        return cls(AddressErrorKind.INVALID_USER, part_error)

    @classmethod
    def invalid_domain(cls, part_error: InvalidPartError) -> 'ParseAddressError':
        return cls(AddressErrorKind.INVALID_DOMAIN, part_error)

    def _payload(self) -> Tuple:
        return (self.kind, self.part_error)

    def _describe(self) -> str:
        if self.kind is AddressErrorKind.MISSING_USER_OR_DOMAIN:
            return "Missing user or domain (no '@' symbol found)"
        if self.kind is AddressErrorKind.INVALID_USER:
            return f"Invalid user: {self.part_error}"
        return f"Invalid domain: {self.part_error}"

    def __repr__(self) -> str:
        if self.part_error is None:
            return f"ParseAddressError({self.kind.name})"
        return f"ParseAddressError({self.kind.name}, {self.part_error!r})"


class ParseMailboxError(BriefError):
    """
    A mailbox string or name/address pair was rejected.

    Attributes:
        kind: Which stage failed
        part_error: Underlying part error for INVALID_NAME
        address_error: Underlying address error for INVALID_ADDRESS
    """

    _MESSAGES = {
        MailboxErrorKind.MISSING_ANGLE_BRACKETS: "Missing angle brackets",
        MailboxErrorKind.MISSING_OPENING_ANGLE_BRACKET: "Missing opening angle bracket '<'",
        MailboxErrorKind.MISSING_CLOSING_ANGLE_BRACKET: "Missing closing angle bracket '>'",
        MailboxErrorKind.INVALID_ORDER_OF_ANGLE_BRACKETS: "Angle brackets in wrong order ('>' before '<')",
    }

    def __init__(
        self,
        kind: MailboxErrorKind,
        part_error: Optional[InvalidPartError] = None,
        address_error: Optional[ParseAddressError] = None
    ):
        self.kind = kind
        self.part_error = part_error
        self.address_error = address_error
        super().__init__(self._describe())

    @classmethod
    def invalid_name(cls, part_error: InvalidPartError) -> 'ParseMailboxError':
        return cls(MailboxErrorKind.INVALID_NAME, part_error=part_error)

    @classmethod
    def invalid_address(cls, address_error: ParseAddressError) -> 'ParseMailboxError':
        return cls(MailboxErrorKind.INVALID_ADDRESS, address_error=address_error)

    def _payload(self) -> Tuple:
        return (self.kind, self.part_error, self.address_error)

    def _describe(self) -> str:
        if self.kind is MailboxErrorKind.INVALID_NAME:
            return f"Invalid name: {self.part_error}"
        if self.kind is MailboxErrorKind.INVALID_ADDRESS:
            return f"Invalid address: {self.address_error}"
        return self._MESSAGES[self.kind]

    def __repr__(self) -> str:
        inner = self.part_error or self.address_error
        if inner is None:
            return f"ParseMailboxError({self.kind.name})"
        return f"ParseMailboxError({self.kind.name}, {inner!r})"


class ParseMailboxListError(BriefError):
    """
    A comma-separated mailbox list was rejected.

    Attributes:
        kind: IS_EMPTY or INVALID_MAILBOX
        index: Zero-based position of the failing item
        mailbox_error: Underlying mailbox error
    """

    def __init__(
        self,
        kind: MailboxListErrorKind,
        index: Optional[int] = None,
        mailbox_error: Optional[ParseMailboxError] = None
    ):
        self.kind = kind
        self.index = index
        self.mailbox_error = mailbox_error
        super().__init__(self._describe())

    @classmethod
    def is_empty(cls) -> 'ParseMailboxListError':
        return cls(MailboxListErrorKind.IS_EMPTY)

    @classmethod
    def invalid_mailbox(cls, index: int, mailbox_error: ParseMailboxError) -> 'ParseMailboxListError':
        return cls(MailboxListErrorKind.INVALID_MAILBOX, index, mailbox_error)

    def _payload(self) -> Tuple:
        return (self.kind, self.index, self.mailbox_error)

    def _describe(self) -> str:
        if self.kind is MailboxListErrorKind.IS_EMPTY:
            return "Mailbox list is empty"
        return f"Invalid mailbox at position {self.index}: {self.mailbox_error}"


class BuilderError(BriefError):
    """Base class for invalid MessageBuilder transitions."""


class FieldAlreadySetError(BuilderError):
    """A builder slot ('from' or 'to') was set a second time."""

    def __init__(self, field: str):
        self.field = field
        super().__init__(f"Field '{field}' is already set")

    def _payload(self) -> Tuple:
        return (self.field,)


class IncompleteMessageError(BuilderError):
    """build() was called before every required slot was set."""

    def __init__(self, missing: Tuple[str, ...]):
        self.missing = tuple(missing)
        super().__init__(f"Cannot build message, missing field(s): {', '.join(self.missing)}")

    def _payload(self) -> Tuple:
        return (self.missing,)


class InvalidFieldError(BuilderError):
    """A message slot was given something other than an Address."""

    def __init__(self, field: str, value: object):
        self.field = field
        self.value_type = type(value).__name__
        super().__init__(f"Field '{field}' must be an Address, got {self.value_type}")

    def _payload(self) -> Tuple:
        return (self.field, self.value_type)
