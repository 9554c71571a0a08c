"""
Parsing of '[display name] <user@domain>' mailbox strings and mailbox lists.

Angle brackets are mandatory. Only the first '<' and the first '>' are
meaningful: any further brackets end up in the address (where they are
rejected as forbidden characters) or in the discarded suffix.
"""

import logging
from typing import Optional

from brief.domain.errors import (
    InvalidPartError,
    MailboxErrorKind,
    ParseAddressError,
    ParseMailboxError,
    ParseMailboxListError,
)
from brief.domain.models import Address, Mailbox, MailboxList
from brief.domain.validate import validate_part
from .address import parse_address

logger = logging.getLogger(__name__)


def _check_angle_brackets(value: str) -> None:
    """Raise the matching ParseMailboxError if the brackets are unusable."""
    left = value.find('<')
    right = value.find('>')

    if left == -1 and right == -1:
        raise ParseMailboxError(MailboxErrorKind.MISSING_ANGLE_BRACKETS)
    if left == -1:
        raise ParseMailboxError(MailboxErrorKind.MISSING_OPENING_ANGLE_BRACKET)
    if right == -1:
        raise ParseMailboxError(MailboxErrorKind.MISSING_CLOSING_ANGLE_BRACKET)
    if left > right:
        raise ParseMailboxError(MailboxErrorKind.INVALID_ORDER_OF_ANGLE_BRACKETS)


def parse_mailbox(value: str) -> Mailbox:
    """
    Parse a mailbox string into a Mailbox.

    Leading and trailing whitespace is ignored. The trimmed text before the
    first '<' becomes the display name (absent when empty) and the text
    between the first '<' and the first '>' is parsed as an address.

    Args:
        value: Mailbox text, e.g. "My Name <user@example.com>"

    Returns:
        Mailbox: Validated mailbox

    Raises:
        ParseMailboxError: For missing or misordered brackets, an invalid
            name (INVALID_NAME) or an invalid address (INVALID_ADDRESS)

    Example:
        >>> parse_mailbox("<user@example.com>").name is None
        True
    """
    trimmed = value.strip()

    try:
        _check_angle_brackets(trimmed)
    except ParseMailboxError as e:
        logger.debug(f"Rejected mailbox {value!r}: {e}")
        raise

    prefix, _, remainder = trimmed.partition('<')
    interior, _, _suffix = remainder.partition('>')

    name = prefix.strip() or None

    # Name is checked before the address
    if name is not None:
        try:
            validate_part(name)
        except InvalidPartError as e:
            logger.debug(f"Rejected mailbox {value!r}: invalid name {name!r}: {e}")
            raise ParseMailboxError.invalid_name(e) from e

    try:
        address = parse_address(interior)
    except ParseAddressError as e:
        logger.debug(f"Rejected mailbox {value!r}: {e}")
        raise ParseMailboxError.invalid_address(e) from e

    return Mailbox(name, address)


def try_new_mailbox(name: Optional[str], address: Address) -> Mailbox:
    """
    Build a Mailbox from a display name and an already valid Address.

    Only the name is validated, so this never raises INVALID_ADDRESS.

    Args:
        name: Display name, or None
        address: Validated address

    Returns:
        Mailbox: Validated mailbox

    Raises:
        ParseMailboxError: INVALID_NAME if the name fails validation
    """
    return Mailbox(name, address)


def parse_mailbox_list(value: str) -> MailboxList:
    """
    Parse a comma-separated list of mailboxes.

    ',' is forbidden inside every part, so splitting on it never cuts a
    valid mailbox in two.

    Args:
        value: e.g. "Alice <alice@example.com>, <bob@example.com>"

    Returns:
        MailboxList: Mailboxes in input order

    Raises:
        ParseMailboxListError: IS_EMPTY for blank input, INVALID_MAILBOX
            (with the item index) when an item fails to parse
    """
    if not value.strip():
        raise ParseMailboxListError.is_empty()

    mailboxes = []
    for index, item in enumerate(value.split(',')):
        try:
            mailboxes.append(parse_mailbox(item))
        except ParseMailboxError as e:
            raise ParseMailboxListError.invalid_mailbox(index, e) from e

    logger.debug(f"Parsed {len(mailboxes)} mailbox(es)")
    return MailboxList(tuple(mailboxes))
