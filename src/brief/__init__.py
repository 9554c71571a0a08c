"""
Parser and validator for e-mail addresses, mailboxes and headers, plus a
builder that refuses to assemble an incomplete message.

Example:
    >>> from brief import parse_mailbox, Header
    >>> mailbox = parse_mailbox("My Name <user@example.com>")
    >>> str(Header.return_path(mailbox))
    'Return-Path: <user@example.com>'
"""

from brief.config import configure_logging
from brief.domain.errors import (
    AddressErrorKind,
    BriefError,
    BuilderError,
    FieldAlreadySetError,
    IncompleteMessageError,
    InvalidFieldError,
    InvalidPartError,
    MailboxErrorKind,
    MailboxListErrorKind,
    ParseAddressError,
    ParseMailboxError,
    ParseMailboxListError,
    PartErrorKind,
)
from brief.domain.header import Header, HeaderKind
from brief.domain.message_builder import BuilderState, MessageBuilder
from brief.domain.models import Address, Mailbox, MailboxList, Message
from brief.services.address import parse_address, try_new_address
from brief.services.mailbox import parse_mailbox, parse_mailbox_list, try_new_mailbox
from brief.domain.validate import FORBIDDEN_CHARACTERS, validate_part

__version__ = '0.1.0'

__all__ = [
    'Address',
    'AddressErrorKind',
    'BriefError',
    'BuilderError',
    'BuilderState',
    'FORBIDDEN_CHARACTERS',
    'FieldAlreadySetError',
    'Header',
    'HeaderKind',
    'IncompleteMessageError',
    'InvalidFieldError',
    'InvalidPartError',
    'Mailbox',
    'MailboxErrorKind',
    'MailboxList',
    'MailboxListErrorKind',
    'Message',
    'MessageBuilder',
    'ParseAddressError',
    'ParseMailboxError',
    'ParseMailboxListError',
    'PartErrorKind',
    'configure_logging',
    'parse_address',
    'parse_mailbox',
    'parse_mailbox_list',
    'try_new_address',
    'try_new_mailbox',
    'validate_part',
]
