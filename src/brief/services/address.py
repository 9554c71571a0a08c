"""
Parsing of 'user@domain' address strings.
"""

import logging

from brief.domain.errors import ParseAddressError
from brief.domain.models import Address

logger = logging.getLogger(__name__)


def parse_address(value: str) -> Address:
    """
    Parse an address string into an Address.

    The string is split on the rightmost '@'; everything before it is the
    user and everything after it is the domain.

    Args:
        value: Address text, e.g. "user@example.com"

    Returns:
        Address: Validated address

    Raises:
        ParseAddressError: MISSING_USER_OR_DOMAIN if there is no '@',
            INVALID_USER / INVALID_DOMAIN if a part fails validation

    Example:
        >>> parse_address("user@example.com")
        Address(user='user', domain='example.com')
    """
    if '@' not in value:
        logger.debug(f"No '@' found in address {value!r}")
        raise ParseAddressError.missing_user_or_domain()

    user, _, domain = value.rpartition('@')

    try:
        return Address(user, domain)
    except ParseAddressError as e:
        logger.debug(f"Rejected address {value!r}: {e}")
        raise


def try_new_address(user: str, domain: str) -> Address:
    """
    Build an Address from an already separated user and domain.

    No splitting happens, so this can only fail with INVALID_USER or
    INVALID_DOMAIN, never with MISSING_USER_OR_DOMAIN.

    Args:
        user: Local part
        domain: Domain part

    Returns:
        Address: Validated address

    Raises:
        ParseAddressError: If user or domain is invalid
    """
    return Address(user, domain)
