"""
Validation of a single address part (user, domain or display name).
"""

import logging

from brief.domain.errors import InvalidPartError

logger = logging.getLogger(__name__)

# Characters that may never appear inside a user, domain or display name
FORBIDDEN_CHARACTERS = frozenset('<>()[]\\,;:@"')


def validate_part(part: str) -> None:
    """
    Validate a user, domain or display-name token.

    The non-ASCII check runs before the forbidden-character scan, so a
    non-ASCII look-alike of a forbidden character is reported as non-ASCII.

    Args:
        part: Token to validate

    Raises:
        InvalidPartError: If the token is empty, contains a non-ASCII
            character or contains a forbidden character

    Example:
        >>> validate_part("user")
        >>> validate_part("us@er")
        Traceback (most recent call last):
        ...
        brief.domain.errors.InvalidPartError: Part contains forbidden character '@'
    """
    if not part:
        raise InvalidPartError.is_empty()

    non_ascii = next((c for c in part if not c.isascii()), None)
    if non_ascii is not None:
        logger.debug(f"Rejected part {part!r}: non-ASCII character {non_ascii!r}")
        raise InvalidPartError.non_ascii_character(non_ascii)

    forbidden = next((c for c in part if c in FORBIDDEN_CHARACTERS), None)
    if forbidden is not None:
        logger.debug(f"Rejected part {part!r}: forbidden character {forbidden!r}")
        raise InvalidPartError.forbidden_character(forbidden)
