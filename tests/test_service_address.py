"""
Tests for address parsing service.
"""

import pytest
import sys
import os

# Add src to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '../src'))

from brief.domain.errors import AddressErrorKind, InvalidPartError, ParseAddressError
from brief.domain.models import Address
from brief.services.address import parse_address, try_new_address


class TestParseAddress:
    """Test parse_address."""

    def test_parse_valid_address(self):
        """Test parsing a well-formed address."""
        address = parse_address("user@example.com")

        assert address == Address("user", "example.com")
        assert address.user == "user"
        assert address.domain == "example.com"

    @pytest.mark.parametrize("user,domain", [
        ("user", "example.com"),
        ("first.last", "mail.example.org"),
        ("x+tag", "localhost"),
        ("My-User_01", "a.b.c.d"),
    ])
    def test_round_trip(self, user, domain):
        """Test formatting then parsing gives back the same address."""
        assert parse_address(f"{user}@{domain}") == Address(user, domain)
        assert str(parse_address(f"{user}@{domain}")) == f"{user}@{domain}"

    def test_missing_at_sign(self):
        """Test input without '@' fails with MISSING_USER_OR_DOMAIN."""
        with pytest.raises(ParseAddressError) as exc_info:
            parse_address("userexample.com")

        assert exc_info.value == ParseAddressError.missing_user_or_domain()
        assert exc_info.value.part_error is None
        assert str(exc_info.value) == "Missing user or domain (no '@' symbol found)"

    def test_empty_user(self):
        """Test '@domain.com' fails with INVALID_USER(IS_EMPTY)."""
        with pytest.raises(ParseAddressError) as exc_info:
            parse_address("@domain.com")

        assert exc_info.value.kind is AddressErrorKind.INVALID_USER
        assert exc_info.value.part_error == InvalidPartError.is_empty()

    def test_empty_domain(self):
        """Test 'user@' fails with INVALID_DOMAIN(IS_EMPTY)."""
        with pytest.raises(ParseAddressError) as exc_info:
            parse_address("user@")

        assert exc_info.value == ParseAddressError.invalid_domain(InvalidPartError.is_empty())

    def test_empty_string(self):
        """Test empty input has no '@'."""
        with pytest.raises(ParseAddressError) as exc_info:
            parse_address("")

        assert exc_info.value.kind is AddressErrorKind.MISSING_USER_OR_DOMAIN

    def test_splits_on_rightmost_at(self):
        """Test the rightmost '@' separates user and domain."""
        with pytest.raises(ParseAddressError) as exc_info:
            parse_address("us@er@example.com")

        # The user keeps the first '@', which is forbidden
        assert exc_info.value == ParseAddressError.invalid_user(
            InvalidPartError.forbidden_character("@")
        )

    def test_user_checked_before_domain(self):
        """Test the user error wins when both parts are invalid."""
        with pytest.raises(ParseAddressError) as exc_info:
            parse_address("@")

        assert exc_info.value.kind is AddressErrorKind.INVALID_USER

    def test_forbidden_character_in_domain(self):
        """Test forbidden characters in the domain."""
        with pytest.raises(ParseAddressError) as exc_info:
            parse_address("user@exa<mple.com")

        assert exc_info.value == ParseAddressError.invalid_domain(
            InvalidPartError.forbidden_character("<")
        )

    def test_non_ascii_domain(self):
        """Test non-ASCII domains are rejected."""
        with pytest.raises(ParseAddressError) as exc_info:
            parse_address("user@bücher.de")

        assert exc_info.value == ParseAddressError.invalid_domain(
            InvalidPartError.non_ascii_character("ü")
        )

    def test_cause_is_chained(self):
        """Test the part error is kept as __cause__."""
        with pytest.raises(ParseAddressError) as exc_info:
            parse_address("user@")

        assert exc_info.value.__cause__ == InvalidPartError.is_empty()


class TestTryNewAddress:
    """Test try_new_address."""

    def test_creates_address(self):
        """Test creating an address from separate parts."""
        address = try_new_address("user", "domain.com")

        assert address == Address("user", "domain.com")

    def test_empty_user_or_domain(self):
        """Test empty parts are rejected per field."""
        with pytest.raises(ParseAddressError) as exc_info:
            try_new_address("", "domain.com")
        assert exc_info.value.kind is AddressErrorKind.INVALID_USER

        with pytest.raises(ParseAddressError) as exc_info:
            try_new_address("name", "")
        assert exc_info.value.kind is AddressErrorKind.INVALID_DOMAIN

    def test_never_reports_missing_user_or_domain(self):
        """Test an '@' inside a part is a forbidden character, not a missing separator."""
        with pytest.raises(ParseAddressError) as exc_info:
            try_new_address("user@domain.com", "x")

        assert exc_info.value == ParseAddressError.invalid_user(
            InvalidPartError.forbidden_character("@")
        )


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
