"""
Tests for header model.
"""

import pytest
import sys
import os

# Add src to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '../src'))

from brief.domain.header import Header, HeaderKind
from brief.domain.models import Address, Mailbox
from brief.services.mailbox import parse_mailbox


class TestReturnPath:
    """Test the Return-Path header."""

    def test_name(self, address):
        """Test the canonical header name."""
        header = Header.return_path(address)

        assert header.kind is HeaderKind.RETURN_PATH
        assert header.name == "Return-Path"

    def test_body_from_address(self, address):
        """Test the body wraps the address in angle brackets."""
        assert Header.return_path(address).body == "<user@example.com>"

    def test_body_from_mailbox_drops_name(self, address):
        """Test only the address of a mailbox appears in the body."""
        header = Header.return_path(Mailbox("My Name", address))

        assert header.body == "<user@example.com>"
        assert header.address == address

    def test_to_string(self):
        """Test the full header line."""
        header = Header.return_path(parse_mailbox("Name <user@domain>"))

        assert str(header) == "Return-Path: <user@domain>"

    def test_headers_are_values(self, address):
        """Test headers compare by kind and payload."""
        assert Header.return_path(address) == Header(HeaderKind.RETURN_PATH, Address("user", "example.com"))


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
