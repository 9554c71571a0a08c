"""
Pytest configuration and fixtures for all tests.
"""

import os
import sys
import pytest

# Add src to Python path before any imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '../src'))

# Set up test environment variables before importing any modules
os.environ.setdefault('BRIEF_LOG_LEVEL', 'DEBUG')
os.environ.setdefault('BRIEF_MAILBOX_RENDER', 'angle')

from brief.domain.models import Address


@pytest.fixture
def address():
    """A valid address: user@example.com."""
    return Address("user", "example.com")


@pytest.fixture
def other_address():
    """A second valid address: other@example.org."""
    return Address("other", "example.org")
