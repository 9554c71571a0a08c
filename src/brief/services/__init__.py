"""
Parsing and validation functions.

This package turns raw text into domain models: address parsing and
mailbox parsing.
"""

__all__ = ['address', 'mailbox']
