"""
Domain layer for addresses, mailboxes, headers and messages.

This layer contains:
- Data models (validated, immutable value objects)
- Error taxonomy (closed error kinds with wrapped causes)
- Part validation (user, domain and display-name tokens)
- Message builder (required-field state machine)
"""
