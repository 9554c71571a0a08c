"""
Builder for Message records with an explicit required-field state machine.

The builder carries a two-bit state (from set?, to set?) that only ever moves
forward:

    (Unset, Unset) --set_from--> (Set, Unset) --set_to--> (Set, Set)
    (Unset, Unset) --set_to---> (Unset, Set) --set_from-> (Set, Set)

build() is only allowed from (Set, Set). Transitions never mutate the
builder; each returns a new one. An illegal call raises FieldAlreadySetError,
InvalidFieldError or IncompleteMessageError instead of silently overwriting or
producing a partial message.
"""

import logging
from dataclasses import dataclass, field
from typing import Optional, Tuple

from .errors import FieldAlreadySetError, IncompleteMessageError, InvalidFieldError
from .models import Address, Message

logger = logging.getLogger(__name__)

FROM_FIELD = 'from'
TO_FIELD = 'to'


@dataclass(frozen=True)
class BuilderState:
    """Which required slots of a MessageBuilder have been filled."""
    from_set: bool = False
    to_set: bool = False

    @property
    def is_complete(self) -> bool:
        return self.from_set and self.to_set

    @property
    def missing(self) -> Tuple[str, ...]:
        """Names of the slots that are still unset, in declaration order."""
        missing = []
        if not self.from_set:
            missing.append(FROM_FIELD)
        if not self.to_set:
            missing.append(TO_FIELD)
        return tuple(missing)


@dataclass(frozen=True)
class MessageBuilder:
    """
    Immutable builder for Message.

    The slots are not constructor arguments: set_from() and set_to() are the
    only way to fill them, and the state is derived from the filled slots.

    Example:
        >>> message = (
        ...     MessageBuilder.new()
        ...     .set_from(Address("alice", "example.com"))
        ...     .set_to(Address("bob", "example.com"))
        ...     .build()
        ... )
    """
    from_address: Optional[Address] = field(default=None, init=False)
    to_address: Optional[Address] = field(default=None, init=False)

    @classmethod
    def new(cls) -> 'MessageBuilder':
        """Return a builder with no slot set."""
        return cls()

    @property
    def state(self) -> BuilderState:
        """Which slots are filled."""
        return BuilderState(
            from_set=self.from_address is not None,
            to_set=self.to_address is not None
        )

    @classmethod
    def _with(cls, from_address: Optional[Address], to_address: Optional[Address]) -> 'MessageBuilder':
        builder = cls()
        object.__setattr__(builder, 'from_address', from_address)
        object.__setattr__(builder, 'to_address', to_address)
        return builder

    def set_from(self, address: Address) -> 'MessageBuilder':
        """
        Fill the 'from' slot.

        Args:
            address: Sender address

        Returns:
            MessageBuilder: New builder with 'from' set

        Raises:
            FieldAlreadySetError: If 'from' is already set
            InvalidFieldError: If address is not an Address
        """
        if self.state.from_set:
            raise FieldAlreadySetError(FROM_FIELD)
        if not isinstance(address, Address):
            raise InvalidFieldError(FROM_FIELD, address)
        return self._with(address, self.to_address)

    def set_to(self, address: Address) -> 'MessageBuilder':
        """
        Fill the 'to' slot.

        Args:
            address: Recipient address

        Returns:
            MessageBuilder: New builder with 'to' set

        Raises:
            FieldAlreadySetError: If 'to' is already set
            InvalidFieldError: If address is not an Address
        """
        if self.state.to_set:
            raise FieldAlreadySetError(TO_FIELD)
        if not isinstance(address, Address):
            raise InvalidFieldError(TO_FIELD, address)
        return self._with(self.from_address, address)

    def build(self) -> Message:
        """
        Assemble the Message.

        Returns:
            Message: Immutable message with both addresses

        Raises:
            IncompleteMessageError: If 'from' or 'to' is not set yet
        """
        state = self.state
        if not state.is_complete:
            logger.debug(f"build() called with missing field(s): {state.missing}")
            raise IncompleteMessageError(state.missing)
        return Message(from_address=self.from_address, to_address=self.to_address)
