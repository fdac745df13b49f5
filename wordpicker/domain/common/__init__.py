"""
Shared kernel for the picking domain.

- ValueObject: tokens, phrases, selections, definition records, panel positions
- Entity / EntityId: identity for in-memory picker sessions
- AggregateRoot: PickerSession, which records what the user did as events
- DomainEvent: WordSelected, PhraseMerged and friends, logged by the use case
"""

from .aggregate_root import AggregateRoot
from .domain_event import DomainEvent
from .entity import Entity, EntityId
from .exceptions import DomainError, InvariantViolationError, ValidationError
from .value_object import ValueObject

__all__ = [
    "AggregateRoot",
    "DomainError",
    "DomainEvent",
    "Entity",
    "EntityId",
    "InvariantViolationError",
    "ValidationError",
    "ValueObject",
]
