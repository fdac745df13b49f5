"""
Events recorded by a picker session.

They are not dispatched anywhere; the use case logs each one under the
snake_case form of its class name (PhraseMerged becomes phrase_merged).
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from uuid import UUID, uuid4


@dataclass(frozen=True)
class DomainEvent:
    """
    One past-tense fact about a session.

    Concrete events are frozen, keyword-only dataclasses carrying the
    session id and the positions involved.
    """

    event_id: UUID = field(default_factory=uuid4)
    occurred_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    @property
    def event_type(self) -> str:
        """Return the event type name for serialization."""
        return self.__class__.__name__

    def to_dict(self) -> dict[str, object]:
        """Flatten to log-friendly primitives (ids as strings, tuples as lists)."""
        result: dict[str, object] = {}
        for key, value in self.__dict__.items():
            if isinstance(value, datetime):
                result[key] = value.isoformat()
            elif isinstance(value, UUID):
                result[key] = str(value)
            elif hasattr(value, "to_primitive"):
                result[key] = value.to_primitive()
            elif isinstance(value, tuple):
                result[key] = list(value)
            else:
                result[key] = value
        result["event_type"] = self.event_type
        return result
