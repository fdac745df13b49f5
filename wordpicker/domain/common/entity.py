"""
Identity for picker sessions.

A session keeps its id while its selection, phrases and panel change, and
the repository, the definition cache registry and the URLs all key on it.
"""

from abc import ABC
from dataclasses import dataclass
from typing import Generic, Self, TypeVar
from uuid import UUID, uuid4

from .value_object import ValueObject


@dataclass(frozen=True)
class EntityId(ValueObject):
    """
    UUID-backed identifier.

    Sessions are created in memory, so ids are random UUIDs generated on
    start and parsed back from URL path segments.
    """

    value: UUID

    def __str__(self) -> str:
        return str(self.value)

    @classmethod
    def generate(cls) -> Self:
        """Create a fresh random identifier."""
        return cls(uuid4())

    @classmethod
    def parse(cls, raw: str | UUID) -> Self:
        """Build an identifier from its string or UUID form."""
        if isinstance(raw, UUID):
            return cls(raw)
        return cls(UUID(raw))

    def to_primitive(self) -> str:
        """Convert to primitive for serialization."""
        return str(self.value)


IdType = TypeVar("IdType", bound=EntityId)


class Entity(ABC, Generic[IdType]):
    """Equal and hashed by id alone, so a mutated session is still the same session."""

    id: IdType

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, self.__class__):
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(id={self.id})"
