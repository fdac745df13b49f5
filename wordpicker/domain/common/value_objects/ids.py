from dataclasses import dataclass
from uuid import UUID

from ..entity import EntityId


@dataclass(frozen=True)
class PickerSessionId(EntityId):
    """Strongly-typed picker session identifier."""

    value: UUID

    def __post_init__(self) -> None:
        if not isinstance(self.value, UUID):
            raise TypeError("PickerSessionId must wrap a UUID")
