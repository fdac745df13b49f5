"""Protocol for PickerSession repository operations."""

from typing import Protocol

from wordpicker.domain.common.value_objects import PickerSessionId
from wordpicker.domain.picking.entities.picker_session import PickerSession


class PickerSessionRepositoryProtocol(Protocol):
    """Protocol defining the interface for PickerSession storage."""

    def find_by_id(self, session_id: PickerSessionId) -> PickerSession | None: ...

    def save(self, session: PickerSession) -> PickerSession: ...

    def delete(self, session_id: PickerSessionId) -> bool: ...

    def count(self) -> int: ...

    def evict_overflow(self) -> list[PickerSessionId]: ...
