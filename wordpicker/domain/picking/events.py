"""Domain events recorded by picker sessions."""

from dataclasses import dataclass

from wordpicker.domain.common.domain_event import DomainEvent
from wordpicker.domain.common.value_objects import PickerSessionId


@dataclass(frozen=True, kw_only=True)
class WordSelected(DomainEvent):
    session_id: PickerSessionId
    position: int


@dataclass(frozen=True, kw_only=True)
class WordDeselected(DomainEvent):
    session_id: PickerSessionId
    position: int


@dataclass(frozen=True, kw_only=True)
class PhraseMerged(DomainEvent):
    session_id: PickerSessionId
    positions: tuple[int, ...]


@dataclass(frozen=True, kw_only=True)
class PhraseDissolved(DomainEvent):
    session_id: PickerSessionId
    positions: tuple[int, ...]
