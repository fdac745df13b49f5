from uuid import UUID, uuid4

import pytest

from wordpicker.domain.common.value_objects import PickerSessionId
from wordpicker.domain.picking.events import PhraseMerged


def test_generate_creates_unique_ids() -> None:
    assert PickerSessionId.generate() != PickerSessionId.generate()


def test_parse_string_and_uuid() -> None:
    raw = uuid4()
    assert PickerSessionId.parse(str(raw)) == PickerSessionId.parse(raw)
    assert PickerSessionId.parse(raw).to_primitive() == str(raw)


def test_parse_rejects_garbage() -> None:
    with pytest.raises(ValueError):
        PickerSessionId.parse("not-a-uuid")


def test_requires_uuid() -> None:
    with pytest.raises(TypeError):
        PickerSessionId("abc")  # type: ignore[arg-type]


def test_ids_are_hashable() -> None:
    """Test ids can key the in-memory session store."""
    raw = uuid4()
    store = {PickerSessionId(raw): "session"}
    assert store[PickerSessionId(raw)] == "session"


def test_event_serialization() -> None:
    session_id = PickerSessionId.generate()
    event = PhraseMerged(session_id=session_id, positions=(0, 2))

    data = event.to_dict()

    assert data["event_type"] == "PhraseMerged"
    assert data["session_id"] == str(session_id)
    assert data["positions"] == [0, 2]
    assert UUID(str(data["event_id"]))
    assert isinstance(data["occurred_at"], str)
