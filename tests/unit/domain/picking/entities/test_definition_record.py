import pytest

from wordpicker.domain.common.exceptions import DomainError
from wordpicker.domain.picking.entities.definition import DefinitionRecord


def test_pending_record_is_loading() -> None:
    record = DefinitionRecord.pending("apple")

    assert record.loading
    assert record.error is None
    assert record.definitions == ()


def test_populated_takes_two_per_meaning_and_three_overall() -> None:
    """Test definitions are picked per meaning group, then capped."""
    record = DefinitionRecord.populated(
        "run",
        "/rʌn/",
        [["a1", "a2", "a3"], ["b1", "b2"], ["c1"]],
    )

    assert record.definitions == ("a1", "a2", "b1")
    assert record.phonetic == "/rʌn/"
    assert not record.loading
    assert record.error is None


def test_populated_skips_empty_definitions() -> None:
    record = DefinitionRecord.populated("run", None, [["", "a2", "a3"], ["b1"]])

    assert record.definitions == ("a2", "b1")


def test_populated_with_no_meanings() -> None:
    record = DefinitionRecord.populated("run", "", [])

    assert record.definitions == ()
    assert record.phonetic is None
    assert not record.loading


def test_failed_record() -> None:
    record = DefinitionRecord.failed("zzyzx", "No definition found")

    assert record.error == "No definition found"
    assert record.definitions == ()
    assert not record.loading


def test_failed_record_cannot_hold_definitions() -> None:
    with pytest.raises(DomainError):
        DefinitionRecord(word="zzyzx", definitions=("x",), error="No definition found")


def test_record_caps_definitions() -> None:
    with pytest.raises(DomainError):
        DefinitionRecord(word="run", definitions=("a", "b", "c", "d"))


def test_record_needs_word() -> None:
    with pytest.raises(DomainError):
        DefinitionRecord(word="")
