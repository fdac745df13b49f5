"""Tests for InMemoryPickerSessionRepository."""

from datetime import UTC, datetime, timedelta

from wordpicker.domain.picking.entities.picker_session import PickerSession
from wordpicker.domain.picking.services.tokenizer import ArticleTokenizer
from wordpicker.infrastructure.picking.repositories.picker_session_repository import (
    InMemoryPickerSessionRepository,
)

START = datetime(2024, 5, 1, 12, 0, tzinfo=UTC)


def _make_session(minutes: int) -> PickerSession:
    session = PickerSession.start("fast and furious", ArticleTokenizer())
    session.created_at = START + timedelta(minutes=minutes)
    return session


class TestInMemoryPickerSessionRepository:
    def test_save_find_delete(self) -> None:
        repository = InMemoryPickerSessionRepository()
        session = repository.save(_make_session(0))

        assert repository.find_by_id(session.id) is session
        assert repository.delete(session.id)
        assert not repository.delete(session.id)
        assert repository.find_by_id(session.id) is None

    def test_unbounded_repository_never_evicts(self) -> None:
        repository = InMemoryPickerSessionRepository()
        for minutes in range(5):
            repository.save(_make_session(minutes))

        assert repository.evict_overflow() == []
        assert repository.count() == 5

    def test_evicts_oldest_by_creation_time(self) -> None:
        repository = InMemoryPickerSessionRepository(max_sessions=2)
        newest = repository.save(_make_session(30))
        oldest = repository.save(_make_session(0))
        middle = repository.save(_make_session(10))

        evicted = repository.evict_overflow()

        assert evicted == [oldest.id]
        assert repository.count() == 2
        assert repository.find_by_id(oldest.id) is None
        assert repository.find_by_id(middle.id) is middle
        assert repository.find_by_id(newest.id) is newest

    def test_evicts_down_to_cap(self) -> None:
        repository = InMemoryPickerSessionRepository(max_sessions=1)
        sessions = [repository.save(_make_session(minutes)) for minutes in range(4)]

        evicted = repository.evict_overflow()

        assert evicted == [s.id for s in sessions[:3]]
        assert repository.find_by_id(sessions[3].id) is sessions[3]

    def test_equal_timestamps_evict_in_insertion_order(self) -> None:
        repository = InMemoryPickerSessionRepository(max_sessions=1)
        first = repository.save(_make_session(0))
        second = repository.save(_make_session(0))

        assert repository.evict_overflow() == [first.id]
        assert repository.find_by_id(second.id) is second
