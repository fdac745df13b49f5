"""In-memory repository for PickerSession aggregates."""

import structlog

from wordpicker.domain.common.value_objects import PickerSessionId
from wordpicker.domain.picking.entities.picker_session import PickerSession

logger = structlog.get_logger(__name__)


class InMemoryPickerSessionRepository:
    """
    Keeps picker sessions for the lifetime of the process.

    Sessions are never persisted; a restart forgets every article. At most
    max_sessions are kept, older ones are handed back by evict_overflow().
    """

    def __init__(self, max_sessions: int | None = None) -> None:
        self._sessions: dict[PickerSessionId, PickerSession] = {}
        self.max_sessions = max_sessions

    def find_by_id(self, session_id: PickerSessionId) -> PickerSession | None:
        return self._sessions.get(session_id)

    def save(self, session: PickerSession) -> PickerSession:
        self._sessions[session.id] = session
        return session

    def delete(self, session_id: PickerSessionId) -> bool:
        removed = self._sessions.pop(session_id, None)
        if removed is None:
            return False
        logger.debug("picker_session_deleted", session_id=str(session_id))
        return True

    def count(self) -> int:
        return len(self._sessions)

    def evict_overflow(self) -> list[PickerSessionId]:
        """
        Drop the oldest sessions until the store is within its cap.

        Returns:
            Ids of the evicted sessions, oldest first
        """
        evicted: list[PickerSessionId] = []
        if self.max_sessions is None:
            return evicted

        while len(self._sessions) > self.max_sessions:
            # min() keeps insertion order among equal timestamps
            oldest = min(self._sessions.values(), key=lambda s: s.created_at)
            del self._sessions[oldest.id]
            evicted.append(oldest.id)

        if evicted:
            logger.info(
                "picker_sessions_evicted",
                evicted_count=len(evicted),
                remaining=len(self._sessions),
            )
        return evicted
