"""
Definition cache: asynchronous, deduplicated dictionary enrichment.

Lookups run as tasks on the running event loop. All writes to the cache
happen on that loop, and every write swaps in a new read-only mapping, so a
snapshot taken by a reader never changes underneath it.
"""

import asyncio
from collections.abc import Mapping
from types import MappingProxyType

import structlog

from wordpicker.application.picking.protocols.dictionary_service import (
    DictionaryServiceProtocol,
)
from wordpicker.constants import LOOKUP_ERROR_MESSAGE
from wordpicker.domain.common.value_objects import PickerSessionId
from wordpicker.domain.picking.entities.definition import DefinitionRecord
from wordpicker.domain.picking.services.tokenizer import normalize_word
from wordpicker.exceptions import DictionaryLookupError

logger = structlog.get_logger(__name__)


class DefinitionCache:
    """
    Populate-once mapping from normalized word to DefinitionRecord.

    A word gets a loading record the moment it is first requested and a
    single lookup; its terminal record (populated or failed) is never
    refreshed. clear() starts a new generation, and lookups issued before
    it are dropped when they complete.
    """

    def __init__(self, dictionary_service: DictionaryServiceProtocol) -> None:
        self._dictionary_service = dictionary_service
        self._records: Mapping[str, DefinitionRecord] = MappingProxyType({})
        self._generation = 0
        self._tasks: set[asyncio.Task[None]] = set()

    def snapshot(self) -> Mapping[str, DefinitionRecord]:
        """Return the current read-only mapping."""
        return self._records

    def get(self, word: str) -> DefinitionRecord | None:
        return self._records.get(normalize_word(word))

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and normalize_word(word) in self._records

    def __len__(self) -> int:
        return len(self._records)

    @property
    def pending_lookups(self) -> int:
        return len(self._tasks)

    def ensure_fetched(self, word: str) -> asyncio.Task[None] | None:
        """
        Make sure a lookup has been issued for word.

        Must be called from a running event loop. The loading record is
        inserted before this returns.

        Args:
            word: Raw or normalized word

        Returns:
            The lookup task if one was started, None if the word already has
            a record or normalizes to nothing
        """
        key = normalize_word(word)
        if not key or key in self._records:
            return None

        self._store(key, DefinitionRecord.pending(key))
        task = asyncio.get_running_loop().create_task(self._fetch(key, self._generation))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        logger.debug("definition_lookup_started", word=key, pending=self.pending_lookups)
        return task

    async def wait_idle(self) -> None:
        """Wait until every lookup started so far has finished."""
        while self._tasks:
            await asyncio.gather(*list(self._tasks))

    def clear(self) -> None:
        """Drop every record; in-flight lookups will be ignored."""
        self._generation += 1
        self._records = MappingProxyType({})

    async def _fetch(self, key: str, generation: int) -> None:
        try:
            entry = await self._dictionary_service.lookup(key)
            record = DefinitionRecord.populated(key, entry.phonetic, entry.meanings)
        except DictionaryLookupError as e:
            logger.info("definition_lookup_failed", word=key, reason=e.reason)
            record = DefinitionRecord.failed(key, LOOKUP_ERROR_MESSAGE)
        except Exception as e:
            logger.error("definition_lookup_crashed", word=key, error=str(e), exc_info=True)
            record = DefinitionRecord.failed(key, LOOKUP_ERROR_MESSAGE)

        if generation != self._generation:
            logger.debug("stale_definition_dropped", word=key)
            return

        self._store(key, record)
        logger.debug(
            "definition_lookup_finished",
            word=key,
            definition_count=len(record.definitions),
            failed=record.error is not None,
        )

    def _store(self, key: str, record: DefinitionRecord) -> None:
        updated = dict(self._records)
        updated[key] = record
        self._records = MappingProxyType(updated)


class DefinitionCacheRegistry:
    """Owns one DefinitionCache per picker session."""

    def __init__(self, dictionary_service: DictionaryServiceProtocol) -> None:
        self._dictionary_service = dictionary_service
        self._caches: dict[PickerSessionId, DefinitionCache] = {}

    def for_session(self, session_id: PickerSessionId) -> DefinitionCache:
        cache = self._caches.get(session_id)
        if cache is None:
            cache = DefinitionCache(self._dictionary_service)
            self._caches[session_id] = cache
        return cache

    def discard(self, session_id: PickerSessionId) -> None:
        cache = self._caches.pop(session_id, None)
        if cache is not None:
            cache.clear()
