"""Pytest configuration and fixtures."""

from collections.abc import Generator
from typing import Any

import pytest
from dependency_injector import providers
from fastapi.testclient import TestClient

from wordpicker.application.picking.protocols.dictionary_service import DictionaryEntry
from wordpicker.application.picking.services.definition_cache import DefinitionCacheRegistry
from wordpicker.core import container
from wordpicker.exceptions import DictionaryLookupError
from wordpicker.infrastructure.picking.repositories.picker_session_repository import (
    InMemoryPickerSessionRepository,
)
from wordpicker.main import app


class FakeDictionaryService:
    """Dictionary service answering from a fixed table and recording calls."""

    def __init__(self, entries: dict[str, DictionaryEntry] | None = None) -> None:
        self.entries = entries or {}
        self.calls: list[str] = []
        self.closed = False

    async def lookup(self, word: str) -> DictionaryEntry:
        self.calls.append(word)
        entry = self.entries.get(word)
        if entry is None:
            raise DictionaryLookupError(word, "not found")
        return entry

    async def close(self) -> None:
        self.closed = True


def make_entry(word: str, *meanings: list[str], phonetic: str | None = None) -> DictionaryEntry:
    return DictionaryEntry(word=word, phonetic=phonetic, meanings=[list(m) for m in meanings])


@pytest.fixture
def dictionary_service() -> FakeDictionaryService:
    """Fake dictionary knowing a handful of words."""
    return FakeDictionaryService(
        {
            "apple": make_entry(
                "apple",
                ["A round fruit.", "The tree bearing it.", "A third sense."],
                ["A tech company."],
                phonetic="/ˈæp.əl/",
            ),
            "fast": make_entry("fast", ["Moving quickly."], phonetic="/fɑːst/"),
            "driving": make_entry("driving", ["Operating a vehicle."]),
        }
    )


@pytest.fixture
def client(dictionary_service: FakeDictionaryService) -> Generator[TestClient, Any, None]:
    """Create a test client with a fake dictionary and empty session store."""
    container.dictionary_service.override(providers.Object(dictionary_service))
    container.picker_session_repository.override(
        providers.Singleton(InMemoryPickerSessionRepository)
    )
    container.definition_cache_registry.override(
        providers.Singleton(DefinitionCacheRegistry, dictionary_service=dictionary_service)
    )

    with TestClient(app) as test_client:
        yield test_client

    container.reset_override()


def start_session(client: TestClient, text: str) -> dict[str, Any]:
    """Start a picker session through the API and return its state."""
    response = client.post("/api/v1/picker/sessions", json={"text": text})
    assert response.status_code == 201, response.text
    return response.json()
