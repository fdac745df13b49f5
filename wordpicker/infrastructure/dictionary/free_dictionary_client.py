"""Free Dictionary API client (https://dictionaryapi.dev)."""

from typing import Any
from urllib.parse import quote

import httpx
import structlog

from wordpicker.application.picking.protocols.dictionary_service import DictionaryEntry
from wordpicker.exceptions import DictionaryLookupError

logger = structlog.get_logger(__name__)


class FreeDictionaryClient:
    """HTTP client for the Free Dictionary API.

    One GET per word, no retries. Every failure surfaces as
    DictionaryLookupError so the caller can record it per word.
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self._client = httpx.AsyncClient(
            base_url=self.base_url, timeout=timeout, transport=transport
        )

    async def close(self) -> None:
        """Close the HTTP client."""
        await self._client.aclose()

    async def lookup(self, word: str) -> DictionaryEntry:
        """Fetch phonetic and grouped definitions for a normalized word."""
        try:
            response = await self._client.get(f"/{quote(word)}")
        except httpx.HTTPError as e:
            logger.warning("dictionary_request_failed", word=word, error=str(e))
            raise DictionaryLookupError(word, f"request failed: {e!s}") from e

        if response.status_code == 404:
            raise DictionaryLookupError(word, "not found")
        try:
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise DictionaryLookupError(word, f"status {response.status_code}") from e

        try:
            payload = response.json()
        except ValueError as e:
            raise DictionaryLookupError(word, "response is not JSON") from e

        return parse_entry(word, payload)


def parse_entry(word: str, payload: Any) -> DictionaryEntry:  # noqa: ANN401
    """
    Convert a Free Dictionary API payload into a DictionaryEntry.

    Only the first entry is used. Its phonetic comes from "phonetic",
    falling back to the first "phonetics" item's text.

    Raises:
        DictionaryLookupError: If the payload does not have the expected shape
    """
    if not isinstance(payload, list) or not payload or not isinstance(payload[0], dict):
        raise DictionaryLookupError(word, "malformed response")

    entry = payload[0]
    phonetic = entry.get("phonetic")
    if not isinstance(phonetic, str) or not phonetic:
        phonetic = None
        phonetics = entry.get("phonetics")
        if isinstance(phonetics, list) and phonetics and isinstance(phonetics[0], dict):
            text = phonetics[0].get("text")
            if isinstance(text, str) and text:
                phonetic = text

    meanings: list[list[str]] = []
    raw_meanings = entry.get("meanings")
    if not isinstance(raw_meanings, list):
        raw_meanings = []
    for meaning in raw_meanings:
        if not isinstance(meaning, dict):
            continue
        definitions = meaning.get("definitions")
        if not isinstance(definitions, list):
            continue
        # Unusable items stay as "" so per-meaning slicing keeps its positions
        meanings.append(
            [
                d["definition"]
                if isinstance(d, dict) and isinstance(d.get("definition"), str)
                else ""
                for d in definitions
            ]
        )

    return DictionaryEntry(word=word, phonetic=phonetic, meanings=meanings)
