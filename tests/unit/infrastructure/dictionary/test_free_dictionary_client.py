"""Tests for FreeDictionaryClient."""

import httpx
import pytest

from wordpicker.domain.picking.entities.definition import DefinitionRecord
from wordpicker.exceptions import DictionaryLookupError
from wordpicker.infrastructure.dictionary.free_dictionary_client import (
    FreeDictionaryClient,
    parse_entry,
)

BASE_URL = "https://api.dictionaryapi.dev/api/v2/entries/en"

APPLE_PAYLOAD = [
    {
        "word": "apple",
        "phonetic": "/ˈæp.əl/",
        "phonetics": [{"text": "/ˈæpəl/"}],
        "meanings": [
            {
                "partOfSpeech": "noun",
                "definitions": [
                    {"definition": "A common, round fruit."},
                    {"definition": "The tree bearing it."},
                    {"definition": "Any of various similar fruits."},
                ],
            },
            {
                "partOfSpeech": "verb",
                "definitions": [
                    {"definition": "To pick apples."},
                    {"definition": "Unused second verb sense."},
                ],
            },
        ],
    },
    {"word": "apple", "meanings": [{"definitions": [{"definition": "Ignored entry."}]}]},
]


def _client(handler) -> FreeDictionaryClient:
    return FreeDictionaryClient(base_url=BASE_URL, transport=httpx.MockTransport(handler))


@pytest.mark.asyncio
async def test_lookup_parses_first_entry() -> None:
    requested: list[str] = []

    def handler(request: httpx.Request) -> httpx.Response:
        requested.append(str(request.url))
        return httpx.Response(200, json=APPLE_PAYLOAD)

    client = _client(handler)
    entry = await client.lookup("apple")
    await client.close()

    assert requested == [f"{BASE_URL}/apple"]
    assert entry.phonetic == "/ˈæp.əl/"
    assert entry.meanings == [
        ["A common, round fruit.", "The tree bearing it.", "Any of various similar fruits."],
        ["To pick apples.", "Unused second verb sense."],
    ]


@pytest.mark.asyncio
async def test_lookup_not_found() -> None:
    client = _client(lambda request: httpx.Response(404, json={"title": "No Definitions Found"}))

    with pytest.raises(DictionaryLookupError) as exc_info:
        await client.lookup("zzyzx")
    await client.close()

    assert exc_info.value.reason == "not found"


@pytest.mark.asyncio
async def test_lookup_server_error() -> None:
    client = _client(lambda request: httpx.Response(503))

    with pytest.raises(DictionaryLookupError) as exc_info:
        await client.lookup("apple")
    await client.close()

    assert exc_info.value.reason == "status 503"


@pytest.mark.asyncio
async def test_lookup_transport_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    client = _client(handler)

    with pytest.raises(DictionaryLookupError) as exc_info:
        await client.lookup("apple")
    await client.close()

    assert exc_info.value.reason.startswith("request failed")


@pytest.mark.asyncio
async def test_lookup_non_json_body() -> None:
    client = _client(lambda request: httpx.Response(200, text="<html>oops</html>"))

    with pytest.raises(DictionaryLookupError) as exc_info:
        await client.lookup("apple")
    await client.close()

    assert exc_info.value.reason == "response is not JSON"


class TestParseEntry:
    def test_phonetic_falls_back_to_phonetics_list(self) -> None:
        entry = parse_entry("run", [{"phonetics": [{"text": "/rʌn/"}], "meanings": []}])
        assert entry.phonetic == "/rʌn/"

    def test_missing_phonetic(self) -> None:
        entry = parse_entry("run", [{"phonetics": [], "meanings": []}])
        assert entry.phonetic is None
        assert entry.meanings == []

    @pytest.mark.parametrize("payload", [{}, [], ["text"], None])
    def test_malformed_payload(self, payload: object) -> None:
        with pytest.raises(DictionaryLookupError) as exc_info:
            parse_entry("run", payload)
        assert exc_info.value.reason == "malformed response"

    def test_unusable_definitions_keep_their_slot(self) -> None:
        payload = [
            {
                "meanings": [
                    {"definitions": [{"example": "no definition"}, {"definition": "Second."}]},
                    {"definitions": [{"definition": "Third."}]},
                    "not a meaning",
                ]
            }
        ]

        entry = parse_entry("run", payload)

        assert entry.meanings == [["", "Second."], ["Third."]]

    def test_entry_feeds_definition_record(self) -> None:
        entry = parse_entry("apple", APPLE_PAYLOAD)

        record = DefinitionRecord.populated(entry.word, entry.phonetic, entry.meanings)

        assert record.definitions == (
            "A common, round fruit.",
            "The tree bearing it.",
            "To pick apples.",
        )
