from dataclasses import dataclass, field
from typing import Protocol


@dataclass(frozen=True)
class DictionaryEntry:
    word: str
    phonetic: str | None = None
    meanings: list[list[str]] = field(default_factory=list)


class DictionaryServiceProtocol(Protocol):
    """
    Looks up a normalized word.

    Implementations raise DictionaryLookupError for transport failures,
    unknown words and malformed responses.
    """

    async def lookup(self, word: str) -> DictionaryEntry: ...

    async def close(self) -> None: ...
