"""
Definition record for a normalized word.
"""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from wordpicker.constants import DEFINITIONS_PER_MEANING, MAX_DEFINITIONS
from wordpicker.domain.common.exceptions import DomainError
from wordpicker.domain.common.value_object import ValueObject


@dataclass(frozen=True)
class DefinitionRecord(ValueObject):
    """
    Dictionary enrichment for one normalized word.

    Business Rules:
    - Starts in the loading state
    - Moves exactly once to either populated or failed, both terminal
    - Holds at most MAX_DEFINITIONS definitions
    - A failed record has no definitions
    """

    word: str
    phonetic: str | None = None
    definitions: tuple[str, ...] = ()
    loading: bool = False
    error: str | None = None

    def __post_init__(self) -> None:
        """Validate invariants."""
        if not self.word:
            raise DomainError("Definition record needs a word")
        if len(self.definitions) > MAX_DEFINITIONS:
            raise DomainError(f"At most {MAX_DEFINITIONS} definitions are kept")
        if self.error is not None and (self.loading or self.definitions):
            raise DomainError("A failed record cannot be loading or hold definitions")

    @classmethod
    def pending(cls, word: str) -> "DefinitionRecord":
        """Create the placeholder inserted before a lookup is issued."""
        return cls(word=word, loading=True)

    @classmethod
    def populated(
        cls,
        word: str,
        phonetic: str | None,
        meanings: Iterable[Sequence[str]],
    ) -> "DefinitionRecord":
        """
        Create a terminal record from dictionary meaning groups.

        Takes up to DEFINITIONS_PER_MEANING definitions from each group, in
        order, and keeps the first MAX_DEFINITIONS of them.

        Args:
            word: Normalized word
            phonetic: Optional phonetic transcription
            meanings: Definition strings grouped by meaning

        Returns:
            Populated DefinitionRecord
        """
        definitions: list[str] = []
        for group in meanings:
            definitions.extend(d for d in group[:DEFINITIONS_PER_MEANING] if d)
        return cls(
            word=word,
            phonetic=phonetic or None,
            definitions=tuple(definitions[:MAX_DEFINITIONS]),
            loading=False,
        )

    @classmethod
    def failed(cls, word: str, error: str) -> "DefinitionRecord":
        """Create a terminal error record."""
        return cls(word=word, loading=False, error=error)
