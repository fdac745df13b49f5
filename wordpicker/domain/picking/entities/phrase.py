"""Phrase value object and the disjoint phrase collection."""

from collections.abc import Iterator
from dataclasses import dataclass

from wordpicker.domain.common.exceptions import InvariantViolationError, ValidationError
from wordpicker.domain.common.value_object import ValueObject


@dataclass(frozen=True)
class Phrase(ValueObject):
    """
    A user-declared multi-word vocabulary item.

    Business Rules:
    - At least two token positions
    - Positions are unique and stored in ascending order
    - Positions need not be textually contiguous
    """

    positions: tuple[int, ...]

    def __post_init__(self) -> None:
        if len(self.positions) < 2:
            raise ValidationError(
                "A phrase needs at least two positions", field="positions", value=self.positions
            )
        if len(set(self.positions)) != len(self.positions):
            raise ValidationError(
                "Phrase positions must be unique", field="positions", value=self.positions
            )
        if list(self.positions) != sorted(self.positions):
            raise ValidationError(
                "Phrase positions must be ascending", field="positions", value=self.positions
            )

    @classmethod
    def of(cls, *positions: int) -> "Phrase":
        """Build a phrase from positions in any order."""
        return cls(positions=tuple(sorted(set(positions))))

    def contains(self, position: int) -> bool:
        return position in self.positions

    def extended_with(self, position: int) -> "Phrase":
        return Phrase.of(*self.positions, position)

    def union(self, other: "Phrase") -> "Phrase":
        return Phrase.of(*self.positions, *other.positions)


@dataclass(frozen=True)
class PhraseSet(ValueObject):
    """
    Ordered collection of pairwise disjoint phrases.

    Immutable: merge and removal return a new PhraseSet, so a reader always
    holds a consistent state. Order is creation order; a phrase touched by a
    merge moves to the end.
    """

    phrases: tuple[Phrase, ...] = ()

    def __post_init__(self) -> None:
        seen: set[int] = set()
        for phrase in self.phrases:
            if seen.intersection(phrase.positions):
                raise InvariantViolationError("PhraseSet", "phrases must be pairwise disjoint")
            seen.update(phrase.positions)

    def __iter__(self) -> Iterator[Phrase]:
        return iter(self.phrases)

    def __len__(self) -> int:
        return len(self.phrases)

    def find_phrase_containing(self, position: int) -> Phrase | None:
        """Return the phrase holding position, if any (linear scan)."""
        for phrase in self.phrases:
            if phrase.contains(position):
                return phrase
        return None

    def covers(self, position: int) -> bool:
        return self.find_phrase_containing(position) is not None

    def merge(self, first: int, second: int) -> "PhraseSet":
        """Merge two positions into one phrase, see combine()."""
        phrases, _ = self.combine(first, second)
        return phrases

    def combine(self, first: int, second: int) -> tuple["PhraseSet", Phrase]:
        """
        Merge two positions, or the phrases holding them, into one phrase.

        - Neither in a phrase: a new phrase {first, second}
        - Exactly one in a phrase: that phrase gains the other position
        - Both in different phrases: the union replaces both
        - Both in the same phrase: unchanged

        Args:
            first: Token position
            second: Token position

        Returns:
            The resulting phrase set and the phrase holding both positions

        Raises:
            ValidationError: If first and second are the same position
        """
        if first == second:
            raise ValidationError("Cannot merge a position with itself", field="positions", value=first)

        phrase_a = self.find_phrase_containing(first)
        phrase_b = self.find_phrase_containing(second)

        if phrase_a is not None and phrase_a == phrase_b:
            return self, phrase_a

        if phrase_a is not None and phrase_b is not None:
            merged = phrase_a.union(phrase_b)
        elif phrase_a is not None:
            merged = phrase_a.extended_with(second)
        elif phrase_b is not None:
            merged = phrase_b.extended_with(first)
        else:
            merged = Phrase.of(first, second)

        remaining = tuple(p for p in self.phrases if p != phrase_a and p != phrase_b)
        return PhraseSet(phrases=(*remaining, merged)), merged

    def without(self, phrase: Phrase) -> "PhraseSet":
        return PhraseSet(phrases=tuple(p for p in self.phrases if p != phrase))
