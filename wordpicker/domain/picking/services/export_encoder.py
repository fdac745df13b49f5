"""Domain service encoding a selection into the export document."""

from collections.abc import Sequence
from dataclasses import dataclass
from datetime import UTC, datetime

from wordpicker.constants import EXPORT_FILENAME_PREFIX
from wordpicker.domain.picking.entities.phrase import PhraseSet
from wordpicker.domain.picking.entities.selection import SelectionSet
from wordpicker.domain.picking.entities.token import Token
from wordpicker.domain.picking.services.tokenizer import normalize_word


@dataclass(frozen=True)
class ExportDocument:
    """Selected words and phrases at a point in time."""

    exported_at: datetime
    words: tuple[str, ...]
    phrases: tuple[str, ...]

    def to_json(self) -> dict[str, object]:
        """Serialize to the export JSON shape."""
        return {
            "exportedAt": _isoformat(self.exported_at),
            "words": list(self.words),
            "phrases": list(self.phrases),
        }

    @property
    def filename(self) -> str:
        return f"{EXPORT_FILENAME_PREFIX}-{self.exported_at.date().isoformat()}.json"


def _isoformat(moment: datetime) -> str:
    """ISO-8601 in UTC with millisecond precision and a Z suffix."""
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=UTC)
    utc = moment.astimezone(UTC)
    return utc.isoformat(timespec="milliseconds").replace("+00:00", "Z")


class ExportEncoder:
    """Stateless domain service building export documents."""

    @staticmethod
    def encode(
        tokens: Sequence[Token],
        selection: SelectionSet,
        phrases: PhraseSet,
        exported_at: datetime | None = None,
    ) -> ExportDocument:
        """
        Build the export document for the current picks.

        Words are the normalized texts of selected positions outside every
        phrase, deduplicated and sorted. Phrases keep their creation order
        and raw token text, joined by a single space.

        Args:
            tokens: Full token sequence of the article
            selection: Currently selected positions
            phrases: Current phrases
            exported_at: Export moment, defaults to now

        Returns:
            ExportDocument
        """
        words: set[str] = set()
        for position in selection:
            if phrases.covers(position):
                continue
            word = normalize_word(tokens[position].text)
            if word:
                words.add(word)

        phrase_texts = tuple(
            " ".join(tokens[p].text for p in phrase.positions) for phrase in phrases
        )

        return ExportDocument(
            exported_at=exported_at or datetime.now(UTC),
            words=tuple(sorted(words)),
            phrases=phrase_texts,
        )
