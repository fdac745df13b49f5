"""
PickerSession aggregate: one pasted article being picked through.
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime

from wordpicker.domain.common.aggregate_root import AggregateRoot
from wordpicker.domain.common.value_objects import PickerSessionId
from wordpicker.domain.picking.entities.panel import PanelState
from wordpicker.domain.picking.entities.phrase import Phrase, PhraseSet
from wordpicker.domain.picking.entities.selection import SelectionSet
from wordpicker.domain.picking.entities.token import Token
from wordpicker.domain.picking.events import (
    PhraseDissolved,
    PhraseMerged,
    WordDeselected,
    WordSelected,
)
from wordpicker.domain.picking.exceptions import EmptyArticleError, InvalidPositionError
from wordpicker.domain.picking.services.tokenizer import ArticleTokenizer, normalize_word


@dataclass(eq=False)
class PickerSession(AggregateRoot[PickerSessionId]):
    """
    Tokens, selection, phrases and panel state for one article.

    Business Rules:
    - The article text is not blank
    - Tokens are fixed at creation; positions never change
    - Only WORD tokens can be selected or grouped into phrases
    - Phrases are pairwise disjoint
    - A selected position covered by a phrase counts as part of the phrase,
      not as a single word
    """

    id: PickerSessionId
    text: str
    tokens: tuple[Token, ...]
    selection: SelectionSet = field(default_factory=SelectionSet)
    phrases: PhraseSet = field(default_factory=PhraseSet)
    panel: PanelState = field(default_factory=PanelState)
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    @classmethod
    def start(cls, text: str, tokenizer: ArticleTokenizer) -> "PickerSession":
        """
        Tokenize an article and open a fresh session for it.

        Args:
            text: Pasted article text
            tokenizer: Tokenizer service

        Raises:
            EmptyArticleError: If text is empty or whitespace only
        """
        if not text or not text.strip():
            raise EmptyArticleError()
        return cls(
            id=PickerSessionId.generate(),
            text=text,
            tokens=tuple(tokenizer.tokenize(text)),
        )

    def token_at(self, position: int) -> Token | None:
        if 0 <= position < len(self.tokens):
            return self.tokens[position]
        return None

    def word_tokens(self) -> list[Token]:
        return [token for token in self.tokens if token.is_word]

    def is_selected(self, position: int) -> bool:
        return position in self.selection

    def toggle(self, position: int) -> bool:
        """
        Toggle a word token.

        Clicking any member of a phrase deselects every member and removes
        the phrase. Non-word and out-of-range positions are ignored.

        Returns:
            True if the state changed
        """
        token = self.token_at(position)
        if token is None or not token.is_word:
            return False

        phrase = self.phrases.find_phrase_containing(position)
        if phrase is not None:
            self.selection = self.selection.without_positions(phrase.positions)
            self.phrases = self.phrases.without(phrase)
            self._record_event(PhraseDissolved(session_id=self.id, positions=phrase.positions))
        elif self.is_selected(position):
            self.selection = self.selection.without_positions([position])
            self._record_event(WordDeselected(session_id=self.id, position=position))
        else:
            self.selection = self.selection.with_position(position)
            self._record_event(WordSelected(session_id=self.id, position=position))
        return True

    def merge(self, first: int, second: int) -> Phrase:
        """
        Merge two selected word positions (or their phrases) into one phrase.

        Merging two members of the same phrase leaves the phrases unchanged.

        Returns:
            The phrase that now holds both positions

        Raises:
            InvalidPositionError: If a position is not a selected WORD token
        """
        for position in (first, second):
            token = self.token_at(position)
            if token is None or not token.is_word:
                raise InvalidPositionError(position, "not a word token")
            if not self.is_selected(position):
                raise InvalidPositionError(position, "not selected")

        phrases, merged = self.phrases.combine(first, second)
        if phrases is not self.phrases:
            self.phrases = phrases
            self._record_event(PhraseMerged(session_id=self.id, positions=merged.positions))
        return merged

    def effective_positions(self) -> list[int]:
        """Selected positions not absorbed into a phrase, in selection order."""
        return [p for p in self.selection if not self.phrases.covers(p)]

    def effective_words(self) -> list[str]:
        """Normalized, deduplicated single-word selections in selection order."""
        words: list[str] = []
        for position in self.effective_positions():
            word = normalize_word(self.tokens[position].text)
            if word and word not in words:
                words.append(word)
        return words

    def phrase_text(self, phrase: Phrase) -> str:
        return " ".join(self.tokens[p].text for p in phrase.positions)

    def phrase_texts(self) -> list[str]:
        return [self.phrase_text(phrase) for phrase in self.phrases]

    def has_picks(self) -> bool:
        return bool(self.effective_words() or len(self.phrases))
