"""Domain service finding selected word pairs that can be merged."""

from collections.abc import Sequence

from wordpicker.domain.picking.entities.phrase import PhraseSet
from wordpicker.domain.picking.entities.selection import SelectionSet
from wordpicker.domain.picking.entities.token import Token


class AdjacencyScanner:
    """Stateless domain service computing merge candidates."""

    @staticmethod
    def find_adjacent_pairs(
        tokens: Sequence[Token],
        selection: SelectionSet,
        phrases: PhraseSet,
    ) -> list[tuple[int, int]]:
        """
        Find consecutive selected word pairs not already in the same phrase.

        Non-word tokens are skipped entirely, so two words separated only
        by whitespace or punctuation are adjacent. An unselected word in
        between breaks adjacency.

        Args:
            tokens: Full token sequence of the article
            selection: Currently selected positions
            phrases: Current phrases

        Returns:
            List of (position, next_position) pairs in text order
        """
        words = [token for token in tokens if token.is_word]
        pairs: list[tuple[int, int]] = []

        for current, following in zip(words, words[1:]):
            if current.position not in selection or following.position not in selection:
                continue
            current_phrase = phrases.find_phrase_containing(current.position)
            following_phrase = phrases.find_phrase_containing(following.position)
            # Only pairs already inside one phrase are excluded
            if current_phrase is None or current_phrase != following_phrase:
                pairs.append((current.position, following.position))

        return pairs
