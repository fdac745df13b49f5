"""
Article tokenizer.

This is a pure domain service with no infrastructure dependencies.
"""

import re

from wordpicker.domain.picking.entities.token import Token, TokenKind

# Newlines, whitespace runs and punctuation runs are kept as their own tokens.
# The capturing group makes re.split return the separators as well.
_SPLIT_PATTERN = re.compile(r"(\n|\s+|[.,!?;:'\"()\[\]{}—–\-]+)")

_LETTER_PATTERN = re.compile(r"[a-zA-Z]")
_NON_LETTER_PATTERN = re.compile(r"[^a-z]")


def normalize_word(text: str) -> str:
    """
    Normalize token text into a dictionary/cache key.

    Lowercases and strips every character that is not an ASCII letter, so
    "Running!" becomes "running". May return an empty string.
    """
    return _NON_LETTER_PATTERN.sub("", text.lower())


def classify(text: str) -> TokenKind:
    if text == "\n":
        return TokenKind.NEWLINE
    if _LETTER_PATTERN.search(text):
        return TokenKind.WORD
    return TokenKind.OTHER


class ArticleTokenizer:
    """Stateless domain service splitting article text into typed tokens."""

    @staticmethod
    def tokenize(text: str) -> list[Token]:
        """
        Split text into an ordered list of tokens.

        Concatenating the text of the returned tokens reproduces the input
        exactly. Any string produces a valid, possibly empty, list.

        Args:
            text: Raw article text

        Returns:
            Tokens in emission order, positions 0..n-1
        """
        parts = [part for part in _SPLIT_PATTERN.split(text) if part]
        return [
            Token(text=part, position=position, kind=classify(part))
            for position, part in enumerate(parts)
        ]
