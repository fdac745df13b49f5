"""Token value object: one lexical unit of a pasted article."""

from dataclasses import dataclass
from enum import StrEnum

from wordpicker.domain.common.exceptions import ValidationError
from wordpicker.domain.common.value_object import ValueObject


class TokenKind(StrEnum):
    WORD = "word"
    NEWLINE = "newline"
    OTHER = "other"


@dataclass(frozen=True)
class Token(ValueObject):
    """
    A word, punctuation/whitespace run or newline with a stable position.

    The position is the emission index from a single tokenization pass and
    is never compacted; every other component refers to tokens by position.
    """

    text: str
    position: int
    kind: TokenKind

    def __post_init__(self) -> None:
        if not self.text:
            raise ValidationError("Token text cannot be empty", field="text")
        if self.position < 0:
            raise ValidationError(
                "Token position must be non-negative", field="position", value=self.position
            )

    @property
    def is_word(self) -> bool:
        return self.kind is TokenKind.WORD
