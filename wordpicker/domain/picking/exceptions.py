"""Picking module domain exceptions."""

from wordpicker.domain.common.exceptions import DomainError


class EmptyArticleError(DomainError):
    """Raised when the pasted article is empty or whitespace only."""

    def __init__(self) -> None:
        super().__init__("Please paste an article first")


class InvalidPositionError(DomainError):
    """Raised when a token position cannot take part in an operation."""

    def __init__(self, position: int, reason: str) -> None:
        super().__init__(f"Token {position} is {reason}", {"position": position})
        self.position = position
        self.reason = reason
