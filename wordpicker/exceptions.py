"""Custom exception hierarchy for the wordpicker application."""


class WordPickerError(Exception):
    """Base exception for all wordpicker errors."""

    def __init__(self, message: str, status_code: int = 500) -> None:
        """Initialize exception with message and optional status code."""
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)


class NotFoundError(WordPickerError):
    """Resource not found error."""

    def __init__(self, message: str) -> None:
        """Initialize with message and 404 status code."""
        super().__init__(message, status_code=404)


class SessionNotFoundError(NotFoundError):
    """Picker session not found error."""

    def __init__(self, session_id: object | None = None, *, message: str | None = None) -> None:
        """Initialize with session ID or custom message."""
        self.session_id = session_id
        if message:
            super().__init__(message)
        elif session_id is not None:
            super().__init__(f"Picker session with id {session_id} not found")
        else:
            super().__init__("Picker session not found")


class ValidationError(WordPickerError):
    """Validation error."""

    def __init__(self, message: str, status_code: int = 400) -> None:
        super().__init__(message, status_code=status_code)


class ArticleTooLongError(ValidationError):
    """Pasted article exceeds the configured length cap."""

    def __init__(self, length: int, limit: int) -> None:
        """Initialize with the article length and the configured limit."""
        self.length = length
        self.limit = limit
        super().__init__(f"Article is {length} characters long, limit is {limit}")


class ServiceError(WordPickerError):
    """Service layer error."""


class DictionaryLookupError(ServiceError):
    """Dictionary service could not provide a definition for a word."""

    def __init__(self, word: str, reason: str) -> None:
        """Initialize with the looked up word and reason for failure."""
        self.word = word
        self.reason = reason
        super().__init__(f"Lookup of '{word}' failed: {reason}", status_code=502)
