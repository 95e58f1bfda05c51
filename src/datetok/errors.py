"""Custom exception hierarchy for datetok tokenization and translation errors."""


class DateTokError(Exception):
    """Base exception for all datetok errors."""


class ReadFailure(DateTokError):
    """Raised when the input source fails for a reason other than end of input."""

    def __init__(self, message: str, *, position: int | None = None) -> None:
        """Initialize with the byte offset at which reading failed, if known."""
        if position is not None:
            message = f"{message} (position: {position})"
        super().__init__(message)
        self.position = position


class BadFormat(DateTokError):
    """Raised when a format pattern cannot be tokenized for translation."""

    def __init__(self, message: str, *, pattern: str | None = None) -> None:
        extra = " "
        if pattern:
            extra += f"(pattern: {pattern!r}) "
        super().__init__((message + extra).rstrip())
        self.pattern = pattern


class PredicateError(DateTokError):
    """Raised when an adjacency predicate cannot be resolved."""

    def __init__(
        self,
        message: str,
        *,
        invalid_name: str | None = None,
        available: list[str] | None = None,
    ) -> None:
        extra = " "
        if invalid_name:
            extra += f"(available: {available}) (got {invalid_name}) "
        super().__init__((message + extra).rstrip())
        self.invalid_name = invalid_name
        self.available = available


class DictionaryError(DateTokError):
    """Raised when a token dictionary cannot be resolved or is malformed."""

    def __init__(
        self,
        message: str,
        *,
        invalid_name: str | None = None,
        available: list[str] | None = None,
        invalid_key: object | None = None,
        invalid_value: object | None = None,
    ) -> None:
        """
        Initialize DictionaryError with lookup details.

        Args:
            message: Error message.
            invalid_name: The dictionary name that failed to resolve.
            available: Names of the registered dictionaries.
            invalid_key: A dictionary key that is not a string.
            invalid_value: A dictionary value that is not a string.
        """
        extra = " "
        if invalid_name:
            extra += f"(available: {available}) (got {invalid_name}) "
        if invalid_key is not None:
            extra += f"(invalid key: {invalid_key!r}) "
        if invalid_value is not None:
            extra += f"(invalid value: {invalid_value!r}) "
        super().__init__((message + extra).rstrip())
        self.invalid_name = invalid_name
        self.available = available
        self.invalid_key = invalid_key
        self.invalid_value = invalid_value
