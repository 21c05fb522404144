"""Domain error types."""


class PersistenceError(RuntimeError):
    """Raised when the durable store cannot read or write a record."""


class ContentUnavailableError(LookupError):
    """Raised when no source for a card could be loaded."""

    def __init__(self, key: str) -> None:
        super().__init__(f"No card content available for {key!r}")
        self.key = key
