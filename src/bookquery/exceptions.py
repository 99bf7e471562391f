class BookQueryError(Exception):
    """Base class for errors raised while answering a book query."""


class InvalidInput(BookQueryError):
    """A path parameter is malformed or out of range."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class StoreFailure(BookQueryError):
    """The record store failed or timed out. Detail stays server-side."""

    def __init__(self, operation: str) -> None:
        super().__init__(f"Store operation failed: {operation}")
        self.operation = operation
