"""
Errors raised by the library itself.

These signal misuse of the API (bad status codes, wrapping a value
that is not an exception, unsafe header values). They are never
normalized into HTTP errors.
"""

from typing import Any


class InvalidArgumentError(ValueError):
    """Raised when an argument cannot be turned into an HTTP error.

    Attributes:
        value: The rejected input, kept as-is.
    """

    def __init__(self, message: str, value: Any = None) -> None:
        self.message = message
        self.value = value
        super().__init__(self.message)
