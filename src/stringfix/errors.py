"""Exceptions raised for degenerate arguments.

Every string operation is total over its text input. Only the arguments
that steer an operation (delimiters, counts, positions) can be rejected.
"""

__docformat__ = 'google'

__all__ = [
    'StringFixError',
    'InvalidArgument',
    'OutOfRange'
]

class StringFixError(Exception):
    """Base exception for the package."""

    error_code: str = "STRINGFIX_ERROR"

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)

class InvalidArgument(StringFixError, ValueError):
    """An empty delimiter or a negative count."""

    error_code: str = "INVALID_ARGUMENT"

class OutOfRange(StringFixError, IndexError):
    """A character position outside the text."""

    error_code: str = "OUT_OF_RANGE"
