"""
Error types shared across the BGG picker package.
"""

from typing import Optional


class BGGPickerError(Exception):
    """Base class for failures while acquiring or decoding a collection."""


class TransportError(BGGPickerError):
    """The request to BGG could not be completed (connection, DNS, timeout...)."""

    def __init__(self, owner: str, cause: Optional[BaseException] = None):
        self.owner = owner
        self.cause = cause
        message = f"Could not reach BGG for '{owner}'"
        if cause is not None:
            message = f"{message}: {cause}"
        super().__init__(message)


class DecodeError(BGGPickerError):
    """The collection document is not well-formed or is not an <items> document."""
