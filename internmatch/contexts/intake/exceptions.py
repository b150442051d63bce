"""Custom exceptions for the intake context."""

from pathlib import Path
from typing import Optional


class TextSourceError(Exception):
    """
    Base class for failures turning a document file into text.

    Attributes:
        message: Error description
        path: File that could not be read
    """

    def __init__(self, message: str, path: Optional[Path] = None):
        self.message = message
        self.path = path

        parts = [message]
        if path is not None:
            parts.append(f"File: {path}")

        super().__init__("\n".join(parts))


class UnsupportedFileTypeError(TextSourceError):
    """Raised for files that are neither plain text nor PDF."""

    pass


class TextExtractionError(TextSourceError):
    """
    Raised when a supported file cannot be decoded or parsed.

    Attributes:
        original_error: The underlying decoder or PDF library error
    """

    def __init__(
        self,
        message: str,
        path: Optional[Path] = None,
        original_error: Optional[Exception] = None,
    ):
        self.original_error = original_error
        if original_error is not None:
            message = f"{message}\nOriginal error: {original_error}"
        super().__init__(message, path)
