"""
Intake Context

Responsibilities:
- Reads uploaded resumes and job descriptions from TXT and PDF files
- Surfaces unreadable or unsupported files as distinct errors

Owns: File decoding and PDF text extraction
Never: Tokenizes or scores text
"""

from internmatch.contexts.intake.exceptions import (
    TextExtractionError,
    TextSourceError,
    UnsupportedFileTypeError,
)
from internmatch.contexts.intake.text_source import load_document_text

__all__ = [
    "TextExtractionError",
    "TextSourceError",
    "UnsupportedFileTypeError",
    "load_document_text",
]
