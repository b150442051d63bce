"""
Document text extraction for uploaded resumes and job descriptions.

Supported inputs:
    .txt  read as UTF-8
    .pdf  text extracted page by page with pdfplumber

Failures are raised as TextSourceError subclasses before any matching runs,
so the matcher only ever sees decoded strings.
"""

from pathlib import Path
from typing import Optional, Union

import pdfplumber

from internmatch.contexts.intake.exceptions import TextExtractionError, UnsupportedFileTypeError
from internmatch.contexts.intake.logger import _log_debug, _log_warning

TEXT_SUFFIXES = {".txt"}
PDF_SUFFIXES = {".pdf"}

UNSUPPORTED_MESSAGE = "Unsupported file type. Please upload a PDF or TXT file."


def read_text_file(path: Path) -> str:
    """Read a plain-text file as UTF-8."""
    try:
        return path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        _log_warning(f"Could not decode {path.name} as UTF-8")
        raise TextExtractionError("Text file is not valid UTF-8", path, e) from e


def extract_pdf_text(path: Path, max_pages: Optional[int] = None) -> str:
    """
    Extract text from a PDF, one line per page.

    Pages without a text layer contribute empty lines; the result is stripped.

    Args:
        path: PDF file
        max_pages: Read at most this many pages (None = all). Truncation is
                   logged as a warning.

    Raises:
        TextExtractionError: If pdfplumber cannot open or parse the file
    """
    try:
        with pdfplumber.open(path) as pdf:
            selected = pdf.pages
            if max_pages is not None and len(pdf.pages) > max_pages:
                _log_warning(
                    f"{path.name} has {len(pdf.pages)} pages; only the first {max_pages} were read"
                )
                selected = pdf.pages[:max_pages]
            pages = [page.extract_text() or "" for page in selected]
    except Exception as e:
        _log_warning(f"PDF extraction failed for {path.name}: {e}")
        raise TextExtractionError("Failed to read PDF file", path, e) from e

    _log_debug(f"Extracted {len(pages)} pages from {path.name}")
    return "\n".join(pages).strip()


def load_document_text(path: Union[str, Path]) -> str:
    """
    Load a resume or job description file as plain text.

    Args:
        path: Path to a .txt or .pdf file

    Returns:
        Decoded document text

    Raises:
        FileNotFoundError: If the file doesn't exist
        UnsupportedFileTypeError: If the suffix is not .txt or .pdf
        TextExtractionError: If decoding or PDF parsing fails
    """
    path = Path(path) if isinstance(path, str) else path
    if not path.exists():
        raise FileNotFoundError(f"Document not found: {path}")

    suffix = path.suffix.lower()
    if suffix in TEXT_SUFFIXES:
        text = read_text_file(path)
    elif suffix in PDF_SUFFIXES:
        text = extract_pdf_text(path)
    else:
        raise UnsupportedFileTypeError(UNSUPPORTED_MESSAGE, path)

    _log_debug(f"Loaded {len(text)} characters from {path.name}")
    return text
