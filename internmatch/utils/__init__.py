"""
Shared utilities for internmatch.

Common functionality used across contexts:
- Logger setup with provenance tracking
- Plain-text report formatting
"""

from internmatch.utils.logger import log_provenance, setup_logger
from internmatch.utils.report_formatter import Column, TableFormatter, format_percentage

__all__ = ["Column", "TableFormatter", "format_percentage", "log_provenance", "setup_logger"]
