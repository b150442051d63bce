"""
Matching context logger.

Provides logging interface for matching context with automatic [match] prefix.
All matching modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path
from typing import Optional

from loguru import logger

from internmatch.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[match]"


def setup_matching_logger(
    log_dir: Optional[Path] = None, resume_name: str = "", verbose: bool = False
) -> Optional[Path]:
    """
    Setup logger for a matching session.

    Args:
        log_dir: Directory for this matching session (None = console only)
        resume_name: Resume being matched, recorded in the provenance header
        verbose: Show debug output on the console

    Returns:
        Path to log file, or None when logging to console only
    """
    return _setup_logger(
        context_name="match",
        log_dir=log_dir,
        extra_provenance={"Resume": resume_name} if resume_name else None,
        verbose=verbose,
    )


def _log_debug(message: str) -> None:
    """Log debug message with [match] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


def log_match_result(result, elapsed_time: float) -> None:
    """
    Log a finished match.

    Args:
        result: MatchResult from compute_match()
        elapsed_time: Time taken in seconds
    """
    _log_debug(f"Match score: {result.score}% ({elapsed_time * 1000:.1f}ms)")
    _log_debug(f"  Matched ({len(result.matched_keywords)}): {', '.join(result.matched_keywords)}")
    _log_debug(f"  Missing ({len(result.missing_keywords)}): {', '.join(result.missing_keywords)}")
