"""
internmatch - Resume matching for the internship application tracker

Compares a candidate resume against a job description by keyword overlap and
produces a match score, matched/missing keyword lists and improvement advice.

Architecture:
- Intake Context: Turns uploaded resume files (TXT, PDF) into plain text
- Matching Context: Keyword extraction, overlap scoring and suggestions
"""

__version__ = "0.1.0"

from loguru import logger

# Silent when used as a library; setup_logger() re-enables output
logger.disable("internmatch")
