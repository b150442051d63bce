"""
Improvement suggestions and score bands.

Suggestions are a pure function of the score and the missing keywords:
exactly one tier message, then (when anything is missing) one message naming
the first few missing keywords.
"""

from typing import List, Sequence

from internmatch.contexts.matching.defaults import DEFAULT_SUGGESTED_KEYWORD_LIMIT

# (exclusive upper bound, tier name, message); the last tier has no bound
SUGGESTION_TIERS = [
    (
        30,
        "low",
        "Your resume may not be a strong match for this role. "
        "Consider tailoring it more specifically.",
    ),
    (
        50,
        "improve",
        "There's room to improve your match. "
        "Add more relevant keywords from the job description.",
    ),
    (
        70,
        "good",
        "Good match! A few additions could make your resume even stronger.",
    ),
    (
        None,
        "excellent",
        "Excellent match! Your resume aligns well with this job description.",
    ),
]

KEYWORD_SUGGESTION_PREFIX = "Consider adding these keywords if relevant to your experience: "

# Minimum score for each display band, highest first
SCORE_BANDS = [(70, "strong"), (50, "fair"), (0, "weak")]


def _tier_for(score: int):
    for bound, name, message in SUGGESTION_TIERS:
        if bound is None or score < bound:
            return name, message


def suggestion_tier(score: int) -> str:
    """Name of the advisory tier for a score: low, improve, good or excellent."""
    return _tier_for(score)[0]


def generate_suggestions(
    score: int,
    missing_keywords: Sequence[str],
    limit: int = DEFAULT_SUGGESTED_KEYWORD_LIMIT,
) -> List[str]:
    """
    Build advisory messages for a match score.

    Args:
        score: Match percentage (0-100)
        missing_keywords: Ordered missing keywords from a MatchResult
        limit: How many missing keywords to name

    Returns:
        One tier message, followed by a keyword message if any keywords are missing

    Example:
        >>> generate_suggestions(25, ["kubernetes"])
        ['Your resume may not be a strong match for this role. Consider tailoring it more specifically.',
         'Consider adding these keywords if relevant to your experience: kubernetes']
    """
    suggestions = [_tier_for(score)[1]]

    if missing_keywords:
        key_terms = ", ".join(list(missing_keywords)[:limit])
        suggestions.append(f"{KEYWORD_SUGGESTION_PREFIX}{key_terms}")

    return suggestions


def score_band(score: int) -> str:
    """Display band for a score: strong (>= 70), fair (>= 50) or weak."""
    for minimum, band in SCORE_BANDS:
        if score >= minimum:
            return band
    return "weak"
