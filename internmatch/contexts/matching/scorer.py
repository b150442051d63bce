"""
Keyword overlap scoring.

The score is the share of job-description keywords found in the resume,
counted over the raw (non-deduplicated) job keyword list. A keyword repeated
in the posting therefore weighs more in the score, while it is listed only
once in the matched/missing lists.
"""

import time
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from internmatch.contexts.matching.config import DEFAULT_CONFIG, KeywordConfig
from internmatch.contexts.matching.logger import _log_debug, log_match_result
from internmatch.contexts.matching.tokenizer import KeywordTokenizer


@dataclass(frozen=True)
class MatchResult:
    """
    Outcome of comparing a candidate document against a target document.

    Attributes:
        score: Integer percentage 0-100
        matched_keywords: Target keywords present in the candidate, in target order
        missing_keywords: Target keywords absent from the candidate, in target order,
                          truncated to the configured limit
    """

    score: int
    matched_keywords: Tuple[str, ...]
    missing_keywords: Tuple[str, ...]

    def to_dict(self) -> Dict[str, object]:
        return {
            "score": self.score,
            "matched_keywords": list(self.matched_keywords),
            "missing_keywords": list(self.missing_keywords),
        }


def _unique(tokens: Iterable[str]) -> List[str]:
    """Drop repeats, keeping first-occurrence order."""
    return list(dict.fromkeys(tokens))


def percent_rounded(part: int, whole: int) -> int:
    """Integer percentage rounded half up (1/8 -> 13), 0 when whole is 0."""
    if whole <= 0:
        return 0
    return (200 * part + whole) // (2 * whole)


def score_keywords(
    candidate_keywords: Sequence[str],
    target_keywords: Sequence[str],
    config: Optional[KeywordConfig] = None,
) -> MatchResult:
    """
    Score pre-tokenized keyword sequences.

    Args:
        candidate_keywords: Keywords from the candidate document (the resume)
        target_keywords: Keywords from the target document (the job description)
        config: Supplies the missing keyword limit (defaults to DEFAULT_CONFIG)

    Returns:
        MatchResult
    """
    config = config or DEFAULT_CONFIG
    candidate = set(candidate_keywords)

    matched = [keyword for keyword in target_keywords if keyword in candidate]
    missing = [keyword for keyword in target_keywords if keyword not in candidate]

    return MatchResult(
        score=percent_rounded(len(matched), len(target_keywords)),
        matched_keywords=tuple(_unique(matched)),
        missing_keywords=tuple(_unique(missing)[: config.missing_keyword_limit]),
    )


def compute_match(
    candidate_text: Optional[str],
    target_text: Optional[str],
    config: Optional[KeywordConfig] = None,
) -> MatchResult:
    """
    Compare a resume against a job description.

    Never raises for text input: None and empty strings are treated as
    documents with no keywords.

    Args:
        candidate_text: Resume text
        target_text: Job description text
        config: Keyword config (defaults to DEFAULT_CONFIG)

    Returns:
        MatchResult

    Example:
        >>> compute_match(
        ...     "I have strong experience in Python and React",
        ...     "Looking for Python, Django, and React experience",
        ... )
        MatchResult(score=67, matched_keywords=('python', 'react'), missing_keywords=('django',))
    """
    start = time.perf_counter()
    tokenizer = KeywordTokenizer(config)

    candidate_keywords = tokenizer.tokenize(candidate_text)
    target_keywords = tokenizer.tokenize(target_text)
    _log_debug(
        f"Extracted {len(candidate_keywords)} candidate keywords, "
        f"{len(target_keywords)} target keywords"
    )

    result = score_keywords(candidate_keywords, target_keywords, tokenizer.config)
    log_match_result(result, time.perf_counter() - start)
    return result
