"""
One-call resume analysis: score, suggestions and display band together.
"""

from dataclasses import dataclass
from typing import Dict, Optional, Tuple

from internmatch.contexts.matching.config import DEFAULT_CONFIG, KeywordConfig
from internmatch.contexts.matching.scorer import MatchResult, compute_match
from internmatch.contexts.matching.suggestions import generate_suggestions, score_band


@dataclass(frozen=True)
class MatchAnalysis:
    """Everything the presentation layer renders for one resume/job pair."""

    result: MatchResult
    suggestions: Tuple[str, ...]
    band: str

    def to_dict(self) -> Dict[str, object]:
        return {
            **self.result.to_dict(),
            "suggestions": list(self.suggestions),
            "band": self.band,
        }


def analyze_match(
    candidate_text: Optional[str],
    target_text: Optional[str],
    config: Optional[KeywordConfig] = None,
) -> MatchAnalysis:
    """Run compute_match and derive suggestions and the score band from its result."""
    config = config or DEFAULT_CONFIG
    result = compute_match(candidate_text, target_text, config)
    suggestions = generate_suggestions(
        result.score, result.missing_keywords, limit=config.suggested_keyword_limit
    )
    return MatchAnalysis(result=result, suggestions=tuple(suggestions), band=score_band(result.score))
