"""
Matching Context

Responsibilities:
- Extracts normalized keywords from resume and job-description text
- Scores keyword overlap as a percentage of job keywords found in the resume
- Generates improvement suggestions from the score and missing keywords

Owns: Keyword filtering lists, scoring rules, suggestion wording
Never: Reads files or decodes documents (see intake context)
"""

from internmatch.contexts.matching.analysis import MatchAnalysis, analyze_match
from internmatch.contexts.matching.config import (
    DEFAULT_CONFIG,
    KeywordConfig,
    config_from_dict,
    load_keyword_config,
)
from internmatch.contexts.matching.scorer import MatchResult, compute_match, score_keywords
from internmatch.contexts.matching.suggestions import (
    generate_suggestions,
    score_band,
    suggestion_tier,
)
from internmatch.contexts.matching.tokenizer import KeywordTokenizer, extract_keywords

__all__ = [
    "DEFAULT_CONFIG",
    "KeywordConfig",
    "KeywordTokenizer",
    "MatchAnalysis",
    "MatchResult",
    "analyze_match",
    "compute_match",
    "config_from_dict",
    "extract_keywords",
    "generate_suggestions",
    "load_keyword_config",
    "score_band",
    "score_keywords",
    "suggestion_tier",
]
