"""
Keyword matching configuration.

KeywordConfig bundles everything that shapes keyword extraction and reporting:
the stop-word list, the short technical-term allowlist, the minimum token
length and the reporting limits. Configs are immutable and passed explicitly
into the tokenizer and scorer, so tests can substitute minimal lists.

Overrides can be loaded from a YAML file (INTERNMATCH_CONFIG_PATH by default):

    stopwords: [...]            # replace the default stop words
    extra_stopwords: [...]      # extend them
    tech_terms: [...]           # replace the default allowlist
    extra_tech_terms: [...]     # extend it
    use_nltk_stopwords: true    # merge NLTK's English stop words
    min_token_length: 2
    missing_keyword_limit: 15
    suggested_keyword_limit: 5
"""

import os
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any, Dict, Optional, Union

import nltk
import yaml
from dotenv import load_dotenv
from nltk.corpus import stopwords
from omegaconf import OmegaConf

from internmatch.contexts.matching.defaults import (
    DEFAULT_MIN_TOKEN_LENGTH,
    DEFAULT_MISSING_KEYWORD_LIMIT,
    DEFAULT_STOPWORDS,
    DEFAULT_SUGGESTED_KEYWORD_LIMIT,
    DEFAULT_TECH_TERMS,
)

load_dotenv()
CONFIG_PATH = os.getenv("INTERNMATCH_CONFIG_PATH")

LIST_KEYS = ("stopwords", "extra_stopwords", "tech_terms", "extra_tech_terms")
INT_KEYS = ("min_token_length", "missing_keyword_limit", "suggested_keyword_limit")
BOOL_KEYS = ("use_nltk_stopwords",)


@dataclass(frozen=True)
class KeywordConfig:
    """
    Immutable keyword extraction and reporting settings.

    Attributes:
        stopwords: Tokens dropped during extraction
        tech_terms: Tokens always kept, bypassing the length and stop-word filters
        min_token_length: Minimum length for tokens outside the allowlist
        missing_keyword_limit: Maximum number of missing keywords reported
        suggested_keyword_limit: Maximum number of keywords named in suggestions
    """

    stopwords: frozenset = field(default=DEFAULT_STOPWORDS)
    tech_terms: frozenset = field(default=DEFAULT_TECH_TERMS)
    min_token_length: int = DEFAULT_MIN_TOKEN_LENGTH
    missing_keyword_limit: int = DEFAULT_MISSING_KEYWORD_LIMIT
    suggested_keyword_limit: int = DEFAULT_SUGGESTED_KEYWORD_LIMIT

    def __post_init__(self):
        # Any iterable of strings is accepted; stored as frozensets
        object.__setattr__(self, "stopwords", frozenset(self.stopwords))
        object.__setattr__(self, "tech_terms", frozenset(self.tech_terms))

        for key in INT_KEYS:
            value = getattr(self, key)
            if isinstance(value, bool) or not isinstance(value, int) or value < 1:
                raise ValueError(f"'{key}' must be a positive integer, got {value!r}")

    def with_nltk_stopwords(self) -> "KeywordConfig":
        """Return a copy whose stop words also include NLTK's English list."""
        return replace(self, stopwords=self.stopwords | _load_nltk_stopwords())

    def to_dict(self) -> Dict[str, Any]:
        """Return settings as a plain dictionary (lists sorted for stable output)."""
        return {
            "stopwords": sorted(self.stopwords),
            "tech_terms": sorted(self.tech_terms),
            "min_token_length": self.min_token_length,
            "missing_keyword_limit": self.missing_keyword_limit,
            "suggested_keyword_limit": self.suggested_keyword_limit,
        }


DEFAULT_CONFIG = KeywordConfig()


def _load_nltk_stopwords() -> frozenset:
    """Load NLTK English stopwords, downloading if necessary."""
    try:
        return frozenset(stopwords.words("english"))
    except LookupError:
        nltk.download("stopwords", quiet=True)
        return frozenset(stopwords.words("english"))


def _normalize_terms(key: str, values: Any) -> frozenset:
    """Validate a list of terms from config and lowercase them to match tokenizer output."""
    if not isinstance(values, (list, tuple)):
        raise ValueError(f"'{key}' must be a list of strings, got {type(values).__name__}")

    terms = set()
    for value in values:
        if not isinstance(value, str):
            raise ValueError(f"'{key}' entries must be strings, got {value!r}")
        term = value.strip().lower()
        if term:
            terms.add(term)
    return frozenset(terms)


def config_from_dict(
    overrides: Dict[str, Any], base: KeywordConfig = DEFAULT_CONFIG
) -> KeywordConfig:
    """
    Apply a dict of overrides on top of a base config.

    Replacement keys (stopwords, tech_terms) are applied before extension keys
    (extra_stopwords, extra_tech_terms), so both can be combined.

    Raises:
        ValueError: On unknown keys or invalid values
    """
    unknown = set(overrides) - set(LIST_KEYS) - set(INT_KEYS) - set(BOOL_KEYS)
    if unknown:
        allowed = sorted(LIST_KEYS + INT_KEYS + BOOL_KEYS)
        raise ValueError(f"Unknown keyword config keys: {sorted(unknown)}. Allowed keys: {allowed}")

    stop = base.stopwords
    tech = base.tech_terms
    if "stopwords" in overrides:
        stop = _normalize_terms("stopwords", overrides["stopwords"])
    if "extra_stopwords" in overrides:
        stop = stop | _normalize_terms("extra_stopwords", overrides["extra_stopwords"])
    if "tech_terms" in overrides:
        tech = _normalize_terms("tech_terms", overrides["tech_terms"])
    if "extra_tech_terms" in overrides:
        tech = tech | _normalize_terms("extra_tech_terms", overrides["extra_tech_terms"])

    config = replace(
        base,
        stopwords=stop,
        tech_terms=tech,
        **{key: overrides[key] for key in INT_KEYS if key in overrides},
    )

    use_nltk = overrides.get("use_nltk_stopwords", False)
    if not isinstance(use_nltk, bool):
        raise ValueError(f"'use_nltk_stopwords' must be true or false, got {use_nltk!r}")
    if use_nltk:
        config = config.with_nltk_stopwords()

    return config


def load_keyword_config(config_path: Optional[Union[str, Path]] = None) -> KeywordConfig:
    """
    Load keyword config from YAML, falling back to defaults.

    Args:
        config_path: Optional path to YAML config (defaults to INTERNMATCH_CONFIG_PATH
                     env variable; when neither is set, defaults are returned)

    Returns:
        KeywordConfig with file overrides applied

    Raises:
        FileNotFoundError: If the config file doesn't exist
        ValueError: If the file isn't valid YAML, isn't a mapping, or contains invalid settings
    """
    if config_path is None:
        config_path = CONFIG_PATH
    if not config_path:
        return DEFAULT_CONFIG

    config_path = Path(config_path)
    if not config_path.exists():
        raise FileNotFoundError(f"Keyword config not found at {config_path}")

    try:
        overrides = OmegaConf.to_container(OmegaConf.load(config_path), resolve=True)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid keyword config YAML at {config_path}: {e}") from e
    if overrides is None:
        overrides = {}
    if not isinstance(overrides, dict):
        raise ValueError(f"Keyword config must be a mapping: {config_path}")

    return config_from_dict(overrides)

