"""
Keyword extraction for resume and job-description text.

Pipeline:
1. Lowercase
2. Replace everything except letters, digits, '+', '#', '.', '-' and whitespace
   with a space (keeps "c++", "c#", "node.js", "ci-cd" intact)
3. Split on whitespace
4. Keep tokens that are long enough and not stop words, plus any token on the
   technical-term allowlist

Duplicates are kept and order is preserved; the scorer relies on both.

Usage:
    from internmatch.contexts.matching.tokenizer import KeywordTokenizer

    tokenizer = KeywordTokenizer()
    tokenizer.tokenize("Built REST APIs in Node.js and C++")
    # ['built', 'rest', 'apis', 'node.js', 'c++']
"""

import re
from collections import Counter
from typing import List, Optional

from internmatch.contexts.matching.config import DEFAULT_CONFIG, KeywordConfig

NON_KEYWORD_CHARS = re.compile(r"[^a-z0-9+#.\s-]")


class KeywordTokenizer:
    """
    Stateless keyword extractor bound to a KeywordConfig.

    The tokenizer is callable, so it can be handed to anything expecting a
    text -> tokens function.
    """

    def __init__(self, config: Optional[KeywordConfig] = None):
        self.config = config or DEFAULT_CONFIG

    def _keep(self, token: str) -> bool:
        if token in self.config.tech_terms:
            return True
        return len(token) >= self.config.min_token_length and token not in self.config.stopwords

    def tokenize(self, text: Optional[str]) -> List[str]:
        """
        Extract normalized keywords from raw text.

        Args:
            text: Raw document text (None or empty yields no keywords)

        Returns:
            Keywords in document order, duplicates included
        """
        if not text:
            return []

        cleaned = NON_KEYWORD_CHARS.sub(" ", text.lower())
        return [token for token in cleaned.split() if self._keep(token)]

    def __call__(self, text: Optional[str]) -> List[str]:
        return self.tokenize(text)

    def keyword_counts(self, text: Optional[str]) -> Counter:
        """Count keyword occurrences, ordered by first appearance in the text."""
        return Counter(self.tokenize(text))

    def get_config_dict(self) -> dict:
        """Return tokenizer settings as a dictionary."""
        return self.config.to_dict()


def extract_keywords(text: Optional[str], config: Optional[KeywordConfig] = None) -> List[str]:
    """Tokenize text with a one-off KeywordTokenizer."""
    return KeywordTokenizer(config).tokenize(text)
