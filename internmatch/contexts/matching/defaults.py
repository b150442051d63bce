"""
Default keyword filtering lists for the matching context.

Stop words are common English function words plus resume boilerplate that
appears in nearly every posting and carries no matching signal. Technical
terms are short tokens that survive filtering regardless of length.
"""

DEFAULT_STOPWORDS = frozenset(
    {
        # Function words
        "a", "an", "the", "and", "or", "but", "in", "on", "at", "to", "for",
        "of", "with", "by", "from", "as", "is", "was", "are", "were", "been",
        "be", "have", "has", "had", "do", "does", "did", "will", "would",
        "could", "should", "may", "might", "must", "shall", "can", "need",
        "dare", "ought", "used", "it", "its", "this", "that", "these", "those",
        "i", "you", "he", "she", "we", "they", "what", "which", "who", "whom",
        "where", "when", "why", "how", "all", "each", "every", "both", "few",
        "more", "most", "other", "some", "such", "no", "nor", "not", "only",
        "own", "same", "so", "than", "too", "very", "just", "also", "now",
        "our", "your", "their", "my", "his", "her", "about", "into", "through",
        "during", "before", "after", "above", "below", "between", "under",
        "again", "further", "then", "once", "here", "there", "any", "up",
        "down", "out", "off", "over", "while", "if", "because",
        "until", "unless", "although", "though", "since", "even", "etc",
        "ie", "eg", "per", "via", "amp",
        # Resume and job-posting boilerplate
        "years", "year", "experience", "team", "work", "working", "ability",
        "skills", "strong", "including", "responsibilities", "requirements",
        "required", "preferred", "looking",
    }
)

DEFAULT_TECH_TERMS = frozenset(
    {"ai", "ml", "ui", "ux", "qa", "ci", "cd", "js", "ts", "db", "c#", "c++"}
)

DEFAULT_MIN_TOKEN_LENGTH = 2

# Reporting limits
DEFAULT_MISSING_KEYWORD_LIMIT = 15
DEFAULT_SUGGESTED_KEYWORD_LIMIT = 5
