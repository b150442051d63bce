"""
Unit tests for keyword overlap scoring.

Tests compute_match and score_keywords in internmatch.contexts.matching.scorer.
"""

import pytest

from internmatch.contexts.matching.config import KeywordConfig
from internmatch.contexts.matching.scorer import (
    MatchResult,
    compute_match,
    percent_rounded,
    score_keywords,
)

RESUME = "I have strong experience in Python and React"
POSTING = "Looking for Python, Django, and React experience"


@pytest.mark.unit
def test_partial_match():
    """Two of three job keywords found."""
    result = compute_match(RESUME, POSTING)

    assert result.score == 67
    assert result.matched_keywords == ("python", "react")
    assert result.missing_keywords == ("django",)


@pytest.mark.unit
def test_empty_resume():
    """Nothing matches an empty resume."""
    result = compute_match("", "SQL and Java")

    assert result.score == 0
    assert result.matched_keywords == ()
    assert result.missing_keywords == ("sql", "java")


@pytest.mark.unit
@pytest.mark.parametrize("target", ["", None, "and the of"])
def test_empty_target_scores_zero(target):
    """A job description without keywords scores 0 instead of dividing by zero."""
    result = compute_match(RESUME, target)

    assert result == MatchResult(score=0, matched_keywords=(), missing_keywords=())


@pytest.mark.unit
def test_both_empty():
    assert compute_match(None, None).score == 0


@pytest.mark.unit
def test_full_match():
    result = compute_match("Python, Django and React", POSTING)

    assert result.score == 100
    assert result.missing_keywords == ()


@pytest.mark.unit
def test_repeated_target_keywords_weight_score():
    """Denominator is the raw job keyword count; lists are deduplicated."""
    result = compute_match("python", "python python python java")

    assert result.score == 75
    assert result.matched_keywords == ("python",)
    assert result.missing_keywords == ("java",)


@pytest.mark.unit
def test_repeated_missing_keyword_listed_once():
    result = compute_match("rust", "go go kafka go")

    assert result.score == 0
    assert result.missing_keywords == ("go", "kafka")


@pytest.mark.unit
def test_keywords_follow_target_order():
    result = compute_match("docker sql python", "python kafka sql spark docker")

    assert result.matched_keywords == ("python", "sql", "docker")
    assert result.missing_keywords == ("kafka", "spark")


@pytest.mark.unit
def test_missing_keywords_capped_at_fifteen():
    target = " ".join(f"tool{i}" for i in range(20))
    result = compute_match("", target)

    assert len(result.missing_keywords) == 15
    assert result.missing_keywords == tuple(f"tool{i}" for i in range(15))


@pytest.mark.unit
def test_missing_limit_from_config():
    config = KeywordConfig(missing_keyword_limit=2)
    result = compute_match("", "kafka spark flink beam", config)

    assert result.missing_keywords == ("kafka", "spark")


@pytest.mark.unit
def test_injected_stopwords_change_keywords():
    config = KeywordConfig(stopwords={"django"}, tech_terms=frozenset())
    result = compute_match("python react", "python django react", config)

    assert result.score == 100
    assert result.matched_keywords == ("python", "react")


@pytest.mark.unit
def test_matched_and_missing_partition_target():
    """Matched and missing never overlap and together cover the target keywords."""
    resume = "Built ETL jobs in Python and Spark; deployed with Docker on AWS."
    posting = "Data engineer: Python, Spark, Airflow, Kafka, AWS, Terraform, Python."
    result = compute_match(resume, posting)

    matched = set(result.matched_keywords)
    missing = set(result.missing_keywords)
    target = set(compute_match("", posting).missing_keywords)

    assert matched.isdisjoint(missing)
    assert matched | missing == target


@pytest.mark.unit
def test_idempotent():
    first = compute_match(RESUME, POSTING)
    second = compute_match(RESUME, POSTING)

    assert first == second
    assert first.to_dict() == second.to_dict()


@pytest.mark.unit
def test_score_keywords_on_sequences():
    result = score_keywords(["go", "sql"], ["sql", "java", "sql", "go"])

    assert result.score == 75
    assert result.matched_keywords == ("sql", "go")
    assert result.missing_keywords == ("java",)


@pytest.mark.unit
def test_to_dict():
    result = compute_match(RESUME, POSTING)

    assert result.to_dict() == {
        "score": 67,
        "matched_keywords": ["python", "react"],
        "missing_keywords": ["django"],
    }


@pytest.mark.unit
@pytest.mark.parametrize(
    "part, whole, expected",
    [
        (0, 0, 0),
        (0, 5, 0),
        (1, 3, 33),
        (2, 3, 67),
        (1, 8, 13),
        (3, 8, 38),
        (5, 5, 100),
    ],
)
def test_percent_rounded_half_up(part, whole, expected):
    assert percent_rounded(part, whole) == expected
