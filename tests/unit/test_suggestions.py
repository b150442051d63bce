"""Unit tests for suggestion generation and score bands."""

import pytest

from internmatch.contexts.matching.analysis import analyze_match
from internmatch.contexts.matching.config import KeywordConfig
from internmatch.contexts.matching.suggestions import (
    KEYWORD_SUGGESTION_PREFIX,
    generate_suggestions,
    score_band,
    suggestion_tier,
)


@pytest.mark.unit
def test_low_score_with_missing_keyword():
    suggestions = generate_suggestions(25, ["kubernetes"])

    assert len(suggestions) == 2
    assert suggestions[0].startswith("Your resume may not be a strong match")
    assert suggestions[1] == f"{KEYWORD_SUGGESTION_PREFIX}kubernetes"


@pytest.mark.unit
def test_excellent_score_without_missing_keywords():
    suggestions = generate_suggestions(85, [])

    assert suggestions == ["Excellent match! Your resume aligns well with this job description."]


@pytest.mark.unit
def test_only_first_five_missing_keywords_named():
    missing = ["go", "rust", "kafka", "spark", "flink", "beam", "airflow"]
    suggestions = generate_suggestions(55, missing)

    assert suggestions[0].startswith("Good match!")
    assert suggestions[1].endswith("go, rust, kafka, spark, flink")
    assert "beam" not in suggestions[1]


@pytest.mark.unit
def test_keyword_limit_parameter():
    suggestions = generate_suggestions(40, ("sql", "java", "scala"), limit=2)

    assert suggestions[0].startswith("There's room to improve")
    assert suggestions[1].endswith("sql, java")


@pytest.mark.unit
@pytest.mark.parametrize(
    "score, tier",
    [
        (0, "low"),
        (29, "low"),
        (30, "improve"),
        (49, "improve"),
        (50, "good"),
        (69, "good"),
        (70, "excellent"),
        (100, "excellent"),
    ],
)
def test_tier_boundaries(score, tier):
    assert suggestion_tier(score) == tier
    assert len(generate_suggestions(score, [])) == 1


@pytest.mark.unit
@pytest.mark.parametrize(
    "score, band",
    [(0, "weak"), (49, "weak"), (50, "fair"), (69, "fair"), (70, "strong"), (100, "strong")],
)
def test_score_bands(score, band):
    assert score_band(score) == band


class TestAnalyzeMatch:
    """analyze_match bundles the score, suggestions and band."""

    @pytest.mark.unit
    def test_bundle(self):
        analysis = analyze_match(
            "I have strong experience in Python and React",
            "Looking for Python, Django, and React experience",
        )

        assert analysis.result.score == 67
        assert analysis.band == "fair"
        assert analysis.suggestions == (
            "Good match! A few additions could make your resume even stronger.",
            f"{KEYWORD_SUGGESTION_PREFIX}django",
        )

    @pytest.mark.unit
    def test_suggested_keyword_limit_from_config(self):
        config = KeywordConfig(suggested_keyword_limit=1)
        analysis = analyze_match("", "kafka spark flink", config)

        assert analysis.suggestions[-1] == f"{KEYWORD_SUGGESTION_PREFIX}kafka"

    @pytest.mark.unit
    def test_to_dict(self):
        analysis = analyze_match("python", "python sql")

        assert analysis.to_dict() == {
            "score": 50,
            "matched_keywords": ["python"],
            "missing_keywords": ["sql"],
            "suggestions": [
                "Good match! A few additions could make your resume even stronger.",
                f"{KEYWORD_SUGGESTION_PREFIX}sql",
            ],
            "band": "fair",
        }
