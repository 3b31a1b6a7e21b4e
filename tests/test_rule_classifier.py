from app.agent.keyword_matcher import search_keywords
from app.agent.rule_classifier import classify_matches
from app.agent.vehicle_keywords import CATEGORY_MESSAGES, NO_ISSUES_PLACEHOLDER
from app.models.diagnostics import MatchResult


def _matches(keywords, categories):
    return MatchResult(
        found_keywords=keywords,
        categories=categories,
        total_matches=len(keywords),
    )


def test_no_match_falls_back_to_other_low():
    result = classify_matches(search_keywords(""))

    assert result.problemType == "other"
    assert result.severity == "low"
    assert result.mainProblem == CATEGORY_MESSAGES["other"]["mainProblem"]
    assert result.recommendation == CATEGORY_MESSAGES["other"]["recommendation"]
    assert result.specificIssues == [NO_ISSUES_PLACEHOLDER]


def test_keywords_without_category_still_use_other_branch():
    result = classify_matches(search_keywords("there is an oil leak"))

    assert result.problemType == "other"
    assert result.severity == "low"
    assert result.specificIssues == [NO_ISSUES_PLACEHOLDER]
    assert result.keywords == ["oil leak"]


def test_brake_failure_escalates_to_high():
    result = classify_matches(_matches(["brake failure"], ["brake"]))

    assert result.problemType == "brake"
    assert result.severity == "high"
    assert result.mainProblem == CATEGORY_MESSAGES["brake"]["mainProblem"]


def test_brake_pedal_stays_medium():
    result = classify_matches(_matches(["brake pedal"], ["brake"]))

    assert result.severity == "medium"


def test_category_defaults_and_escalations():
    cases = [
        (["engine overheating"], ["engine"], "high"),
        (["engine misfire"], ["engine"], "medium"),
        (["flat tire"], ["tire"], "medium"),
        (["wheel bearing"], ["tire"], "low"),
        (["battery drain"], ["electrical"], "medium"),
        (["fuse box"], ["electrical"], "low"),
        (["transmission slipping"], ["transmission"], "high"),
        (["gear shifting"], ["transmission"], "medium"),
        (["spring broken", "shock absorbers"], ["suspension"], "medium"),
        (["strut failure"], ["suspension"], "high"),
    ]

    for keywords, categories, expected in cases:
        assert classify_matches(_matches(keywords, categories)).severity == expected, keywords


def test_escalation_only_counts_keywords_of_primary_category():
    # "engine failure" is severe, but the primary category is brake
    result = classify_matches(search_keywords("brake pedal feels soft, maybe engine failure"))

    assert result.problemType == "brake"
    assert result.severity == "medium"


def test_specific_issues_capped_at_five():
    transcript = (
        "brake pedal, brake pads, brake discs, brake fluid, brake lines, "
        "brake noise, flat tire and an oil leak"
    )
    matches = search_keywords(transcript)
    result = classify_matches(matches)

    assert matches.total_matches == 8
    assert len(result.specificIssues) == 5
    assert result.specificIssues[0] == "Brake pedal issue detected"
    assert result.specificIssues[-1] == "Brake lines issue detected"
    assert result.severity == "high"


def test_classification_is_deterministic():
    matches = search_keywords("engine knocking and tire wear, also the clutch problem")

    first = classify_matches(matches)
    second = classify_matches(matches)

    assert first.model_dump_json() == second.model_dump_json()
