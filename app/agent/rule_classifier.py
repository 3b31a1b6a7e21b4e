# app/agent/rule_classifier.py

from typing import List

from app.agent.keyword_matcher import keyword_categories
from app.agent.vehicle_keywords import (
    CATEGORY_MESSAGES,
    SEVERITY_RULES,
    NO_ISSUES_PLACEHOLDER,
    MAX_SPECIFIC_ISSUES,
)
from app.models.diagnostics import MatchResult, DiagnosticClassification


def _severity(category: str, keywords: List[str]) -> str:
    escalators, escalated, default = SEVERITY_RULES.get(category, ((), "low", "low"))

    # only keywords that themselves belong to the category can escalate it
    related = [k.lower() for k in keywords if category in keyword_categories(k)]

    if any(word in keyword for keyword in related for word in escalators):
        return escalated

    return default


def _issue_line(keyword: str) -> str:
    return f"{keyword[:1].upper()}{keyword[1:]} issue detected"


def classify_matches(matches: MatchResult) -> DiagnosticClassification:
    """
    Deterministic fallback diagnosis built only from keyword matches.
    """
    if not matches.categories:
        messages = CATEGORY_MESSAGES["other"]
        return DiagnosticClassification(
            mainProblem=messages["mainProblem"],
            problemType="other",
            severity="low",
            specificIssues=[NO_ISSUES_PLACEHOLDER],
            recommendation=messages["recommendation"],
            keywords=list(matches.found_keywords),
        )

    problem_type = matches.categories[0]
    messages = CATEGORY_MESSAGES.get(problem_type, CATEGORY_MESSAGES["other"])

    specific_issues = [
        _issue_line(keyword)
        for keyword in matches.found_keywords[:MAX_SPECIFIC_ISSUES]
    ]

    return DiagnosticClassification(
        mainProblem=messages["mainProblem"],
        problemType=problem_type,
        severity=_severity(problem_type, matches.found_keywords),
        specificIssues=specific_issues,
        recommendation=messages["recommendation"],
        keywords=list(matches.found_keywords),
    )
