# app/agent/keyword_matcher.py

from typing import Any, List

from app.agent.vehicle_keywords import VEHICLE_KEYWORDS, CATEGORY_RULES
from app.models.diagnostics import MatchResult


def keyword_categories(keyword: str) -> List[str]:
    """
    Categories implied by a single keyword, in CATEGORY_RULES order.
    A keyword can map to none, one or several categories.
    """
    lower_keyword = keyword.lower()
    return [
        category
        for category, triggers in CATEGORY_RULES.items()
        if any(trigger in lower_keyword for trigger in triggers)
    ]


def search_keywords(transcript: Any) -> MatchResult:
    """
    Case-insensitive substring scan of the transcript against VEHICLE_KEYWORDS.

    Non-string or blank input yields an empty result instead of an error.
    """
    if not isinstance(transcript, str) or not transcript.strip():
        return MatchResult()

    lower_text = transcript.lower()

    found: List[str] = []
    categories: List[str] = []

    for keyword in VEHICLE_KEYWORDS:
        if keyword.lower() not in lower_text or keyword in found:
            continue

        found.append(keyword)

        for category in keyword_categories(keyword):
            if category not in categories:
                categories.append(category)

    return MatchResult(
        found_keywords=found,
        categories=categories,
        total_matches=len(found),
    )
