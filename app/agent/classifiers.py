# app/agent/classifiers.py

import logging
from typing import Optional

from app.config import DIAGNOSTIC_CLASSIFIER, GROQ_API_KEY, GROQ_MODEL
from app.agent.diagnostic_agent import run_diagnostic_agent
from app.agent.rule_classifier import classify_matches
from app.models.diagnostics import MatchResult, DiagnosticClassification

logger = logging.getLogger(__name__)


class DiagnosticClassifier:
    """
    Turns a transcript plus its keyword matches into a diagnosis.
    """

    name = "base"
    model_name = "none"

    async def classify(
        self, transcript: str, matches: MatchResult
    ) -> DiagnosticClassification:
        raise NotImplementedError


class RuleBasedClassifier(DiagnosticClassifier):
    name = "rules"
    model_name = "rule-based"

    async def classify(self, transcript, matches):
        return classify_matches(matches)


class LLMClassifier(DiagnosticClassifier):
    name = "llm"

    def __init__(self, llm=None, model_name: str = GROQ_MODEL):
        self.llm = llm
        self.model_name = model_name

    async def classify(self, transcript, matches):
        return await run_diagnostic_agent(transcript, llm=self.llm)


def build_classifier(kind: str) -> DiagnosticClassifier:
    if kind == "llm":
        return LLMClassifier()

    if kind != "rules":
        logger.warning("Unknown DIAGNOSTIC_CLASSIFIER %r, using rules", kind)

    return RuleBasedClassifier()


def resolve_classifier_kind(kind: str, api_key: Optional[str]) -> str:
    if kind == "auto":
        return "llm" if api_key else "rules"

    return kind


def get_classifier() -> DiagnosticClassifier:
    return build_classifier(resolve_classifier_kind(DIAGNOSTIC_CLASSIFIER, GROQ_API_KEY))
