import logging
from functools import lru_cache
from typing import Any, Dict, List, get_args

from langchain_groq import ChatGroq # type: ignore

from app.config import GROQ_API_KEY, GROQ_MODEL
from app.agent.prompts.diagnostic_prompt import build_diagnostic_prompt
from app.agent.response_parser import parse_ai_response
from app.errors import AIAnalysisError
from app.models.diagnostics import DiagnosticClassification, ProblemType, Severity

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def get_llm() -> ChatGroq:
    if not GROQ_API_KEY:
        raise AIAnalysisError("AI analysis failed: GROQ_API_KEY not set")

    return ChatGroq(
        api_key=GROQ_API_KEY,
        model=GROQ_MODEL,
        temperature=0.2
    )


PROBLEM_TYPES = get_args(ProblemType)
SEVERITIES = get_args(Severity)

SEVERITY_ALIASES = {
    "critical": "high",
    "severe": "high",
    "urgent": "high",
    "moderate": "medium",
    "minor": "low",
}


def _problem_type(value: Any) -> str:
    label = str(value or "").strip().lower()

    if label in PROBLEM_TYPES:
        return label
    # "brakes", "tires"
    if label.endswith("s") and label[:-1] in PROBLEM_TYPES:
        return label[:-1]

    return "other"


def _severity(value: Any) -> str:
    label = str(value or "").strip().lower()

    if label in SEVERITIES:
        return label

    return SEVERITY_ALIASES.get(label, "medium")


def _as_list(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, (list, tuple)):
        return [str(v) for v in value if v is not None]
    return [str(value)]


def to_classification(data: Dict[str, Any]) -> DiagnosticClassification:
    """
    Map the model's JSON onto a DiagnosticClassification, tolerating
    missing or loosely typed fields. Labels outside the known problem types
    become "other"; unknown severities become "medium".
    """
    return DiagnosticClassification(
        mainProblem=str(data.get("mainProblem") or "Unknown issue"),
        problemType=_problem_type(data.get("problemType")),
        severity=_severity(data.get("severity")),
        specificIssues=_as_list(data.get("specificIssues")),
        recommendation=str(data.get("recommendation") or ""),
        keywords=_as_list(data.get("keywords")),
    )


async def run_diagnostic_agent(transcript: str, llm=None) -> DiagnosticClassification:
    llm = llm or get_llm()

    messages = build_diagnostic_prompt(transcript)

    # 1️⃣ Call LLM
    try:
        response = await llm.ainvoke(messages)
    except Exception as e:
        logger.error("LLM call failed: %s", e)
        raise AIAnalysisError(f"AI analysis failed: {e}") from e

    ai_text = response.content

    # 2️⃣ Parse (AIResponseParseError propagates to the caller's fallback)
    data = parse_ai_response(ai_text)

    return to_classification(data)
