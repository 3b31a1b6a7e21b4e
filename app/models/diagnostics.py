# app/models/diagnostics.py

from pydantic import BaseModel, field_validator # type: ignore
from typing import Any, List, Literal, Optional

ProblemType = Literal[
    "brake", "tire", "engine", "electrical", "transmission", "suspension", "oil", "other"
]
Severity = Literal["low", "medium", "high"]


class MatchResult(BaseModel):
    found_keywords: List[str] = []
    categories: List[str] = []
    # de-duplicated count, always len(found_keywords)
    total_matches: int = 0

    def to_keyword_search(self) -> "KeywordSearch":
        return KeywordSearch(
            foundKeywords=list(self.found_keywords),
            categories=list(self.categories),
            totalKeywordsFound=self.total_matches,
            keywordMatch=self.total_matches > 0,
            totalMatches=self.total_matches,
        )


class KeywordSearch(BaseModel):
    foundKeywords: List[str]
    categories: List[str]
    totalKeywordsFound: int
    keywordMatch: bool
    totalMatches: int


class DiagnosticClassification(BaseModel):
    mainProblem: str
    problemType: ProblemType
    severity: Severity
    specificIssues: List[str]
    recommendation: str
    keywords: List[str] = []


class AnalysisResult(BaseModel):
    transcription: str
    mainProblem: str
    problemType: ProblemType
    specificIssues: List[str]
    severity: Severity
    keywords: List[str]
    recommendation: str
    word_count: int
    problem_count: int
    aiModel: str
    analysisSource: str             # "ai" | "rules" | "rules_fallback"
    keywordSearch: KeywordSearch
    ruleBasedDiagnosis: DiagnosticClassification


class AnalysisResponse(BaseModel):
    success: bool = True
    message: str = "Video Analysis Completed!"
    analysis: AnalysisResult


class TranscriptRequest(BaseModel):
    transcript: str = ""

    @field_validator("transcript", mode="before")
    @classmethod
    def _text_or_empty(cls, value: Any) -> str:
        # null / numbers / objects are scanned as an empty transcript
        return value if isinstance(value, str) else ""


class TranscriptionResult(BaseModel):
    success: bool
    text: str = ""
    language: Optional[str] = None


class UploadEchoResponse(BaseModel):
    success: bool
    message: str
    fileSize: int
    fileName: Optional[str]
    fileType: Optional[str]
