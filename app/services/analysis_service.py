import logging

from app.agent.classifiers import DiagnosticClassifier
from app.agent.keyword_matcher import search_keywords
from app.agent.rule_classifier import classify_matches
from app.errors import AIResponseParseError, NoSpeechDetectedError
from app.models.diagnostics import AnalysisResult

logger = logging.getLogger(__name__)


async def analyze_transcript(transcript: str, classifier: DiagnosticClassifier) -> AnalysisResult:
    """
    keyword search -> classifier, with the rule-based diagnosis always
    attached next to whatever the selected classifier produced.
    """
    transcript = transcript if isinstance(transcript, str) else ""

    matches = search_keywords(transcript)
    logger.info("Keyword search found %d matches", matches.total_matches)

    rule_based = classify_matches(matches)

    source = "ai" if classifier.name == "llm" else "rules"
    model_name = classifier.model_name

    try:
        diagnosis = await classifier.classify(transcript, matches)
    except AIResponseParseError as e:
        # unparseable model output -> deterministic result
        logger.warning("%s, using rule-based diagnosis", e)
        diagnosis = rule_based
        source = "rules_fallback"
        model_name = "rule-based"

    logger.info("Diagnosis from %s: %s (%s)", source, diagnosis.problemType, diagnosis.severity)

    return AnalysisResult(
        transcription=transcript,
        mainProblem=diagnosis.mainProblem,
        problemType=diagnosis.problemType,
        specificIssues=diagnosis.specificIssues,
        severity=diagnosis.severity,
        keywords=diagnosis.keywords,
        recommendation=diagnosis.recommendation,
        word_count=len(transcript.split()),
        problem_count=len(diagnosis.specificIssues),
        aiModel=model_name,
        analysisSource=source,
        keywordSearch=matches.to_keyword_search(),
        ruleBasedDiagnosis=rule_based,
    )


async def process_recording(
    data: bytes,
    filename: str,
    transcriber,
    classifier: DiagnosticClassifier,
) -> AnalysisResult:
    logger.info("Starting transcription of %s", filename)
    transcription = await transcriber.transcribe(data, filename)

    text = transcription.text or ""
    logger.info("Transcription successful, length: %d", len(text))

    if not text.strip():
        raise NoSpeechDetectedError()

    return await analyze_transcript(text, classifier)
