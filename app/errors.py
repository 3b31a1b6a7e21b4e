# app/errors.py


class DiagnosticServiceError(Exception):
    """
    Base for failures that are reported to the HTTP caller.
    `label` is the short error name, the message is the human readable detail.
    """

    label = "Processing failed"
    status_code = 500


class TranscriptionError(DiagnosticServiceError):
    label = "Transcription failed"
    status_code = 502


class NoSpeechDetectedError(DiagnosticServiceError):
    label = "No speech detected"
    status_code = 422

    def __init__(self, message: str = (
        "No speech detected in the audio. "
        "Please ensure there is clear audio in the video."
    )):
        super().__init__(message)


class AIAnalysisError(DiagnosticServiceError):
    label = "AI analysis failed"
    status_code = 502


class AIResponseParseError(AIAnalysisError):
    label = "Failed to parse AI response"
