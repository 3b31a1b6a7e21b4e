import logging
from typing import Optional

from fastapi import APIRouter, Depends, File, HTTPException, UploadFile  # type: ignore

from app.config import MAX_UPLOAD_MB
from app.agent.classifiers import DiagnosticClassifier, get_classifier
from app.models.diagnostics import AnalysisResponse, TranscriptRequest, UploadEchoResponse
from app.services.analysis_service import analyze_transcript, process_recording
from app.services.transcription_service import get_transcriber

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Vehicle Diagnostics"])

MAX_UPLOAD_BYTES = MAX_UPLOAD_MB * 1024 * 1024


async def _read_recording(recording: Optional[UploadFile]) -> bytes:
    if recording is None:
        raise HTTPException(status_code=400, detail="No recording received")

    # never buffer more than one byte past the limit
    data = await recording.read(MAX_UPLOAD_BYTES + 1)

    if not data:
        raise HTTPException(status_code=400, detail="No recording received")

    if len(data) > MAX_UPLOAD_BYTES:
        raise HTTPException(
            status_code=413,
            detail=f"File size exceeds maximum limit of {MAX_UPLOAD_BYTES} bytes",
        )

    return data


@router.post("/test", response_model=UploadEchoResponse)
async def test_upload(recording: Optional[UploadFile] = File(None)):
    data = await _read_recording(recording)

    return {
        "success": True,
        "message": "File received successfully",
        "fileSize": len(data),
        "fileName": recording.filename,
        "fileType": recording.content_type,
    }


@router.post("/process-recording", response_model=AnalysisResponse)
async def process_recording_endpoint(
    recording: Optional[UploadFile] = File(None),
    transcriber=Depends(get_transcriber),
    classifier: DiagnosticClassifier = Depends(get_classifier),
):
    data = await _read_recording(recording)

    logger.info(
        "Processing recording... File size: %d Type: %s",
        len(data), recording.content_type,
    )

    analysis = await process_recording(
        data,
        recording.filename or "audio.webm",
        transcriber,
        classifier,
    )

    return AnalysisResponse(analysis=analysis)


@router.post("/analyze-transcript", response_model=AnalysisResponse)
async def analyze_transcript_endpoint(
    req: TranscriptRequest,
    classifier: DiagnosticClassifier = Depends(get_classifier),
):
    analysis = await analyze_transcript(req.transcript, classifier)
    return AnalysisResponse(analysis=analysis)
