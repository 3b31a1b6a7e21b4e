import logging

from fastapi import FastAPI, Request  # type: ignore
from fastapi.middleware.cors import CORSMiddleware  # type: ignore
from fastapi.responses import JSONResponse  # type: ignore

from app.config import APP_ENV, CORS_ORIGINS, DIAGNOSTIC_CLASSIFIER, GROQ_API_KEY, MAX_UPLOAD_MB
from app.agent.classifiers import resolve_classifier_kind
from app.agent.vehicle_keywords import VEHICLE_KEYWORDS
from app.errors import DiagnosticServiceError
from app.logging_config import setup_logging
from app.routers.recording import router as recording_router

setup_logging()
logger = logging.getLogger(__name__)

app = FastAPI(title="Vehicle Problem Detector")

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(recording_router)

logger.info("Total keywords loaded: %d", len(VEHICLE_KEYWORDS))
logger.info(
    "Diagnostic classifier: %s",
    resolve_classifier_kind(DIAGNOSTIC_CLASSIFIER, GROQ_API_KEY),
)
if DIAGNOSTIC_CLASSIFIER == "llm" and not GROQ_API_KEY:
    logger.warning("DIAGNOSTIC_CLASSIFIER=llm but GROQ_API_KEY is not set, AI analysis will fail")


@app.exception_handler(DiagnosticServiceError)
async def diagnostic_error_handler(request: Request, exc: DiagnosticServiceError):
    logger.error("%s: %s", exc.label, exc)
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.label, "message": str(exc)},
    )


@app.exception_handler(Exception)
async def unexpected_error_handler(request: Request, exc: Exception):
    logger.exception("Server error")
    return JSONResponse(
        status_code=500,
        content={"error": "Server error", "message": str(exc)},
    )


@app.get("/")
async def health():
    return {
        "message": "Vehicle Problem Detector - Live Recording & File Upload",
        "status": "Ready for video analysis",
        "features": ["Live recording", "File upload", "Keyword search", "AI analysis"],
        "totalKeywords": len(VEHICLE_KEYWORDS),
        "environment": APP_ENV,
        "maxFileSize": f"{MAX_UPLOAD_MB}MB",
        "supportedFormats": "All video formats with audio",
    }
