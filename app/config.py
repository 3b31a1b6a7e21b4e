import os
from dotenv import load_dotenv # type: ignore

load_dotenv()

APP_ENV = os.getenv("APP_ENV", "development")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

ASSEMBLYAI_API_KEY = os.getenv("ASSEMBLYAI_API_KEY")
ASSEMBLYAI_BASE_URL = os.getenv("ASSEMBLYAI_BASE_URL", "https://api.assemblyai.com/v2")
TRANSCRIPTION_TIMEOUT_SECONDS = float(os.getenv("TRANSCRIPTION_TIMEOUT_SECONDS", "300"))
TRANSCRIPTION_POLL_SECONDS = float(os.getenv("TRANSCRIPTION_POLL_SECONDS", "3"))

GROQ_API_KEY = os.getenv("GROQ_API_KEY")
GROQ_MODEL = os.getenv("GROQ_MODEL", "llama-3.1-8b-instant")

# "llm", "rules" or "auto" (llm when GROQ_API_KEY is set)
DIAGNOSTIC_CLASSIFIER = os.getenv("DIAGNOSTIC_CLASSIFIER", "auto").strip().lower()

MAX_UPLOAD_MB = int(os.getenv("MAX_UPLOAD_MB", "100"))
CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]
