import asyncio
import logging
import time
from typing import Optional

import httpx

from app.config import (
    ASSEMBLYAI_API_KEY,
    ASSEMBLYAI_BASE_URL,
    TRANSCRIPTION_POLL_SECONDS,
    TRANSCRIPTION_TIMEOUT_SECONDS,
)
from app.errors import TranscriptionError
from app.models.diagnostics import TranscriptionResult

logger = logging.getLogger(__name__)


class AssemblyAITranscriber:
    """
    Speech-to-text through the AssemblyAI REST API.

    upload bytes -> create transcript job -> poll until completed / error
    """

    def __init__(
        self,
        api_key: Optional[str] = ASSEMBLYAI_API_KEY,
        base_url: str = ASSEMBLYAI_BASE_URL,
        timeout_seconds: float = TRANSCRIPTION_TIMEOUT_SECONDS,
        poll_seconds: float = TRANSCRIPTION_POLL_SECONDS,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.timeout_seconds = timeout_seconds
        self.poll_seconds = poll_seconds
        self.transport = transport

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self.base_url,
            headers={"authorization": self.api_key or ""},
            timeout=60,
            transport=self.transport,
        )

    async def transcribe(self, audio: bytes, filename: str = "audio.webm") -> TranscriptionResult:
        if not self.api_key:
            raise TranscriptionError("Transcription failed: ASSEMBLYAI_API_KEY not set")

        try:
            async with self._client() as client:
                upload = await client.post("/upload", content=audio)
                upload.raise_for_status()
                audio_url = upload.json()["upload_url"]
                logger.info("Uploaded %s (%d bytes) for transcription", filename, len(audio))

                job = await client.post(
                    "/transcript",
                    json={"audio_url": audio_url, "language_detection": True},
                )
                job.raise_for_status()
                transcript_id = job.json()["id"]

                data = await self._wait_for_completion(client, transcript_id)

        except TranscriptionError:
            raise
        except (httpx.HTTPError, KeyError, ValueError) as e:
            logger.error("AssemblyAI error: %s", e)
            raise TranscriptionError(f"Transcription failed: {e}") from e

        return TranscriptionResult(
            success=True,
            text=data.get("text") or "",
            language=data.get("language_code"),
        )

    async def _wait_for_completion(self, client: httpx.AsyncClient, transcript_id: str) -> dict:
        deadline = time.monotonic() + self.timeout_seconds

        while True:
            res = await client.get(f"/transcript/{transcript_id}")
            res.raise_for_status()
            data = res.json()

            status = data.get("status")
            if status == "completed":
                return data
            if status == "error":
                raise TranscriptionError(
                    f"Transcription failed: {data.get('error') or 'unknown provider error'}"
                )

            if time.monotonic() >= deadline:
                raise TranscriptionError(
                    f"Transcription failed: timed out after {self.timeout_seconds:g}s"
                )

            await asyncio.sleep(self.poll_seconds)


def get_transcriber() -> AssemblyAITranscriber:
    return AssemblyAITranscriber()
