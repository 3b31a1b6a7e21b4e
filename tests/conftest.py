import pytest

from app.models.diagnostics import TranscriptionResult


class FakeMessage:
    def __init__(self, content):
        self.content = content


class FakeLLM:
    """Stands in for the chat model: returns a canned reply or raises."""

    def __init__(self, reply=None, error=None):
        self.reply = reply
        self.error = error
        self.calls = []

    async def ainvoke(self, messages):
        self.calls.append(messages)
        if self.error:
            raise self.error
        return FakeMessage(self.reply)


class FakeTranscriber:
    def __init__(self, text="", error=None):
        self.text = text
        self.error = error
        self.received = []

    async def transcribe(self, audio, filename="audio.webm"):
        self.received.append((audio, filename))
        if self.error:
            raise self.error
        return TranscriptionResult(success=True, text=self.text, language="en")


@pytest.fixture
def fake_llm_factory():
    return FakeLLM


@pytest.fixture
def fake_transcriber_factory():
    return FakeTranscriber
