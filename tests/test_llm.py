"""Test suite for the Gemini-backed LLM service."""

from types import SimpleNamespace

import pytest
from google.api_core import exceptions
from structlog.testing import capture_logs

from is_learning_chat.config import SYSTEM_INSTRUCTION
from is_learning_chat.domain.errors import GenerationError
from is_learning_chat.services.llm import LLMService


class FakeModel:
    """Stands in for genai.GenerativeModel."""

    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.prompts = []

    async def generate_content_async(self, prompt):
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return self.response


class BlockedResponse:
    @property
    def text(self):
        raise ValueError("The response.text quick accessor requires a valid Part")


def make_service(model: FakeModel) -> LLMService:
    service = LLMService(model_name="gemini-test")
    service.model = model
    return service


def test_system_instruction_covers_curriculum():
    for topic in (
        "Information Technology fundamentals",
        "Database management systems",
        "Networks and cybersecurity",
        "Software development",
        "Enterprise systems",
        "business intelligence",
        "governance",
        "Include examples",
    ):
        assert topic in SYSTEM_INSTRUCTION


def test_model_name_from_environment(monkeypatch):
    monkeypatch.setenv("IS_CHAT_MODEL", "gemini-env-model")
    assert LLMService().model_name == "gemini-env-model"


@pytest.mark.asyncio
async def test_generate_response_returns_text():
    model = FakeModel(response=SimpleNamespace(text="A primary key uniquely identifies a row."))
    service = make_service(model)
    assert await service.generate_response("What is a primary key?") == "A primary key uniquely identifies a row."
    assert model.prompts == ["What is a primary key?"]


@pytest.mark.asyncio
async def test_provider_error_raises_generation_error():
    service = make_service(FakeModel(error=exceptions.ServiceUnavailable("overloaded")))
    with capture_logs() as logs:
        with pytest.raises(GenerationError):
            await service.generate_response("What is a router?")
    assert logs[-1]["event"] == "gemini_api_error"
    assert logs[-1]["model"] == "gemini-test"


@pytest.mark.asyncio
async def test_timeout_raises_generation_error():
    service = make_service(FakeModel(error=TimeoutError("read timed out")))
    with pytest.raises(GenerationError):
        await service.generate_response("What is latency?")


@pytest.mark.asyncio
async def test_blocked_response_raises_generation_error():
    service = make_service(FakeModel(response=BlockedResponse()))
    with pytest.raises(GenerationError):
        await service.generate_response("What is phishing?")


@pytest.mark.asyncio
@pytest.mark.parametrize("text", ["", "   "])
async def test_empty_text_raises_generation_error(text):
    service = make_service(FakeModel(response=SimpleNamespace(text=text)))
    with pytest.raises(GenerationError):
        await service.generate_response("What is a switch?")
