"""Shared fixtures: a scripted stand-in for the Gemini-backed service."""

from typing import List, Optional

import pytest

from is_learning_chat.api.app import app, get_llm_service
from is_learning_chat.domain.errors import GenerationError


class FakeLLMService:
    """Records prompts and answers with a fixed reply or error."""

    model_name = "fake-model"

    def __init__(self, reply: str = "A database is an organized collection of data.", error: Optional[Exception] = None):
        self.reply = reply
        self.error = error
        self.prompts: List[str] = []

    async def generate_response(self, message: str) -> str:
        self.prompts.append(message)
        if self.error is not None:
            raise self.error
        return self.reply


@pytest.fixture
def fake_llm():
    """Installs a fake LLM service on the app for the duration of a test."""
    service = FakeLLMService()
    app.dependency_overrides[get_llm_service] = lambda: service
    yield service
    app.dependency_overrides.pop(get_llm_service, None)


@pytest.fixture
def failing_llm(fake_llm):
    fake_llm.error = GenerationError("upstream unavailable")
    return fake_llm
