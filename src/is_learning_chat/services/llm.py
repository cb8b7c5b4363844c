"""LLM service answering Information Systems questions through Gemini."""

from typing import Optional

import google.generativeai as genai
import structlog
from google.api_core import exceptions

from ..config import SYSTEM_INSTRUCTION, get_api_key, get_model_name
from ..domain.errors import GenerationError

logger = structlog.get_logger()


class LLMService:
    """LLM service using Google's Gemini model with a fixed tutoring persona."""

    def __init__(
        self,
        model_name: Optional[str] = None,
        api_key: Optional[str] = None,
        system_instruction: str = SYSTEM_INSTRUCTION,
    ):
        """Initialize the LLM service."""
        self.model_name = model_name or get_model_name()
        api_key = api_key or get_api_key()
        if api_key:
            genai.configure(api_key=api_key)
        self.model = genai.GenerativeModel(
            self.model_name,
            system_instruction=system_instruction,
        )
        logger.info("llm_service_init", model=self.model_name, api_key_set=bool(api_key))

    async def generate_response(self, message: str) -> str:
        """Generate a single-turn reply; no earlier turns are sent to the model.

        Raises:
            GenerationError: the provider failed, blocked the prompt, or
                returned no text.
        """
        try:
            response = await self.model.generate_content_async(message)
        except exceptions.GoogleAPIError as e:
            logger.error("gemini_api_error", model=self.model_name, error=str(e))
            raise GenerationError("Gemini request failed") from e
        except Exception as e:
            logger.error("response_generation_error", model=self.model_name, error=str(e))
            raise GenerationError("Gemini request failed") from e

        try:
            # .text raises when the candidate was blocked or has no parts
            text = response.text
        except (ValueError, AttributeError, IndexError) as e:
            logger.error("gemini_malformed_response", model=self.model_name, error=str(e))
            raise GenerationError("Gemini returned no usable candidate") from e

        if not text or not text.strip():
            logger.error("gemini_empty_response", model=self.model_name)
            raise GenerationError("Gemini returned an empty reply")

        return text
