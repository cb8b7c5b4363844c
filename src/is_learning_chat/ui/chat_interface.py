"""Chat UI state: transcript, draft buffer and the pending flag.

A ``ChatInterface`` performs one network call per user turn against the
completion endpoint and always ends the turn with exactly one bot message,
either the model's reply or a fixed apology.
"""

from typing import Callable, Optional

import httpx
from structlog import get_logger

from ..config import APOLOGY_TEXT, CHAT_ENDPOINT_PATH, FALLBACK_REPLY_TEXT
from ..domain.models import ChatRequest, Message, Transcript

logger = get_logger()

TranscriptListener = Callable[[Transcript], None]


class ChatInterface:
    """In-memory chat session driving the completion endpoint."""

    def __init__(
        self,
        client: httpx.AsyncClient,
        endpoint: str = CHAT_ENDPOINT_PATH,
        on_transcript_change: Optional[TranscriptListener] = None,
    ):
        self._client = client
        self._endpoint = endpoint
        self._on_transcript_change = on_transcript_change
        self.transcript = Transcript.seeded()
        self.pending = False
        self.draft = ""

    @property
    def can_submit(self) -> bool:
        return bool(self.draft.strip()) and not self.pending

    def _append(self, text: str, sender: str) -> Message:
        message = self.transcript.append(Message(text=text, sender=sender))
        if self._on_transcript_change is not None:
            # scroll-to-latest hook
            self._on_transcript_change(self.transcript)
        return message

    async def submit(self, draft: Optional[str] = None) -> Optional[Message]:
        """Send the draft as one user turn and append the bot's answer.

        Does nothing and returns None for a blank draft or while a previous
        turn is still outstanding. Otherwise returns the bot message.
        """
        text = self.draft if draft is None else draft
        if not text.strip() or self.pending:
            return None

        self._append(text, "user")
        self.draft = ""
        self.pending = True
        try:
            reply = await self._request_reply(text)
        except Exception as e:
            logger.error(
                "ui_request_failed",
                endpoint=self._endpoint,
                error=str(e),
                error_type=type(e).__name__,
            )
            reply = APOLOGY_TEXT
        finally:
            self.pending = False
        return self._append(reply, "bot")

    async def _request_reply(self, text: str) -> str:
        response = await self._client.post(
            self._endpoint, json=ChatRequest(message=text).model_dump()
        )
        response.raise_for_status()
        data = response.json()
        reply = data.get("response") if isinstance(data, dict) else None
        if not reply or not isinstance(reply, str):
            logger.warning("ui_reply_missing", endpoint=self._endpoint)
            return FALLBACK_REPLY_TEXT
        return reply
