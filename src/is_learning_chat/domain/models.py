"""Domain models for the chat application."""

import itertools
import time
from datetime import datetime, timezone
from typing import Iterator, List, Literal, Tuple

from pydantic import BaseModel, ConfigDict, Field

from ..config import WELCOME_TEXT

_sequence = itertools.count()


def _next_message_id() -> str:
    """Clock-ordered id; the sequence suffix keeps ids unique within one tick."""
    return f"{time.time_ns()}-{next(_sequence)}"


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Message(BaseModel):
    """Message model."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=_next_message_id)
    text: str
    sender: Literal["user", "bot"]
    timestamp: datetime = Field(default_factory=_utcnow)


class Transcript:
    """Append-only, insertion-ordered log of messages for one session."""

    def __init__(self) -> None:
        self._messages: List[Message] = []

    @classmethod
    def seeded(cls) -> "Transcript":
        """Transcript holding only the welcome message."""
        transcript = cls()
        transcript.append(Message(text=WELCOME_TEXT, sender="bot"))
        return transcript

    def append(self, message: Message) -> Message:
        self._messages.append(message)
        return message

    @property
    def messages(self) -> Tuple[Message, ...]:
        return tuple(self._messages)

    def __len__(self) -> int:
        return len(self._messages)

    def __iter__(self) -> Iterator[Message]:
        return iter(tuple(self._messages))

    def __getitem__(self, index: int) -> Message:
        return self._messages[index]


class ChatRequest(BaseModel):
    """Body accepted by the completion endpoint."""

    message: str


class ChatResponse(BaseModel):
    """Successful completion payload."""

    response: str


class ErrorResponse(BaseModel):
    """Failure payload."""

    error: str
