"""Pydantic models for conversation state, gateway results and the HTTP API.

Models:
    - Message: One entry in the in-memory conversation
    - GatewayResult: Outcome of a single model call
    - ChatRequest: Incoming JSON chat payload
    - ChatResponse: Outgoing JSON chat payload
"""

import uuid
from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator


class MessageRole(str, Enum):
    """Speaker of a message."""

    USER = "user"
    ASSISTANT = "assistant"


class FailureKind(str, Enum):
    """Why the gateway substituted a fallback string."""

    EMPTY_RESPONSE = "empty_response"
    CONNECTION_ERROR = "connection_error"


class Message(BaseModel):
    """A single chat message. Immutable once created.

    Attributes:
        id: Unique message identifier.
        role: Who wrote the message.
        content: Plain text for the user, markdown for the assistant.
        created_at: Creation time, shown under the bubble.
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=lambda: uuid.uuid4().hex)
    role: MessageRole
    content: str
    created_at: datetime = Field(default_factory=datetime.now)


class GatewayResult(BaseModel):
    """Result of one gateway call. Always carries displayable text.

    Attributes:
        ok: True when ``text`` is the model's own answer.
        text: Model answer or fixed fallback string.
        failure: Reason for the fallback, None on success.
    """

    model_config = ConfigDict(frozen=True)

    ok: bool
    text: str
    failure: FailureKind | None = None

    @classmethod
    def answer(cls, text: str) -> "GatewayResult":
        return cls(ok=True, text=text)

    @classmethod
    def fallback(cls, failure: FailureKind, text: str) -> "GatewayResult":
        return cls(ok=False, text=text, failure=failure)


class ChatRequest(BaseModel):
    """Request payload for the chat endpoint.

    Attributes:
        message: User's question or prompt.
    """

    message: str = Field(..., min_length=1, description="The user's message")

    @field_validator("message", mode="before")
    @classmethod
    def strip_message(cls, v: str) -> str:
        """Strip whitespace from message before validation."""
        if isinstance(v, str):
            return v.strip()
        return v


class ChatResponse(BaseModel):
    """Response from the chat endpoint.

    Attributes:
        response: The assistant's answer or fallback string.
        ok: Whether the answer came from the model.
    """

    response: str = Field(..., description="The assistant's response")
    ok: bool = Field(..., description="False when a fallback string was returned")
