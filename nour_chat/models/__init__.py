"""Pydantic schemas shared by the gateway, the session state and the API."""

from nour_chat.models.schemas import (
    ChatRequest,
    ChatResponse,
    FailureKind,
    GatewayResult,
    Message,
    MessageRole,
)

__all__ = [
    "ChatRequest",
    "ChatResponse",
    "FailureKind",
    "GatewayResult",
    "Message",
    "MessageRole",
]
