"""Chat endpoint exposing the response gateway as JSON.

Each request is answered independently; no history is kept server-side.
"""

import logging

from fastapi import APIRouter, Depends

from nour_chat.gateway import GeminiGateway, get_gateway
from nour_chat.models.schemas import ChatRequest, ChatResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/chat", tags=["chat"])


@router.post("", response_model=ChatResponse)
async def chat(
    request: ChatRequest,
    gateway: GeminiGateway = Depends(get_gateway),
) -> ChatResponse:
    """Answer a single message.

    Args:
        request: Chat payload with a non-blank message.
        gateway: Response gateway (injected).

    Returns:
        ChatResponse with the model's answer, or a fallback string and
        ``ok=False`` when the model gave nothing or the call failed.

    Raises:
        422: Message missing or blank.
    """
    result = await gateway.respond(request.message)
    if not result.ok:
        logger.info(f"Chat request answered with fallback ({result.failure})")
    return ChatResponse(response=result.text, ok=result.ok)
