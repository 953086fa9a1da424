"""Response gateway for the hosted Gemini model.

Responsibilities:
    - Gemini model setup through an Agno agent
    - Fixed persona instruction and sampling temperature
    - Conversion of empty answers and call failures into fallback strings

Nothing outside this package talks to the model API.
"""

from nour_chat.gateway.config import GatewayConfig, get_gateway_config
from nour_chat.gateway.gemini_gateway import (
    CONNECTION_ERROR_TEXT,
    NO_ANSWER_TEXT,
    SYSTEM_INSTRUCTION,
    GeminiGateway,
    get_gateway,
)

__all__ = [
    "CONNECTION_ERROR_TEXT",
    "NO_ANSWER_TEXT",
    "SYSTEM_INSTRUCTION",
    "GatewayConfig",
    "GeminiGateway",
    "get_gateway",
    "get_gateway_config",
]
