"""Response gateway: one prompt in, one displayable string out.

The only module that talks to the hosted model. Wraps an Agno agent
backed by Google Gemini and converts every failure mode into a
``GatewayResult`` carrying a fixed Arabic fallback string.

Design notes:

1. **Stateless agent** - No Agno storage is attached, so each call sends
   only the system instruction and the current prompt. Conversation
   history lives in the browser session and never reaches the model.

2. **Never raises** - The chat page has no error display path. Empty
   answers, transport errors, authentication and quota errors all come
   back as ordinary results with ``ok=False``.

3. **No retries, no streaming** - One ``arun`` call, awaited as a unit.
   A timeout is applied only when ``GEMINI_TIMEOUT`` is configured.
"""

import asyncio
import logging

from agno.agent import Agent
from agno.models.google import Gemini
from agno.run.base import RunStatus

from nour_chat.gateway.config import GatewayConfig, get_gateway_config
from nour_chat.models.schemas import FailureKind, GatewayResult

logger = logging.getLogger(__name__)

SYSTEM_INSTRUCTION = """أنت مساعد ذكي، لبق، ومفيد.
تجيب على أسئلة المستخدم بوضوح ودقة.
إذا سألك المستخدم عن أمور دينية (إسلامية أو مسيحية)، قدم له إجابات موثقة ومحترمة تدعو للتسامح والمحبة.
استخدم لغة عربية فصحى وجميلة.
ركز على تقديم الفائدة والمعرفة في كافة المجالات."""

NO_ANSWER_TEXT = "عذراً، لم أتمكن من العثور على إجابة حالياً."
CONNECTION_ERROR_TEXT = "حدث خطأ أثناء الاتصال بالخادم. يرجى المحاولة مرة أخرى لاحقاً."


class GeminiGateway:
    """Gateway between the chat session and Google Gemini.

    Wraps Agno's Agent with:
    - A fixed persona instruction and sampling temperature
    - Conversion of empty answers and errors into fallback strings
    - An optional per-call timeout
    """

    def __init__(self, config: GatewayConfig | None = None) -> None:
        """Initialize the gateway.

        Args:
            config: Optional gateway configuration.
                    Loads from environment if not provided.
        """
        self._config = config or get_gateway_config()
        self._agent = self._create_agent() if self._config.has_api_key else None
        if self._agent is None:
            logger.warning("GEMINI_API_KEY is not set; every answer will be the error fallback")

    def _create_agent(self) -> Agent:
        """Create the Agno agent instance.

        Returns:
            Agent with a Gemini model and the fixed system instruction.
        """
        model = Gemini(
            id=self._config.model_name,
            api_key=self._config.api_key,
            temperature=self._config.temperature,
        )

        return Agent(
            model=model,
            system_message=SYSTEM_INSTRUCTION,
            telemetry=False,
        )

    async def _run(self, prompt: str) -> str:
        run = self._agent.arun(prompt)
        if self._config.request_timeout is not None:
            response = await asyncio.wait_for(run, timeout=self._config.request_timeout)
        else:
            response = await run

        if getattr(response, "status", None) == RunStatus.error:
            raise RuntimeError(f"Gemini run failed: {response.content}")
        if response.content is None:
            return ""
        return response.content if isinstance(response.content, str) else str(response.content)

    async def respond(self, prompt: str) -> GatewayResult:
        """Get the model's answer for one prompt.

        Args:
            prompt: The user's trimmed, non-empty message.

        Returns:
            GatewayResult with the answer, or with a fallback string
            when the answer is empty or the call fails.
        """
        if self._agent is None:
            logger.warning("Skipping Gemini call: no API key configured")
            return GatewayResult.fallback(FailureKind.CONNECTION_ERROR, CONNECTION_ERROR_TEXT)

        try:
            text = await self._run(prompt)
        except Exception:
            logger.exception("Gemini API error")
            return GatewayResult.fallback(FailureKind.CONNECTION_ERROR, CONNECTION_ERROR_TEXT)

        if not text:
            logger.warning("Gemini returned an empty answer")
            return GatewayResult.fallback(FailureKind.EMPTY_RESPONSE, NO_ANSWER_TEXT)

        return GatewayResult.answer(text)


# Module-level singleton instance
_gateway: GeminiGateway | None = None


def get_gateway() -> GeminiGateway:
    """Get or create the global gateway.

    The credential is read from the environment on first use only.

    Returns:
        The GeminiGateway instance.
    """
    global _gateway
    if _gateway is None:
        _gateway = GeminiGateway()
    return _gateway
