"""In-memory session state for one chat page.

A ``ChatSession`` is created per page load and discarded on reload.
State changes go through ``submit``, ``clear`` and ``toggle_theme`` only;
each one calls the ``on_change`` hook so the page can re-render.
"""

import logging
from collections.abc import Callable
from enum import Enum
from typing import Protocol

from nour_chat.models.schemas import GatewayResult, Message, MessageRole

logger = logging.getLogger(__name__)


class ResponseGateway(Protocol):
    """Anything that turns a prompt into a displayable result."""

    async def respond(self, prompt: str) -> GatewayResult: ...


class SessionStatus(str, Enum):
    """Whether a gateway call is outstanding."""

    IDLE = "idle"
    AWAITING = "awaiting"


class ChatSession:
    """Conversation state owned by a single chat page.

    Attributes:
        messages: Messages in insertion order.
        status: IDLE, or AWAITING while the gateway call runs.
        dark_mode: Current theme flag.
        pending_input: Text typed but not yet submitted.
    """

    def __init__(
        self,
        gateway: ResponseGateway,
        on_change: Callable[[], None] | None = None,
    ) -> None:
        self._gateway = gateway
        self._on_change = on_change
        self.messages: list[Message] = []
        self.status: SessionStatus = SessionStatus.IDLE
        self.dark_mode: bool = False
        self.pending_input: str = ""

    @property
    def is_awaiting(self) -> bool:
        return self.status is SessionStatus.AWAITING

    @property
    def can_submit(self) -> bool:
        """Whether the send button should be enabled."""
        return bool((self.pending_input or "").strip()) and not self.is_awaiting

    def set_on_change(self, on_change: Callable[[], None] | None) -> None:
        self._on_change = on_change

    def _notify(self) -> None:
        if self._on_change is not None:
            self._on_change()

    async def submit(self, text: str) -> bool:
        """Send one message and append the answer.

        Blank text and calls made while an answer is awaited are ignored.

        Args:
            text: The message as typed by the user.

        Returns:
            True if the message was accepted, False if it was ignored.
        """
        prompt = text.strip()
        if not prompt or self.is_awaiting:
            return False

        # Transition happens before the first await so a second submit is rejected
        self.status = SessionStatus.AWAITING
        self.messages.append(Message(role=MessageRole.USER, content=text))
        self.pending_input = ""
        self._notify()

        try:
            result = await self._gateway.respond(prompt)
        except Exception:
            logger.exception("Gateway raised instead of returning a result")
        else:
            self.messages.append(Message(role=MessageRole.ASSISTANT, content=result.text))
        finally:
            self.status = SessionStatus.IDLE
            self._notify()

        return True

    def clear(self) -> None:
        """Drop every message. Safe to call at any time."""
        self.messages.clear()
        self._notify()

    def toggle_theme(self) -> None:
        self.dark_mode = not self.dark_mode
        self._notify()
