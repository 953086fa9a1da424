"""FastAPI host for the chat endpoint and, via ``nour_chat.main``, the page.

Registers the ``/chat`` router and a ``/health`` probe. The app holds no
state of its own; the gateway is injected per request.
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from nour_chat import __version__
from nour_chat.api.chat import router as chat_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
    logger.info(f"Nour Chat {__version__} ready")
    yield
    logger.info("Nour Chat stopped")


def create_app() -> FastAPI:
    """Build the FastAPI application.

    Returns:
        App with CORS open to any origin, ``/chat`` and ``/health``.
    """
    application = FastAPI(
        title="Nour Chat API",
        description=(
            "Arabic assistant backed by Google Gemini. Each request sends one "
            "prompt with a fixed persona instruction and returns the answer, "
            "or a fixed fallback string when no answer is available."
        ),
        version=__version__,
        lifespan=lifespan,
    )

    # /chat may be called from other origins
    application.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )

    application.include_router(chat_router)

    @application.get("/health")
    async def health_check() -> dict[str, str]:
        return {"status": "healthy", "service": "nour-chat"}

    return application


app = create_app()
