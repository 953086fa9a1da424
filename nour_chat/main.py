"""Entry point: one uvicorn process serving the chat page and the API.

The NiceGUI page is mounted on the FastAPI app, so ``/``, ``/health``,
``/chat`` and ``/docs`` share a port. Settings come from the environment
and an optional ``.env`` file:

    HOST, PORT    bind address (default 0.0.0.0:8000)
    LOG_LEVEL     root log level (default INFO)
"""

import logging
import os
import sys

import uvicorn
from dotenv import load_dotenv
from fastapi import FastAPI
from nicegui import ui

from nour_chat.api.app import create_app
from nour_chat.gateway import get_gateway
from nour_chat.ui import chat_page  # noqa: F401 - registers the "/" page
from nour_chat.ui.chat_page import APP_TITLE

logger = logging.getLogger(__name__)


def configure_logging() -> None:
    logging.basicConfig(
        level=os.getenv("LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )


def build_app() -> FastAPI:
    """Create the API app with the chat page mounted on it.

    The gateway is created here, so the credential is read once at startup
    and a missing key is logged before the first page load.

    Returns:
        FastAPI application serving both the page and the API.
    """
    get_gateway()
    app = create_app()
    ui.run_with(app, title=APP_TITLE, favicon="📖")
    return app


def main() -> None:
    load_dotenv()
    configure_logging()

    host = os.getenv("HOST", "0.0.0.0")
    port = int(os.getenv("PORT", "8000"))
    app = build_app()

    logger.info(f"Chat page on http://localhost:{port}/, API docs on http://localhost:{port}/docs")
    uvicorn.run(app, host=host, port=port, log_level=os.getenv("LOG_LEVEL", "info").lower())


if __name__ == "__main__":
    main()
