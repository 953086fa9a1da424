"""FastAPI host for the chat page and its JSON endpoint.

Endpoints:
    - GET /health: Service health status
    - POST /chat: One prompt, one answer (or fallback string)
    - GET /: NiceGUI chat page, when mounted by ``nour_chat.main``
"""

from nour_chat.api.app import app, create_app

__all__ = ["app", "create_app"]
