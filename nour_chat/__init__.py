"""Nour Chat - a single-page Arabic assistant backed by Google Gemini.

Combines NiceGUI for the chat page, Agno for the Gemini call,
FastAPI for hosting, and Pydantic for configuration and schemas.

Components:
    - gateway: the single outbound model call and its fallback handling
    - ui: in-memory session state and the chat page
    - api: HTTP host, health check and JSON chat endpoint
    - models: message, result and request/response schemas
"""

__version__ = "0.1.0"
