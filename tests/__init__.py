"""Test package for Nour Chat.

Structure:
    - unit/: Gateway, session state and markdown rendering in isolation
    - integration/: HTTP endpoints and full submit-to-answer flows

The Gemini model is never called; the Agno agent is mocked where a
real gateway is exercised.
"""
