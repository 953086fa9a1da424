"""NiceGUI interface - thin visualization layer for the chat.

Responsibilities:
    - In-memory session state (messages, awaiting flag, theme, pending input)
    - Chat message display with markdown rendering for answers
    - Suggestion prompts, typing indicator and clear button
    - Dark/light theme support

The page talks to the model only through the response gateway.
Importing ``nour_chat.ui.chat_page`` registers the page route.
"""
