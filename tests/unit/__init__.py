"""Unit tests for individual components in isolation.

Coverage:
    - gateway/: Configuration, fallback conversion and timeout handling
    - ui/session: Submit, clear and theme transitions
    - ui/markdown: HTML rendering of assistant answers
"""
