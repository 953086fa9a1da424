"""Integration tests for the HTTP API and full conversation flows.

The Agno agent is mocked; everything between the page state and the
agent call runs for real.
"""
