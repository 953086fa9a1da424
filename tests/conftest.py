"""Pytest fixtures and shared test configuration.

Fixtures:
    - fake_gateway: Scriptable stand-in for the response gateway
    - mock_agent: Patched Agno agent behind a real GeminiGateway
    - gateway_config: Config with a dummy key and no timeout
    - async_client: HTTPX client for API testing
"""

from collections.abc import AsyncGenerator, Iterator
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from httpx import ASGITransport, AsyncClient

from nour_chat.api import app
from nour_chat.gateway import GatewayConfig, get_gateway
from tests.fakes import FakeGateway, run_output


@pytest.fixture
def fake_gateway() -> FakeGateway:
    return FakeGateway()


@pytest.fixture
def gateway_config() -> GatewayConfig:
    """Config with a dummy key so the agent gets created."""
    return GatewayConfig(api_key="test-key", model_name="gemini-test", request_timeout=None)


@pytest.fixture
def mock_agent() -> Iterator[MagicMock]:
    """Patch Agno's Agent and Gemini classes.

    Yields:
        The agent instance a new GeminiGateway will use. Configure
        ``mock_agent.arun`` to script the model's behaviour.
    """
    with (
        patch("nour_chat.gateway.gemini_gateway.Gemini"),
        patch("nour_chat.gateway.gemini_gateway.Agent") as mock_agent_class,
    ):
        agent = mock_agent_class.return_value
        agent.arun = AsyncMock(return_value=run_output("جواب"))
        yield agent


@pytest.fixture
async def async_client(fake_gateway: FakeGateway) -> AsyncGenerator[AsyncClient]:
    """Create async HTTP client with the fake gateway injected.

    Yields:
        Configured AsyncClient for making test requests.
    """
    app.dependency_overrides[get_gateway] = lambda: fake_gateway
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()
