"""Unit tests for GeminiGateway and GatewayConfig.

Tests configuration loading and the conversion of every model outcome
into a GatewayResult.
"""

import asyncio
from unittest.mock import MagicMock, patch

import pytest
from agno.run.base import RunStatus
from pydantic import ValidationError

from nour_chat.gateway import (
    CONNECTION_ERROR_TEXT,
    NO_ANSWER_TEXT,
    SYSTEM_INSTRUCTION,
    GatewayConfig,
    GeminiGateway,
)
from nour_chat.models.schemas import FailureKind, GatewayResult
from tests.fakes import run_output


class TestGatewayConfig:
    """Tests for GatewayConfig validation."""

    def test_config_with_default_values(self) -> None:
        """Config uses the fixed temperature and default model."""
        with patch.dict("os.environ", {}, clear=True):
            config = GatewayConfig(api_key="key")

        assert config.model_name == "gemini-3-flash-preview"
        assert config.temperature == 0.7
        assert config.request_timeout is None

    def test_config_reads_environment(self) -> None:
        """Key, model and timeout come from the environment."""
        env = {
            "GEMINI_API_KEY": "  env-key  ",
            "GEMINI_MODEL": "gemini-2.5-flash",
            "GEMINI_TIMEOUT": "2.5",
        }
        with patch.dict("os.environ", env, clear=True):
            config = GatewayConfig()

        assert config.api_key == "env-key"
        assert config.model_name == "gemini-2.5-flash"
        assert config.request_timeout == 2.5

    def test_config_falls_back_to_google_api_key(self) -> None:
        with patch.dict("os.environ", {"GOOGLE_API_KEY": "google-key"}, clear=True):
            config = GatewayConfig()

        assert config.api_key == "google-key"

    def test_missing_api_key_is_allowed(self) -> None:
        """A missing key does not fail at startup."""
        with patch.dict("os.environ", {}, clear=True):
            config = GatewayConfig()

        assert config.api_key == ""
        assert config.has_api_key is False

    def test_whitespace_api_key_counts_as_missing(self) -> None:
        assert GatewayConfig(api_key="   ").has_api_key is False

    @pytest.mark.parametrize("temperature", [-0.1, 2.5])
    def test_config_rejects_out_of_range_temperature(self, temperature: float) -> None:
        with pytest.raises(ValidationError) as exc_info:
            GatewayConfig(api_key="key", temperature=temperature)

        assert "temperature" in str(exc_info.value).lower()

    def test_config_rejects_non_positive_timeout(self) -> None:
        with pytest.raises(ValidationError):
            GatewayConfig(api_key="key", request_timeout=0)

    def test_malformed_timeout_env_raises_validation_error(self) -> None:
        """A non-numeric GEMINI_TIMEOUT is reported by pydantic, not float()."""
        with (
            patch.dict("os.environ", {"GEMINI_TIMEOUT": "abc"}, clear=True),
            pytest.raises(ValidationError) as exc_info,
        ):
            GatewayConfig(api_key="key")

        assert "request_timeout" in str(exc_info.value)

    def test_blank_timeout_env_means_no_limit(self) -> None:
        with patch.dict("os.environ", {"GEMINI_TIMEOUT": "   "}, clear=True):
            config = GatewayConfig(api_key="key")

        assert config.request_timeout is None


class TestGatewayInit:
    """Tests for agent construction."""

    @patch("nour_chat.gateway.gemini_gateway.Gemini")
    @patch("nour_chat.gateway.gemini_gateway.Agent")
    def test_agent_gets_fixed_instruction_and_temperature(
        self,
        mock_agent_class: MagicMock,
        mock_gemini: MagicMock,
        gateway_config: GatewayConfig,
    ) -> None:
        GeminiGateway(config=gateway_config)

        mock_gemini.assert_called_once_with(
            id="gemini-test",
            api_key="test-key",
            temperature=0.7,
        )
        call_kwargs = mock_agent_class.call_args.kwargs
        assert call_kwargs["model"] is mock_gemini.return_value
        assert call_kwargs["system_message"] == SYSTEM_INSTRUCTION

    @patch("nour_chat.gateway.gemini_gateway.Gemini")
    @patch("nour_chat.gateway.gemini_gateway.Agent")
    def test_no_agent_without_api_key(
        self,
        mock_agent_class: MagicMock,
        mock_gemini: MagicMock,
    ) -> None:
        GeminiGateway(config=GatewayConfig(api_key=""))

        mock_agent_class.assert_not_called()
        mock_gemini.assert_not_called()


class TestRespond:
    """Tests for GeminiGateway.respond."""

    async def test_returns_model_text_verbatim(
        self, mock_agent: MagicMock, gateway_config: GatewayConfig
    ) -> None:
        mock_agent.arun.return_value = run_output("  **الإيمان** له ستة أركان...\n")
        gateway = GeminiGateway(config=gateway_config)

        result = await gateway.respond("ما هي أركان الإيمان؟")

        assert result == GatewayResult(ok=True, text="  **الإيمان** له ستة أركان...\n")
        mock_agent.arun.assert_awaited_once_with("ما هي أركان الإيمان؟")

    @pytest.mark.parametrize("content", ["", None])
    async def test_empty_answer_returns_no_answer_text(
        self, mock_agent: MagicMock, gateway_config: GatewayConfig, content: str | None
    ) -> None:
        mock_agent.arun.return_value = run_output(content)
        gateway = GeminiGateway(config=gateway_config)

        result = await gateway.respond("سؤال")

        assert result.text == NO_ANSWER_TEXT
        assert result.ok is False
        assert result.failure is FailureKind.EMPTY_RESPONSE

    @pytest.mark.parametrize(
        "error",
        [ConnectionError("network down"), PermissionError("invalid key"), ValueError("bad json")],
    )
    async def test_raised_error_returns_connection_error_text(
        self, mock_agent: MagicMock, gateway_config: GatewayConfig, error: Exception
    ) -> None:
        mock_agent.arun.side_effect = error
        gateway = GeminiGateway(config=gateway_config)

        result = await gateway.respond("سؤال")

        assert result.text == CONNECTION_ERROR_TEXT
        assert result.ok is False
        assert result.failure is FailureKind.CONNECTION_ERROR

    async def test_errored_run_returns_connection_error_text(
        self, mock_agent: MagicMock, gateway_config: GatewayConfig
    ) -> None:
        """A run that ends with error status is a failure, not an answer."""
        mock_agent.arun.return_value = run_output("quota exceeded", status=RunStatus.error)
        gateway = GeminiGateway(config=gateway_config)

        result = await gateway.respond("سؤال")

        assert result.text == CONNECTION_ERROR_TEXT
        assert result.failure is FailureKind.CONNECTION_ERROR

    async def test_missing_key_returns_connection_error_text(self) -> None:
        gateway = GeminiGateway(config=GatewayConfig(api_key=""))

        result = await gateway.respond("سؤال")

        assert result.text == CONNECTION_ERROR_TEXT
        assert result.failure is FailureKind.CONNECTION_ERROR

    async def test_timeout_returns_connection_error_text(self, mock_agent: MagicMock) -> None:
        async def hang(prompt: str) -> None:
            await asyncio.sleep(5)

        mock_agent.arun.side_effect = hang
        gateway = GeminiGateway(config=GatewayConfig(api_key="key", request_timeout=0.01))

        result = await gateway.respond("سؤال")

        assert result.text == CONNECTION_ERROR_TEXT

    async def test_non_string_content_is_converted(
        self, mock_agent: MagicMock, gateway_config: GatewayConfig
    ) -> None:
        mock_agent.arun.return_value = run_output(42)
        gateway = GeminiGateway(config=gateway_config)

        result = await gateway.respond("سؤال")

        assert result == GatewayResult(ok=True, text="42")


class TestGetGateway:
    """Tests for get_gateway singleton function."""

    def test_singleton_returns_same_instance(self) -> None:
        import nour_chat.gateway.gemini_gateway as gateway_module

        # Reset singleton
        gateway_module._gateway = None

        with patch.object(gateway_module, "GeminiGateway") as mock_gateway:
            first = gateway_module.get_gateway()
            second = gateway_module.get_gateway()

            assert first is second
            mock_gateway.assert_called_once()

        gateway_module._gateway = None
