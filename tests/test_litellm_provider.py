"""Tests for the LiteLLM model caller with mocked dependencies."""

import importlib
import sys
from unittest.mock import AsyncMock, MagicMock

import pytest

from dim.errors import TransportError
from dim.types import ModelParameters, ModelRequest


def _response(content: str | None) -> MagicMock:
    response = MagicMock()
    response.choices = [MagicMock()]
    response.choices[0].message.content = content
    return response


@pytest.fixture
def mock_litellm(monkeypatch: pytest.MonkeyPatch):
    """Mock the litellm module so tests pass without litellm installed."""
    mock_module = MagicMock()
    mock_module.acompletion = AsyncMock()
    monkeypatch.setitem(sys.modules, "litellm", mock_module)

    import dim.providers.litellm_provider

    importlib.reload(dim.providers.litellm_provider)
    monkeypatch.setattr("dim.providers.litellm_provider.HAS_LITELLM", True)
    return mock_module


@pytest.mark.asyncio
async def test_call_passes_request_fields(mock_litellm) -> None:
    from dim.providers.litellm_provider import LiteLLMModelCaller

    mock_litellm.acompletion.return_value = _response('{"x": 5}')
    caller = LiteLLMModelCaller(api_key="test-key", base_url="https://test.api.com/v1")
    request = ModelRequest(
        prompt="p",
        content="p\n\nText to analyze: t",
        parameters=ModelParameters(model="anthropic/claude-3-haiku-20240307", temperature=0.5),
    )

    assert await caller.call(request) == '{"x": 5}'
    kwargs = mock_litellm.acompletion.call_args.kwargs
    assert kwargs["model"] == "anthropic/claude-3-haiku-20240307"
    assert kwargs["temperature"] == 0.5
    assert kwargs["messages"] == [{"role": "user", "content": "p\n\nText to analyze: t"}]
    assert kwargs["api_key"] == "test-key"
    assert kwargs["base_url"] == "https://test.api.com/v1"
    assert kwargs["response_format"] == {"type": "json_object"}


@pytest.mark.asyncio
async def test_empty_content_raises_transport_error(mock_litellm) -> None:
    from dim.providers.litellm_provider import LiteLLMModelCaller

    mock_litellm.acompletion.return_value = _response(None)
    caller = LiteLLMModelCaller()
    request = ModelRequest(prompt="p", content="p", parameters=ModelParameters(model="m"))

    with pytest.raises(TransportError, match="empty content"):
        await caller.call(request)


def test_import_guard_raises_when_litellm_missing(monkeypatch: pytest.MonkeyPatch) -> None:
    import dim.providers.litellm_provider

    monkeypatch.setattr("dim.providers.litellm_provider.HAS_LITELLM", False)

    from dim.providers.litellm_provider import LiteLLMModelCaller

    with pytest.raises(ImportError) as exc_info:
        LiteLLMModelCaller()

    assert "litellm is required" in str(exc_info.value)
