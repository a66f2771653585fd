"""LiteLLM model caller for non-OpenAI providers.

LiteLLM normalizes 100+ LLM APIs to the OpenAI format. This caller is a thin
adapter over ``litellm.acompletion()``.

Note: litellm is an optional dependency. If not installed, instantiation
will raise ImportError with installation instructions.
"""

from __future__ import annotations

from typing import Any

from dim.errors import TransportError
from dim.logging import get_logger
from dim.providers.openai_provider import JSON_OBJECT_FORMAT
from dim.types import ModelRequest

logger = get_logger(__name__)

try:
    import litellm  # type: ignore[import-not-found]

    HAS_LITELLM = True
except ImportError:
    HAS_LITELLM = False


class LiteLLMModelCaller:
    """Model caller backed by litellm.

    The model identifier in ``ModelParameters`` uses litellm's
    "provider/model" form, e.g. "anthropic/claude-3-5-sonnet-20240620".

    Args:
        api_key: API key for the provider (optional, can use env vars)
        base_url: Base URL override (optional)
        response_format: Sent as-is; None disables JSON mode.

    Raises:
        ImportError: If litellm is not installed
    """

    def __init__(
        self,
        api_key: str | None = None,
        base_url: str | None = None,
        response_format: dict[str, Any] | None = JSON_OBJECT_FORMAT,
    ) -> None:
        if not HAS_LITELLM:
            raise ImportError(
                "litellm is required but not installed. "
                "Install with: pip install 'dim-vectorizer[litellm]'"
            )

        self._api_key = api_key
        self._base_url = base_url
        self._response_format = response_format

    async def call(self, request: ModelRequest) -> str:
        kwargs: dict[str, Any] = request.parameters.to_request_fields()
        kwargs["messages"] = request.to_messages()

        if self._api_key is not None:
            kwargs["api_key"] = self._api_key
        if self._base_url is not None:
            kwargs["base_url"] = self._base_url
        if self._response_format is not None:
            kwargs["response_format"] = self._response_format

        try:
            response = await litellm.acompletion(**kwargs)
        except Exception as exc:
            logger.error(
                "litellm_error",
                exception_type=type(exc).__name__,
                exception=str(exc),
                model=kwargs["model"],
            )
            raise

        try:
            content = response.choices[0].message.content
        except (AttributeError, IndexError):
            raise TransportError("malformed litellm response") from None
        if not content:
            raise TransportError("litellm returned empty content")
        return content
