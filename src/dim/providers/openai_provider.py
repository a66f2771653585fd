"""OpenAI-compatible chat/completions caller using httpx."""

from __future__ import annotations

from types import TracebackType
from typing import Any

import httpx

from dim.config import ProviderSettings
from dim.errors import TransportError
from dim.logging import get_logger
from dim.types import ModelRequest

logger = get_logger(__name__)

JSON_OBJECT_FORMAT: dict[str, Any] = {"type": "json_object"}


class OpenAIModelCaller:
    """OpenAI-compatible model caller using httpx AsyncClient.

    Works against OpenAI, Ollama, LM Studio and any other server exposing
    ``/chat/completions``. One instance may be shared by many concurrent
    calls; the underlying connection pool is reused.
    """

    def __init__(
        self,
        api_key: str,
        base_url: str = "https://api.openai.com/v1",
        response_format: dict[str, Any] | None = JSON_OBJECT_FORMAT,
        connect_timeout: float = 10.0,
        read_timeout: float = 120.0,
        write_timeout: float = 10.0,
        pool_timeout: float = 10.0,
    ) -> None:
        self._api_key = api_key
        self._base_url = base_url.rstrip("/")
        self._response_format = response_format
        self._timeout = httpx.Timeout(
            connect=connect_timeout,
            read=read_timeout,
            write=write_timeout,
            pool=pool_timeout,
        )
        self._client = httpx.AsyncClient(trust_env=False, timeout=self._timeout)

    @classmethod
    def from_settings(cls, settings: ProviderSettings, **kwargs: Any) -> OpenAIModelCaller:
        return cls(api_key=settings.api_key, base_url=settings.api_base, **kwargs)

    async def call(self, request: ModelRequest) -> str:
        url = f"{self._base_url}/chat/completions"
        headers = {
            "Authorization": f"Bearer {self._api_key}",
            "Content-Type": "application/json",
        }

        request_body: dict[str, Any] = request.parameters.to_request_fields()
        request_body["messages"] = request.to_messages()
        if self._response_format is not None:
            request_body["response_format"] = self._response_format

        try:
            response = await self._client.post(url, json=request_body, headers=headers)
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            logger.error(
                "llm_http_error",
                status_code=exc.response.status_code,
                response_body=exc.response.text,
                exception=str(exc),
            )
            raise
        except httpx.RequestError as exc:
            request_method: str | None = None
            request_url: str | None = None
            try:
                request_method = exc.request.method
                request_url = str(exc.request.url)
            except RuntimeError:
                pass
            logger.error(
                "llm_network_error",
                exception_type=type(exc).__name__,
                exception=str(exc),
                request_method=request_method,
                request_url=request_url,
            )
            raise

        return self._parse_response(response.json())

    def _parse_response(self, response_data: dict[str, Any]) -> str:
        try:
            content = response_data["choices"][0]["message"].get("content")
        except (KeyError, IndexError, TypeError, AttributeError):
            raise TransportError("malformed chat completion response") from None
        if not content:
            raise TransportError("chat completion returned empty content")
        return content

    async def aclose(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> OpenAIModelCaller:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()
