from __future__ import annotations

from typing import Any, Optional, Sequence

import httpx
from openai import AsyncOpenAI, OpenAIError

from aitask import logger as logger_mod
from aitask.config import Settings

from .base import ChatTransport
from .errors import TransportError
from .types import CompletionRequest, LLMMessage

log = logger_mod.get_logger()

# Low-variance answers so agent runs are reproducible.
TEMPERATURE = 0.1


def _header_value(name: str, value: str) -> str:
    # Same rule as HTTP header values: visible ASCII, spaces and tabs only.
    if any(not (32 <= ord(c) < 127 or c == "\t") for c in value):
        raise TransportError(f"Invalid characters in {name} header value")
    return value


class OpenAIChatClient(ChatTransport):
    """Chat-completion transport on top of the OpenAI SDK.

    Each `complete` call is exactly one POST to `{base_url}/chat/completions`:
    SDK-level retries are disabled, retrying is the caller's decision.
    """

    def __init__(
        self,
        settings: Settings,
        *,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        self._settings = settings
        self._client = AsyncOpenAI(
            api_key=settings.api_key,
            organization=settings.organization_id,
            base_url=settings.base_url,
            timeout=settings.timeout_s,
            max_retries=0,
            http_client=http_client,
        )

    def build_request(self, messages: Sequence[LLMMessage]) -> CompletionRequest:
        return CompletionRequest(
            model=self._settings.model,
            messages=tuple(messages),
            temperature=TEMPERATURE,
        )

    def _extract_output_text(self, resp: Any) -> str:
        choices = getattr(resp, "choices", None)
        if not isinstance(choices, list) or not choices:
            raise TransportError("Chat completion response has no choices")

        message = getattr(choices[0], "message", None)
        content = getattr(message, "content", None)
        if not isinstance(content, str):
            raise TransportError("Chat completion response has no message content")
        return content

    async def complete(self, messages: Sequence[LLMMessage]) -> str:
        try:
            request = self.build_request(messages)
        except ValueError as e:
            raise TransportError(f"Invalid chat completion request: {e}") from e

        _header_value("Authorization", self._settings.api_key)
        _header_value("OpenAI-Organization", self._settings.organization_id)

        try:
            resp = await self._client.chat.completions.create(
                **request.to_payload(),
                timeout=self._settings.timeout_s,
            )
        except (OpenAIError, httpx.HTTPError, ValueError) as e:
            log.warning("Chat completion request failed. err=%s", e)
            raise TransportError(f"Chat completion request failed: {e}") from e

        return self._extract_output_text(resp)

    async def aclose(self) -> None:
        await self._client.close()

    async def __aenter__(self) -> "OpenAIChatClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()
