"""
Chat Completions Provider: OpenAI-compatible HTTP API.

POSTs to {base_url}/chat/completions over httpx and maps HTTP status
codes and transport failures onto the claritylens error taxonomy.
Pass a custom httpx transport to run against a mock server.
"""

from __future__ import annotations

from typing import Optional

import httpx

from claritylens.config import settings
from claritylens.errors import (
    AIAuthError,
    AIEmptyResponse,
    AINetworkError,
    AIPermissionError,
    AIRateLimited,
    AIServerError,
)
from claritylens.llm import LLMProvider
from claritylens.logging import get_logger

logger = get_logger("llm.chat_completions")

DEFAULT_RETRY_AFTER = 3.0


def _retry_after(response: httpx.Response) -> float:
    raw = response.headers.get("retry-after", "")
    try:
        return float(raw)
    except ValueError:
        return DEFAULT_RETRY_AFTER


def _error_message(response: httpx.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        body = {}
    error = body.get("error") if isinstance(body, dict) else None
    if isinstance(error, dict) and error.get("message"):
        return str(error["message"])
    return f"API error: {response.status_code}"


class OpenAIChatProvider(LLMProvider):
    """OpenAI (or compatible) chat-completions provider."""

    name = "openai"

    def __init__(
        self,
        api_key: Optional[str] = None,
        model: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self._api_key = (api_key if api_key is not None else settings.OPENAI_API_KEY).strip()
        self._model = model or settings.OPENAI_MODEL
        self._base_url = (base_url or settings.OPENAI_BASE_URL).rstrip("/")
        self._timeout = timeout if timeout is not None else settings.AI_TIMEOUT
        self._transport = transport

    async def generate(
        self,
        prompt: str,
        system_instruction: Optional[str] = None,
        temperature: float = 0.2,
        max_tokens: int = 3000,
        json_mode: bool = False,
    ) -> str:
        if not self._api_key:
            raise AIAuthError("No API key configured for the chat-completions provider.")

        messages = []
        if system_instruction:
            messages.append({"role": "system", "content": system_instruction})
        messages.append({"role": "user", "content": prompt})

        payload = {
            "model": self._model,
            "messages": messages,
            "temperature": temperature,
            "max_tokens": max_tokens,
        }
        if json_mode:
            payload["response_format"] = {"type": "json_object"}

        try:
            async with httpx.AsyncClient(
                base_url=self._base_url,
                timeout=self._timeout,
                transport=self._transport,
            ) as client:
                response = await client.post(
                    "/chat/completions",
                    json=payload,
                    headers={"Authorization": f"Bearer {self._api_key}"},
                )
        except httpx.RequestError as e:
            raise AINetworkError(f"Network error: {e}") from e

        status = response.status_code
        if status == 401:
            raise AIAuthError("Invalid API key. Check the configured key.", status=401)
        if status == 403:
            raise AIPermissionError("API key lacks permission for this model.", status=403)
        if status == 429:
            raise AIRateLimited("Rate limited by the API.", retry_after=_retry_after(response))
        if status >= 400:
            raise AIServerError(_error_message(response), status=status)

        try:
            data = response.json()
        except ValueError as e:
            raise AIEmptyResponse("API returned a non-JSON envelope.", status=status) from e

        content = None
        choices = data.get("choices") if isinstance(data, dict) else None
        if choices and isinstance(choices[0], dict):
            content = (choices[0].get("message") or {}).get("content")
        if not content:
            raise AIEmptyResponse("Empty response from API", status=status)

        logger.debug(
            "Chat completion received",
            extra={"provider": self.name, "status_code": status},
        )
        return content
