"""
Gemini Provider: Google Gemini API implementation.

Uses the google.genai SDK. Client is lazily initialized, so
the app loads without an API key and only fails on an actual call.
SDK errors are translated into the claritylens error taxonomy;
there is no retrying here.
"""

from __future__ import annotations

from typing import Optional

import httpx
from google import genai
from google.genai import errors, types

from claritylens.config import settings
from claritylens.errors import (
    AIAuthError,
    AIEmptyResponse,
    AIError,
    AINetworkError,
    AIPermissionError,
    AIRateLimited,
    AIServerError,
)
from claritylens.llm import LLMProvider
from claritylens.logging import get_logger

logger = get_logger("llm.gemini")


def _translate(error: errors.APIError) -> AIError:
    code = getattr(error, "code", None)
    message = getattr(error, "message", None) or str(error)
    if code == 401:
        return AIAuthError("Invalid Gemini API key.", status=401)
    if code == 403:
        return AIPermissionError("Gemini API key lacks permission for this model.", status=403)
    if code == 429:
        return AIRateLimited(f"Rate limited by Gemini: {message}")
    return AIServerError(f"Gemini API error: {message}", status=code)


class GeminiProvider(LLMProvider):
    """Google Gemini LLM provider."""

    name = "gemini"

    def __init__(self, api_key: Optional[str] = None, model: Optional[str] = None):
        self._api_key = api_key if api_key is not None else settings.GEMINI_API_KEY
        self._model = model or settings.GEMINI_MODEL
        self._client: Optional[genai.Client] = None

    def _get_client(self) -> genai.Client:
        if self._client is None:
            if not self._api_key:
                raise AIAuthError(
                    "GEMINI_API_KEY not set. Get one from "
                    "https://aistudio.google.com/apikey"
                )
            self._client = genai.Client(api_key=self._api_key)
        return self._client

    async def generate(
        self,
        prompt: str,
        system_instruction: Optional[str] = None,
        temperature: float = 0.2,
        max_tokens: int = 3000,
        json_mode: bool = False,
    ) -> str:
        config = types.GenerateContentConfig(
            temperature=temperature,
            max_output_tokens=max_tokens,
            system_instruction=system_instruction,
        )
        if json_mode:
            config.response_mime_type = "application/json"

        client = self._get_client()
        try:
            response = await client.aio.models.generate_content(
                model=self._model,
                contents=prompt,
                config=config,
            )
        except errors.APIError as e:
            raise _translate(e) from e
        except (httpx.RequestError, ConnectionError, TimeoutError) as e:
            raise AINetworkError(f"Network error: {e}") from e

        text = response.text
        if not text:
            raise AIEmptyResponse("Empty response from Gemini")

        logger.debug("Gemini response received", extra={"provider": self.name})
        return text
