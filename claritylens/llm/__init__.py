"""
LLM Provider: Abstract Interface

All model calls go through this interface. Swap providers
by changing CLARITYLENS_LLM_PROVIDER in env.

Providers make exactly one request per call and translate every
failure into the claritylens.errors taxonomy. Retrying is the
enhancement client's job.
"""

from __future__ import annotations

import json
import re
from abc import ABC, abstractmethod
from typing import Optional

from claritylens.errors import AIParseError

_FENCE = re.compile(r"^```(?:json)?\s*|\s*```$")
_TRAILING_COMMA = re.compile(r",\s*([}\]])")


def parse_model_json(text: str) -> dict:
    """
    Parse a model reply into a JSON object.

    Tries the reply as-is (minus markdown fences), then one repair pass:
    trailing commas before } or ] are dropped and raw control characters
    such as newlines are tolerated inside strings.

    Raises:
        AIParseError: the reply is not a JSON object even after repair.
    """
    cleaned = _FENCE.sub("", text.strip()).strip()
    try:
        parsed = json.loads(cleaned)
    except json.JSONDecodeError:
        repaired = _TRAILING_COMMA.sub(r"\1", cleaned)
        try:
            parsed = json.loads(repaired, strict=False)
        except json.JSONDecodeError as e:
            raise AIParseError(
                f"Failed to parse AI response as JSON: {e}. Raw response: {text[:300]}"
            ) from e

    if not isinstance(parsed, dict):
        raise AIParseError("AI response was JSON but not an object")
    return parsed


class LLMProvider(ABC):
    """Abstract base for LLM providers."""

    name = "base"

    @abstractmethod
    async def generate(
        self,
        prompt: str,
        system_instruction: Optional[str] = None,
        temperature: float = 0.2,
        max_tokens: int = 3000,
        json_mode: bool = False,
    ) -> str:
        """Generate a text response from the model."""
        ...

    async def generate_json(
        self,
        prompt: str,
        system_instruction: Optional[str] = None,
        temperature: float = 0.2,
        max_tokens: int = 3000,
    ) -> dict:
        """Generate and parse a JSON object response."""
        text = await self.generate(
            prompt=prompt,
            system_instruction=system_instruction,
            temperature=temperature,
            max_tokens=max_tokens,
            json_mode=True,
        )
        return parse_model_json(text)
