"""
Credential stores for the optional AI pass.

The analysis core only asks two questions: is there a usable key, and
what is it. Key lifecycle belongs to whoever implements the store.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from claritylens.config import settings

MIN_KEY_LENGTH = 10


class CredentialStore(ABC):

    @abstractmethod
    def get_api_key(self) -> str:
        ...

    def has_api_key(self) -> bool:
        """A key counts only when it is longer than MIN_KEY_LENGTH after stripping."""
        return len((self.get_api_key() or "").strip()) > MIN_KEY_LENGTH


class EnvCredentialStore(CredentialStore):
    """Reads the key for the configured provider from settings."""

    def __init__(self, provider: Optional[str] = None):
        self._provider = (provider or settings.LLM_PROVIDER).lower()

    def get_api_key(self) -> str:
        if self._provider == "gemini":
            return settings.GEMINI_API_KEY
        return settings.OPENAI_API_KEY


class StaticCredentialStore(CredentialStore):
    """Fixed key, for tests and embedding callers that manage keys themselves."""

    def __init__(self, api_key: str = ""):
        self._api_key = api_key

    def get_api_key(self) -> str:
        return self._api_key
