"""
LLM Provider factory.
"""

from typing import Optional

from claritylens.config import settings
from claritylens.llm import LLMProvider


def get_provider(provider_name: Optional[str] = None, api_key: Optional[str] = None) -> LLMProvider:
    """Return the configured LLM provider."""
    name = (provider_name or settings.LLM_PROVIDER).lower()
    if name == "openai":
        from claritylens.llm.chat_completions import OpenAIChatProvider
        return OpenAIChatProvider(api_key=api_key)
    elif name == "gemini":
        from claritylens.llm.gemini import GeminiProvider
        return GeminiProvider(api_key=api_key)
    else:
        raise ValueError(f"Unknown LLM provider: {name}")
