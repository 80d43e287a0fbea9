"""
ClarityLens Configuration

Central settings loaded from environment variables.
"""

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

load_dotenv()


def _optional_int(name: str) -> Optional[int]:
    raw = os.getenv(name, "").strip()
    return int(raw) if raw else None


@dataclass(frozen=True)
class Settings:
    """Immutable application settings."""

    VERSION: str = "1.0.0"

    # --- LLM Provider ---
    LLM_PROVIDER: str = os.getenv("CLARITYLENS_LLM_PROVIDER", "openai")
    OPENAI_API_KEY: str = os.getenv("OPENAI_API_KEY", "")
    OPENAI_MODEL: str = os.getenv("OPENAI_MODEL", "gpt-4o-mini")
    OPENAI_BASE_URL: str = os.getenv("OPENAI_BASE_URL", "https://api.openai.com/v1")
    GEMINI_API_KEY: str = os.getenv("GEMINI_API_KEY", "")
    GEMINI_MODEL: str = os.getenv("GEMINI_MODEL", "gemini-2.5-flash")

    # --- AI enhancement ---
    AI_MAX_RETRIES: int = int(os.getenv("CLARITYLENS_AI_MAX_RETRIES", "2"))
    AI_RETRY_DELAY: float = float(os.getenv("CLARITYLENS_AI_RETRY_DELAY", "1.5"))
    AI_TIMEOUT: float = float(os.getenv("CLARITYLENS_AI_TIMEOUT", "60"))
    AI_DEADLINE: float = float(os.getenv("CLARITYLENS_AI_DEADLINE", "120"))
    AI_TEMPERATURE: float = 0.2
    AI_MAX_TOKENS: int = 3000
    AI_MAX_CHARS: int = int(os.getenv("CLARITYLENS_AI_MAX_CHARS", "7000"))

    # --- Reflection ---
    # Unset = fresh entropy per analysis
    REFLECTION_SEED: Optional[int] = _optional_int("CLARITYLENS_REFLECTION_SEED")

    # --- Server ---
    HOST: str = os.getenv("CLARITYLENS_HOST", "0.0.0.0")
    PORT: int = int(os.getenv("CLARITYLENS_PORT", "8000"))
    CORS_ORIGINS: str = os.getenv("CLARITYLENS_CORS_ORIGINS", "*")
    CACHE_TTL: int = int(os.getenv("CLARITYLENS_CACHE_TTL", "3600"))


settings = Settings()
