"""
API Schemas: Request and Response Models

Pydantic models for the ClarityLens API. Component results are passed
through as plain dicts produced by CompositeAnalysis.to_dict().
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field


# ============================================================
# ANALYZE
# ============================================================

class AnalyzeRequest(BaseModel):
    """POST /analyze request body."""
    text: str = Field(..., min_length=1, max_length=50_000,
                      description="The selected text to analyze (1-50,000 characters).")
    source_url: Optional[str] = Field(None, max_length=2048,
                                      description="URL of the page the text came from.")
    use_cache: bool = Field(True, description="Return a cached analysis for identical input.")

    model_config = {"json_schema_extra": {"examples": [
        {
            "text": "Some say the new policy is a ticking time bomb, and everyone knows it will fail.",
            "source_url": "https://www.example.com/opinion/policy",
        },
    ]}}


class AnalyzeResponse(BaseModel):
    """POST /analyze response body."""
    analysis_id: str
    depth: str
    depth_note: str = ""
    word_count: int
    composite_score: Optional[int] = None
    algorithmic_score: Optional[int] = None
    results: Optional[dict] = None
    ai: Optional[dict] = None
    ai_error: Optional[str] = None
    has_ai_key: bool = False
    message: Optional[str] = None
    timestamp: int
    cached: bool = False


# ============================================================
# LEXICON
# ============================================================

class LexiconResponse(BaseModel):
    sentiment_terms: int
    negators: int
    intensifiers: int
    hedges: int
    emotional_patterns: list[str]
    loaded_language: dict[str, list[str]]
    weasel_phrases: list[str]
    framing_patterns: list[dict]
    fallacies: list[dict]
    domain_tiers: dict[str, int]
    composite_weights: dict[str, float]


# ============================================================
# HEALTH
# ============================================================

class HealthResponse(BaseModel):
    status: str
    version: str
    llm_provider: str
    ai_configured: bool
    cache: dict
