"""
ClarityLens API: Main Application

POST /analyze  Analyze selected text (plus optional source URL)
GET  /lexicon  Summary of the detection surface
GET  /health   Health check
"""

from __future__ import annotations

import hashlib
import time
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.requests import Request

from claritylens.analyzer import AnalysisOrchestrator, get_orchestrator
from claritylens.cache import analysis_cache
from claritylens.config import settings
from claritylens.lexicon import DEFAULT_LEXICON
from claritylens.logging import get_logger, setup_logging
from claritylens.schemas.analysis import (
    AnalyzeRequest,
    AnalyzeResponse,
    HealthResponse,
    LexiconResponse,
)
from claritylens.weights import DEFAULT_WEIGHTS

logger = get_logger("api")


# ============================================================
# STARTUP / SHUTDOWN
# ============================================================

@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging()
    logger.info(
        "ClarityLens API starting",
        extra={"provider": settings.LLM_PROVIDER},
    )
    yield
    logger.info("ClarityLens API shutting down")


app = FastAPI(
    title="ClarityLens API",
    description="Critical-reading analysis: tone, bias, fallacies, claims, readability and source credibility",
    version=settings.VERSION,
    lifespan=lifespan,
)

# CORS: set CLARITYLENS_CORS_ORIGINS in production
app.add_middleware(
    CORSMiddleware,
    allow_origins=[o.strip() for o in settings.CORS_ORIGINS.split(",")],
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization"],
    allow_credentials=False,
)


@app.get("/", include_in_schema=False)
async def root():
    return JSONResponse({"message": "ClarityLens API", "docs": "/docs"})


# ============================================================
# GLOBAL ERROR HANDLER
# ============================================================

@app.exception_handler(Exception)
async def global_error_handler(request: Request, exc: Exception):
    """Catch unhandled exceptions. Return structured error, don't leak internals."""
    logger.error(
        f"Unhandled exception: {type(exc).__name__}",
        extra={"error": str(exc), "path": request.url.path, "method": request.method},
        exc_info=True,
    )
    return JSONResponse(
        status_code=500,
        content={"detail": "Internal server error. The analysis could not be completed."},
    )


# ============================================================
# ROUTES
# ============================================================

def _analysis_id(text: str, timestamp: int) -> str:
    return hashlib.sha256(f"{text}{timestamp}".encode()).hexdigest()


@app.post("/analyze", response_model=AnalyzeResponse)
async def analyze_text(
    request: AnalyzeRequest,
    orchestrator: AnalysisOrchestrator = Depends(get_orchestrator),
):
    """Run the full analysis pipeline on a text selection."""
    if request.use_cache:
        cached = await analysis_cache.get(request.text, request.source_url)
        if cached:
            return cached

    analysis = await orchestrator.analyze(request.text, request.source_url)
    result = analysis.to_dict()
    result["analysis_id"] = _analysis_id(request.text, analysis.timestamp)

    if analysis.ai_error is None:
        await analysis_cache.put(request.text, request.source_url, result)

    return result


@app.get("/lexicon", response_model=LexiconResponse)
async def get_lexicon():
    """Return the detection tables in summary form."""
    return {
        **DEFAULT_LEXICON.describe(),
        "composite_weights": dict(DEFAULT_WEIGHTS.composite_weights),
    }


@app.get("/health", response_model=HealthResponse)
async def health(orchestrator: AnalysisOrchestrator = Depends(get_orchestrator)):
    """Health check."""
    return {
        "status": "operational",
        "version": settings.VERSION,
        "llm_provider": settings.LLM_PROVIDER,
        "ai_configured": orchestrator.enhancer.has_api_key(),
        "cache": analysis_cache.stats,
    }


# --- Version Headers Middleware ---
@app.middleware("http")
async def add_version_headers(request: Request, call_next):
    response = await call_next(request)
    response.headers["X-ClarityLens-Version"] = settings.VERSION
    response.headers["X-Content-Type-Options"] = "nosniff"
    return response


# --- Request Logging Middleware ---
@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Log every API request with method, path, status, duration."""
    path = request.url.path
    if path == "/health":
        return await call_next(request)

    start = time.time()
    response = await call_next(request)
    duration_ms = round((time.time() - start) * 1000, 1)

    logger.info(
        f"{request.method} {path} → {response.status_code} ({duration_ms}ms)",
        extra={
            "method": request.method,
            "path": path,
            "status_code": response.status_code,
            "duration_ms": duration_ms,
        },
    )
    return response
