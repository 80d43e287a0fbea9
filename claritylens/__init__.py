"""
ClarityLens: Critical-Reading Analysis Engine

Scores a span of text for tone, bias, logical fallacies, claim types,
readability and source credibility, then suggests reflection questions.
An optional language-model pass adds a second opinion.

Public API:
  - analyze:               Full analysis with the default orchestrator
  - AnalysisOrchestrator:  Depth selection, components, composite score, AI pass
  - AnalysisDepth:         insufficient | basic | standard | full | comprehensive
  - CompositeAnalysis:     Result of one analysis, with to_dict()
  - Lexicon:               Read-only pattern tables (DEFAULT_LEXICON)
  - ScoringWeights:        Overridable heuristic constants (DEFAULT_WEIGHTS)
  - AIEnhancementClient:   Retrying model client returning AIAnnotation | AIFailure
  - LLMProvider:           Abstract LLM interface for provider swapping

Usage:
    from claritylens import analyze
    result = await analyze("Some say the plan is a ticking time bomb.", "https://example.com")
"""

__version__ = "1.0.0"

from claritylens.analyzer import (
    AnalysisDepth,
    AnalysisOrchestrator,
    AnalysisRequest,
    AnalysisResults,
    CompositeAnalysis,
    analyze,
    get_orchestrator,
)
from claritylens.bias import BiasDetector, detect_bias
from claritylens.claims import ClaimClassifier, classify_claims
from claritylens.credentials import CredentialStore, EnvCredentialStore, StaticCredentialStore
from claritylens.enhancer import AIAnnotation, AIEnhancementClient, AIFailure, normalize_annotation
from claritylens.fallacies import FallacyDetector, detect_fallacies
from claritylens.lexicon import DEFAULT_LEXICON, Lexicon
from claritylens.llm import LLMProvider
from claritylens.llm.factory import get_provider
from claritylens.readability import ReadabilityScorer, score_readability
from claritylens.reflection import ReflectionQuestionGenerator
from claritylens.sentiment import SentimentAnalyzer, analyze_sentiment
from claritylens.source import SourceCredibilityScorer, score_source
from claritylens.weights import DEFAULT_WEIGHTS, ScoringWeights

__all__ = [
    "analyze",
    "get_orchestrator",
    "AnalysisOrchestrator",
    "AnalysisDepth",
    "AnalysisRequest",
    "AnalysisResults",
    "CompositeAnalysis",
    "SentimentAnalyzer",
    "analyze_sentiment",
    "BiasDetector",
    "detect_bias",
    "FallacyDetector",
    "detect_fallacies",
    "ClaimClassifier",
    "classify_claims",
    "ReadabilityScorer",
    "score_readability",
    "SourceCredibilityScorer",
    "score_source",
    "ReflectionQuestionGenerator",
    "AIEnhancementClient",
    "AIAnnotation",
    "AIFailure",
    "normalize_annotation",
    "CredentialStore",
    "EnvCredentialStore",
    "StaticCredentialStore",
    "Lexicon",
    "DEFAULT_LEXICON",
    "ScoringWeights",
    "DEFAULT_WEIGHTS",
    "LLMProvider",
    "get_provider",
]
