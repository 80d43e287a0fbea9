"""
AI Enhancement Tests

Retry policy, error mapping, JSON repair and normalization. The
chat-completions provider runs against httpx.MockTransport; Gemini is
mocked at the SDK client.
"""

from __future__ import annotations

import json
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock, patch

import httpx
import pytest

from claritylens.credentials import StaticCredentialStore
from claritylens.enhancer import (
    TRUNCATION_MARKER,
    AIAnnotation,
    AIEnhancementClient,
    AIFailure,
    normalize_annotation,
    prepare_text,
)
from claritylens.errors import AIAuthError, AIParseError, AIRateLimited
from claritylens.llm import parse_model_json
from claritylens.llm.chat_completions import OpenAIChatProvider

API_KEY = "sk-test-0123456789abcdef"
TEXT = "The new transit plan may reduce commute times, according to a city report released in 2023."

GOOD_PAYLOAD = {
    "overallAssessment": "A short, mostly factual note.",
    "purpose": "inform",
    "purposeConfidence": 0.8,
    "credibilityScore": 72,
    "suggestedQuestions": ["Who wrote the city report and how was it sourced?"],
}


def completion(content: str) -> httpx.Response:
    return httpx.Response(200, json={"choices": [{"message": {"content": content}}]})


def scripted(*responses):
    """Transport that replays responses in order and records requests."""
    queue = list(responses)
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        item = queue.pop(0)
        if isinstance(item, Exception):
            raise item
        return item

    return httpx.MockTransport(handler), seen


def make_client(transport, max_retries: int = 2, retry_delay: float = 0.5):
    delays = []

    async def fake_sleep(seconds):
        delays.append(seconds)

    provider = OpenAIChatProvider(
        api_key=API_KEY, model="test-model", base_url="https://llm.test/v1", transport=transport
    )
    client = AIEnhancementClient(
        credentials=StaticCredentialStore(API_KEY),
        provider=provider,
        max_retries=max_retries,
        retry_delay=retry_delay,
        sleep=fake_sleep,
    )
    return client, delays


# ============================================================
# RETRIES
# ============================================================

class TestRetries:

    @pytest.mark.asyncio
    async def test_rate_limit_then_success(self):
        transport, seen = scripted(
            httpx.Response(429, headers={"Retry-After": "2"}),
            completion(json.dumps(GOOD_PAYLOAD)),
        )
        client, delays = make_client(transport)
        result = await client.enhance(TEXT)

        assert isinstance(result, AIAnnotation)
        assert result.error is False
        assert result.credibility_score == 72
        assert result.purpose == "inform"
        assert len(seen) == 2
        assert delays == [2.0]

    @pytest.mark.asyncio
    async def test_rate_limit_without_header_waits_default(self):
        transport, _ = scripted(httpx.Response(429), completion(json.dumps(GOOD_PAYLOAD)))
        client, delays = make_client(transport)
        await client.enhance(TEXT)
        assert delays == [3.0]

    @pytest.mark.asyncio
    async def test_two_server_errors_degrade(self):
        body = {"error": {"message": "upstream exploded"}}
        transport, seen = scripted(
            httpx.Response(500, json=body),
            httpx.Response(500, json=body),
        )
        client, delays = make_client(transport, max_retries=1)
        result = await client.enhance(TEXT)

        assert isinstance(result, AIFailure)
        assert result.error is True
        assert result.kind == "server"
        assert result.status == 500
        assert result.message == "upstream exploded"
        assert len(seen) == 2
        assert delays == [0.5]

    @pytest.mark.asyncio
    async def test_negative_retry_budget_still_makes_one_attempt(self):
        transport, seen = scripted(httpx.Response(500, json={"error": {"message": "down"}}))
        client, delays = make_client(transport, max_retries=-3)
        result = await client.enhance(TEXT)

        assert isinstance(result, AIFailure)
        assert result.kind == "server"
        assert len(seen) == 1
        assert delays == []

    @pytest.mark.asyncio
    async def test_oversized_model_number_does_not_raise(self):
        content = '{"credibilityScore": 1' + "0" * 400 + ', "purpose": "inform"}'
        transport, _ = scripted(completion(content))
        client, _ = make_client(transport)
        result = await client.enhance(TEXT)

        assert isinstance(result, AIAnnotation)
        assert result.purpose == "inform"
        assert result.credibility_estimated is False

    @pytest.mark.asyncio
    async def test_backoff_grows_with_attempt(self):
        transport, _ = scripted(
            httpx.Response(502), httpx.Response(502), completion(json.dumps(GOOD_PAYLOAD)),
        )
        client, delays = make_client(transport, max_retries=2, retry_delay=0.5)
        result = await client.enhance(TEXT)
        assert result.error is False
        assert delays == [0.5, 1.0]

    @pytest.mark.asyncio
    async def test_auth_error_is_terminal(self):
        transport, seen = scripted(httpx.Response(401))
        client, delays = make_client(transport)
        result = await client.enhance(TEXT)
        assert result.kind == "auth"
        assert result.status == 401
        assert len(seen) == 1
        assert delays == []

    @pytest.mark.asyncio
    async def test_permission_error_is_terminal(self):
        transport, seen = scripted(httpx.Response(403))
        client, _ = make_client(transport)
        result = await client.enhance(TEXT)
        assert result.kind == "permission"
        assert len(seen) == 1

    @pytest.mark.asyncio
    async def test_network_error(self):
        request = httpx.Request("POST", "https://llm.test/v1/chat/completions")
        transport, seen = scripted(
            httpx.ConnectError("connection refused", request=request),
            completion(json.dumps(GOOD_PAYLOAD)),
        )
        client, delays = make_client(transport)
        result = await client.enhance(TEXT)
        assert result.error is False
        assert len(seen) == 2
        assert delays == [0.5]

    @pytest.mark.asyncio
    async def test_empty_content_exhausts_retries(self):
        transport, seen = scripted(completion(""), completion(""))
        client, _ = make_client(transport, max_retries=1)
        result = await client.enhance(TEXT)
        assert result.kind == "empty"
        assert len(seen) == 2

    @pytest.mark.asyncio
    async def test_unparseable_reply_is_terminal(self):
        transport, seen = scripted(completion("I'm sorry, I can't produce JSON today."))
        client, _ = make_client(transport)
        result = await client.enhance(TEXT)
        assert result.kind == "parse"
        assert len(seen) == 1

    @pytest.mark.asyncio
    async def test_unknown_provider_is_config_failure(self):
        client = AIEnhancementClient(
            credentials=StaticCredentialStore(API_KEY), provider_name="nonexistent"
        )
        result = await client.enhance(TEXT)
        assert result.kind == "config"
        assert "nonexistent" in result.message


# ============================================================
# REQUEST SHAPE
# ============================================================

class TestChatCompletionsRequest:

    @pytest.mark.asyncio
    async def test_request_payload(self):
        transport, seen = scripted(completion(json.dumps(GOOD_PAYLOAD)))
        client, _ = make_client(transport)
        await client.enhance(TEXT, "https://www.example.com/story")

        request = seen[0]
        assert request.url == httpx.URL("https://llm.test/v1/chat/completions")
        assert request.headers["Authorization"] == f"Bearer {API_KEY}"
        payload = json.loads(request.content)
        assert payload["model"] == "test-model"
        assert payload["response_format"] == {"type": "json_object"}
        assert payload["messages"][0]["role"] == "system"
        assert payload["messages"][1]["content"].endswith(
            "Source domain: example.com\n---"
        )

    @pytest.mark.asyncio
    async def test_missing_key_raises_auth(self):
        provider = OpenAIChatProvider(api_key="", transport=httpx.MockTransport(lambda r: completion("{}")))
        with pytest.raises(AIAuthError):
            await provider.generate("hello")

    @pytest.mark.asyncio
    async def test_rate_limit_carries_retry_after(self):
        provider = OpenAIChatProvider(
            api_key=API_KEY,
            transport=httpx.MockTransport(lambda r: httpx.Response(429, headers={"Retry-After": "7"})),
        )
        with pytest.raises(AIRateLimited) as exc_info:
            await provider.generate("hello")
        assert exc_info.value.retry_after == 7.0
        assert exc_info.value.status == 429


# ============================================================
# JSON REPAIR
# ============================================================

class TestParseModelJson:

    def test_plain_object(self):
        assert parse_model_json('{"purpose": "inform"}') == {"purpose": "inform"}

    def test_fenced_with_trailing_comma(self):
        text = '```json\n{"credibilityScore": 72, "purpose": "inform",}\n```'
        assert parse_model_json(text) == {"credibilityScore": 72, "purpose": "inform"}

    def test_raw_newline_inside_string(self):
        text = '{"overallAssessment": "line one\nline two",}'
        assert parse_model_json(text)["overallAssessment"] == "line one\nline two"

    def test_not_json(self):
        with pytest.raises(AIParseError):
            parse_model_json("no braces here")

    def test_array_is_rejected(self):
        with pytest.raises(AIParseError):
            parse_model_json("[1, 2, 3]")


# ============================================================
# NORMALIZATION
# ============================================================

class TestNormalizeAnnotation:

    @pytest.mark.parametrize("raw", [None, [], "text", 42, {}])
    def test_total_on_garbage(self, raw):
        result = normalize_annotation(raw)
        assert result.purpose == "mixed"
        assert result.credibility_score == 50
        assert result.credibility_estimated is False
        assert result.bias_analysis.direction == "neutral"
        assert result.overall_assessment == AIAnnotation.overall_assessment

    def test_clamps_and_defaults(self):
        result = normalize_annotation({
            "purpose": "rant",
            "purposeConfidence": 3,
            "credibilityScore": 140,
            "biasAnalysis": {"direction": "left", "severity": "extreme", "framingTechniques": ["x", None]},
        })
        assert result.purpose == "mixed"
        assert result.purpose_confidence == 1.0
        assert result.credibility_score == 100
        assert result.credibility_estimated is True
        assert result.bias_analysis.direction == "left"
        assert result.bias_analysis.severity == "none"
        assert result.bias_analysis.framing_techniques == ("x",)

    @pytest.mark.parametrize("key", ["credibilityScore", "purposeConfidence"])
    def test_oversized_integer_is_not_a_number(self, key):
        raw = parse_model_json("{\"" + key + "\": 1" + "0" * 400 + "}")
        result = normalize_annotation(raw)
        assert result.credibility_score == 50
        assert result.credibility_estimated is False
        assert result.purpose_confidence == 0.5

    def test_boolean_score_is_not_a_number(self):
        result = normalize_annotation({"credibilityScore": True})
        assert result.credibility_score == 50
        assert result.credibility_estimated is False

    def test_drops_incomplete_entries(self):
        result = normalize_annotation({
            "fallacies": [
                {"name": "Straw Man", "explanation": "Misstates the opposing view.", "severity": "high"},
                {"name": "No explanation"},
                "not a dict",
            ],
            "manipulationTechniques": [{"technique": "false urgency"}, {"quote": "orphan"}],
            "claimAssessment": [{"claim": "Crime doubled.", "type": "wild_guess", "confidence": -1}],
            "rhetoricalStrategies": [{"strategy": "anecdote as proof"}, {}],
        })
        assert [f.name for f in result.fallacies] == ["Straw Man"]
        assert result.fallacies[0].confidence == 0.5
        assert [t.technique for t in result.manipulation_techniques] == ["false urgency"]
        claim = result.claim_assessment[0]
        assert claim.type == "unsupported_claim"
        assert claim.confidence == 0.0
        assert claim.red_flags == ()
        assert [s.strategy for s in result.rhetorical_strategies] == ["anecdote as proof"]

    def test_questions_filtered_and_capped(self):
        questions = ["short?"] + [f"Question number {i} about the text?" for i in range(10)]
        result = normalize_annotation({"suggestedQuestions": questions})
        assert len(result.suggested_questions) == 7
        assert "short?" not in result.suggested_questions

    def test_missing_context_summary_fallback(self):
        result = normalize_annotation({
            "missingContext": {"perspectives": ["Residents."], "evidence": ["Ridership data."]},
        })
        assert result.missing_context.summary == "Residents. Ridership data."


# ============================================================
# TEXT PREPARATION
# ============================================================

class TestPrepareText:

    def test_short_text_untouched(self):
        assert prepare_text("Hello world.") == "Hello world."

    def test_long_text_keeps_head_and_tail(self):
        text = "a" * 5000 + "b" * 5000
        prepared = prepare_text(text, max_chars=7000)
        assert prepared.startswith("a" * 4900 + TRUNCATION_MARKER)
        assert prepared.endswith("b" * 2050)
        assert len(prepared) == 4900 + len(TRUNCATION_MARKER) + 2050

    def test_source_domain_appended(self):
        prepared = prepare_text("Hello world.", "https://www.example.com/a?b=1")
        assert prepared == "Hello world.\n\nSource domain: example.com"


# ============================================================
# GEMINI
# ============================================================

class TestGeminiProvider:

    @pytest.mark.asyncio
    async def test_generate_json(self):
        from claritylens.llm.gemini import GeminiProvider

        fake_client = MagicMock()
        fake_client.aio.models.generate_content = AsyncMock(
            return_value=SimpleNamespace(text='{"purpose": "inform"}')
        )
        with patch("claritylens.llm.gemini.genai.Client", return_value=fake_client):
            provider = GeminiProvider(api_key="g-test-key-123456")
            assert await provider.generate_json("hello") == {"purpose": "inform"}

        config = fake_client.aio.models.generate_content.call_args.kwargs["config"]
        assert config.response_mime_type == "application/json"

    @pytest.mark.asyncio
    async def test_missing_key(self):
        from claritylens.llm.gemini import GeminiProvider

        with pytest.raises(AIAuthError):
            await GeminiProvider(api_key="").generate("hello")

    @pytest.mark.asyncio
    async def test_empty_reply(self):
        from claritylens.errors import AIEmptyResponse
        from claritylens.llm.gemini import GeminiProvider

        fake_client = MagicMock()
        fake_client.aio.models.generate_content = AsyncMock(return_value=SimpleNamespace(text=""))
        with patch("claritylens.llm.gemini.genai.Client", return_value=fake_client):
            with pytest.raises(AIEmptyResponse):
                await GeminiProvider(api_key="g-test-key-123456").generate("hello")

    @pytest.mark.asyncio
    async def test_connection_error_is_retried(self):
        from claritylens.llm.gemini import GeminiProvider

        fake_client = MagicMock()
        fake_client.aio.models.generate_content = AsyncMock(
            side_effect=[
                httpx.ConnectError("refused"),
                SimpleNamespace(text=json.dumps(GOOD_PAYLOAD)),
            ]
        )
        delays = []

        async def fake_sleep(seconds):
            delays.append(seconds)

        with patch("claritylens.llm.gemini.genai.Client", return_value=fake_client):
            client = AIEnhancementClient(
                credentials=StaticCredentialStore(API_KEY),
                provider=GeminiProvider(api_key="g-test-key-123456"),
                max_retries=2,
                retry_delay=0.5,
                sleep=fake_sleep,
            )
            result = await client.enhance(TEXT)

        assert isinstance(result, AIAnnotation)
        assert result.credibility_score == 72
        assert delays == [0.5]

    @pytest.mark.asyncio
    async def test_timeout_maps_to_network_failure(self):
        from claritylens.errors import AINetworkError
        from claritylens.llm.gemini import GeminiProvider

        fake_client = MagicMock()
        fake_client.aio.models.generate_content = AsyncMock(
            side_effect=httpx.ReadTimeout("slow")
        )
        with patch("claritylens.llm.gemini.genai.Client", return_value=fake_client):
            with pytest.raises(AINetworkError):
                await GeminiProvider(api_key="g-test-key-123456").generate("hello")
