import asyncio
import json

import pytest

from foodsnap.exceptions import ConfigurationError, ProviderError
from foodsnap.models import CameraAngle
from foodsnap.services import angle_detector
from foodsnap.services.angle_detector import (
    AngleClassifier,
    GeminiVisionProvider,
    get_angle_description,
    normalize_angle,
    parse_analysis,
    strip_code_fences,
)
from tests.fakes import FakeVisionProvider, mock_session


def _reply(**fields) -> str:
    return json.dumps(fields)


@pytest.mark.asyncio
async def test_classify_parses_fenced_json():
    reply = "```json\n" + _reply(
        angle="overhead",
        confidence=0.92,
        reasoning="plate is a circle",
        characteristics=["circular plate", "no horizon"],
    ) + "\n```"
    classifier = AngleClassifier(FakeVisionProvider(reply))

    result = await classifier.classify(b"img")

    assert result.degraded is False
    assert result.angle == CameraAngle.OVERHEAD
    assert result.analysis.confidence == pytest.approx(0.92)
    assert result.analysis.characteristics == ("circular plate", "no horizon")


@pytest.mark.asyncio
async def test_classify_passes_mime_type_and_prompt():
    provider = FakeVisionProvider(_reply(angle="hero", confidence=0.8))
    await AngleClassifier(provider).classify(b"img", "image/png")

    _, mime_type, prompt = provider.calls[0]
    assert mime_type == "image/png"
    assert "JSON" in prompt


@pytest.mark.parametrize("label, expected", [
    ("overhead", CameraAngle.OVERHEAD),
    ("Top-Down", CameraAngle.OVERHEAD),
    ("flat-lay", CameraAngle.OVERHEAD),
    ("flat lay", CameraAngle.OVERHEAD),
    ("bird's eye", CameraAngle.OVERHEAD),
    ("bird's-eye", CameraAngle.OVERHEAD),
    ("90-degree", CameraAngle.OVERHEAD),
    ("hero", CameraAngle.HERO),
    ("45", CameraAngle.HERO),
    ("45-degree", CameraAngle.HERO),
    ("three-quarter", CameraAngle.HERO),
    ("eye-level", CameraAngle.EYE_LEVEL),
    (" Eye Level ", CameraAngle.EYE_LEVEL),
    ("straight-on", CameraAngle.EYE_LEVEL),
    ("0", CameraAngle.EYE_LEVEL),
    ("diagonal", CameraAngle.HERO),
    (None, CameraAngle.HERO),
])
def test_normalize_angle(label, expected):
    assert normalize_angle(label) == expected


@pytest.mark.parametrize("raw, expected", [
    (1.7, 1.0),
    (-2, 0.0),
    ("0.4", 0.4),
    ("very sure", 0.5),
    (None, 0.5),
])
def test_confidence_is_clamped(raw, expected):
    analysis = parse_analysis(_reply(angle="hero", confidence=raw))
    assert analysis.confidence == pytest.approx(expected)


def test_missing_fields_get_defaults():
    analysis = parse_analysis(_reply(angle="hero", characteristics="not a list"))

    assert analysis.reasoning == "Analysis completed"
    assert analysis.characteristics == ()
    assert analysis.confidence == 0.5


def test_strip_code_fences():
    assert strip_code_fences('```json\n{"a": 1}\n```') == '{"a": 1}'
    assert strip_code_fences('```\n{"a": 1}```') == '{"a": 1}'
    assert strip_code_fences('  {"a": 1}  ') == '{"a": 1}'


@pytest.mark.asyncio
async def test_unparseable_reply_falls_back_to_hero():
    result = await AngleClassifier(FakeVisionProvider("I think it's overhead")).classify(b"img")

    assert result.degraded is True
    assert result.angle == CameraAngle.HERO
    assert result.analysis.confidence == 0.3
    assert result.analysis.characteristics == ("fallback",)


@pytest.mark.asyncio
async def test_json_array_reply_falls_back():
    result = await AngleClassifier(FakeVisionProvider("[1, 2]")).classify(b"img")
    assert result.degraded is True


@pytest.mark.asyncio
async def test_provider_error_falls_back():
    provider = FakeVisionProvider(error=ProviderError("quota exceeded", status=429))
    result = await AngleClassifier(provider).classify(b"img")

    assert result.degraded is True
    assert result.angle == CameraAngle.HERO
    assert "quota" in result.reason


@pytest.mark.asyncio
async def test_timeout_falls_back():
    provider = FakeVisionProvider(_reply(angle="overhead"), delay=1.0)
    result = await AngleClassifier(provider, timeout=0.05).classify(b"img")

    assert result.degraded is True
    assert result.angle == CameraAngle.HERO
    assert "exceeded" in result.reason


def test_default_timeout_is_six_seconds():
    assert AngleClassifier(FakeVisionProvider()).timeout == 6.0


@pytest.mark.asyncio
async def test_caller_cancellation_propagates():
    provider = FakeVisionProvider(_reply(angle="hero"), delay=5.0)
    task = asyncio.ensure_future(AngleClassifier(provider).classify(b"img"))
    await asyncio.sleep(0.01)
    task.cancel()

    with pytest.raises(asyncio.CancelledError):
        await task


def test_angle_descriptions():
    assert get_angle_description(CameraAngle.OVERHEAD).startswith("Overhead (90°)")
    assert get_angle_description(CameraAngle.UNKNOWN) == "Unknown angle"


def test_gemini_provider_requires_api_key(monkeypatch):
    monkeypatch.setattr(angle_detector.settings, "GOOGLE_AI_API_KEY", None)
    with pytest.raises(ConfigurationError):
        GeminiVisionProvider()


@pytest.mark.asyncio
async def test_gemini_provider_reads_candidate_text():
    session = mock_session("post", json_data={
        "candidates": [{"content": {"parts": [{"text": '{"angle": '}, {"text": '"hero"}'}]}}]
    })
    provider = GeminiVisionProvider(api_key="key", model="gemini-2.0-flash", session=session)

    text = await provider.complete(b"img", "image/jpeg", "prompt")

    assert text == '{"angle": "hero"}'
    url = session.post.call_args[0][0]
    payload = session.post.call_args[1]["json"]
    assert url.endswith("/gemini-2.0-flash:generateContent")
    assert payload["generationConfig"] == {"temperature": 0.1, "maxOutputTokens": 256}
    assert payload["contents"][0]["parts"][0]["inline_data"]["mime_type"] == "image/jpeg"


@pytest.mark.asyncio
async def test_gemini_provider_raises_on_http_error():
    session = mock_session("post", status=500, text="boom")
    provider = GeminiVisionProvider(api_key="key", session=session)

    with pytest.raises(ProviderError) as exc_info:
        await provider.complete(b"img", "image/jpeg", "prompt")
    assert exc_info.value.status == 500


def test_numeric_angles_map_to_their_buckets():
    assert normalize_angle(90) == CameraAngle.OVERHEAD
    assert normalize_angle(90.0) == CameraAngle.OVERHEAD
    assert normalize_angle(45) == CameraAngle.HERO
    assert normalize_angle(0) == CameraAngle.EYE_LEVEL
