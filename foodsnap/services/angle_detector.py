"""
Camera angle detection for food photography

Classifies a photo into overhead / hero / eye-level so enhancements stay
physically plausible. Detection is best-effort: any failure or timeout
degrades to the hero angle instead of raising.
"""
import asyncio
import json
import logging
import math
from typing import Optional, Protocol

import aiohttp

from foodsnap.config import settings
from foodsnap.exceptions import ConfigurationError, ProviderError
from foodsnap.models import AngleAnalysis, AngleResult, CameraAngle
from foodsnap.utils.image_utils import to_base64

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 6.0

ANALYSIS_PROMPT = """Analyze this food photograph's camera angle. Respond in JSON format ONLY (no markdown):

{
  "angle": "overhead" | "hero" | "eye-level",
  "confidence": 0.0-1.0,
  "reasoning": "brief explanation",
  "characteristics": ["list", "of", "visual", "cues"]
}

ANGLE DEFINITIONS:

OVERHEAD (80-90 degrees - looking straight down):
- Camera is directly above the food, pointing down
- Only the TABLE SURFACE is visible
- Plates appear as circles (not ellipses)
- NO vertical background elements visible (no walls, stalls, shelves)
- Common for flat lays, pizzas, spreads

HERO (30-60 degrees - the "hero" angle):
- Camera is at roughly 45 degrees
- Shows food depth/height
- Table surface visible + soft blurred background
- Plates appear as ellipses
- Most common food photography angle

EYE-LEVEL (0-30 degrees - straight on):
- Camera is at food level, pointing horizontally
- Full vertical background visible behind food
- Shows the "face" of stacked items (burgers, cakes)
- Table edge may not be visible
- Background environment clearly visible

Analyze the geometry (plate shape, visible surfaces, background presence) and respond with JSON only."""

ANGLE_SYNONYMS = {
    "overhead": CameraAngle.OVERHEAD,
    "top-down": CameraAngle.OVERHEAD,
    "flat-lay": CameraAngle.OVERHEAD,
    "flat lay": CameraAngle.OVERHEAD,
    "bird's eye": CameraAngle.OVERHEAD,
    "bird's-eye": CameraAngle.OVERHEAD,
    "90": CameraAngle.OVERHEAD,
    "90-degree": CameraAngle.OVERHEAD,
    "hero": CameraAngle.HERO,
    "45": CameraAngle.HERO,
    "45-degree": CameraAngle.HERO,
    "three-quarter": CameraAngle.HERO,
    "eye-level": CameraAngle.EYE_LEVEL,
    "eye level": CameraAngle.EYE_LEVEL,
    "straight-on": CameraAngle.EYE_LEVEL,
    "0": CameraAngle.EYE_LEVEL,
}

ANGLE_DESCRIPTIONS = {
    CameraAngle.OVERHEAD: "Overhead (90°) - flat lay, table surface only",
    CameraAngle.HERO: "Hero angle (45°) - shows depth with soft background",
    CameraAngle.EYE_LEVEL: "Eye level (0°) - full background visible",
}


class VisionProvider(Protocol):
    async def complete(self, image_bytes: bytes, mime_type: str, prompt: str) -> str:
        ...


class GeminiVisionProvider:
    """Gemini vision model via the Generative Language REST API"""

    BASE_URL = "https://generativelanguage.googleapis.com/v1beta/models"

    def __init__(
        self,
        api_key: Optional[str] = None,
        model: Optional[str] = None,
        session: Optional[aiohttp.ClientSession] = None
    ):
        self.api_key = api_key or settings.GOOGLE_AI_API_KEY
        if not self.api_key:
            raise ConfigurationError("Google AI API key is not configured")
        self.model = model or settings.ANGLE_MODEL
        self.session = session

    def _build_payload(self, image_bytes: bytes, mime_type: str, prompt: str) -> dict:
        return {
            "contents": [
                {
                    "parts": [
                        {"inline_data": {"mime_type": mime_type, "data": to_base64(image_bytes)}},
                        {"text": prompt},
                    ]
                }
            ],
            # Low temperature for consistent analysis
            "generationConfig": {"temperature": 0.1, "maxOutputTokens": 256},
        }

    async def complete(self, image_bytes: bytes, mime_type: str, prompt: str) -> str:
        url = f"{self.BASE_URL}/{self.model}:generateContent"
        payload = self._build_payload(image_bytes, mime_type, prompt)

        if self.session is not None:
            return await self._post(self.session, url, payload)

        async with aiohttp.ClientSession() as session:
            return await self._post(session, url, payload)

    async def _post(self, session, url: str, payload: dict) -> str:
        async with session.post(
            url,
            json=payload,
            params={"key": self.api_key},
            timeout=aiohttp.ClientTimeout(total=30)
        ) as response:
            if response.status != 200:
                error_text = await response.text()
                raise ProviderError(f"Vision API error: {error_text}", status=response.status)

            result = await response.json()
            candidates = result.get("candidates", [])
            if not candidates:
                raise ProviderError("No candidates in vision response")

            parts = candidates[0].get("content", {}).get("parts", [])
            return "".join(part.get("text", "") for part in parts)


def normalize_angle(value) -> CameraAngle:
    """Map a model-reported angle label to a bucket, defaulting to hero"""
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    normalized = str(value).lower().strip()
    return ANGLE_SYNONYMS.get(normalized, CameraAngle.HERO)


def get_angle_description(angle: CameraAngle) -> str:
    return ANGLE_DESCRIPTIONS.get(angle, "Unknown angle")


def strip_code_fences(text: str) -> str:
    """Remove a leading ```json / ``` and a trailing ``` wrapper"""
    text = text.strip()
    if text.startswith("```json"):
        text = text[7:]
    if text.startswith("```"):
        text = text[3:]
    if text.endswith("```"):
        text = text[:-3]
    return text.strip()


def _parse_confidence(value) -> float:
    try:
        confidence = float(value)
    except (TypeError, ValueError):
        return 0.5
    if math.isnan(confidence):
        return 0.5
    return min(1.0, max(0.0, confidence))


def parse_analysis(text: str) -> AngleAnalysis:
    """
    Parse the model's JSON reply.

    Raises:
        ValueError: If the reply is not a JSON object
    """
    data = json.loads(strip_code_fences(text))
    if not isinstance(data, dict):
        raise ValueError(f"Expected a JSON object, got {type(data).__name__}")

    characteristics = data.get("characteristics")
    if not isinstance(characteristics, list):
        characteristics = []

    return AngleAnalysis(
        angle=normalize_angle(data.get("angle")),
        confidence=_parse_confidence(data.get("confidence")),
        reasoning=data.get("reasoning") or "Analysis completed",
        characteristics=tuple(str(c) for c in characteristics),
    )


class AngleClassifier:
    """Best-effort angle classification with a hard timeout"""

    def __init__(self, provider: VisionProvider, timeout: float = DEFAULT_TIMEOUT):
        self.provider = provider
        self.timeout = timeout

    async def classify(self, image_bytes: bytes, mime_type: str = "image/jpeg") -> AngleResult:
        """
        Detect the camera angle of a food photograph.

        Never raises; on timeout, provider error or malformed reply returns a
        degraded hero result. Caller cancellation still propagates.

        Args:
            image_bytes: Raw image bytes
            mime_type: Image MIME type

        Returns:
            AngleResult, degraded=True when the fallback was used
        """
        try:
            text = await asyncio.wait_for(
                self.provider.complete(image_bytes, mime_type, ANALYSIS_PROMPT),
                timeout=self.timeout
            )
        except asyncio.TimeoutError:
            reason = f"Angle detection exceeded {self.timeout:g}s limit"
            logger.warning(f"{reason}, using hero angle")
            return AngleResult.fallback(reason)
        except Exception as e:
            logger.warning(f"Angle detection failed: {e}", exc_info=True)
            return AngleResult.fallback(str(e) or type(e).__name__)

        try:
            analysis = parse_analysis(text)
        except (ValueError, TypeError) as e:
            logger.warning(f"Could not parse angle analysis: {e}")
            logger.debug(f"Raw content: {text}")
            return AngleResult.fallback(f"Unparseable response: {e}")

        logger.info(f"Detected angle: {analysis.angle.value} (confidence {analysis.confidence:.2f})")
        return AngleResult.ok(analysis)
