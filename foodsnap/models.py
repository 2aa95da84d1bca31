"""
Data model for the enhancement engine
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Optional, Tuple


class CameraAngle(str, Enum):
    OVERHEAD = "overhead"
    HERO = "hero"
    EYE_LEVEL = "eye-level"
    UNKNOWN = "unknown"


# Buckets a venue must author prompts for
PROMPT_ANGLES: Tuple[CameraAngle, ...] = (
    CameraAngle.OVERHEAD,
    CameraAngle.HERO,
    CameraAngle.EYE_LEVEL,
)


@dataclass(frozen=True)
class AngleAnalysis:
    angle: CameraAngle
    confidence: float
    reasoning: str
    characteristics: Tuple[str, ...] = ()


FALLBACK_ANALYSIS = AngleAnalysis(
    angle=CameraAngle.HERO,
    confidence=0.3,
    reasoning="fallback",
    characteristics=("fallback",),
)


@dataclass(frozen=True)
class AngleResult:
    """Classification outcome, tagged so callers can tell confident from guessed"""
    analysis: AngleAnalysis
    degraded: bool = False
    reason: Optional[str] = None

    @classmethod
    def ok(cls, analysis: AngleAnalysis) -> "AngleResult":
        return cls(analysis=analysis)

    @classmethod
    def fallback(cls, reason: str) -> "AngleResult":
        return cls(analysis=FALLBACK_ANALYSIS, degraded=True, reason=reason)

    @property
    def angle(self) -> CameraAngle:
        return self.analysis.angle


@dataclass(frozen=True)
class PhysicsConstraintSet:
    can_show: Tuple[str, ...]
    cannot_show: Tuple[str, ...]
    # Lower-case phrases the composed instruction for this bucket must not contain
    forbidden_terms: Tuple[str, ...] = ()


@dataclass(frozen=True)
class VenueStyle:
    id: str
    name: str
    description: str
    prompts: Dict[CameraAngle, str]

    def __post_init__(self):
        missing = [a.value for a in PROMPT_ANGLES if not self.prompts.get(a, "").strip()]
        if missing:
            raise ValueError(f"Venue '{self.id}' is missing prompts for: {', '.join(missing)}")

    def prompt_for(self, angle: CameraAngle) -> str:
        if angle == CameraAngle.UNKNOWN:
            angle = CameraAngle.HERO
        return self.prompts.get(angle) or self.prompts[CameraAngle.HERO]


# ─── Technical facets ────────────────────────────────────────────────────────

@dataclass(frozen=True)
class LensOption:
    id: str
    focal_length: str
    prompt_text: str
    best_for: Tuple[str, ...]
    characteristics: str = ""


@dataclass(frozen=True)
class ApertureOption:
    id: str
    f_stop: str
    prompt_text: str
    dof_description: str
    best_for: Tuple[str, ...]


@dataclass(frozen=True)
class AngleOption:
    id: str
    degrees: int
    name: str
    prompt_text: str
    best_for: Tuple[str, ...]


@dataclass(frozen=True)
class LightingOption:
    id: str
    name: str
    prompt_text: str
    characteristics: str
    best_for: Tuple[str, ...]


@dataclass(frozen=True)
class ColorOption:
    id: str
    name: str
    kelvin: str
    prompt_text: str
    mood: str
    best_for: Tuple[str, ...]


@dataclass(frozen=True)
class StyleOption:
    id: str
    name: str
    prompt_text: str
    characteristics: str
    best_for: Tuple[str, ...]
    era: Optional[str] = None


@dataclass(frozen=True)
class RealismOption:
    id: str
    name: str
    level: str  # minimal | subtle | natural | vintage
    prompt_text: str
    characteristics: str


@dataclass(frozen=True)
class FoodRealismCue:
    food_type: str
    cue: str
    prompt_addition: str


@dataclass(frozen=True)
class TechnicalSelection:
    """Partial facet selection; unset facets fall back to defaults"""
    lens: Optional[LensOption] = None
    aperture: Optional[ApertureOption] = None
    angle: Optional[AngleOption] = None
    lighting: Optional[LightingOption] = None
    color: Optional[ColorOption] = None
    style: Optional[StyleOption] = None
    realism: Optional[RealismOption] = None


# ─── Style selection ─────────────────────────────────────────────────────────

@dataclass
class SimpleSelection:
    business_type: Optional[str] = None
    format: Optional[str] = None
    mood: Optional[str] = None
    seasonal: Optional[str] = None


class WarningType(str, Enum):
    ERROR = "error"
    WARNING = "warning"
    SUGGESTION = "suggestion"


@dataclass(frozen=True)
class ConflictWarning:
    type: WarningType
    category1: str
    value1: str
    category2: str
    value2: str
    message: str
    suggestion: Optional[str] = None


class SelectionStatus(str, Enum):
    INVALID = "invalid"
    VALID_WITH_WARNINGS = "valid-with-warnings"
    VALID = "valid"


@dataclass(frozen=True)
class ValidationReport:
    warnings: Tuple[ConflictWarning, ...]
    status: SelectionStatus
    message: str


# ─── Editing ─────────────────────────────────────────────────────────────────

class EditMode(str, Enum):
    INPAINT_INSERTION = "inpaint_insertion"
    INPAINT_REMOVAL = "inpaint_removal"
    OUTPAINT = "outpaint"


class MaskMode(str, Enum):
    BACKGROUND = "background"
    FOREGROUND = "foreground"
    SEMANTIC = "semantic"


class JobStatus(str, Enum):
    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    FINISHED = "finished"
    ERROR = "error"
    TIMED_OUT = "timed_out"
    PUBLISHED = "published"


@dataclass(frozen=True)
class EditOptions:
    edit_mode: EditMode = EditMode.INPAINT_INSERTION
    mask_mode: MaskMode = MaskMode.BACKGROUND
    aspect_ratio: Optional[str] = None
    base_steps: Optional[int] = None  # None -> per-mode default


@dataclass(frozen=True)
class EditedImage:
    image_bytes: bytes
    mime_type: str = "image/png"


@dataclass
class EditJob:
    source_image: bytes
    prompt: str
    edit_mode: EditMode
    mask_mode: MaskMode
    container_id: Optional[str] = None
    status: JobStatus = JobStatus.PENDING
    attempts: int = 0
    error: Optional[str] = None


@dataclass(frozen=True)
class PublishResult:
    container_id: str
    media_id: str
    attempts: int
    transitions: Tuple[str, ...] = field(default_factory=tuple)
