"""
Enhancement engine facade

Single entry point for angle detection, prompt building, style validation,
editing and publishing. Providers are built once in create_engine and
injected, so tests can swap in fakes.
"""
import logging
from typing import Optional

from foodsnap.config import Settings, settings as default_settings
from foodsnap.exceptions import SelectionError
from foodsnap.models import (
    AngleResult,
    CameraAngle,
    EditedImage,
    EditOptions,
    PublishResult,
    SimpleSelection,
    TechnicalSelection,
    ValidationReport,
)
from foodsnap.services import prompt_generator
from foodsnap.services.angle_detector import AngleClassifier, GeminiVisionProvider
from foodsnap.services.edit_orchestrator import EditOrchestrator
from foodsnap.services.imagen_editor import ImagenEditProvider
from foodsnap.services.media_container import GraphContainerClient
from foodsnap.services.simple_styles import find_unknown_ids, get_format_config, is_selection_valid
from foodsnap.services.style_validator import (
    get_selection_status,
    get_status_message,
    validate_selection,
)
from foodsnap.utils.image_utils import detect_mime_type, normalize_for_edit
from foodsnap.utils.logging_config import setup_logger

logger = logging.getLogger(__name__)


class EnhancementEngine:
    def __init__(self, classifier: AngleClassifier, orchestrator: EditOrchestrator):
        self.classifier = classifier
        self.orchestrator = orchestrator

    async def detect_angle(self, image_bytes: bytes) -> AngleResult:
        return await self.classifier.classify(image_bytes, detect_mime_type(image_bytes))

    def build_enhancement_prompt(
        self,
        venue_id: str,
        angle: CameraAngle,
        technical: Optional[TechnicalSelection] = None,
        food_tag: Optional[str] = None,
    ) -> str:
        return prompt_generator.build_enhancement_prompt(venue_id, angle, technical, food_tag)

    async def build_prompt_for_image(
        self,
        image_bytes: bytes,
        venue_id: str,
        technical: Optional[TechnicalSelection] = None,
        food_tag: Optional[str] = None,
    ) -> str:
        """Detect the angle, then build the prompt for it"""
        result = await self.detect_angle(image_bytes)
        if result.degraded:
            logger.info(f"Building prompt with fallback angle: {result.reason}")
        return self.build_enhancement_prompt(venue_id, result.angle, technical, food_tag)

    def validate_style_selection(
        self,
        selection: SimpleSelection,
        require_business_type: bool = False,
    ) -> ValidationReport:
        """
        Advisory warnings plus the tri-state status.

        Raises:
            SelectionError: An id is not in the style catalog, or the business
                type is missing and require_business_type is set
        """
        unknown = find_unknown_ids(selection)
        if unknown:
            details = ", ".join(f"{category}={value}" for category, value in unknown)
            raise SelectionError(f"Unknown style selection: {details}")
        if require_business_type and not is_selection_valid(selection):
            raise SelectionError("Please select a business type")

        warnings = tuple(validate_selection(selection))
        status = get_selection_status(selection, warnings)
        return ValidationReport(
            warnings=warnings,
            status=status,
            message=get_status_message(status, warnings),
        )

    async def run_edit(
        self,
        image_bytes: bytes,
        prompt: str,
        options: Optional[EditOptions] = None,
    ) -> EditedImage:
        """WEBP input is converted to PNG before the provider call"""
        return await self.orchestrator.run_edit(normalize_for_edit(image_bytes), prompt, options)

    async def run_edit_type(
        self,
        image_bytes: bytes,
        edit_type: str,
        prompt: str,
        aspect_ratio: Optional[str] = None,
        selection: Optional[SimpleSelection] = None,
    ) -> EditedImage:
        """
        Edit by user-facing type: add_props, expand_canvas or remove_object.

        Canvas expansion without an explicit aspect ratio targets the
        selection's output format.
        """
        if aspect_ratio is None and selection is not None and edit_type == "expand_canvas":
            aspect_ratio = get_format_config(selection.format).aspect_ratio
        text, options = prompt_generator.prepare_edit(edit_type, prompt, aspect_ratio)
        return await self.run_edit(image_bytes, text, options)

    async def publish_edited(self, image_url: str, caption: str) -> PublishResult:
        return await self.orchestrator.publish(image_url, caption)


def create_engine(settings: Optional[Settings] = None) -> EnhancementEngine:
    """
    Build the engine with real providers.

    Publishing is only wired up when Graph API credentials are configured.

    Raises:
        ConfigurationError: Missing Google AI key or Vertex credentials
    """
    settings = settings or default_settings
    setup_logger("foodsnap", settings.LOG_LEVEL)

    classifier = AngleClassifier(
        GeminiVisionProvider(api_key=settings.GOOGLE_AI_API_KEY, model=settings.ANGLE_MODEL),
        timeout=settings.ANGLE_DETECTION_TIMEOUT,
    )

    container_provider = None
    if settings.is_publish_configured:
        container_provider = GraphContainerClient(
            user_id=settings.GRAPH_USER_ID,
            access_token=settings.GRAPH_ACCESS_TOKEN,
            base_url=settings.GRAPH_API_BASE,
        )

    orchestrator = EditOrchestrator(
        ImagenEditProvider(
            credentials_b64=settings.GOOGLE_VERTEX_AI_CREDENTIALS,
            region=settings.VERTEX_AI_REGION,
            model=settings.IMAGEN_EDIT_MODEL,
        ),
        container_provider=container_provider,
        request_timeout=settings.EDIT_REQUEST_TIMEOUT,
        poll_interval=settings.PUBLISH_POLL_INTERVAL,
        max_poll_attempts=settings.PUBLISH_MAX_POLL_ATTEMPTS,
    )

    logger.info("Enhancement engine initialized")
    return EnhancementEngine(classifier, orchestrator)
