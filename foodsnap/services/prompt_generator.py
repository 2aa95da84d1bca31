"""
Enhancement prompt assembly
Combines the angle-aware venue instruction, technical specs and food cues
"""
import logging
from typing import Optional, Tuple

from foodsnap.models import CameraAngle, EditMode, EditOptions, MaskMode, TechnicalSelection
from foodsnap.services.prompt_elements import (
    angle_option_for_bucket,
    compose_food_realism_cue,
    compose_technical_prompt,
)
from foodsnap.services.venue_styles import compose_venue_instruction

logger = logging.getLogger(__name__)

ENHANCEMENT_GOALS = """ENHANCEMENT GOALS:
- Make food look irresistibly appetizing
- Enhance colors without oversaturation
- Preserve original food and composition
- Apply professional photography quality
- Create authentic, not artificial, appearance"""

# Edit types offered to users and the provider modes they map to
EDIT_TYPES = {
    "add_props": (EditMode.INPAINT_INSERTION, MaskMode.BACKGROUND),
    "expand_canvas": (EditMode.OUTPAINT, MaskMode.BACKGROUND),
    "remove_object": (EditMode.INPAINT_REMOVAL, MaskMode.SEMANTIC),
}


def build_enhancement_prompt(
    venue_id: str,
    angle: CameraAngle,
    technical: Optional[TechnicalSelection] = None,
    food_tag: Optional[str] = None,
) -> str:
    """
    Build the full enhancement prompt for a photo.

    Args:
        venue_id: Venue style id (unknown ids get a generic instruction)
        angle: Detected camera angle bucket
        technical: Optional facet selection; its angle defaults to the detected bucket
        food_tag: Optional food realism tag, e.g. "hot-food"

    Returns:
        Prompt text, physics constraints first
    """
    technical = technical or TechnicalSelection()
    if technical.angle is None:
        technical = TechnicalSelection(
            lens=technical.lens,
            aperture=technical.aperture,
            angle=angle_option_for_bucket(angle),
            lighting=technical.lighting,
            color=technical.color,
            style=technical.style,
            realism=technical.realism,
        )

    parts = [
        compose_venue_instruction(venue_id, angle).strip(),
        compose_technical_prompt(technical).strip(),
    ]

    cue = compose_food_realism_cue(food_tag)
    if cue:
        parts.append(f"FOOD REALISM: {cue}")

    parts.append(ENHANCEMENT_GOALS)

    logger.debug(f"Built enhancement prompt for venue={venue_id} angle={angle.value}")
    return "\n\n".join(parts)


def build_props_prompt(props: str) -> str:
    """Insertion prompt for adding props around the food"""
    return f"""Add {props} to this food photograph.

CRITICAL REQUIREMENTS:
- Place the new items naturally on the table/surface around the food
- Match the existing lighting, shadows, and color grading perfectly
- Do NOT modify the food itself - it must remain exactly as is
- New items should look like they belong in the same photo session
- Maintain professional food photography quality"""


def build_expand_prompt(scene: str) -> str:
    """Outpainting prompt for extending the canvas"""
    return f"""Expand this food photograph to show more of the scene.

REQUIREMENTS:
- Extend the background/table surface naturally
- Match the existing background color, texture, and lighting exactly
- The original food and any existing elements must remain unchanged
- The expansion should look seamless and natural
- Maintain the same studio/setting style

SCENE DESCRIPTION:
{scene}"""


def prepare_edit(
    edit_type: str,
    prompt: str,
    aspect_ratio: Optional[str] = None,
) -> Tuple[str, EditOptions]:
    """
    Map a user edit request to the provider prompt and options.

    Raises:
        ValueError: For an unknown edit type or empty prompt
    """
    if not prompt or not prompt.strip():
        raise ValueError("prompt is required")
    if edit_type not in EDIT_TYPES:
        raise ValueError(f"Invalid edit type: {edit_type}")

    edit_mode, mask_mode = EDIT_TYPES[edit_type]
    if edit_type == "add_props":
        text = build_props_prompt(prompt)
    elif edit_type == "expand_canvas":
        text = build_expand_prompt(prompt)
        aspect_ratio = aspect_ratio or "1:1"
    else:
        text = prompt

    return text, EditOptions(edit_mode=edit_mode, mask_mode=mask_mode, aspect_ratio=aspect_ratio)
