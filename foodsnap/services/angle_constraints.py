"""
Physics constraints per camera angle

What can and cannot physically appear in frame for each angle bucket:
- overhead (80-90°): only the table top is visible
- hero (30-60°): table top plus a soft, out-of-focus backdrop
- eye-level (0-30°): the full venue behind the dish is visible
"""
from types import MappingProxyType
from typing import Mapping

from foodsnap.models import CameraAngle, PhysicsConstraintSet

_OVERHEAD_FORBIDDEN = (
    "background",
    "backdrop",
    "stall",
    "vertical",
    "wall",
    "shelf",
    "shelves",
    "signage",
    "menu board",
    "crowd",
    "standing people",
    "patrons",
    "behind the dish",
)

_HERO_FORBIDDEN = (
    "signage",
    "readable text",
    "crowd",
    "sharp background",
    "detailed background",
    "detailed scene",
    "menu board",
    "price sign",
)

_EYE_LEVEL_FORBIDDEN = (
    "floating",
    "defying gravity",
    "upside down",
)

ANGLE_CONSTRAINTS: Mapping[CameraAngle, PhysicsConstraintSet] = MappingProxyType({
    CameraAngle.OVERHEAD: PhysicsConstraintSet(
        can_show=(
            "Table/surface texture",
            "Props laid flat on table",
            "Plate from above (circular)",
            "Napkins, cutlery on surface",
            "Scattered ingredients",
            "Sauce dishes on table",
        ),
        cannot_show=(
            "Vertical backgrounds (walls, stalls, shelves)",
            "Standing people or crowds",
            "Signage or menus on walls",
            "Environment behind the dish",
            "Anything requiring vertical height",
        ),
        forbidden_terms=_OVERHEAD_FORBIDDEN,
    ),
    CameraAngle.HERO: PhysicsConstraintSet(
        can_show=(
            "Table surface",
            "Soft blurred background",
            "Food height and depth",
            "Props on and near table",
            "Gentle bokeh hints of environment",
        ),
        cannot_show=(
            "Sharp detailed backgrounds",
            "Readable text/signage",
            "Clear environmental features",
            "Detailed people or crowds",
        ),
        forbidden_terms=_HERO_FORBIDDEN,
    ),
    CameraAngle.EYE_LEVEL: PhysicsConstraintSet(
        can_show=(
            "Full vertical background",
            "Environment/venue details",
            "Stalls, walls, decor",
            "Atmospheric elements",
            "Steam rising vertically",
            "Standing props",
        ),
        cannot_show=(
            "Elements that contradict the existing background",
            "Physics-defying placements",
        ),
        forbidden_terms=_EYE_LEVEL_FORBIDDEN,
    ),
    # Unknown angles are styled with the hero prompt, so hero limits apply too
    CameraAngle.UNKNOWN: PhysicsConstraintSet(
        can_show=("Standard food photography elements",),
        cannot_show=("Physics-breaking elements",),
        forbidden_terms=_HERO_FORBIDDEN + _EYE_LEVEL_FORBIDDEN,
    ),
})

_PHYSICS_TEXT: Mapping[CameraAngle, str] = MappingProxyType({
    CameraAngle.OVERHEAD: """
PHYSICAL REALITY - OVERHEAD SHOT (90°):
This photograph is taken from DIRECTLY ABOVE, looking straight down.
The frame contains ONLY the table top and the items resting on it.

KEEP EVERY ADDITION FLAT ON THE SURFACE:
- Nothing may rise into view above table height
- Nothing may appear beyond the edge of the table top
- Scenery, architecture and people cannot be seen from this viewpoint

PHYSICALLY POSSIBLE at this angle (CAN ENHANCE):
- Table/surface texture and pattern
- Items laid flat on the table
- Plate from above (appears circular)
- Scattered ingredients, napkins, cutlery ON the surface
""",
    CameraAngle.HERO: """
PHYSICAL REALITY - HERO ANGLE (45°):
This photograph is taken at approximately 45 degrees.
The table surface is visible, with a softly blurred background behind.

AT THIS ANGLE:
- Table surface is clearly visible
- Background must stay SOFT BLUR only (bokeh)
- The environment is suggested through color and light, never rendered in focus
- No legible lettering anywhere in frame

ENHANCE with soft background treatment, NOT scene replacement.
""",
    CameraAngle.EYE_LEVEL: """
PHYSICAL REALITY - EYE LEVEL (0-30°):
This photograph is taken at eye level, looking horizontally at the food.
Full vertical background is visible behind the dish.

AT THIS ANGLE:
- Full environment/venue can be visible behind the dish
- Vertical elements (walls, stalls, decor) are appropriate
- Background depth and atmosphere are naturally visible
- Everything added must rest on a surface or stand on the ground

Environmental enhancements are physically appropriate at this angle.
""",
    CameraAngle.UNKNOWN: """
Preserve the existing composition and enhance appropriately.
Do not add elements that would violate the physics of the camera angle.
""",
})


def get_angle_constraints(angle: CameraAngle) -> PhysicsConstraintSet:
    """Get what can/cannot be visible for an angle bucket"""
    return ANGLE_CONSTRAINTS.get(angle, ANGLE_CONSTRAINTS[CameraAngle.UNKNOWN])


def get_physics_constraints(angle: CameraAngle) -> str:
    """Declarative constraint block that leads every composed instruction"""
    return _PHYSICS_TEXT.get(angle, _PHYSICS_TEXT[CameraAngle.UNKNOWN])
