"""
Style selection validation

Advisory only: single-select categories already prevent structural
conflicts, so the simple path emits warnings and suggestions but never
errors. A missing business type is the only thing that blocks submission.
"""
import logging
from dataclasses import dataclass
from itertools import combinations
from types import MappingProxyType
from typing import Iterable, List, Mapping, Optional, Sequence, Tuple

from foodsnap.models import (
    ConflictWarning,
    SelectionStatus,
    SimpleSelection,
    WarningType,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MoodCompatibility:
    recommended: Tuple[str, ...]
    compatible: Tuple[str, ...]
    not_recommended: Tuple[str, ...]


@dataclass(frozen=True)
class SeasonalCompatibility:
    perfect: Tuple[str, ...]
    good: Tuple[str, ...]
    unusual: Tuple[str, ...]


@dataclass(frozen=True)
class LegacyConflict:
    blocks: Tuple[str, ...]
    reason: str


@dataclass(frozen=True)
class StyleCheck:
    allowed: bool
    warning: Optional[str] = None


@dataclass(frozen=True)
class SmartSuggestions:
    suggested_mood: Optional[str]
    suggested_format: Optional[str]
    explanation: str


BUSINESS_MOOD_COMPATIBILITY: Mapping[str, MoodCompatibility] = MappingProxyType({
    "restaurant": MoodCompatibility(
        recommended=("warm", "auto"),
        compatible=("bright", "natural", "elegant"),
        not_recommended=(),
    ),
    "cafe": MoodCompatibility(
        recommended=("bright", "natural", "auto"),
        compatible=("warm",),
        not_recommended=("elegant",),
    ),
    "hawker": MoodCompatibility(
        recommended=("warm", "natural", "auto"),
        compatible=("bright",),
        not_recommended=("elegant",),
    ),
    "fastfood": MoodCompatibility(
        recommended=("bright", "auto"),
        compatible=("warm",),
        not_recommended=("elegant", "natural"),
    ),
    "dessert": MoodCompatibility(
        recommended=("bright", "auto"),
        compatible=("warm", "natural"),
        not_recommended=("elegant",),
    ),
})

BUSINESS_SEASONAL_COMPATIBILITY: Mapping[str, SeasonalCompatibility] = MappingProxyType({
    "restaurant": SeasonalCompatibility(
        perfect=("christmas", "cny", "valentines", "hari-raya", "deepavali", "mid-autumn"),
        good=(),
        unusual=(),
    ),
    "cafe": SeasonalCompatibility(
        perfect=("christmas", "valentines"),
        good=("cny", "mid-autumn"),
        unusual=("hari-raya", "deepavali"),
    ),
    "hawker": SeasonalCompatibility(
        perfect=("cny", "hari-raya", "deepavali"),
        good=("mid-autumn",),
        unusual=("christmas", "valentines"),
    ),
    "fastfood": SeasonalCompatibility(
        perfect=("christmas", "cny"),
        good=("valentines",),
        unusual=("hari-raya", "deepavali", "mid-autumn"),
    ),
    "dessert": SeasonalCompatibility(
        perfect=("christmas", "valentines", "mid-autumn"),
        good=("cny", "deepavali"),
        unusual=("hari-raya",),
    ),
})

# Pairwise blocks from the multi-select style picker. Only validate_multi_select reads this.
LEGACY_CONFLICTS: Mapping[str, LegacyConflict] = MappingProxyType({
    "flat-lay": LegacyConflict(
        blocks=("bokeh", "macro", "neon-night"),
        reason="Flat lay uses 90° overhead angle which is incompatible with bokeh/macro depth effects",
    ),
    "bokeh": LegacyConflict(
        blocks=("flat-lay", "hdr"),
        reason="Bokeh requires shallow DoF which conflicts with flat-lay sharpness and HDR detail",
    ),
    "hdr": LegacyConflict(
        blocks=("vintage", "bokeh"),
        reason="HDR maximizes detail everywhere, opposite of vintage softness and bokeh blur",
    ),
    "vintage": LegacyConflict(
        blocks=("hdr", "neon-night"),
        reason="Vintage desaturates and softens, opposite of HDR sharpness and neon vibrancy",
    ),
    "neon-night": LegacyConflict(
        blocks=("natural-light", "vintage", "flat-lay"),
        reason="Neon is artificial night lighting, incompatible with natural, vintage and overhead looks",
    ),
    "natural-light": LegacyConflict(
        blocks=("neon-night",),
        reason="Natural daylight conflicts with artificial neon aesthetic",
    ),
    "dark-moody": LegacyConflict(
        blocks=("bright-airy", "tropical"),
        reason="Dark moody and bright airy are opposite lighting moods",
    ),
    "bright-airy": LegacyConflict(
        blocks=("dark-moody", "neon-night"),
        reason="Bright airy and dark/neon are opposite lighting moods",
    ),
})

STATUS_MESSAGES: Mapping[SelectionStatus, str] = MappingProxyType({
    SelectionStatus.INVALID: "Please select a business type",
    SelectionStatus.VALID_WITH_WARNINGS: "Ready, but some choices are unusual.",
    SelectionStatus.VALID: "Great choices! Ready to enhance.",
})


def validate_selection(selection: SimpleSelection) -> List[ConflictWarning]:
    """
    Check a single-select selection for unusual combinations.

    Args:
        selection: Current user selection

    Returns:
        Warnings (mood) and suggestions (seasonal); never errors
    """
    warnings = []
    business = selection.business_type

    if business and selection.mood and selection.mood != "auto":
        compat = BUSINESS_MOOD_COMPATIBILITY.get(business)
        if compat and selection.mood in compat.not_recommended:
            warnings.append(ConflictWarning(
                type=WarningType.WARNING,
                category1="business_type",
                value1=business,
                category2="mood",
                value2=selection.mood,
                message=f'"{selection.mood}" mood is unusual for {business} style',
                suggestion=f'Consider using "{compat.recommended[0]}" for better results',
            ))

    if business and selection.seasonal and selection.seasonal != "none":
        compat = BUSINESS_SEASONAL_COMPATIBILITY.get(business)
        if compat and selection.seasonal in compat.unusual:
            warnings.append(ConflictWarning(
                type=WarningType.SUGGESTION,
                category1="business_type",
                value1=business,
                category2="seasonal",
                value2=selection.seasonal,
                message=f"{selection.seasonal} theme is uncommon for {business}",
                suggestion="This may produce unexpected results, but can still work",
            ))

    return warnings


def get_selection_status(
    selection: SimpleSelection,
    warnings: Optional[Sequence[ConflictWarning]] = None,
) -> SelectionStatus:
    """Reduce a selection and its warnings to the tri-state UI summary"""
    if not selection.business_type:
        return SelectionStatus.INVALID

    if warnings is None:
        warnings = validate_selection(selection)

    return SelectionStatus.VALID_WITH_WARNINGS if warnings else SelectionStatus.VALID


def get_status_message(
    status: SelectionStatus,
    warnings: Sequence[ConflictWarning] = (),
) -> str:
    if status == SelectionStatus.VALID_WITH_WARNINGS:
        if any(w.type == WarningType.ERROR for w in warnings):
            return "Some selections conflict. Please review."
        if warnings and not any(w.type == WarningType.WARNING for w in warnings):
            return "Ready with suggestions."
    return STATUS_MESSAGES[status]


def can_select_style(category: str, style_id: str, current: SimpleSelection) -> StyleCheck:
    """Always allowed; mood picks that don't suit the business type carry a warning"""
    if category == "mood" and current.business_type:
        compat = BUSINESS_MOOD_COMPATIBILITY.get(current.business_type)
        if compat and style_id in compat.not_recommended:
            return StyleCheck(
                allowed=True,
                warning=f'"{style_id}" mood may not be ideal for {current.business_type}',
            )
    return StyleCheck(allowed=True)


def get_recommended_styles(category: str, current: SimpleSelection) -> List[str]:
    if not current.business_type:
        return []

    if category == "mood":
        compat = BUSINESS_MOOD_COMPATIBILITY.get(current.business_type)
        if compat:
            return list(compat.recommended)

    if category == "seasonal":
        compat = BUSINESS_SEASONAL_COMPATIBILITY.get(current.business_type)
        if compat:
            return list(compat.perfect)

    return []


def get_smart_suggestions(selection: SimpleSelection) -> SmartSuggestions:
    """Suggest a mood and a format from a partial selection"""
    suggested_mood = None
    suggested_format = None
    explanation = ""
    business = selection.business_type

    if business:
        compat = BUSINESS_MOOD_COMPATIBILITY.get(business)
        if compat and compat.recommended:
            suggested_mood = compat.recommended[0]
            explanation = f'"{suggested_mood}" works great with {business} style'

    if business and not selection.format:
        if business in ("hawker", "fastfood"):
            suggested_format = "square"
            explanation += ". Square format is perfect for delivery apps."
        elif business in ("cafe", "dessert"):
            suggested_format = "portrait"
            explanation += ". Portrait format is ideal for Instagram."
        else:
            suggested_format = "square"
            explanation += ". Square format is the most versatile."

    return SmartSuggestions(
        suggested_mood=suggested_mood,
        suggested_format=suggested_format,
        explanation=explanation,
    )


def validate_multi_select(style_ids: Iterable[str]) -> List[ConflictWarning]:
    """
    Check a multi-select style list against the pairwise conflict table.

    Each conflicting pair is reported once, as an error, whichever side
    declares the block.
    """
    ids = list(dict.fromkeys(style_ids))
    warnings = []

    for first, second in combinations(ids, 2):
        conflict = _find_conflict(first, second)
        if conflict is None:
            continue
        warnings.append(ConflictWarning(
            type=WarningType.ERROR,
            category1="style",
            value1=first,
            category2="style",
            value2=second,
            message=conflict.reason,
        ))

    if warnings:
        logger.info(f"Multi-select conflicts found: {len(warnings)}")
    return warnings


def _find_conflict(first: str, second: str) -> Optional[LegacyConflict]:
    conflict = LEGACY_CONFLICTS.get(first)
    if conflict and second in conflict.blocks:
        return conflict
    conflict = LEGACY_CONFLICTS.get(second)
    if conflict and first in conflict.blocks:
        return conflict
    return None
