"""
Simplified style catalog for F&B owners

Business type (required), format, mood and an optional seasonal theme.
"""
from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterable, List, Mapping, Optional, Tuple

from foodsnap.models import SimpleSelection


@dataclass(frozen=True)
class SimpleStyle:
    id: str
    name: str
    emoji: str
    description: str
    detailed_help: Optional[str] = None


@dataclass(frozen=True)
class FormatStyle:
    id: str
    name: str
    emoji: str
    description: str
    aspect_ratio: str
    width: int
    height: int
    examples: Tuple[str, ...] = ()


@dataclass(frozen=True)
class MoodRecommendation:
    mood: str
    reason: str


BUSINESS_TYPES = (
    SimpleStyle(
        id="restaurant",
        name="Restaurant",
        emoji="🍽️",
        description="Casual to fine dining, plated dishes",
        detailed_help="AI will emphasize plate presentation and garnishes. Works best for dishes "
                      "that are artfully arranged on plates.",
    ),
    SimpleStyle(
        id="cafe",
        name="Cafe & Bakery",
        emoji="☕",
        description="Coffee, pastries, brunch spots",
        detailed_help="Soft, dreamy lighting with warm tones for lattes, croissants, cakes and brunch.",
    ),
    SimpleStyle(
        id="hawker",
        name="Hawker & Street Food",
        emoji="🍜",
        description="Hawker centres, kopitiams, street vendors",
        detailed_help="Captures the authentic, hearty appeal of local food without over-polishing.",
    ),
    SimpleStyle(
        id="fastfood",
        name="Fast Food",
        emoji="🍔",
        description="Burgers, fried chicken, quick service",
        detailed_help="Highlights crispy textures, melty cheese and juicy meats with punchy lighting.",
    ),
    SimpleStyle(
        id="dessert",
        name="Desserts & Sweets",
        emoji="🍰",
        description="Cakes, ice cream, sweet treats",
        detailed_help="Shows glossy glazes, creamy textures and vibrant colors.",
    ),
)

FORMATS = (
    FormatStyle(
        id="square",
        name="Square",
        emoji="⬜",
        description="1:1 - Most versatile format",
        aspect_ratio="1:1",
        width=1024,
        height=1024,
        examples=("GrabFood", "Deliveroo", "GoFood", "ShopeeFood", "Menu", "WeChat"),
    ),
    FormatStyle(
        id="portrait",
        name="Portrait",
        emoji="📱",
        description="4:5 - Tall rectangle for feeds",
        aspect_ratio="4:5",
        width=1080,
        height=1350,
        examples=("Instagram Feed", "Xiaohongshu", "Pinterest"),
    ),
    FormatStyle(
        id="vertical",
        name="Vertical",
        emoji="📲",
        description="9:16 - Full screen vertical",
        aspect_ratio="9:16",
        width=1080,
        height=1920,
        examples=("Instagram Stories", "TikTok", "Reels", "YouTube Shorts"),
    ),
    FormatStyle(
        id="landscape",
        name="Landscape",
        emoji="🖼️",
        description="16:9 - Wide horizontal",
        aspect_ratio="16:9",
        width=1920,
        height=1080,
        examples=("Facebook", "YouTube", "Website banners", "Presentations"),
    ),
    FormatStyle(
        id="foodpanda",
        name="Foodpanda",
        emoji="🐼",
        description="4:3 - High resolution required",
        aspect_ratio="4:3",
        width=4000,
        height=3000,
        examples=("Foodpanda menu listings",),
    ),
)

MOODS = (
    SimpleStyle(
        id="auto",
        name="Auto",
        emoji="✨",
        description="Let AI choose the best look (Recommended)",
    ),
    SimpleStyle(
        id="bright",
        name="Bright & Fresh",
        emoji="☀️",
        description="Clean, cheerful, high-energy",
    ),
    SimpleStyle(
        id="warm",
        name="Warm & Cozy",
        emoji="🔥",
        description="Inviting, comfortable, homestyle",
    ),
    SimpleStyle(
        id="elegant",
        name="Dark & Elegant",
        emoji="🌙",
        description="Sophisticated, dramatic, premium",
    ),
    SimpleStyle(
        id="natural",
        name="Natural Light",
        emoji="🪟",
        description="Authentic, soft, organic feel",
    ),
)

SEASONAL_THEMES = (
    SimpleStyle(id="none", name="No Theme", emoji="➖", description="Keep it simple, no seasonal styling"),
    SimpleStyle(id="christmas", name="Christmas", emoji="🎄", description="Festive red & green, cozy winter vibes"),
    SimpleStyle(id="cny", name="Chinese New Year", emoji="🧧", description="Prosperous red & gold styling"),
    SimpleStyle(id="valentines", name="Valentine's Day", emoji="💝", description="Romantic pink & red hearts"),
    SimpleStyle(id="hari-raya", name="Hari Raya", emoji="🌙", description="Elegant green & gold celebration"),
    SimpleStyle(id="deepavali", name="Deepavali", emoji="🪔", description="Vibrant festival of lights"),
    SimpleStyle(id="mid-autumn", name="Mid-Autumn", emoji="🥮", description="Mooncake season elegance"),
)

# Keyword -> mood, checked in order against a free-text backdrop description
BACKGROUND_MOOD_RECOMMENDATIONS: Mapping[str, MoodRecommendation] = MappingProxyType({
    "white": MoodRecommendation("bright", "White backgrounds work best with bright, clean lighting"),
    "clean": MoodRecommendation("bright", "Clean backgrounds pair well with bright, fresh styling"),
    "minimal": MoodRecommendation("bright", "Minimalist backgrounds look best with bright lighting"),
    "light": MoodRecommendation("bright", "Light backgrounds complement bright, airy styling"),
    "wood": MoodRecommendation("warm", "Wood backgrounds pair beautifully with warm, cozy lighting"),
    "rustic": MoodRecommendation("warm", "Rustic backgrounds look best with warm, homestyle lighting"),
    "cozy": MoodRecommendation("warm", "Cozy themes naturally pair with warm lighting"),
    "homestyle": MoodRecommendation("warm", "Homestyle backgrounds work well with warm, inviting light"),
    "dark": MoodRecommendation("elegant", "Dark backgrounds create dramatic, elegant contrast"),
    "black": MoodRecommendation("elegant", "Black backgrounds look stunning with elegant, moody lighting"),
    "marble": MoodRecommendation("elegant", "Marble backgrounds suit sophisticated, elegant styling"),
    "luxury": MoodRecommendation("elegant", "Luxury themes pair with dark, elegant atmospheres"),
    "premium": MoodRecommendation("elegant", "Premium branding looks best with elegant, dramatic lighting"),
    "natural": MoodRecommendation("natural", "Natural themes pair with soft, natural lighting"),
    "organic": MoodRecommendation("natural", "Organic backgrounds work best with natural light styling"),
    "garden": MoodRecommendation("natural", "Garden themes complement natural, outdoor lighting"),
    "outdoor": MoodRecommendation("natural", "Outdoor settings look best with natural light"),
})

# Old multi-select style ids -> (selection field, new id)
LEGACY_ID_MAPPING: Mapping[str, Tuple[str, str]] = MappingProxyType({
    # Venue types
    "fine-dining": ("business_type", "restaurant"),
    "casual-dining": ("business_type", "restaurant"),
    "cafe": ("business_type", "cafe"),
    "fast-food": ("business_type", "fastfood"),
    "street-food": ("business_type", "hawker"),
    "hawker": ("business_type", "hawker"),
    "kopitiam": ("business_type", "hawker"),
    "dessert": ("business_type", "dessert"),
    # Delivery and social platforms
    "grab": ("format", "square"),
    "deliveroo": ("format", "square"),
    "gojek": ("format", "square"),
    "shopee": ("format", "square"),
    "generic-delivery": ("format", "square"),
    "foodpanda": ("format", "foodpanda"),
    "instagram-feed": ("format", "portrait"),
    "instagram-stories": ("format", "vertical"),
    "tiktok": ("format", "vertical"),
    "facebook": ("format", "landscape"),
    "xiaohongshu": ("format", "portrait"),
    "wechat": ("format", "square"),
    "pinterest": ("format", "portrait"),
    # Backdrop styles
    "minimal-white": ("mood", "bright"),
    "bright-airy": ("mood", "bright"),
    "rustic-wood": ("mood", "warm"),
    "dark-moody": ("mood", "elegant"),
    "marble": ("mood", "elegant"),
    "tropical": ("mood", "bright"),
    "concrete": ("mood", "natural"),
    "botanical": ("mood", "natural"),
    # Seasonal
    "christmas": ("seasonal", "christmas"),
    "chinese-new-year": ("seasonal", "cny"),
    "valentines": ("seasonal", "valentines"),
    "hari-raya": ("seasonal", "hari-raya"),
    "deepavali": ("seasonal", "deepavali"),
    "mid-autumn": ("seasonal", "mid-autumn"),
})


_CATEGORY_STYLES = (
    ("business_type", BUSINESS_TYPES),
    ("format", FORMATS),
    ("mood", MOODS),
    ("seasonal", SEASONAL_THEMES),
)


def _find(styles, style_id):
    return next((s for s in styles if s.id == style_id), None)


def get_simple_style_by_id(style_id: str) -> Optional[SimpleStyle]:
    for styles in (BUSINESS_TYPES, MOODS, SEASONAL_THEMES):
        style = _find(styles, style_id)
        if style:
            return style
    return None


def get_format_config(format_id: Optional[str]) -> FormatStyle:
    """Format by id, square when not found"""
    return _find(FORMATS, format_id) or FORMATS[0]


def count_selections(selection: SimpleSelection) -> int:
    """Count meaningful selections; 'auto' mood and 'none' seasonal don't count"""
    count = 0
    if selection.business_type:
        count += 1
    if selection.format:
        count += 1
    if selection.mood and selection.mood != "auto":
        count += 1
    if selection.seasonal and selection.seasonal != "none":
        count += 1
    return count


def is_selection_valid(selection: SimpleSelection) -> bool:
    return bool(selection.business_type)


def find_unknown_ids(selection: SimpleSelection) -> List[Tuple[str, str]]:
    """(category, id) pairs that are set but missing from the catalog"""
    unknown = []
    for category, styles in _CATEGORY_STYLES:
        value = getattr(selection, category)
        if value and _find(styles, value) is None:
            unknown.append((category, value))
    return unknown


def get_selection_summary(selection: SimpleSelection) -> str:
    parts = []

    business = _find(BUSINESS_TYPES, selection.business_type)
    if business:
        parts.append(f"{business.emoji} {business.name}")

    fmt = _find(FORMATS, selection.format)
    if fmt:
        parts.append(fmt.aspect_ratio)

    if selection.mood and selection.mood != "auto":
        mood = _find(MOODS, selection.mood)
        if mood:
            parts.append(mood.name)

    if selection.seasonal and selection.seasonal != "none":
        seasonal = _find(SEASONAL_THEMES, selection.seasonal)
        if seasonal:
            parts.append(f"{seasonal.emoji} {seasonal.name}")

    return " • ".join(parts) or "No selections"


def convert_legacy_selection(legacy_ids: Iterable[str]) -> SimpleSelection:
    """Build a selection from old style ids; later ids win within a field"""
    selection = SimpleSelection()
    for legacy_id in legacy_ids:
        mapping = LEGACY_ID_MAPPING.get(legacy_id)
        if mapping:
            field_name, new_id = mapping
            setattr(selection, field_name, new_id)
    return selection


def get_mood_recommendation_from_background(description: str) -> Optional[MoodRecommendation]:
    lower_desc = description.lower()
    for keyword, recommendation in BACKGROUND_MOOD_RECOMMENDATIONS.items():
        if keyword in lower_desc:
            return recommendation
    return None
