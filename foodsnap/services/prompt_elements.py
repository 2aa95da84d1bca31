"""
Professional food photography prompt elements

Seven technical facets (lens, aperture, angle, lighting, color, style,
realism) plus food-specific realism cues. Lens and aperture follow the
camera angle: overhead needs deep focus, eye level wants shallow focus.
"""
from typing import Optional, Sequence, TypeVar

from foodsnap.models import (
    AngleOption,
    ApertureOption,
    CameraAngle,
    ColorOption,
    FoodRealismCue,
    LensOption,
    LightingOption,
    RealismOption,
    StyleOption,
    TechnicalSelection,
)

T = TypeVar("T")

# ═══════════════════════════════════════════════════════════════════════════════
# LENS
# ═══════════════════════════════════════════════════════════════════════════════

LENS_OPTIONS = (
    LensOption(
        id="lens-35",
        focal_length="35mm",
        prompt_text="shot with 35mm lens",
        best_for=("flat lays", "environmental shots", "table scenes"),
        characteristics="Wide perspective, shows context, minimal distortion",
    ),
    LensOption(
        id="lens-50",
        focal_length="50mm",
        prompt_text="shot with 50mm lens",
        best_for=("overhead shots", "general use", "natural perspective"),
        characteristics="Natural human eye perspective, versatile all-rounder",
    ),
    LensOption(
        id="lens-85",
        focal_length="85mm",
        prompt_text="shot with 85mm lens",
        best_for=("hero shots", "45-degree angles", "stacked items"),
        characteristics="Beautiful compression, intimate feel, flattering for tall subjects",
    ),
    LensOption(
        id="lens-100-macro",
        focal_length="100mm macro",
        prompt_text="shot with 100mm macro lens",
        best_for=("hero images", "detail shots", "texture close-ups"),
        characteristics="Industry standard for food, creamy backgrounds, intimate detail",
    ),
)

DEFAULT_LENS = LENS_OPTIONS[3]  # 100mm macro

# ═══════════════════════════════════════════════════════════════════════════════
# APERTURE / DEPTH OF FIELD
# ═══════════════════════════════════════════════════════════════════════════════

APERTURE_OPTIONS = (
    ApertureOption(
        id="f1.8",
        f_stop="f/1.8",
        prompt_text="f/1.8 aperture, extremely shallow depth of field, dreamy bokeh, creamy background blur",
        dof_description="Very shallow - dramatic blur",
        best_for=("artistic shots", "single items", "drinks with bokeh"),
    ),
    ApertureOption(
        id="f2.8",
        f_stop="f/2.8",
        prompt_text="f/2.8 aperture, shallow depth of field, soft background blur with subject separation",
        dof_description="Shallow - balanced",
        best_for=("hero shots", "desserts", "eye-level items"),
    ),
    ApertureOption(
        id="f4",
        f_stop="f/4",
        prompt_text="f/4 aperture, shallow depth of field, sharp focus on main subject with soft background blur",
        dof_description="Sweet spot - subject sharp, background soft",
        best_for=("most food photography", "plated dishes", "general use"),
    ),
    ApertureOption(
        id="f5.6",
        f_stop="f/5.6",
        prompt_text="f/5.6 aperture, moderate depth of field, most of dish in sharp focus",
        dof_description="Moderate - mostly sharp",
        best_for=("individual dishes", "multiple items", "group shots"),
    ),
    ApertureOption(
        id="f8",
        f_stop="f/8",
        prompt_text="f/8 aperture, deep depth of field, everything in sharp focus",
        dof_description="Deep - all sharp",
        best_for=("flat lays", "overhead shots", "ingredient spreads"),
    ),
    ApertureOption(
        id="f11",
        f_stop="f/11",
        prompt_text="f/11 aperture, maximum sharpness throughout, all details crisp",
        dof_description="Very deep - maximum detail",
        best_for=("commercial shots", "packaging", "catalog photography"),
    ),
)

DEFAULT_APERTURE = APERTURE_OPTIONS[2]  # f/4

# ═══════════════════════════════════════════════════════════════════════════════
# CAMERA ANGLE
# ═══════════════════════════════════════════════════════════════════════════════

ANGLE_OPTIONS = (
    AngleOption(
        id="angle-0",
        degrees=0,
        name="Eye Level",
        prompt_text="straight-on eye-level shot, emphasizing height and layers, front-facing hero angle",
        best_for=("burgers", "layer cakes", "tall drinks", "sandwiches", "parfaits"),
    ),
    AngleOption(
        id="angle-45",
        degrees=45,
        name="Three-Quarter",
        prompt_text="45-degree camera angle, three-quarter view showing both top and side of the dish, depth and dimension",
        best_for=("bowls", "plated dishes", "pasta", "curries", "most foods"),
    ),
    AngleOption(
        id="angle-90",
        degrees=90,
        name="Overhead",
        prompt_text="90-degree overhead flat lay, perfect bird's eye view, top-down perspective",
        best_for=("pizza", "flat lay", "cookies", "table scenes", "ingredient spreads"),
    ),
)

DEFAULT_ANGLE = ANGLE_OPTIONS[1]  # 45-degree

# ═══════════════════════════════════════════════════════════════════════════════
# LIGHTING
# ═══════════════════════════════════════════════════════════════════════════════

LIGHTING_OPTIONS = (
    LightingOption(
        id="natural-window",
        name="Natural Window",
        prompt_text="soft natural window light from the side, diffused daylight, gentle shadows with bright highlights",
        characteristics="Soft, authentic, inviting",
        best_for=("most food", "lifestyle shots", "authentic feel"),
    ),
    LightingOption(
        id="studio-softbox",
        name="Studio Softbox",
        prompt_text="professional studio lighting, large softbox from 45 degrees, soft diffused even illumination",
        characteristics="Even, professional, controlled",
        best_for=("commercial shots", "product photography", "consistent style"),
    ),
    LightingOption(
        id="backlit",
        name="Backlit",
        prompt_text="backlit with rim lighting, glowing luminous edges, soft fill from front, ethereal atmosphere",
        characteristics="Glowing, luminous, dreamy",
        best_for=("drinks", "soups", "translucent items", "steam shots"),
    ),
    LightingOption(
        id="dramatic",
        name="Dramatic",
        prompt_text="single directional side light, deep dramatic shadows, chiaroscuro lighting, moody atmosphere",
        characteristics="High contrast, dramatic, editorial",
        best_for=("fine dining", "dark moody", "premium items"),
    ),
    LightingOption(
        id="golden-hour",
        name="Golden Hour",
        prompt_text="warm golden hour sunlight, long soft shadows, rich amber glow, sunset warmth",
        characteristics="Warm, romantic, nostalgic",
        best_for=("comfort food", "outdoor dining", "warm atmosphere"),
    ),
    LightingOption(
        id="bright-even",
        name="Bright & Even",
        prompt_text="bright even studio lighting, minimal shadows, high-key clean illumination",
        characteristics="Clean, bright, commercial",
        best_for=("fast food", "delivery apps", "clean aesthetic"),
    ),
    LightingOption(
        id="overhead-soft",
        name="Overhead Soft",
        prompt_text="soft overhead diffused lighting, minimal shadows, even top-down illumination",
        characteristics="Flat, even, uniform",
        best_for=("flat lays", "overhead shots", "ingredient spreads"),
    ),
)

DEFAULT_LIGHTING = LIGHTING_OPTIONS[0]  # Natural Window

# ═══════════════════════════════════════════════════════════════════════════════
# COLOR
# ═══════════════════════════════════════════════════════════════════════════════

COLOR_OPTIONS = (
    ColorOption(
        id="warm-comfort",
        name="Warm Comfort",
        kelvin="4000-4500K",
        prompt_text="warm inviting color temperature at 4500K, cozy amber tones, appetizing warmth",
        mood="Cozy, inviting, homestyle",
        best_for=("comfort food", "hot dishes", "BBQ", "hawker food"),
    ),
    ColorOption(
        id="balanced-warm",
        name="Balanced Warm",
        kelvin="5000K",
        prompt_text="natural color balance at 5000K, slightly warm tones, vibrant but natural saturation",
        mood="Natural, appetizing, balanced",
        best_for=("most foods", "restaurant", "general use"),
    ),
    ColorOption(
        id="neutral-fresh",
        name="Neutral Fresh",
        kelvin="5200-5500K",
        prompt_text="cool fresh tones at 5500K, crisp clean colors, bright and refreshing",
        mood="Fresh, clean, bright",
        best_for=("salads", "cold dishes", "summer items", "desserts"),
    ),
    ColorOption(
        id="editorial-precise",
        name="Editorial Precise",
        kelvin="5200K",
        prompt_text="precise color accuracy at 5200K, true-to-life colors, balanced neutral white point",
        mood="Accurate, professional, neutral",
        best_for=("editorial", "magazine", "precise reproduction"),
    ),
    ColorOption(
        id="moody-rich",
        name="Moody Rich",
        kelvin="4800K",
        prompt_text="rich deep tones at 4800K, warm shadows with cool highlights, dramatic color depth",
        mood="Sophisticated, dramatic, premium",
        best_for=("fine dining", "dark moody", "premium items"),
    ),
    ColorOption(
        id="pastel-soft",
        name="Pastel Soft",
        kelvin="5200K",
        prompt_text="soft pastel tones at 5200K, muted candy colors, gentle understated palette",
        mood="Sweet, gentle, Instagram aesthetic",
        best_for=("desserts", "cafe", "feminine aesthetic"),
    ),
)

DEFAULT_COLOR = COLOR_OPTIONS[1]  # Balanced Warm

# ═══════════════════════════════════════════════════════════════════════════════
# STYLE
# ═══════════════════════════════════════════════════════════════════════════════

STYLE_OPTIONS = (
    StyleOption(
        id="contemporary",
        name="Contemporary",
        prompt_text="contemporary professional food photography, clean modern aesthetic, polished finish",
        characteristics="Modern, clean, timeless",
        best_for=("most uses", "versatile", "professional"),
    ),
    StyleOption(
        id="editorial",
        name="Editorial Magazine",
        prompt_text="high-end editorial food photography, magazine-worthy finish, sophisticated styling",
        characteristics="Refined, prestigious, publication-ready",
        best_for=("fine dining", "magazines", "premium content"),
    ),
    StyleOption(
        id="rustic",
        name="Rustic Organic",
        prompt_text="rustic organic style, natural textures, earthy artisanal handcrafted feel",
        characteristics="Natural, authentic, artisanal",
        best_for=("farm-to-table", "organic food", "homestyle"),
    ),
    StyleOption(
        id="lifestyle",
        name="Lifestyle Instagram",
        prompt_text="lifestyle Instagram aesthetic, cozy inviting atmosphere, aspirational yet relatable",
        characteristics="Aspirational, relatable, shareable",
        best_for=("cafe", "brunch", "social media"),
    ),
    StyleOption(
        id="dark-moody",
        name="Dark Moody",
        prompt_text="dark moody food photography, deep shadows, dramatic contrast, rich atmospheric depth",
        characteristics="Dramatic, sophisticated, premium",
        best_for=("fine dining", "evening meals", "premium"),
    ),
    StyleOption(
        id="bright-airy",
        name="Bright Airy",
        prompt_text="bright airy style, high-key soft lighting, fresh light aesthetic, dreamy atmosphere",
        characteristics="Light, fresh, cheerful",
        best_for=("breakfast", "desserts", "healthy food"),
    ),
    StyleOption(
        id="documentary",
        name="Documentary Authentic",
        prompt_text="authentic documentary style, raw genuine aesthetic, unpolished reality",
        characteristics="Real, authentic, storytelling",
        best_for=("street food", "hawker", "travel content"),
    ),
    StyleOption(
        id="commercial",
        name="Commercial Bold",
        prompt_text="commercial advertising photography, bold high-energy aesthetic, appetite-triggering",
        characteristics="Bold, punchy, sells",
        best_for=("fast food", "advertising", "menus"),
    ),
    StyleOption(
        id="vintage-film",
        name="Vintage Film",
        prompt_text="shot on Kodak Portra 400, analog film aesthetic, natural film color science, organic grain",
        characteristics="Nostalgic, warm, analog",
        best_for=("retro brands", "nostalgic content", "indie cafes"),
        era="1990s-2000s",
    ),
)

DEFAULT_STYLE = STYLE_OPTIONS[0]  # Contemporary

# ═══════════════════════════════════════════════════════════════════════════════
# REALISM (imperfections)
# ═══════════════════════════════════════════════════════════════════════════════

REALISM_OPTIONS = (
    RealismOption(
        id="minimal",
        name="Minimal",
        level="minimal",
        prompt_text="hint of fine film grain, minimal optical vignette, nearly perfect capture",
        characteristics="Clean, polished, commercial",
    ),
    RealismOption(
        id="subtle",
        name="Subtle",
        level="subtle",
        prompt_text="subtle fine film grain, natural optical vignette, authentic photographic texture",
        characteristics="Professional with character",
    ),
    RealismOption(
        id="natural",
        name="Natural",
        level="natural",
        prompt_text="visible film grain, soft vignette, natural lens character, authentic analog photography feel",
        characteristics="Organic, authentic, real",
    ),
    RealismOption(
        id="vintage",
        name="Vintage",
        level="vintage",
        prompt_text="prominent film grain, light leak on corner, chromatic aberration, analog film warmth",
        characteristics="Nostalgic, analog, retro",
    ),
)

DEFAULT_REALISM = REALISM_OPTIONS[1]  # Subtle

# ═══════════════════════════════════════════════════════════════════════════════
# FOOD-SPECIFIC REALISM CUES
# ═══════════════════════════════════════════════════════════════════════════════

FOOD_REALISM_CUES = (
    FoodRealismCue(
        food_type="cold-beverage",
        cue="condensation",
        prompt_addition="realistic condensation droplets on glass surface, cold moisture texture",
    ),
    FoodRealismCue(
        food_type="iced-drink",
        cue="frost",
        prompt_addition="frost crystals on glass, cold moisture texture, icy freshness",
    ),
    FoodRealismCue(
        food_type="hot-food",
        cue="steam",
        prompt_addition="subtle rising steam, wisps of vapor, visible heat indication",
    ),
    FoodRealismCue(
        food_type="hot-drink",
        cue="steam",
        prompt_addition="gentle steam rising from cup, warmth visible, cozy atmosphere",
    ),
    FoodRealismCue(
        food_type="baked-goods",
        cue="crumbs",
        prompt_addition="authentic crumb scatter, natural imperfection, fresh-baked texture",
    ),
    FoodRealismCue(
        food_type="saucy-dish",
        cue="drips",
        prompt_addition="natural sauce drip on plate edge, appetizing imperfection",
    ),
    FoodRealismCue(
        food_type="chocolate",
        cue="melt",
        prompt_addition="slight chocolate melt, tempting glossy texture, indulgent appearance",
    ),
    FoodRealismCue(
        food_type="ice-cream",
        cue="melt",
        prompt_addition="beginning to melt drip, fresh-served moment, tempting texture",
    ),
    FoodRealismCue(
        food_type="cheese",
        cue="pull",
        prompt_addition="cheese pull stretch, melted gooey texture, irresistible melt",
    ),
    FoodRealismCue(
        food_type="grilled",
        cue="char",
        prompt_addition="authentic grill marks, slight char, smoky essence, flame-kissed",
    ),
)

_BUCKET_TO_ANGLE_ID = {
    CameraAngle.OVERHEAD: "angle-90",
    CameraAngle.HERO: "angle-45",
    CameraAngle.EYE_LEVEL: "angle-0",
}

# ═══════════════════════════════════════════════════════════════════════════════
# HELPERS
# ═══════════════════════════════════════════════════════════════════════════════


def find_option(options: Sequence[T], option_id: str) -> Optional[T]:
    """Look up a facet option by id"""
    for option in options:
        if getattr(option, "id", None) == option_id:
            return option
    return None


def angle_option_for_bucket(angle: CameraAngle) -> AngleOption:
    """Angle facet matching a classifier bucket (unknown -> 45°)"""
    option_id = _BUCKET_TO_ANGLE_ID.get(angle, DEFAULT_ANGLE.id)
    return find_option(ANGLE_OPTIONS, option_id) or DEFAULT_ANGLE


def _find_lens(focal_length: str) -> LensOption:
    for lens in LENS_OPTIONS:
        if lens.focal_length == focal_length:
            return lens
    return DEFAULT_LENS


def _find_aperture(f_stop: str) -> ApertureOption:
    for aperture in APERTURE_OPTIONS:
        if aperture.f_stop == f_stop:
            return aperture
    return DEFAULT_APERTURE


def get_lens_for_angle(angle: Optional[AngleOption]) -> LensOption:
    """Appropriate lens for an angle facet"""
    if angle is None:
        return DEFAULT_LENS

    if angle.degrees == 90:
        return _find_lens("50mm")
    if angle.degrees == 0:
        return _find_lens("85mm")
    return _find_lens("100mm macro")


def get_aperture_for_angle(angle: Optional[AngleOption]) -> ApertureOption:
    """Appropriate aperture for an angle facet"""
    if angle is None:
        return DEFAULT_APERTURE

    # Overhead needs deep focus, eye level shallow focus for drama
    if angle.degrees == 90:
        return _find_aperture("f/8")
    if angle.degrees == 0:
        return _find_aperture("f/2.8")
    return _find_aperture("f/4")


def compose_technical_prompt(selection: Optional[TechnicalSelection] = None) -> str:
    """
    Build the technical specification block.

    Unset facets take their defaults. An explicit angle overrides the lens
    and aperture with the angle-appropriate values.

    Args:
        selection: Partial facet selection

    Returns:
        Labelled block in fixed order LENS, APERTURE, ANGLE, LIGHTING,
        COLOR, STYLE, REALISM
    """
    selection = selection or TechnicalSelection()

    if selection.angle is not None:
        lens = get_lens_for_angle(selection.angle)
        aperture = get_aperture_for_angle(selection.angle)
        angle = selection.angle
    else:
        lens = selection.lens or DEFAULT_LENS
        aperture = selection.aperture or DEFAULT_APERTURE
        angle = DEFAULT_ANGLE

    lighting = selection.lighting or DEFAULT_LIGHTING
    color = selection.color or DEFAULT_COLOR
    style = selection.style or DEFAULT_STYLE
    realism = selection.realism or DEFAULT_REALISM

    return (
        "TECHNICAL SPECIFICATIONS:\n"
        f"- LENS: {lens.prompt_text}\n"
        f"- APERTURE: {aperture.prompt_text}\n"
        f"- ANGLE: {angle.prompt_text}\n"
        f"- LIGHTING: {lighting.prompt_text}\n"
        f"- COLOR: {color.prompt_text}\n"
        f"- STYLE: {style.prompt_text}\n"
        f"- REALISM: {realism.prompt_text}\n"
    )


def get_food_realism_cue(food_tag: Optional[str]) -> Optional[FoodRealismCue]:
    if not food_tag:
        return None
    for cue in FOOD_REALISM_CUES:
        if cue.food_type == food_tag:
            return cue
    return None


def compose_food_realism_cue(food_tag: Optional[str]) -> str:
    """Prompt addition for a food tag, or empty string for unknown tags"""
    cue = get_food_realism_cue(food_tag)
    return cue.prompt_addition if cue else ""
