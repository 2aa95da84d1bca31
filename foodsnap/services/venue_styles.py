"""
Angle-aware venue style prompts

Each venue carries one prompt per camera angle. Overhead prompts style the
table top and color only; hero prompts allow a soft bokeh backdrop; eye-level
prompts may show the full venue.

When adding or editing a prompt, check it against the bucket's
forbidden_terms in angle_constraints.ANGLE_CONSTRAINTS.
"""
import logging
from types import MappingProxyType
from typing import Dict, List, Mapping

from foodsnap.models import CameraAngle, PROMPT_ANGLES, VenueStyle
from foodsnap.services.angle_constraints import get_physics_constraints

logger = logging.getLogger(__name__)

GENERIC_VENUE_INSTRUCTION = "Enhance this food photo professionally while preserving the composition."

_VENUES = (
    # ═══════════════════════════════════════════════════════════════════════
    # HAWKER CENTRE
    # ═══════════════════════════════════════════════════════════════════════
    VenueStyle(
        id="hawker",
        name="Hawker Centre",
        description="Singapore/SEA hawker centre vibes",
        prompts={
            CameraAngle.OVERHEAD: """
HAWKER CENTRE - OVERHEAD ENHANCEMENT
Enhance this flat-lay food photo with authentic hawker centre character.

TABLE SURFACE STYLING (what's visible from above):
- Enhance the table to show kopitiam formica/marble texture
- Red melamine plates, metal trays, plastic bowls are authentic
- Tissue paper packets, toothpicks, chili sauce dishes on the table
- Chopsticks, spoons, forks laid flat
- Lime wedges, sambal dishes scattered around
- Newspaper or receipt edges visible on the surface

COLOR GRADING:
- Warm fluorescent lighting cast (slight yellow-green tint)
- Saturated reds, oranges, browns of local food
- Vibrant, appetizing colors
- High contrast for punchy look

Style through TABLE ELEMENTS and COLOR only.
""",
            CameraAngle.HERO: """
HAWKER CENTRE - HERO ANGLE ENHANCEMENT
Enhance this 45-degree food photo with hawker centre atmosphere.

SURFACE & PROPS:
- Authentic hawker serving dishes (red plates, metal, plastic)
- Kopitiam table texture visible
- Tissue, condiments, lime wedges

BACKGROUND TREATMENT:
- Soft warm blur suggesting a busy hawker centre
- Hints of fluorescent lighting in bokeh
- Warm ambient glow behind
- Keep everything behind the food SOFT and out of focus

COLOR GRADING:
- Mixed fluorescent and ambient warmth
- Vibrant, saturated local food colors
- High energy, bustling mood carried by color
""",
            CameraAngle.EYE_LEVEL: """
HAWKER CENTRE - EYE LEVEL ENHANCEMENT
Enhance this eye-level food photo with full hawker centre atmosphere.

BACKGROUND SCENE:
- Hawker stall visible in soft focus behind
- Neon menu boards, price signs (softly blurred)
- Hint of cooking action - wok hei flames, steam
- Fluorescent lighting creating authentic atmosphere
- Bustling crowd hints in far background

FOREGROUND:
- Authentic hawker serving dishes
- Red plastic, metal trays, traditional ware

COLOR & MOOD:
- Vibrant hawker centre energy
- Mix of warm and cool fluorescent tones
- Authentic, appetizing, local food feeling
""",
        },
    ),

    # ═══════════════════════════════════════════════════════════════════════
    # FINE DINING
    # ═══════════════════════════════════════════════════════════════════════
    VenueStyle(
        id="fine-dining",
        name="Fine Dining",
        description="Michelin-star elegant presentation",
        prompts={
            CameraAngle.OVERHEAD: """
FINE DINING - OVERHEAD ENHANCEMENT
Enhance this flat-lay with elegant fine dining sophistication.

TABLE SURFACE STYLING:
- White linen tablecloth texture with subtle shadows
- Elegant white/neutral ceramic plates
- Minimal, purposeful garnish
- Single flower stem or herb sprig laid flat
- Elegant cutlery at precise angles

PLATING ENHANCEMENT:
- Clean the plate edges (no drips or smears)
- Enhance sauce presentation (swoosh, dots)
- Sharpen microgreen and garnish details
- Add subtle height shadows for dimension

COLOR GRADING:
- Cool, sophisticated white balance
- Subtle contrast enhancement
- Magazine editorial quality
- Generous negative space on the linen

Fine dining overhead is ALL about the plate.
""",
            CameraAngle.HERO: """
FINE DINING - HERO ANGLE ENHANCEMENT
Enhance this 45-degree shot with fine dining elegance.

SURFACE & PROPS:
- White linen, elegant ceramics
- Minimal, purposeful props
- Wine glass edge in soft focus (if appropriate)

BACKGROUND:
- DARK, moody, sophisticated blur
- Restaurant ambiance through soft light hints
- Candle glow bokeh effect
- Intimate, exclusive atmosphere

LIGHTING:
- Soft directional light creating depth
- Gentle shadows for dimension
- Highlight on food surface

QUALITY:
- Magazine/editorial grade finish
- Every detail refined and purposeful
""",
            CameraAngle.EYE_LEVEL: """
FINE DINING - EYE LEVEL ENHANCEMENT
Enhance with full fine dining restaurant atmosphere.

BACKGROUND:
- Dark, intimate restaurant setting with restaurant ambiance behind the dish
- Soft candlelight or warm spotlights in blur
- Hint of wine glasses, elegant decor
- Exclusive, sophisticated dining room

FOREGROUND:
- Elegant plating, clean edges
- Height and texture showcased
- Professional food styling

MOOD:
- Intimate, luxurious, special occasion
- Dark moody with warm highlights
- Michelin-star quality presentation
""",
        },
    ),

    # ═══════════════════════════════════════════════════════════════════════
    # CAFE
    # ═══════════════════════════════════════════════════════════════════════
    VenueStyle(
        id="cafe",
        name="Cafe & Coffee",
        description="Cozy cafe aesthetic",
        prompts={
            CameraAngle.OVERHEAD: """
CAFE - OVERHEAD FLAT LAY ENHANCEMENT
Enhance this flat-lay with Instagram cafe aesthetic.

TABLE SURFACE STYLING:
- Marble or light wood table texture
- Lifestyle props laid flat: magazine edge, phone, sunglasses
- Latte art visible from above (if coffee in shot)
- Small flower vase seen from above
- Pretty napkin, aesthetic cutlery

COMPOSITION:
- Rule of thirds arrangement
- Intentional asymmetry
- Multiple items balanced

COLOR GRADING:
- Warm, golden tones
- Soft, slightly overexposed whites
- Dreamy, lifestyle blog aesthetic
- Cozy, inviting color palette

Cafe overhead is about SURFACE LIFESTYLE.
""",
            CameraAngle.HERO: """
CAFE - HERO ANGLE ENHANCEMENT
Enhance with cozy cafe atmosphere.

SURFACE:
- Marble/wood table visible
- Lifestyle props suggesting a cafe moment
- Latte art showcased (if present)

BACKGROUND:
- Soft industrial blur (exposed brick hints)
- Window light glow
- Plant bokeh
- Warm, welcoming atmosphere

COLOR:
- Golden hour warmth
- Soft contrast
- Instagram-ready aesthetic
- Inviting, cozy mood
""",
            CameraAngle.EYE_LEVEL: """
CAFE - EYE LEVEL ENHANCEMENT
Enhance with full cafe environment.

BACKGROUND:
- Industrial elements: exposed brick, pipes (soft focus)
- Large windows with natural light
- Indoor plants and greenery
- Cafe ambiance with other tables softly visible

FOREGROUND:
- Pretty plating and presentation
- Steam rising from coffee
- Lifestyle quality

MOOD:
- Warm, welcoming, third-place comfort
- Natural light feeling
- Instagram-worthy cafe moment
""",
        },
    ),

    # ═══════════════════════════════════════════════════════════════════════
    # STREET FOOD
    # ═══════════════════════════════════════════════════════════════════════
    VenueStyle(
        id="street-food",
        name="Street Food",
        description="Night market vibes",
        prompts={
            CameraAngle.OVERHEAD: """
STREET FOOD - OVERHEAD ENHANCEMENT
Enhance with authentic street food styling.

SURFACE ELEMENTS:
- Plastic bag, paper wrapper, newspaper under food
- Street vendor tray or metal plate
- Lime wedges, chili flakes scattered
- Plastic utensils, wooden skewers

COLOR GRADING:
- Mix of artificial and natural light colors
- Warm, slightly harsh street lighting feel
- High saturation for appetite appeal
- Authentic, unpolished aesthetic

TEXTURE:
- Show the messy, delicious reality
- Oil sheen, char marks, steam condensation
- Real street food authenticity

Overhead street food is about the FOOD ITSELF on its surface.
""",
            CameraAngle.HERO: """
STREET FOOD - HERO ANGLE ENHANCEMENT
Enhance with night market atmosphere.

SURFACE:
- Authentic street vendor serving ware
- Paper, plastic, newspaper elements
- Messy, delicious presentation

BACKGROUND:
- Soft neon glow in blur
- Night market color hints, kept out of focus
- Urban atmosphere through color cast

COLOR:
- Mixed neon lighting effect
- Warm food colors popping
- Night market energy
- Documentary authenticity
""",
            CameraAngle.EYE_LEVEL: """
STREET FOOD - EYE LEVEL ENHANCEMENT
Enhance with full street food environment.

BACKGROUND:
- Street vendor stall visible
- Neon signs, string lights (soft blur)
- Night market atmosphere
- Other customers, bustle (distant blur)
- Steam and smoke atmosphere

FOREGROUND:
- Authentic presentation
- Action/moment feeling
- Real street food character

MOOD:
- Late night food adventure
- Urban, energetic, authentic
- Documentary photography style
""",
        },
    ),

    # ═══════════════════════════════════════════════════════════════════════
    # FAST FOOD
    # ═══════════════════════════════════════════════════════════════════════
    VenueStyle(
        id="fast-food",
        name="Fast Food",
        description="Bold, craveable presentation",
        prompts={
            CameraAngle.OVERHEAD: """
FAST FOOD - OVERHEAD ENHANCEMENT
Enhance with bold fast food appeal.

TABLE SURFACE STYLING:
- Paper wrapper, branded tray (if present)
- Fries scattered around
- Sauce packets, condiments
- Napkins with brand colors

FOOD ENHANCEMENT:
- Cheese melt enhanced
- Sauce drips looking delicious
- Crispy textures sharpened
- Steam/heat shimmer

COLOR:
- Bold reds and yellows (appetite colors)
- High saturation and contrast
- Punchy, craveable look
- Fast food advertising quality

Fast food overhead is about CRAVE-ABILITY on the tray.
""",
            CameraAngle.HERO: """
FAST FOOD - HERO ANGLE ENHANCEMENT
Enhance with fast food energy.

FOOD:
- Cheese melting, sauce dripping
- Stack height impressive
- Crispy, juicy texture visible

BACKGROUND:
- Soft red/yellow color hints
- Fast food restaurant ambiance (very soft)
- Clean, branded feeling

COLOR:
- Bold, high contrast
- Appetite-triggering palette
- Commercial quality finish
""",
            CameraAngle.EYE_LEVEL: """
FAST FOOD - EYE LEVEL ENHANCEMENT
Enhance with restaurant context.

BACKGROUND:
- Restaurant booth (soft focus)
- Brand colors in environment
- Clean, modern fast food setting

FOOD:
- Hero presentation
- Height and layers visible
- Cheese pull, steam, freshness

MOOD:
- Grab-and-go energy
- Craveable, satisfying
- Commercial advertising quality
""",
        },
    ),

    # ═══════════════════════════════════════════════════════════════════════
    # KOPITIAM
    # ═══════════════════════════════════════════════════════════════════════
    VenueStyle(
        id="kopitiam",
        name="Kopitiam",
        description="Traditional coffee shop heritage",
        prompts={
            CameraAngle.OVERHEAD: """
KOPITIAM - OVERHEAD ENHANCEMENT
Enhance with nostalgic kopitiam aesthetic.

TABLE SURFACE STYLING:
- Marble or formica kopitiam table texture
- Traditional kopitiam plates and cups
- Folded newspaper, kopi receipt
- Old-school sugar glass, condensed milk can
- Vintage kopitiam cutlery

COLOR GRADING:
- Warm, slightly desaturated nostalgic tones
- Morning light amber warmth
- Film photography feeling
- Heritage, comfort food mood

TEXTURE:
- Worn table texture visible
- Authentic traditional items
- Nostalgic, well-loved feel

Kopitiam overhead is about TABLE HERITAGE.
""",
            CameraAngle.HERO: """
KOPITIAM - HERO ANGLE ENHANCEMENT
Enhance with traditional kopitiam atmosphere.

SURFACE:
- Marble/formica table
- Traditional serving ware
- Authentic props

BACKGROUND:
- Warm morning light glow
- Soft hint of traditional setting
- Nostalgic amber tones

COLOR:
- Vintage, desaturated warmth
- Film photography aesthetic
- Heritage comfort feeling
""",
            CameraAngle.EYE_LEVEL: """
KOPITIAM - EYE LEVEL ENHANCEMENT
Enhance with full kopitiam environment.

BACKGROUND:
- Traditional kopitiam interior (soft focus)
- Tile walls, wooden furniture hints
- Morning light streaming in
- Other patrons (very soft blur)

MOOD:
- Nostalgic heritage atmosphere
- Traditional breakfast culture
- Comfort and familiarity
- Warm, amber morning light
""",
        },
    ),

    # ═══════════════════════════════════════════════════════════════════════
    # CASUAL DINING
    # ═══════════════════════════════════════════════════════════════════════
    VenueStyle(
        id="casual-dining",
        name="Casual Dining",
        description="Warm, inviting atmosphere",
        prompts={
            CameraAngle.OVERHEAD: """
CASUAL DINING - OVERHEAD ENHANCEMENT
Enhance with warm, inviting casual dining feel.

TABLE SURFACE STYLING:
- Wooden table or rustic surface texture
- Casual, approachable plating
- Sharing-style presentation
- Simple cutlery, cloth napkins

COLOR:
- Warm, amber restaurant lighting
- Inviting, comfortable tones
- Natural, unpretentious colors
- Homestyle warmth

PRESENTATION:
- Generous portions visible
- Family-style approachability
- Comfort food aesthetic
""",
            CameraAngle.HERO: """
CASUAL DINING - HERO ANGLE ENHANCEMENT
Enhance with casual restaurant warmth.

SURFACE:
- Warm wooden table
- Casual, comfortable plating
- Approachable presentation

BACKGROUND:
- Soft warm restaurant glow
- Hint of casual dining atmosphere
- Comfortable, inviting blur

COLOR:
- Amber warmth throughout
- Comfort and approachability
- Relaxed dining mood
""",
            CameraAngle.EYE_LEVEL: """
CASUAL DINING - EYE LEVEL ENHANCEMENT
Enhance with full casual dining atmosphere.

BACKGROUND:
- Restaurant interior (soft focus)
- Warm lighting fixtures
- Other tables, comfortable setting
- Relaxed dining atmosphere

FOOD:
- Generous, shareable portions
- Approachable presentation
- Comfort food appeal

MOOD:
- Warm, welcoming, relaxed
- Family-friendly atmosphere
- Value and satisfaction visible
""",
        },
    ),

    # ═══════════════════════════════════════════════════════════════════════
    # DESSERT & SWEETS
    # ═══════════════════════════════════════════════════════════════════════
    VenueStyle(
        id="dessert",
        name="Dessert & Sweets",
        description="Sweet, colorful, Instagram-worthy treats",
        prompts={
            CameraAngle.OVERHEAD: """
DESSERT & SWEETS - OVERHEAD FLAT LAY ENHANCEMENT
Enhance this flat-lay dessert photo with Instagram-worthy styling.

TABLE SURFACE STYLING:
- Pretty pastel plates or vintage ceramics
- Marble or light wood surface
- Sprinkles, crumbs, sauce drizzles on the surface
- Pretty napkins, small flowers laid flat
- Decorative props (macarons, berries) scattered

COLOR:
- Soft pastel palette (pink, mint, cream, lavender)
- Bright, candy-like colors for vibrant desserts
- Light, airy, dreamy color grading
- Instagram-aesthetic warmth

PRESENTATION:
- Dessert as hero, beautifully styled
- Texture detail enhanced (frosting swirls, chocolate drips)
- Fresh, appetizing, irresistible look

Dessert flat-lay is about SURFACE BEAUTY.
""",
            CameraAngle.HERO: """
DESSERT & SWEETS - HERO ANGLE ENHANCEMENT
Enhance with dreamy, sweet aesthetic.

SURFACE:
- Pretty plate or cake stand
- Elegant surface styling
- Sauce drips, toppings visible

BACKGROUND:
- Soft, dreamy pastel blur
- Bokeh light hints
- Romantic, sweet atmosphere

COLOR:
- Pastel and candy colors
- Soft, feminine aesthetic
- Instagram-worthy polish
- Bright, appetizing tones
""",
            CameraAngle.EYE_LEVEL: """
DESSERT & SWEETS - EYE LEVEL ENHANCEMENT
Enhance with patisserie/bakery atmosphere.

BACKGROUND:
- Soft bakery/patisserie setting
- Display case hints (soft blur)
- Warm, inviting pastry shop feel
- Pretty lighting fixtures

FOOD:
- Height and layers showcased
- Chocolate drips, cream swirls detailed
- Fresh toppings enhanced
- Irresistible sweetness

MOOD:
- Sweet, indulgent, treat-yourself
- Instagram-worthy prettiness
- Bright, cheerful, appetizing
""",
        },
    ),
)

VENUE_STYLES: Mapping[str, VenueStyle] = MappingProxyType({v.id: v for v in _VENUES})


def compose_venue_instruction(venue_id: str, angle: CameraAngle) -> str:
    """
    Physics constraints followed by the venue's angle-specific prompt.

    Unknown venues get a generic instruction; unknown angles use the hero prompt.
    """
    venue = VENUE_STYLES.get(venue_id)
    if venue is None:
        logger.info(f"No venue style for '{venue_id}', using generic instruction")
        return GENERIC_VENUE_INSTRUCTION

    return f"{get_physics_constraints(angle)}\n{venue.prompt_for(angle)}"


def has_venue_style(venue_id: str) -> bool:
    return venue_id in VENUE_STYLES


def get_venue_ids() -> List[str]:
    return list(VENUE_STYLES.keys())


def get_all_angle_prompts(venue_id: str) -> str:
    """
    All three angle prompts for a venue, labelled.

    Used when the generation model detects the angle itself in the same call.
    """
    venue = VENUE_STYLES.get(venue_id)
    if venue is None:
        return GENERIC_VENUE_INSTRUCTION

    labels: Dict[CameraAngle, str] = {
        CameraAngle.OVERHEAD: "IF OVERHEAD (90°)",
        CameraAngle.HERO: "IF HERO ANGLE (45°)",
        CameraAngle.EYE_LEVEL: "IF EYE LEVEL (0-30°)",
    }
    sections = [f"=== {labels[a]} ===\n{venue.prompts[a].strip()}" for a in PROMPT_ANGLES]
    return f"VENUE STYLE: {venue.name}\n\n" + "\n\n".join(sections)
