import pytest

from foodsnap.models import CameraAngle, EditMode, MaskMode, TechnicalSelection
from foodsnap.services.prompt_elements import (
    ANGLE_OPTIONS,
    APERTURE_OPTIONS,
    COLOR_OPTIONS,
    DEFAULT_APERTURE,
    DEFAULT_LENS,
    FOOD_REALISM_CUES,
    LENS_OPTIONS,
    LIGHTING_OPTIONS,
    REALISM_OPTIONS,
    STYLE_OPTIONS,
    angle_option_for_bucket,
    compose_food_realism_cue,
    compose_technical_prompt,
    find_option,
    get_aperture_for_angle,
    get_food_realism_cue,
    get_lens_for_angle,
)
from foodsnap.services.prompt_generator import (
    build_enhancement_prompt,
    build_expand_prompt,
    build_props_prompt,
    prepare_edit,
)

LABELS = ["- LENS:", "- APERTURE:", "- ANGLE:", "- LIGHTING:", "- COLOR:", "- STYLE:", "- REALISM:"]


def test_facet_table_sizes():
    assert len(LENS_OPTIONS) == 4
    assert len(APERTURE_OPTIONS) == 6
    assert len(ANGLE_OPTIONS) == 3
    assert len(LIGHTING_OPTIONS) == 7
    assert len(COLOR_OPTIONS) == 6
    assert len(STYLE_OPTIONS) == 9
    assert len(REALISM_OPTIONS) == 4
    assert len(FOOD_REALISM_CUES) == 10


def test_default_prompt_uses_defaults_in_fixed_order():
    text = compose_technical_prompt()
    assert text.startswith("TECHNICAL SPECIFICATIONS:")

    positions = [text.index(label) for label in LABELS]
    assert positions == sorted(positions)
    assert "shot with 100mm macro lens" in text
    assert "f/4 aperture" in text
    assert "45-degree camera angle" in text
    assert "soft natural window light" in text
    assert "5000K" in text
    assert "contemporary professional food photography" in text
    assert "subtle fine film grain" in text


def test_compose_is_deterministic():
    selection = TechnicalSelection(lighting=find_option(LIGHTING_OPTIONS, "backlit"))
    assert compose_technical_prompt(selection) == compose_technical_prompt(selection)


@pytest.mark.parametrize("angle_id, focal_length, f_stop", [
    ("angle-90", "50mm", "f/8"),
    ("angle-0", "85mm", "f/2.8"),
    ("angle-45", "100mm macro", "f/4"),
])
def test_lens_and_aperture_follow_angle(angle_id, focal_length, f_stop):
    angle = find_option(ANGLE_OPTIONS, angle_id)
    assert get_lens_for_angle(angle).focal_length == focal_length
    assert get_aperture_for_angle(angle).f_stop == f_stop


def test_missing_angle_gives_defaults():
    assert get_lens_for_angle(None) is DEFAULT_LENS
    assert get_aperture_for_angle(None) is DEFAULT_APERTURE


def test_explicit_angle_overrides_lens_and_aperture():
    selection = TechnicalSelection(
        lens=find_option(LENS_OPTIONS, "lens-35"),
        aperture=find_option(APERTURE_OPTIONS, "f1.8"),
        angle=find_option(ANGLE_OPTIONS, "angle-90"),
    )
    text = compose_technical_prompt(selection)

    assert "shot with 50mm lens" in text
    assert "f/8 aperture" in text
    assert "35mm" not in text
    assert "f/1.8" not in text


def test_lens_and_aperture_kept_without_angle():
    selection = TechnicalSelection(lens=find_option(LENS_OPTIONS, "lens-35"))
    assert "shot with 35mm lens" in compose_technical_prompt(selection)


def test_angle_option_for_bucket():
    assert angle_option_for_bucket(CameraAngle.OVERHEAD).degrees == 90
    assert angle_option_for_bucket(CameraAngle.HERO).degrees == 45
    assert angle_option_for_bucket(CameraAngle.EYE_LEVEL).degrees == 0
    assert angle_option_for_bucket(CameraAngle.UNKNOWN).degrees == 45


def test_food_realism_cues():
    assert get_food_realism_cue("cheese").cue == "pull"
    assert "condensation" in compose_food_realism_cue("cold-beverage")
    assert get_food_realism_cue("Cheese") is None
    assert compose_food_realism_cue("sushi") == ""
    assert compose_food_realism_cue(None) == ""


def test_find_option_unknown_id():
    assert find_option(STYLE_OPTIONS, "baroque") is None


def test_enhancement_prompt_defaults_technical_angle_to_bucket():
    text = build_enhancement_prompt("cafe", CameraAngle.OVERHEAD)

    assert "90-degree overhead flat lay" in text
    assert "shot with 50mm lens" in text
    assert text.index("PHYSICAL REALITY") < text.index("TECHNICAL SPECIFICATIONS:")
    assert text.rstrip().endswith("Create authentic, not artificial, appearance")


def test_enhancement_prompt_respects_explicit_angle_facet():
    selection = TechnicalSelection(angle=find_option(ANGLE_OPTIONS, "angle-0"))
    text = build_enhancement_prompt("cafe", CameraAngle.OVERHEAD, selection)
    assert "straight-on eye-level shot" in text


def test_enhancement_prompt_food_realism_line():
    text = build_enhancement_prompt("hawker", CameraAngle.HERO, food_tag="hot-food")
    assert "FOOD REALISM: subtle rising steam" in text

    assert "FOOD REALISM" not in build_enhancement_prompt("hawker", CameraAngle.HERO, food_tag="sushi")


def test_props_and_expand_prompts():
    assert build_props_prompt("chopsticks").startswith("Add chopsticks to this food photograph.")
    assert build_expand_prompt("a long wooden table").endswith("a long wooden table")


@pytest.mark.parametrize("edit_type, mode, mask", [
    ("add_props", EditMode.INPAINT_INSERTION, MaskMode.BACKGROUND),
    ("expand_canvas", EditMode.OUTPAINT, MaskMode.BACKGROUND),
    ("remove_object", EditMode.INPAINT_REMOVAL, MaskMode.SEMANTIC),
])
def test_prepare_edit_maps_edit_types(edit_type, mode, mask):
    _, options = prepare_edit(edit_type, "red chilies")
    assert options.edit_mode == mode
    assert options.mask_mode == mask


def test_prepare_edit_expand_defaults_to_square():
    _, options = prepare_edit("expand_canvas", "more table")
    assert options.aspect_ratio == "1:1"


def test_prepare_edit_rejects_bad_input():
    with pytest.raises(ValueError):
        prepare_edit("recolor", "blue")
    with pytest.raises(ValueError):
        prepare_edit("add_props", "   ")
