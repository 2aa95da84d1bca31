import pytest

from foodsnap.models import SelectionStatus, SimpleSelection, WarningType
from foodsnap.services.simple_styles import (
    BUSINESS_TYPES,
    MOODS,
    SEASONAL_THEMES,
    convert_legacy_selection,
    count_selections,
    find_unknown_ids,
    get_format_config,
    get_mood_recommendation_from_background,
    get_selection_summary,
    get_simple_style_by_id,
    is_selection_valid,
)
from foodsnap.services.style_validator import (
    can_select_style,
    get_recommended_styles,
    get_selection_status,
    get_smart_suggestions,
    get_status_message,
    validate_multi_select,
    validate_selection,
)


def test_not_recommended_mood_warns_with_first_recommended_mood():
    warnings = validate_selection(SimpleSelection(business_type="cafe", mood="elegant"))

    assert len(warnings) == 1
    warning = warnings[0]
    assert warning.type == WarningType.WARNING
    assert (warning.category1, warning.value1) == ("business_type", "cafe")
    assert (warning.category2, warning.value2) == ("mood", "elegant")
    assert '"bright"' in warning.suggestion


def test_unusual_seasonal_theme_is_a_suggestion():
    warnings = validate_selection(SimpleSelection(business_type="hawker", seasonal="christmas"))

    assert [w.type for w in warnings] == [WarningType.SUGGESTION]
    assert warnings[0].value2 == "christmas"


def test_both_checks_are_independent():
    warnings = validate_selection(
        SimpleSelection(business_type="fastfood", mood="natural", seasonal="deepavali")
    )
    assert [w.type for w in warnings] == [WarningType.WARNING, WarningType.SUGGESTION]


def test_auto_mood_and_no_theme_never_warn():
    for business in BUSINESS_TYPES:
        selection = SimpleSelection(business_type=business.id, mood="auto", seasonal="none")
        assert validate_selection(selection) == []


def test_restaurant_accepts_every_mood_and_theme():
    for mood in MOODS:
        for theme in SEASONAL_THEMES:
            selection = SimpleSelection(business_type="restaurant", mood=mood.id, seasonal=theme.id)
            assert validate_selection(selection) == []


def test_status_invalid_without_business_type():
    selection = SimpleSelection(mood="elegant")
    assert get_selection_status(selection) == SelectionStatus.INVALID
    assert get_status_message(SelectionStatus.INVALID) == "Please select a business type"


def test_status_never_invalid_with_business_type():
    for business in BUSINESS_TYPES:
        for mood in MOODS:
            for theme in SEASONAL_THEMES:
                selection = SimpleSelection(business_type=business.id, mood=mood.id, seasonal=theme.id)
                assert get_selection_status(selection) != SelectionStatus.INVALID


def test_status_with_and_without_warnings():
    assert get_selection_status(SimpleSelection(business_type="cafe")) == SelectionStatus.VALID
    assert get_selection_status(
        SimpleSelection(business_type="cafe", mood="elegant")
    ) == SelectionStatus.VALID_WITH_WARNINGS


def test_status_messages():
    suggestion_only = validate_selection(SimpleSelection(business_type="dessert", seasonal="hari-raya"))
    assert get_status_message(SelectionStatus.VALID_WITH_WARNINGS, suggestion_only) == "Ready with suggestions."
    assert get_status_message(SelectionStatus.VALID_WITH_WARNINGS) == "Ready, but some choices are unusual."
    assert get_status_message(SelectionStatus.VALID) == "Great choices! Ready to enhance."


def test_can_select_style_allows_with_warning():
    check = can_select_style("mood", "elegant", SimpleSelection(business_type="hawker"))
    assert check.allowed is True
    assert "hawker" in check.warning

    assert can_select_style("mood", "warm", SimpleSelection(business_type="hawker")).warning is None


def test_recommended_styles():
    current = SimpleSelection(business_type="dessert")
    assert get_recommended_styles("mood", current) == ["bright", "auto"]
    assert get_recommended_styles("seasonal", current) == ["christmas", "valentines", "mid-autumn"]
    assert get_recommended_styles("format", current) == []
    assert get_recommended_styles("mood", SimpleSelection()) == []


@pytest.mark.parametrize("business, fmt", [
    ("hawker", "square"),
    ("fastfood", "square"),
    ("cafe", "portrait"),
    ("dessert", "portrait"),
    ("restaurant", "square"),
])
def test_smart_suggestions(business, fmt):
    suggestions = get_smart_suggestions(SimpleSelection(business_type=business))
    assert suggestions.suggested_format == fmt
    assert suggestions.suggested_mood is not None


def test_smart_suggestions_keep_chosen_format():
    suggestions = get_smart_suggestions(SimpleSelection(business_type="cafe", format="landscape"))
    assert suggestions.suggested_format is None
    assert suggestions.suggested_mood == "bright"


def test_multi_select_reports_symmetric_pair_once():
    warnings = validate_multi_select(["flat-lay", "bokeh"])

    assert len(warnings) == 1
    assert warnings[0].type == WarningType.ERROR
    assert {warnings[0].value1, warnings[0].value2} == {"flat-lay", "bokeh"}


def test_multi_select_one_sided_block_and_clean_sets():
    # tropical does not declare a block, dark-moody does
    assert len(validate_multi_select(["tropical", "dark-moody"])) == 1
    assert validate_multi_select(["hdr", "natural-light"]) == []


def test_multi_select_is_not_part_of_single_select_validation():
    selection = SimpleSelection(business_type="cafe", mood="bright")
    assert all(w.type != WarningType.ERROR for w in validate_selection(selection))


def test_format_config_defaults_to_square():
    assert get_format_config("vertical").aspect_ratio == "9:16"
    assert get_format_config("foodpanda").width == 4000
    assert get_format_config("billboard").id == "square"
    assert get_format_config(None).id == "square"


def test_selection_counting_and_summary():
    selection = SimpleSelection(business_type="hawker", format="portrait", mood="auto", seasonal="cny")

    assert count_selections(selection) == 3
    assert is_selection_valid(selection) is True
    assert get_selection_summary(selection) == "🍜 Hawker & Street Food • 4:5 • 🧧 Chinese New Year"
    assert get_selection_summary(SimpleSelection()) == "No selections"
    assert is_selection_valid(SimpleSelection()) is False


def test_convert_legacy_selection():
    selection = convert_legacy_selection(["kopitiam", "instagram-stories", "marble", "chinese-new-year", "unknown"])

    assert selection.business_type == "hawker"
    assert selection.format == "vertical"
    assert selection.mood == "elegant"
    assert selection.seasonal == "cny"


def test_mood_recommendation_from_background():
    recommendation = get_mood_recommendation_from_background("Rustic WOOD table")
    assert recommendation.mood == "warm"
    assert get_mood_recommendation_from_background("plain tiles") is None


def test_simple_style_lookup_spans_categories():
    assert get_simple_style_by_id("hawker").name == "Hawker & Street Food"
    assert get_simple_style_by_id("warm") is not None
    assert get_simple_style_by_id("cny").emoji == "🧧"
    assert get_simple_style_by_id("square") is None


def test_find_unknown_ids():
    assert find_unknown_ids(SimpleSelection(business_type="hawker", format="portrait", mood="auto", seasonal="cny")) == []
    assert find_unknown_ids(SimpleSelection()) == []
    assert find_unknown_ids(SimpleSelection(business_type="bakery", seasonal="easter")) == [
        ("business_type", "bakery"),
        ("seasonal", "easter"),
    ]
