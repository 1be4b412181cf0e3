"""Tests for the recursive theme transformer."""

import pytest

from themer import ThemeDepthError, Themer, ThemerConfig, themer, transform
from themer.media import BreakpointLimits
from themer.tables import CSS_PROPERTIES, PIXEL_PROPERTIES, PLACEHOLDER_SELECTORS
from themer.transformer import format_value

MOBILE = "@media screen and (max-width: 767px) { "
TABLET = "@media print, screen and (min-width: 768px) { "
SMALL = "@media screen and (min-width: 1280px) { "
LARGE = "@media screen and (min-width: 1630px) { "
PRINT = "@media print { "


# ---------------------------------------------------------------------------
# Direct properties
# ---------------------------------------------------------------------------


class TestProperties:
    @pytest.mark.parametrize("key", sorted(CSS_PROPERTIES))
    def test_string_value_passes_through(self, key):
        assert transform({key: "X"}) == f"{CSS_PROPERTIES[key]}: X;"

    def test_pixel_property_gets_unit(self):
        assert transform({"padding": 10}) == "padding: 10px;"

    def test_every_pixel_property_gets_unit(self):
        for key, prop in CSS_PROPERTIES.items():
            if prop in PIXEL_PROPERTIES:
                assert transform({key: 10}) == f"{prop}: 10px;"

    def test_zero_has_no_unit(self):
        assert transform({"marginTop": 0}) == "margin-top: 0;"

    def test_string_percentage_has_no_unit(self):
        assert transform({"width": "10%"}) == "width: 10%;"

    def test_non_pixel_number_has_no_unit(self):
        assert transform({"opacity": 1}) == "opacity: 1;"
        assert transform({"zIndex": 10}) == "z-index: 10;"

    def test_float_values(self):
        assert transform({"width": 12.5}) == "width: 12.5px;"
        assert transform({"width": 12.0}) == "width: 12px;"
        assert transform({"opacity": 0.5}) == "opacity: 0.5;"

    def test_none_renders_as_null(self):
        assert transform({"color": None}) == "color: null;"
        assert transform({"width": None}) == "width: null;"

    def test_bool_is_not_a_number(self):
        assert transform({"width": True}) == "width: true;"

    def test_font_alias_maps_to_font_family(self):
        assert transform({"font": "Arial"}) == "font-family: Arial;"

    def test_vendor_property(self):
        assert transform({"webkitAppearance": "none"}) == "-webkit-appearance: none;"

    def test_properties_in_key_order(self):
        theme = {"color": "red", "display": "block", "top": 4}
        assert transform(theme) == "color: red;display: block;top: 4px;"

    def test_custom_unit(self):
        out = transform({"fontSize": 2}, ThemerConfig(unit="rem"))
        assert out == "font-size: 2rem;"


# ---------------------------------------------------------------------------
# Unknown keys and permissive handling
# ---------------------------------------------------------------------------


class TestUnknownKeys:
    def test_unknown_key_dropped(self):
        assert transform({"totallyUnknown": 1}) == ""

    def test_unknown_key_between_properties(self):
        assert transform({"color": "red", "nope": "x", "top": 0}) == "color: red;top: 0;"

    def test_property_keys_are_case_sensitive(self):
        assert transform({"Color": "red"}) == ""

    def test_empty_theme(self):
        assert transform({}) == ""

    def test_non_mapping_nested_value_renders_empty(self):
        assert transform({"hover": "red"}) == "&:hover {}"

    def test_unknown_key_is_logged(self, caplog):
        with caplog.at_level("DEBUG", logger="themer.transformer"):
            transform({"bogus": 1})
        assert "bogus" in caplog.text


# ---------------------------------------------------------------------------
# Pseudo-classes
# ---------------------------------------------------------------------------


class TestPseudoClasses:
    def test_hover(self):
        assert transform({"hover": {"color": "red"}}) == "&:hover {color: red;}"

    def test_hyphenated_name(self):
        assert transform({"firstChild": {"margin": 0}}) == "&:first-child {margin: 0;}"

    def test_param(self):
        theme = {"nthChild": {"param": "2n+1", "color": "red"}}
        assert transform(theme) == "&:nth-child(2n+1) {color: red;}"

    def test_numeric_param(self):
        assert transform({"nthOfType": {"param": 3}}) == "&:nth-of-type(3) {}"

    def test_param_dropped_from_body(self):
        out = transform({"not": {"param": ".active", "opacity": 0.5}})
        assert out == "&:not(.active) {opacity: 0.5;}"

    def test_nested_pseudo_classes(self):
        theme = {"hover": {"color": "red", "before": {"content": "'x'"}}}
        assert transform(theme) == "&:hover {color: red;&:before {content: 'x';}}"


# ---------------------------------------------------------------------------
# Placeholder mirroring
# ---------------------------------------------------------------------------


class TestPlaceholder:
    def test_four_identical_blocks(self):
        out = transform({"placeholder": {"color": "grey"}})
        expected = "".join(f"{sel} {{color: grey;}}" for sel in PLACEHOLDER_SELECTORS)
        assert out == expected
        assert out.count("{color: grey;}") == 4

    def test_selector_order(self):
        out = transform({"placeholder": {}})
        assert out == (
            ":-moz-placeholder {}"
            ":-ms-input-placeholder {}"
            "::-moz-placeholder {}"
            "::-webkit-input-placeholder {}"
        )

    def test_case_insensitive(self):
        assert transform({"Placeholder": {"color": "grey"}}).count("color: grey;") == 4


# ---------------------------------------------------------------------------
# Modifier classes and child selectors
# ---------------------------------------------------------------------------


class TestModifierClass:
    def test_single(self):
        assert transform({"class": {"name": "active", "color": "red"}}) == (
            "&.active {color: red;}"
        )

    def test_sequence(self):
        theme = {"class": [{"name": "a", "color": "red"}, {"name": "b", "color": "blue"}]}
        assert transform(theme) == "&.a {color: red;}&.b {color: blue;}"

    def test_sparse_sequence(self):
        theme = {"class": [None, {"name": "a", "color": "red"}, None]}
        assert transform(theme) == "&.a {color: red;}"

    def test_case_insensitive(self):
        assert transform({"CLASS": {"name": "x"}}) == "&.x {}"

    def test_missing_name(self):
        assert transform({"class": {"color": "red"}}) == "&. {color: red;}"


class TestChildSelector:
    def test_single(self):
        theme = {"child": {"selector": "> span", "fontWeight": "bold"}}
        assert transform(theme) == "> span {font-weight: bold;}"

    def test_sequence(self):
        theme = {
            "child": [
                {"selector": "svg", "width": 16},
                {"selector": "p", "margin": 0},
            ]
        }
        assert transform(theme) == "svg {width: 16px;}p {margin: 0;}"

    def test_tuple_sequence(self):
        theme = {"child": ({"selector": "a"}, None, {"selector": "b"})}
        assert transform(theme) == "a {}b {}"


# ---------------------------------------------------------------------------
# Breakpoints
# ---------------------------------------------------------------------------


class TestBreakpoints:
    def test_single(self):
        assert transform({"mobile": {"color": "y"}}) == f"{MOBILE}color: y; }}"

    def test_all_queries(self):
        theme = {name: {} for name in ("print", "large", "small", "tablet", "mobile")}
        out = transform(theme)
        assert out == f"{MOBILE} }}{TABLET} }}{SMALL} }}{LARGE} }}{PRINT} }}"

    def test_canonical_order(self):
        out = transform({"large": {"color": "x"}, "mobile": {"color": "y"}})
        assert out == f"{MOBILE}color: y; }}{LARGE}color: x; }}"

    def test_hoisted_after_other_fragments(self):
        theme = {"tablet": {"top": 1}, "color": "red", "hover": {"color": "blue"}}
        out = transform(theme)
        assert out == f"color: red;&:hover {{color: blue;}}{TABLET}top: 1px; }}"

    def test_hoisting_is_per_block(self):
        theme = {"hover": {"mobile": {"color": "x"}, "color": "y"}, "width": 1}
        out = transform(theme)
        assert out == f"&:hover {{color: y;{MOBILE}color: x; }}}}width: 1px;"

    def test_inline_in_legacy_mode(self):
        theme = {"large": {"color": "x"}, "color": "red", "mobile": {"color": "y"}}
        out = transform(theme, ThemerConfig.legacy())
        assert out == f"{LARGE}color: x; }}color: red;{MOBILE}color: y; }}"

    def test_custom_limits(self):
        config = ThemerConfig(breakpoints=BreakpointLimits(mobile=600, tablet=1000, small=1400))
        assert transform({"mobile": {}}, config) == "@media screen and (max-width: 599px) {  }"
        assert transform({"large": {}}, config) == "@media screen and (min-width: 1400px) {  }"

    def test_legacy_keyword_keys_case_sensitive(self):
        legacy = ThemerConfig.legacy()
        assert transform({"Class": {"name": "a", "color": "red"}}, legacy) == ""
        assert transform({"CHILD": {"selector": "p"}}, legacy) == ""
        assert transform({"Placeholder": {"color": "grey"}}, legacy) == ""
        assert transform({"class": {"name": "a", "color": "red"}}, legacy) == "&.a {color: red;}"

    def test_breakpoint_names_case_sensitive(self):
        assert transform({"Mobile": {"color": "x"}}) == ""


# ---------------------------------------------------------------------------
# Keyframes
# ---------------------------------------------------------------------------


class TestKeyframes:
    def test_percent_frames(self):
        theme = {"keyframes": {"ident": "spin", "0": {"opacity": 0}, "100": {"opacity": 1}}}
        assert transform(theme) == "@keyframes spin {0% {opacity: 0;}100% {opacity: 1;}"

    def test_named_frames(self):
        theme = {"keyframes": {"from": {"top": 0}, "to": {"top": 10}, "ident": "drop"}}
        assert transform(theme) == "@keyframes drop {from {top: 0;}to {top: 10px;}"

    def test_numeric_keys(self):
        theme = {"keyframes": {"ident": "fade", 0: {"opacity": 0}, 50.5: {"opacity": 1}}}
        assert transform(theme) == "@keyframes fade {0% {opacity: 0;}50.5% {opacity: 1;}"

    def test_ident_case_insensitive(self):
        theme = {"Keyframes": {"IDENT": "pulse", "50": {}}}
        assert transform(theme) == "@keyframes pulse {50% {}"

    @pytest.mark.parametrize(
        "key, rendered",
        [
            ("0x10", "0x10% {}"),
            ("", "% {}"),
            (" 25 ", " 25 % {}"),
            ("1_0", "1_0 {}"),
            ("Infinity", "Infinity {}"),
            ("50abc", "50abc {}"),
        ],
    )
    def test_numeric_key_detection(self, key, rendered):
        theme = {"keyframes": {"ident": "k", key: {}}}
        assert transform(theme) == "@keyframes k {" + rendered

    def test_frames_keep_mapping_order(self):
        theme = {"keyframes": {"ident": "k", "100": {}, "0": {}}}
        assert transform(theme) == "@keyframes k {100% {}0% {}"

    def test_missing_ident_renders_nothing(self):
        assert transform({"keyframes": {"0": {"opacity": 0}}}) == ""

    def test_close_keyframes(self):
        theme = {"keyframes": {"ident": "spin", "0": {"opacity": 0}}}
        out = transform(theme, ThemerConfig(close_keyframes=True))
        assert out == "@keyframes spin {0% {opacity: 0;}}"

    def test_disabled_in_legacy_mode(self):
        theme = {"keyframes": {"ident": "spin", "0": {}}}
        assert transform(theme, ThemerConfig.legacy()) == ""


# ---------------------------------------------------------------------------
# Whole themes and the Themer object
# ---------------------------------------------------------------------------


class TestThemer:
    def test_themer_alias(self):
        assert themer is transform

    def test_callable_instance(self):
        instance = Themer()
        assert instance({"color": "red"}) == "color: red;"

    def test_deterministic(self):
        theme = {
            "display": "flex",
            "small": {"padding": 8},
            "class": [{"name": "on", "hover": {"color": "red"}}],
            "placeholder": {"color": "grey"},
            "mobile": {"display": "none"},
        }
        assert transform(theme) == transform(theme)

    def test_input_not_mutated(self):
        theme = {"hover": {"param": "x", "color": "red"}, "class": [{"name": "a"}]}
        snapshot = {"hover": {"param": "x", "color": "red"}, "class": [{"name": "a"}]}
        transform(theme)
        assert theme == snapshot

    def test_depth_limit(self):
        theme: dict = {"color": "red"}
        for _ in range(5):
            theme = {"hover": theme}
        with pytest.raises(ThemeDepthError) as info:
            transform(theme, ThemerConfig(max_depth=3))
        assert info.value.limit == 3

    def test_depth_within_limit(self):
        theme: dict = {"color": "red"}
        for _ in range(3):
            theme = {"hover": theme}
        out = transform(theme, ThemerConfig(max_depth=3))
        assert out == "&:hover {&:hover {&:hover {color: red;}}}"


class TestFormatValue:
    def test_integral_float(self):
        assert format_value(3.0) == "3"

    def test_string(self):
        assert format_value("1px solid") == "1px solid"

    def test_bool(self):
        assert format_value(False) == "false"

    def test_none(self):
        assert format_value(None) == "null"
