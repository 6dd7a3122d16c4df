"""Tests for longhand/shorthand resolution and the Style block."""

import logging

import pytest

from graffiti.css import Style, StyleProp, parse_property, tokenize
from graffiti.css.properties import LONGHANDS, SHORTHANDS, longhands_of, parse_property_into
from graffiti.css.values import BorderStyle, Color, Dimension, Display, FlexWrap, Overflow


def resolve(name, text):
    return parse_property(name, tokenize(text))


# ---------------------------------------------------------------------------
# Longhands
# ---------------------------------------------------------------------------


class TestLonghands:
    def test_dimension(self):
        assert resolve("width", "100px") == [StyleProp("width", Dimension.px(100))]

    def test_keyword(self):
        assert resolve("display", "none") == [StyleProp("display", Display.NONE)]

    def test_number(self):
        assert resolve("opacity", "0.5") == [StyleProp("opacity", 0.5)]

    def test_color(self):
        assert resolve("background-color", "#fff") == [StyleProp("background-color", Color.WHITE)]

    def test_extra_value_drops_declaration(self):
        assert resolve("padding-left", "10px 20px") == []

    def test_names_do_not_overlap(self):
        assert not set(LONGHANDS) & set(SHORTHANDS)


# ---------------------------------------------------------------------------
# Shorthands
# ---------------------------------------------------------------------------


class TestShorthands:
    def test_padding_two_values(self):
        assert resolve("padding", "10px 20px") == [
            StyleProp("padding-top", Dimension.px(10)),
            StyleProp("padding-right", Dimension.px(20)),
            StyleProp("padding-bottom", Dimension.px(10)),
            StyleProp("padding-left", Dimension.px(20)),
        ]

    def test_margin_auto(self):
        props = resolve("margin", "0 auto")
        assert [p.value for p in props] == [Dimension.ZERO, Dimension.AUTO] * 2

    def test_flex(self):
        assert resolve("flex", "1") == [
            StyleProp("flex-grow", 1.0),
            StyleProp("flex-shrink", 1.0),
            StyleProp("flex-basis", Dimension.AUTO),
        ]

    def test_flex_flow_without_wrap(self):
        assert [p.name for p in resolve("flex-flow", "column")] == ["flex-direction"]
        assert resolve("flex-flow", "row nowrap")[1] == StyleProp("flex-wrap", FlexWrap.NOWRAP)

    def test_overflow(self):
        assert resolve("overflow", "hidden") == [
            StyleProp("overflow-x", Overflow.HIDDEN),
            StyleProp("overflow-y", Overflow.HIDDEN),
        ]

    def test_border(self):
        props = resolve("border", "1px solid black")
        assert len(props) == 12
        assert StyleProp("border-left-style", BorderStyle.SOLID) in props
        assert StyleProp("border-top-color", Color.BLACK) in props

    def test_border_radius_corners(self):
        names = [p.name for p in resolve("border-radius", "4px")]
        assert names == [
            "border-top-left-radius",
            "border-top-right-radius",
            "border-bottom-right-radius",
            "border-bottom-left-radius",
        ]

    def test_background(self):
        assert resolve("background", "none") == [StyleProp("background-color", Color.TRANSPARENT)]

    def test_invalid_shorthand_emits_nothing(self):
        assert resolve("padding", "10px bogus") == []

    @pytest.mark.parametrize(
        "name, value",
        [
            ("padding", "1px"),
            ("border-radius", "2px"),
            ("flex", "1"),
            ("flex-flow", "row wrap"),
            ("overflow", "auto"),
            ("outline", "1px solid red"),
            ("border", "1px dashed blue"),
            ("background", "red"),
        ],
    )
    def test_expansion_writes_exactly_its_longhands(self, name, value):
        assert tuple(p.name for p in resolve(name, value)) == longhands_of(name)

    def test_every_shorthand_has_longhands(self):
        for name in SHORTHANDS:
            assert longhands_of(name), name

    def test_longhands_of(self):
        assert longhands_of("width") == ("width",)
        assert longhands_of("overflow") == ("overflow-x", "overflow-y")
        assert longhands_of("nope") == ()


# ---------------------------------------------------------------------------
# Logging of dropped declarations
# ---------------------------------------------------------------------------


class TestDroppedDeclarations:
    def test_unknown_property_logged(self, caplog: pytest.LogCaptureFixture):
        with caplog.at_level(logging.DEBUG, logger="graffiti.css.properties"):
            assert resolve("v", "0") == []
        assert any("unknown property" in r.message for r in caplog.records)

    def test_bad_value_logged(self, caplog: pytest.LogCaptureFixture):
        with caplog.at_level(logging.DEBUG, logger="graffiti.css.properties"):
            assert resolve("width", "wide") == []
        assert any("Dropping declaration width" in r.message for r in caplog.records)


# ---------------------------------------------------------------------------
# Style block
# ---------------------------------------------------------------------------


class TestStyleOverride:
    def test_shorthand_overrides_longhand_in_place(self):
        style = Style()
        style.set_property("background-color", "#fff")
        style.set_property("background", "#000")
        assert style.props == [StyleProp("background-color", Color.BLACK)]

    def test_longhand_overrides_shorthand_in_place(self):
        style = Style()
        style.set_property("padding", "1px")
        style.set_property("padding-right", "5px")
        assert len(style) == 4
        assert style.props[1] == StyleProp("padding-right", Dimension.px(5))

    def test_failed_set_leaves_style_untouched(self):
        style = Style.parse("width: 1px")
        assert style.set_property("width", "oops") is False
        assert style.get("width") == Dimension.px(1)

    def test_remove_shorthand_removes_longhands(self):
        style = Style.parse("padding: 1px; color: red")
        assert style.remove_property("padding") is True
        assert [p.name for p in style] == ["color"]
        assert style.remove_property("padding") is False

    def test_parse_property_into(self):
        style = Style()
        assert parse_property_into("margin", tokenize("2px"), style)
        assert "margin-top" in style


class TestStyleText:
    def test_property_value(self):
        style = Style.parse("opacity: 0.5; width: 10px; display: flex")
        assert style.property_value("opacity") == "0.5"
        assert style.property_value("width") == "10px"
        assert style.property_value("display") == "flex"
        assert style.property_value("height") == ""

    def test_css_text(self):
        style = Style.parse("color: red; flex-grow: 2")
        assert style.css_text == "color: rgba(255, 0, 0, 255); flex-grow: 2;"

    def test_equality_and_copy(self):
        style = Style.parse("width: 1px")
        clone = style.copy()
        assert clone == style
        clone.set_property("width", "2px")
        assert clone != style
