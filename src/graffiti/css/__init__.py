"""CSS subset: tokenizer, selectors, values, properties and stylesheets."""

from graffiti.css.errors import ParseError
from graffiti.css.matching import ElementTree, match_specificity, matches, specificity
from graffiti.css.model import Rule, StyleSheet
from graffiti.css.parser import parse_declarations, parse_stylesheet
from graffiti.css.properties import parse_property, parse_property_into
from graffiti.css.selector import Combinator, Component, ComponentKind, Selector, parse_selector
from graffiti.css.style import Style, StyleProp
from graffiti.css.tokenizer import tokenize
from graffiti.css.values import (
    Align,
    BorderStyle,
    Color,
    Dimension,
    DimensionKind,
    Display,
    FlexDirection,
    FlexWrap,
    Justify,
    Overflow,
    Position,
    TextAlign,
    Visibility,
)

__all__ = [
    # parsing
    "tokenize",
    "parse_stylesheet",
    "parse_declarations",
    "parse_selector",
    "parse_property",
    "parse_property_into",
    "ParseError",
    # model
    "StyleSheet",
    "Rule",
    "Selector",
    "Component",
    "ComponentKind",
    "Combinator",
    "Style",
    "StyleProp",
    # values
    "Color",
    "Dimension",
    "DimensionKind",
    "Align",
    "BorderStyle",
    "Display",
    "FlexDirection",
    "FlexWrap",
    "Justify",
    "Overflow",
    "Position",
    "TextAlign",
    "Visibility",
    # matching
    "ElementTree",
    "matches",
    "match_specificity",
    "specificity",
]
