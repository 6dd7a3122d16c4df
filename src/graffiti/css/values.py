"""Typed CSS values: Color, Dimension and the keyword enums."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar


@dataclass(frozen=True)
class Color:
    """An RGBA color with four 8-bit channels."""

    r: int
    g: int
    b: int
    a: int = 255

    BLACK: ClassVar[Color]
    WHITE: ClassVar[Color]
    TRANSPARENT: ClassVar[Color]
    RED: ClassVar[Color]
    GREEN: ClassVar[Color]
    BLUE: ClassVar[Color]

    def __post_init__(self) -> None:
        for channel in (self.r, self.g, self.b, self.a):
            if not 0 <= channel <= 255:
                raise ValueError(f"Color channel out of range: {channel}")

    @classmethod
    def from_rgb8(cls, r: int, g: int, b: int) -> Color:
        return cls(r, g, b, 255)

    @classmethod
    def from_rgba8(cls, r: int, g: int, b: int, a: int) -> Color:
        return cls(r, g, b, a)

    @classmethod
    def from_hex(cls, value: int) -> Color:
        """Build a color from a packed ``0xRRGGBBAA`` integer."""
        return cls(
            (value >> 24) & 0xFF,
            (value >> 16) & 0xFF,
            (value >> 8) & 0xFF,
            value & 0xFF,
        )

    @property
    def is_transparent(self) -> bool:
        return self.a == 0

    def __str__(self) -> str:
        return f"rgba({self.r}, {self.g}, {self.b}, {self.a})"


Color.BLACK = Color(0, 0, 0)
Color.WHITE = Color(255, 255, 255)
Color.TRANSPARENT = Color(0, 0, 0, 0)
Color.RED = Color(255, 0, 0)
Color.GREEN = Color(0, 255, 0)
Color.BLUE = Color(0, 0, 255)


class DimensionKind(Enum):
    PX = "px"
    PERCENT = "%"
    AUTO = "auto"
    ZERO = "0"


@dataclass(frozen=True)
class Dimension:
    """A length: pixels, percent, ``auto`` or the unit-less ``0``.

    ``0`` is kept as its own kind (not folded into ``0px``) because the
    grammar accepts a bare zero without a unit.
    """

    kind: DimensionKind
    value: float = 0.0

    AUTO: ClassVar[Dimension]
    ZERO: ClassVar[Dimension]

    @classmethod
    def px(cls, value: float) -> Dimension:
        return cls(DimensionKind.PX, float(value))

    @classmethod
    def percent(cls, value: float) -> Dimension:
        return cls(DimensionKind.PERCENT, float(value))

    def __str__(self) -> str:
        if self.kind is DimensionKind.PX:
            return f"{self.value:g}px"
        if self.kind is DimensionKind.PERCENT:
            return f"{self.value:g}%"
        return self.kind.value


Dimension.AUTO = Dimension(DimensionKind.AUTO)
Dimension.ZERO = Dimension(DimensionKind.ZERO)


# ---------------------------------------------------------------------------
# Keyword enums; values are the exact (case-sensitive) CSS keywords.
# ---------------------------------------------------------------------------


class Keyword(Enum):
    """Base for keyword-valued properties."""

    def __str__(self) -> str:
        return self.value


class Display(Keyword):
    NONE = "none"
    BLOCK = "block"
    INLINE = "inline"
    FLEX = "flex"


class Position(Keyword):
    STATIC = "static"
    RELATIVE = "relative"
    ABSOLUTE = "absolute"
    STICKY = "sticky"


class Align(Keyword):
    AUTO = "auto"
    FLEX_START = "flex-start"
    CENTER = "center"
    FLEX_END = "flex-end"
    STRETCH = "stretch"
    BASELINE = "baseline"
    SPACE_BETWEEN = "space-between"
    SPACE_AROUND = "space-around"


class Justify(Keyword):
    FLEX_START = "flex-start"
    CENTER = "center"
    FLEX_END = "flex-end"
    SPACE_BETWEEN = "space-between"
    SPACE_AROUND = "space-around"
    SPACE_EVENLY = "space-evenly"


class BorderStyle(Keyword):
    NONE = "none"
    HIDDEN = "hidden"
    DOTTED = "dotted"
    DASHED = "dashed"
    SOLID = "solid"
    DOUBLE = "double"
    GROOVE = "groove"
    RIDGE = "ridge"
    INSET = "inset"
    OUTSET = "outset"


class Overflow(Keyword):
    VISIBLE = "visible"
    HIDDEN = "hidden"
    SCROLL = "scroll"
    AUTO = "auto"


class TextAlign(Keyword):
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"
    JUSTIFY = "justify"


class Visibility(Keyword):
    VISIBLE = "visible"
    HIDDEN = "hidden"
    COLLAPSE = "collapse"


class FlexDirection(Keyword):
    ROW = "row"
    COLUMN = "column"
    ROW_REVERSE = "row-reverse"
    COLUMN_REVERSE = "column-reverse"


class FlexWrap(Keyword):
    NOWRAP = "nowrap"
    WRAP = "wrap"
    WRAP_REVERSE = "wrap-reverse"
