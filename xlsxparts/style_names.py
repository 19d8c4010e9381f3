"""Names used in the styles part for fill patterns, borders and alignments."""

from __future__ import annotations

from .formats import (
    BorderStyle,
    Color,
    FillPattern,
    HorizontalAlignment,
    VerticalAlignment,
)

_PATTERN_NAMES: dict[FillPattern, str] = {
    FillPattern.NONE: "none",
    FillPattern.SOLID: "solid",
    FillPattern.MEDIUM_GRAY: "mediumGray",
    FillPattern.DARK_GRAY: "darkGray",
    FillPattern.LIGHT_GRAY: "lightGray",
    FillPattern.DARK_HORIZONTAL: "darkHorizontal",
    FillPattern.DARK_VERTICAL: "darkVertical",
    FillPattern.DARK_DOWN: "darkDown",
    FillPattern.DARK_UP: "darkUp",
    FillPattern.DARK_GRID: "darkGrid",
    FillPattern.DARK_TRELLIS: "darkTrellis",
    FillPattern.LIGHT_HORIZONTAL: "lightHorizontal",
    FillPattern.LIGHT_VERTICAL: "lightVertical",
    FillPattern.LIGHT_DOWN: "lightDown",
    FillPattern.LIGHT_UP: "lightUp",
    FillPattern.LIGHT_TRELLIS: "lightTrellis",
    FillPattern.GRAY125: "gray125",
    FillPattern.GRAY0625: "gray0625",
    FillPattern.LIGHT_GRID: "lightGrid",
}
_PATTERNS_BY_NAME = {name: p for p, name in _PATTERN_NAMES.items()}

_BORDER_NAMES: dict[BorderStyle, str] = {
    BorderStyle.NONE: "none",
    BorderStyle.THIN: "thin",
    BorderStyle.MEDIUM: "medium",
    BorderStyle.DASHED: "dashed",
    BorderStyle.DOTTED: "dotted",
    BorderStyle.THICK: "thick",
    BorderStyle.DOUBLE: "double",
    BorderStyle.HAIR: "hair",
    BorderStyle.MEDIUM_DASHED: "mediumDashed",
    BorderStyle.DASH_DOT: "dashDot",
    BorderStyle.MEDIUM_DASH_DOT: "mediumDashDot",
    BorderStyle.DASH_DOT_DOT: "dashDotDot",
    BorderStyle.MEDIUM_DASH_DOT_DOT: "mediumDashDotDot",
    BorderStyle.SLANT_DASH_DOT: "slantDashDot",
}
_BORDERS_BY_NAME = {name: s for s, name in _BORDER_NAMES.items()}

_H_ALIGN_WRITE: dict[HorizontalAlignment, str] = {
    HorizontalAlignment.LEFT: "left",
    HorizontalAlignment.CENTER: "center",
    HorizontalAlignment.RIGHT: "right",
    HorizontalAlignment.FILL: "fill",
    HorizontalAlignment.JUSTIFY: "justify",
    HorizontalAlignment.MERGE: "centerContinuous",
    HorizontalAlignment.DISTRIBUTED: "distributed",
}
# "fill" is written but not recognised when reading.
_H_ALIGN_READ: dict[str, HorizontalAlignment] = {
    "left": HorizontalAlignment.LEFT,
    "center": HorizontalAlignment.CENTER,
    "right": HorizontalAlignment.RIGHT,
    "justify": HorizontalAlignment.JUSTIFY,
    "centerContinuous": HorizontalAlignment.MERGE,
    "distributed": HorizontalAlignment.DISTRIBUTED,
}

_V_ALIGN_NAMES: dict[VerticalAlignment, str] = {
    VerticalAlignment.TOP: "top",
    VerticalAlignment.CENTER: "center",
    VerticalAlignment.JUSTIFY: "justify",
    VerticalAlignment.DISTRIBUTED: "distributed",
}
_V_ALIGN_READ = {name: a for a, name in _V_ALIGN_NAMES.items()}

_DEFAULT_INDEXED_RGB = (
    "000000", "FFFFFF", "FF0000", "00FF00", "0000FF", "FFFF00", "FF00FF", "00FFFF",
    "000000", "FFFFFF", "FF0000", "00FF00", "0000FF", "FFFF00", "FF00FF", "00FFFF",
    "800000", "008000", "000080", "808000", "800080", "008080", "C0C0C0", "808080",
    "9999FF", "993366", "FFFFCC", "CCFFFF", "660066", "FF8080", "0066CC", "CCCCFF",
    "000080", "FF00FF", "FFFF00", "00FFFF", "800080", "800000", "008080", "0000FF",
    "00CCFF", "CCFFFF", "CCFFCC", "FFFF99", "99CCFF", "FF99CC", "CC99FF", "FFCC99",
    "3366FF", "33CCCC", "99CC00", "FFCC00", "FF9900", "FF6600", "666699", "969696",
    "003366", "339966", "003300", "333300", "993300", "993366", "333399", "333333",
)


def pattern_name(pattern: FillPattern) -> str:
    """The ``patternType`` attribute value for *pattern*."""
    return _PATTERN_NAMES[FillPattern(pattern)]


def pattern_from_name(name: str) -> FillPattern:
    """The pattern called *name*; unknown names give :attr:`FillPattern.NONE`."""
    return _PATTERNS_BY_NAME.get(name, FillPattern.NONE)


def border_style_name(style: BorderStyle) -> str:
    """The ``style`` attribute value for a border *style*."""
    return _BORDER_NAMES[BorderStyle(style)]


def border_style_from_name(name: str) -> BorderStyle | None:
    """The border style called *name*, or None if the name is unknown."""
    return _BORDERS_BY_NAME.get(name)


def horizontal_alignment_name(alignment: HorizontalAlignment) -> str | None:
    """The ``horizontal`` attribute value, or None for general alignment."""
    return _H_ALIGN_WRITE.get(HorizontalAlignment(alignment))


def horizontal_alignment_from_name(name: str) -> HorizontalAlignment | None:
    return _H_ALIGN_READ.get(name)


def vertical_alignment_name(alignment: VerticalAlignment) -> str | None:
    """The ``vertical`` attribute value, or None for bottom alignment."""
    return _V_ALIGN_NAMES.get(VerticalAlignment(alignment))


def vertical_alignment_from_name(name: str) -> VerticalAlignment | None:
    return _V_ALIGN_READ.get(name)


def default_indexed_colors() -> list[Color]:
    """The 64 colours of the default indexed palette."""
    return [Color.from_argb(rgb) for rgb in _DEFAULT_INDEXED_RGB]