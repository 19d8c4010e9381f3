"""Reading and writing the ``<fill>`` and ``<border>`` elements of the styles part."""

from __future__ import annotations

import xml.etree.ElementTree as ET

from .formats import BorderStyle, Color, DiagonalBorderType, FillPattern, Format, Prop
from .style_names import (
    border_style_from_name,
    border_style_name,
    pattern_from_name,
    pattern_name,
)

_SIDES = (
    ("left", Prop.BORDER_LEFT_STYLE, Prop.BORDER_LEFT_COLOR),
    ("right", Prop.BORDER_RIGHT_STYLE, Prop.BORDER_RIGHT_COLOR),
    ("top", Prop.BORDER_TOP_STYLE, Prop.BORDER_TOP_COLOR),
    ("bottom", Prop.BORDER_BOTTOM_STYLE, Prop.BORDER_BOTTOM_COLOR),
    ("diagonal", Prop.BORDER_DIAGONAL_STYLE, Prop.BORDER_DIAGONAL_COLOR),
)
_SIDES_BY_NAME = {name: (style, color) for name, style, color in _SIDES}


def _local(tag: str) -> str:
    return tag.rpartition("}")[2]


def _set_or_clear(fmt: Format, prop: Prop, value: object, clear_value: object) -> None:
    if value == clear_value:
        fmt.remove(prop)
    else:
        fmt.set(prop, value)


def write_fill(parent: ET.Element, fmt: Format, is_dxf: bool = False) -> ET.Element:
    """Append a ``<fill>`` element describing *fmt* to *parent* and return it.

    A solid fill swaps the roles of the foreground and background colours.
    """
    fill = ET.SubElement(parent, "fill")
    pattern_fill = ET.SubElement(fill, "patternFill")
    pattern = FillPattern(fmt.get(Prop.FILL_PATTERN, FillPattern.NONE))
    # Differential formats leave out the default "none" pattern.
    if not (pattern == FillPattern.NONE and is_dxf):
        pattern_fill.set("patternType", pattern_name(pattern))

    if pattern == FillPattern.SOLID:
        order = ((Prop.FILL_BG_COLOR, "fgColor"), (Prop.FILL_FG_COLOR, "bgColor"))
    else:
        order = ((Prop.FILL_FG_COLOR, "fgColor"), (Prop.FILL_BG_COLOR, "bgColor"))
    for prop, tag in order:
        color = fmt.get(prop)
        if isinstance(color, Color):
            color.to_element(pattern_fill, tag)
    return fill


def read_fill(element: ET.Element, fmt: Format | None = None) -> Format:
    """Read the fill properties of a ``<fill>`` *element* into *fmt* and return it."""
    if fmt is None:
        fmt = Format()
    for pattern_fill in element.iter():
        if _local(pattern_fill.tag) != "patternFill" or "patternType" not in pattern_fill.attrib:
            continue
        pattern = pattern_from_name(pattern_fill.get("patternType", ""))
        _set_or_clear(fmt, Prop.FILL_PATTERN, pattern, FillPattern.NONE)
        solid = pattern == FillPattern.SOLID
        for child in pattern_fill:
            name = _local(child.tag)
            if name == "fgColor":
                prop = Prop.FILL_BG_COLOR if solid else Prop.FILL_FG_COLOR
            elif name == "bgColor":
                prop = Prop.FILL_FG_COLOR if solid else Prop.FILL_BG_COLOR
            else:
                continue
            fmt.set(prop, Color.from_element(child))
    return fmt


def _write_sub_border(parent: ET.Element, tag: str, style: BorderStyle, color: Color | None) -> None:
    if style == BorderStyle.NONE:
        ET.SubElement(parent, tag)
        return
    side = ET.SubElement(parent, tag, style=border_style_name(style))
    (color if isinstance(color, Color) and not color.is_invalid() else Color(auto=True)).to_element(
        side, "color"
    )


def write_border(parent: ET.Element, fmt: Format, is_dxf: bool = False) -> ET.Element:
    """Append a ``<border>`` element describing *fmt* to *parent* and return it.

    Differential formats have no diagonal border.
    """
    border = ET.SubElement(parent, "border")
    if fmt.has(Prop.BORDER_DIAGONAL_TYPE):
        kind = DiagonalBorderType(fmt.get(Prop.BORDER_DIAGONAL_TYPE))
        if kind in (DiagonalBorderType.UP, DiagonalBorderType.BOTH):
            border.set("diagonalUp", "1")
        if kind in (DiagonalBorderType.DOWN, DiagonalBorderType.BOTH):
            border.set("diagonalDown", "1")

    for tag, style_prop, color_prop in _SIDES:
        if is_dxf and tag == "diagonal":
            continue
        style = BorderStyle(fmt.get(style_prop, BorderStyle.NONE))
        _write_sub_border(border, tag, style, fmt.get(color_prop))
    return border


def read_border(element: ET.Element, fmt: Format | None = None) -> Format:
    """Read the border properties of a ``<border>`` *element* into *fmt* and return it."""
    if fmt is None:
        fmt = Format()
    is_up = "diagonalUp" in element.attrib
    is_down = "diagonalDown" in element.attrib
    if is_up and is_down:
        fmt.set(Prop.BORDER_DIAGONAL_TYPE, DiagonalBorderType.BOTH)
    elif is_up:
        fmt.set(Prop.BORDER_DIAGONAL_TYPE, DiagonalBorderType.UP)
    elif is_down:
        fmt.set(Prop.BORDER_DIAGONAL_TYPE, DiagonalBorderType.DOWN)

    for child in element:
        side = _SIDES_BY_NAME.get(_local(child.tag))
        if side is None:
            continue
        style_prop, color_prop = side
        style = BorderStyle.NONE
        color: Color | None = None
        known = border_style_from_name(child.get("style", "")) if "style" in child.attrib else None
        if known is not None:
            style = known
            for sub in child.iter():
                if sub is not child and _local(sub.tag) == "color":
                    color = Color.from_element(sub)
        _set_or_clear(fmt, style_prop, style, BorderStyle.NONE)
        if color is not None and not color.is_invalid():
            fmt.set(color_prop, color)
    return fmt