"""Reading and writing the ``<font>`` element of the styles part."""

from __future__ import annotations

import xml.etree.ElementTree as ET

from .formats import Color, FontScript, FontUnderline, Format, Prop

_UNDERLINE_NAMES = {
    FontUnderline.DOUBLE: "double",
    FontUnderline.SINGLE_ACCOUNTING: "singleAccounting",
    FontUnderline.DOUBLE_ACCOUNTING: "doubleAccounting",
}
_UNDERLINE_BY_NAME = {name: u for u, name in _UNDERLINE_NAMES.items()}

_FLAG_TAGS = (
    (Prop.FONT_BOLD, "b"),
    (Prop.FONT_ITALIC, "i"),
    (Prop.FONT_STRIKE_OUT, "strike"),
    (Prop.FONT_OUTLINE, "outline"),
    (Prop.FONT_SHADOW, "shadow"),
)
_FLAGS_BY_TAG = {tag: prop for prop, tag in _FLAG_TAGS}


def _local(tag: str) -> str:
    return tag.rpartition("}")[2]


def _to_int(text: str | None) -> int:
    try:
        return int(text or "")
    except ValueError:
        return 0


def _number(value: object) -> str:
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def write_font(parent: ET.Element, fmt: Format, is_dxf: bool = False) -> ET.Element:
    """Append a ``<font>`` element describing *fmt* to *parent* and return it.

    Differential formats leave out the size, name, charset, family and scheme.
    """
    font = ET.SubElement(parent, "font")

    # condense and extend are mainly found in differential formats
    for prop, tag in ((Prop.FONT_CONDENSE, "condense"), (Prop.FONT_EXTEND, "extend")):
        if fmt.has(prop) and not fmt.get(prop):
            ET.SubElement(font, tag, val="0")

    for prop, tag in _FLAG_TAGS:
        if fmt.get(prop):
            ET.SubElement(font, tag)

    if fmt.has(Prop.FONT_UNDERLINE):
        underline = FontUnderline(fmt.get(Prop.FONT_UNDERLINE))
        if underline != FontUnderline.NONE:
            element = ET.SubElement(font, "u")
            name = _UNDERLINE_NAMES.get(underline)
            if name is not None:
                element.set("val", name)

    if fmt.has(Prop.FONT_SCRIPT):
        script = FontScript(fmt.get(Prop.FONT_SCRIPT))
        if script != FontScript.NORMAL:
            value = "superscript" if script == FontScript.SUPER else "subscript"
            ET.SubElement(font, "vertAlign", val=value)

    if not is_dxf and fmt.has(Prop.FONT_SIZE):
        ET.SubElement(font, "sz", val=_number(fmt.get(Prop.FONT_SIZE)))

    color = fmt.get(Prop.FONT_COLOR)
    if isinstance(color, Color):
        color.to_element(font, "color")

    if not is_dxf:
        name = fmt.get(Prop.FONT_NAME, "")
        if name:
            ET.SubElement(font, "name", val=name)
        if fmt.has(Prop.FONT_CHARSET):
            ET.SubElement(font, "charset", val=_number(fmt.get(Prop.FONT_CHARSET)))
        if fmt.has(Prop.FONT_FAMILY):
            ET.SubElement(font, "family", val=_number(fmt.get(Prop.FONT_FAMILY)))
        if fmt.has(Prop.FONT_SCHEME):
            ET.SubElement(font, "scheme", val=str(fmt.get(Prop.FONT_SCHEME)))
    return font


def read_font(element: ET.Element, fmt: Format | None = None) -> Format:
    """Read the font properties of a ``<font>`` *element* into *fmt* and return it."""
    if fmt is None:
        fmt = Format()
    for child in element.iter():
        if child is element:
            continue
        name = _local(child.tag)
        val = child.get("val")
        if name == "name":
            fmt.set(Prop.FONT_NAME, val or "")
        elif name == "charset":
            fmt.set(Prop.FONT_CHARSET, _to_int(val))
        elif name == "family":
            fmt.set(Prop.FONT_FAMILY, _to_int(val))
        elif name in _FLAGS_BY_TAG:
            fmt.set(_FLAGS_BY_TAG[name], True)
        elif name == "condense":
            fmt.set(Prop.FONT_CONDENSE, _to_int(val))
        elif name == "extend":
            fmt.set(Prop.FONT_EXTEND, _to_int(val))
        elif name == "color":
            fmt.set(Prop.FONT_COLOR, Color.from_element(child))
        elif name == "sz":
            fmt.set(Prop.FONT_SIZE, _to_int(val))
        elif name == "u":
            fmt.set(Prop.FONT_UNDERLINE, _UNDERLINE_BY_NAME.get(val or "", FontUnderline.SINGLE))
        elif name == "vertAlign":
            if val == "superscript":
                fmt.set(Prop.FONT_SCRIPT, FontScript.SUPER)
            elif val == "subscript":
                fmt.set(Prop.FONT_SCRIPT, FontScript.SUB)
        elif name == "scheme":
            fmt.set(Prop.FONT_SCHEME, val or "")
    return fmt