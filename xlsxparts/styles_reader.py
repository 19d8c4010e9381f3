"""Reading the styles.xml part into a :class:`~xlsxparts.styles.Styles` table."""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from collections.abc import Iterator

from .fills_borders import read_border, read_fill
from .fonts import read_font
from .formats import BORDER_PROPS, FILL_PROPS, FONT_PROPS, Color, Format, Prop
from .style_names import horizontal_alignment_from_name, vertical_alignment_from_name
from .styles import Styles
from .utility import parse_xsd_boolean

log = logging.getLogger(__name__)


def _local(tag: str) -> str:
    return tag.rpartition("}")[2]


def _to_int(text: str | None) -> int:
    try:
        return int(text or "")
    except ValueError:
        return 0


def _children(element: ET.Element, name: str) -> Iterator[ET.Element]:
    return (child for child in element if _local(child.tag) == name)


def _check_count(element: ET.Element, found: int, what: str) -> None:
    if "count" in element.attrib and _to_int(element.get("count")) != found:
        log.warning("error reading %s: declared %s, found %d", what, element.get("count"), found)


def _read_num_fmts(element: ET.Element, styles: Styles) -> None:
    for entry in _children(element, "numFmt"):
        styles.num_formats.register(_to_int(entry.get("numFmtId")), entry.get("formatCode", ""))
    _check_count(element, len(styles.num_formats), "custom numFmts")


def _read_parts(
    element: ET.Element,
    tag: str,
    reader,
    items: list[Format],
    table: dict[tuple, Format],
    key_of,
    index_attr: str,
) -> None:
    for child in _children(element, tag):
        fmt = reader(child, Format())
        items.append(fmt)
        table[key_of(fmt)] = fmt
        setattr(fmt, index_attr, len(items) - 1)
    _check_count(element, len(items), _local(element.tag))


def _copy_props(target: Format, source: Format, props) -> None:
    for prop in props:
        if source.has(prop):
            target.set(prop, source.get(prop))


def _part(items: list[Format], index: int, what: str) -> Format | None:
    if 0 <= index < len(items):
        return items[index]
    log.warning("error reading styles.xml, cellXfs %s", what)
    return None


def _read_alignment(element: ET.Element, fmt: Format) -> None:
    attrs = element.attrib
    if "horizontal" in attrs:
        alignment = horizontal_alignment_from_name(attrs["horizontal"])
        if alignment is not None:
            fmt.set(Prop.ALIGNMENT_ALIGN_H, alignment)
    if "vertical" in attrs:
        valign = vertical_alignment_from_name(attrs["vertical"])
        if valign is not None:
            fmt.set(Prop.ALIGNMENT_ALIGN_V, valign)
    if "indent" in attrs:
        fmt.set(Prop.ALIGNMENT_INDENT, _to_int(attrs["indent"]))
    if "textRotation" in attrs:
        fmt.set(Prop.ALIGNMENT_ROTATION, _to_int(attrs["textRotation"]))
    if "wrapText" in attrs:
        fmt.set(Prop.ALIGNMENT_WRAP, True)
    if "shrinkToFit" in attrs:
        fmt.set(Prop.ALIGNMENT_SHRINK_TO_FIT, True)


def _read_cell_xf(xf: ET.Element, styles: Styles) -> Format:
    fmt = Format()
    attrs = xf.attrib

    if "numFmtId" in attrs and parse_xsd_boolean(attrs.get("applyNumberFormat", "")):
        index = _to_int(attrs["numFmtId"])
        custom = {data.index: data.code for data in styles.num_formats.custom_formats()}
        if index in custom:
            fmt.set_number_format(index, custom[index])
        else:
            fmt.set(Prop.NUM_FMT_ID, index)

    if "fontId" in attrs:
        font = _part(styles.fonts, _to_int(attrs["fontId"]), "fontId")
        if font is not None and parse_xsd_boolean(attrs.get("applyFont", "")):
            _copy_props(fmt, font, FONT_PROPS)

    # The fill is taken whether or not applyFill is given.
    if "fillId" in attrs:
        fill = _part(styles.fills, _to_int(attrs["fillId"]), "fillId")
        if fill is not None:
            _copy_props(fmt, fill, FILL_PROPS)

    if "borderId" in attrs:
        border = _part(styles.borders, _to_int(attrs["borderId"]), "borderId")
        if border is not None and parse_xsd_boolean(attrs.get("applyBorder", "")):
            _copy_props(fmt, border, BORDER_PROPS)

    if parse_xsd_boolean(attrs.get("applyAlignment", "")):
        first = next(iter(xf), None)
        if first is not None and _local(first.tag) == "alignment":
            _read_alignment(first, fmt)
    return fmt


def _read_cell_xfs(element: ET.Element, styles: Styles) -> None:
    for xf in _children(element, "xf"):
        styles.add_xf_format(_read_cell_xf(xf, styles), force=True)
    _check_count(element, len(styles.xf_formats), "cellXfs")


def _read_dxf(element: ET.Element, styles: Styles) -> None:
    fmt = Format()
    for child in element:
        name = _local(child.tag)
        if name == "numFmt":
            fmt.set_number_format(_to_int(child.get("numFmtId")), child.get("formatCode", ""))
        elif name == "font":
            read_font(child, fmt)
        elif name == "fill":
            read_fill(child, fmt)
        elif name == "border":
            read_border(child, fmt)
    styles.add_dxf_format(fmt, force=True)


def _read_dxfs(element: ET.Element, styles: Styles) -> None:
    for dxf in _children(element, "dxf"):
        _read_dxf(dxf, styles)
    _check_count(element, len(styles.dxf_formats), "dxfs")


def _read_colors(element: ET.Element, styles: Styles) -> None:
    for indexed in _children(element, "indexedColors"):
        colors = [
            Color.from_argb(entry.get("rgb", ""))
            for entry in _children(indexed, "rgbColor")
        ]
        styles.indexed_colors = colors
        if colors:
            styles.is_indexed_colors_default = False


def load_styles(data: bytes | str) -> Styles:
    """Build a :class:`Styles` table from the XML of a styles.xml part.

    Raises xml.etree.ElementTree.ParseError when *data* is not well-formed.
    """
    root = ET.fromstring(data)
    styles = Styles(new_from_scratch=False)
    for element in root:
        name = _local(element.tag)
        if name == "numFmts":
            _read_num_fmts(element, styles)
        elif name == "fonts":
            _read_parts(
                element, "font", read_font, styles.fonts, styles.font_table,
                Format.font_key, "font_index",
            )
        elif name == "fills":
            _read_parts(
                element, "fill", read_fill, styles.fills, styles.fill_table,
                Format.fill_key, "fill_index",
            )
        elif name == "borders":
            _read_parts(
                element, "border", read_border, styles.borders, styles.border_table,
                Format.border_key, "border_index",
            )
        elif name == "cellXfs":
            _read_cell_xfs(element, styles)
        elif name == "dxfs":
            _read_dxfs(element, styles)
        elif name == "colors":
            _read_colors(element, styles)
    return styles