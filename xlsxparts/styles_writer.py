"""Serialising a :class:`~xlsxparts.styles.Styles` table as the styles.xml part."""

from __future__ import annotations

import xml.etree.ElementTree as ET

from .fills_borders import write_border, write_fill
from .fonts import write_font
from .formats import Format, HorizontalAlignment, Prop, VerticalAlignment
from .style_names import horizontal_alignment_name, vertical_alignment_name
from .styles import Styles

_MAIN_NS = "http://schemas.openxmlformats.org/spreadsheetml/2006/main"
_XML_DECLARATION = b'<?xml version="1.0" encoding="UTF-8" standalone="yes"?>'


def _number(value: object) -> str:
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(int(value)) if isinstance(value, bool) else str(value)


def _write_num_fmts(root: ET.Element, styles: Styles) -> None:
    customs = styles.num_formats.custom_formats()
    if not customs:
        return
    element = ET.SubElement(root, "numFmts", count=str(len(customs)))
    for data in customs:
        ET.SubElement(
            element, "numFmt", {"numFmtId": str(data.index), "formatCode": data.code}
        )


def _write_list(root: ET.Element, tag: str, items: list[Format], writer) -> None:
    element = ET.SubElement(root, tag, count=str(len(items)))
    for fmt in items:
        writer(element, fmt)


def _write_cell_style_xfs(root: ET.Element) -> None:
    element = ET.SubElement(root, "cellStyleXfs", count="1")
    ET.SubElement(
        element, "xf", {"numFmtId": "0", "fontId": "0", "fillId": "0", "borderId": "0"}
    )


def _write_alignment(xf: ET.Element, fmt: Format) -> None:
    alignment = ET.SubElement(xf, "alignment")
    if fmt.has(Prop.ALIGNMENT_ALIGN_H):
        name = horizontal_alignment_name(HorizontalAlignment(fmt.get(Prop.ALIGNMENT_ALIGN_H)))
        if name is not None:
            alignment.set("horizontal", name)
    if fmt.has(Prop.ALIGNMENT_ALIGN_V):
        name = vertical_alignment_name(VerticalAlignment(fmt.get(Prop.ALIGNMENT_ALIGN_V)))
        if name is not None:
            alignment.set("vertical", name)
    if fmt.has(Prop.ALIGNMENT_INDENT):
        alignment.set("indent", _number(fmt.get(Prop.ALIGNMENT_INDENT)))
    if fmt.get(Prop.ALIGNMENT_WRAP):
        alignment.set("wrapText", "1")
    if fmt.get(Prop.ALIGNMENT_SHRINK_TO_FIT):
        alignment.set("shrinkToFit", "1")
    if fmt.has(Prop.ALIGNMENT_ROTATION):
        alignment.set("textRotation", _number(fmt.get(Prop.ALIGNMENT_ROTATION)))


def _write_cell_xf(parent: ET.Element, fmt: Format) -> None:
    xf = ET.SubElement(parent, "xf")
    xf.set("numFmtId", _number(fmt.get(Prop.NUM_FMT_ID, 0)))
    xf.set("fontId", str(fmt.font_index or 0))
    xf.set("fillId", str(fmt.fill_index or 0))
    xf.set("borderId", str(fmt.border_index or 0))
    xf.set("xfId", "0")
    for applies, name in (
        (fmt.has_num_fmt_data(), "applyNumberFormat"),
        (fmt.has_font_data(), "applyFont"),
        (fmt.has_fill_data(), "applyFill"),
        (fmt.has_border_data(), "applyBorder"),
        (fmt.has_alignment_data(), "applyAlignment"),
    ):
        if applies:
            xf.set(name, "1")
    if fmt.has_alignment_data():
        _write_alignment(xf, fmt)


def _write_cell_styles(root: ET.Element) -> None:
    element = ET.SubElement(root, "cellStyles", count="1")
    ET.SubElement(element, "cellStyle", {"name": "Normal", "xfId": "0", "builtinId": "0"})


def _write_dxf(parent: ET.Element, fmt: Format) -> None:
    dxf = ET.SubElement(parent, "dxf")
    if fmt.has_font_data():
        write_font(dxf, fmt, True)
    if fmt.has_num_fmt_data():
        ET.SubElement(
            dxf,
            "numFmt",
            {
                "numFmtId": _number(fmt.get(Prop.NUM_FMT_ID, 0)),
                "formatCode": str(fmt.get(Prop.NUM_FMT_FORMAT_CODE, "")),
            },
        )
    if fmt.has_fill_data():
        write_fill(dxf, fmt, True)
    if fmt.has_border_data():
        write_border(dxf, fmt, True)


def _write_table_styles(root: ET.Element) -> None:
    ET.SubElement(
        root,
        "tableStyles",
        {
            "count": "0",
            "defaultTableStyle": "TableStyleMedium9",
            "defaultPivotStyle": "PivotStyleLight16",
        },
    )


def _write_colors(root: ET.Element, styles: Styles) -> None:
    if styles.is_indexed_colors_default:
        return
    colors = ET.SubElement(root, "colors")
    indexed = ET.SubElement(colors, "indexedColors")
    for color in styles.indexed_colors:
        ET.SubElement(indexed, "rgbColor", rgb=color.to_argb())


def save_styles(styles: Styles) -> bytes:
    """Return the styles.xml part describing *styles*."""
    root = ET.Element("styleSheet")
    root.set("xmlns", _MAIN_NS)

    _write_num_fmts(root, styles)
    _write_list(root, "fonts", styles.fonts, lambda p, f: write_font(p, f, False))
    _write_list(root, "fills", styles.fills, lambda p, f: write_fill(p, f, False))
    _write_list(root, "borders", styles.borders, lambda p, f: write_border(p, f, False))
    _write_cell_style_xfs(root)
    _write_list(root, "cellXfs", styles.xf_formats, _write_cell_xf)
    _write_cell_styles(root)
    _write_list(root, "dxfs", styles.dxf_formats, _write_dxf)
    _write_table_styles(root)
    _write_colors(root, styles)

    return _XML_DECLARATION + ET.tostring(root, encoding="unicode").encode("utf-8")