import logging
import xml.etree.ElementTree as ET

import pytest

from xlsxparts.formats import (
    BorderStyle,
    Color,
    FillPattern,
    Format,
    HorizontalAlignment,
    Prop,
    VerticalAlignment,
)
from xlsxparts.styles import Styles
from xlsxparts.styles_reader import load_styles
from xlsxparts.styles_writer import save_styles

SAMPLE = b"""<?xml version="1.0" encoding="UTF-8" standalone="yes"?>
<styleSheet xmlns="http://schemas.openxmlformats.org/spreadsheetml/2006/main">
<numFmts count="1"><numFmt numFmtId="180" formatCode="0.0000"/></numFmts>
<fonts count="2">
<font><sz val="11"/><name val="Calibri"/></font>
<font><b/><sz val="14"/><color rgb="FFFF0000"/><name val="Arial"/></font>
</fonts>
<fills count="3">
<fill><patternFill patternType="none"/></fill>
<fill><patternFill patternType="gray125"/></fill>
<fill><patternFill patternType="solid"><fgColor rgb="FF00FF00"/><bgColor indexed="64"/></patternFill></fill>
</fills>
<borders count="2">
<border><left/><right/><top/><bottom/><diagonal/></border>
<border><left style="thin"><color indexed="64"/></left><right/><top/><bottom/><diagonal/></border>
</borders>
<cellStyleXfs count="1"><xf numFmtId="0" fontId="0" fillId="0" borderId="0"/></cellStyleXfs>
<cellXfs count="4">
<xf numFmtId="0" fontId="0" fillId="0" borderId="0" xfId="0"/>
<xf numFmtId="180" fontId="1" fillId="2" borderId="1" xfId="0" applyNumberFormat="1" applyFont="1" applyBorder="1" applyAlignment="1"><alignment horizontal="center" vertical="top" wrapText="1" indent="2"/></xf>
<xf numFmtId="14" fontId="1" fillId="0" borderId="0" xfId="0" applyFont="0"/>
<xf numFmtId="14" fontId="9" fillId="0" borderId="0" xfId="0" applyNumberFormat="true" applyFont="1"/>
</cellXfs>
<cellStyles count="1"><cellStyle name="Normal" xfId="0" builtinId="0"/></cellStyles>
<dxfs count="1">
<dxf><font><b/></font><numFmt numFmtId="181" formatCode="0.0%"/><fill><patternFill patternType="solid"><bgColor rgb="FFFFFF00"/></patternFill></fill></dxf>
</dxfs>
<colors><indexedColors><rgbColor rgb="FF000000"/><rgbColor rgb="FFFFFFFF"/></indexedColors></colors>
</styleSheet>
"""


@pytest.fixture
def styles():
    return load_styles(SAMPLE)


def test_number_formats_registered(styles):
    assert styles.num_formats.code_for(180) == "0.0000"
    assert styles.num_formats.next_custom_id == 181


def test_full_cell_format(styles):
    fmt = styles.xf_format(1)
    assert fmt.get(Prop.NUM_FMT_ID) == 180
    assert fmt.get(Prop.NUM_FMT_FORMAT_CODE) == "0.0000"
    assert fmt.get(Prop.FONT_BOLD) is True
    assert fmt.get(Prop.FONT_SIZE) == 14
    assert fmt.get(Prop.FONT_COLOR) == Color(rgb="FFFF0000")
    assert fmt.get(Prop.FILL_PATTERN) == FillPattern.SOLID
    # a solid fill swaps fgColor and bgColor
    assert fmt.get(Prop.FILL_BG_COLOR) == Color(rgb="FF00FF00")
    assert fmt.get(Prop.FILL_FG_COLOR) == Color(indexed=64)
    assert fmt.get(Prop.BORDER_LEFT_STYLE) == BorderStyle.THIN
    assert fmt.get(Prop.ALIGNMENT_ALIGN_H) == HorizontalAlignment.CENTER
    assert fmt.get(Prop.ALIGNMENT_ALIGN_V) == VerticalAlignment.TOP
    assert fmt.get(Prop.ALIGNMENT_WRAP) is True
    assert fmt.get(Prop.ALIGNMENT_INDENT) == 2


def test_cell_format_part_indices(styles):
    fmt = styles.xf_format(1)
    assert fmt.font_index == 1
    assert fmt.fill_index == 2
    assert fmt.border_index == 1
    assert fmt.xf_index == 1


def test_apply_flags_off_skip_properties(styles):
    fmt = styles.xf_format(2)
    assert not fmt.has_font_data()
    assert not fmt.has(Prop.NUM_FMT_ID)


def test_font_id_out_of_range_is_ignored(styles):
    fmt = styles.xf_format(3)
    assert fmt.get(Prop.NUM_FMT_ID) == 14
    assert not fmt.has(Prop.NUM_FMT_FORMAT_CODE)
    assert not fmt.has_font_data()


def test_all_cell_formats_kept(styles):
    assert len(styles.xf_formats) == 4


def test_dxf_read(styles):
    assert len(styles.dxf_formats) == 1
    dxf = styles.dxf_format(0)
    assert dxf.get(Prop.FONT_BOLD) is True
    assert dxf.get(Prop.NUM_FMT_ID) == 181
    assert dxf.get(Prop.NUM_FMT_FORMAT_CODE) == "0.0%"
    assert dxf.get(Prop.FILL_FG_COLOR) == Color(rgb="FFFFFF00")
    assert dxf.dxf_index == 0


def test_indexed_colors_read(styles):
    assert styles.is_indexed_colors_default is False
    assert styles.color_by_index(1) == Color(rgb="FFFFFFFF")
    assert styles.color_by_index(2) is None


def test_round_trip_keeps_formats(styles):
    again = load_styles(save_styles(styles))
    assert [f.format_key() for f in again.xf_formats] == [
        f.format_key() for f in styles.xf_formats
    ]
    assert [f.format_key() for f in again.dxf_formats] == [
        f.format_key() for f in styles.dxf_formats
    ]
    assert [c.to_argb() for c in again.indexed_colors] == [
        c.to_argb() for c in styles.indexed_colors
    ]


def test_round_trip_of_fresh_table():
    loaded = load_styles(save_styles(Styles()))
    assert len(loaded.xf_formats) == 1
    assert loaded.xf_format(0).is_empty()
    assert loaded.fills[-1].get(Prop.FILL_PATTERN) == FillPattern.GRAY125
    assert loaded.is_indexed_colors_default is True


def test_round_trip_of_written_format():
    original = Styles()
    fmt = Format(
        {
            Prop.FONT_BOLD: True,
            Prop.FONT_SIZE: 11,
            Prop.NUM_FMT_FORMAT_CODE: "0.000",
            Prop.FILL_PATTERN: FillPattern.SOLID,
            Prop.FILL_FG_COLOR: Color.from_argb("FFFF0000"),
            Prop.BORDER_LEFT_STYLE: BorderStyle.THIN,
            Prop.ALIGNMENT_ALIGN_H: HorizontalAlignment.CENTER,
            Prop.ALIGNMENT_WRAP: True,
        }
    )
    original.add_xf_format(fmt)
    loaded = load_styles(save_styles(original)).xf_format(fmt.xf_index)
    assert loaded.get(Prop.FONT_BOLD) is True
    assert loaded.get(Prop.FONT_SIZE) == 11
    assert loaded.get(Prop.NUM_FMT_ID) == fmt.get(Prop.NUM_FMT_ID)
    assert loaded.get(Prop.NUM_FMT_FORMAT_CODE) == "0.000"
    assert loaded.get(Prop.FILL_FG_COLOR) == fmt.get(Prop.FILL_FG_COLOR)
    assert loaded.get(Prop.BORDER_LEFT_STYLE) == BorderStyle.THIN
    assert loaded.get(Prop.ALIGNMENT_ALIGN_H) == HorizontalAlignment.CENTER
    assert loaded.get(Prop.ALIGNMENT_WRAP) is True
    assert loaded.font_index == fmt.font_index
    assert loaded.fill_index == fmt.fill_index


def test_count_mismatch_is_logged(caplog):
    data = (
        b'<styleSheet xmlns="http://schemas.openxmlformats.org/spreadsheetml/2006/main">'
        b'<fonts count="3"><font><b/></font></fonts></styleSheet>'
    )
    with caplog.at_level(logging.WARNING, logger="xlsxparts.styles_reader"):
        styles = load_styles(data)
    assert len(styles.fonts) == 1
    assert any("fonts" in record.getMessage() for record in caplog.records)


def test_empty_stylesheet_gives_empty_table():
    styles = load_styles(b"<styleSheet/>")
    assert styles.xf_formats == []
    assert styles.fonts == []
    assert styles.xf_format(0).is_empty()


def test_malformed_xml_raises():
    with pytest.raises(ET.ParseError):
        load_styles(b"<styleSheet><fonts></styleSheet>")