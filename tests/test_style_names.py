import pytest

from xlsxparts.formats import (
    BorderStyle,
    FillPattern,
    HorizontalAlignment,
    VerticalAlignment,
)
from xlsxparts.style_names import (
    border_style_from_name,
    border_style_name,
    default_indexed_colors,
    horizontal_alignment_from_name,
    horizontal_alignment_name,
    pattern_from_name,
    pattern_name,
    vertical_alignment_from_name,
    vertical_alignment_name,
)


@pytest.mark.parametrize("pattern", list(FillPattern))
def test_pattern_round_trip(pattern):
    assert pattern_from_name(pattern_name(pattern)) is pattern


def test_pattern_known_names():
    assert pattern_name(FillPattern.GRAY125) == "gray125"
    assert pattern_name(FillPattern.SOLID) == "solid"


def test_unknown_pattern_is_none():
    assert pattern_from_name("stripes") is FillPattern.NONE


@pytest.mark.parametrize("style", list(BorderStyle))
def test_border_round_trip(style):
    assert border_style_from_name(border_style_name(style)) is style


def test_border_names_and_unknown():
    assert border_style_name(BorderStyle.SLANT_DASH_DOT) == "slantDashDot"
    assert border_style_from_name("wavy") is None


@pytest.mark.parametrize(
    "name", ["left", "center", "right", "justify", "centerContinuous", "distributed"]
)
def test_horizontal_read_names_round_trip(name):
    assert horizontal_alignment_name(horizontal_alignment_from_name(name)) == name


def test_horizontal_merge_and_general():
    assert horizontal_alignment_name(HorizontalAlignment.MERGE) == "centerContinuous"
    assert horizontal_alignment_name(HorizontalAlignment.GENERAL) is None


def test_horizontal_fill_written_but_not_read():
    assert horizontal_alignment_name(HorizontalAlignment.FILL) == "fill"
    assert horizontal_alignment_from_name("fill") is None


@pytest.mark.parametrize(
    "alignment",
    [
        VerticalAlignment.TOP,
        VerticalAlignment.CENTER,
        VerticalAlignment.JUSTIFY,
        VerticalAlignment.DISTRIBUTED,
    ],
)
def test_vertical_round_trip(alignment):
    assert vertical_alignment_from_name(vertical_alignment_name(alignment)) is alignment


def test_vertical_bottom_has_no_name():
    assert vertical_alignment_name(VerticalAlignment.BOTTOM) is None
    assert vertical_alignment_from_name("bottom") is None


def test_default_indexed_colors():
    colors = default_indexed_colors()
    assert len(colors) == 64
    assert colors[0].rgb.endswith("000000")
    assert colors[1].rgb.endswith("FFFFFF")
    assert colors[0] == colors[8]
    assert all(not c.is_invalid() for c in colors)


def test_default_indexed_colors_fresh_list():
    first = default_indexed_colors()
    first.clear()
    assert len(default_indexed_colors()) == 64