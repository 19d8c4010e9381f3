"""The style table of a workbook: fonts, fills, borders and cell formats."""

from __future__ import annotations

from .formats import Color, FillPattern, Format, Prop
from .numformats import NumberFormats
from .style_names import default_indexed_colors


def _register_part(
    fmt: Format,
    has_data: bool,
    key: tuple,
    items: list[Format],
    table: dict[tuple, Format],
    index_attr: str,
) -> None:
    """Give *fmt* the index of its part and add the part if it is new.

    A format without data for the part still counts as a valid part, since
    all its properties then have their default values.
    """
    existing = table.get(key)
    if has_data and getattr(fmt, index_attr) is None:
        if existing is None:
            index = len(items)
        else:
            index = getattr(existing, index_attr) or 0
        setattr(fmt, index_attr, index)
    if existing is None:
        items.append(fmt)
        table[key] = fmt


class Styles:
    """Fonts, fills, borders, number formats and the cell and differential formats.

    A table made from scratch starts with the default format and the two
    fills every workbook has; a table meant for loading starts empty.
    """

    def __init__(self, new_from_scratch: bool = True) -> None:
        self.num_formats = NumberFormats()
        self.fonts: list[Format] = []
        self.fills: list[Format] = []
        self.borders: list[Format] = []
        self.font_table: dict[tuple, Format] = {}
        self.fill_table: dict[tuple, Format] = {}
        self.border_table: dict[tuple, Format] = {}
        self.xf_formats: list[Format] = []
        self.xf_table: dict[tuple, Format] = {}
        self.dxf_formats: list[Format] = []
        self.dxf_table: dict[tuple, Format] = {}
        self.indexed_colors: list[Color] = []
        self.is_indexed_colors_default = True
        self.empty_format_added = False

        if new_from_scratch:
            self.add_xf_format(Format())
            gray = Format({Prop.FILL_PATTERN: FillPattern.GRAY125})
            self.fills.append(gray)
            self.fill_table[gray.fill_key()] = gray

    def add_xf_format(self, fmt: Format, force: bool = False) -> None:
        """Assign font, fill, border and cell-format indices to *fmt*.

        With *force* the format is appended even when an equal one is
        already present, as happens when reading files with duplicates.
        """
        if fmt.is_empty():
            if self.empty_format_added and not force:
                return
            self.empty_format_added = True

        if fmt.has_num_fmt_data() and not fmt.has(Prop.NUM_FMT_ID):
            self.num_formats.fix(fmt)

        _register_part(
            fmt, fmt.has_font_data(), fmt.font_key(), self.fonts, self.font_table, "font_index"
        )
        _register_part(
            fmt, fmt.has_fill_data(), fmt.fill_key(), self.fills, self.fill_table, "fill_index"
        )
        _register_part(
            fmt,
            fmt.has_border_data(),
            fmt.border_key(),
            self.borders,
            self.border_table,
            "border_index",
        )

        key = fmt.format_key()
        existing = self.xf_table.get(key)
        if not fmt.is_empty() and fmt.xf_index is None:
            if existing is None:
                fmt.xf_index = len(self.xf_formats)
            else:
                fmt.xf_index = existing.xf_index or 0
        if existing is None or force:
            self.xf_formats.append(fmt)
            self.xf_table[key] = fmt

    def xf_format(self, idx: int) -> Format:
        """The cell format at *idx*, or an empty format if there is none."""
        if 0 <= idx < len(self.xf_formats):
            return self.xf_formats[idx]
        return Format()

    def add_dxf_format(self, fmt: Format, force: bool = False) -> None:
        """Assign a differential-format index to *fmt*, adding it when new or forced."""
        if fmt.has_num_fmt_data():
            self.num_formats.fix(fmt)

        key = fmt.format_key()
        existing = self.dxf_table.get(key)
        if not fmt.is_empty() and fmt.dxf_index is None:
            if existing is None:
                fmt.dxf_index = len(self.dxf_formats)
            else:
                fmt.dxf_index = existing.dxf_index or 0
        if existing is None or force:
            self.dxf_formats.append(fmt)
            self.dxf_table[key] = fmt

    def dxf_format(self, idx: int) -> Format:
        """The differential format at *idx*, or an empty format if there is none."""
        if 0 <= idx < len(self.dxf_formats):
            return self.dxf_formats[idx]
        return Format()

    def color_by_index(self, idx: int) -> Color | None:
        """The palette colour at *idx*, or None when *idx* is out of range.

        When no palette was loaded the default one is used.
        """
        if not self.indexed_colors:
            self.indexed_colors = default_indexed_colors()
            self.is_indexed_colors_default = True
        if 0 <= idx < len(self.indexed_colors):
            return self.indexed_colors[idx]
        return None