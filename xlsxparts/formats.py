"""Cell format properties, their enumerations and colours."""

from __future__ import annotations

import re
import xml.etree.ElementTree as ET
from dataclasses import dataclass
from enum import IntEnum
from typing import Any


class Prop(IntEnum):
    """Identifiers of the properties a :class:`Format` can hold."""

    NUM_FMT_ID = 1
    NUM_FMT_FORMAT_CODE = 2

    FONT_SIZE = 3
    FONT_ITALIC = 4
    FONT_STRIKE_OUT = 5
    FONT_COLOR = 6
    FONT_BOLD = 7
    FONT_SCRIPT = 8
    FONT_UNDERLINE = 9
    FONT_OUTLINE = 10
    FONT_SHADOW = 11
    FONT_NAME = 12
    FONT_FAMILY = 13
    FONT_CHARSET = 14
    FONT_SCHEME = 15
    FONT_CONDENSE = 16
    FONT_EXTEND = 17

    BORDER_LEFT_STYLE = 19
    BORDER_RIGHT_STYLE = 20
    BORDER_TOP_STYLE = 21
    BORDER_BOTTOM_STYLE = 22
    BORDER_DIAGONAL_STYLE = 23
    BORDER_LEFT_COLOR = 24
    BORDER_RIGHT_COLOR = 25
    BORDER_TOP_COLOR = 26
    BORDER_BOTTOM_COLOR = 27
    BORDER_DIAGONAL_COLOR = 28
    BORDER_DIAGONAL_TYPE = 29

    FILL_PATTERN = 31
    FILL_BG_COLOR = 32
    FILL_FG_COLOR = 33

    ALIGNMENT_ALIGN_H = 35
    ALIGNMENT_ALIGN_V = 36
    ALIGNMENT_WRAP = 37
    ALIGNMENT_ROTATION = 38
    ALIGNMENT_INDENT = 39
    ALIGNMENT_SHRINK_TO_FIT = 40

    PROTECTION_LOCKED = 42
    PROTECTION_HIDDEN = 43


def _props_between(first: Prop, last: Prop) -> tuple[Prop, ...]:
    return tuple(p for p in Prop if first <= p <= last)


NUM_FMT_PROPS = _props_between(Prop.NUM_FMT_ID, Prop.NUM_FMT_FORMAT_CODE)
FONT_PROPS = _props_between(Prop.FONT_SIZE, Prop.FONT_EXTEND)
BORDER_PROPS = _props_between(Prop.BORDER_LEFT_STYLE, Prop.BORDER_DIAGONAL_TYPE)
FILL_PROPS = _props_between(Prop.FILL_PATTERN, Prop.FILL_FG_COLOR)
ALIGNMENT_PROPS = _props_between(Prop.ALIGNMENT_ALIGN_H, Prop.ALIGNMENT_SHRINK_TO_FIT)
PROTECTION_PROPS = _props_between(Prop.PROTECTION_LOCKED, Prop.PROTECTION_HIDDEN)


class FillPattern(IntEnum):
    NONE = 0
    SOLID = 1
    MEDIUM_GRAY = 2
    DARK_GRAY = 3
    LIGHT_GRAY = 4
    DARK_HORIZONTAL = 5
    DARK_VERTICAL = 6
    DARK_DOWN = 7
    DARK_UP = 8
    DARK_GRID = 9
    DARK_TRELLIS = 10
    LIGHT_HORIZONTAL = 11
    LIGHT_VERTICAL = 12
    LIGHT_DOWN = 13
    LIGHT_UP = 14
    LIGHT_TRELLIS = 15
    GRAY125 = 16
    GRAY0625 = 17
    LIGHT_GRID = 18


class BorderStyle(IntEnum):
    NONE = 0
    THIN = 1
    MEDIUM = 2
    DASHED = 3
    DOTTED = 4
    THICK = 5
    DOUBLE = 6
    HAIR = 7
    MEDIUM_DASHED = 8
    DASH_DOT = 9
    MEDIUM_DASH_DOT = 10
    DASH_DOT_DOT = 11
    MEDIUM_DASH_DOT_DOT = 12
    SLANT_DASH_DOT = 13


class FontUnderline(IntEnum):
    NONE = 0
    SINGLE = 1
    DOUBLE = 2
    SINGLE_ACCOUNTING = 3
    DOUBLE_ACCOUNTING = 4


class FontScript(IntEnum):
    NORMAL = 0
    SUPER = 1
    SUB = 2


class HorizontalAlignment(IntEnum):
    GENERAL = 0
    LEFT = 1
    CENTER = 2
    RIGHT = 3
    FILL = 4
    JUSTIFY = 5
    MERGE = 6
    DISTRIBUTED = 7


class VerticalAlignment(IntEnum):
    TOP = 0
    CENTER = 1
    BOTTOM = 2
    JUSTIFY = 3
    DISTRIBUTED = 4


class DiagonalBorderType(IntEnum):
    NONE = 0
    UP = 1
    DOWN = 2
    BOTH = 3


_ARGB = re.compile(r"[0-9A-Fa-f]{8}")


@dataclass(frozen=True)
class Color:
    """A spreadsheet colour: explicit ARGB, theme slot, palette index or automatic."""

    rgb: str | None = None
    theme: int | None = None
    tint: float | None = None
    indexed: int | None = None
    auto: bool = False

    @classmethod
    def from_element(cls, element: ET.Element) -> Color:
        """Read a colour from an element such as ``<color rgb="FF000000"/>``."""
        attrs = element.attrib
        rgb = attrs.get("rgb")
        return cls(
            rgb=cls.from_argb(rgb).rgb if rgb else None,
            theme=int(attrs["theme"]) if "theme" in attrs else None,
            tint=float(attrs["tint"]) if "tint" in attrs else None,
            indexed=int(attrs["indexed"]) if "indexed" in attrs else None,
            auto=attrs.get("auto") in ("1", "true"),
        )

    def to_element(self, parent: ET.Element, tag: str = "color") -> ET.Element | None:
        """Append this colour to *parent* as *tag*; nothing is written for an invalid colour."""
        if self.is_invalid():
            return None
        element = ET.SubElement(parent, tag)
        if self.auto:
            element.set("auto", "1")
        if self.rgb is not None:
            element.set("rgb", self.rgb)
        if self.indexed is not None:
            element.set("indexed", str(self.indexed))
        if self.theme is not None:
            element.set("theme", str(self.theme))
        if self.tint is not None:
            element.set("tint", repr(self.tint))
        return element

    def is_invalid(self) -> bool:
        return self.rgb is None and self.theme is None and self.indexed is None and not self.auto

    def to_argb(self) -> str:
        """Return the colour as an eight-digit upper-case ARGB string."""
        if self.rgb is None:
            raise ValueError("colour has no explicit RGB value")
        return self.rgb

    @classmethod
    def from_argb(cls, text: str) -> Color:
        """Build a colour from ``AARRGGBB`` or ``RRGGBB`` (opaque) hex text."""
        value = text.lstrip("#")
        if len(value) == 6:
            value = "FF" + value
        if not _ARGB.fullmatch(value):
            raise ValueError(f"not an ARGB colour: {text!r}")
        return cls(rgb=value.upper())


def _key(props: dict[Prop, Any], group: tuple[Prop, ...] | None = None) -> tuple:
    return tuple(
        sorted((int(p), v) for p, v in props.items() if group is None or p in group)
    )


class Format:
    """A set of cell format properties plus the indices assigned by a style table."""

    def __init__(self, properties: dict[Prop, Any] | None = None) -> None:
        self._props: dict[Prop, Any] = {}
        self.font_index: int | None = None
        self.fill_index: int | None = None
        self.border_index: int | None = None
        self.xf_index: int | None = None
        self.dxf_index: int | None = None
        for prop, value in (properties or {}).items():
            self.set(prop, value)

    def has(self, prop: Prop) -> bool:
        return prop in self._props

    def get(self, prop: Prop, default: Any = None) -> Any:
        return self._props.get(prop, default)

    def set(self, prop: Prop, value: Any) -> None:
        """Set *prop*; a value of None removes it."""
        prop = Prop(prop)
        if value is None:
            self.remove(prop)
            return
        if self._props.get(prop, _MISSING) == value:
            return
        self._props[prop] = value
        self._invalidate(prop)

    def remove(self, prop: Prop) -> None:
        prop = Prop(prop)
        if prop in self._props:
            del self._props[prop]
            self._invalidate(prop)

    def _invalidate(self, prop: Prop) -> None:
        if prop in FONT_PROPS:
            self.font_index = None
        elif prop in FILL_PROPS:
            self.fill_index = None
        elif prop in BORDER_PROPS:
            self.border_index = None
        self.xf_index = None
        self.dxf_index = None

    def _has_any(self, group: tuple[Prop, ...]) -> bool:
        return any(p in self._props for p in group)

    def is_empty(self) -> bool:
        return not self._props

    def has_num_fmt_data(self) -> bool:
        return self._has_any(NUM_FMT_PROPS)

    def has_font_data(self) -> bool:
        return self._has_any(FONT_PROPS)

    def has_fill_data(self) -> bool:
        return self._has_any(FILL_PROPS)

    def has_border_data(self) -> bool:
        return self._has_any(BORDER_PROPS)

    def has_alignment_data(self) -> bool:
        return self._has_any(ALIGNMENT_PROPS)

    def has_protection_data(self) -> bool:
        return self._has_any(PROTECTION_PROPS)

    def font_key(self) -> tuple:
        return _key(self._props, FONT_PROPS)

    def fill_key(self) -> tuple:
        return _key(self._props, FILL_PROPS)

    def border_key(self) -> tuple:
        return _key(self._props, BORDER_PROPS)

    def format_key(self) -> tuple:
        return _key(self._props)

    def set_number_format(self, index: int, code: str) -> None:
        self.set(Prop.NUM_FMT_ID, index)
        self.set(Prop.NUM_FMT_FORMAT_CODE, code)

    def copy(self) -> Format:
        other = Format()
        other._props = dict(self._props)
        other.font_index = self.font_index
        other.fill_index = self.fill_index
        other.border_index = self.border_index
        other.xf_index = self.xf_index
        other.dxf_index = self.dxf_index
        return other

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Format):
            return NotImplemented
        return self.format_key() == other.format_key()

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        items = ", ".join(f"{p.name}={v!r}" for p, v in sorted(self._props.items()))
        return f"Format({items})"


_MISSING = object()