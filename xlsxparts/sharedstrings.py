"""The shared string table of a workbook."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from collections.abc import Iterator
from dataclasses import dataclass

from .formats import Color, FontScript, FontUnderline, Format, Prop
from .richstring import RichString
from .utility import is_space_reserve_needed

_MAIN_NS = "http://schemas.openxmlformats.org/spreadsheetml/2006/main"
_XML_DECLARATION = b'<?xml version="1.0" encoding="UTF-8" standalone="yes"?>'

_UNDERLINE_NAMES = {
    FontUnderline.DOUBLE: "double",
    FontUnderline.SINGLE_ACCOUNTING: "singleAccounting",
    FontUnderline.DOUBLE_ACCOUNTING: "doubleAccounting",
}
_UNDERLINE_BY_NAME = {name: u for u, name in _UNDERLINE_NAMES.items()}


class SharedStringError(ValueError):
    """Raised when a shared string part is inconsistent."""


@dataclass
class _Entry:
    index: int
    count: int = 1


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


def _as_rich(string: str | RichString) -> RichString:
    return string if isinstance(string, RichString) else RichString(string)


class SharedStrings:
    """Unique strings of a workbook, with reference counts.

    A file read from disk may hold duplicated items; the list then grows
    longer than the lookup table, and the indices of the list stay valid.
    """

    def __init__(self) -> None:
        self._table: dict[RichString, _Entry] = {}
        self._list: list[RichString] = []
        self.count = 0

    def __len__(self) -> int:
        return len(self._list)

    def __iter__(self) -> Iterator[RichString]:
        return iter(self._list)

    def is_empty(self) -> bool:
        return not self._list

    def add_shared_string(self, string: str | RichString) -> int:
        """Add a reference to *string* and return its index."""
        rich = _as_rich(string)
        self.count += 1
        entry = self._table.get(rich)
        if entry is not None:
            entry.count += 1
            return entry.index
        index = len(self._list)
        self._table[rich] = _Entry(index)
        self._list.append(rich)
        return index

    def remove_shared_string(self, string: str | RichString) -> None:
        """Drop one reference to *string*; the item goes when none is left."""
        rich = _as_rich(string)
        entry = self._table.get(rich)
        if entry is None:
            return
        self.count -= 1
        entry.count -= 1
        if entry.count <= 0:
            for later in self._list[entry.index + 1:]:
                later_entry = self._table.get(later)
                if later_entry is not None:
                    later_entry.index -= 1
            del self._list[entry.index]
            del self._table[rich]

    def inc_ref_by_string_index(self, idx: int) -> None:
        """Add one more reference to the string at *idx*."""
        if not 0 <= idx < len(self._list):
            raise IndexError(f"invalid shared string index: {idx}")
        self.add_shared_string(self._list[idx])

    def get_shared_string_index(self, string: str | RichString) -> int | None:
        """Index of *string*, or None if it is not in the table."""
        entry = self._table.get(_as_rich(string))
        return entry.index if entry is not None else None

    def get_shared_string(self, index: int) -> RichString:
        """The string at *index*, or a null string if there is none."""
        if 0 <= index < len(self._list):
            return self._list[index]
        return RichString()

    def get_shared_strings(self) -> list[RichString]:
        return list(self._list)

    # Writing

    @staticmethod
    def _write_rpr(parent: ET.Element, fmt: Format) -> None:
        if not fmt.has_font_data():
            return
        for prop, tag in (
            (Prop.FONT_BOLD, "b"),
            (Prop.FONT_ITALIC, "i"),
            (Prop.FONT_STRIKE_OUT, "strike"),
            (Prop.FONT_OUTLINE, "outline"),
            (Prop.FONT_SHADOW, "shadow"),
        ):
            if fmt.get(prop):
                ET.SubElement(parent, tag)
        if fmt.has(Prop.FONT_UNDERLINE):
            underline = FontUnderline(fmt.get(Prop.FONT_UNDERLINE))
            if underline != FontUnderline.NONE:
                element = ET.SubElement(parent, "u")
                name = _UNDERLINE_NAMES.get(underline)
                if name is not None:
                    element.set("val", name)
        if fmt.has(Prop.FONT_SCRIPT):
            script = FontScript(fmt.get(Prop.FONT_SCRIPT))
            if script != FontScript.NORMAL:
                value = "superscript" if script == FontScript.SUPER else "subscript"
                ET.SubElement(parent, "vertAlign", val=value)
        if fmt.has(Prop.FONT_SIZE):
            ET.SubElement(parent, "sz", val=_number(fmt.get(Prop.FONT_SIZE)))
        color = fmt.get(Prop.FONT_COLOR)
        if isinstance(color, Color):
            color.to_element(parent, "color")
        name = fmt.get(Prop.FONT_NAME, "")
        if name:
            ET.SubElement(parent, "rFont", val=name)
        if fmt.has(Prop.FONT_FAMILY):
            ET.SubElement(parent, "family", val=_number(fmt.get(Prop.FONT_FAMILY)))
        if fmt.has(Prop.FONT_SCHEME):
            ET.SubElement(parent, "scheme", val=str(fmt.get(Prop.FONT_SCHEME)))

    @staticmethod
    def _write_text(parent: ET.Element, text: str) -> None:
        element = ET.SubElement(parent, "t")
        if is_space_reserve_needed(text):
            element.set("xml:space", "preserve")
        element.text = text

    def save_to_xml_data(self) -> bytes:
        """Serialise the table as the sharedStrings.xml part."""
        root = ET.Element("sst")
        root.set("xmlns", _MAIN_NS)
        root.set("count", str(self.count))
        root.set("uniqueCount", str(len(self._list)))
        for string in self._list:
            si = ET.SubElement(root, "si")
            if string.is_rich_string():
                for text, fmt in string.fragments():
                    run = ET.SubElement(si, "r")
                    if fmt.has_font_data():
                        self._write_rpr(ET.SubElement(run, "rPr"), fmt)
                    self._write_text(run, text)
            else:
                self._write_text(si, string.to_plain_string())
        return _XML_DECLARATION + ET.tostring(root, encoding="unicode").encode("utf-8")

    # Reading

    @staticmethod
    def _read_rpr(element: ET.Element) -> Format:
        fmt = Format()
        for child in element.iter():
            if child is element:
                continue
            name = _local(child.tag)
            val = child.get("val")
            if name == "rFont":
                fmt.set(Prop.FONT_NAME, val or "")
            elif name == "charset":
                fmt.set(Prop.FONT_CHARSET, _to_int(val))
            elif name == "family":
                fmt.set(Prop.FONT_FAMILY, _to_int(val))
            elif name == "b":
                fmt.set(Prop.FONT_BOLD, True)
            elif name == "i":
                fmt.set(Prop.FONT_ITALIC, True)
            elif name == "strike":
                fmt.set(Prop.FONT_STRIKE_OUT, True)
            elif name == "outline":
                fmt.set(Prop.FONT_OUTLINE, True)
            elif name == "shadow":
                fmt.set(Prop.FONT_SHADOW, True)
            elif name == "condense":
                fmt.set(Prop.FONT_CONDENSE, _to_int(val))
            elif name == "extend":
                fmt.set(Prop.FONT_EXTEND, _to_int(val))
            elif name == "color":
                fmt.set(Prop.FONT_COLOR, Color.from_element(child))
            elif name == "sz":
                fmt.set(Prop.FONT_SIZE, _to_int(val))
            elif name == "u":
                fmt.set(
                    Prop.FONT_UNDERLINE,
                    _UNDERLINE_BY_NAME.get(val or "", FontUnderline.SINGLE),
                )
            elif name == "vertAlign":
                if val == "superscript":
                    fmt.set(Prop.FONT_SCRIPT, FontScript.SUPER)
                elif val == "subscript":
                    fmt.set(Prop.FONT_SCRIPT, FontScript.SUB)
            elif name == "scheme":
                fmt.set(Prop.FONT_SCHEME, val or "")
        return fmt

    @classmethod
    def _read_run(cls, element: ET.Element, rich: RichString) -> None:
        text = ""
        fmt = Format()
        for child in element:
            name = _local(child.tag)
            if name == "rPr":
                fmt = cls._read_rpr(child)
            elif name == "t":
                text = "".join(child.itertext())
        rich.add_fragment(text, fmt)

    @classmethod
    def _read_parts(cls, element: ET.Element, rich: RichString) -> None:
        for child in element:
            name = _local(child.tag)
            if name == "r":
                cls._read_run(child, rich)
            elif name == "t":
                rich.add_fragment("".join(child.itertext()), Format())
            else:
                cls._read_parts(child, rich)

    def load_from_xml_data(self, data: bytes) -> None:
        """Read the sharedStrings.xml part.

        Raises SharedStringError when the number of items differs from the
        declared ``uniqueCount``.
        """
        root = ET.fromstring(data)
        expected = 0
        has_unique_count = True
        for element in root.iter():
            name = _local(element.tag)
            if name == "sst":
                has_unique_count = "uniqueCount" in element.attrib
                if has_unique_count:
                    expected = _to_int(element.get("uniqueCount"))
            elif name == "si":
                rich = RichString()
                self._read_parts(element, rich)
                self._table[rich] = _Entry(len(self._list), 0)
                self._list.append(rich)
        if has_unique_count and len(self._list) != expected:
            raise SharedStringError(
                f"shared string count mismatch: declared {expected}, found {len(self._list)}"
            )