"""Built-in and custom number formats of a style table."""

from __future__ import annotations

from dataclasses import dataclass

from .formats import Format, Prop

BUILTIN_NUMBER_FORMATS: dict[str, int] = {
    "General": 0,
    "0": 1,
    "0.00": 2,
    "#,##0": 3,
    "#,##0.00": 4,
    "0%": 9,
    "0.00%": 10,
    "0.00E+00": 11,
    "# ?/?": 12,
    "# ??/??": 13,
    "m/d/yy": 14,
    "d-mmm-yy": 15,
    "d-mmm": 16,
    "mmm-yy": 17,
    "h:mm AM/PM": 18,
    "h:mm:ss AM/PM": 19,
    "h:mm": 20,
    "h:mm:ss": 21,
    "m/d/yy h:mm": 22,
    "(#,##0_);(#,##0)": 37,
    "(#,##0_);[Red](#,##0)": 38,
    "(#,##0.00_);(#,##0.00)": 39,
    "(#,##0.00_);[Red](#,##0.00)": 40,
    "mm:ss": 45,
    "[h]:mm:ss": 46,
    "mm:ss.0": 47,
    "##0.0E+0": 48,
    "@": 49,
}

_BUILTIN_BY_ID = {index: code for code, index in BUILTIN_NUMBER_FORMATS.items()}

FIRST_CUSTOM_ID = 176


@dataclass
class NumberFormatData:
    index: int
    code: str


class NumberFormats:
    """Tracks custom number formats and assigns ids and codes to formats."""

    def __init__(self) -> None:
        self._by_id: dict[int, NumberFormatData] = {}
        self._by_code: dict[str, NumberFormatData] = {}
        self.next_custom_id = FIRST_CUSTOM_ID

    def register(self, index: int, code: str) -> NumberFormatData:
        """Record a custom format read from a file."""
        data = NumberFormatData(index, code)
        if index >= self.next_custom_id:
            self.next_custom_id = index + 1
        self._by_id[index] = data
        self._by_code[code] = data
        return data

    def code_for(self, index: int) -> str | None:
        """Return the format code for *index*, custom first, or None if unknown."""
        data = self._by_id.get(index)
        if data is not None:
            return data.code
        return _BUILTIN_BY_ID.get(index)

    def custom_formats(self) -> list[NumberFormatData]:
        """Custom formats in ascending id order."""
        return [self._by_id[i] for i in sorted(self._by_id)]

    def __len__(self) -> int:
        return len(self._by_id)

    def fix(self, fmt: Format) -> None:
        """Give *fmt* a consistent number-format id and code."""
        if not fmt.has_num_fmt_data():
            return
        code = fmt.get(Prop.NUM_FMT_FORMAT_CODE, "")
        if fmt.has(Prop.NUM_FMT_ID) and code:
            return

        if code:
            if code in BUILTIN_NUMBER_FORMATS:
                fmt.set_number_format(BUILTIN_NUMBER_FORMATS[code], code)
            elif code in self._by_code:
                fmt.set_number_format(self._by_code[code].index, code)
            else:
                index = self.next_custom_id
                fmt.set_number_format(index, code)
                data = NumberFormatData(index, code)
                self._by_id[index] = data
                self._by_code[code] = data
                self.next_custom_id += 1
            return

        index = fmt.get(Prop.NUM_FMT_ID, 0)
        found = self.code_for(index)
        fmt.set_number_format(index, found if found is not None else "General")