# xlsxparts

`xlsxparts` reads and writes three of the XML parts found inside an `.xlsx`
package: the shared string table (`sharedStrings.xml`), the style table
(`styles.xml`) and the theme (`theme1.xml`). It also has small helpers for
sheet names, relationship paths and Excel date serial numbers. It uses only
the standard library.

## Installation

```
pip install xlsxparts
```

To run the tests:

```
pip install "xlsxparts[test]"
pytest
```

## Shared strings

`xlsxparts.sharedstrings.SharedStrings` keeps the unique strings of a workbook
with reference counts. Strings may be plain `str` values or
`xlsxparts.richstring.RichString` objects made of fragments, each with its own
font `Format`.

```python
from xlsxparts.sharedstrings import SharedStrings
from xlsxparts.richstring import RichString
from xlsxparts.formats import Format, Prop

table = SharedStrings()
table.add_shared_string("hello")           # index 0
bold = Format()
bold.set(Prop.FONT_BOLD, True)
rich = RichString()
rich.add_fragment("big ", bold)
rich.add_fragment("news", Format())
table.add_shared_string(rich)              # index 1

xml = table.save_to_xml_data()             # bytes of sharedStrings.xml
again = SharedStrings()
again.load_from_xml_data(xml)
print(again.get_shared_string(0).to_plain_string())   # hello
```

- `get_shared_string_index` returns `None` for a string that is not in the table.
- `get_shared_string` returns a null `RichString` for an index out of range.
- `inc_ref_by_string_index` raises `IndexError` for an invalid index.
- If the loaded `uniqueCount` does not match the number of `<si>` items,
  `load_from_xml_data` raises `SharedStringError`.

## Formats

`xlsxparts.formats.Format` holds cell format properties keyed by the `Prop`
enumeration, together with the font, fill, border, cell-format and
differential-format indices a style table assigns. The module also defines
`FillPattern`, `BorderStyle`, `FontUnderline`, `FontScript`,
`HorizontalAlignment`, `VerticalAlignment`, `DiagonalBorderType` and `Color`
(ARGB, theme, indexed or automatic colours).

## Styles

```python
from xlsxparts.styles import Styles
from xlsxparts.styles_writer import save_styles
from xlsxparts.styles_reader import load_styles
from xlsxparts.formats import Format, Prop, FillPattern

styles = Styles()                  # starts with the default format and fills
fmt = Format()
fmt.set(Prop.FILL_PATTERN, FillPattern.SOLID)
styles.add_xf_format(fmt)          # assigns fmt.xf_index, fmt.fill_index

xml = save_styles(styles)          # bytes of styles.xml
loaded = load_styles(xml)
print(loaded.xf_format(1).get(Prop.FILL_PATTERN) == FillPattern.SOLID)   # True
```

- `Styles(new_from_scratch=False)` gives an empty table, as used for loading.
- `add_dxf_format` and `dxf_format` handle differential formats.
- `color_by_index` looks up the indexed palette, falling back to the default
  64-colour palette when none was loaded.
- `load_styles` raises `xml.etree.ElementTree.ParseError` on malformed XML;
  count mismatches and bad font/fill/border ids are reported through the
  `logging` module.

The lower-level pieces are usable on their own:

- `xlsxparts.fonts`: `write_font` and `read_font` for `<font>` elements.
- `xlsxparts.fills_borders`: `write_fill`, `read_fill`, `write_border`,
  `read_border`.
- `xlsxparts.style_names`: conversions between the enumerations and their XML
  names, and `default_indexed_colors`.
- `xlsxparts.numformats.NumberFormats`: assigns built-in or custom number
  format ids; custom ids start at 176.

## Theme and other parts

`xlsxparts.theme.Theme` writes the default Office theme
(`default_theme_xml()`) until XML is loaded into it.
`xlsxparts.simplefile.SimpleXmlFile` keeps any part as raw bytes and writes it
back unchanged.

## Utilities

`xlsxparts.utility` provides:

- `create_safe_sheet_name`, `escape_sheet_name` and `unescape_sheet_name`
- `get_rel_file_path` and `split_path`
- `parse_xsd_boolean` and `is_space_reserve_needed`
- `datetime_to_number`, `time_to_number` and `datetime_from_number`, which
  convert to and from Excel's 1900 or 1904 date systems

## What it does not do

This package works on individual parts only. It does not open or write whole
`.xlsx` files (no zip container, content types or relationships), has no
workbook, worksheet, cell, drawing or chart model, and offers no command-line
tool. Rich strings cannot be built from or converted to HTML.