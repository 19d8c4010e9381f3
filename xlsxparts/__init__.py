"""Shared strings, styles and theme parts of .xlsx workbooks, with related helpers."""

__version__ = "0.1.0"

__all__ = [
    "fills_borders",
    "fonts",
    "formats",
    "numformats",
    "richstring",
    "sharedstrings",
    "simplefile",
    "style_names",
    "styles",
    "styles_reader",
    "styles_writer",
    "theme",
    "utility",
]