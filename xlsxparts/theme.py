"""The theme part of a workbook, with the default Office theme built in."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from functools import lru_cache
from typing import BinaryIO

_DRAWING_NS = "http://schemas.openxmlformats.org/drawingml/2006/main"
_XML_DECLARATION = b'<?xml version="1.0" encoding="UTF-8" standalone="yes"?>\n'

_SCHEME_COLORS = (
    ("a:dk2", "1F497D"),
    ("a:lt2", "EEECE1"),
    ("a:accent1", "4F81BD"),
    ("a:accent2", "C0504D"),
    ("a:accent3", "9BBB59"),
    ("a:accent4", "8064A2"),
    ("a:accent5", "4BACC6"),
    ("a:accent6", "F79646"),
    ("a:hlink", "0000FF"),
    ("a:folHlink", "800080"),
)

_COMMON_SCRIPTS_HEAD = (
    ("Jpan", "\uff2d\uff33 \uff30\u30b4\u30b7\u30c3\u30af"),
    ("Hang", "\ub9d1\uc740 \uace0\ub515"),
    ("Hans", "\u5b8b\u4f53"),
    ("Hant", "\u65b0\u7d30\u660e\u9ad4"),
)

_COMMON_SCRIPTS_MIDDLE = (
    ("Knda", "Tunga"),
    ("Guru", "Raavi"),
    ("Cans", "Euphemia"),
    ("Cher", "Plantagenet Cherokee"),
    ("Yiii", "Microsoft Yi Baiti"),
    ("Tibt", "Microsoft Himalaya"),
    ("Thaa", "MV Boli"),
    ("Deva", "Mangal"),
    ("Telu", "Gautami"),
    ("Taml", "Latha"),
    ("Syrc", "Estrangelo Edessa"),
    ("Orya", "Kalinga"),
    ("Mlym", "Kartika"),
    ("Laoo", "DokChampa"),
    ("Sinh", "Iskoola Pota"),
    ("Mong", "Mongolian Baiti"),
)


def _script_fonts(western: str, khmer: str) -> tuple[tuple[str, str], ...]:
    return (
        *_COMMON_SCRIPTS_HEAD,
        ("Arab", western),
        ("Hebr", western),
        ("Thai", "Tahoma"),
        ("Ethi", "Nyala"),
        ("Beng", "Vrinda"),
        ("Gujr", "Shruti"),
        ("Khmr", khmer),
        *_COMMON_SCRIPTS_MIDDLE,
        ("Viet", western),
        ("Uigh", "Microsoft Uighur"),
    )


def _sub(parent: ET.Element, tag: str, **attrs: str) -> ET.Element:
    element = ET.SubElement(parent, tag)
    for name, value in attrs.items():
        element.set(name, value)
    return element


def _scheme_color(parent: ET.Element, *mods: tuple[str, str]) -> None:
    color = _sub(parent, "a:schemeClr", val="phClr")
    for tag, value in mods:
        _sub(color, f"a:{tag}", val=value)


def _solid_fill(parent: ET.Element, *mods: tuple[str, str]) -> None:
    _scheme_color(_sub(parent, "a:solidFill"), *mods)


def _gradient(parent: ET.Element, stops: tuple) -> ET.Element:
    grad = _sub(parent, "a:gradFill", rotWithShape="1")
    gs_list = _sub(grad, "a:gsLst")
    for pos, mods in stops:
        _scheme_color(_sub(gs_list, "a:gs", pos=pos), *mods)
    return grad


def _font_block(parent: ET.Element, tag: str, latin: str, western: str, khmer: str) -> None:
    block = _sub(parent, tag)
    _sub(block, "a:latin", typeface=latin)
    _sub(block, "a:ea", typeface="")
    _sub(block, "a:cs", typeface="")
    for script, typeface in _script_fonts(western, khmer):
        _sub(block, "a:font", script=script, typeface=typeface)


def _line(parent: ET.Element, width: str, *mods: tuple[str, str]) -> None:
    line = _sub(parent, "a:ln", w=width, cap="flat", cmpd="sng", algn="ctr")
    _solid_fill(line, *mods)
    _sub(line, "a:prstDash", val="solid")


def _effect(parent: ET.Element, dist: str, alpha: str) -> ET.Element:
    style = _sub(parent, "a:effectStyle")
    effects = _sub(style, "a:effectLst")
    shadow = _sub(
        effects, "a:outerShdw", blurRad="40000", dist=dist, dir="5400000", rotWithShape="0"
    )
    color = _sub(shadow, "a:srgbClr", val="000000")
    _sub(color, "a:alpha", val=alpha)
    return style


def _build_default_theme() -> ET.Element:
    root = ET.Element("a:theme")
    root.set("xmlns:a", _DRAWING_NS)
    root.set("name", "Office \u4e3b\u9898")
    elements = _sub(root, "a:themeElements")

    colors = _sub(elements, "a:clrScheme", name="Office")
    _sub(_sub(colors, "a:dk1"), "a:sysClr", val="windowText", lastClr="000000")
    _sub(_sub(colors, "a:lt1"), "a:sysClr", val="window", lastClr="FFFFFF")
    for tag, rgb in _SCHEME_COLORS:
        _sub(_sub(colors, tag), "a:srgbClr", val=rgb)

    fonts = _sub(elements, "a:fontScheme", name="Office")
    _font_block(fonts, "a:majorFont", "Cambria", "Times New Roman", "MoolBoran")
    _font_block(fonts, "a:minorFont", "Calibri", "Arial", "DaunPenh")

    fmt = _sub(elements, "a:fmtScheme", name="Office")

    fills = _sub(fmt, "a:fillStyleLst")
    _solid_fill(fills)
    grad = _gradient(fills, (
        ("0", (("tint", "50000"), ("satMod", "300000"))),
        ("35000", (("tint", "37000"), ("satMod", "300000"))),
        ("100000", (("tint", "15000"), ("satMod", "350000"))),
    ))
    _sub(grad, "a:lin", ang="16200000", scaled="1")
    grad = _gradient(fills, (
        ("0", (("shade", "51000"), ("satMod", "130000"))),
        ("80000", (("shade", "93000"), ("satMod", "130000"))),
        ("100000", (("shade", "94000"), ("satMod", "135000"))),
    ))
    _sub(grad, "a:lin", ang="16200000", scaled="0")

    lines = _sub(fmt, "a:lnStyleLst")
    _line(lines, "9525", ("shade", "95000"), ("satMod", "105000"))
    _line(lines, "25400")
    _line(lines, "38100")

    effects = _sub(fmt, "a:effectStyleLst")
    _effect(effects, "20000", "38000")
    _effect(effects, "23000", "35000")
    style = _effect(effects, "23000", "35000")
    scene = _sub(style, "a:scene3d")
    camera = _sub(scene, "a:camera", prst="orthographicFront")
    _sub(camera, "a:rot", lat="0", lon="0", rev="0")
    rig = _sub(scene, "a:lightRig", rig="threePt", dir="t")
    _sub(rig, "a:rot", lat="0", lon="0", rev="1200000")
    _sub(_sub(style, "a:sp3d"), "a:bevelT", w="63500", h="25400")

    backgrounds = _sub(fmt, "a:bgFillStyleLst")
    _solid_fill(backgrounds)
    grad = _gradient(backgrounds, (
        ("0", (("tint", "40000"), ("satMod", "350000"))),
        ("40000", (("tint", "45000"), ("shade", "99000"), ("satMod", "350000"))),
        ("100000", (("shade", "20000"), ("satMod", "255000"))),
    ))
    path = _sub(grad, "a:path", path="circle")
    _sub(path, "a:fillToRect", l="50000", t="-80000", r="50000", b="180000")
    grad = _gradient(backgrounds, (
        ("0", (("tint", "80000"), ("satMod", "300000"))),
        ("100000", (("shade", "30000"), ("satMod", "200000"))),
    ))
    path = _sub(grad, "a:path", path="circle")
    _sub(path, "a:fillToRect", l="50000", t="50000", r="50000", b="50000")

    _sub(root, "a:objectDefaults")
    _sub(root, "a:extraClrSchemeLst")
    return root


@lru_cache(maxsize=1)
def default_theme_xml() -> bytes:
    """The XML of the default Office theme."""
    body = ET.tostring(_build_default_theme(), encoding="unicode")
    return _XML_DECLARATION + body.encode("utf-8")


class Theme:
    """The theme part; when nothing was loaded the default theme is written."""

    def __init__(self, xml_data: bytes = b"", file_path: str = "") -> None:
        self.xml_data = xml_data
        self.file_path = file_path

    def save_to_xml_data(self) -> bytes:
        return self.xml_data or default_theme_xml()

    def load_from_xml_data(self, data: bytes) -> None:
        self.xml_data = bytes(data)

    def save_to_xml_file(self, stream: BinaryIO) -> None:
        stream.write(self.save_to_xml_data())

    def load_from_xml_file(self, stream: BinaryIO) -> None:
        self.xml_data = stream.read()