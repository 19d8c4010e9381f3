"""Small helpers shared by the spreadsheet package parts."""

from __future__ import annotations

import math
import re
from datetime import date, datetime, time, timedelta

_EPOCH_1900 = datetime(1899, 12, 31)
_EPOCH_1904 = datetime(1904, 1, 1)
_MS_PER_DAY = 1000 * 60 * 60 * 24.0

_INVALID_SHEET_CHARS = re.compile(r"[/\\?*\][:]")
_NEEDS_ESCAPE = re.compile(r"[ +\-,%^=<>'&]")
_MAX_SHEET_NAME = 31


def parse_xsd_boolean(value: str, default: bool = False) -> bool:
    """Interpret an xsd:boolean attribute value, falling back to *default*."""
    if value in ("1", "true"):
        return True
    if value in ("0", "false"):
        return False
    return default


def split_path(path: str) -> tuple[str, str]:
    """Split *path* at its last '/' into (directory, name); directory is '.' if absent."""
    head, sep, tail = path.rpartition("/")
    if not sep:
        return ".", path
    return head, tail


def get_rel_file_path(file_path: str) -> str:
    """Return the path of the relationships part that belongs to *file_path*."""
    head, sep, tail = file_path.rpartition("/")
    if not sep:
        return f"_rels/{file_path}.rels"
    return f"{head}/_rels/{tail}.rels"


def _epoch(is1904: bool) -> datetime:
    return _EPOCH_1904 if is1904 else _EPOCH_1900


def datetime_to_number(dt: datetime | date, is1904: bool = False) -> float:
    """Convert a date or datetime to a spreadsheet serial number."""
    if not isinstance(dt, datetime):
        dt = datetime(dt.year, dt.month, dt.day)
    dt = dt.replace(tzinfo=None)
    excel_time = (dt - _epoch(is1904)) / timedelta(days=1)
    if not is1904 and excel_time > 59:
        # The 1900 system counts 1900-02-29, which never existed.
        excel_time += 1
    return excel_time


def time_to_number(t: time) -> float:
    """Convert a time of day to a fraction of a day."""
    ms = ((t.hour * 60 + t.minute) * 60 + t.second) * 1000 + t.microsecond // 1000
    return ms / _MS_PER_DAY


def datetime_from_number(num: float, is1904: bool = False) -> datetime | date | time:
    """Convert a serial number back to a time, a date or a datetime.

    Numbers below one give a time of day, whole numbers give a date,
    anything else gives a datetime.
    """
    if not is1904 and num > 60:
        num -= 1
    msecs = int(num * _MS_PER_DAY + 0.5)
    result = _epoch(is1904) + timedelta(milliseconds=msecs)
    fractional, _ = math.modf(num)
    if num < 1:
        return result.time()
    if fractional == 0.0:
        return result.date()
    return result


def create_safe_sheet_name(name: str) -> str:
    """Turn *name* into a valid sheet name.

    Invalid characters become spaces, leading and trailing apostrophes are
    replaced and the result is cut to 31 characters.
    """
    if not name:
        return ""
    ret = name
    if len(name) > 2 and name.startswith("'") and name.endswith("'"):
        ret = unescape_sheet_name(ret)
    ret = _INVALID_SHEET_CHARS.sub(" ", ret)
    if ret.startswith("'"):
        ret = " " + ret[1:]
    if ret.endswith("'"):
        ret = ret[:-1] + " "
    return ret[:_MAX_SHEET_NAME]


def escape_sheet_name(name: str) -> str:
    """Quote a sheet name for use in formulas when it holds special characters."""
    if name.startswith("'") or name.endswith("'"):
        raise ValueError(f"sheet name is already escaped: {name!r}")
    if not _NEEDS_ESCAPE.search(name):
        return name
    return "'" + name.replace("'", "''") + "'"


def unescape_sheet_name(name: str) -> str:
    """Undo :func:`escape_sheet_name`."""
    if not (len(name) > 2 and name.startswith("'") and name.endswith("'")):
        raise ValueError(f"sheet name is not escaped: {name!r}")
    return name[1:-1].replace("''", "'")


def is_space_reserve_needed(s: str) -> bool:
    """Whether *s* starts or ends with whitespace that XML would otherwise lose."""
    spaces = " \t\n\r"
    return bool(s) and (s[0] in spaces or s[-1] in spaces)