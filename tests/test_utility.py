from datetime import date, datetime, time

import pytest

from xlsxparts.utility import (
    create_safe_sheet_name,
    datetime_from_number,
    datetime_to_number,
    escape_sheet_name,
    get_rel_file_path,
    is_space_reserve_needed,
    parse_xsd_boolean,
    split_path,
    time_to_number,
    unescape_sheet_name,
)


@pytest.mark.parametrize(
    "value, expected",
    [("1", True), ("true", True), ("0", False), ("false", False)],
)
def test_parse_xsd_boolean_known_values(value, expected):
    assert parse_xsd_boolean(value) is expected


def test_parse_xsd_boolean_falls_back_to_default():
    assert parse_xsd_boolean("maybe", True) is True
    assert parse_xsd_boolean("", False) is False


def test_split_path_with_directory():
    assert split_path("xl/worksheets/sheet1.xml") == ("xl/worksheets", "sheet1.xml")


def test_split_path_without_directory():
    assert split_path("workbook.xml") == (".", "workbook.xml")


def test_rel_file_path_with_directory():
    assert get_rel_file_path("xl/workbook.xml") == "xl/_rels/workbook.xml.rels"


def test_rel_file_path_without_directory():
    assert get_rel_file_path("workbook.xml") == "_rels/workbook.xml.rels"


def test_first_day_of_1900_system():
    assert datetime_to_number(datetime(1900, 1, 1)) == 1.0


@pytest.mark.parametrize("is1904", [False, True])
def test_datetime_round_trip(is1904):
    dt = datetime(2020, 5, 17, 13, 45, 30)
    assert datetime_from_number(datetime_to_number(dt, is1904), is1904) == dt


@pytest.mark.parametrize("is1904", [False, True])
def test_whole_number_gives_date(is1904):
    number = datetime_to_number(date(2021, 3, 1), is1904)
    assert number == int(number)
    assert datetime_from_number(number, is1904) == date(2021, 3, 1)


def test_time_round_trip():
    t = time(6, 30, 15)
    assert datetime_from_number(time_to_number(t)) == t


def test_time_fraction_is_below_one():
    assert 0 <= time_to_number(time(23, 59, 59)) < 1


def test_dates_are_monotonic():
    earlier = datetime_to_number(datetime(1900, 2, 27))
    later = datetime_to_number(datetime(1900, 3, 2))
    assert later > earlier


def test_safe_sheet_name_replaces_invalid_chars():
    proposal = "a/b\\c?d*e[f]g:h"
    result = create_safe_sheet_name(proposal)
    assert len(result) == len(proposal)
    assert not any(ch in result for ch in "/\\?*[]:")


def test_safe_sheet_name_truncates():
    assert len(create_safe_sheet_name("x" * 40)) == 31


def test_safe_sheet_name_unescapes_quoted():
    assert create_safe_sheet_name("'abc'") == "abc"


def test_safe_sheet_name_empty():
    assert create_safe_sheet_name("") == ""


def test_safe_sheet_name_leading_apostrophe_removed():
    result = create_safe_sheet_name("'abc")
    assert not result.startswith("'")
    assert result.endswith("abc")


def test_escape_not_needed():
    assert escape_sheet_name("Sheet1") == "Sheet1"


def test_escape_wraps_in_quotes():
    assert escape_sheet_name("My Sheet") == "'My Sheet'"


@pytest.mark.parametrize("name", ["it's", "a+b", "x-y", "100%"])
def test_escape_round_trip(name):
    assert unescape_sheet_name(escape_sheet_name(name)) == name


def test_escape_rejects_already_escaped():
    with pytest.raises(ValueError):
        escape_sheet_name("'abc")


def test_unescape_rejects_unquoted():
    with pytest.raises(ValueError):
        unescape_sheet_name("abc")


@pytest.mark.parametrize(
    "text, expected",
    [(" a", True), ("a\t", True), ("\na", True), ("a b", False), ("", False)],
)
def test_space_reserve(text, expected):
    assert is_space_reserve_needed(text) is expected