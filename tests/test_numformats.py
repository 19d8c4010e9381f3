from xlsxparts.formats import Format, Prop
from xlsxparts.numformats import FIRST_CUSTOM_ID, NumberFormatData, NumberFormats


def _with_code(code):
    fmt = Format()
    fmt.set(Prop.NUM_FMT_FORMAT_CODE, code)
    return fmt


def _with_id(index):
    fmt = Format()
    fmt.set(Prop.NUM_FMT_ID, index)
    return fmt


def test_builtin_code_gets_builtin_id():
    fmt = _with_code("0.00")
    NumberFormats().fix(fmt)
    assert fmt.get(Prop.NUM_FMT_ID) == 2
    assert fmt.get(Prop.NUM_FMT_FORMAT_CODE) == "0.00"


def test_new_custom_code_starts_at_first_custom_id():
    table = NumberFormats()
    fmt = _with_code("0.000")
    table.fix(fmt)
    assert fmt.get(Prop.NUM_FMT_ID) == FIRST_CUSTOM_ID == 176
    assert table.custom_formats() == [NumberFormatData(176, "0.000")]


def test_custom_codes_get_consecutive_ids_and_are_reused():
    table = NumberFormats()
    first, second, again = _with_code("0.000"), _with_code("yyyy"), _with_code("0.000")
    for fmt in (first, second, again):
        table.fix(fmt)
    assert second.get(Prop.NUM_FMT_ID) == first.get(Prop.NUM_FMT_ID) + 1
    assert again.get(Prop.NUM_FMT_ID) == first.get(Prop.NUM_FMT_ID)
    assert len(table) == 2


def test_id_only_gets_builtin_code():
    fmt = _with_id(14)
    NumberFormats().fix(fmt)
    assert fmt.get(Prop.NUM_FMT_FORMAT_CODE) == "m/d/yy"


def test_unknown_id_falls_back_to_general():
    fmt = _with_id(150)
    NumberFormats().fix(fmt)
    assert fmt.get(Prop.NUM_FMT_ID) == 150
    assert fmt.get(Prop.NUM_FMT_FORMAT_CODE) == "General"


def test_id_only_gets_registered_custom_code():
    table = NumberFormats()
    table.register(180, "0.0%")
    fmt = _with_id(180)
    table.fix(fmt)
    assert fmt.get(Prop.NUM_FMT_FORMAT_CODE) == "0.0%"


def test_register_moves_next_id_past_registered():
    table = NumberFormats()
    table.register(200, "0.0000")
    fmt = _with_code("#,##0.000")
    table.fix(fmt)
    assert fmt.get(Prop.NUM_FMT_ID) > 200


def test_register_lower_id_keeps_next_id():
    table = NumberFormats()
    table.register(100, "0.0")
    assert table.next_custom_id == FIRST_CUSTOM_ID


def test_custom_formats_sorted_by_id():
    table = NumberFormats()
    table.register(190, "b")
    table.register(180, "a")
    assert [d.index for d in table.custom_formats()] == sorted([190, 180])


def test_code_for():
    table = NumberFormats()
    table.register(177, "x")
    assert table.code_for(177) == "x"
    assert table.code_for(0) == "General"
    assert table.code_for(5) is None


def test_fix_without_numfmt_data_is_noop():
    fmt = Format({Prop.FONT_BOLD: True})
    NumberFormats().fix(fmt)
    assert not fmt.has_num_fmt_data()


def test_complete_format_is_left_alone():
    fmt = Format()
    fmt.set_number_format(300, "0.0")
    table = NumberFormats()
    table.fix(fmt)
    assert fmt.get(Prop.NUM_FMT_ID) == 300
    assert len(table) == 0