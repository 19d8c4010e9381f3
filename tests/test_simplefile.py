import io

from xlsxparts.simplefile import SimpleXmlFile

SAMPLE = b'<?xml version="1.0"?><externalLink/>'


def test_default_is_empty():
    assert SimpleXmlFile().save_to_xml_data() == b""


def test_data_round_trip():
    part = SimpleXmlFile()
    part.load_from_xml_data(SAMPLE)
    assert part.save_to_xml_data() == SAMPLE


def test_stream_round_trip():
    part = SimpleXmlFile()
    part.load_from_xml_file(io.BytesIO(SAMPLE))
    out = io.BytesIO()
    part.save_to_xml_file(out)
    assert out.getvalue() == SAMPLE


def test_load_replaces_previous_content():
    part = SimpleXmlFile(b"<old/>")
    part.load_from_xml_data(b"<new/>")
    assert part.save_to_xml_data() == b"<new/>"


def test_load_accepts_bytearray():
    part = SimpleXmlFile()
    part.load_from_xml_data(bytearray(SAMPLE))
    assert part.save_to_xml_data() == SAMPLE