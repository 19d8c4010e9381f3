"""A package part kept as raw XML bytes."""

from __future__ import annotations

from typing import BinaryIO


class SimpleXmlFile:
    """A part whose XML content is stored and written back unchanged."""

    def __init__(self, xml_data: bytes = b"", file_path: str = "") -> None:
        self.xml_data = xml_data
        self.file_path = file_path

    def save_to_xml_data(self) -> bytes:
        return self.xml_data

    def load_from_xml_data(self, data: bytes) -> None:
        self.xml_data = bytes(data)

    def save_to_xml_file(self, stream: BinaryIO) -> None:
        stream.write(self.xml_data)

    def load_from_xml_file(self, stream: BinaryIO) -> None:
        self.xml_data = stream.read()