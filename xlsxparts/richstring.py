"""Cell text made of fragments that each carry their own font format."""

from __future__ import annotations

from collections.abc import Iterator

from .formats import Format

_RICH_PREFIX = b"@@QtXlsxRichString="


class RichString:
    """A string made of text fragments, each with a :class:`Format`.

    A string with no fragments is *null*. Two rich strings are equal when
    they have the same number of fragments and the same identity key.
    """

    def __init__(self, text: str | None = None) -> None:
        self._texts: list[str] = []
        self._formats: list[Format] = []
        self._id_key: bytes | None = None
        if text is not None:
            self.add_fragment(text, Format())

    def is_rich_string(self) -> bool:
        """True when the string holds more than one fragment."""
        return len(self._texts) > 1

    def is_null(self) -> bool:
        return not self._texts

    def is_empty(self) -> bool:
        """True when every fragment's text is empty."""
        return all(not text for text in self._texts)

    def to_plain_string(self) -> str:
        if self.is_empty():
            return ""
        return "".join(self._texts)

    def add_fragment(self, text: str, fmt: Format | None = None) -> None:
        """Append a fragment with *text* and *fmt*."""
        self._texts.append(text)
        self._formats.append(fmt if fmt is not None else Format())
        self._id_key = None

    def fragment_text(self, index: int) -> str:
        """Text of the fragment at *index*, or '' if there is none."""
        if 0 <= index < len(self._texts):
            return self._texts[index]
        return ""

    def fragment_format(self, index: int) -> Format:
        """Format of the fragment at *index*, or an empty format if there is none."""
        if 0 <= index < len(self._formats):
            return self._formats[index]
        return Format()

    def fragments(self) -> Iterator[tuple[str, Format]]:
        """Yield (text, format) pairs in order."""
        yield from zip(self._texts, self._formats)

    def id_key(self) -> bytes:
        """Bytes that identify the string's text and fragment fonts."""
        if self._id_key is None:
            if len(self._texts) == 1:
                key = self._texts[0].encode("utf-8")
            else:
                parts = [_RICH_PREFIX]
                for text, fmt in zip(self._texts, self._formats):
                    parts.append(b"@Text")
                    parts.append(text.encode("utf-8"))
                    parts.append(b"@Format")
                    if fmt.has_font_data():
                        parts.append(repr(fmt.font_key()).encode("utf-8"))
                key = b"".join(parts)
            self._id_key = key
        return self._id_key

    def __len__(self) -> int:
        return len(self._texts)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, str):
            return len(self._texts) == 1 and self._texts[0] == other
        if not isinstance(other, RichString):
            return NotImplemented
        if len(self._texts) != len(other._texts):
            return False
        return self.id_key() == other.id_key()

    def __lt__(self, other: RichString) -> bool:
        if not isinstance(other, RichString):
            return NotImplemented
        return self.id_key() < other.id_key()

    def __hash__(self) -> int:
        return hash(self.id_key())

    def __str__(self) -> str:
        return self.to_plain_string()

    def __repr__(self) -> str:
        return f"RichString({self._texts!r})"