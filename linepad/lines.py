"""Line objects held by the editor and their binary form."""

from __future__ import annotations

import struct
from abc import ABC, abstractmethod
from typing import BinaryIO, ClassVar

_INT32 = struct.Struct("<i")


class TextField:
    """A mutable piece of text edited by index."""

    def __init__(self, text: str = "") -> None:
        self._text = text

    def __len__(self) -> int:
        return len(self._text)

    def __str__(self) -> str:
        return self._text

    def __repr__(self) -> str:
        return f"TextField({self._text!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, TextField):
            return self._text == other._text
        return NotImplemented

    def _check_range(self, index: int, length: int, action: str) -> None:
        if index < 0 or length < 0 or index + length > len(self._text):
            raise IndexError(
                f"cannot {action} from {index} to {index + length}: "
                f"line has only {len(self._text)} symbols"
            )

    def substring(self, index: int, length: int) -> str:
        """Return ``length`` characters starting at ``index``."""
        self._check_range(index, length, "get substring")
        return self._text[index:index + length]

    def insert(self, index: int, text: str) -> None:
        """Insert ``text`` before position ``index``."""
        if index < 0 or index > len(self._text):
            raise IndexError(
                f"cannot insert on {index}: line has only {len(self._text)} symbols"
            )
        self._text = self._text[:index] + text + self._text[index:]

    def delete(self, index: int, length: int) -> None:
        """Remove ``length`` characters starting at ``index``."""
        self._check_range(index, length, "delete")
        self._text = self._text[:index] + self._text[index + length:]

    def append(self, text: str) -> None:
        self._text += text

    def clear(self) -> None:
        self._text = ""


def _read_exact(stream: BinaryIO, size: int) -> bytes:
    data = stream.read(size)
    if len(data) != size:
        raise ValueError("unexpected end of data")
    return data


def _read_text(stream: BinaryIO) -> str:
    (length,) = _INT32.unpack(_read_exact(stream, _INT32.size))
    if length < 0:
        raise ValueError(f"negative text length {length}")
    return _read_exact(stream, length).decode("utf-8")


def _write_text(stream: BinaryIO, text: str) -> None:
    data = text.encode("utf-8")
    stream.write(_INT32.pack(len(data)))
    stream.write(data)


class Line(ABC):
    """One entry of the document."""

    TAG: ClassVar[bytes]

    @abstractmethod
    def render(self) -> str:
        """Text shown for this line."""

    @abstractmethod
    def serialize(self, stream: BinaryIO) -> None:
        """Write the tagged binary form of this line."""

    @abstractmethod
    def text_fields(self) -> list[TextField]:
        """The editable text fields of this line."""


class CharLine(Line):
    """A plain line of text."""

    TAG = b"TEXT"

    def __init__(self, text: str = "") -> None:
        self.text = TextField(text)

    def render(self) -> str:
        return str(self.text)

    def serialize(self, stream: BinaryIO) -> None:
        stream.write(self.TAG)
        _write_text(stream, str(self.text))

    def text_fields(self) -> list[TextField]:
        return [self.text]

    @classmethod
    def read(cls, stream: BinaryIO) -> CharLine:
        """Read the body that follows the tag."""
        return cls(_read_text(stream))


class ContactLine(Line):
    """A contact with a name and an e-mail address."""

    TAG = b"CONT"

    def __init__(self, name: str, email: str) -> None:
        self.name = TextField(name)
        self.email = TextField(email)

    def render(self) -> str:
        return f"Contact: {self.name}  Email: {self.email}"

    def serialize(self, stream: BinaryIO) -> None:
        stream.write(self.TAG)
        _write_text(stream, str(self.name))
        _write_text(stream, str(self.email))

    def text_fields(self) -> list[TextField]:
        return [self.name, self.email]

    @classmethod
    def read(cls, stream: BinaryIO) -> ContactLine:
        """Read the body that follows the tag."""
        name = _read_text(stream)
        email = _read_text(stream)
        return cls(name, email)


class TaskLine(Line):
    """A task with a description and a done flag."""

    TAG = b"TASK"
    DONE_BOX: ClassVar[str] = "[ * ]   "
    UNDONE_BOX: ClassVar[str] = "[   ]   "

    def __init__(self, description: str, done: bool = False) -> None:
        self.description = TextField(description)
        self.done = done

    def render(self) -> str:
        box = self.DONE_BOX if self.done else self.UNDONE_BOX
        return f"{box}{self.description}"

    def serialize(self, stream: BinaryIO) -> None:
        stream.write(self.TAG)
        _write_text(stream, str(self.description))
        stream.write(b"\x01" if self.done else b"\x00")

    def text_fields(self) -> list[TextField]:
        return [self.description]

    def toggle(self) -> None:
        self.done = not self.done

    @classmethod
    def read(cls, stream: BinaryIO) -> TaskLine:
        """Read the body that follows the tag."""
        description = _read_text(stream)
        done = _read_exact(stream, 1) != b"\x00"
        return cls(description, done)


_LINE_TYPES: dict[bytes, type[CharLine] | type[ContactLine] | type[TaskLine]] = {
    CharLine.TAG: CharLine,
    ContactLine.TAG: ContactLine,
    TaskLine.TAG: TaskLine,
}


def read_line(stream: BinaryIO) -> Line:
    """Read one tagged line from ``stream``."""
    tag = _read_exact(stream, 4)
    try:
        line_type = _LINE_TYPES[tag]
    except KeyError:
        raise ValueError(f"unknown line type {tag!r}") from None
    return line_type.read(stream)