"""Undoable editing commands and the cursor they move."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from linepad.lines import CharLine, Line, TextField


class CommandStateError(RuntimeError):
    """A command was executed twice or undone before it was executed."""


@dataclass
class Cursor:
    """Position in the document, by line and symbol, both 0-based."""

    line_index: int = 0
    symbol_index: int = 0


def _get_line(lines: list[Line], index: int) -> Line:
    if index < 0 or index >= len(lines):
        raise IndexError(
            f"cannot get line with 0-based index {index}: there are only {len(lines)} lines"
        )
    return lines[index]


def _insert_line(lines: list[Line], index: int, line: Line) -> None:
    if index < 0 or index > len(lines):
        raise IndexError(
            f"cannot insert on position {index} with 0-based index: "
            f"there are only {len(lines)} lines"
        )
    lines.insert(index, line)


def _remove_line(lines: list[Line], index: int) -> Line:
    if index < 0 or index >= len(lines):
        raise IndexError(
            f"cannot delete line with 0-based index {index}: there are only {len(lines)} lines"
        )
    return lines.pop(index)


class Command(ABC):
    """An edit that can be applied and reverted."""

    executed: bool = False

    def _check_can_execute(self) -> None:
        if self.executed:
            raise CommandStateError("Cannot execute a command that has been already executed.")

    def _check_can_undo(self) -> None:
        if not self.executed:
            raise CommandStateError("Cannot undo a command that hasn't been executed.")

    @abstractmethod
    def execute(self) -> None:
        """Apply the edit."""

    @abstractmethod
    def undo(self) -> None:
        """Revert the edit."""


class InsertCommand(Command):
    """Insert text into a field at a position."""

    def __init__(self, field: TextField, index: int, text: str, cursor: Cursor) -> None:
        self.field = field
        self.index = index
        self.text = text
        self.cursor = cursor
        self.executed = False

    def execute(self) -> None:
        self._check_can_execute()
        self.field.insert(self.index, self.text)
        self.executed = True

    def undo(self) -> None:
        self._check_can_undo()
        self.field.delete(self.index, len(self.text))
        self.cursor.symbol_index = self.index
        self.executed = False


class DeleteCommand(Command):
    """Delete a run of characters from a field."""

    def __init__(self, field: TextField, index: int, length: int) -> None:
        self.field = field
        self.index = index
        self.length = length
        self.deleted_text = field.substring(index, length)
        self.executed = False

    def execute(self) -> None:
        self._check_can_execute()
        self.field.delete(self.index, self.length)
        self.executed = True

    def undo(self) -> None:
        self._check_can_undo()
        self.field.insert(self.index, self.deleted_text)
        self.executed = False


class AddLineCommand(Command):
    """Split a line at a symbol, moving the rest into a new text line below it."""

    def __init__(
        self, lines: list[Line], line_index: int, symbol_index: int, cursor: Cursor
    ) -> None:
        self.lines = lines
        self.line_index = line_index
        self.symbol_index = symbol_index
        self.cursor = cursor
        self.new_line = CharLine()
        self.line_before = _get_line(lines, line_index)
        if isinstance(self.line_before, CharLine):
            field = self.line_before.text
            self.pushed_text = field.substring(symbol_index, len(field) - symbol_index)
        else:
            self.pushed_text = ""
        self.executed = False

    def execute(self) -> None:
        self._check_can_execute()
        self.new_line.text.clear()
        self.new_line.text.append(self.pushed_text)
        if isinstance(self.line_before, CharLine):
            self.line_before.text.delete(self.symbol_index, len(self.pushed_text))
        _insert_line(self.lines, self.line_index + 1, self.new_line)
        self.cursor.line_index = self.line_index + 1
        self.cursor.symbol_index = 0
        self.executed = True

    def undo(self) -> None:
        self._check_can_undo()
        if isinstance(self.line_before, CharLine):
            self.line_before.text.append(self.pushed_text)
        _remove_line(self.lines, self.line_index + 1)
        self.cursor.line_index = self.line_index
        self.cursor.symbol_index = self.symbol_index
        self.executed = False


class AddObjectCommand(Command):
    """Insert a line object after a given line."""

    def __init__(self, lines: list[Line], line_index: int, line: Line, cursor: Cursor) -> None:
        self.lines = lines
        self.line_index = line_index
        self.line = line
        self.cursor = cursor
        self.executed = False

    def execute(self) -> None:
        self._check_can_execute()
        _insert_line(self.lines, self.line_index + 1, self.line)
        self.cursor.line_index = self.line_index + 1
        self.executed = True

    def undo(self) -> None:
        self._check_can_undo()
        _remove_line(self.lines, self.line_index + 1)
        self.cursor.line_index = self.line_index
        self.executed = False


class DeleteLineCommand(Command):
    """Remove the line object at a given index."""

    def __init__(self, lines: list[Line], line_index: int, cursor: Cursor) -> None:
        self.lines = lines
        self.line_index = line_index
        self.cursor = cursor
        self.removed: Line | None = None
        self.executed = False

    def execute(self) -> None:
        self._check_can_execute()
        self.removed = _remove_line(self.lines, self.line_index)
        self.cursor.line_index = self.line_index - 1
        self.executed = True

    def undo(self) -> None:
        self._check_can_undo()
        assert self.removed is not None
        _insert_line(self.lines, self.line_index, self.removed)
        self.cursor.line_index = self.line_index + 1
        self.executed = False