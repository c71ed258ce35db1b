"""A line-oriented document editor with undo, redo and typed line objects."""

from __future__ import annotations

import struct
from os import PathLike
from typing import Union

from linepad.caesar import CaesarCipher
from linepad.commands import (
    AddLineCommand,
    AddObjectCommand,
    Command,
    Cursor,
    DeleteCommand,
    DeleteLineCommand,
    InsertCommand,
)
from linepad.lines import CharLine, ContactLine, Line, TaskLine, read_line
from linepad.user_commands import UserCommand

_INT32 = struct.Struct("<i")

PathType = Union[str, "PathLike[str]"]

_ALWAYS_ALLOWED = frozenset(
    {
        UserCommand.ADD_CONTACT,
        UserCommand.ADD_NEW_CHAR_LINE,
        UserCommand.ADD_TASK,
        UserCommand.DECRYPT_ALL,
        UserCommand.ENCRYPT_ALL,
        UserCommand.DELETE_LINE_OBJ,
        UserCommand.MOVE_CURSOR,
        UserCommand.LOAD_FROM_FILE,
        UserCommand.SAVE_TO_FILE,
        UserCommand.PRINT_TO_CONSOLE,
        UserCommand.UNDO,
        UserCommand.REDO,
        UserCommand.SEARCH_TEXT,
        UserCommand.END_PROGRAM,
    }
)

_TEXT_LINE_ONLY = frozenset(
    {
        UserCommand.INSERT_TEXT_ON_CURSOR,
        UserCommand.INSERT_WITH_REPLACEMENT,
        UserCommand.DELETE_TEXT,
        UserCommand.CUT,
        UserCommand.COPY,
        UserCommand.PASTE,
    }
)


class EditorError(Exception):
    """An editing request that cannot be carried out."""


class TextEditor:
    """A document of line objects with a cursor, a copy buffer and history."""

    def __init__(self) -> None:
        self.lines: list[Line] = [CharLine()]
        self.cursor = Cursor()
        self.buffer = ""
        self._done: list[Command] = []
        self._canceled: list[Command] = []
        self._cipher = CaesarCipher()

    @property
    def line_count(self) -> int:
        """Number of lines in the document."""
        return len(self.lines)

    def _current_line(self) -> Line:
        return self.lines[self.cursor.line_index]

    def _current_char_line(self) -> CharLine:
        line = self._current_line()
        if not isinstance(line, CharLine):
            raise EditorError("the current line is not a text line")
        return line

    def remaining_in_line(self) -> int:
        """Symbols from the cursor to the end of a text line; 0 on other lines."""
        line = self._current_line()
        if isinstance(line, CharLine):
            return len(line.text) - self.cursor.symbol_index
        return 0

    def validate_command(self, command: int) -> bool:
        """Whether ``command`` may be applied to the line under the cursor."""
        try:
            command = UserCommand(command)
        except ValueError:
            return False
        if command in _ALWAYS_ALLOWED:
            return True
        line = self._current_line()
        if isinstance(line, CharLine) and command in _TEXT_LINE_ONLY:
            return True
        return isinstance(line, TaskLine) and command is UserCommand.CHANGE_TASK_STATUS

    def execute(self, command: Command) -> None:
        """Apply ``command`` and record it for undo."""
        command.execute()
        self._done.append(command)

    def undo(self) -> None:
        """Revert the most recent command."""
        if not self._done:
            raise EditorError("There is nothing to undo")
        command = self._done.pop()
        command.undo()
        self._canceled.append(command)

    def redo(self) -> None:
        """Reapply the most recently reverted command."""
        if not self._canceled:
            raise EditorError("There is nothing to redo")
        command = self._canceled.pop()
        command.execute()
        self._done.append(command)

    def move_cursor(self, line_index: int, symbol_index: int) -> None:
        """Place the cursor; on non-text lines it goes to the end of the line."""
        if line_index < 0 or line_index > len(self.lines) - 1:
            raise EditorError(
                f"Can't move to line {line_index} with 0-based index. "
                f"Only {len(self.lines)} lines"
            )
        line = self.lines[line_index]
        if isinstance(line, CharLine):
            length = len(line.text)
            if symbol_index < 0 or symbol_index > length:
                raise EditorError(
                    f"Can't move to symbol {symbol_index} with 0-based index. "
                    f"Only {length} symbols"
                )
        else:
            symbol_index = len(line.render())
        self.cursor.line_index = line_index
        self.cursor.symbol_index = symbol_index

    def add_char_line(self) -> None:
        """Split the current line at the cursor into a new text line."""
        self.execute(
            AddLineCommand(
                self.lines, self.cursor.line_index, self.cursor.symbol_index, self.cursor
            )
        )

    def add_contact(self, name: str, email: str) -> None:
        """Insert a contact below the current line."""
        self.execute(
            AddObjectCommand(
                self.lines, self.cursor.line_index, ContactLine(name, email), self.cursor
            )
        )

    def add_task(self, description: str) -> None:
        """Insert an open task below the current line."""
        self.execute(
            AddObjectCommand(
                self.lines, self.cursor.line_index, TaskLine(description), self.cursor
            )
        )

    def delete_line(self) -> None:
        """Remove the line under the cursor; the first line is kept."""
        if self.cursor.line_index == 0:
            raise EditorError("the first line cannot be deleted")
        self.execute(DeleteLineCommand(self.lines, self.cursor.line_index, self.cursor))

    def insert_text(self, text: str) -> None:
        """Insert ``text`` at the cursor and move the cursor past it."""
        line = self._current_char_line()
        self.execute(InsertCommand(line.text, self.cursor.symbol_index, text, self.cursor))
        self.move_cursor(self.cursor.line_index, self.cursor.symbol_index + len(text))

    def search_text(self, text: str) -> list[tuple[int, int]]:
        """All ``(line, symbol)`` positions where ``text`` occurs in rendered lines."""
        found = []
        for line_index, rendered in enumerate(self.render()):
            for symbol_index in range(len(rendered) - len(text) + 1):
                if rendered.startswith(text, symbol_index):
                    found.append((line_index, symbol_index))
        return found

    def delete_text(self, length: int) -> None:
        """Delete ``length`` symbols starting at the cursor."""
        line = self._current_char_line()
        self.execute(DeleteCommand(line.text, self.cursor.symbol_index, length))

    def copy(self, length: int) -> str:
        """Add ``length`` symbols from the cursor to the copy buffer."""
        line = self._current_char_line()
        copied = line.text.substring(self.cursor.symbol_index, length)
        self.buffer += copied
        return copied

    def paste(self) -> None:
        """Insert the copy buffer at the cursor."""
        if not self.buffer:
            raise EditorError("Nothing has been copied")
        self.insert_text(self.buffer)

    def toggle_task(self) -> None:
        """Flip the done flag of the task under the cursor."""
        line = self._current_line()
        if not isinstance(line, TaskLine):
            raise EditorError("the current line is not a task")
        line.toggle()

    def render(self) -> list[str]:
        """The displayed text of every line."""
        return [line.render() for line in self.lines]

    def save_text(self, path: PathType) -> None:
        """Write the displayed text, one line per line, to ``path``."""
        with open(path, "w", encoding="utf-8") as file:
            file.writelines(f"{rendered}\n" for rendered in self.render())

    def load_text(self, path: PathType) -> None:
        """Append every line of the text file as a text line."""
        with open(path, encoding="utf-8") as file:
            for raw in file:
                self.lines.append(CharLine(raw[:-1] if raw.endswith("\n") else raw))
        self.move_cursor(len(self.lines) - 1, 0)

    def save_objects(self, path: PathType) -> None:
        """Write all line objects in binary form to ``path``."""
        with open(path, "wb") as file:
            file.write(_INT32.pack(len(self.lines)))
            for line in self.lines:
                line.serialize(file)

    def load_objects(self, path: PathType) -> None:
        """Append the line objects stored in the binary file ``path``."""
        with open(path, "rb") as file:
            header = file.read(_INT32.size)
            if len(header) != _INT32.size:
                raise ValueError("unexpected end of data")
            (count,) = _INT32.unpack(header)
            self.lines.extend(read_line(file) for _ in range(count))

    def encrypt(self, key: int) -> None:
        """Caesar-encrypt every text field of every line."""
        for line in self.lines:
            for field in line.text_fields():
                encrypted = self._cipher.encrypt(str(field), key)
                field.clear()
                field.append(encrypted)

    def decrypt(self, key: int) -> None:
        """Caesar-decrypt every text field of every line."""
        for line in self.lines:
            for field in line.text_fields():
                decrypted = self._cipher.decrypt(str(field), key)
                field.clear()
                field.append(decrypted)