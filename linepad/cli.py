"""Interactive command loop for the line editor."""

from __future__ import annotations

import re
import sys
from typing import Callable, TextIO

from linepad.commands import CommandStateError
from linepad.editor import EditorError, TextEditor
from linepad.user_commands import UserCommand, help_text

_INT = re.compile(r"\s*([+-]?\d+)")
_TWO_INTS = re.compile(r"\s*([+-]?\d+)\s+([+-]?\d+)")

_REPORTED_ERRORS = (EditorError, CommandStateError, IndexError, ValueError, OSError)


class _Session:
    """One run of the command loop over an editor and a pair of streams."""

    def __init__(self, editor: TextEditor, stdin: TextIO, stdout: TextIO) -> None:
        self._editor = editor
        self._stdin = stdin
        self._stdout = stdout
        self._handlers: dict[UserCommand, Callable[[], None]] = {
            UserCommand.INSERT_TEXT_ON_CURSOR: self._insert,
            UserCommand.ADD_NEW_CHAR_LINE: self._add_char_line,
            UserCommand.SAVE_TO_FILE: self._save,
            UserCommand.LOAD_FROM_FILE: self._load,
            UserCommand.PRINT_TO_CONSOLE: self._print,
            UserCommand.MOVE_CURSOR: self._move_cursor,
            UserCommand.INSERT_WITH_REPLACEMENT: self._insert_with_replacement,
            UserCommand.SEARCH_TEXT: self._search,
            UserCommand.DELETE_TEXT: self._delete,
            UserCommand.CUT: self._cut,
            UserCommand.COPY: self._copy,
            UserCommand.PASTE: self._paste,
            UserCommand.UNDO: editor.undo,
            UserCommand.REDO: editor.redo,
            UserCommand.ADD_CONTACT: self._add_contact,
            UserCommand.ADD_TASK: self._add_task,
            UserCommand.ENCRYPT_ALL: self._encrypt,
            UserCommand.DECRYPT_ALL: self._decrypt,
            UserCommand.DELETE_LINE_OBJ: editor.delete_line,
            UserCommand.CHANGE_TASK_STATUS: editor.toggle_task,
        }

    def _write(self, text: str) -> None:
        self._stdout.write(text)
        self._stdout.flush()

    def _read_text(self) -> str:
        self._write("Type a text: ")
        line = self._stdin.readline()
        return line[:-1] if line.endswith("\n") else line

    def _read_number(self) -> int:
        self._write("Enter number: ")
        match = _INT.match(self._stdin.readline())
        if match is None:
            self._write("Invalid input. One integer expected\n")
            return 0
        return int(match.group(1))

    def _report_cursor(self) -> None:
        cursor = self._editor.cursor
        self._write(f"Cursor moved to {cursor.line_index} {cursor.symbol_index}\n")

    def _keep_cursor_in_document(self) -> None:
        last = self._editor.line_count - 1
        if self._editor.cursor.line_index > last:
            self._editor.move_cursor(last, 0)

    def loop(self) -> None:
        self._write(help_text())
        while True:
            self._write("Type a number of a command: ")
            raw = self._stdin.readline()
            if not raw:
                return
            match = _INT.match(raw)
            if match is None:
                self._write(help_text())
                continue
            number = int(match.group(1))
            self._keep_cursor_in_document()
            if not self._editor.validate_command(number):
                self._write("Command couldn't be applied to the current line type\n")
                continue
            command = UserCommand(number)
            if command is UserCommand.END_PROGRAM:
                return
            try:
                self._handlers[command]()
            except _REPORTED_ERRORS as error:
                self._write(f"{error}\n")

    def _insert(self) -> None:
        self._write("Add on cursor. ")
        self._editor.insert_text(self._read_text())
        self._report_cursor()

    def _add_char_line(self) -> None:
        self._editor.add_char_line()
        self._write("New line started\n")

    def _save(self) -> None:
        self._write("Name of file? ")
        self._editor.save_objects(self._read_text())

    def _load(self) -> None:
        self._write("Name of file? ")
        self._editor.load_objects(self._read_text())

    def _print(self) -> None:
        for rendered in self._editor.render():
            self._write(f"{rendered} \n")

    def _move_cursor(self) -> None:
        self._write("Enter line and index starts from 0 (for ex. 0 6): ")
        match = _TWO_INTS.match(self._stdin.readline())
        if match is None:
            self._write("Invalid input. Two integers expected\n")
            return
        self._editor.move_cursor(int(match.group(1)), int(match.group(2)))
        self._report_cursor()

    def _insert_with_replacement(self) -> None:
        self._write("Insert with replacement..")
        remaining = self._editor.remaining_in_line()
        text = self._read_text()
        self._editor.insert_text(text)
        self._editor.delete_text(min(remaining, len(text)))

    def _search(self) -> None:
        self._write("What to look for? ")
        for line_index, symbol_index in self._editor.search_text(self._read_text()):
            self._write(f"line {line_index}, symbol {symbol_index} (0-based indexes)\n")

    def _delete(self) -> None:
        self._write("How many symbols to delete? ")
        length = self._read_number()
        self._editor.delete_text(length)
        self._write(f"Delete {length} symbols from cursor..\n")

    def _cut(self) -> None:
        self._write("How many symbols to cut? ")
        length = self._read_number()
        self._editor.copy(length)
        self._write(f"Copy {length} symbols from cursor..\n")
        self._editor.delete_text(length)
        self._write(f"Delete {length} symbols from cursor..\n")

    def _copy(self) -> None:
        self._write("How many symbols to copy? ")
        length = self._read_number()
        self._editor.copy(length)
        self._write(f"Copy {length} symbols from cursor..\n")

    def _paste(self) -> None:
        self._editor.paste()
        self._write("Paste on cursor..\n")

    def _add_contact(self) -> None:
        self._write("Contact name?\n")
        name = self._read_text()
        self._write("Contact email?\n")
        email = self._read_text()
        self._editor.add_contact(name, email)

    def _add_task(self) -> None:
        self._write("Task description?\n")
        self._editor.add_task(self._read_text())

    def _encrypt(self) -> None:
        self._write("Key?\n")
        self._editor.encrypt(self._read_number())

    def _decrypt(self) -> None:
        self._write("Key?\n")
        self._editor.decrypt(self._read_number())


def run(editor: TextEditor, stdin: TextIO, stdout: TextIO) -> None:
    """Read numbered commands from ``stdin`` until the end command or end of input."""
    _Session(editor, stdin, stdout).loop()


def main(argv: list[str] | None = None) -> int:
    """Start the interactive editor on the terminal."""
    run(TextEditor(), sys.stdin, sys.stdout)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())