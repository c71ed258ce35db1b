"""A minimal editor of plain text lines driven by numbered commands."""

from __future__ import annotations

import re
import sys
from os import PathLike
from typing import TextIO, Union

PathType = Union[str, "PathLike[str]"]

_INT = re.compile(r"\s*([+-]?\d+)")
_TWO_INTS = re.compile(r"\s*([+-]?\d+)\s+([+-]?\d+)")

_MAX_FILENAME = 99


def help_text() -> str:
    """The listing of the available commands."""
    return (
        "Commands:\n"
        "1 - Append text symbols to the end\n"
        "2 - Start the new line\n"
        "3 - Save to file\n"
        "4 - Load from file\n"
        "5 - Print current text to console\n"
        "6 - Insert text by line and symbol index\n"
        "7 - Search text\n"
        "8 - END PROGRAM\n"
    )


class SimpleEditor:
    """A list of text lines; new text goes to the end or to an index."""

    def __init__(self) -> None:
        self.lines: list[str] = [""]

    def append(self, text: str) -> None:
        """Append ``text`` to the last line."""
        self.lines[-1] += text

    def new_line(self) -> None:
        """Start an empty line at the end."""
        self.lines.append("")

    def _check_position(self, line_index: int, symbol_index: int) -> None:
        if not 0 <= line_index < len(self.lines):
            raise IndexError(f"Your text consists of only {len(self.lines)} lines")
        length = len(self.lines[line_index])
        if not 0 <= symbol_index <= length:
            raise IndexError(f"{line_index} line consists of only {length} symbols")

    def insert(self, line_index: int, symbol_index: int, text: str) -> None:
        """Insert ``text`` into a line before the given symbol."""
        self._check_position(line_index, symbol_index)
        line = self.lines[line_index]
        self.lines[line_index] = line[:symbol_index] + text + line[symbol_index:]

    def search(self, text: str) -> list[tuple[int, int]]:
        """All ``(line, symbol)`` positions where ``text`` occurs."""
        return [
            (line_index, symbol_index)
            for line_index, line in enumerate(self.lines)
            for symbol_index in range(len(line) - len(text) + 1)
            if line.startswith(text, symbol_index)
        ]

    def render(self) -> list[str]:
        """The lines as they stand."""
        return list(self.lines)

    def save(self, path: PathType) -> None:
        """Write the lines, each ended by a newline, to ``path``."""
        with open(path, "w", encoding="utf-8") as file:
            file.writelines(f"{line}\n" for line in self.lines)

    def load(self, path: PathType) -> None:
        """Append every line of the file at ``path`` as a new line."""
        with open(path, encoding="utf-8") as file:
            for raw in file:
                self.lines.append(raw[:-1] if raw.endswith("\n") else raw)


def _read_line(stdin: TextIO) -> str:
    line = stdin.readline()
    return line[:-1] if line.endswith("\n") else line


def _read_filename(stdin: TextIO, stdout: TextIO) -> str:
    stdout.write("Enter filename (no spaces): ")
    stdout.flush()
    words = stdin.readline().split()
    return words[0][:_MAX_FILENAME] if words else ""


def _append_prompt(editor: SimpleEditor, stdin: TextIO, stdout: TextIO) -> None:
    stdout.write("Type a text to append: ")
    stdout.flush()
    editor.append(_read_line(stdin))


def _insert_prompt(editor: SimpleEditor, stdin: TextIO, stdout: TextIO) -> None:
    stdout.write("Enter line and index starts from 0 (for ex. 0 6): ")
    stdout.flush()
    match = _TWO_INTS.match(stdin.readline())
    if match is None:
        stdout.write("Invalid input. Two integers expected\n")
        return
    line_index, symbol_index = int(match.group(1)), int(match.group(2))
    try:
        editor._check_position(line_index, symbol_index)
    except IndexError as error:
        stdout.write(f"{error}\n")
        return
    stdout.write("Type a text to append: ")
    stdout.flush()
    editor.insert(line_index, symbol_index, _read_line(stdin))


def run(editor: SimpleEditor, stdin: TextIO, stdout: TextIO) -> None:
    """Read numbered commands from ``stdin`` until command 8 or end of input."""
    stdout.write(help_text())
    while True:
        stdout.write("Type a number of a command: ")
        stdout.flush()
        raw = stdin.readline()
        if not raw:
            return
        match = _INT.match(raw)
        if match is None:
            stdout.write(help_text())
            continue
        command = int(match.group(1))
        if command == 1:
            _append_prompt(editor, stdin, stdout)
        elif command == 2:
            editor.new_line()
            stdout.write("New line started \n")
            _append_prompt(editor, stdin, stdout)
        elif command == 3:
            try:
                editor.save(_read_filename(stdin, stdout))
            except OSError:
                stdout.write("Can't open such a file... Try another filename \n")
        elif command == 4:
            try:
                editor.load(_read_filename(stdin, stdout))
            except (OSError, UnicodeDecodeError):
                stdout.write("Can't open such a file... Check filename \n")
        elif command == 5:
            stdout.writelines(f"{line} \n" for line in editor.render())
        elif command == 6:
            _insert_prompt(editor, stdin, stdout)
        elif command == 7:
            stdout.write("Type a text to search: ")
            stdout.flush()
            for line_index, symbol_index in editor.search(_read_line(stdin)):
                stdout.write(f"line {line_index}, symbol {symbol_index} (0-based indexes)\n")
        elif command == 8:
            stdout.flush()
            return


def main(argv: list[str] | None = None) -> int:
    """Start the simple editor on the terminal."""
    run(SimpleEditor(), sys.stdin, sys.stdout)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())