"""Numbered commands offered by the interactive editor."""

from __future__ import annotations

from enum import IntEnum


class UserCommand(IntEnum):
    """Command numbers as typed by the user."""

    INSERT_TEXT_ON_CURSOR = 1
    ADD_NEW_CHAR_LINE = 2
    SAVE_TO_FILE = 3
    LOAD_FROM_FILE = 4
    PRINT_TO_CONSOLE = 5
    MOVE_CURSOR = 6
    INSERT_WITH_REPLACEMENT = 7
    SEARCH_TEXT = 8
    DELETE_TEXT = 9
    CUT = 10
    COPY = 11
    PASTE = 12
    UNDO = 13
    REDO = 14
    ADD_CONTACT = 15
    ADD_TASK = 16
    ENCRYPT_ALL = 17
    DECRYPT_ALL = 18
    DELETE_LINE_OBJ = 19
    CHANGE_TASK_STATUS = 20
    END_PROGRAM = 21

    @property
    def description(self) -> str:
        """Short text shown in the help listing."""
        return _DESCRIPTIONS[self]


_DESCRIPTIONS: dict[UserCommand, str] = {
    UserCommand.INSERT_TEXT_ON_CURSOR: "Insert on cursor",
    UserCommand.ADD_NEW_CHAR_LINE: "Start new char line",
    UserCommand.SAVE_TO_FILE: "Save to file",
    UserCommand.LOAD_FROM_FILE: "Load from file",
    UserCommand.PRINT_TO_CONSOLE: "Print to console",
    UserCommand.MOVE_CURSOR: "Move cursor",
    UserCommand.INSERT_WITH_REPLACEMENT: "Insert with replacement",
    UserCommand.SEARCH_TEXT: "Search text",
    UserCommand.DELETE_TEXT: "Delete text",
    UserCommand.CUT: "Cut",
    UserCommand.COPY: "Copy",
    UserCommand.PASTE: "Paste",
    UserCommand.UNDO: "Undo",
    UserCommand.REDO: "Redo",
    UserCommand.ADD_CONTACT: "Add contact",
    UserCommand.ADD_TASK: "Add task",
    UserCommand.ENCRYPT_ALL: "Encrypt all data",
    UserCommand.DECRYPT_ALL: "Decrypt all data",
    UserCommand.DELETE_LINE_OBJ: "Delete current line object (except 1st line)",
    UserCommand.CHANGE_TASK_STATUS: "Change task status",
    UserCommand.END_PROGRAM: "End program",
}


def help_text() -> str:
    """The listing of all commands, one ``number - description`` per line."""
    return "".join(f"{command.value} - {command.description}\n" for command in UserCommand)