# linepad

A small console text editor that works line by line. Besides plain text
lines, a document can hold tasks (with a done/undone box) and contacts
(a name and an e-mail address). Edits can be undone and redone, the whole
document can be saved to and loaded from a binary file, and every text
field can be shifted with a Caesar cipher.

## Installation

```
pip install .
```

## Commands

### `linepad`

The full editor. It prints a numbered menu and reads a command number
from each line of input, until command 21 or the end of input:

```
1 - Insert on cursor
2 - Start new char line
3 - Save to file
4 - Load from file
5 - Print to console
6 - Move cursor
7 - Insert with replacement
8 - Search text
9 - Delete text
10 - Cut
11 - Copy
12 - Paste
13 - Undo
14 - Redo
15 - Add contact
16 - Add task
17 - Encrypt all data
18 - Decrypt all data
19 - Delete current line object (except 1st line)
20 - Change task status
21 - End program
```

Commands 1, 7, 9, 10, 11 and 12 only apply when the cursor is on a text
line, and command 20 only when it is on a task; otherwise the editor
answers "Command couldn't be applied to the current line type". A line
that is not a number prints the menu again. Errors such as an index out
of range or nothing to undo are printed and the loop goes on.

Commands 3 and 4 use the binary format described below; loading appends
the stored lines to the current document.

### `linepad-simple`

A minimal editor of plain text lines with eight commands: append text to
the last line, start a new line (and append to it), save to and load
from a plain text file, print the text, insert at a line and symbol
index, search, and quit. Loading appends the file's lines to the text.

### `linepad-caesar`

Asks for a text and a key and prints it encrypted, then asks for another
text and key and prints it decrypted. Only ASCII letters are shifted;
case is kept and everything else passes through.

## Using it from Python

```python
from linepad.editor import TextEditor

editor = TextEditor()
editor.insert_text("hello")
editor.add_task("write the report")
editor.add_contact("Ann", "ann@example.com")
print(editor.render())

editor.undo()
editor.encrypt(3)
editor.save_objects("notes.bin")
```

`TextEditor` keeps its lines in `lines` and its position in `cursor`
(a `Cursor` with `line_index` and `symbol_index`). Besides the methods
above it offers `move_cursor`, `add_char_line` (split the current line
at the cursor), `delete_line` (the first line is kept), `delete_text`,
`copy`, `paste`, `toggle_task`, `search_text` (returns `(line, symbol)`
pairs), `redo`, `decrypt`, `validate_command`, `remaining_in_line` and
the `line_count` property. `save_text` and `load_text` write and read
the displayed text as a plain text file. Requests that cannot be carried
out raise `linepad.editor.EditorError`; positions out of range raise
`IndexError`.

The line types live in `linepad.lines` (`CharLine`, `ContactLine`,
`TaskLine`, each holding `TextField` objects), and the undoable edits in
`linepad.commands`. `linepad.simple_editor.SimpleEditor` is the plain
editor behind `linepad-simple`.

The cipher is available on its own:

```python
from linepad.caesar import encrypt, decrypt

assert decrypt(encrypt("Hello, World", 5), 5) == "Hello, World"
```

## Binary file format

A little-endian 32-bit line count, followed by one record per line. Each
record starts with a four-byte tag:

- `TEXT`: text length (int32) and UTF-8 text;
- `CONT`: name length and name, then e-mail length and e-mail;
- `TASK`: description length and description, then one byte, non-zero
  when the task is done.

## Running the tests

```
pip install .[test]
pytest
```