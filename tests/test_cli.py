import io
import sys

from linepad.caesar import encrypt
from linepad.cli import main, run
from linepad.editor import TextEditor
from linepad.lines import TaskLine
from linepad.user_commands import help_text


def _run(script, editor=None):
    editor = editor if editor is not None else TextEditor()
    stdout = io.StringIO()
    run(editor, io.StringIO(script), stdout)
    return editor, stdout.getvalue()


def test_insert_and_print():
    editor, output = _run("1\nhello\n5\n21\n")
    assert editor.render() == ["hello"]
    assert "hello \n" in output


def test_help_printed_at_start_and_on_bad_input():
    _, output = _run("abc\n21\n")
    assert output.count(help_text()) == 2


def test_unknown_command_is_rejected():
    _, output = _run("99\n21\n")
    assert "Command couldn't be applied to the current line type" in output


def test_toggle_not_allowed_on_text_line():
    _, output = _run("20\n21\n")
    assert "Command couldn't be applied to the current line type" in output


def test_add_task_and_toggle():
    editor, _ = _run("16\nbuy milk\n20\n21\n")
    assert isinstance(editor.lines[1], TaskLine)
    assert editor.lines[1].done is True


def test_insert_with_replacement():
    editor, _ = _run("1\nabcdef\n6\n0 1\n7\nXY\n21\n")
    assert editor.render() == ["aXYdef"]


def test_undo_and_redo():
    editor, _ = _run("1\nabc\n13\n21\n")
    assert editor.render() == [""]
    _run("14\n21\n", editor)
    assert editor.render() == ["abc"]


def test_nothing_to_undo_is_reported():
    _, output = _run("13\n21\n")
    assert "There is nothing to undo" in output


def test_cut_then_paste_restores_text():
    editor, output = _run("1\nabc\n6\n0 0\n10\n2\n12\n21\n")
    assert editor.render() == ["abc"]
    assert "Paste on cursor.." in output


def test_search_reports_positions():
    _, output = _run("1\nabab\n8\nab\n21\n")
    assert "line 0, symbol 0 (0-based indexes)" in output
    assert "line 0, symbol 2 (0-based indexes)" in output


def test_move_cursor_invalid_input():
    editor, output = _run("6\nnope\n21\n")
    assert "Invalid input. Two integers expected" in output
    assert editor.cursor.line_index == 0


def test_move_cursor_out_of_range_reports_error():
    editor, output = _run("6\n5 0\n21\n")
    assert "Can't move to line 5" in output
    assert editor.cursor.line_index == 0


def test_encrypt_then_decrypt_round_trip():
    editor, _ = _run("1\nHello\n17\n3\n21\n")
    assert editor.render() == [encrypt("Hello", 3)]
    _run("18\n3\n21\n", editor)
    assert editor.render() == ["Hello"]


def test_save_and_load_objects(tmp_path):
    path = tmp_path / "doc.bin"
    first, _ = _run(f"15\nAda\nada@example.com\n16\nwrite\n3\n{path}\n21\n")
    second, _ = _run(f"4\n{path}\n21\n")
    assert second.render() == [""] + first.render()


def test_load_missing_file_is_reported(tmp_path):
    editor, output = _run(f"4\n{tmp_path / 'missing.bin'}\n21\n")
    assert editor.line_count == 1
    assert "missing.bin" in output


def test_cursor_kept_inside_document_after_undo_of_delete():
    editor, _ = _run("16\ntask\n19\n13\n5\n21\n")
    assert editor.line_count == 2
    assert editor.cursor.line_index == 1


def test_end_of_input_stops_loop():
    editor, output = _run("1\nxy\n")
    assert editor.render() == ["xy"]
    assert output.endswith("Type a number of a command: ")


def test_main_reads_standard_input(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("1\nhi\n5\n21\n"))
    assert main() == 0
    assert "hi \n" in capsys.readouterr().out