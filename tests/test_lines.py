import io

import pytest

from linepad.lines import CharLine, ContactLine, TaskLine, TextField, read_line


def test_field_insert_and_delete():
    field = TextField("world")
    field.insert(0, "hello ")
    assert str(field) == "hello world"
    assert len(field) == 11
    field.delete(0, 6)
    assert str(field) == "world"


def test_field_insert_at_end_equals_append():
    a = TextField("abc")
    b = TextField("abc")
    a.insert(len(a), "def")
    b.append("def")
    assert a == b


def test_field_insert_out_of_range():
    field = TextField("abc")
    with pytest.raises(IndexError):
        field.insert(4, "x")
    assert str(field) == "abc"


def test_field_substring():
    field = TextField("abcdef")
    assert field.substring(2, 3) == "cde"
    assert field.substring(6, 0) == ""
    with pytest.raises(IndexError):
        field.substring(4, 3)


def test_field_delete_out_of_range():
    field = TextField("abc")
    with pytest.raises(IndexError):
        field.delete(2, 2)
    assert str(field) == "abc"


def test_field_clear():
    field = TextField("abc")
    field.clear()
    assert len(field) == 0
    assert str(field) == ""


def test_contact_render():
    line = ContactLine("Ann", "ann@example.com")
    assert line.render() == "Contact: Ann  Email: ann@example.com"


def test_task_render_and_toggle():
    task = TaskLine("buy milk")
    assert task.render() == "[   ]   buy milk"
    task.toggle()
    assert task.done is True
    assert task.render() == "[ * ]   buy milk"


def test_char_line_wire_bytes():
    buf = io.BytesIO()
    CharLine("hi").serialize(buf)
    assert buf.getvalue() == b"TEXT\x02\x00\x00\x00hi"


def test_task_wire_ends_with_status_byte():
    buf = io.BytesIO()
    TaskLine("x", done=True).serialize(buf)
    data = buf.getvalue()
    assert data[:4] == b"TASK"
    assert data[-1:] == b"\x01"


@pytest.mark.parametrize(
    "line",
    [
        CharLine(""),
        CharLine("some text"),
        ContactLine("Bob", "bob@example.com"),
        TaskLine("write tests", done=True),
        TaskLine("", done=False),
    ],
)
def test_round_trip(line):
    buf = io.BytesIO()
    line.serialize(buf)
    buf.seek(0)
    restored = read_line(buf)
    assert type(restored) is type(line)
    assert restored.render() == line.render()
    assert restored.text_fields() == line.text_fields()
    assert buf.read() == b""


def test_several_lines_in_sequence():
    lines = [CharLine("a"), TaskLine("b"), ContactLine("c", "c@example.com")]
    buf = io.BytesIO()
    for line in lines:
        line.serialize(buf)
    buf.seek(0)
    restored = [read_line(buf) for _ in lines]
    assert [r.render() for r in restored] == [l.render() for l in lines]


def test_unknown_tag():
    with pytest.raises(ValueError):
        read_line(io.BytesIO(b"XXXX\x00\x00\x00\x00"))


def test_truncated_data():
    buf = io.BytesIO()
    CharLine("truncate me").serialize(buf)
    with pytest.raises(ValueError):
        read_line(io.BytesIO(buf.getvalue()[:-3]))


def test_text_fields_are_live():
    contact = ContactLine("Ann", "ann@example.com")
    name, email = contact.text_fields()
    name.append("a")
    assert contact.render() == "Contact: Anna  Email: ann@example.com"
    assert email is contact.email