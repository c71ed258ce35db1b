import pytest

from linepad.user_commands import UserCommand, help_text


@pytest.mark.parametrize(
    ("number", "expected"),
    [
        (1, "INSERT_TEXT_ON_CURSOR"),
        (10, "CUT"),
        (21, "END_PROGRAM"),
    ],
)
def test_numbers_match_source(number, expected):
    command = UserCommand(number)
    assert command.name == expected
    assert command == number


def test_lookup_by_number():
    assert UserCommand(15) is UserCommand.ADD_CONTACT


def test_descriptions():
    assert UserCommand(17).description == "Encrypt all data"
    assert (
        UserCommand(19).description
        == "Delete current line object (except 1st line)"
    )


def test_unknown_number_rejected():
    with pytest.raises(ValueError):
        UserCommand(99)


def test_help_text_lists_every_command_in_order():
    lines = help_text().splitlines()
    assert len(lines) == len(UserCommand)
    assert lines[0] == "1 - Insert on cursor"
    assert lines[-1] == "21 - End program"
    numbers = [int(line.split(" - ", 1)[0]) for line in lines]
    assert numbers == sorted(numbers)


def test_help_text_ends_with_newline():
    assert help_text().endswith("End program\n")