import io
import string

import pytest

from linepad.caesar import CaesarCipher, decrypt, encrypt, main, shift_text


def test_wraps_around_alphabet():
    assert encrypt("xyz XYZ", 3) == "abc ABC"


@pytest.mark.parametrize("key", [-30, -1, 0, 1, 5, 25, 26, 27, 100])
@pytest.mark.parametrize("text", ["", "abc", "Hello, World!", "Mixed 123 ?!", "zZaA"])
def test_round_trip(text, key):
    assert decrypt(encrypt(text, key), key) == text


def test_non_letters_unchanged():
    text = "0123456789 .,;:!?-_\u00e9\u00df"
    assert encrypt(text, 7) == text


def test_case_preserved():
    result = encrypt(string.ascii_letters, 11)
    assert result[:26].islower()
    assert result[26:].isupper()
    assert sorted(result[:26]) == list(string.ascii_lowercase)


def test_full_cycle_is_identity():
    assert encrypt("Some Text", 26) == "Some Text"
    assert encrypt("Some Text", 52) == "Some Text"


def test_decrypt_is_negative_shift():
    assert decrypt("Khoor", 3) == shift_text("Khoor", -3)
    assert encrypt("Hello", 3) == shift_text("Hello", 3)


def test_cipher_object_matches_functions():
    cipher = CaesarCipher()
    assert cipher.encrypt("attack", 4) == encrypt("attack", 4)
    assert cipher.decrypt(cipher.encrypt("attack", 4), 4) == "attack"


def test_main_session(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("Hello\n3\nKhoor\n3\n"))
    out = io.StringIO()
    monkeypatch.setattr("sys.stdout", out)
    assert main([]) == 0
    text = out.getvalue()
    assert "You could encrypt now... " in text
    assert "Khoor\nYou could decrypt now... " in text
    assert text.rstrip().endswith("Hello")


def test_main_invalid_key_uses_zero(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("abc\nnope\nabc\n0\n"))
    out = io.StringIO()
    monkeypatch.setattr("sys.stdout", out)
    assert main() == 0
    text = out.getvalue()
    assert "Invalid input. One integer expected\n" in text
    assert "abc\nYou could decrypt now... " in text