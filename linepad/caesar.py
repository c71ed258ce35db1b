"""Caesar shift over ASCII letters, with a small interactive command."""

from __future__ import annotations

import re
import string
import sys
from typing import TextIO

ALPHABET_SIZE = 26

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")


def _shift_char(char: str, shift: int) -> str:
    if char in string.ascii_uppercase:
        base = ord("A")
    elif char in string.ascii_lowercase:
        base = ord("a")
    else:
        return char
    return chr((ord(char) - base + shift) % ALPHABET_SIZE + base)


def shift_text(text: str, key: int) -> str:
    """Shift every ASCII letter of ``text`` forward by ``key`` places, keeping case."""
    return "".join(_shift_char(char, key) for char in text)


def encrypt(text: str, key: int) -> str:
    """Encrypt ``text`` with a Caesar shift of ``key``."""
    return shift_text(text, key)


def decrypt(text: str, key: int) -> str:
    """Undo a Caesar shift of ``key``."""
    return shift_text(text, -key)


class CaesarCipher:
    """Object form of the cipher, as used by the editor."""

    def encrypt(self, text: str, key: int) -> str:
        return encrypt(text, key)

    def decrypt(self, text: str, key: int) -> str:
        return decrypt(text, key)


def _read_text(stdin: TextIO, stdout: TextIO) -> str:
    stdout.write("Type a text: ")
    stdout.flush()
    line = stdin.readline()
    return line[:-1] if line.endswith("\n") else line


def _read_key(stdin: TextIO, stdout: TextIO) -> int:
    stdout.write("Enter key: ")
    stdout.flush()
    match = _INT_PREFIX.match(stdin.readline())
    if match is None:
        stdout.write("Invalid input. One integer expected\n")
        return 0
    return int(match.group(1))


def main(argv: list[str] | None = None) -> int:
    """Ask for a text and key to encrypt, then for a text and key to decrypt."""
    stdin, stdout = sys.stdin, sys.stdout

    stdout.write("You could encrypt now... ")
    text = _read_text(stdin, stdout)
    key = _read_key(stdin, stdout)
    stdout.write(encrypt(text, key))

    stdout.write("\nYou could decrypt now... ")
    text = _read_text(stdin, stdout)
    key = _read_key(stdin, stdout)
    stdout.write(decrypt(text, key))
    stdout.write("\n")
    stdout.flush()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())