"""Playfair cipher on a 5x5 square in which W is folded into V."""

from __future__ import annotations

from collections.abc import Iterator

ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
_SIZE = 5
_CELLS = _SIZE * _SIZE
_FILLER = "X"


def _is_letter(ch: str) -> bool:
    return "A" <= ch <= "Z" or "a" <= ch <= "z"


def _upper(ch: str) -> str:
    return ch.upper() if "a" <= ch <= "z" else ch


class _Square:
    """The key square and the position of every letter in it."""

    def __init__(self, key: str) -> None:
        letters: list[str] = []
        for ch in key:
            if len(letters) == _CELLS:
                break
            if ch == " ":
                continue
            letter = _upper(ch)
            if not _is_letter(letter):
                raise ValueError(f"invalid character in key: {ch!r}")
            if letter == "W":
                letter = "V"
            if letter not in letters:
                letters.append(letter)
        for letter in ALPHABET:
            if len(letters) == _CELLS:
                break
            if letter != "W" and letter not in letters:
                letters.append(letter)
        self.rows = [letters[row * _SIZE:(row + 1) * _SIZE] for row in range(_SIZE)]
        self.positions = {
            letter: divmod(index, _SIZE) for index, letter in enumerate(letters)
        }

    def digraph(self, first: str, second: str, shift: int) -> str:
        r1, c1 = self.positions[first]
        r2, c2 = self.positions[second]
        if r1 == r2:
            return self.rows[r1][(c1 + shift) % _SIZE] + self.rows[r2][(c2 + shift) % _SIZE]
        if c1 == c2:
            return self.rows[(r1 + shift) % _SIZE][c1] + self.rows[(r2 + shift) % _SIZE][c2]
        return self.rows[r1][c2] + self.rows[r2][c1]


def _plaintext_pairs(text: str) -> Iterator[tuple[str, str]]:
    letters = []
    for ch in text:
        if ch == " ":
            continue
        if not _is_letter(ch):
            raise ValueError(f"invalid character in text: {ch!r}")
        letter = _upper(ch)
        letters.append("V" if letter == "W" else letter)

    index = 0
    while index < len(letters):
        first = letters[index]
        if index + 1 == len(letters):
            yield first, _FILLER
            return
        second = letters[index + 1]
        if first == second and first != _FILLER:
            yield first, _FILLER
            index += 1
        else:
            yield first, second
            index += 2


def _ciphertext_pairs(text: str) -> Iterator[tuple[str, str]]:
    letters = []
    for ch in text:
        if ch == " ":
            continue
        if not _is_letter(ch):
            raise ValueError(f"invalid character in ciphertext: {ch!r}")
        letter = _upper(ch)
        if letter == "W":
            raise ValueError("ciphertext cannot contain W")
        letters.append(letter)
    if len(letters) % 2:
        raise ValueError("ciphertext must have an even number of letters")
    return zip(letters[::2], letters[1::2])


def playfair_encrypt(key: str, text: str) -> str:
    """Encrypt ``text`` and return the digraphs separated by single spaces.

    Spaces are ignored, W becomes V, doubled letters are split with X and an
    odd length is padded with X. Any other non-letter raises ValueError.
    """
    square = _Square(key)
    return " ".join(square.digraph(a, b, 1) for a, b in _plaintext_pairs(text))


def playfair_decrypt(key: str, text: str) -> str:
    """Decrypt ``text``; spaces are ignored and the result has none."""
    square = _Square(key)
    return "".join(square.digraph(a, b, -1) for a, b in _ciphertext_pairs(text))