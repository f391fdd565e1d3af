"""
Key validation
==============
Each cipher accepts its key as the raw string typed on the command
line. The functions here check it and return the normalized form the
cipher works with, or raise InvalidKey explaining what is wrong.

    caesar   -> int    non-negative decimal integer, reduced modulo 26
    playfair -> str    uppercase letters, at least 2 distinct after J->I
    vigenere -> str    uppercase letters, at least 1
"""

from functools import reduce

from .alphabet import ALPHABET_SIZE
from .exceptions import InvalidKey


def _is_ascii_letters(key: str) -> bool:
    return key.isascii() and key.isalpha()


def validate_caesar_key(key: str) -> int:
    """Return the shift for a Caesar key such as "10" or "300"."""
    if key is None or key == "":
        raise InvalidKey("Caesar key is required.")
    if not (key.isascii() and key.isdigit()):
        raise InvalidKey(
            f"Caesar key must be a non-negative integer, got {key!r}."
        )
    # digit by digit: int() refuses very long digit strings
    return reduce(lambda acc, d: (acc * 10 + int(d)) % ALPHABET_SIZE, key, 0)


def validate_vigenere_key(key: str) -> str:
    if not key:
        raise InvalidKey("Vigenère keyword is required.")
    if not _is_ascii_letters(key):
        raise InvalidKey(
            f"Vigenère keyword must contain letters only, got {key!r}."
        )
    return key.upper()


def validate_playfair_key(key: str) -> str:
    """
    Playfair keywords are letters only. J is merged into I when the
    key square is built, so "IJ" counts as a single letter; a square
    needs at least two distinct key letters.
    """
    if not key:
        raise InvalidKey("Playfair keyword is required.")
    if not _is_ascii_letters(key):
        raise InvalidKey(
            f"Playfair keyword must contain letters only, got {key!r}."
        )
    keyword = key.upper()
    if len(set(keyword.replace("J", "I"))) < 2:
        raise InvalidKey(
            f"Playfair keyword needs at least 2 distinct letters, got {key!r}."
        )
    return keyword
