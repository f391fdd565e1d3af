"""
Vigenère Polyalphabetic Cipher
==============================
A Caesar shift that changes with every position: the keyword is
repeated under the text and each key letter gives the shift for the
letter above it (A=0, B=1, ... Z=25).

Historical note: Giovan Battista Bellaso, 1553, later credited to
Blaise de Vigenère. Called "le chiffre indéchiffrable" until Kasiski
published a general attack in 1863.

The shift for position i is key[i % len(key)], where i counts every
character handed to apply_cipher. A piece of a longer text therefore
encrypts identically on its own as long as it starts at a multiple of
the key length. The dispatcher relies on this.
"""

from ..alphabet import position, shift_letter
from ..keys import validate_vigenere_key
from .base import Cipher, CipherMode, CipherType


class VigenereCipher(Cipher):
    """Repeating-keyword polyalphabetic substitution."""

    cipher_type = CipherType.VIGENERE

    def __init__(self, key: str):
        self._key = validate_vigenere_key(key)
        self._shifts = tuple(position(ch) for ch in self._key)

    @property
    def key(self) -> str:
        return self._key

    @property
    def period(self) -> int:
        """Number of characters before the key stream repeats."""
        return len(self._shifts)

    def apply_cipher(self, text: str, mode: CipherMode) -> str:
        sign = 1 if mode is CipherMode.ENCRYPT else -1
        shifts = self._shifts
        period = len(shifts)
        return "".join(
            shift_letter(ch, sign * shifts[i % period])
            for i, ch in enumerate(text)
        )

    def __repr__(self):
        return f"VigenereCipher(key={self._key!r})"
