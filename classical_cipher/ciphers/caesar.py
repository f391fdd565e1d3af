"""
Caesar Shift Cipher
===================
Every letter moves a fixed number of places along the alphabet.

Historical note: Suetonius records Julius Caesar using a shift of
three for private letters. With only 25 useful keys it falls to a
brute-force search by hand.

Key: a non-negative integer, e.g. "10". Values of 26 and above are
accepted and reduced modulo 26.
"""

from ..alphabet import shift_letter
from ..keys import validate_caesar_key
from .base import Cipher, CipherMode, CipherType


class CaesarCipher(Cipher):
    """Fixed-shift substitution. Position independent, so any split is safe."""

    cipher_type = CipherType.CAESAR

    def __init__(self, key: str):
        self._shift = validate_caesar_key(key)

    @property
    def shift(self) -> int:
        return self._shift

    def apply_cipher(self, text: str, mode: CipherMode) -> str:
        shift = self._shift if mode is CipherMode.ENCRYPT else -self._shift
        return "".join(shift_letter(ch, shift) for ch in text)

    def __repr__(self):
        return f"CaesarCipher(shift={self._shift})"
