"""
Common cipher interface
=======================
Every cipher is built once from its validated key and then used for
both directions: the mode travels with each call, never with the
instance. Instances hold no per-call state, so one instance can be
shared by any number of worker threads.
"""

from abc import ABC, abstractmethod
from enum import Enum


class CipherMode(Enum):
    ENCRYPT = "encrypt"
    DECRYPT = "decrypt"


class CipherType(Enum):
    CAESAR   = "caesar"     # shift
    PLAYFAIR = "playfair"   # digraph substitution
    VIGENERE = "vigenere"   # polyalphabetic


class Cipher(ABC):
    """Base class for the three classical ciphers."""

    cipher_type: CipherType

    @abstractmethod
    def apply_cipher(self, text: str, mode: CipherMode) -> str:
        """Encrypt or decrypt sanitized uppercase text."""
        raise NotImplementedError

    def encrypt(self, text: str) -> str:
        return self.apply_cipher(text, CipherMode.ENCRYPT)

    def decrypt(self, text: str) -> str:
        return self.apply_cipher(text, CipherMode.DECRYPT)

    def __repr__(self):
        return f"{type(self).__name__}()"
