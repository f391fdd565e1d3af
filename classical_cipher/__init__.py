"""
classical_cipher
================
Classical substitution ciphers with a chunked, thread-pooled engine.

Ciphers:
    caesar    — Shift cipher (single integer key)
    playfair  — Digraph substitution over a 5x5 key square
    vigenere  — Polyalphabetic shift driven by a repeating keyword

None of these is secure. They are historical and teaching ciphers.

Usage:
    cipher = cipher_factory("vigenere", "hello")
    ParallelDispatcher(workers=4).run(cipher, text, CipherMode.ENCRYPT)
"""

__version__ = "0.5.0"

from .ciphers.base      import Cipher, CipherMode, CipherType
from .ciphers.caesar    import CaesarCipher
from .ciphers.playfair  import PlayfairCipher
from .ciphers.vigenere  import VigenereCipher
from .dispatch          import ParallelDispatcher
from .exceptions        import CipherError, DispatchError, InvalidKey
from .factory           import cipher_factory
from .sanitize          import sanitize_text, transform_char

__all__ = [
    "Cipher",
    "CipherMode",
    "CipherType",
    "CaesarCipher",
    "PlayfairCipher",
    "VigenereCipher",
    "ParallelDispatcher",
    "CipherError",
    "DispatchError",
    "InvalidKey",
    "cipher_factory",
    "sanitize_text",
    "transform_char",
]
