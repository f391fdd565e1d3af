"""
Cipher factory
==============
Turns a cipher name and the raw key string into a ready cipher.
The key is validated during construction, so a caller either gets a
complete cipher or an InvalidKey, never something in between.
"""

import logging
from typing import Dict, Type, Union

from .ciphers.base import Cipher, CipherType
from .ciphers.caesar import CaesarCipher
from .ciphers.playfair import PlayfairCipher
from .ciphers.vigenere import VigenereCipher

logger = logging.getLogger(__name__)

CIPHERS: Dict[CipherType, Type[Cipher]] = {
    CipherType.CAESAR:   CaesarCipher,
    CipherType.PLAYFAIR: PlayfairCipher,
    CipherType.VIGENERE: VigenereCipher,
}


def cipher_factory(cipher_type: Union[CipherType, str], key: str) -> Cipher:
    """
    Build the cipher for `cipher_type` ("caesar", "playfair",
    "vigenere" or a CipherType member) keyed with `key`.

    Raises InvalidKey if the key does not suit the cipher and
    ValueError for an unknown cipher name.
    """
    if not isinstance(cipher_type, CipherType):
        try:
            cipher_type = CipherType(str(cipher_type).lower())
        except ValueError:
            names = ", ".join(t.value for t in CipherType)
            raise ValueError(
                f"Unknown cipher {cipher_type!r}; choose one of: {names}."
            ) from None
    cipher = CIPHERS[cipher_type](key)
    logger.debug(f"Constructed {cipher!r}")
    return cipher
