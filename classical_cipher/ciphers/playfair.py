"""
Playfair Digraph Cipher
=======================
Letters are enciphered in pairs using a 5x5 key square.

Historical note: Charles Wheatstone, 1854, promoted by Lord Playfair.
Used by the British in the Boer War and WWI as a field cipher.

Conventions used throughout this module:
  * J is merged into I. The square has no J and J in the input is
    read as I, so J never appears in the output.
  * A doubled pair (e.g. "SS") is broken with X, or with Q when the
    doubled letter is X itself. Pairing restarts at the second letter.
  * A lone final letter is padded with Z, or with X if it is a Z.

Square for the key "HELLO":

    H E L O A
    B C D F G
    I K M N P
    Q R S T U
    V W X Y Z

Pair rules:
  same row     -> letter to the right (encrypt) / left (decrypt)
  same column  -> letter below (encrypt) / above (decrypt)
  rectangle    -> letter in own row, partner's column (both directions)

Because filler letters depend on the whole text, the output of one
pass over a string is not the concatenation of passes over its pieces.
Playfair text is never split for parallel processing.
"""

from typing import Dict, Iterator, List, Tuple

from ..alphabet import ALPHABET, is_letter
from ..keys import validate_playfair_key
from .base import Cipher, CipherMode, CipherType

Coords = Tuple[int, int]


class PlayfairCipher(Cipher):
    """Digraph substitution over a keyword-derived 5x5 square."""

    cipher_type = CipherType.PLAYFAIR

    SIZE          = 5
    MERGED        = "J"   # dropped from the square ...
    MERGED_INTO   = "I"   # ... and read as this letter
    FILLER        = "X"
    FILLER_ALT    = "Q"   # breaks "XX"
    PADDING       = "Z"
    PADDING_ALT   = "X"   # pads a final "Z"

    def __init__(self, key: str):
        self._key = validate_playfair_key(key)
        self._square = self._build_square(self._key)
        self._coords: Dict[str, Coords] = {
            ch: divmod(i, self.SIZE) for i, ch in enumerate(self._square)
        }

    @property
    def key(self) -> str:
        return self._key

    @property
    def square(self) -> List[str]:
        """The key square as five row strings."""
        return [
            self._square[row * self.SIZE:(row + 1) * self.SIZE]
            for row in range(self.SIZE)
        ]

    @classmethod
    def _build_square(cls, keyword: str) -> str:
        letters = keyword.replace(cls.MERGED, cls.MERGED_INTO) + ALPHABET
        square = []
        for ch in letters:
            if ch != cls.MERGED and ch not in square:
                square.append(ch)
        return "".join(square)

    def _digraphs(self, text: str) -> Iterator[Tuple[str, str, str]]:
        """
        Yield (first, second, passthrough) for each digraph, applying
        the merge, filler and padding rules. Characters outside A-Z
        are carried in `passthrough` and emitted after the pair that was
        open when they were met.
        """
        first = None
        held: List[str] = []
        for ch in text:
            if not is_letter(ch):
                if first is None:
                    yield "", "", ch
                else:
                    held.append(ch)
                continue
            if ch == self.MERGED:
                ch = self.MERGED_INTO
            if first is None:
                first = ch
            elif ch == first:
                filler = self.FILLER_ALT if ch == self.FILLER else self.FILLER
                yield first, filler, "".join(held)
                held = []
                first = ch
            else:
                yield first, ch, "".join(held)
                held = []
                first = None
        if first is not None:
            padding = self.PADDING_ALT if first == self.PADDING else self.PADDING
            yield first, padding, "".join(held)

    def _substitute(self, a: str, b: str, step: int) -> str:
        (row_a, col_a), (row_b, col_b) = self._coords[a], self._coords[b]
        size = self.SIZE
        if row_a == row_b:
            col_a, col_b = (col_a + step) % size, (col_b + step) % size
        elif col_a == col_b:
            row_a, row_b = (row_a + step) % size, (row_b + step) % size
        else:
            col_a, col_b = col_b, col_a
        return self._square[row_a * size + col_a] + self._square[row_b * size + col_b]

    def apply_cipher(self, text: str, mode: CipherMode) -> str:
        step = 1 if mode is CipherMode.ENCRYPT else -1
        out = []
        for first, second, passthrough in self._digraphs(text):
            if first:
                out.append(self._substitute(first, second, step))
            out.append(passthrough)
        return "".join(out)

    def __repr__(self):
        return f"PlayfairCipher(key={self._key!r})"
