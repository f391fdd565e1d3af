"""
Alphabet arithmetic
===================
Letters A-Z as positions 0-25. Every cipher in the package shifts
letters with the same modulo-26 rule.
"""

ALPHABET      = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
ALPHABET_SIZE = len(ALPHABET)


def is_letter(ch: str) -> bool:
    """True for a single uppercase A-Z character."""
    return "A" <= ch <= "Z"


def position(ch: str) -> int:
    return ord(ch) - ord("A")


def letter(pos: int) -> str:
    return ALPHABET[pos % ALPHABET_SIZE]


def shift_letter(ch: str, shift: int) -> str:
    """
    Shift an uppercase letter by `shift` places, wrapping at Z.
    Negative shifts move backwards. Anything that is not A-Z is
    returned unchanged.
    """
    if not is_letter(ch):
        return ch
    return letter(position(ch) + shift)
