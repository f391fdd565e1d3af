"""
Input sanitizing
================
The ciphers expect nothing but A-Z. Letters are upper-cased and
every other character (digits, whitespace, punctuation, non-ASCII
letters) is dropped.
"""

from .alphabet import is_letter


def transform_char(ch: str) -> str:
    """Return the uppercase letter for `ch`, or "" if it is not A-Z/a-z."""
    if not ch.isascii():
        return ""
    upper = ch.upper()
    return upper if is_letter(upper) else ""


def sanitize_text(text: str) -> str:
    return "".join(transform_char(ch) for ch in text)
