"""
Spanish collation keys for sorting surnames.

Three levels, compared in order:
- primary: letters without case or accents; "ñ" is its own letter after "n"
- secondary: accents, unaccented first
- tertiary: case, lowercase first
"""

import unicodedata
from typing import Tuple

_COMBINING_TILDE = "\u0303"

# Sorts after every "n..." weight and before "o".
_ENYE = "n\uffff"


def collation_key(text: str) -> Tuple[Tuple[str, ...], Tuple[str, ...], Tuple[bool, ...]]:
    """
    Build a sort key that orders strings the way es-ES collation does.

    Args:
        text: String to build the key for

    Returns:
        Tuple of (primary, secondary, tertiary) weights
    """
    primary = []
    accents = []
    uppercase = []

    for char in unicodedata.normalize("NFD", text):
        if unicodedata.combining(char):
            if not primary:
                continue
            if char == _COMBINING_TILDE and primary[-1] == "n":
                primary[-1] = _ENYE
            else:
                accents[-1] += char
            continue

        primary.append(char.casefold())
        accents.append("")
        uppercase.append(char.isupper())

    return tuple(primary), tuple(accents), tuple(uppercase)


def collate(left: str, right: str) -> int:
    """Three-way comparison under Spanish collation: -1, 0 or 1."""
    left_key = collation_key(left)
    right_key = collation_key(right)
    return (left_key > right_key) - (left_key < right_key)
