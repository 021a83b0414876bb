"""
Password glyphs. A slot value 0..15 indexes into ALPHABET.
Vowels and look-alike letters are left out so codes stay easy to copy by hand.
"""
from __future__ import annotations
import numpy as np

ALPHABET = ("B", "D", "G", "H", "K", "L", "M", "N", "P", "Q", "R", "T", "V", "W", "X", "Z")
_GLYPHS = np.array(ALPHABET)


def glyphs(values: np.ndarray) -> list[str]:
    """Vectorised lookup; caller guarantees every value is in 0..15."""
    return _GLYPHS[values].tolist()
