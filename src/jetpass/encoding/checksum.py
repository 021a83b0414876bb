from __future__ import annotations
import numpy as np

from jetpass.constants import CHECKSUM_HIGH_SLOT, CHECKSUM_LOW_SLOT, SLOT_MAX


def apply_checksum(slots: np.ndarray) -> np.ndarray:
    """
    Derive checksum slots 3 and 9 from the ten data slots.

    Slot 9 mixes slots 6, 7, 8, 10, 11; slot 3 mixes slots 0, 1, 2, 4, 5 plus
    the overflow of slot 9. An overflow of slot 3 carries one into slot 9
    before both are reduced mod 16. Returns a new array.
    """
    s = slots.copy()
    hi = (((s[6] ^ s[7]) + s[8]) ^ s[10]) + s[11]
    lo = (((s[0] ^ s[1]) + s[2]) ^ s[4]) + s[5] + hi // 16
    if lo > SLOT_MAX:
        hi += 1
    s[CHECKSUM_LOW_SLOT] = lo % 16
    s[CHECKSUM_HIGH_SLOT] = hi % 16
    return s
