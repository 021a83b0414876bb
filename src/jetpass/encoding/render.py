from __future__ import annotations
import numpy as np

from jetpass.constants import N_SLOTS, SLOT_MAX
from jetpass.features.alphabet import glyphs


def render(slots: np.ndarray) -> str:
    if slots.shape != (N_SLOTS,):
        raise ValueError(f"Expected {N_SLOTS} slots, got shape {slots.shape}")
    bad = np.flatnonzero((slots < 0) | (slots > SLOT_MAX))
    if bad.size:
        i = int(bad[0])
        raise ValueError(f"Slot {i} out of range: {int(slots[i])}")
    return "".join(glyphs(slots))
