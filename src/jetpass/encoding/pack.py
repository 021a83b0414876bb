from __future__ import annotations
import numpy as np

from jetpass.constants import (
    EQUIPMENT_SLOT, LEVEL_HIGH_SLOT, LEVEL_MAP_SLOT, LIVES_SLOT, MAP_VALUES,
    N_SLOTS, POD_VALUES, SCORE_DIGITS, SCORE_SLOTS, SHIELDS_BIT, THRUSTERS_BIT,
)
from jetpass.state import GameState


def empty_slots() -> np.ndarray:
    return np.zeros(N_SLOTS, dtype=np.int64)


def score_digits(score: str | int) -> tuple[int, ...]:
    """
    Decimal digits of the score, units first, zero-padded to six places.
    Only the lowest six digits are read.
    """
    fixed = f"{int(score):0{SCORE_DIGITS}d}"
    return tuple(int(fixed[-k]) for k in range(1, SCORE_DIGITS + 1))


def equipment_nibble(pod: int, shields: bool, thrusters: bool) -> int:
    # unknown pod codes add nothing
    value = POD_VALUES.get(pod, 0)
    if shields:
        value += SHIELDS_BIT
    if thrusters:
        value += THRUSTERS_BIT
    return value


def level_bits(level: int) -> tuple[int, int]:
    """(high bits for slot 2, low bits * 4 for slot 8)."""
    return level // 4, (level % 4) * 4


def map_bits(map_type: int) -> int:
    return MAP_VALUES.get(map_type, 0)


def pack_slots(state: GameState) -> np.ndarray:
    """Populate all ten data slots from a game state. Checksum slots stay 0."""
    slots = empty_slots()
    slots[LIVES_SLOT] = state.lives
    slots[list(SCORE_SLOTS)] = score_digits(state.score)
    slots[EQUIPMENT_SLOT] = equipment_nibble(state.pod, state.shields, state.thrusters)
    high, low = level_bits(state.level)
    slots[LEVEL_HIGH_SLOT] = high
    slots[LEVEL_MAP_SLOT] = low + map_bits(state.map_type)
    return slots
