from __future__ import annotations
import numpy as np

from jetpass.constants import (
    EQUIPMENT_SLOT, LEVEL_HIGH_SLOT, LEVEL_MAP_SLOT, LIVES_SLOT, POD_VALUES,
    SCORE_SLOTS, SHIELDS_BIT, THRUSTERS_BIT,
)
from jetpass.encoding.checksum import apply_checksum
from jetpass.encoding.pack import empty_slots, level_bits, map_bits, score_digits
from jetpass.encoding.render import render
from jetpass.rules.validation import is_valid_score


class PasswordEncoder:
    """
    Step-by-step encoder: reset, call each handle_* once, then generate_code.
    Handlers add into the slot array, except handle_level which assigns and so
    must run before handle_map. Not safe to share between concurrent encodings.
    """

    is_valid_score = staticmethod(is_valid_score)

    def __init__(self) -> None:
        self.slots: np.ndarray = empty_slots()

    def reset(self) -> None:
        self.slots = empty_slots()

    def handle_lives(self, lives: int) -> None:
        self.slots[LIVES_SLOT] += lives

    def handle_score(self, score: str) -> None:
        self.slots[list(SCORE_SLOTS)] += score_digits(score)

    def handle_pod(self, code: int) -> None:
        self.slots[EQUIPMENT_SLOT] += POD_VALUES.get(code, 0)

    def handle_shields(self, has_shields: bool) -> None:
        if has_shields:
            self.slots[EQUIPMENT_SLOT] += SHIELDS_BIT

    def handle_thrusters(self, has_thrusters: bool) -> None:
        if has_thrusters:
            self.slots[EQUIPMENT_SLOT] += THRUSTERS_BIT

    def handle_level(self, level: int) -> None:
        self.slots[LEVEL_HIGH_SLOT], self.slots[LEVEL_MAP_SLOT] = level_bits(level)

    def handle_map(self, map_type: int) -> None:
        self.slots[LEVEL_MAP_SLOT] += map_bits(map_type)

    def calculate_checksum(self) -> None:
        self.slots = apply_checksum(self.slots)

    def generate_code(self) -> str:
        self.calculate_checksum()
        return render(self.slots)
