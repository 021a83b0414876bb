import numpy as np

from jetpass.encoding.pack import (
    equipment_nibble, level_bits, map_bits, pack_slots, score_digits,
)
from jetpass.state import GameState


def test_score_zero_contributes_nothing():
    assert score_digits("000000") == (0, 0, 0, 0, 0, 0)
    assert score_digits("0") == (0, 0, 0, 0, 0, 0)


def test_score_digits_units_first():
    assert score_digits("123456") == (6, 5, 4, 3, 2, 1)
    assert score_digits("42") == (2, 4, 0, 0, 0, 0)


def test_score_scattered_across_slots():
    slots = pack_slots(GameState(123456, 0, 0))
    assert [slots[i] for i in (1, 5, 4, 6, 7, 11)] == [6, 5, 4, 3, 2, 1]


def test_equipment_nibble_is_additive():
    assert equipment_nibble(2, True, True) == 11
    assert equipment_nibble(0, False, False) == 0
    assert equipment_nibble(1, False, True) == 5
    assert equipment_nibble(3, True, False) == 14


def test_unknown_pod_and_map_codes_are_ignored():
    assert equipment_nibble(7, False, False) == 0
    assert equipment_nibble(-1, True, False) == 2
    assert map_bits(4) == 0
    assert map_bits(0) == 0


def test_level_and_map_share_slot_8():
    assert level_bits(5) == (1, 4)
    assert level_bits(63) == (15, 12)
    slots = pack_slots(GameState(0, 0, 5, map_type=2))
    assert slots[2] == 1
    assert slots[8] == 6


def test_pack_leaves_checksum_slots_zero():
    slots = pack_slots(GameState(999999, 15, 63, 3, 3, True, True))
    assert slots.shape == (12,)
    assert slots.dtype == np.int64
    assert slots[3] == 0 and slots[9] == 0
    assert slots.tolist() == [15, 9, 15, 0, 9, 9, 9, 9, 15, 0, 15, 9]
