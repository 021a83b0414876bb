from __future__ import annotations

# Slot layout
N_SLOTS = 12
LIVES_SLOT = 0
LEVEL_HIGH_SLOT = 2
CHECKSUM_LOW_SLOT = 3
LEVEL_MAP_SLOT = 8
CHECKSUM_HIGH_SLOT = 9
EQUIPMENT_SLOT = 10
# units, tens, hundreds, thousands, ten-thousands, hundred-thousands
SCORE_SLOTS = (1, 5, 4, 6, 7, 11)

# Value ranges
SLOT_MAX = 15
MAX_LIVES = 15
MAX_LEVEL = 63
SCORE_DIGITS = 6
MAX_SCORE = 999_999

# Equipment nibble (slot 10)
POD_VALUES = {1: 4, 2: 8, 3: 12}
SHIELDS_BIT = 2
THRUSTERS_BIT = 1

# Map variant added to the level low bits (slot 8)
MAP_VALUES = {1: 1, 2: 2, 3: 3}

POD_NAMES = {
    0: "None",
    1: "Nippon Sports Jetpod",
    2: "Italian Racing Jetpod",
    3: "Invalid Jetpod",
}

SCORE_ERROR = "Score should be between 0 and 999999."
