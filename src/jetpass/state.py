from __future__ import annotations
from dataclasses import dataclass

@dataclass(frozen=True, slots=True)
class GameState:
    score: int              # 0..999999
    lives: int              # 0..15
    level: int              # 0..63
    map_type: int = 0       # 0..3 (0 = no map)
    pod: int = 0            # 0..3 (0 = no pod)
    shields: bool = False
    thrusters: bool = False
