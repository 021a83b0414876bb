from __future__ import annotations

from jetpass.encoding.checksum import apply_checksum
from jetpass.encoding.pack import pack_slots
from jetpass.encoding.render import render
from jetpass.state import GameState


def encode(state: GameState) -> str:
    """Game state -> 12-character password."""
    return render(apply_checksum(pack_slots(state)))
