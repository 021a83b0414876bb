from __future__ import annotations
import re

from jetpass.constants import MAX_SCORE, SCORE_DIGITS

_WHOLE_NUMBER = re.compile(r"-?[0-9]+")


def is_whole_number(text: str) -> bool:
    return _WHOLE_NUMBER.fullmatch(text) is not None


def is_valid_score(text: str | None) -> bool:
    """True for a decimal string of at most six characters in 0..999999."""
    if text is None or not text.strip():
        return False
    if not is_whole_number(text) or len(text) > SCORE_DIGITS:
        return False
    return 0 <= int(text, 10) <= MAX_SCORE
