from __future__ import annotations
from pydantic import BaseModel, Field, ValidationError, field_validator
import yaml

from jetpass.constants import MAX_LEVEL, MAX_LIVES, SCORE_ERROR
from jetpass.rules.validation import is_valid_score
from jetpass.state import GameState

class PasswordRequest(BaseModel):
    score: str = "0"
    lives: int = Field(0, ge=0, le=MAX_LIVES)
    level: int = Field(0, ge=0, le=MAX_LEVEL)
    map_type: int = Field(0, ge=0, le=3)
    pod: int = Field(0, ge=0, le=3)
    shields: bool = False
    thrusters: bool = False

    @field_validator("score", mode="before")
    @classmethod
    def _check_score(cls, v):
        # YAML reads an unquoted 000123 as octal 83, so only text is trusted
        if not isinstance(v, str):
            raise ValueError(f"score must be quoted text, e.g. score: '000123' (got {v!r})")
        if not is_valid_score(v):
            raise ValueError(SCORE_ERROR)
        return v

    def to_state(self) -> GameState:
        return GameState(
            score=int(self.score),
            lives=self.lives,
            level=self.level,
            map_type=self.map_type,
            pod=self.pod,
            shields=self.shields,
            thrusters=self.thrusters,
        )

class BatchCfg(BaseModel):
    states_path: str = "data/states.csv"
    out_path: str = "runs/passwords.csv"

class FullConfig(BaseModel):
    request: PasswordRequest = PasswordRequest()
    batch: BatchCfg = BatchCfg()

def load_config(path: str) -> FullConfig:
    with open(path, "r") as f:
        raw = yaml.safe_load(f) or {}
    return FullConfig.model_validate(raw)

def error_lines(e: ValidationError) -> list[str]:
    """One readable line per validation error; a bad score reads as SCORE_ERROR alone."""
    lines = []
    for err in e.errors():
        msg = err["msg"].removeprefix("Value error, ")
        loc = ".".join(str(p) for p in err["loc"])
        if loc in ("score", "request.score") and msg == SCORE_ERROR:
            lines.append(msg)
        else:
            lines.append(f"{loc}: {msg}")
    return lines
