from __future__ import annotations
import argparse
import sys
from pathlib import Path

import pandas as pd
import yaml
from pydantic import ValidationError

from jetpass.config import FullConfig, PasswordRequest, error_lines, load_config
from jetpass.encoding.password import encode

COLUMNS = ["score", "lives", "level", "map_type", "pod", "shields", "thrusters"]
REQUIRED = ("score", "lives", "level")


def encode_row(row: pd.Series) -> tuple[str, str]:
    """(password, error) for one CSV row; exactly one of the two is empty."""
    raw = {}
    for k in COLUMNS:
        if k in row and pd.notna(row[k]):
            v = row[k]
            raw[k] = v.item() if hasattr(v, "item") else v
        elif k in REQUIRED:
            # a blank required cell is missing data, not a default of zero
            raw[k] = None
    if raw["score"] is None:
        raw["score"] = ""
    try:
        req = PasswordRequest.model_validate(raw)
    except ValidationError as e:
        return "", error_lines(e)[0]
    return encode(req.to_state()), ""


def encode_frame(df: pd.DataFrame) -> pd.DataFrame:
    out = df.copy()
    if len(out) == 0:
        out["password"] = pd.Series(dtype=str)
        out["error"] = pd.Series(dtype=str)
        return out
    res = out.apply(encode_row, axis=1, result_type="expand")
    out["password"] = res[0]
    out["error"] = res[1]
    return out


def main(argv=None):
    ap = argparse.ArgumentParser(description="Encode a CSV of game states into passwords")
    ap.add_argument("--config", default=None)
    ap.add_argument("--states", default=None)
    ap.add_argument("--out", default=None)
    args = ap.parse_args(argv)

    try:
        cfg = load_config(args.config) if args.config else FullConfig()
    except ValidationError as e:
        for line in error_lines(e):
            print(line, file=sys.stderr)
        return 1
    except (OSError, yaml.YAMLError) as e:
        print(f"{args.config}: {e}", file=sys.stderr)
        return 1
    states_path = args.states or cfg.batch.states_path
    out_path = Path(args.out or cfg.batch.out_path)

    # keep score as text so leading zeros and bad values reach the validator
    try:
        df = pd.read_csv(states_path, dtype={"score": str})
    except OSError as e:
        print(f"{states_path}: {e}", file=sys.stderr)
        return 1
    missing = [c for c in REQUIRED if c not in df.columns]
    if missing:
        print(f"{states_path}: missing columns {missing}", file=sys.stderr)
        return 1

    out = encode_frame(df)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    out.to_csv(out_path, index=False)
    n_bad = int((out["error"] != "").sum())
    print(f"Wrote {out_path} ({len(out) - n_bad} passwords, {n_bad} rejected)")
    return 0


if __name__ == "__main__":
    sys.exit(main())
