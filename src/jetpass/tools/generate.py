from __future__ import annotations
import argparse
import sys

import yaml
from pydantic import ValidationError

from jetpass.config import FullConfig, PasswordRequest, error_lines, load_config
from jetpass.constants import POD_NAMES
from jetpass.encoding.checksum import apply_checksum
from jetpass.encoding.pack import pack_slots
from jetpass.encoding.render import render

FIELDS = ("score", "lives", "level", "map_type", "pod", "shields", "thrusters")


def build_request(args: argparse.Namespace) -> PasswordRequest:
    """Config-file values, overridden by any flag given on the command line."""
    cfg = load_config(args.config) if args.config else FullConfig()
    raw = cfg.request.model_dump()
    for k in FIELDS:
        v = getattr(args, k)
        if v is not None:
            raw[k] = v
    return PasswordRequest.model_validate(raw)


def main(argv=None):
    ap = argparse.ArgumentParser(description="Solar Jetman password generator")
    ap.add_argument("--config", default=None, help="YAML file with a `request:` section")
    ap.add_argument("--score", type=str, default=None)
    ap.add_argument("--lives", type=int, default=None)
    ap.add_argument("--level", type=int, default=None)
    ap.add_argument("--map", dest="map_type", type=int, default=None, help="0 none, 1-3 map variant")
    ap.add_argument("--pod", type=int, default=None, help="0 none, 1 Nippon, 2 Italian, 3 invalid")
    ap.add_argument("--shields", action=argparse.BooleanOptionalAction, default=None)
    ap.add_argument("--thrusters", action=argparse.BooleanOptionalAction, default=None)
    ap.add_argument("--show-slots", action="store_true")
    args = ap.parse_args(argv)

    try:
        req = build_request(args)
    except ValidationError as e:
        for line in error_lines(e):
            print(line, file=sys.stderr)
        return 1
    except (OSError, yaml.YAMLError) as e:
        print(f"{args.config}: {e}", file=sys.stderr)
        return 1

    slots = apply_checksum(pack_slots(req.to_state()))
    if args.show_slots:
        print("pod:", POD_NAMES[req.pod])
        print("slots:", " ".join(str(int(v)) for v in slots))
    print(render(slots))
    return 0


if __name__ == "__main__":
    sys.exit(main())
