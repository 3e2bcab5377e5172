"""
Command-line entry point for objkit.

Reads mappings from YAML or JSON files and prints the result of the
object utilities, or prints values from the random generators.

    objkit diff original.yaml target.yaml
    objkit query params.json
    objkit leaves config.yaml
    objkit --seed 42 random-word 8
"""
from __future__ import annotations

import argparse
import random
import sys
from typing import List, Optional

import yaml

from objkit.objects import (
    iter_leaves,
    object_diff,
    object_to_query_string,
    object_to_string,
    reset_object_value,
    to_text,
)
from objkit.randomness import random_color, random_num, random_word
from objkit.serialization import load_mapping_file, mapping_to_json, mapping_to_yaml
from objkit.values import CyclicInputError, InvalidArgumentError


def _dump(obj, fmt: str) -> str:
    if fmt == "json":
        return mapping_to_json(obj, indent=2)
    return mapping_to_yaml(obj).rstrip("\n")


def _cmd_diff(args, rng) -> int:
    original = load_mapping_file(args.original)
    target = load_mapping_file(args.target)
    print(_dump(object_diff(original, target), args.format))
    return 0


def _cmd_query(args, rng) -> int:
    print(object_to_query_string(load_mapping_file(args.file)))
    return 0


def _cmd_string(args, rng) -> int:
    print(object_to_string(load_mapping_file(args.file), args.separator))
    return 0


def _cmd_leaves(args, rng) -> int:
    for key, value in iter_leaves(load_mapping_file(args.file)):
        print(f"{key}:{to_text(value)}")
    return 0


def _cmd_reset(args, rng) -> int:
    print(_dump(reset_object_value(load_mapping_file(args.file)), args.format))
    return 0


def _cmd_random_num(args, rng) -> int:
    print(random_num(args.min, args.max, rng=rng))
    return 0


def _cmd_random_color(args, rng) -> int:
    print(random_color(rng=rng))
    return 0


def _cmd_random_word(args, rng) -> int:
    if args.random and args.max is None:
        print("error: --random needs MAX", file=sys.stderr)
        return 2
    print(random_word(args.random, args.min, args.max, rng=rng))
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="objkit", description="Object and random value helpers")
    parser.add_argument("--seed", type=int, default=None, help="Seed for the random generators")
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("diff", help="Print what changes ORIGINAL into TARGET")
    p.add_argument("original", help="Path to original YAML/JSON mapping")
    p.add_argument("target", help="Path to target YAML/JSON mapping")
    p.add_argument("--format", choices=["yaml", "json"], default="yaml")
    p.set_defaults(handler=_cmd_diff)

    p = sub.add_parser("query", help="Print the mapping as a query string")
    p.add_argument("file")
    p.set_defaults(handler=_cmd_query)

    p = sub.add_parser("string", help="Print the mapping as key:value pairs")
    p.add_argument("file")
    p.add_argument("--separator", default=None)
    p.set_defaults(handler=_cmd_string)

    p = sub.add_parser("leaves", help="Print every leaf as key:value, one per line")
    p.add_argument("file")
    p.set_defaults(handler=_cmd_leaves)

    p = sub.add_parser("reset", help="Print the mapping with every key set to null")
    p.add_argument("file")
    p.add_argument("--format", choices=["yaml", "json"], default="yaml")
    p.set_defaults(handler=_cmd_reset)

    p = sub.add_parser("random-num", help="Print a random integer in [MIN, MAX]")
    p.add_argument("min", type=float)
    p.add_argument("max", type=float)
    p.set_defaults(handler=_cmd_random_num)

    p = sub.add_parser("random-color", help="Print a random #rrggbb color")
    p.set_defaults(handler=_cmd_random_color)

    p = sub.add_parser("random-word", help="Print a random alphanumeric word")
    p.add_argument("min", type=int, help="Length, or minimum length with --random")
    p.add_argument("max", type=int, nargs="?", default=None, help="Maximum length with --random")
    p.add_argument("--random", action="store_true", help="Pick the length from [MIN, MAX]")
    p.set_defaults(handler=_cmd_random_word)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    rng = random.Random(args.seed) if args.seed is not None else None

    try:
        return args.handler(args, rng)
    except (FileNotFoundError, InvalidArgumentError, CyclicInputError, yaml.YAMLError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
