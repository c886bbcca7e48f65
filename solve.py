#!/usr/bin/env python
"""
solve.py

Run the N-dimensional cube simulation on a '#'/'.' pattern file and print
the number of active cells after a fixed number of cycles, once per
requested dimension.

Example
-------
python solve.py input.txt --dims 3 4 5 --generations 6

Print every layer of the first two cycles in 3-D:
python solve.py example.txt --dims 3 --generations 2 --show
"""

from __future__ import annotations
import argparse, itertools, pathlib, sys, time
from typing import List

from grid import ParseError, layers, parse_grid, render_slice
from rules import LifeRule
from run_log import LOG_PATH, log_run
from simulate import generations as iter_generations, simulate

AXIS_NAMES = "zwvutsrq"


def layer_label(extra: tuple) -> str:
    """'z=0, w=-1' style heading for one 2-D layer."""
    names = [AXIS_NAMES[i] if i < len(AXIS_NAMES) else f"a{i + 3}" for i in range(len(extra))]
    return ", ".join(f"{name}={v}" for name, v in zip(names, extra))


def show_history(text: str, dim: int, generations: int, rule: LifeRule) -> None:
    """Print every non-empty layer of generations 0..`generations`."""
    start = parse_grid(text, dim)
    for idx, gen in enumerate(itertools.islice(iter_generations(start, rule), generations + 1)):
        print("Before any cycles:" if idx == 0 else f"After {idx} cycle{'s' if idx > 1 else ''}:")
        print()
        for extra in layers(gen):
            print(layer_label(extra))
            print(render_slice(gen, extra))
            print()


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Count active cubes after N cycles in D dimensions.")
    p.add_argument("input", type=pathlib.Path, help="Pattern file ('#' active, '.' inactive).")
    p.add_argument("--dims", type=int, nargs="+", default=[3, 4, 5], help="Dimensions to simulate.")
    p.add_argument("--generations", type=int, default=6, help="Number of cycles to run.")
    p.add_argument("--rule", default="B3/S23", help="Birth/survival rule in B/S notation.")
    p.add_argument("--show", action="store_true", help="Print every layer of every generation.")
    p.add_argument("--log-file", type=pathlib.Path, default=LOG_PATH, help="JSON-lines run log.")
    p.add_argument("--no-log", action="store_true", help="Do not append to the run log.")
    return p


def main(argv: List[str] | None = None) -> None:
    args = build_parser().parse_args(argv)

    if args.generations < 1:
        sys.exit("--generations must be at least 1")
    if any(d < 2 for d in args.dims):
        sys.exit("--dims values must be at least 2")
    try:
        rule = LifeRule.from_string(args.rule)
    except ValueError as e:
        sys.exit(str(e))
    try:
        text = args.input.read_text(encoding="utf-8")
    except OSError as e:
        sys.exit(f"cannot read {args.input}: {e}")

    for dim in args.dims:
        try:
            start = parse_grid(text, dim)
        except ParseError as e:
            sys.exit(f"{args.input}: {e}")

        if args.show:
            show_history(text, dim, args.generations, rule)

        t0 = time.perf_counter()
        count = len(simulate(start, args.generations, rule))
        elapsed = time.perf_counter() - t0
        print(f"Active {dim}D cubes after cycle {args.generations}: {count}")

        if not args.no_log:
            log_run(str(args.input), dim, args.generations, count, elapsed,
                    rule=rule.to_string(), log_file=args.log_file)


if __name__ == "__main__":
    main()
