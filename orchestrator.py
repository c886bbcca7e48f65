#!/usr/bin/env python
"""
orchestrator.py
---------------
Run every puzzle listed in bench.yaml:

1. For each puzzle:
    - (optional) generate the pattern file if a "gen" block is present
      and the file does not exist yet
    - simulate it in every listed dimension for the listed cycle count
    - append one row per dimension to results/scores.csv
    - append one record per dimension to logs/runs.log
2. Relative puzzle paths are resolved against the config file's directory
"""
from __future__ import annotations

import argparse
import csv
import sys
import time
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List
import yaml

from generate import PatternGenerator
from grid import ParseError, parse_grid
from rules import LifeRule
from run_log import log_run
from simulate import simulate

# Paths & Globals
ROOT       = Path(__file__).resolve().parent
LOG_DIR    = ROOT / "logs"
RESULT_DIR = ROOT / "results"

DEFAULT_DIMS        = [3, 4, 5]
DEFAULT_GENERATIONS = 6

SCORE_HEADER = [
    "date_utc",
    "puzzle",
    "dim",
    "generations",
    "rule",
    "active",
    "seconds",
]


def load_config(cfg_path: Path) -> Dict[str, Any]:
    """Read and sanity-check a bench config; exits on malformed input."""
    cfg = yaml.safe_load(cfg_path.read_text(encoding="utf-8")) or {}
    puzzles = cfg.get("puzzles") if isinstance(cfg, dict) else None
    if not isinstance(puzzles, list) or not puzzles:
        sys.exit(f"{cfg_path}: expected a non-empty 'puzzles' list")
    for p in puzzles:
        if not isinstance(p, dict):
            sys.exit(f"{cfg_path}: every puzzle must be a mapping, got {p!r}")
        if "name" not in p or "path" not in p:
            sys.exit(f"{cfg_path}: every puzzle needs 'name' and 'path'")
        dims = p.get("dims", DEFAULT_DIMS)
        if not isinstance(dims, list) or not all(isinstance(d, int) and d >= 2 for d in dims):
            sys.exit(f"{cfg_path}: puzzle {p['name']!r} needs 'dims' as a list of integers >= 2")
    return cfg


def ensure_pattern(puzzle: Dict[str, Any], path: Path) -> None:
    """Write a generated pattern to `path` when the puzzle asks for one."""
    if "gen" not in puzzle:
        return
    if path.exists():
        print(f"Pattern {puzzle['name']} already exists; skipping generation")
        return
    gen_cfg = puzzle["gen"]
    gen = PatternGenerator(
        height=int(gen_cfg.get("height", 8)),
        width=int(gen_cfg.get("width", 8)),
        seed=int(gen_cfg.get("seed", 42)),
        density=float(gen_cfg.get("density", 0.5)),
    )
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(gen.generate().grid + "\n", encoding="utf-8")
    print(f"Generating pattern {puzzle['name']} → {path}")


# Main orchestration
def run(
    cfg_path: Path,
    puzzle_name: str | None = None,
    result_dir: Path = RESULT_DIR,
    log_dir: Path = LOG_DIR,
) -> List[List[str]]:
    """Run the configured puzzles and return the rows appended to scores.csv."""
    cfg = load_config(cfg_path)
    rule = LifeRule.from_string(cfg.get("rule", "B3/S23"))
    base_dir = cfg_path.resolve().parent

    for d in (result_dir, log_dir):
        d.mkdir(parents=True, exist_ok=True)

    scores_path = result_dir / "scores.csv"
    first_write = not scores_path.exists()
    rows: List[List[str]] = []

    with scores_path.open("a", newline="") as fp_scores:
        writer = csv.writer(fp_scores)
        if first_write:
            writer.writerow(SCORE_HEADER)

        for puzzle in cfg["puzzles"]:
            # skip puzzles not matching --puzzle (if provided)
            if puzzle_name is not None and puzzle["name"] != puzzle_name:
                continue

            path = Path(puzzle["path"])
            if not path.is_absolute():
                path = base_dir / path
            ensure_pattern(puzzle, path)
            if not path.exists():
                print("Pattern not found:", path, file=sys.stderr)
                continue

            text = path.read_text(encoding="utf-8")
            dims = puzzle.get("dims", DEFAULT_DIMS)
            n_gen = int(puzzle.get("generations", DEFAULT_GENERATIONS))

            for dim in dims:
                try:
                    start = parse_grid(text, dim)
                except ParseError as e:
                    print(f"Puzzle {puzzle['name']}: {e}", file=sys.stderr)
                    break

                t0 = time.perf_counter()
                count = len(simulate(start, n_gen, rule))
                elapsed = time.perf_counter() - t0

                row = [
                    datetime.now(timezone.utc).isoformat(timespec="seconds"),
                    puzzle["name"],
                    str(dim),
                    str(n_gen),
                    rule.to_string(),
                    str(count),
                    f"{elapsed:.4f}",
                ]
                writer.writerow(row)
                fp_scores.flush()
                rows.append(row)
                log_run(puzzle["name"], dim, n_gen, count, elapsed,
                        rule=rule.to_string(), log_file=log_dir / "runs.log")

                print(f"Finished {puzzle['name']} in {dim}D — {count} active after {n_gen} cycles ({elapsed:.2f}s)")

    return rows


def main(argv: List[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Run every configured cube puzzle")
    parser.add_argument(
        "--config",
        type=Path,
        default=ROOT / "bench.yaml",
        help="Path to bench.yaml",
    )
    parser.add_argument(
        "--puzzle",
        help="If set, only run this puzzle (must match one of the names in bench.yaml)",
    )
    parser.add_argument("--results-dir", type=Path, default=RESULT_DIR, help="Where scores.csv goes")
    parser.add_argument("--log-dir", type=Path, default=LOG_DIR, help="Where runs.log goes")
    args = parser.parse_args(argv)
    try:
        run(args.config, puzzle_name=args.puzzle, result_dir=args.results_dir, log_dir=args.log_dir)
    except ValueError as e:
        sys.exit(str(e))


if __name__ == "__main__":
    main()
