"""
generate_dataset.py

Create a JSONL file of cube-simulation tasks with their ground-truth counts.

Example
-------
python generate_dataset.py \
       --n 32 --height 8 --width 8 --dims 3 4 \
       --generations 6 --density 0.4 --seed 123 \
       --outfile data/cubes.jsonl

Each line looks like
{"grid":".#.\\n..#\\n###","dims":[3,4],"generations":6,"target":{"3":112,"4":848}}
"""

from __future__ import annotations
import argparse, json, pathlib
from typing import List

from generate import PatternGenerator, Problem
from simulate import run_dimensions


def problem_to_jsonl(problem: Problem) -> str:
    """
    Serialize a Problem (+ ground truth per dimension) as one JSON line.
    JSON object keys are strings, so dimensions appear as "3", "4", ...
    """
    target = run_dimensions(problem.grid, problem.dims, problem.generations)
    return json.dumps(
        {
            "grid": problem.grid,
            "dims": problem.dims,
            "generations": problem.generations,
            "target": {str(dim): count for dim, count in target.items()},
        },
        separators=(",", ":"),
    )


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Generate a JSONL file of N-D cube simulation tasks.")
    p.add_argument("--n", type=int, required=True, help="Number of problems to generate.")
    p.add_argument("--height", type=int, default=8, help="Pattern height.")
    p.add_argument("--width", type=int, default=8, help="Pattern width.")
    p.add_argument("--dims", type=int, nargs="+", default=[3, 4], help="Dimensions to embed each pattern in.")
    p.add_argument("--generations", type=int, default=6, help="Cycles per problem.")
    p.add_argument("--density", type=float, default=0.5, help="Probability a cell starts active.")
    p.add_argument("--seed", type=int, default=42, help="RNG seed for reproducibility.")
    p.add_argument("--outfile", type=pathlib.Path, required=True, help="Where to write the JSONL.")
    return p


def main(argv: List[str] | None = None) -> None:
    args = build_parser().parse_args(argv)

    gen = PatternGenerator(
        height=args.height,
        width=args.width,
        seed=args.seed,
        density=args.density,
    )
    batch = gen.generate_batch(
        num_problems=args.n,
        dims=args.dims,
        generations=args.generations,
        trim_trivial=True,
    )

    args.outfile.parent.mkdir(parents=True, exist_ok=True)
    with args.outfile.open("w", encoding="utf-8") as f:
        for prob in batch:
            f.write(problem_to_jsonl(prob) + "\n")

    print(f"Wrote {len(batch):,} problems to {args.outfile}")


if __name__ == "__main__":
    main()
