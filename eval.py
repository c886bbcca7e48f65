from __future__ import annotations

import argparse
import json
import pathlib
import sys
from typing import Dict, List, Sequence


def _parse_prediction(raw: str, dims: Sequence[int]) -> Dict[int, int]:
    """
    Turn one prediction line into {dim: count}. Accepted forms:
      - a JSON object keyed by dimension, e.g. {"3": 112, "4": 848}
      - whitespace- or comma-separated integers in the order of `dims`
    Raises ValueError on anything else, including negative counts.
    """
    raw = raw.strip()
    if not raw:
        raise ValueError("empty prediction")

    if raw.startswith("{"):
        try:
            obj = json.loads(raw)
        except json.JSONDecodeError as e:
            raise ValueError(f"invalid JSON: {e}") from e
        if not isinstance(obj, dict):
            raise ValueError("prediction must be a JSON object")
        counts = {int(k): v for k, v in obj.items()}
    else:
        parts = raw.replace(",", " ").split()
        if len(parts) != len(dims):
            raise ValueError(f"expected {len(dims)} counts, got {len(parts)}")
        counts = dict(zip(dims, parts))

    parsed: Dict[int, int] = {}
    for dim, value in counts.items():
        if isinstance(value, bool):
            raise ValueError(f"non-integer count for {dim}-D: {value!r}")
        try:
            n = int(value)
        except (TypeError, ValueError) as e:
            raise ValueError(f"non-integer count for {dim}-D: {value!r}") from e
        if n < 0 or (isinstance(value, float) and value != n):
            raise ValueError(f"invalid count for {dim}-D: {value!r}")
        parsed[dim] = n
    return parsed


def count_accuracy(correct: int, predicted: int) -> float:
    '''
    1.0 for an exact count, falling linearly with the relative error;
    0.0 once the prediction is off by the size of the larger count.
    '''
    if correct == predicted:
        return 1.0
    return 1.0 - abs(correct - predicted) / max(correct, predicted)


def evaluate(gold_path: pathlib.Path, pred_path: pathlib.Path) -> None:
    gold_lines = gold_path.read_text(encoding="utf-8").splitlines()
    pred_lines = pred_path.read_text(encoding="utf-8").splitlines()

    if len(gold_lines) != len(pred_lines):
        print(
            f"Mismatch: {len(pred_lines)} predictions vs {len(gold_lines)} gold.",
            file=sys.stderr,
        )
        sys.exit(1)

    scored = 0
    sum_acc = 0.0
    exact_match = 0
    invalid = 0

    for idx, (gline, pred_raw) in enumerate(zip(gold_lines, pred_lines), 1):
        record = json.loads(gline)
        try:
            gold = {int(k): int(v) for k, v in record["target"].items()}
        except (KeyError, AttributeError, TypeError, ValueError) as e:
            print(f"Gold line {idx}: bad target ({e})", file=sys.stderr)
            sys.exit(1)
        dims = record.get("dims") or sorted(gold)

        try:
            pred = _parse_prediction(pred_raw, dims)
        except ValueError:
            invalid += 1
            pred = {}                                  # treat as fully wrong

        for dim, correct in gold.items():
            scored += 1
            if dim in pred:
                sum_acc += count_accuracy(correct, pred[dim])
                if pred[dim] == correct:
                    exact_match += 1

    if invalid:
        print(f"-Found {invalid} invalid prediction lines.", file=sys.stderr)

    if scored == 0:
        print("No gold counts to score.", file=sys.stderr)
        sys.exit(1)

    print(f"-Evaluated {len(gold_lines)} cases ({scored} counts)")
    print(f"-Count accuracy: {sum_acc / scored:.4f}")
    print(f"-Exact-match accuracy: {exact_match}/{scored} = {(exact_match / scored) * 100:.2f}%")
    sys.exit(0)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        description="Score predicted active-cube counts against a gold JSONL."
    )
    p.add_argument("--gold", type=pathlib.Path, required=True, help="Gold JSONL with a 'target' field.")
    p.add_argument("--pred", type=pathlib.Path, required=True, help="Predictions file (one line per case).")
    return p


def main(argv: List[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    evaluate(args.gold, args.pred)


if __name__ == "__main__":
    main()
