from __future__ import annotations

import json
import pathlib
import time

# Path to the global run log file
LOG_PATH = pathlib.Path("logs") / "runs.log"


def log_run(
    source: str,
    dim: int,
    generations: int,
    count: int,
    elapsed: float,
    *,
    rule: str = "B3/S23",
    log_file: pathlib.Path = LOG_PATH,
) -> None:
    """Append a record of one finished simulation to the log file.

    Each line is a JSON object with the keys:
      - ts: ISO timestamp (UTC)
      - source: where the initial pattern came from (file path or dataset name)
      - dim, generations, rule: the simulation parameters
      - count: active cells after the last generation
      - seconds: wall-clock time spent simulating
    """
    log_file.parent.mkdir(parents=True, exist_ok=True)
    entry = {
        "ts": time.strftime("%Y-%m-%dT%H:%M:%SZ", time.gmtime()),
        "source": source,
        "dim": dim,
        "generations": generations,
        "rule": rule,
        "count": count,
        "seconds": round(elapsed, 4),
    }
    with log_file.open("a", encoding="utf-8") as fp:
        fp.write(json.dumps(entry, ensure_ascii=False) + "\n")


def read_runs(log_file: pathlib.Path = LOG_PATH) -> list[dict]:
    """Load every record from a run log; a missing file reads as empty."""
    if not log_file.exists():
        return []
    with log_file.open(encoding="utf-8") as fp:
        return [json.loads(line) for line in fp if line.strip()]
