"""
I/O utilities for batch runs.

- write_csv:      one row per game, built from run_case/run_goal results.
- write_manifest: dump a JSON manifest with config, stats and metadata.
- timestamp_id:   stable UTC run ID string.
- git_commit_or_unknown: best-effort short commit hash for reproducibility.

Signatures are prefixed with an apostrophe so spreadsheet apps don't read
strings like "+*#+#" as formulas.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List
import csv
import json
import logging
import subprocess
import datetime as dt

from gtw.engine import humanize

logger = logging.getLogger(__name__)

BASE_COLUMNS = ["solver", "N", "goal", "success", "guesses", "time_ms", "error"]
TURN_COLUMNS = ["guess", "sig", "shown", "correct"]


def _excel_safe_signature(sig: str) -> str:
    return "'" + sig if sig else sig


def csv_columns(max_tries: int) -> List[str]:
    """Header for a results CSV: game columns, then guess/sig/shown/correct per turn."""
    return BASE_COLUMNS + [f"{col}_{turn}" for turn in range(1, max_tries + 1)
                           for col in TURN_COLUMNS]


def _result_row(r: Dict, N: int) -> Dict:
    # An aborted game keeps its error text; a finished game leaves it blank.
    row = {
        "solver": r.get("solver_id", "?"),
        "N": N,
        "goal": r["answer"],
        "success": r["success"],
        "guesses": r["guesses"],
        "time_ms": round(float(r["time_ms"]), 3),
        "error": r.get("error", ""),
    }
    for turn, (guess, sig) in enumerate(r.get("history", []), start=1):
        row[f"guess_{turn}"] = guess
        row[f"sig_{turn}"] = _excel_safe_signature(sig)
        row[f"shown_{turn}"] = humanize(sig, guess)
        row[f"correct_{turn}"] = sig.count("+")
    return row


def write_csv(results: List[Dict], path: str, max_tries: int, N: int) -> str:
    """
    Write a batch of game results to CSV and return the path written.

    Turns a game never reached are left empty. The `shown` column is the
    humanized signature a player would have seen; `correct` is the number of
    letters in the right place.
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)

    with p.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=csv_columns(max_tries), restval="")
        w.writeheader()
        for r in results:
            w.writerow(_result_row(r, N))

    logger.debug("wrote %d rows to %s", len(results), p)
    return str(p)


def write_manifest(manifest: Dict, path: str) -> str:
    """
    Write a JSON manifest for one run.

    Typical keys:
      - run_id, git_commit
      - config: CLI args
      - wordlists: output of datasets.validate_wordlists(...)
      - stats: output of harness.stats.summarize(...)
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", encoding="utf-8") as f:
        json.dump(manifest, f, indent=2)
    return str(p)


def timestamp_id() -> str:
    """
    Return a compact UTC timestamp suitable for filenames, e.g. 20250820T024121Z.
    """
    return dt.datetime.now(dt.timezone.utc).strftime("%Y%m%dT%H%M%SZ")


def git_commit_or_unknown() -> str:
    """
    Best-effort short git hash of the current repo state.
    Returns 'unknown' if git is not available or the call fails.
    """
    try:
        return (
            subprocess.check_output(
                ["git", "rev-parse", "--short", "HEAD"],
                stderr=subprocess.DEVNULL,
            )
            .decode()
            .strip()
        )
    except (OSError, subprocess.CalledProcessError):
        return "unknown"
