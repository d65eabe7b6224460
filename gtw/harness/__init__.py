from .core import run_case, run_goal, run_batch, MAX_TRIES
from .io import write_csv, write_manifest
from .stats import summarize, pretty_stats

__all__ = ["run_case", "run_goal", "run_batch", "MAX_TRIES", "write_csv", "write_manifest",
           "summarize", "pretty_stats"]
