from .core import run_case, run_batch, summarize, WORDLE_MAX_TURNS
from .io import write_results, write_manifest, run_id

__all__ = ["run_case", "run_batch", "summarize", "WORDLE_MAX_TURNS",
           "write_results", "write_manifest", "run_id"]
