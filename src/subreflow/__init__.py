from __future__ import annotations

from subreflow.services.analysis import analyze, summarize
from subreflow.services.document import build, parse
from subreflow.services.reflow import fix, fix_one

__version__ = "0.1.0"

__all__ = [
    "analyze",
    "build",
    "fix",
    "fix_one",
    "parse",
    "summarize",
    "__version__",
]
