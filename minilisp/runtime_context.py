from __future__ import annotations
import threading
from typing import Optional

from minilisp import config

# Thread-local: each thread evaluates under the limit of the interpreter it
# is currently running.
_state = threading.local()


def set_max_depth(limit: Optional[int]) -> Optional[int]:
    """Install `limit` for this thread and return the one it replaces."""
    previous = getattr(_state, "max_depth", None)
    _state.max_depth = limit
    return previous


def get_max_depth() -> int:
    limit = getattr(_state, "max_depth", None)
    if limit is None:
        return config.get_max_depth()
    return limit
