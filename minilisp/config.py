from __future__ import annotations
import logging
import os
import sys

DEFAULT_MAX_DEPTH = 1000
DEFAULT_LOG_LEVEL = "WARNING"

# Python frames one user-function call may hold while its body runs
FRAMES_PER_CALL = 8
# Never ask the host for more frames than this
HOST_FRAME_CAP = 15000

logger = logging.getLogger(__name__)


def int_from_env(var: str, default: int) -> int:
    raw = os.environ.get(var)
    if not raw:
        return default
    try:
        value = int(raw.strip())
    except ValueError:
        logger.warning("Ignoring %s=%r: not an integer", var, raw)
        return default
    if value <= 0:
        logger.warning("Ignoring %s=%r: must be positive", var, raw)
        return default
    return value


def get_max_depth() -> int:
    return int_from_env('MINILISP_MAX_DEPTH', DEFAULT_MAX_DEPTH)


def ensure_recursion_limit(max_depth: int) -> int:
    """Raise the host recursion limit so `max_depth` nested calls fit.

    The limit is only ever raised, and never past HOST_FRAME_CAP; returns the
    limit now in force.
    """
    wanted = min(max_depth * FRAMES_PER_CALL + 1000, HOST_FRAME_CAP)
    current = sys.getrecursionlimit()
    if wanted > current:
        logger.debug("raising recursion limit %d -> %d", current, wanted)
        sys.setrecursionlimit(wanted)
        return wanted
    return current


def get_log_level() -> str:
    raw = os.environ.get('MINILISP_LOG_LEVEL', '').strip().upper()
    # only accept names the logging module knows about
    if raw and isinstance(logging.getLevelName(raw), int):
        return raw
    return DEFAULT_LOG_LEVEL
