"""Crash reporting helpers: fatal-signal tracebacks and stack dumps."""

from __future__ import annotations

import faulthandler
import logging
import sys
import traceback

logger = logging.getLogger(__name__)

_MAX_FRAMES = 128


def install_segfault_handler() -> bool:
    """Dump a traceback to stderr when the process hits a fatal signal.

    Returns whether the handler is active.
    """
    faulthandler.enable(file=sys.stderr)
    return faulthandler.is_enabled()


def backtrace(skip: int = 0) -> str:
    """Describe the current call stack, innermost frame first.

    Frame 0 is this function itself; the first ``skip`` frames are left
    out. At most 128 frames are examined; a deeper stack is marked
    ``[truncated]``.
    """
    if skip < 0:
        raise ValueError("skip must not be negative")
    stack = traceback.extract_stack()
    frames = list(reversed(stack))[:_MAX_FRAMES]
    lines = []
    for index, frame in enumerate(frames):
        if index < skip:
            continue
        line = f"{index:<3d} {frame.name} ({frame.filename}:{frame.lineno})"
        logger.critical(line)
        lines.append(line + "\n")
    if len(stack) >= _MAX_FRAMES:
        lines.append("[truncated]\n")
    return "".join(lines)