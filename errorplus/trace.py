"""Capturing and trimming call stacks."""

from __future__ import annotations

import inspect
from dataclasses import dataclass

from errorplus import config


@dataclass(frozen=True)
class Trace:
    """One frame of a call stack."""

    file: str
    function: str
    line: int

    def line_str(self) -> str:
        return str(self.line)

    def __str__(self) -> str:
        return f"func: {self.function} at: {self.file} line: {self.line_str()}"


def capture_trace() -> list[Trace]:
    """Return the call stack, innermost frame first, starting with this function.

    At most the configured maximum depth of frames is returned.
    """
    max_depth = config.trace_max_depth.get()
    frames: list[Trace] = []
    if max_depth <= 0:
        return frames

    frame = inspect.currentframe()
    try:
        while frame is not None and len(frames) < max_depth:
            code = frame.f_code
            module = inspect.getmodulename(code.co_filename) or "?"
            frames.append(
                Trace(
                    file=code.co_filename,
                    function=f"{module}.{code.co_name}",
                    line=frame.f_lineno,
                )
            )
            frame = frame.f_back
    finally:
        del frame
    return frames


def format_trace(frames: list[Trace] | None) -> list[Trace]:
    """Drop the configured number of frames from both ends of ``frames``.

    Each end is trimmed only if the list is longer than the count to drop.
    A negative count yields an empty list.
    """
    if frames is None:
        return []
    skip_first = config.trace_skip_first.get()
    skip_last = config.trace_skip_last.get()
    if skip_first < 0 or skip_last < 0:
        return []

    kept = list(frames)
    if len(kept) > skip_first:
        kept = kept[skip_first:]
    if len(kept) > skip_last:
        kept = kept[: len(kept) - skip_last]
    return [Trace(t.file, t.function, t.line) for t in kept]