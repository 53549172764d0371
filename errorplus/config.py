"""Package-wide settings that control how errors are rendered."""

from __future__ import annotations

import threading
from dataclasses import dataclass

from errorplus.safetypes import SafeBool, SafeInt, SafeString


@dataclass(frozen=True)
class Config:
    """A snapshot of the settings. Omitted flags are False."""

    show_timestamp: bool = False
    show_trace: bool = False
    show_file: bool = False
    show_func: bool = False
    show_line: bool = False
    show_tags: bool = False
    show_message: bool = False
    show_fn: bool = False
    show_fn_args: bool = False
    obscure_args: bool = False
    trace_skip_first: int = 0
    trace_max_depth: int = 0
    trace_skip_last: int = 0
    time_format: str = ""
    separator: str = ""


show_trace = SafeBool.true()
show_file = SafeBool.true()
show_func = SafeBool.true()
show_line = SafeBool.true()
show_timestamp = SafeBool.true()
show_tags = SafeBool.true()
show_message = SafeBool.true()
show_fn = SafeBool.true()
show_fn_args = SafeBool.true()
obscure_args = SafeBool.true()

# Frames dropped from the start of a captured trace (the capturing machinery).
trace_skip_first = SafeInt(3)
# Maximum number of frames captured.
trace_max_depth = SafeInt(15)
# Frames dropped from the end of a captured trace (the interpreter entry frames).
trace_skip_last = SafeInt(2)

time_format = SafeString("%Y-%m-%d %H:%M:%S")
separator = SafeString(" | ")

_BOOLS = (
    show_trace,
    show_file,
    show_func,
    show_line,
    show_timestamp,
    show_tags,
    show_message,
    show_fn,
    show_fn_args,
    obscure_args,
)

_default_lock = threading.Lock()
_default_config: Config | None = None


def _current_config() -> Config:
    return Config(
        show_timestamp=show_timestamp.get(),
        show_trace=show_trace.get(),
        show_file=show_file.get(),
        show_func=show_func.get(),
        show_line=show_line.get(),
        show_tags=show_tags.get(),
        show_message=show_message.get(),
        show_fn=show_fn.get(),
        show_fn_args=show_fn_args.get(),
        obscure_args=obscure_args.get(),
        trace_skip_first=trace_skip_first.get(),
        trace_max_depth=trace_max_depth.get(),
        trace_skip_last=trace_skip_last.get(),
        time_format=time_format.get(),
        separator=separator.get(),
    )


def _saved_default() -> Config:
    """Snapshot the settings the first time this is called and return that snapshot."""
    global _default_config
    with _default_lock:
        if _default_config is None:
            _default_config = _current_config()
        return _default_config


def update_config(cfg: Config) -> None:
    """Replace the global settings with ``cfg``.

    Flags are copied as given. The skip-first count is always copied; the
    maximum depth only if non-negative; the skip-last count only if
    non-negative and below the maximum depth; the time format and separator
    only if non-empty.
    """
    _saved_default()

    show_trace.set(cfg.show_trace)
    show_file.set(cfg.show_file)
    show_func.set(cfg.show_func)
    show_line.set(cfg.show_line)
    show_timestamp.set(cfg.show_timestamp)
    show_tags.set(cfg.show_tags)
    show_message.set(cfg.show_message)
    show_fn.set(cfg.show_fn)
    show_fn_args.set(cfg.show_fn_args)
    obscure_args.set(cfg.obscure_args)
    trace_skip_first.set(cfg.trace_skip_first)

    if cfg.trace_max_depth >= 0:
        trace_max_depth.set(cfg.trace_max_depth)
    if 0 <= cfg.trace_skip_last < trace_max_depth.get():
        trace_skip_last.set(cfg.trace_skip_last)
    if cfg.time_format:
        time_format.set(cfg.time_format)
    if cfg.separator:
        separator.set(cfg.separator)


def get_config() -> Config:
    """Return a snapshot of the current settings."""
    _saved_default()
    return _current_config()


def get_default_config() -> Config:
    """Return the settings as they were before they were first changed."""
    return _saved_default()


def reset_config() -> None:
    """Restore every setting to its default value."""
    for flag in _BOOLS:
        flag.reset()
    trace_skip_first.reset()
    trace_max_depth.reset()
    trace_skip_last.reset()
    time_format.reset()
    separator.reset()