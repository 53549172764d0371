"""Errors that carry a message, an underlying cause, a call stack and tags."""

from __future__ import annotations

from enum import Enum, IntEnum
from typing import Iterable

from errorplus import config
from errorplus.trace import Trace, capture_trace, format_trace

_TRACE_PREFIX = "\t-----> "
_NO_TRACE = "No trace available"


class Severity(IntEnum):
    """How bad an error is."""

    UNKNOWN = 0
    FATAL = 1
    CRITICAL = 2
    SERIOUS = 3
    WARNING = 4


class Knowledge(Enum):
    """Whether an error was anticipated."""

    UNKNOWN = False
    EXPECTED = True


class Temporality(Enum):
    """Whether an error may go away on its own."""

    PERMANENT = False
    TEMPORARY = True


class ErrorPlus(Exception):
    """An exception with a message, an optional cause, a captured stack and tags.

    ``str()`` gives the cause's text when there is a cause, otherwise the
    message. ``wrapped`` holds an earlier error this one was raised on top of.
    """

    def __init__(
        self,
        message: str = "",
        cause: BaseException | None = None,
        trace: list[Trace] | None = None,
        tags: Iterable[str] = (),
    ) -> None:
        if not message and cause is not None:
            message = str(cause)
        super().__init__(message)
        self.message = message
        self.cause = cause
        self.wrapped: BaseException | None = None
        self._trace = trace
        self.tags = frozenset(tags)
        self.severity = Severity.UNKNOWN
        self.knowledge = Knowledge.UNKNOWN
        self.temporality = Temporality.PERMANENT

    def __str__(self) -> str:
        if self.cause is not None:
            return str(self.cause)
        return self.message

    def __repr__(self) -> str:
        return f"ErrorPlus({self.message!r}, severity={self.severity.name})"

    def trace_lines(self) -> list[str] | None:
        """The stack as text lines, or a single notice if trimming leaves nothing."""
        if self._trace is None:
            return None
        if not format_trace(self._trace):
            return [_NO_TRACE]
        return [str(frame) for frame in self._trace]

    def trace_string(self) -> str:
        """The trimmed stack as a block of text, empty if no stack was captured."""
        if self._trace is None:
            return ""
        trimmed = format_trace(self._trace)
        if not trimmed:
            return _NO_TRACE + "\n"
        body = "".join(
            f"{_TRACE_PREFIX}func: {f.function} at: {f.file} line: {f.line_str()}\n"
            for f in trimmed
        )
        return "Trace:\n" + body

    def trace_raw(self) -> list[Trace] | None:
        """The captured stack exactly as stored."""
        return self._trace

    def trace_full(self) -> list[str] | None:
        """Every captured frame as text, without trimming."""
        if self._trace is None:
            return None
        return [str(frame) for frame in self._trace]

    def verbose_error(self) -> str:
        """The message and the stack, as the global settings allow."""
        output = ""
        if config.show_message.get():
            output = self.message + "\n"
        if config.show_trace.get():
            output += self.trace_string() + "\n"
        return output


def _capture() -> list[Trace]:
    # Called from a constructor so that the default skip count lands on the caller.
    return capture_trace()


def new_go_error(
    message: str,
    cause: BaseException | None,
    trace: list[Trace] | None,
    tags: Iterable[str] = (),
) -> ErrorPlus | None:
    """Build an ErrorPlus; None when there is neither a message nor a cause."""
    if not message and cause is None:
        return None
    return ErrorPlus(message, cause, trace, tags)


def wrap_go_error(
    wrapped: BaseException | None,
    cause: BaseException | None,
    message: str,
    trace: list[Trace] | None,
    tags: Iterable[str] = (),
) -> ErrorPlus | None:
    """Build an ErrorPlus on top of ``wrapped``; None as for new_go_error."""
    err = new_go_error(message, cause, trace, tags)
    if err is None:
        return None
    err.wrapped = wrapped
    if wrapped is not None:
        err.__cause__ = wrapped
    return err


def new(err: BaseException | None) -> ErrorPlus | None:
    if err is None:
        return None
    return new_go_error(str(err), err, _capture(), ())


def new_with_tags(err: BaseException | None, tags: Iterable[str]) -> ErrorPlus | None:
    if err is None:
        return None
    return new_go_error(str(err), err, _capture(), tags)


def new_with_tags_and_message(
    err: BaseException | None, message: str, tags: Iterable[str]
) -> ErrorPlus | None:
    if err is None:
        return None
    return new_go_error(message, err, _capture(), tags)


def new_error(message: str) -> ErrorPlus | None:
    return new_go_error(message, Exception(message), _capture(), ())


def new_error_with_tags(message: str, tags: Iterable[str]) -> ErrorPlus | None:
    if not message:
        return None
    return new_go_error(message, Exception(message), _capture(), tags)


def wrap(wrapped: BaseException | None, err: BaseException | None) -> ErrorPlus | None:
    if err is None:
        return None
    return wrap_go_error(wrapped, err, str(err), _capture(), ())


def wrap_error(wrapped: BaseException | None, message: str) -> ErrorPlus | None:
    if not message:
        return None
    return wrap_go_error(wrapped, Exception(message), message, _capture(), ())


def wrap_error_with_tags(
    wrapped: BaseException | None, message: str, tags: Iterable[str]
) -> ErrorPlus | None:
    if not message:
        return None
    return wrap_go_error(wrapped, Exception(message), message, _capture(), tags)


def critical(err: BaseException | None) -> ErrorPlus | None:
    if err is None:
        return None
    result = new_go_error(str(err), err, _capture(), ())
    if result is not None:
        result.severity = Severity.CRITICAL
    return result


def critical_error(message: str) -> ErrorPlus | None:
    if not message:
        return None
    result = new_go_error(message, Exception(message), _capture(), ())
    if result is not None:
        result.severity = Severity.CRITICAL
    return result


def fatal(err: BaseException | None) -> ErrorPlus | None:
    if err is None:
        return None
    result = new_go_error(str(err), err, _capture(), ())
    if result is not None:
        result.severity = Severity.FATAL
    return result


def coerce_error(err: BaseException | None) -> ErrorPlus:
    """Return ``err`` if it is an ErrorPlus, else a bare one holding its text."""
    if err is None:
        return ErrorPlus("", None, None)
    if isinstance(err, ErrorPlus):
        return err
    return ErrorPlus(str(err), None, None)


def to_error_plus(err: BaseException | None) -> ErrorPlus | None:
    """Return ``err`` if it is an ErrorPlus, else a new one with a captured stack."""
    if err is None:
        return None
    if isinstance(err, ErrorPlus):
        return err
    return new(coerce_error(err))