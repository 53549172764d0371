# errorplus

`errorplus` provides `ErrorPlus`, an exception that carries more than a
message: the underlying cause, the call stack at the point it was built, a
set of tags, a severity, and the earlier error it was raised on top of. Each
one can render a verbose report whose content follows a package-wide
configuration.

## Installation

```
pip install errorplus
```

With the test dependencies:

```
pip install "errorplus[test]"
```

## Creating errors

All constructors live in `errorplus.errors`:

```python
from errorplus import errors

err = errors.new_error("input string is too long")
print(str(err))             # input string is too long
print(err.verbose_error())  # message, then the trimmed trace
```

Existing exceptions can be promoted, tagged or marked as severe:

```python
from errorplus import errors

base = ValueError("native error")

plain = errors.new(base)                               # str(plain) == "native error"
tagged = errors.new_with_tags(base, ["io", "retry"])
relabelled = errors.new_with_tags_and_message(base, "reading failed", ["io"])
severe = errors.critical(base)                         # severity == Severity.CRITICAL
worse = errors.fatal(base)                             # severity == Severity.FATAL
also_severe = errors.critical_error("disk is full")
tagged_text = errors.new_error_with_tags("bad input", ["input"])
```

The constructors return `None` rather than an error when there is nothing to
report: `new`, `new_with_tags`, `new_with_tags_and_message`, `critical`,
`fatal` and `wrap` when given `None`; `new_error_with_tags`,
`critical_error`, `wrap_error` and `wrap_error_with_tags` when given an empty
message. `new_error("")` still returns an `ErrorPlus` with an empty message.

`str()` of an `ErrorPlus` is the text of its cause when it has one, and its
message otherwise.

## What an ErrorPlus holds

- `message` – the message it was built with
- `cause` – the exception it was built from, or `None`
- `wrapped` – the earlier error it was raised on top of, or `None`
- `tags` – a `frozenset` of strings
- `severity` – a `Severity` (`UNKNOWN`, `FATAL`, `CRITICAL`, `SERIOUS`,
  `WARNING`); `UNKNOWN` unless built by `critical`, `critical_error` or `fatal`
- `knowledge` – a `Knowledge` (`UNKNOWN` or `EXPECTED`), `UNKNOWN` by default
- `temporality` – a `Temporality` (`PERMANENT` or `TEMPORARY`), `PERMANENT`
  by default

## Wrapping

Add context from the layer above to a lower-level failure:

```python
from errorplus import errors

try:
    b"\xff".decode("ascii")
except UnicodeDecodeError as exc:
    raise errors.wrap_error(exc, "decoding error") from exc
```

`wrap(wrapped, err)` uses an existing exception as the cause, and
`wrap_error_with_tags` also attaches tags. The wrapped error is stored in
`wrapped` and set as the new error's `__cause__`.

`to_error_plus(err)` returns `err` unchanged if it already is an
`ErrorPlus`, and otherwise a new one with a freshly captured stack.
`coerce_error(err)` does the same without capturing a stack; for `None` it
returns an `ErrorPlus` with an empty message.

The lower-level builders `new_go_error(message, cause, trace, tags)` and
`wrap_go_error(wrapped, cause, message, trace, tags)` take an explicit trace
and return `None` when there is neither a message nor a cause.

## Traces

`errorplus.trace` captures stacks as lists of `Trace` entries (`file`,
`function`, `line`), innermost frame first. `capture_trace()` records at most
the configured maximum depth; `format_trace(frames)` drops the configured
number of frames from the start and from the end, each only when the list is
longer than that number.

On an `ErrorPlus`:

- `trace_raw()` – the captured `Trace` entries, unchanged
- `trace_full()` – every captured entry as a line of text
- `trace_lines()` – every captured entry as a line of text, or the single line
  `"No trace available"` when trimming leaves nothing
- `trace_string()` – a `"Trace:"` block listing the trimmed frames; empty when
  no stack was captured

## Configuration

`errorplus.config` keeps one global configuration. A snapshot of it is a
frozen `Config` dataclass:

```python
from errorplus import config

current = config.get_config()           # a copy of the live settings
defaults = config.get_default_config()  # the settings before they were first changed

config.update_config(current)           # replace the live settings
config.reset_config()                   # every setting back to its default
```

Defaults: all flags on, 15 frames captured, 3 dropped from the start of a
trace and 2 from the end, time format `"%Y-%m-%d %H:%M:%S"`, separator
`" | "`.

`update_config` copies every flag and the skip-first count as given. The
maximum depth is copied only if it is not negative, the skip-last count only
if it is not negative and below the maximum depth, and the time format and
separator only if they are not empty. Fields of `Config` left out default to
`False`, `0` or `""`. This changes the settings for every caller.

The live settings are also available as module attributes
(`config.show_message`, `config.trace_max_depth`, ...), each a thread-safe box
from `errorplus.safetypes`: `SafeBool`, `SafeInt` and `SafeString` with
`get`, `set` and `reset` (and `toggle` or `increment`/`decrement` where they
apply). `errorplus.guard.when(condition).run(fn)` calls `fn` only if the
condition is true.

## Limits

`verbose_error` consults only `show_message` and `show_trace`. The other
flags, the time format and the separator are stored and reported by
`get_config`, but nothing renders with them: errors record no timestamp, and
tags, file, function and argument details are not added to the verbose
report.

## Playground

`errorplus.playground` holds a small demonstration pipeline (`pipeline`,
`encode_str_to_bytes`, `process`, `encode_bytes_to_str`) that raises
`ErrorPlus` on failure. Its command builds one error and prints its verbose
report:

```
errorplus-playground
```