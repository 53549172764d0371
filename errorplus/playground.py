"""A small demonstration pipeline that reports failures as ErrorPlus."""

from __future__ import annotations

import sys
import time

from errorplus.errors import critical_error, new, new_error, wrap_error

ERR_PROCESSING = RuntimeError("processing error")


def encode_str_to_bytes(text: str) -> bytes:
    if not text:
        raise ValueError("input string is empty")
    return text.encode("utf-8")


def process(data: bytes, fail: bool = False) -> bytes:
    """Pretend to do some work; raise if ``fail`` is set."""
    time.sleep(0.1)
    if fail:
        raise new(ERR_PROCESSING)
    return data


def encode_bytes_to_str(data: bytes) -> str:
    if not data:
        raise critical_error("input byte slice is empty")
    return data.decode("utf-8")


def pipeline(text: str, always_fail: bool = False) -> str:
    """Encode, process and decode ``text``, wrapping any failure."""
    if len(text.encode("utf-8")) > 5:
        raise new_error("input string is too long")

    try:
        data = encode_str_to_bytes(text)
    except Exception as exc:
        raise wrap_error(exc, "encoding error") from exc

    try:
        out = process(data, always_fail)
    except Exception as exc:
        raise wrap_error(exc, "processing error") from exc

    try:
        return encode_bytes_to_str(out)
    except Exception as exc:
        raise wrap_error(exc, "decoding error") from exc


def main(argv: list[str] | None = None) -> int:
    err = new(Exception("this is a test error"))
    print("Error:", err.verbose_error())
    sys.stdout.flush()
    return 0