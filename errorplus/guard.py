"""Run a callable only when a condition held at construction time."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable


@dataclass(frozen=True)
class Conditional:
    """Holds a condition; run() calls a function only if it is true."""

    condition: bool

    def run(self, fn: Callable[[], object]) -> None:
        if self.condition:
            fn()


def when(condition: bool) -> Conditional:
    """Return a Conditional for ``condition``."""
    return Conditional(bool(condition))