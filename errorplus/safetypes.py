"""Thread-safe boxes for a boolean, an integer and a string, each with a reset value."""

from __future__ import annotations

import threading


class SafeBool:
    """A boolean that can be read and changed safely from several threads."""

    def __init__(self, value: bool, default: bool | None = None) -> None:
        self._lock = threading.Lock()
        self._value = bool(value)
        self._default = bool(value) if default is None else bool(default)

    @classmethod
    def true(cls) -> SafeBool:
        """A box holding True, which is also its reset value."""
        return cls(True, True)

    @classmethod
    def false(cls) -> SafeBool:
        """A box holding False, which is also its reset value."""
        return cls(False, False)

    @property
    def default(self) -> bool:
        """The value that reset() restores."""
        with self._lock:
            return self._default

    def get(self) -> bool:
        with self._lock:
            return self._value

    def set(self, value: bool) -> None:
        with self._lock:
            self._value = bool(value)

    def toggle(self) -> None:
        with self._lock:
            self._value = not self._value

    def reset(self) -> None:
        """Restore the default value, which is not necessarily False."""
        with self._lock:
            self._value = self._default

    def __bool__(self) -> bool:
        return self.get()

    def __str__(self) -> str:
        return "true" if self.get() else "false"

    def __repr__(self) -> str:
        return f"SafeBool({self.get()!r}, default={self.default!r})"


class SafeInt:
    """An integer that can be read and changed safely from several threads."""

    def __init__(self, value: int, default: int | None = None) -> None:
        self._lock = threading.Lock()
        self._value = int(value)
        self._default = int(value) if default is None else int(default)

    @property
    def default(self) -> int:
        """The value that reset() restores."""
        with self._lock:
            return self._default

    def get(self) -> int:
        with self._lock:
            return self._value

    def set(self, value: int) -> None:
        with self._lock:
            self._value = int(value)

    def increment(self) -> None:
        with self._lock:
            self._value += 1

    def decrement(self) -> None:
        with self._lock:
            self._value -= 1

    def reset(self) -> None:
        """Restore the default value, which is not necessarily 0."""
        with self._lock:
            self._value = self._default

    def __int__(self) -> int:
        return self.get()

    def __str__(self) -> str:
        return str(self.get())

    def __repr__(self) -> str:
        return f"SafeInt({self.get()!r}, default={self.default!r})"


class SafeString:
    """A string that can be read and changed safely from several threads."""

    def __init__(self, value: str, default: str | None = None) -> None:
        self._lock = threading.Lock()
        self._value = value
        self._default = value if default is None else default

    @property
    def default(self) -> str:
        """The value that reset() restores."""
        with self._lock:
            return self._default

    def get(self) -> str:
        with self._lock:
            return self._value

    def set(self, value: str) -> None:
        with self._lock:
            self._value = value

    def reset(self) -> None:
        """Restore the default value, which is not necessarily empty."""
        with self._lock:
            self._value = self._default

    def __str__(self) -> str:
        return self.get()

    def __repr__(self) -> str:
        return f"SafeString({self.get()!r}, default={self.default!r})"