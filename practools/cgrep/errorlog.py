"""Thread-safe collection of errors raised while searching."""

from __future__ import annotations

import threading
from collections.abc import Iterable


class SearchErrors(Exception):
    """All errors recorded during a search, combined into one."""

    def __init__(self, errors: Iterable[BaseException]) -> None:
        self.errors = tuple(errors)
        super().__init__("\n".join(["[Error]", *(str(err) for err in self.errors)]))


class ErrorLog:
    """Collects errors from concurrent search workers."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._errors: list[BaseException] = []

    @property
    def errors(self) -> tuple[BaseException, ...]:
        with self._lock:
            return tuple(self._errors)

    def __len__(self) -> int:
        with self._lock:
            return len(self._errors)

    def add(self, err: BaseException) -> None:
        """Record one error."""
        with self._lock:
            self._errors.append(err)

    def error(self) -> SearchErrors | None:
        """Return the recorded errors as one exception, or None if there are none."""
        with self._lock:
            if not self._errors:
                return None
            return SearchErrors(self._errors)

    def reset(self) -> None:
        """Forget every recorded error."""
        with self._lock:
            self._errors.clear()