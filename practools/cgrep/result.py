"""Storage and rendering of matched lines."""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import TextIO


@dataclass(frozen=True)
class Line:
    """A matched line and its 1-based line number."""

    text: str
    no: int


@dataclass
class Result:
    """Matched lines grouped by file name; safe to fill from several threads."""

    data: dict[str, list[Line]] = field(default_factory=dict)
    _lock: threading.Lock = field(
        default_factory=threading.Lock, init=False, repr=False, compare=False
    )

    def add(self, file_name: str, text: str, no: int) -> None:
        """Record that line ``no`` of ``file_name`` matched with ``text``."""
        with self._lock:
            self.data.setdefault(file_name, []).append(Line(text, no))

    def files(self) -> list[str]:
        """Names of files with matches, in ascending order."""
        return sorted(self.data)

    def render_files(self, stream: TextIO) -> None:
        """Write one matched file name per line."""
        for name in self.files():
            stream.write(name + "\n")

    def render_with_content(self, stream: TextIO) -> None:
        """Write each file name followed by its matched lines, files separated by a blank line."""
        names = self.files()
        for index, name in enumerate(names):
            stream.write(name + "\n")
            for line in self.data[name]:
                stream.write(f"{line.no}: {line.text}\n")
            if index < len(names) - 1:
                stream.write("\n")

    def reset(self) -> None:
        """Drop every stored match."""
        with self._lock:
            self.data = {}