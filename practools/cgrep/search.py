"""Recursive, concurrent search of a directory tree for matching lines."""

from __future__ import annotations

import contextlib
import os
import re
import threading
from dataclasses import dataclass, field

from practools.cgrep.errorlog import ErrorLog
from practools.cgrep.result import Result

_GIT_DIR = re.compile(r"\.git$")


def is_git_dir(path: str) -> bool:
    """True if ``path`` names a ``.git`` directory."""
    return _GIT_DIR.search(path) is not None


@dataclass
class Dir:
    """One directory of the tree: its files and its sub-directories."""

    path: str
    pattern: re.Pattern
    base: str
    sub_dirs: list[Dir] = field(default_factory=list)
    file_paths: list[str] = field(default_factory=list)

    def scan(self) -> None:
        """Read the directory, opening sub-directories and listing files."""
        with os.scandir(self.path) as entries:
            listed = sorted(entries, key=lambda entry: entry.name)
        for entry in listed:
            full = os.path.join(self.path, entry.name)
            if entry.is_dir(follow_symlinks=False):
                self.sub_dirs.append(open_dir(full, self.pattern, self.base))
            else:
                self.file_paths.append(full)

    def search(self, result: Result, errors: ErrorLog) -> None:
        """Search this directory and, concurrently, all sub-directories."""
        workers = [
            threading.Thread(target=sub.search, args=(result, errors))
            for sub in self.sub_dirs
        ]
        for worker in workers:
            worker.start()
        try:
            self.grep_files(result)
        except OSError as exc:
            errors.add(exc)
        for worker in workers:
            worker.join()

    def grep_files(self, result: Result) -> None:
        """Record every matching line of this directory's files in ``result``."""
        for file_path in self.file_paths:
            relative = os.path.relpath(file_path, self.base)
            with open(file_path, "rb") as handle:
                for number, raw in enumerate(handle, start=1):
                    if raw.endswith(b"\n"):
                        raw = raw[:-1]
                    if raw.endswith(b"\r"):
                        raw = raw[:-1]
                    text = raw.decode("utf-8", errors="replace")
                    if self.pattern.search(text):
                        result.add(relative, text, number)


def open_dir(path: str, pattern: str | re.Pattern, base: str | None = None) -> Dir:
    """Build the search tree rooted at ``path``; ``.git`` directories are left empty.

    Reported file names are relative to ``base``, the working directory by default.
    Directories that cannot be read are left empty.
    """
    directory = Dir(
        path=path,
        pattern=re.compile(pattern),
        base=os.getcwd() if base is None else base,
    )
    if is_git_dir(path):
        return directory
    with contextlib.suppress(OSError):
        directory.scan()
    return directory