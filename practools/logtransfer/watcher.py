"""Read the monitored program's output line by line and pass each line on."""

from __future__ import annotations

import contextlib
import queue
import threading
from collections.abc import Iterable
from typing import Any

_POLL = 0.05
_STOPPED = object()


def _send(stop: threading.Event, channel: queue.Queue, item: Any) -> bool:
    """Put ``item`` on ``channel``; give up and return False once ``stop`` is set."""
    while not stop.is_set():
        try:
            channel.put(item, timeout=_POLL)
        except queue.Full:
            continue
        return True
    return False


def _receive(stop: threading.Event, channel: queue.Queue) -> Any:
    """Take the next item from ``channel``, or return ``_STOPPED`` once ``stop`` is set."""
    while not stop.is_set():
        try:
            return channel.get(timeout=_POLL)
        except queue.Empty:
            continue
    return _STOPPED


def _close(channel: queue.Queue) -> None:
    """Mark ``channel`` as closed for its reader with a trailing ``None``."""
    with contextlib.suppress(queue.Full):
        channel.put_nowait(None)


def _as_line(raw: bytes | str) -> bytes:
    data = raw.encode("utf-8") if isinstance(raw, str) else bytes(raw)
    if data.endswith(b"\n"):
        data = data[:-1]
    if data.endswith(b"\r"):
        data = data[:-1]
    return data


def monitor(
    stop: threading.Event,
    lines: queue.Queue,
    errors: queue.Queue,
    stream: Iterable[bytes | str],
) -> None:
    """Send each line read from ``stream``, without its line ending, to ``lines``.

    Read errors go to ``errors``. When ``stop`` is set, ``lines`` is closed with a
    ``None`` and the function returns.
    """
    try:
        for raw in stream:
            if stop.is_set() or not _send(stop, lines, _as_line(raw)):
                break
    except (OSError, ValueError) as exc:
        _send(stop, errors, exc)
    stop.wait()
    _close(lines)