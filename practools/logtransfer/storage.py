"""Collect lines in a shared buffer and hand out its whole content periodically."""

from __future__ import annotations

import queue
import threading

from practools.logtransfer.watcher import _STOPPED, _close, _receive, _send


class LineBuffer:
    """A byte buffer that can be written and drained from different threads."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._data = bytearray()

    def __len__(self) -> int:
        with self._lock:
            return len(self._data)

    def write(self, data: bytes) -> int:
        """Append ``data``; return the number of bytes written."""
        with self._lock:
            self._data += data
        return len(data)

    def drain(self) -> bytes:
        """Return everything stored and leave the buffer empty."""
        with self._lock:
            content = bytes(self._data)
            self._data.clear()
        return content


def listen(
    stop: threading.Event,
    lines: queue.Queue,
    errors: queue.Queue,
    buffer: LineBuffer,
) -> None:
    """Append each line received on ``lines`` to ``buffer``, followed by a newline.

    Returns when ``stop`` is set or ``lines`` is closed.
    """
    while True:
        item = _receive(stop, lines)
        if item is _STOPPED or item is None:
            return
        try:
            buffer.write(bytes(item) + b"\n")
        except (TypeError, ValueError) as exc:
            _send(stop, errors, exc)


def load(
    stop: threading.Event,
    out: queue.Queue,
    errors: queue.Queue,
    span: float,
    buffer: LineBuffer,
) -> None:
    """Every ``span`` seconds, send the whole content of ``buffer`` to ``out``.

    Nothing is sent while the buffer is empty. When ``stop`` is set, ``out`` is
    closed with a ``None`` and the function returns. Draining the buffer cannot
    fail, so nothing is ever sent to ``errors``.
    """
    while not stop.wait(span):
        data = buffer.drain()
        if data and not _send(stop, out, data):
            break
    _close(out)