import queue
import threading
import time

import pytest

from practools.logtransfer.storage import LineBuffer, listen, load


def _wait_for(predicate, timeout=3.0):
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        if predicate():
            return True
        time.sleep(0.02)
    return predicate()


def test_line_buffer_drain_returns_everything_and_empties():
    buffer = LineBuffer()
    assert buffer.write(b"abc\n") == 4
    buffer.write(b"def\n")
    assert len(buffer) == 8
    assert buffer.drain() == b"abc\ndef\n"
    assert buffer.drain() == b""
    assert len(buffer) == 0


@pytest.mark.parametrize(
    ("lines", "expected"),
    [
        (["line1", "line2", "line3"], b"line1\nline2\nline3\n"),
        (
            ["line1", "line2", "line3", "line4", "line5"],
            b"line1\nline2\nline3\nline4\nline5\n",
        ),
    ],
)
def test_listen_writes_lines_to_buffer(lines, expected):
    stop = threading.Event()
    channel: queue.Queue = queue.Queue(1)
    buffer = LineBuffer()
    thread = threading.Thread(
        target=listen, args=(stop, channel, queue.Queue(1), buffer), daemon=True
    )
    thread.start()
    for line in lines:
        channel.put(line.encode(), timeout=2)
    channel.put(None, timeout=2)
    thread.join(timeout=2)
    assert not thread.is_alive()
    assert buffer.drain() == expected


def test_listen_returns_when_stopped():
    stop = threading.Event()
    buffer = LineBuffer()
    thread = threading.Thread(
        target=listen, args=(stop, queue.Queue(1), queue.Queue(1), buffer), daemon=True
    )
    thread.start()
    stop.set()
    thread.join(timeout=2)
    assert not thread.is_alive()
    assert buffer.drain() == b""


def test_listen_reports_unwritable_items():
    stop = threading.Event()
    channel: queue.Queue = queue.Queue(2)
    errors: queue.Queue = queue.Queue(1)
    buffer = LineBuffer()
    thread = threading.Thread(
        target=lambda: listen(stop, channel, errors, buffer), daemon=True
    )
    thread.start()
    channel.put("not bytes")
    try:
        err = errors.get(timeout=2)
        assert isinstance(err, TypeError)
        assert len(buffer) == 0
        channel.put(b"good")
        assert _wait_for(lambda: len(buffer) == 5)
        assert buffer.drain() == b"good\n"
    finally:
        stop.set()
        thread.join(timeout=2)


def test_load_sends_buffered_content_each_span():
    stop = threading.Event()
    out: queue.Queue = queue.Queue(1)
    buffer = LineBuffer()
    buffer.write(b"dumped\nstring\n")
    thread = threading.Thread(
        target=load, args=(stop, out, queue.Queue(1), 0.2, buffer), daemon=True
    )
    thread.start()
    try:
        assert out.get(timeout=2) == b"dumped\nstring\n"
        assert len(buffer) == 0
    finally:
        stop.set()
        thread.join(timeout=2)
    assert out.get(timeout=2) is None


def test_load_sends_nothing_when_buffer_is_blank():
    stop = threading.Event()
    out: queue.Queue = queue.Queue(1)
    buffer = LineBuffer()
    thread = threading.Thread(
        target=load, args=(stop, out, queue.Queue(1), 0.1, buffer), daemon=True
    )
    thread.start()
    time.sleep(0.35)
    assert out.empty()
    stop.set()
    thread.join(timeout=2)
    assert not thread.is_alive()
    assert out.get(timeout=2) is None