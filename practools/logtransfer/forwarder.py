"""Forward collected log chunks to a URL with HTTP POST."""

from __future__ import annotations

import queue
import threading

import requests

from practools.logtransfer.watcher import _STOPPED, _receive, _send

CONTENT_TYPE = "plain/text"


def forward(
    stop: threading.Event,
    out: queue.Queue,
    errors: queue.Queue,
    url: str,
) -> None:
    """POST every chunk received on ``out`` as the body of a request to ``url``.

    Failed requests are sent to ``errors``. Returns when ``stop`` is set or
    ``out`` is closed.
    """
    with requests.Session() as session:
        while True:
            message = _receive(stop, out)
            if message is _STOPPED or message is None:
                return
            try:
                response = session.post(
                    url,
                    data=bytes(message),
                    headers={"Content-Type": CONTENT_TYPE},
                )
            except requests.RequestException as exc:
                _send(stop, errors, exc)
                continue
            response.close()