"""Web server that relays posted log chunks to connected WebSocket clients."""

from __future__ import annotations

import argparse
import asyncio
import contextlib
import html
import sys
from collections.abc import Sequence
from pathlib import Path
from urllib.parse import quote

from aiohttp import WSMsgType, web

CHANNEL_LEN = 10
DEFAULT_PORT = 3000
DEFAULT_STATIC_DIR = "./dist"
_POLL = 0.5


def _listing(directory: Path) -> str:
    entries = []
    for entry in sorted(directory.iterdir(), key=lambda item: item.name):
        name = entry.name + ("/" if entry.is_dir() else "")
        entries.append(f'<a href="{quote(name)}">{html.escape(name)}</a>\n')
    return (
        "<!doctype html>\n"
        '<meta name="viewport" content="width=device-width">\n'
        "<pre>\n" + "".join(entries) + "</pre>\n"
    )


async def _watch_incoming(ws: web.WebSocketResponse) -> int:
    """Read client frames so a close is noticed; report errors, count messages."""
    received = 0
    async for message in ws:
        if message.type == WSMsgType.ERROR:
            print(f"error on receiving: {ws.exception()}", file=sys.stderr)
        else:
            received += 1
    return received


def create_app(static_dir: str = DEFAULT_STATIC_DIR) -> web.Application:
    """Build the application: static files at ``/``, log intake at ``/logs``, relay at ``/ws``."""
    root = Path(static_dir).resolve()
    messages: asyncio.Queue[bytes] = asyncio.Queue(CHANNEL_LEN)

    async def relay(request: web.Request) -> web.WebSocketResponse:
        ws = web.WebSocketResponse()
        await ws.prepare(request)
        reader = asyncio.ensure_future(_watch_incoming(ws))
        try:
            while not ws.closed:
                try:
                    message = await asyncio.wait_for(messages.get(), timeout=_POLL)
                except asyncio.TimeoutError:
                    continue
                text = message.decode("utf-8", errors="replace")
                try:
                    await ws.send_str(text)
                except ConnectionError as exc:
                    print(f"error on sending: {exc}", file=sys.stderr)
                print(f"received from channel: \n{text}")
        finally:
            reader.cancel()
            with contextlib.suppress(asyncio.CancelledError):
                await reader
            await ws.close()
        return ws

    async def receive_logs(request: web.Request) -> web.Response:
        if request.method != "POST":
            return web.Response()
        try:
            body = await request.read()
        except ConnectionError as exc:
            print(f"error on reading body: \n{exc}", file=sys.stderr)
            body = b""
        await messages.put(body)
        print(f"send to channel: \n{body.decode('utf-8', errors='replace')}")
        return web.Response()

    async def static(request: web.Request) -> web.StreamResponse:
        target = (root / request.match_info["tail"]).resolve()
        if target != root and root not in target.parents:
            raise web.HTTPNotFound()
        if target.is_dir():
            index = target / "index.html"
            if index.is_file():
                return web.FileResponse(index)
            return web.Response(text=_listing(target), content_type="text/html")
        if target.is_file():
            return web.FileResponse(target)
        raise web.HTTPNotFound()

    app = web.Application()
    app.router.add_get("/ws", relay)
    app.router.add_route("*", "/logs", receive_logs)
    app.router.add_get("/{tail:.*}", static)
    return app


def main(argv: Sequence[str] | None = None) -> int:
    """Serve the log browser until interrupted."""
    parser = argparse.ArgumentParser(
        prog="log-browser", description="Relay posted logs to WebSocket clients."
    )
    parser.add_argument("-p", "--port", type=int, default=DEFAULT_PORT)
    parser.add_argument("-d", "--dir", default=DEFAULT_STATIC_DIR, help="static files")
    args = parser.parse_args(argv)
    web.run_app(create_app(args.dir), port=args.port)
    return 0


if __name__ == "__main__":
    sys.exit(main())