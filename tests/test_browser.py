import pytest
from aiohttp import test_utils

from practools.logtransfer.browser import create_app


def _client(static_dir):
    return test_utils.TestClient(test_utils.TestServer(create_app(str(static_dir))))


@pytest.mark.asyncio
async def test_posted_log_reaches_websocket(tmp_path):
    async with _client(tmp_path) as client:
        ws = await client.ws_connect("/ws")
        response = await client.post("/logs", data=b"line1\nline2\n")
        assert response.status == 200
        message = await ws.receive_str(timeout=5)
        assert message == "line1\nline2\n"
        await ws.close()


@pytest.mark.asyncio
async def test_messages_keep_their_order(tmp_path):
    async with _client(tmp_path) as client:
        for chunk in (b"first", b"second"):
            response = await client.post("/logs", data=chunk)
            assert response.status == 200
        ws = await client.ws_connect("/ws")
        received = [await ws.receive_str(timeout=5) for _ in range(2)]
        assert received == ["first", "second"]
        await ws.close()


@pytest.mark.asyncio
async def test_logs_ignores_other_methods(tmp_path):
    async with _client(tmp_path) as client:
        response = await client.get("/logs")
        assert response.status == 200
        assert await response.text() == ""


@pytest.mark.asyncio
async def test_serves_index_and_files(tmp_path):
    (tmp_path / "index.html").write_text("<h1>logs</h1>")
    (tmp_path / "app.js").write_text("console.log(1)")
    async with _client(tmp_path) as client:
        index = await client.get("/")
        assert index.status == 200
        assert await index.text() == "<h1>logs</h1>"
        script = await client.get("/app.js")
        assert await script.text() == "console.log(1)"


@pytest.mark.asyncio
async def test_missing_file_is_not_found(tmp_path):
    async with _client(tmp_path) as client:
        response = await client.get("/missing.txt")
        assert response.status == 404


@pytest.mark.asyncio
async def test_lists_directory_without_index(tmp_path):
    sub = tmp_path / "assets"
    sub.mkdir()
    (sub / "style.css").write_text("body {}")
    async with _client(tmp_path) as client:
        response = await client.get("/assets")
        body = await response.text()
        assert response.status == 200
        assert '<a href="style.css">style.css</a>' in body