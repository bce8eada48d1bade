"""Tests for the Router ASGI surface, driven through ordermux.testing.TestClient."""

import pytest

from ordermux._internal.asgi import read_body
from ordermux.http.request import Request
from ordermux.http.writer import ResponseWriter
from ordermux.routing.router import Router
from ordermux.testing import RecordingReporter, TestClient


class TestReadBody:
    @pytest.mark.asyncio
    async def test_joins_chunks(self) -> None:
        messages = iter(
            [
                {"type": "http.request", "body": b"ab", "more_body": True},
                {"type": "http.request", "body": b"cd", "more_body": False},
            ]
        )

        async def receive() -> dict:
            return next(messages)

        assert await read_body(receive) == b"abcd"

    @pytest.mark.asyncio
    async def test_stops_on_disconnect(self) -> None:
        async def receive() -> dict:
            return {"type": "http.disconnect"}

        assert await read_body(receive) == b""


class TestASGIScenarios:
    @pytest.mark.asyncio
    async def test_in_order(self) -> None:
        router = Router()
        router.register_resp("GET", "/foo", 200, "Hello")
        router.register_resp("GET", "/bar", 201, "Bonjour")

        async with TestClient(router) as client:
            foo = await client.get("/foo")
            bar = await client.get("/bar")

        assert (foo.status, foo.text) == (200, "Hello\n")
        assert (bar.status, bar.text) == (201, "Bonjour\n")
        assert router.verify(RecordingReporter()) is True

    @pytest.mark.asyncio
    async def test_unexpected_gets_404(self) -> None:
        router = Router()

        async with TestClient(router) as client:
            response = await client.put("/foo")

        assert response.status == 404
        assert response.text == "404 page not found\n"
        assert response.header("x-content-type-options") == "nosniff"
        assert router.errors == ["Unexpected request: PUT /foo"]

    @pytest.mark.asyncio
    async def test_request_metadata_reaches_handler(self) -> None:
        seen: list[Request] = []

        def handler(w: ResponseWriter, request: Request) -> None:
            seen.append(request)
            w.headers.append(("content-type", "application/json"))
            w.write_header(201)
            w.write(request.body)

        router = Router()
        router.register_func("POST", "/items", handler)

        async with TestClient(router) as client:
            response = await client.post("/items?draft=1", json={"name": "x"})

        assert response.status == 201
        assert response.content_type == "application/json"
        assert response.text == '{"name": "x"}'
        assert seen[0].query == {"draft": ["1"]}
        assert seen[0].headers["content-type"] == "application/json"
        assert seen[0].client == ("127.0.0.1", 0)

    @pytest.mark.asyncio
    async def test_method_sent_verbatim(self) -> None:
        router = Router()
        router.register_resp("get", "/foo", 200, "lower")

        async with TestClient(router) as client:
            response = await client.request("get", "/foo")

        assert response.text == "lower\n"
        assert router.errors == []

    @pytest.mark.asyncio
    async def test_patch_and_delete(self) -> None:
        router = Router()
        router.register_resp("PATCH", "/items/1", 200, "patched")
        router.register_resp("DELETE", "/items/1", 204, "")

        async with TestClient(router) as client:
            patched = await client.patch("/items/1", body=b"{}")
            deleted = await client.delete("/items/1")

        assert patched.text == "patched\n"
        assert deleted.status == 204
        assert deleted.body == b""


class TestLifespan:
    @pytest.mark.asyncio
    async def test_startup_and_shutdown_acknowledged(self) -> None:
        incoming = iter([{"type": "lifespan.startup"}, {"type": "lifespan.shutdown"}])
        sent: list[dict] = []

        async def receive() -> dict:
            return next(incoming)

        async def send(message: dict) -> None:
            sent.append(message)

        await Router()({"type": "lifespan"}, receive, send)

        assert sent == [
            {"type": "lifespan.startup.complete"},
            {"type": "lifespan.shutdown.complete"},
        ]

    @pytest.mark.asyncio
    async def test_other_scopes_ignored(self) -> None:
        router = Router()

        async def receive() -> dict:
            raise AssertionError("receive should not be called")

        async def send(message: dict) -> None:
            raise AssertionError("send should not be called")

        await router({"type": "websocket"}, receive, send)
        assert router.index == 0
