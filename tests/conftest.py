"""A fake PasteMyst API served in-process for the client tests."""

from __future__ import annotations

import itertools
import typing

import pytest
import pytest_asyncio
from aiohttp import web
from aiohttp.test_utils import TestServer

import pastemyst
from pastemyst.expiration import EXPIRATIONS
from pastemyst.languages import PasteMystLanguage

PASTES = web.AppKey("pastes", dict)
REQUESTS = web.AppKey("requests", list)

# Fetching this id makes the fake server fail with a 500
SERVER_ERROR_ID = "server-error"

VALID_EXPIRATIONS = {label for _, label in EXPIRATIONS}
VALID_LANGUAGES = {
    language.value
    for language in PasteMystLanguage
    if language is not PasteMystLanguage.UNKNOWN
}


def make_app() -> web.Application:
    app = web.Application()
    app[PASTES] = {}
    app[REQUESTS] = []
    ids = (f"paste{n}" for n in itertools.count(1))

    async def create(request: web.Request) -> web.Response:
        body = await request.json()
        request.app[REQUESTS].append(body)

        if body.get("expiresIn") not in VALID_EXPIRATIONS:
            return web.json_response(
                {"message": "invalid expiresIn value"}, status=400
            )
        language = body.get("language")
        if language not in VALID_LANGUAGES:
            language = "autodetect"

        paste = {
            "id": next(ids),
            "createdAt": 1600000000,
            "code": body.get("code"),
            "expiresIn": body["expiresIn"],
            "language": language,
        }
        request.app[PASTES][paste["id"]] = paste
        return web.json_response(paste)

    async def fetch(request: web.Request) -> web.Response:
        if request.query.get("id") == SERVER_ERROR_ID:
            return web.Response(status=500, text="Internal Server Error")
        paste = request.app[PASTES].get(request.query.get("id"))
        if paste is None:
            return web.json_response({"message": "paste not found"}, status=404)
        return web.json_response(paste)

    app.router.add_post("/api/paste", create)
    app.router.add_get("/api/paste", fetch)
    return app


@pytest_asyncio.fixture
async def server() -> typing.AsyncIterator[TestServer]:
    server = TestServer(make_app())
    await server.start_server()
    yield server
    await server.close()


@pytest_asyncio.fixture
async def client(server: TestServer) -> typing.AsyncIterator[pastemyst.Client]:
    client = pastemyst.Client(base_url=str(server.make_url("/api/")))
    yield client
    await client.close()


class FakeMessage:
    """Stands in for discord.Message, only what the code reads."""

    _ids = itertools.count(1)

    def __init__(self, content, *, reference=None, bot: bool = False):
        self.id = next(self._ids)
        self.content = content
        self.reference = reference
        self.author = type("Author", (), {"bot": bot})()
        self.replies: typing.List[str] = []

    async def reply(self, content, **kwargs):
        self.replies.append(content)


@pytest.fixture
def fake_message() -> typing.Type[FakeMessage]:
    return FakeMessage
