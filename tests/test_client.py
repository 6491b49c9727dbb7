from __future__ import annotations

import aiohttp
import pytest
from aiohttp.test_utils import TestServer

import pastemyst
from pastemyst.client import decode_code, encode_code

from conftest import PASTES, REQUESTS, SERVER_ERROR_ID, make_app

CSHARP_CODE = """public class TestClass {

    public void TestMethod() {
        Constole.WriteLine("This is a Test");
    }
  }"""
JS_CODE = "let val = { 'key': 'value' };"


@pytest.mark.asyncio
async def test_create_and_retrieve(client: pastemyst.Client) -> None:
    created = await client.create_paste(CSHARP_CODE, "1h", "csharp")
    fetched = await client.get_paste(created.id)

    assert created.code == CSHARP_CODE
    assert fetched.code == created.code
    assert fetched.id == created.id
    assert fetched.language == "csharp"
    assert fetched.expiresIn == "1h"


@pytest.mark.asyncio
async def test_code_is_uri_encoded_on_the_wire(
    client: pastemyst.Client, server: TestServer
) -> None:
    await client.create_paste("a b\n%", pastemyst.Expiration.ONE_DAY)

    sent = server.app[REQUESTS][-1]
    assert sent == {"code": "a%20b%0A%25", "expiresIn": "1d", "language": "autodetect"}


@pytest.mark.asyncio
async def test_wrong_language_falls_back_to_autodetect(client: pastemyst.Client) -> None:
    paste = await client.create_paste(JS_CODE, "1h", "jarvorscropt")
    assert paste.language == "autodetect"


@pytest.mark.asyncio
@pytest.mark.parametrize("language", ["javascript", "jarvorscropt"])
async def test_wrong_expiration_raises(client: pastemyst.Client, language: str) -> None:
    with pytest.raises(pastemyst.BadRequest) as excinfo:
        await client.create_paste(JS_CODE, "abcd1", language)

    assert excinfo.value.status == 400
    assert excinfo.value.message == "invalid expiresIn value"
    assert isinstance(excinfo.value, pastemyst.PasteMystHTTPException)


@pytest.mark.asyncio
async def test_missing_code_is_stored_as_undefined(
    client: pastemyst.Client, server: TestServer
) -> None:
    language = pastemyst.discord_to_pastemyst_language("js")
    paste = await client.create_paste(None, "1h", language)

    assert paste.code == "undefined"
    assert server.app[REQUESTS][-1]["code"] == "undefined"


@pytest.mark.asyncio
async def test_unknown_id_raises_not_found(client: pastemyst.Client) -> None:
    with pytest.raises(pastemyst.NotFound) as excinfo:
        await client.get_paste("qwertzuisdfghjkxcvbdfghjfgh")
    assert excinfo.value.status == 404


@pytest.mark.asyncio
async def test_create_from_message(client: pastemyst.Client, server: TestServer) -> None:
    message = "look:\n```php\n<?php echo 1 ?>\n```\nand\n```\nconsole.log(1)\n```"
    pastes = await client.create_paste_from_message(message, seconds=60 * 60 * 3)

    assert [paste.language for paste in pastes] == ["php", "autodetect"]
    assert [paste.code for paste in pastes] == ["<?php echo 1 ?>", "console.log(1)"]
    assert {paste.expiresIn for paste in pastes} == {"10h"}
    assert len(server.app[PASTES]) == 2


@pytest.mark.asyncio
async def test_create_from_message_without_code(client: pastemyst.Client) -> None:
    assert await client.create_paste_from_message("no code here") == []


@pytest.mark.asyncio
async def test_closed_client_raises(server: TestServer) -> None:
    async with pastemyst.Client(base_url=str(server.make_url("/api/"))) as client:
        await client.create_paste("x", "1h")
    with pytest.raises(pastemyst.ClientClosed):
        await client.get_paste("paste1")


def test_paste_url() -> None:
    paste = pastemyst.Paste({"id": "abc123", "code": "x", "language": "d"})
    assert paste.url.endswith("/abc123")
    assert paste.data["language"] == "d"


def test_encode_matches_encode_uri() -> None:
    assert encode_code("a=1; b?c#d") == "a=1;%20b?c#d"
    assert encode_code("ä") == "%C3%A4"
    assert decode_code(encode_code("x <y> 100%")) == "x <y> 100%"


@pytest.mark.asyncio
async def test_one_shot_helpers(server: TestServer, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr("pastemyst.client.API_URL", str(server.make_url("/api/")))

    created = await pastemyst.create_paste_myst(JS_CODE, "2h", "js")
    fetched = await pastemyst.get_paste_myst(created.id)

    assert fetched.code == JS_CODE
    assert fetched.expiresIn == "2h"
    # "js" is a Discord tag, not a PasteMyst language
    assert fetched.language == "autodetect"


@pytest.mark.asyncio
async def test_other_statuses_raise_base_exception(client: pastemyst.Client) -> None:
    with pytest.raises(pastemyst.PasteMystHTTPException) as excinfo:
        await client.get_paste(SERVER_ERROR_ID)

    assert type(excinfo.value) is pastemyst.PasteMystHTTPException
    assert excinfo.value.status == 500
    assert excinfo.value.message == "Internal Server Error"


@pytest.mark.asyncio
async def test_transport_errors_propagate() -> None:
    server = TestServer(make_app())
    await server.start_server()
    base_url = str(server.make_url("/api/"))
    await server.close()

    async with pastemyst.Client(base_url=base_url) as client:
        with pytest.raises(aiohttp.ClientConnectionError):
            await client.get_paste("paste1")
