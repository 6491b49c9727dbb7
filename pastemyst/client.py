import logging
import typing
from typing import Optional, Union
from urllib.parse import quote, unquote

import aiohttp
import yarl

from .codeblocks import get_full_code_block_info
from .constants import API_URL, UNDEFINED_CODE, URI_SAFE_CHARS, USER_AGENT
from .exceptions import (
    BadRequest,
    ClientClosed,
    NotFound,
    PasteMystHTTPException,
)
from .expiration import Expiration, get_next_higher_expiration
from .languages import PasteMystLanguage
from .paste import Paste

log = logging.getLogger(__name__)

ERRORS = {400: BadRequest, 404: NotFound}


def encode_code(code: Optional[str]) -> str:
    """Encode code the way JavaScript's encodeURI does, which the API expects"""
    if code is None:
        return UNDEFINED_CODE
    return quote(str(code), safe=URI_SAFE_CHARS)


def decode_code(code: Optional[str]) -> Optional[str]:
    if code is None:
        return None
    return unquote(code)


class Client:
    def __init__(
        self,
        *,
        session: Optional[aiohttp.ClientSession] = None,
        base_url: Optional[str] = None,
    ):
        self.session = session
        # Only close sessions this client opened itself
        self._owns_session = session is None
        self._closed = False

        self.base_url = yarl.URL(base_url or API_URL)

    async def __aenter__(self) -> "Client":
        return self

    async def __aexit__(self, *exc) -> None:
        await self.close()

    async def close(self):
        self._closed = True
        if self._owns_session and self.session is not None:
            await self.session.close()
            self.session = None

    async def request(
        self, method: str, url: str, *, params=None, data=None, headers=None
    ) -> typing.Dict:
        """The method to make asynchronous requests to the PasteMyst API"""
        if self._closed:
            raise ClientClosed("This Client has been closed.")

        if self.session is None:
            self.session = aiohttp.ClientSession()

        hdrs = {
            "Accept": "application/json",
            "User-Agent": USER_AGENT,
        }

        if headers is not None and isinstance(headers, dict):
            hdrs.update(headers)

        request_url = self.base_url / url

        log.debug("%s %s params=%s", method, request_url, params)
        async with self.session.request(
            method, request_url, params=params, json=data, headers=hdrs
        ) as response:
            try:
                js = await response.json()
            except aiohttp.ContentTypeError:
                js = await response.text()

            if 300 > response.status >= 200:
                return js

            message = js.get("message") if isinstance(js, dict) else js
            log.warning(
                "%s %s failed with status %s: %s",
                method,
                request_url,
                response.status,
                message,
            )
            exc_cls = ERRORS.get(response.status, PasteMystHTTPException)
            raise exc_cls(response.status, message)

    async def fetch_data(self, paste_id: str) -> typing.Dict:
        """Fetch data of a paste"""

        url = "paste"
        paste_data: typing.Dict = await self.request(
            "GET", url, params={"id": paste_id}
        )
        return paste_data

    async def get_paste(self, paste_id: str) -> Paste:
        """Get a Paste object associated with the provided paste_id"""
        data = await self.fetch_data(paste_id)
        return self._make_paste(data)

    async def create_paste(
        self,
        code: Optional[str],
        expires_in: Union[str, Expiration] = Expiration.NEVER,
        language: Union[str, PasteMystLanguage] = PasteMystLanguage.AUTODETECT,
    ) -> Paste:
        """Create a new paste and return a Paste object associated with it.

        ``code=None`` is sent as the literal text ``"undefined"``, which the
        service stores as the paste's code.
        """

        data = {
            "code": encode_code(code),
            "expiresIn": str(expires_in),
            "language": str(language),
        }

        url = "paste"
        js = await self.request("POST", url, data=data)
        return self._make_paste(js)

    async def create_paste_from_message(
        self,
        message,
        expires_in: Union[str, Expiration] = Expiration.NEVER,
        *,
        seconds: Optional[float] = None,
    ) -> typing.List[Paste]:
        """Create one paste per code block in a message, each with the block's language.

        If ``seconds`` is given it takes precedence over ``expires_in`` and is
        rounded up to the next supported expiration.
        """

        if seconds is not None:
            expires_in = get_next_higher_expiration(seconds)

        pastes = []
        for block in get_full_code_block_info(message):
            paste = await self.create_paste(block.code, expires_in, block.language)
            pastes.append(paste)
        return pastes

    def _make_paste(self, data: typing.Dict) -> Paste:
        data = dict(data)
        if "code" in data:
            data["code"] = decode_code(data["code"])
        return Paste(data)


async def create_paste_myst(
    code: Optional[str],
    expires_in: Union[str, Expiration] = Expiration.NEVER,
    language: Union[str, PasteMystLanguage] = PasteMystLanguage.AUTODETECT,
) -> Paste:
    """Create a paste with a throwaway Client"""
    async with Client() as client:
        return await client.create_paste(code, expires_in, language)


async def get_paste_myst(paste_id: str) -> Paste:
    """Fetch a paste with a throwaway Client"""
    async with Client() as client:
        return await client.get_paste(paste_id)
