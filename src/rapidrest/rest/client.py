import asyncio
import collections.abc
import dataclasses
import http
import json
import logging
import sys
import typing

import aiohttp
import yarl

from rapidrest.internal import async_utils
from rapidrest.internal import url as url_utils
from rapidrest.rest import route

__all__: collections.abc.Sequence[str] = ("RestClient", "Transport")

_LOGGER: typing.Final[logging.Logger] = logging.getLogger(__name__)

_APPLICATION_JSON: typing.Final[str] = sys.intern("application/json")
_USER_AGENT_HEADER: typing.Final = sys.intern("User-Agent")
_USER_AGENT: typing.Final = "rapidrest (aiohttp)"
_UTF_8: typing.Final = "utf-8"

RequestBodyT: typing.TypeAlias = collections.abc.Mapping[str, object] | collections.abc.Collection[object]
ResponseBodyT: typing.TypeAlias = (
    collections.abc.Mapping[str, object] | collections.abc.Collection[object] | str | None
)
OptionsT: typing.TypeAlias = collections.abc.Mapping[str, typing.Any]


class Transport(typing.Protocol):
    """The verb methods a request builder dispatches to.

    Verbs without a body take ``(url, params, options)``, verbs with a body
    take ``(url, data, params, options)``.
    """

    def get(self, url: str, params: yarl.Query, options: OptionsT, /) -> typing.Awaitable[typing.Any]: ...

    def head(self, url: str, params: yarl.Query, options: OptionsT, /) -> typing.Awaitable[typing.Any]: ...

    def delete(self, url: str, params: yarl.Query, options: OptionsT, /) -> typing.Awaitable[typing.Any]: ...

    def post(
        self, url: str, data: RequestBodyT, params: yarl.Query, options: OptionsT, /,
    ) -> typing.Awaitable[typing.Any]: ...

    def put(
        self, url: str, data: RequestBodyT, params: yarl.Query, options: OptionsT, /,
    ) -> typing.Awaitable[typing.Any]: ...

    def patch(
        self, url: str, data: RequestBodyT, params: yarl.Query, options: OptionsT, /,
    ) -> typing.Awaitable[typing.Any]: ...


@dataclasses.dataclass
class RestClient:

    base_url: str = ""
    headers: collections.abc.Mapping[str, str] = dataclasses.field(default_factory=dict)
    _session: aiohttp.ClientSession | None = dataclasses.field(default=None, init=False)
    _close_event: asyncio.Event | None = dataclasses.field(default=None, init=False)

    def start(self) -> None:
        if self._session:
            msg = "Cannot start an already started REST client."
            raise RuntimeError(msg)

        self._close_event = asyncio.Event()
        self._session = aiohttp.ClientSession()

    async def close(self) -> None:
        if not self._session or not self._close_event:
            msg = "Cannot close an inactive REST client."
            raise RuntimeError(msg)

        self._close_event.set()
        self._close_event = None

        await self._session.close()
        self._session = None

    async def __aenter__(self) -> typing.Self:
        self.start()
        return self

    async def __aexit__(self, *_exc_data: object) -> None:
        await self.close()

    def _assert_session(self) -> aiohttp.ClientSession:
        if not self._session:
            msg = "Cannot use an inactive REST client."
            raise RuntimeError(msg)

        return self._session

    def create_url(self, path: str) -> yarl.URL:
        target = yarl.URL(path)
        if target.is_absolute() or not self.base_url:
            return target

        return yarl.URL(url_utils.make_url(self.base_url, path))

    async def get(self, url: str, params: yarl.Query, options: OptionsT, /) -> ResponseBodyT:
        return await self.request(route.GET, url, query=params, options=options)

    async def head(self, url: str, params: yarl.Query, options: OptionsT, /) -> ResponseBodyT:
        return await self.request(route.HEAD, url, query=params, options=options)

    async def delete(self, url: str, params: yarl.Query, options: OptionsT, /) -> ResponseBodyT:
        return await self.request(route.DELETE, url, query=params, options=options)

    async def post(
        self, url: str, data: RequestBodyT, params: yarl.Query, options: OptionsT, /,
    ) -> ResponseBodyT:
        return await self.request(route.POST, url, query=params, data=data, options=options)

    async def put(
        self, url: str, data: RequestBodyT, params: yarl.Query, options: OptionsT, /,
    ) -> ResponseBodyT:
        return await self.request(route.PUT, url, query=params, data=data, options=options)

    async def patch(
        self, url: str, data: RequestBodyT, params: yarl.Query, options: OptionsT, /,
    ) -> ResponseBodyT:
        return await self.request(route.PATCH, url, query=params, data=data, options=options)

    async def request(
        self,
        method: str,
        url: str,
        *,
        query: yarl.Query | None = None,
        data: RequestBodyT | None = None,
        options: OptionsT | None = None,
    ) -> ResponseBodyT:
        if not self._close_event:
            msg = "Cannot use an inactive REST client."
            raise RuntimeError(msg)

        request_task = asyncio.create_task(
            self._request(method, url, query=query, data=data, options=options),
        )

        await async_utils.first_completed(request_task, self._close_event.wait())

        if not request_task.cancelled():
            return request_task.result()

        msg = "The REST client was closed mid-request."
        raise RuntimeError(msg)

    async def _request(
        self,
        method: str,
        url: str,
        *,
        query: yarl.Query | None = None,
        data: RequestBodyT | None = None,
        options: OptionsT | None = None,
    ) -> ResponseBodyT:
        session = self._assert_session()

        extra = dict(options or {})
        headers = {_USER_AGENT_HEADER: _USER_AGENT, **self.headers, **extra.pop("headers", {})}

        timeout = extra.pop("timeout", None)
        if timeout is not None and not isinstance(timeout, aiohttp.ClientTimeout):
            timeout = aiohttp.ClientTimeout(total=timeout)
        if timeout is not None:
            extra["timeout"] = timeout

        payload = None
        if data:
            payload = aiohttp.BytesPayload(
                json.dumps(data).encode(_UTF_8),
                content_type=_APPLICATION_JSON,
                encoding=_UTF_8,
            )

        target = self.create_url(url)
        _LOGGER.debug("%s %s", method, target)

        response = await session.request(
            method,
            target,
            headers=headers,
            params=query or None,
            data=payload,
            **extra,
        )

        async with response:
            if not response.ok:
                _LOGGER.debug(
                    "%s %s failed with status %d: %r",
                    method,
                    target,
                    response.status,
                    await response.read(),
                )
                response.raise_for_status()

            if response.status == http.HTTPStatus.NO_CONTENT or method == route.HEAD:
                return None

            body = await response.read()
            if response.content_type == _APPLICATION_JSON:
                return json.loads(body) if body else None

            return body.decode(response.charset or _UTF_8)
