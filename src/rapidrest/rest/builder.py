import collections.abc
import dataclasses
import logging
import typing

from rapidrest import config as config_m
from rapidrest import debug, errors
from rapidrest.internal import request_data
from rapidrest.internal import url as url_utils
from rapidrest.rest import client as client_m
from rapidrest.rest import route as route_m
from rapidrest.rest import route_table as route_table_m
from rapidrest.rest import session as session_m

__all__: collections.abc.Sequence[str] = ("RequestBuilder",)

_LOGGER: typing.Final[logging.Logger] = logging.getLogger(__name__)

VerbMethodT: typing.TypeAlias = collections.abc.Callable[..., typing.Awaitable[typing.Any]]


@dataclasses.dataclass
class RequestBuilder:
    """Build and dispatch requests against a transport.

    Request state is accumulated through the ``with_*`` methods and handed to
    the next dispatched request. The state is copied and cleared as soon as a
    request is issued, so it never leaks into the request after it.

    Every verb method validates the request type and fires the
    ``before_request`` hook synchronously, then returns an awaitable that
    performs the actual call.
    """

    transport: client_m.Transport
    config: config_m.Config = dataclasses.field(default_factory=config_m.Config)

    routes: route_table_m.RouteTable = dataclasses.field(init=False)
    debugger: debug.Debugger = dataclasses.field(init=False)
    session: session_m.RequestSession = dataclasses.field(
        default_factory=session_m.RequestSession,
        init=False,
    )
    _verbs: dict[str, VerbMethodT] = dataclasses.field(default_factory=dict, init=False, repr=False)

    def __post_init__(self) -> None:
        self.routes = route_table_m.RouteTable.from_config(self.config.custom_routes)
        self.debugger = debug.Debugger(self.config)
        self._verbs = {
            "get": self.get,
            "post": self.post,
            "put": self.put,
            "patch": self.patch,
            "head": self.head,
            "delete": self.delete,
        }

    # Session

    def with_data(self, data: collections.abc.Mapping[str, typing.Any] | None = None) -> typing.Self:
        self.session.merge_data(data or {})
        return self

    def with_params(self, params: collections.abc.Mapping[str, typing.Any] | None = None) -> typing.Self:
        self.session.set_params(params or {})
        return self

    def with_param(self, key: str, value: object) -> typing.Self:
        self.session.set_param(key, value)
        return self

    def with_options(self, options: collections.abc.Mapping[str, typing.Any] | None = None) -> typing.Self:
        self.session.set_options(options or {})
        return self

    def with_option(self, key: str, value: object) -> typing.Self:
        self.session.set_option(key, value)
        return self

    def with_url_params(self, *url_params: session_m.UrlParamT) -> typing.Self:
        self.session.push_url_params(*url_params)
        return self

    # Verbs

    def get(self, *url_params: session_m.UrlParamT) -> typing.Awaitable[typing.Any]:
        return self.build_request(route_m.GET, url_params)

    def post(self, *url_params: session_m.UrlParamT) -> typing.Awaitable[typing.Any]:
        return self.build_request(route_m.POST, url_params)

    def put(self, *url_params: session_m.UrlParamT) -> typing.Awaitable[typing.Any]:
        return self.build_request(route_m.PUT, url_params)

    def patch(self, *url_params: session_m.UrlParamT) -> typing.Awaitable[typing.Any]:
        return self.build_request(route_m.PATCH, url_params)

    def head(self, *url_params: session_m.UrlParamT) -> typing.Awaitable[typing.Any]:
        return self.build_request(route_m.HEAD, url_params)

    def delete(self, *url_params: session_m.UrlParamT) -> typing.Awaitable[typing.Any]:
        return self.build_request(route_m.DELETE, url_params)

    def invoke(self, request_type: str, *url_params: session_m.UrlParamT) -> typing.Awaitable[typing.Any]:
        try:
            verb = self._verbs[request_type.lower()]
        except KeyError:
            msg = f"{request_type!r} is not a known request type."
            raise errors.InvalidRequestTypeError(msg) from None

        return verb(*url_params)

    # Dispatch

    def build_request(
        self,
        request_type: str,
        url_params: collections.abc.Sequence[session_m.UrlParamT],
    ) -> typing.Awaitable[typing.Any]:
        segments = [*self.session.take_url_params(), *url_params]
        return self.request(request_type, url_utils.make_url(*segments))

    def request(self, request_type: str, url: str) -> typing.Awaitable[typing.Any]:
        request_type = request_type.lower()

        if not request_data.is_allowed_request_type(request_type, self.config):
            msg = f"Request type {request_type!r} is not allowed."
            raise errors.InvalidRequestTypeError(msg)

        self.before_request(request_type, url)

        intent = self.session.snapshot()
        self.session.reset()
        _LOGGER.debug("Dispatching %s request to %r", request_type.upper(), url)

        if self.config.debug:
            return self.debugger.fake_request(request_type, url, intent)

        return self._dispatch(request_type, url, intent)

    async def _dispatch(
        self,
        request_type: str,
        url: str,
        intent: session_m.RequestIntent,
    ) -> typing.Any:
        method: VerbMethodT = getattr(self.transport, request_type)
        arguments = request_data.parse_request_data(request_type, intent, self.config)

        try:
            response = await method(url_utils.sanitize_url(url, self.config.trailing_slash), *arguments)

        except Exception as exc:
            self.on_error(exc)
            raise

        self.after_request(response)
        return response

    # Custom routes

    def route(
        self,
        name: str = "",
        route_params: route_m.RouteParams | None = None,
        request_params: collections.abc.Mapping[str, typing.Any] | None = None,
    ) -> typing.Awaitable[typing.Any]:
        route = self.routes.resolve(name, route_params)

        if not route.url:
            _LOGGER.warning("No custom route named %r, dispatching %s to an empty url.", name, route.type)

        if request_params:
            self.with_params(request_params)

        return self.request(route.type, route.url)

    def generate(self, name: str = "", route_params: route_m.RouteParams | None = None) -> str:
        url = self.routes.resolve(name, route_params).url
        if not url:
            return ""

        return url_utils.sanitize_url(
            url_utils.make_url(self.config.base_url, url),
            self.config.trailing_slash,
        )

    # Hooks

    def before_request(self, request_type: str, url: str) -> None:
        self.config.before_request(request_type, url)

    def after_request(self, response: typing.Any) -> None:
        self.config.after_request(response)

    def on_error(self, error: BaseException) -> None:
        self.config.on_error(error)
