"""A stateful request builder with named, templated routes on top of aiohttp."""

import collections.abc

from rapidrest import errors
from rapidrest.config import Config
from rapidrest.debug import Debugger, FakeRequest
from rapidrest.errors import InvalidRequestTypeError, RapidRestError
from rapidrest.rest import CompiledRoute, RequestType, RestClient, Route, RouteTable, Transport
from rapidrest.rest.builder import RequestBuilder

__all__: collections.abc.Sequence[str] = (
    "CompiledRoute",
    "Config",
    "Debugger",
    "FakeRequest",
    "InvalidRequestTypeError",
    "RapidRestError",
    "RequestBuilder",
    "RequestType",
    "RestClient",
    "Route",
    "RouteTable",
    "Transport",
    "errors",
)
