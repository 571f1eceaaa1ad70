import collections.abc

from rapidrest.rest.client import RestClient, Transport
from rapidrest.rest.route import CompiledRoute, RequestType, Route
from rapidrest.rest.route_table import RouteTable
from rapidrest.rest.session import RequestIntent, RequestSession

__all__: collections.abc.Sequence[str] = (
    "CompiledRoute",
    "RequestIntent",
    "RequestSession",
    "RequestType",
    "RestClient",
    "Route",
    "RouteTable",
    "Transport",
)
