import collections.abc
import typing

from rapidrest.rest import route as route_m
from rapidrest.rest import session as session_m

if typing.TYPE_CHECKING:
    from rapidrest import config as config_m

__all__: collections.abc.Sequence[str] = ("is_allowed_request_type", "parse_request_data")

_BODY_REQUEST_TYPES: typing.Final = frozenset(("post", "put", "patch"))


def is_allowed_request_type(request_type: str, config: "config_m.Config") -> bool:
    return request_type.lower() in config.allowed_request_types


def parse_request_data(
    request_type: str | route_m.RequestType,
    intent: session_m.RequestIntent,
    config: "config_m.Config",
) -> tuple[collections.abc.Mapping[str, typing.Any], ...]:
    """Shape a request intent into the positional arguments of a transport verb.

    Body-carrying verbs receive ``(data, params, options)``, all others
    ``(params, options)``.
    """
    params = session_m.defaults_deep(intent.params, config.global_parameters)
    options = dict(intent.options)

    if request_type.lower() in _BODY_REQUEST_TYPES:
        return dict(intent.data), params, options

    return params, options
