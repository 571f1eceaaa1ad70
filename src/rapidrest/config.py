import collections.abc
import dataclasses
import os
import typing

from rapidrest import errors
from rapidrest.rest import route as route_m

__all__: collections.abc.Sequence[str] = ("Config",)

BeforeRequestHookT: typing.TypeAlias = collections.abc.Callable[[str, str], object]
AfterRequestHookT: typing.TypeAlias = collections.abc.Callable[[typing.Any], object]
ErrorHookT: typing.TypeAlias = collections.abc.Callable[[BaseException], object]

_DEFAULT_REQUEST_TYPES: typing.Final = frozenset(verb.lower() for verb in route_m.RequestType)
_TRUTHY: typing.Final = frozenset(("1", "true", "yes", "on"))


def _noop(*_args: object) -> None:
    return None


def _env_flag(name: str) -> bool | None:
    if name not in os.environ:
        return None
    return os.environ[name].strip().lower() in _TRUTHY


@dataclasses.dataclass(slots=True, frozen=True)
class Config:
    allowed_request_types: collections.abc.Set[str] = _DEFAULT_REQUEST_TYPES
    debug: bool = False
    trailing_slash: bool = False
    base_url: str = ""
    custom_routes: collections.abc.Mapping[str, typing.Any] = dataclasses.field(default_factory=dict)
    # Merged under the query params of every request; request params win.
    global_parameters: collections.abc.Mapping[str, typing.Any] = dataclasses.field(
        default_factory=dict,
    )
    before_request: BeforeRequestHookT = _noop
    after_request: AfterRequestHookT = _noop
    on_error: ErrorHookT = _noop

    def __post_init__(self) -> None:
        allowed = frozenset(verb.lower() for verb in self.allowed_request_types)
        unknown = allowed - _DEFAULT_REQUEST_TYPES
        if unknown:
            msg = f"Unknown request type(s) in allowed_request_types: {', '.join(sorted(unknown))}."
            raise errors.InvalidRequestTypeError(msg)

        object.__setattr__(self, "allowed_request_types", allowed)

    @classmethod
    def from_env(cls, **overrides: typing.Any) -> "Config":
        """Create a config from ``RAPIDREST_*`` environment variables.

        Explicit keyword arguments take precedence over the environment.
        """
        settings: dict[str, typing.Any] = {}

        if "RAPIDREST_BASE_URL" in os.environ:
            settings["base_url"] = os.environ["RAPIDREST_BASE_URL"]

        debug = _env_flag("RAPIDREST_DEBUG")
        if debug is not None:
            settings["debug"] = debug

        trailing_slash = _env_flag("RAPIDREST_TRAILING_SLASH")
        if trailing_slash is not None:
            settings["trailing_slash"] = trailing_slash

        settings.update(overrides)
        return cls(**settings)
