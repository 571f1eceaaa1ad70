import collections.abc
import dataclasses
import enum
import re
import typing

from rapidrest import errors

__all__: collections.abc.Sequence[str] = (
    "CompiledRoute",
    "RequestType",
    "Route",
    "extract_placeholders",
    "resolve_template",
)

RouteParams: typing.TypeAlias = collections.abc.Mapping[str, object]

_PLACEHOLDER_PATTERN: typing.Final = re.compile(r"{\s*[\w.]+\s*}")
_PLACEHOLDER_NAME_PATTERN: typing.Final = re.compile(r"[\w.]+")


class RequestType(enum.StrEnum):
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    HEAD = "HEAD"
    DELETE = "DELETE"

    @classmethod
    def parse(cls, value: "str | RequestType") -> "RequestType":
        if isinstance(value, RequestType):
            return value

        try:
            return cls(value.upper())
        except (ValueError, AttributeError):
            msg = f"{value!r} is not a known request type."
            raise errors.InvalidRequestTypeError(msg) from None


GET: typing.Final = RequestType.GET
POST: typing.Final = RequestType.POST
PUT: typing.Final = RequestType.PUT
PATCH: typing.Final = RequestType.PATCH
HEAD: typing.Final = RequestType.HEAD
DELETE: typing.Final = RequestType.DELETE


def extract_placeholders(template: str) -> list[str]:
    """Return the placeholder names in ``template`` in order of appearance.

    A token that appears more than once is listed once per occurrence.
    """
    return [
        _PLACEHOLDER_NAME_PATTERN.search(token).group()  # pyright: ignore[reportOptionalMemberAccess]
        for token in _PLACEHOLDER_PATTERN.findall(template)
    ]


def resolve_template(template: str, route_params: RouteParams) -> str:
    """Substitute ``{name}`` tokens in ``template`` with values from ``route_params``.

    Every extracted placeholder replaces the next literal ``{name}`` once.
    Placeholders without a value are left as they are, and an empty mapping
    leaves the template untouched.
    """
    if not route_params:
        return template

    url = template
    for name in extract_placeholders(template):
        if name in route_params:
            url = url.replace(f"{{{name}}}", str(route_params[name]), 1)

    return url


@dataclasses.dataclass(slots=True, frozen=True)
class Route:
    url: str = ""
    type: RequestType = RequestType.GET
    name: str = ""

    def __post_init__(self) -> None:
        # Routes are frequently declared with plain strings such as "post".
        object.__setattr__(self, "type", RequestType.parse(self.type))

    @classmethod
    def from_mapping(cls, raw: collections.abc.Mapping[str, typing.Any], /) -> "Route":
        return cls(
            url=raw.get("url", ""),
            type=raw.get("type", RequestType.GET),
            name=raw.get("name", ""),
        )

    @property
    def placeholders(self) -> collections.abc.Sequence[str]:
        return tuple(extract_placeholders(self.url))

    def compile(self, route_params: RouteParams | None = None, /) -> "CompiledRoute":
        return CompiledRoute(self, resolve_template(self.url, route_params or {}))

    def __str__(self) -> str:
        return f"({self.type}) {self.url}"


@dataclasses.dataclass(slots=True, frozen=True)
class CompiledRoute:
    route: Route = dataclasses.field()
    url: str = dataclasses.field()

    @property
    def name(self) -> str:
        return self.route.name

    @property
    def type(self) -> RequestType:
        return self.route.type

    @property
    def raw_url(self) -> str:
        return self.route.url

    @property
    def placeholders(self) -> collections.abc.Sequence[str]:
        return self.route.placeholders

    def __str__(self) -> str:
        return f"({self.route.type}) {self.url}"
