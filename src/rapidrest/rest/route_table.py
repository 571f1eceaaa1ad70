import collections.abc
import dataclasses
import typing

from rapidrest.rest import route as route_m

__all__: collections.abc.Sequence[str] = ("RouteTable",)

RouteDefinitionT: typing.TypeAlias = route_m.Route | collections.abc.Mapping[str, typing.Any]

_EMPTY_ROUTE: typing.Final = route_m.Route()


@dataclasses.dataclass(slots=True)
class RouteTable:
    _routes: dict[str, route_m.Route] = dataclasses.field(default_factory=dict)

    @classmethod
    def from_config(
        cls,
        custom_routes: collections.abc.Mapping[str, RouteDefinitionT],
        /,
    ) -> "RouteTable":
        routes: dict[str, route_m.Route] = {}
        for name, definition in custom_routes.items():
            if isinstance(definition, route_m.Route):
                routes[name] = definition
            else:
                routes[name] = route_m.Route.from_mapping({"name": name, **definition})

        return cls(routes)

    @classmethod
    def from_routes(cls, *routes: route_m.Route) -> "RouteTable":
        for route in routes:
            if not route.name:
                msg = f"Cannot register unnamed route {route!s}."
                raise ValueError(msg)

        return cls({route.name: route for route in routes})

    def __contains__(self, name: object) -> bool:
        return name in self._routes

    def __len__(self) -> int:
        return len(self._routes)

    def __iter__(self) -> collections.abc.Iterator[str]:
        return iter(self._routes)

    def get(self, name: str, /) -> route_m.Route | None:
        return self._routes.get(name)

    def resolve(
        self,
        name: str = "",
        route_params: route_m.RouteParams | None = None,
    ) -> route_m.CompiledRoute:
        """Compile the route registered as ``name``.

        Unknown names compile the empty default route instead of raising, so
        callers should treat an empty url as "not found".
        """
        route = self._routes.get(name, _EMPTY_ROUTE)
        return route.compile(route_params)
