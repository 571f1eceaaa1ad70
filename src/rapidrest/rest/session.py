import collections.abc
import copy
import dataclasses
import typing

__all__: collections.abc.Sequence[str] = ("RequestIntent", "RequestSession", "defaults_deep")

UrlParamT: typing.TypeAlias = str | int


def defaults_deep(
    target: collections.abc.Mapping[str, typing.Any],
    source: collections.abc.Mapping[str, typing.Any],
) -> dict[str, typing.Any]:
    """Return a copy of ``target`` with the keys it lacks filled in from ``source``.

    Values already present in ``target`` win. When both sides hold a mapping
    under the same key, the two are merged recursively under the same rule.
    """
    merged = dict(target)
    for key, value in source.items():
        if key not in merged:
            merged[key] = copy.deepcopy(value)

        elif isinstance(merged[key], collections.abc.Mapping) and isinstance(
            value,
            collections.abc.Mapping,
        ):
            merged[key] = defaults_deep(merged[key], value)

    return merged


@dataclasses.dataclass(slots=True, frozen=True)
class RequestIntent:
    data: collections.abc.Mapping[str, typing.Any] = dataclasses.field(default_factory=dict)
    params: collections.abc.Mapping[str, typing.Any] = dataclasses.field(default_factory=dict)
    options: collections.abc.Mapping[str, typing.Any] = dataclasses.field(default_factory=dict)


@dataclasses.dataclass(slots=True)
class RequestSession:
    data: dict[str, typing.Any] = dataclasses.field(default_factory=dict)
    params: dict[str, typing.Any] = dataclasses.field(default_factory=dict)
    options: dict[str, typing.Any] = dataclasses.field(default_factory=dict)
    url_params: list[UrlParamT] = dataclasses.field(default_factory=list)

    def merge_data(self, data: collections.abc.Mapping[str, typing.Any]) -> None:
        self.data = defaults_deep(self.data, data)

    def set_params(self, params: collections.abc.Mapping[str, typing.Any]) -> None:
        self.params = dict(params)

    def set_param(self, key: str, value: object) -> None:
        self.params[key] = value

    def set_options(self, options: collections.abc.Mapping[str, typing.Any]) -> None:
        self.options = dict(options)

    def set_option(self, key: str, value: object) -> None:
        self.options[key] = value

    def push_url_params(self, *url_params: UrlParamT) -> None:
        self.url_params.extend(url_params)

    def take_url_params(self) -> list[UrlParamT]:
        pending, self.url_params = self.url_params, []
        return pending

    def snapshot(self) -> RequestIntent:
        return RequestIntent(
            data=copy.deepcopy(self.data),
            params=copy.deepcopy(self.params),
            options=copy.deepcopy(self.options),
        )

    def reset(self) -> None:
        self.data = {}
        self.params = {}
        self.options = {}
        self.url_params = []

    def is_empty(self) -> bool:
        return not (self.data or self.params or self.options or self.url_params)
