"""Tests for rapidrest.rest.route: RequestType, Route, CompiledRoute, templating."""

import pytest

from rapidrest.errors import InvalidRequestTypeError
from rapidrest.rest.route import (
    CompiledRoute,
    RequestType,
    Route,
    extract_placeholders,
    resolve_template,
)


class TestExtractPlaceholders:
    def test_in_order(self) -> None:
        assert extract_placeholders("/users/{id}/posts/{postId}") == ["id", "postId"]

    def test_dotted_names(self) -> None:
        assert extract_placeholders("/users/{user.id}") == ["user.id"]

    def test_repeated_token(self) -> None:
        assert extract_placeholders("/{id}/{id}") == ["id", "id"]

    def test_inner_whitespace(self) -> None:
        assert extract_placeholders("/users/{ id }") == ["id"]

    def test_none(self) -> None:
        assert extract_placeholders("/users") == []


class TestResolveTemplate:
    def test_substitutes(self) -> None:
        assert resolve_template("/users/{id}", {"id": "42"}) == "/users/42"

    def test_coerces_values(self) -> None:
        assert resolve_template("/users/{id}", {"id": 42}) == "/users/42"

    def test_empty_params_leave_template(self) -> None:
        assert resolve_template("/users/{id}", {}) == "/users/{id}"

    def test_missing_param_left_literal(self) -> None:
        url = resolve_template("/users/{id}/posts/{postId}", {"id": 1})
        assert url == "/users/1/posts/{postId}"

    def test_repeated_token_replaced_each_time(self) -> None:
        assert resolve_template("/{id}/{id}", {"id": 7}) == "/7/7"

    def test_dotted_name(self) -> None:
        assert resolve_template("/users/{user.id}", {"user.id": "ada"}) == "/users/ada"

    def test_value_with_braces_not_resubstituted(self) -> None:
        url = resolve_template("/{a}/{b}", {"a": "{b}", "b": "x"})
        assert url == "/x/{b}"


class TestRequestType:
    def test_parse_any_case(self) -> None:
        assert RequestType.parse("post") is RequestType.POST
        assert RequestType.parse("Patch") is RequestType.PATCH

    def test_parse_passthrough(self) -> None:
        assert RequestType.parse(RequestType.HEAD) is RequestType.HEAD

    def test_parse_unknown(self) -> None:
        with pytest.raises(InvalidRequestTypeError):
            RequestType.parse("options")

    def test_str(self) -> None:
        assert str(RequestType.DELETE) == "DELETE"


class TestRoute:
    def test_defaults(self) -> None:
        route = Route()
        assert route.url == ""
        assert route.type is RequestType.GET
        assert route.name == ""

    def test_type_normalized(self) -> None:
        assert Route("/users", "post").type is RequestType.POST

    def test_invalid_type(self) -> None:
        with pytest.raises(InvalidRequestTypeError):
            Route("/users", "fetch")

    def test_from_mapping(self) -> None:
        route = Route.from_mapping({"url": "/users/{id}", "type": "delete", "name": "user"})
        assert route == Route("/users/{id}", RequestType.DELETE, "user")

    def test_placeholders(self) -> None:
        assert Route("/users/{id}/posts/{postId}").placeholders == ("id", "postId")

    def test_frozen(self) -> None:
        route = Route("/users")
        with pytest.raises(AttributeError):
            route.url = "/other"  # type: ignore[misc]

    def test_str(self) -> None:
        assert str(Route("/users", "get")) == "(GET) /users"


class TestCompiledRoute:
    def test_compile(self) -> None:
        route = Route("/users/{id}", "put", "user")
        compiled = route.compile({"id": 42})
        assert isinstance(compiled, CompiledRoute)
        assert compiled.url == "/users/42"
        assert compiled.raw_url == "/users/{id}"
        assert compiled.name == "user"
        assert compiled.type is RequestType.PUT

    def test_compile_without_params(self) -> None:
        assert Route("/users/{id}").compile().url == "/users/{id}"

    def test_does_not_mutate_route(self) -> None:
        route = Route("/users/{id}")
        route.compile({"id": 1})
        assert route.url == "/users/{id}"

    def test_str(self) -> None:
        assert str(Route("/users/{id}").compile({"id": 3})) == "(GET) /users/3"
