"""Tests for rapidrest.rest.session: accumulation, snapshots and resets."""

from rapidrest.rest.session import RequestIntent, RequestSession, defaults_deep


class TestDefaultsDeep:
    def test_fills_missing(self) -> None:
        assert defaults_deep({"a": 1}, {"b": 2}) == {"a": 1, "b": 2}

    def test_existing_wins(self) -> None:
        assert defaults_deep({"a": 1}, {"a": 2}) == {"a": 1}

    def test_nested(self) -> None:
        merged = defaults_deep({"user": {"name": "ada"}}, {"user": {"name": "bob", "age": 36}})
        assert merged == {"user": {"name": "ada", "age": 36}}

    def test_does_not_mutate_inputs(self) -> None:
        target = {"user": {"name": "ada"}}
        source = {"user": {"age": 36}, "tags": ["x"]}
        merged = defaults_deep(target, source)
        merged["tags"].append("y")
        assert target == {"user": {"name": "ada"}}
        assert source["tags"] == ["x"]


class TestRequestSession:
    def test_merge_data(self) -> None:
        session = RequestSession()
        session.merge_data({"a": 1})
        session.merge_data({"b": 2})
        assert session.data == {"a": 1, "b": 2}

    def test_merge_data_keeps_first(self) -> None:
        session = RequestSession()
        session.merge_data({"a": 1})
        session.merge_data({"a": 2})
        assert session.data["a"] == 1

    def test_params_replace_and_set(self) -> None:
        session = RequestSession()
        session.set_params({"a": 1})
        session.set_params({"b": 2})
        session.set_param("c", 3)
        assert session.params == {"b": 2, "c": 3}

    def test_options_replace_and_set(self) -> None:
        session = RequestSession()
        session.set_options({"timeout": 5})
        session.set_option("headers", {"X-Test": "1"})
        assert session.options == {"timeout": 5, "headers": {"X-Test": "1"}}

    def test_set_params_copies(self) -> None:
        params = {"a": 1}
        session = RequestSession()
        session.set_params(params)
        session.set_param("b", 2)
        assert params == {"a": 1}

    def test_url_params(self) -> None:
        session = RequestSession()
        session.push_url_params("users", 1)
        session.push_url_params("posts")
        assert session.take_url_params() == ["users", 1, "posts"]
        assert session.url_params == []

    def test_snapshot_is_detached(self) -> None:
        session = RequestSession()
        session.merge_data({"user": {"name": "ada"}})
        session.set_param("page", 1)
        intent = session.snapshot()

        session.data["user"]["name"] = "bob"
        session.set_param("page", 2)

        assert intent == RequestIntent(data={"user": {"name": "ada"}}, params={"page": 1}, options={})

    def test_reset(self) -> None:
        session = RequestSession()
        session.merge_data({"a": 1})
        session.set_param("b", 2)
        session.set_option("c", 3)
        session.push_url_params("d")
        assert not session.is_empty()

        session.reset()

        assert session.data == {}
        assert session.params == {}
        assert session.options == {}
        assert session.url_params == []
        assert session.is_empty()
