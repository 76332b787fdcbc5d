"""Tests for restive.http.params — immutable multi-valued parameters."""

from restive.http.params import Params


class TestParamsParse:
    def test_query_string(self) -> None:
        params = Params.parse("q=dune&page=2")
        assert params["q"] == "dune"
        assert params["page"] == "2"

    def test_bytes(self) -> None:
        assert Params.parse(b"a=1")["a"] == "1"

    def test_repeated_keys(self) -> None:
        params = Params.parse("tag=a&tag=b")
        assert params["tag"] == "a"
        assert params.get_list("tag") == ["a", "b"]

    def test_blank_values_kept(self) -> None:
        params = Params.parse("flag=&x=1")
        assert "flag" in params
        assert params["flag"] == ""

    def test_percent_decoding(self) -> None:
        assert Params.parse("name=Frank+Herbert%21")["name"] == "Frank Herbert!"

    def test_utf8_body(self) -> None:
        params = Params.parse("city=M%C3%BCnchen".encode(), encoding="utf-8")
        assert params["city"] == "München"

    def test_empty(self) -> None:
        assert len(Params.parse("")) == 0


class TestParamsMapping:
    def test_get_default(self) -> None:
        params = Params({"a": ["1"]})
        assert params.get("a") == "1"
        assert params.get("missing") is None
        assert params.get("missing", "x") == "x"

    def test_get_int(self) -> None:
        params = Params({"page": ["3"], "bad": ["three"]})
        assert params.get_int("page") == 3
        assert params.get_int("bad") is None
        assert params.get_int("bad", 1) == 1
        assert params.get_int("missing", 5) == 5

    def test_iteration_and_len(self) -> None:
        params = Params({"a": ["1"], "b": ["2", "3"]})
        assert list(params) == ["a", "b"]
        assert len(params) == 2
        assert dict(params) == {"a": "1", "b": "2"}

    def test_get_list_missing(self) -> None:
        assert Params().get_list("nope") == []

    def test_to_dict_is_a_copy(self) -> None:
        params = Params({"a": ["1"]})
        data = params.to_dict()
        data["a"].append("2")
        assert params.get_list("a") == ["1"]

    def test_source_not_shared(self) -> None:
        source = {"a": ["1"]}
        params = Params(source)
        source["a"].append("2")
        assert params.get_list("a") == ["1"]

    def test_repr(self) -> None:
        assert repr(Params({"a": ["1"]})) == "Params({'a': '1'})"


class TestParamsCombining:
    def test_extend_appends(self) -> None:
        form = Params({"tag": ["a"], "title": ["Dune"]})
        query = Params({"tag": ["b"], "page": ["1"]})
        merged = form.extend(query)
        assert merged.get_list("tag") == ["a", "b"]
        assert merged["title"] == "Dune"
        assert merged["page"] == "1"

    def test_extend_leaves_operands_alone(self) -> None:
        form = Params({"tag": ["a"]})
        form.extend(Params({"tag": ["b"]}))
        assert form.get_list("tag") == ["a"]

    def test_replace_overrides(self) -> None:
        params = Params({"id": ["from-query", "again"], "q": ["x"]})
        replaced = params.replace({"id": "7"})
        assert replaced.get_list("id") == ["7"]
        assert replaced["q"] == "x"
        assert params.get_list("id") == ["from-query", "again"]

    def test_replace_adds_new_keys(self) -> None:
        assert Params().replace({"id": "1"})["id"] == "1"
