"""Tests for restive.routing.pattern — path template compiler."""

import pytest

from restive.errors import CompileError, ConfigurationError
from restive.routing.pattern import CompiledPattern, compile_path, to_regex


class TestToRegex:
    def test_literal(self) -> None:
        assert to_regex("/books") == r"\A/books\Z"

    def test_placeholder(self) -> None:
        assert to_regex("/books/:id") == r"\A/books/(?P<id>[^/#?]+)\Z"

    def test_wildcard(self) -> None:
        assert to_regex("/files/:path*") == r"\A/files/(?P<path>.+)\Z"

    def test_dots_escaped(self) -> None:
        assert to_regex("/v1.0/status") == r"\A/v1\.0/status\Z"

    def test_consecutive_dots_escaped(self) -> None:
        assert to_regex("/a..b") == r"\A/a\.\.b\Z"

    def test_escaped_dot_left_alone(self) -> None:
        assert to_regex(r"/v1\.0") == r"\A/v1\.0\Z"

    def test_dot_ends_placeholder_name(self) -> None:
        assert to_regex("/files/:name.json") == r"\A/files/(?P<name>[^/#?]+)\.json\Z"

    def test_mixed_placeholders(self) -> None:
        assert (
            to_regex("/repos/:owner/blob/:path*")
            == r"\A/repos/(?P<owner>[^/#?]+)/blob/(?P<path>.+)\Z"
        )


class TestCompilePath:
    def test_returns_compiled_pattern(self) -> None:
        pattern = compile_path("/books/:id")
        assert isinstance(pattern, CompiledPattern)
        assert pattern.template == "/books/:id"
        assert pattern.param_names == ("id",)

    def test_same_template_same_matcher(self) -> None:
        assert compile_path("/books/:id") is compile_path("/books/:id")

    def test_no_placeholders(self) -> None:
        assert compile_path("/status").param_names == ()

    def test_param_names_in_order(self) -> None:
        pattern = compile_path("/users/:user/posts/:post")
        assert pattern.param_names == ("user", "post")

    def test_invalid_name_raises(self) -> None:
        with pytest.raises(CompileError) as exc_info:
            compile_path("/books/:book-id")
        assert exc_info.value.template == "/books/:book-id"
        assert "/books/:book-id" in str(exc_info.value)

    def test_duplicate_name_raises(self) -> None:
        with pytest.raises(CompileError):
            compile_path("/a/:id/b/:id")

    def test_unbalanced_parenthesis_raises(self) -> None:
        with pytest.raises(CompileError):
            compile_path("/books/(:id")

    def test_compile_error_is_configuration_error(self) -> None:
        assert issubclass(CompileError, ConfigurationError)


class TestCompiledPatternMatch:
    def test_literal_exact(self) -> None:
        pattern = compile_path("/books")
        assert pattern.match("/books") == {}
        assert pattern.match("/books/1") is None
        assert pattern.match("/book") is None
        assert pattern.match("/booksX") is None

    def test_segment_capture(self) -> None:
        assert compile_path("/books/:id").match("/books/42") == {"id": "42"}

    def test_segment_excludes_slash(self) -> None:
        assert compile_path("/books/:id").match("/books/4/2") is None

    def test_segment_requires_a_character(self) -> None:
        assert compile_path("/books/:id").match("/books/") is None

    def test_wildcard_spans_segments(self) -> None:
        assert compile_path("/files/:path*").match("/files/a/b/c") == {"path": "a/b/c"}

    def test_wildcard_requires_a_character(self) -> None:
        assert compile_path("/files/:path*").match("/files/") is None

    def test_literal_dot(self) -> None:
        pattern = compile_path("/v1.0/status")
        assert pattern.match("/v1.0/status") == {}
        assert pattern.match("/v1x0/status") is None

    def test_anchored_no_trailing_garbage(self) -> None:
        pattern = compile_path("/books/:id")
        assert pattern.match("/books/1/extra") is None
        assert pattern.match("/prefix/books/1") is None

    def test_anchored_against_trailing_newline(self) -> None:
        assert compile_path("/books").match("/books\n") is None
