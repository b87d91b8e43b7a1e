"""Tests for navpath.routing.assemble — pattern rendering and path finishing."""

import logging

import pytest

from navpath.routing.assemble import (
    build_query,
    encode_segment,
    finalize_path,
    render_level,
    render_pattern,
)
from navpath.routing.walker import LevelMatch, ParamAccumulator
from navpath.state import NavigationState, Route


class TestEncodeSegment:
    def test_plain(self) -> None:
        assert encode_segment("chat") == "chat"

    def test_reserved(self) -> None:
        assert encode_segment("a b/c?d") == "a%20b%2Fc%3Fd"

    def test_uri_component_safe_chars(self) -> None:
        assert encode_segment("!'()*") == "!'()*"


class TestRenderPattern:
    def test_params_substituted(self) -> None:
        assert render_pattern("chat/:author/:id", "Chat", {"author": "jane", "id": "42"}) == "chat/jane/42"

    def test_param_encoded(self) -> None:
        assert render_pattern("search/:q", "Search", {"q": "a/b c"}) == "search/a%2Fb%20c"

    def test_optional_missing_is_empty(self) -> None:
        assert render_pattern("profile/:id?", "Profile", {}) == "profile/"

    def test_optional_present(self) -> None:
        assert render_pattern("profile/:id?", "Profile", {"id": "3"}) == "profile/3"

    def test_required_missing_is_undefined(self) -> None:
        assert render_pattern("chat/:id", "Chat", {}) == "chat/undefined"

    def test_wildcard_is_route_name(self) -> None:
        assert render_pattern("*", "NotFound", {}) == "NotFound"

    def test_literal_encoded(self) -> None:
        assert render_pattern("café", "Cafe", {}) == "caf%C3%A9"

    def test_empty_pattern(self) -> None:
        assert render_pattern("", "Home", {}) == ""


class TestBuildQuery:
    def test_none(self) -> None:
        assert build_query(None) == ""

    def test_undefined_dropped(self) -> None:
        assert build_query({"debug": "undefined"}) == ""

    def test_none_dropped(self) -> None:
        assert build_query({"id": 3, "debug": None}) == "id=3"

    def test_order_kept(self) -> None:
        assert build_query({"b": "2", "x": "undefined", "a": "1"}) == "b=2&a=1"


class TestRenderLevel:
    def test_unconfigured_uses_name(self) -> None:
        route = Route(name="My Screen")
        level = LevelMatch(route=route, pattern="", configured=False, params=ParamAccumulator())
        assert render_level(level, route) == "My%20Screen"

    def test_nested_state_adds_slash(self) -> None:
        route = Route(name="Home", state=NavigationState(routes=(Route(name="Feed"),)))
        level = LevelMatch(route=route, pattern="home", configured=True, params=ParamAccumulator())
        assert render_level(level, route) == "home/"

    def test_focused_params_query(self) -> None:
        route = Route(name="Chat", params={"id": 1, "draft": "hi"})
        level = LevelMatch(
            route=route,
            pattern="chat/:id",
            configured=True,
            params=ParamAccumulator(params={"id": "1"}),
            focused_params={"draft": "hi"},
        )
        assert render_level(level, route) == "chat/1?draft=hi"

    def test_falls_back_to_raw_focused_params(self) -> None:
        route = Route(name="Chat", params={"id": 7})
        level = LevelMatch(route=route, pattern="", configured=False, params=ParamAccumulator())
        assert render_level(level, route) == "Chat?id=7"


class TestFinalizePath:
    def test_collapses_slashes(self) -> None:
        assert finalize_path("//chat//42/") == "/chat/42"

    def test_root_kept(self) -> None:
        assert finalize_path("/") == "/"
        assert finalize_path("//") == "/"

    def test_root_prefix(self) -> None:
        assert finalize_path("/home", "app/") == "/app/home"

    def test_root_prefix_on_root(self) -> None:
        assert finalize_path("/", "/app/") == "/app"

    def test_root_prefix_keeps_query(self) -> None:
        assert finalize_path("/home?a=1", "app") == "/app/home?a=1"


class TestLogging:
    def test_unconfigured_route_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        route = Route(name="Home")
        level = LevelMatch(route=route, pattern="", configured=False, params=ParamAccumulator())
        with caplog.at_level(logging.DEBUG, logger="navpath"):
            render_level(level, route)
        assert "'Home' has no config" in caplog.text
