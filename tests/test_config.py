"""Tests for navpath.config — LinkingOptions and PathConfig."""

import pytest

from navpath.config import LinkingOptions, PathConfig


class TestPathConfig:
    def test_defaults(self) -> None:
        config = PathConfig()
        assert config.path is None
        assert config.exact is False
        assert config.stringify is None
        assert config.screens is None

    def test_from_mapping(self) -> None:
        config = PathConfig.from_mapping(
            {"path": "chat/:id", "exact": True, "screens": {"Room": "room"}, "parse": {"id": int}}
        )
        assert config.path == "chat/:id"
        assert config.exact is True
        assert config.screens == {"Room": "room"}
        assert config.parse == {"id": int}

    def test_camel_case_initial_route_name(self) -> None:
        assert PathConfig.from_mapping({"initialRouteName": "Feed"}).initial_route_name == "Feed"

    def test_frozen(self) -> None:
        config = PathConfig(path="a")
        with pytest.raises(AttributeError):
            config.path = "b"  # type: ignore[misc]


class TestLinkingOptions:
    def test_defaults(self) -> None:
        options = LinkingOptions()
        assert options.screens == {}
        assert options.path is None
        assert options.initial_route_name is None

    def test_from_mapping(self) -> None:
        options = LinkingOptions.from_mapping(
            {"path": "app", "initial_route_name": "Home", "screens": {"Home": "home"}}
        )
        assert options.path == "app"
        assert options.initial_route_name == "Home"
        assert options.screens == {"Home": "home"}

    def test_from_mapping_without_screens(self) -> None:
        assert LinkingOptions.from_mapping({"path": "app"}).screens == {}

    def test_camel_case_initial_route_name(self) -> None:
        options = LinkingOptions.from_mapping({"initialRouteName": "Home", "screens": {"Home": "home"}})
        assert options.initial_route_name == "Home"

    def test_snake_case_wins_over_camel_case(self) -> None:
        options = LinkingOptions.from_mapping({"initial_route_name": "A", "initialRouteName": "B"})
        assert options.initial_route_name == "A"

    def test_frozen(self) -> None:
        options = LinkingOptions()
        with pytest.raises(AttributeError):
            options.path = "app"  # type: ignore[misc]
