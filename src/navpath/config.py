"""Linking configuration.

LinkingOptions and PathConfig are frozen dataclasses — immutable after
creation, IDE-autocompletable. Plain mappings (the shape a config file or
a JSON payload decodes to) are accepted everywhere and converted with
``from_mapping``::

    options = LinkingOptions(
        path="app",
        screens={
            "Home": "home",
            "Chat": PathConfig(path="chat/:id", stringify={"id": str}),
            "Search": [PathConfig(path="search/:q"), PathConfig(path="find/:q")],
        },
    )
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any, TypeAlias

from navpath._internal.types import StringifyConfig

# A screen entry: bare pattern, object config, or ordered alternatives
ScreenConfig: TypeAlias = "str | PathConfig | Mapping[str, Any] | Sequence[PathConfig | Mapping[str, Any]]"


def _initial_route_name(data: Mapping[str, Any]) -> str | None:
    # camelCase spelling used by configs shared with JavaScript linking setups
    return data.get("initial_route_name", data.get("initialRouteName"))


@dataclass(frozen=True, slots=True)
class PathConfig:
    """Path configuration for one screen.

    ``exact=True`` makes ``path`` absolute: it is used verbatim instead of
    being joined onto the enclosing screens' patterns, and must be given
    (``path=""`` keeps the screen out of the URL).

    ``initial_route_name`` and ``parse`` belong to the URL parser sharing
    this config; serialization ignores them.
    """

    path: str | None = None
    exact: bool = False
    stringify: StringifyConfig | None = None
    screens: Mapping[str, ScreenConfig] | None = None
    initial_route_name: str | None = None
    parse: Mapping[str, Any] | None = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> PathConfig:
        """Build a PathConfig from a validated mapping."""
        return cls(
            path=data.get("path"),
            exact=bool(data.get("exact", False)),
            stringify=data.get("stringify"),
            screens=data.get("screens"),
            initial_route_name=_initial_route_name(data),
            parse=data.get("parse"),
        )


@dataclass(frozen=True, slots=True)
class LinkingOptions:
    """Top-level options for serializing state to a path.

    All fields have defaults. ``path`` is a root prefix joined in front of
    every generated path.
    """

    screens: Mapping[str, ScreenConfig] = field(default_factory=dict)
    path: str | None = None
    initial_route_name: str | None = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> LinkingOptions:
        """Build LinkingOptions from a validated mapping."""
        return cls(
            screens=data.get("screens") or {},
            path=data.get("path"),
            initial_route_name=_initial_route_name(data),
        )
