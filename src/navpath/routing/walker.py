"""State walking — one navigation level matched against the config tree.

``walk_level`` starts at the active route of a state level and descends
through nested states for as long as the config tree has screens for
them. It returns the deepest route reached, the pattern resolved for it
and the params accumulated so far. The caller loops over levels; nothing
here recurses.

Params are threaded through an immutable ``ParamAccumulator``: a deeper
route's param replaces a same-named one from any shallower route, for
the rest of the walk.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field

from navpath.errors import UnmatchedRouteError
from navpath.routing.match import find_matching_config_item
from navpath.routing.normalize import ConfigEntry
from navpath.routing.pattern import pattern_param_names
from navpath.routing.stringify import stringify_params
from navpath.state import Route, get_active_route_of

logger = logging.getLogger("navpath")


@dataclass(frozen=True, slots=True)
class ParamAccumulator:
    """Stringified params gathered along the walk. Last write wins."""

    params: Mapping[str, str] = field(default_factory=dict)

    def merge(self, params: Mapping[str, str]) -> ParamAccumulator:
        """Return a new accumulator with *params* layered on top."""
        return ParamAccumulator(params={**self.params, **params})

    def get(self, name: str) -> str | None:
        return self.params.get(name)


@dataclass(frozen=True, slots=True)
class LevelMatch:
    """Result of walking one navigation level.

    ``configured`` is False when the level's active route has no config
    at all; its name then stands in for a pattern. ``focused_params`` is
    set only when the focused route was visited, and excludes the params
    its pattern consumes.
    """

    route: Route
    pattern: str
    configured: bool
    params: ParamAccumulator
    focused_params: dict[str, str] | None = None


def walk_level(
    route: Route,
    configs: Mapping[str, ConfigEntry],
    params: ParamAccumulator,
    focused_route: Route,
) -> LevelMatch:
    """Match *route* and its configured descendants against *configs*.

    Raises ``UnmatchedRouteError`` when a route name is configured but
    none of its alternatives apply.
    """
    pattern: str | None = None
    focused_params: dict[str, str] | None = None
    current_configs = configs
    # Route names seen while descending, used if no pattern gets resolved
    seen: list[str] = []

    while route.name in current_configs:
        item = find_matching_config_item(route, current_configs)
        if item is None:
            logger.debug("No config alternative matched route %r", route.name)
            raise UnmatchedRouteError(route.name)

        pattern = item.pattern
        seen.append(route.name)

        if route.params is not None:
            current = stringify_params(route.params, item.stringify)
            if pattern:
                params = params.merge(current)
            if route is focused_route:
                # Params consumed by the pattern don't go to the query string
                consumed = set(pattern_param_names(pattern))
                focused_params = {k: v for k, v in current.items() if k not in consumed}

        if not item.screens or route.state is None:
            break

        next_route = get_active_route_of(route.state)
        if next_route.name not in item.screens:
            # Nothing configured below; no sense going deeper
            break

        route = next_route
        current_configs = item.screens

    if pattern is None:
        pattern = "/".join(seen)

    return LevelMatch(
        route=route,
        pattern=pattern,
        configured=route.name in current_configs,
        params=params,
        focused_params=focused_params,
    )
