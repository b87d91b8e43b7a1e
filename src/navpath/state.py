"""Navigation state model — NavigationState and Route frozen dataclasses.

A navigation state is a tree: each route may hold a nested state for the
next navigator down. States produced by a navigator are acyclic.

Plain mappings (e.g. decoded JSON) convert with
``NavigationState.from_mapping``::

    state = NavigationState.from_mapping({
        "index": 0,
        "routes": [{"name": "Home", "state": {"routes": [{"name": "Feed"}]}}],
    })
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from navpath._internal.types import Params
from navpath.errors import InvalidStateError


@dataclass(frozen=True, slots=True)
class Route:
    """A named entry in a navigation state.

    ``path`` is the literal path a route was opened with (e.g. from a
    deep link); it only takes part in choosing between alternative configs.
    """

    name: str
    key: str | None = None
    params: Params | None = None
    state: NavigationState | None = None
    path: str | None = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> Route:
        """Build a route (and its nested state) from a plain mapping."""
        nested = _check_route_mapping(data).get("state")
        if nested is None or isinstance(nested, NavigationState):
            return _build_route(data, nested)
        return _build_route(data, NavigationState.from_mapping(nested))


@dataclass(frozen=True, slots=True)
class NavigationState:
    """One level of the navigation tree.

    ``index`` selects the active route. When it is ``None`` the last
    route is active.
    """

    routes: tuple[Route, ...]
    index: int | None = None
    names: tuple[str, ...] = ()
    key: str | None = None
    type: str | None = None
    stale: bool = False

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> NavigationState:
        """Build a state tree from plain mappings, converting every nested level.

        Works from an explicit worklist, so nesting depth is not bounded
        by the interpreter's recursion limit.
        """
        # Pre-order: every nested state lands after the state holding it
        order: list[Mapping[str, Any]] = []
        pending: list[Any] = [data]
        while pending:
            node = pending.pop()
            for route in _check_state_mapping(node):
                if isinstance(route, Route):
                    continue
                nested = _check_route_mapping(route).get("state")
                if nested is not None and not isinstance(nested, NavigationState):
                    pending.append(nested)
            order.append(node)

        # Innermost first, so each route finds its nested state already built
        built: dict[int, NavigationState] = {}
        for node in reversed(order):
            routes: list[Route] = []
            for route in node["routes"]:
                if isinstance(route, Route):
                    routes.append(route)
                    continue
                nested = route.get("state")
                if nested is not None and not isinstance(nested, NavigationState):
                    nested = built[id(nested)]
                routes.append(_build_route(route, nested))
            built[id(node)] = cls(
                routes=tuple(routes),
                index=node.get("index"),
                names=tuple(node.get("names") or ()),
                key=node.get("key"),
                type=node.get("type"),
                stale=bool(node.get("stale", False)),
            )
        return built[id(data)]


def get_active_route_of(state: NavigationState) -> Route:
    """Return the active route of a single state level.

    Uses ``state.index`` when set, otherwise the last route.

    Raises ``InvalidStateError`` on an empty ``routes`` or an out-of-range
    index.
    """
    if not state.routes:
        msg = "Navigation state has no routes."
        raise InvalidStateError(msg)

    if state.index is None:
        return state.routes[-1]

    if not 0 <= state.index < len(state.routes):
        msg = f"Navigation state index {state.index} is out of range for {len(state.routes)} routes."
        raise InvalidStateError(msg)

    return state.routes[state.index]


def get_active_route(state: NavigationState) -> Route:
    """Return the deepest focused route of a state tree.

    Follows the active route of every level down to the first route
    without a nested state.
    """
    route = get_active_route_of(state)
    while route.state is not None:
        route = get_active_route_of(route.state)
    return route



def _check_state_mapping(data: Any) -> Sequence[Any]:
    """Validate one state level and return its routes."""
    if not isinstance(data, Mapping):
        msg = f"Navigation state must be a mapping, got {type(data).__name__}"
        raise InvalidStateError(msg)

    routes = data.get("routes")
    if not isinstance(routes, Sequence) or isinstance(routes, str):
        msg = "Navigation state must have a 'routes' list."
        raise InvalidStateError(msg)

    index = data.get("index")
    if index is not None and (not isinstance(index, int) or isinstance(index, bool)):
        msg = f"Navigation state 'index' must be an integer, got {index!r}"
        raise InvalidStateError(msg)

    return routes


def _check_route_mapping(data: Any) -> Mapping[str, Any]:
    if not isinstance(data, Mapping):
        msg = f"Route must be a mapping, got {type(data).__name__}"
        raise InvalidStateError(msg)

    name = data.get("name")
    if not isinstance(name, str) or not name:
        msg = f"Route name must be a non-empty string, got {name!r}"
        raise InvalidStateError(msg)

    params = data.get("params")
    if params is not None and not isinstance(params, Mapping):
        msg = f"Params of route {name!r} must be a mapping, got {type(params).__name__}"
        raise InvalidStateError(msg)

    return data


def _build_route(data: Mapping[str, Any], state: NavigationState | None) -> Route:
    params = data.get("params")
    return Route(
        name=data["name"],
        key=data.get("key"),
        params=dict(params) if params is not None else None,
        state=state,
        path=data.get("path"),
    )
