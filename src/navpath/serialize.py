"""State-to-path serialization — the public entry point.

Validates and normalizes the linking config, walks the navigation state
level by level, and assembles the URL path::

    get_path_from_state(
        {"routes": [{"name": "Chat", "params": {"author": "Jane", "id": 42}}]},
        {
            "screens": {
                "Chat": {
                    "path": "chat/:author/:id",
                    "stringify": {"author": str.lower},
                },
            },
        },
    )
    # -> "/chat/jane/42"

The function is pure: the caller's state and config are never mutated,
and either a complete path is returned or an exception is raised.
"""

from collections.abc import Mapping
from typing import Any

from navpath.config import LinkingOptions
from navpath.errors import InvalidStateError
from navpath.routing.assemble import finalize_path, render_level
from navpath.routing.normalize import ConfigEntry, create_normalized_configs
from navpath.routing.validate import validate_path_config
from navpath.routing.walker import ParamAccumulator, walk_level
from navpath.state import NavigationState, get_active_route, get_active_route_of


def _coerce_options(options: LinkingOptions | Mapping[str, Any] | None) -> LinkingOptions | None:
    if options is None:
        return None
    validate_path_config(options)
    if isinstance(options, LinkingOptions):
        return options
    return LinkingOptions.from_mapping(options)


def get_path_from_state(
    state: NavigationState | Mapping[str, Any] | None,
    options: LinkingOptions | Mapping[str, Any] | None = None,
) -> str:
    """Serialize a navigation state to a path string, e.g. ``/foo/bar?count=42``.

    Args:
        state: Navigation state to serialize, as a ``NavigationState`` or
            a plain mapping of the same shape.
        options: Linking config (screens and an optional root ``path``).
            Without one, the path is the chain of active route names.

    Returns:
        A path starting with ``/``, with no trailing slash unless it is
        the root itself.

    Raises:
        InvalidStateError: If *state* is ``None`` or malformed.
        ConfigurationError: If *options* has an invalid shape.
        UnmatchedRouteError: If a configured route matches none of its
            alternative configs.
    """
    if state is None:
        msg = "Got 'None' for the navigation state. You must pass a valid state object."
        raise InvalidStateError(msg)

    if not isinstance(state, NavigationState):
        state = NavigationState.from_mapping(state)

    linking = _coerce_options(options)
    configs: dict[str, ConfigEntry] = (
        create_normalized_configs(linking.screens) if linking and linking.screens else {}
    )

    focused_route = get_active_route(state)
    params = ParamAccumulator()
    path = "/"
    current: NavigationState | None = state

    while current is not None:
        level = walk_level(get_active_route_of(current), configs, params, focused_route)
        params = level.params
        path += render_level(level, focused_route)
        current = level.route.state

    return finalize_path(path, linking.path if linking else None)
