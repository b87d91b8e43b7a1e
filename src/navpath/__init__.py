"""navpath — serialize navigation state trees into deep-link URL paths.

Maps a stack/tab hierarchy of named routes onto a canonical URL path,
driven by a declarative, nested, per-route path configuration.

Basic usage::

    from navpath import get_path_from_state

    state = {"routes": [{"name": "Chat", "params": {"author": "Jane", "id": 42}}]}
    options = {
        "screens": {
            "Chat": {
                "path": "chat/:author/:id",
                "stringify": {"author": str.lower},
            },
        },
    }

    get_path_from_state(state, options)  # "/chat/jane/42"
"""

__version__ = "0.1.0"
__all__ = [
    "ConfigurationError",
    "InvalidStateError",
    "LinkingOptions",
    "NavPathError",
    "NavigationState",
    "PathConfig",
    "Route",
    "UnmatchedRouteError",
    "get_active_route",
    "get_path_from_state",
]

# Public name -> defining module
_LAZY_IMPORTS: dict[str, str] = {
    "ConfigurationError": "navpath.errors",
    "InvalidStateError": "navpath.errors",
    "LinkingOptions": "navpath.config",
    "NavPathError": "navpath.errors",
    "NavigationState": "navpath.state",
    "PathConfig": "navpath.config",
    "Route": "navpath.state",
    "UnmatchedRouteError": "navpath.errors",
    "get_active_route": "navpath.state",
    "get_path_from_state": "navpath.serialize",
}


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import navpath`` fast while providing a clean top-level API.
    """
    module_name = _LAZY_IMPORTS.get(name)
    if module_name is None:
        msg = f"module {__name__!r} has no attribute {name!r}"
        raise AttributeError(msg)

    import importlib

    module = importlib.import_module(module_name)
    return getattr(module, name)
