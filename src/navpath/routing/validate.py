"""Linking configuration validation.

Runs before normalization so shape errors surface before any route in
the state is looked at. Accepts both plain mappings and the
``LinkingOptions`` / ``PathConfig`` dataclasses.
"""

from collections.abc import Mapping, Sequence
from typing import Any

from navpath.config import LinkingOptions, PathConfig
from navpath.errors import ConfigurationError

# key -> (accepted types, human-readable type name)
_ROOT_KEYS: dict[str, tuple[tuple[type, ...], str]] = {
    "path": ((str,), "string"),
    "initial_route_name": ((str,), "string"),
    "initialRouteName": ((str,), "string"),
    "screens": ((Mapping,), "mapping"),
}

_SCREEN_KEYS: dict[str, tuple[tuple[type, ...], str]] = {
    "path": ((str,), "string"),
    "exact": ((bool,), "boolean"),
    "stringify": ((Mapping,), "mapping"),
    "screens": ((Mapping,), "mapping"),
    "initial_route_name": ((str,), "string"),
    "initialRouteName": ((str,), "string"),
    "parse": ((Mapping,), "mapping"),
}

EXACT_WITHOUT_PATH = (
    "A 'path' needs to be specified when specifying 'exact: true'. If you don't "
    "want this screen in the URL, specify it as empty string, e.g. `path: ''`."
)


def _format_list(items: Mapping[str, str] | Sequence[str]) -> str:
    if isinstance(items, Mapping):
        return "\n".join(f"- {key} ({value})" for key, value in items.items())
    return "\n".join(f"- {item}" for item in items)


def _check_keys(
    config: Mapping[str, Any],
    allowed: dict[str, tuple[tuple[type, ...], str]],
    where: str,
) -> None:
    invalid = [key for key in config if key not in allowed]
    if invalid:
        msg = (
            f"Found invalid properties in the configuration{where}:\n"
            f"{_format_list([str(key) for key in invalid])}\n\n"
            "Did you forget to specify them under a 'screens' property?\n\n"
            "You can only specify the following properties:\n"
            f"{_format_list({key: name for key, (_, name) in allowed.items()})}"
        )
        raise ConfigurationError(msg)

    for key, value in config.items():
        if value is None:
            continue
        types, type_name = allowed[key]
        # bool is an int subclass; never let it pass as anything but a boolean
        if not isinstance(value, types) or (isinstance(value, bool) and bool not in types):
            msg = (
                f"Property '{key}'{where} must be a {type_name}, "
                f"got {type(value).__name__}."
            )
            raise ConfigurationError(msg)


def _check_stringify(stringify: Mapping[str, Any] | None, where: str) -> None:
    if stringify is None:
        return
    for key, fn in stringify.items():
        if not callable(fn):
            msg = f"Stringify function for param '{key}'{where} must be callable."
            raise ConfigurationError(msg)


def _validate_screen(name: str, config: Any) -> None:
    where = f" of screen '{name}'"

    if isinstance(config, str):
        return

    if isinstance(config, PathConfig):
        _check_keys(
            {
                "path": config.path,
                "exact": config.exact,
                "stringify": config.stringify,
                "screens": config.screens,
                "initial_route_name": config.initial_route_name,
                "parse": config.parse,
            },
            _SCREEN_KEYS,
            where,
        )
        exact, path, stringify, screens = config.exact, config.path, config.stringify, config.screens
    elif isinstance(config, Mapping):
        _check_keys(config, _SCREEN_KEYS, where)
        exact = config.get("exact", False)
        path = config.get("path")
        stringify = config.get("stringify")
        screens = config.get("screens")
    elif isinstance(config, Sequence):
        if not config:
            msg = f"Screen '{name}' has an empty list of alternative configurations."
            raise ConfigurationError(msg)
        for item in config:
            if isinstance(item, Sequence) and not isinstance(item, str):
                msg = f"Alternatives of screen '{name}' cannot be nested lists."
                raise ConfigurationError(msg)
            _validate_screen(name, item)
        return
    else:
        msg = (
            f"Configuration of screen '{name}' must be a string, a mapping or a list "
            f"of alternatives, got {type(config).__name__}."
        )
        raise ConfigurationError(msg)

    if exact and path is None:
        raise ConfigurationError(EXACT_WITHOUT_PATH)

    _check_stringify(stringify, where)
    if screens:
        _validate_screens(screens)


def _validate_screens(screens: Mapping[str, Any]) -> None:
    for name, config in screens.items():
        if not isinstance(name, str) or not name:
            msg = f"Screen names must be non-empty strings, got {name!r}."
            raise ConfigurationError(msg)
        _validate_screen(name, config)


def validate_path_config(options: LinkingOptions | Mapping[str, Any]) -> None:
    """Validate a linking configuration, raising on the first problem.

    Raises ``ConfigurationError`` for unknown properties, wrongly typed
    values, empty alternative lists and ``exact: true`` without a ``path``.
    """
    if isinstance(options, LinkingOptions):
        root: Mapping[str, Any] = {
            "path": options.path,
            "initial_route_name": options.initial_route_name,
            "screens": options.screens,
        }
    elif isinstance(options, Mapping):
        root = options
    else:
        msg = f"Linking options must be a mapping, got {type(options).__name__}."
        raise ConfigurationError(msg)

    _check_keys(root, _ROOT_KEYS, "")
    screens = root.get("screens")
    if screens:
        _validate_screens(screens)
