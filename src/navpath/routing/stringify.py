"""Param stringification.

Params are turned into text once, when their route is visited. A
per-screen ``stringify`` function wins; otherwise ``default_stringify``.
"""

from typing import Any

from navpath._internal.types import Params, StringifyConfig

# Text a missing value stringifies to. Dropped from query strings;
# rendered as-is into required path params.
UNDEFINED = "undefined"


def default_stringify(value: Any) -> str:
    """Default textual form of a param value.

    ``None`` becomes the ``"undefined"`` sentinel and booleans are
    lowercased, so both match what the URL parser reads back.
    """
    if value is None:
        return UNDEFINED
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def stringify_params(
    params: Params,
    stringify: StringifyConfig | None = None,
) -> dict[str, str]:
    """Stringify every param, preserving insertion order.

    Custom stringifier results are passed through ``str``.
    """
    result: dict[str, str] = {}
    for key, value in params.items():
        fn = stringify.get(key) if stringify else None
        result[key] = str(fn(value)) if fn is not None else default_stringify(value)
    return result
