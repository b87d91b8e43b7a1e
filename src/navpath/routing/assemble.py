"""Path assembly — resolved patterns and params to the final URL path."""

import logging
import re
from collections.abc import Mapping
from typing import Any
from urllib.parse import quote

from navpath.query import encode_query
from navpath.routing.pattern import join_paths, parse_pattern
from navpath.routing.stringify import UNDEFINED
from navpath.routing.walker import LevelMatch
from navpath.state import Route

logger = logging.getLogger("navpath")

# encodeURIComponent leaves these unescaped on top of the RFC 3986 unreserved set
_SEGMENT_SAFE = "!'()*"

_SLASHES = re.compile(r"/+")


def encode_segment(value: str) -> str:
    """Percent-encode one path segment (``/`` included)."""
    return quote(value, safe=_SEGMENT_SAFE)


def render_pattern(pattern: str, route_name: str, params: Mapping[str, str]) -> str:
    """Substitute *params* into *pattern*.

    ``*`` renders as *route_name*: a wildcard has no fixed text, and the
    name is the closest stand-in. An optional ``:name?`` with no value
    renders empty; a required one renders ``"undefined"``.
    """
    segments: list[str] = []
    for token in parse_pattern(pattern):
        if token.is_wildcard:
            segments.append(encode_segment(route_name))
        elif token.is_param:
            value = params.get(token.param_name or "")
            if value is None:
                if token.optional:
                    segments.append("")
                    continue
                value = UNDEFINED
            segments.append(encode_segment(value))
        else:
            segments.append(encode_segment(token.value))
    return "/".join(segments)


def build_query(focused_params: Mapping[str, Any] | None) -> str:
    """Query string for the focused route's leftover params, ``""`` if none."""
    if not focused_params:
        return ""
    return encode_query(
        {k: v for k, v in focused_params.items() if v is not None and v != UNDEFINED}
    )


def render_level(level: LevelMatch, focused_route: Route) -> str:
    """Render one walked level, with a trailing ``/`` or query string."""
    if level.configured:
        segment = render_pattern(level.pattern, level.route.name, level.params.params)
    else:
        logger.debug("Route %r has no config; using its name as the segment", level.route.name)
        segment = encode_segment(level.route.name)

    if level.route.state is not None:
        return segment + "/"

    focused_params = (
        level.focused_params if level.focused_params is not None else focused_route.params
    )
    query = build_query(focused_params)
    if query:
        return f"{segment}?{query}"
    return segment


def finalize_path(path: str, root: str | None = None) -> str:
    """Collapse repeated slashes, drop a trailing one and apply the root prefix.

    Examples::

        finalize_path("//chat//42/")     -> "/chat/42"
        finalize_path("/", None)         -> "/"
        finalize_path("/home", "app/")   -> "/app/home"
    """
    path = _SLASHES.sub("/", path)
    if len(path) > 1 and path.endswith("/"):
        path = path[:-1]
    if root:
        path = "/" + join_paths(root, path)
    return path
