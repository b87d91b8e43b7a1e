"""Config entry resolution for a single route.

A ``SingleEntry`` resolves directly. ``Alternatives`` are tried in order:
a route carrying its own literal ``path`` is tested against each
alternative's pattern; a route without one is resolved by looking one
level deeper, at whether its nested active route matches one of the
alternative's nested screens.
"""

import logging
from collections.abc import Mapping

from navpath.routing.normalize import Alternatives, ConfigEntry, ConfigItem, SingleEntry
from navpath.routing.pattern import pattern_to_regexp
from navpath.state import Route, get_active_route_of

logger = logging.getLogger("navpath")


def _trim_slashes(path: str) -> str:
    if path.endswith("/"):
        path = path[:-1]
    if path.startswith("/"):
        path = path[1:]
    return path


def matches_alternative(route: Route, item: ConfigItem) -> bool:
    """True if *item* is an acceptable config for *route*."""
    if not route.path:
        # No literal path to test; the match can only come from the nested route
        if route.state is None:
            return False
        next_route = get_active_route_of(route.state)
        return find_matching_config_item(next_route, item.screens) is not None

    normalized = _trim_slashes(route.path)
    if not item.pattern or not normalized:
        return False
    return pattern_to_regexp(item.pattern).match(normalized) is not None


def resolve_entry(entry: ConfigEntry, route: Route) -> ConfigItem | None:
    """Pick the config item of *entry* that applies to *route*, if any."""
    match entry:
        case SingleEntry(item=item):
            return item
        case Alternatives(items=items):
            for item in items:
                if matches_alternative(route, item):
                    return item
                logger.debug("Alternative %r rejected for route %r", item.pattern, route.name)
            return None


def find_matching_config_item(
    route: Route,
    configs: Mapping[str, ConfigEntry] | None,
) -> ConfigItem | None:
    """Resolve the config item registered for *route* in *configs*.

    Returns ``None`` when the name is not configured or no alternative
    matches.
    """
    if not configs:
        return None
    entry = configs.get(route.name)
    if entry is None:
        return None
    return resolve_entry(entry, route)
