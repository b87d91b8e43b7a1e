"""navpath exception hierarchy.

Shared across the normalizer, walker and assembler so every module
raises and callers catch the same types. Every failure is a caller-level
bug in the state or the configuration, never a transient condition.
"""

from dataclasses import dataclass


class NavPathError(Exception):
    """Base for all navpath-specific errors."""


class InvalidStateError(NavPathError, ValueError):
    """Raised when the navigation state is missing or malformed.

    Covers a ``None`` state, a state with no routes, an ``index`` that
    points outside ``routes``, and routes without a name.
    """


class ConfigurationError(NavPathError):
    """Raised when the linking configuration has an invalid shape.

    Always raised during validation or normalization, before any
    route in the state is matched.
    """


@dataclass(frozen=True, slots=True)
class UnmatchedRouteError(NavPathError):
    """A configured route name had no resolvable config item.

    Raised by the walker when every alternative registered for
    *route_name* was rejected.
    """

    route_name: str

    def __str__(self) -> str:
        return (
            f"There is no matching screen for '{self.route_name}'. Make sure that "
            "you have configured a screen for the route and that the route is "
            "spelled correctly."
        )
