"""Path pattern parsing and compilation.

Patterns are ``/``-separated templates made of literal segments,
``:name`` params (``:name?`` when optional) and ``*`` wildcards::

    "chat/:author/:id"  -> literal "chat", param "author", param "id"
    "profile/:id?"      -> literal "profile", optional param "id"
    "*"                 -> wildcard
"""

import re
from dataclasses import dataclass

# Captured value for a ``:name`` token: stuff between slashes, no query
PARAM_REGEX = r"([^/?]+)"
# Captured value for a ``*`` token
WILDCARD_REGEX = r"(.*)"

_TOKEN_SPLIT = re.compile(r"(:[^/]+|\*)")


@dataclass(frozen=True, slots=True)
class PatternToken:
    """A parsed segment of a path pattern.

    Literal:   ``chat``    (is_param=False)
    Param:     ``:id``     (is_param=True, param_name="id")
    Optional:  ``:id?``    (is_param=True, param_name="id", optional=True)
    Wildcard:  ``*``       (is_wildcard=True)
    """

    value: str
    is_param: bool = False
    param_name: str | None = None
    optional: bool = False
    is_wildcard: bool = False


def get_param_name(token: str) -> str:
    """Strip the leading ``:`` and the trailing ``?`` from a param token."""
    if token.startswith(":"):
        token = token[1:]
    if token.endswith("?"):
        token = token[:-1]
    return token


def parse_pattern(pattern: str) -> list[PatternToken]:
    """Parse a pattern string into tokens, skipping empty segments."""
    tokens: list[PatternToken] = []
    for part in pattern.split("/"):
        if not part:
            continue
        if part == "*":
            tokens.append(PatternToken(value=part, is_wildcard=True))
        elif part.startswith(":"):
            tokens.append(
                PatternToken(
                    value=part,
                    is_param=True,
                    param_name=get_param_name(part),
                    optional=part.endswith("?"),
                )
            )
        else:
            tokens.append(PatternToken(value=part))
    return tokens


def pattern_param_names(pattern: str) -> list[str]:
    """Names of every ``:name`` token in *pattern*, in order."""
    return [t.param_name for t in parse_pattern(pattern) if t.param_name is not None]


def pattern_to_regexp(pattern: str) -> re.Pattern[str]:
    """Compile *pattern* into a regex matching a whole slash-trimmed path.

    ``:name`` tokens (optional ones included) require a non-empty value;
    ``*`` matches anything, slashes included. Literal text is escaped.
    """
    parts: list[str] = []
    for piece in _TOKEN_SPLIT.split(pattern):
        if not piece:
            continue
        if piece == "*":
            parts.append(WILDCARD_REGEX)
        elif piece.startswith(":"):
            parts.append(PARAM_REGEX)
        else:
            parts.append(re.escape(piece))
    return re.compile(f"^{''.join(parts)}$")


def join_paths(*paths: str) -> str:
    """Join path fragments with single slashes, dropping empty segments.

    The result has no leading or trailing slash::

        join_paths("app/", "/home//feed") -> "app/home/feed"
    """
    return "/".join(segment for path in paths for segment in path.split("/") if segment)
