"""Query string encoding for leftover focused-route params.

Keys keep their insertion order; nothing is sorted. Keys and values are
percent-encoded per RFC 3986 (only unreserved characters stay as-is).

Non-scalar values follow these conventions::

    {"a": None}               -> "a"
    {"tag": ["x", "y"]}       -> "tag=x&tag=y"
    {"filter": {"kind": "a"}} -> "filter%5Bkind%5D=a"
"""

from collections.abc import Iterator, Mapping
from typing import Any
from urllib.parse import quote

from navpath.routing.stringify import default_stringify


def _encode(value: str) -> str:
    return quote(value, safe="")


def _pairs(key: str, value: Any) -> Iterator[str]:
    if value is None:
        yield _encode(key)
    elif isinstance(value, Mapping):
        for sub_key, sub_value in value.items():
            yield from _pairs(f"{key}[{sub_key}]", sub_value)
    elif isinstance(value, (list, tuple)):
        for item in value:
            if item is None:
                yield _encode(key)
            else:
                yield f"{_encode(key)}={_encode(default_stringify(item))}"
    else:
        yield f"{_encode(key)}={_encode(default_stringify(value))}"


def encode_query(params: Mapping[str, Any]) -> str:
    """Encode *params* as a query string (without the leading ``?``)."""
    return "&".join(pair for key, value in params.items() for pair in _pairs(str(key), value))
