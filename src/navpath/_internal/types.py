"""Shared type aliases used across navpath modules."""

from collections.abc import Callable, Mapping
from typing import Any, TypeAlias

# Per-param converter: raw param value in, URL text out
Stringifier: TypeAlias = Callable[[Any], str]

# Param name -> stringifier, as declared under a screen's ``stringify`` key
StringifyConfig: TypeAlias = Mapping[str, Stringifier]

# Raw route params as stored on the navigation state
Params: TypeAlias = Mapping[str, Any]
