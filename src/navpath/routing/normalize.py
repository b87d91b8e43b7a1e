"""Config normalization — user screens config to an immutable pattern tree.

Every screen becomes a ``ConfigItem`` whose pattern already includes its
ancestors' patterns (unless declared ``exact``) and is slash-normalized.
A screen registered with a list of configs becomes ``Alternatives``,
anything else a ``SingleEntry``.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any, TypeAlias

from navpath._internal.types import StringifyConfig
from navpath.config import PathConfig
from navpath.errors import ConfigurationError
from navpath.routing.pattern import join_paths
from navpath.routing.validate import EXACT_WITHOUT_PATH


@dataclass(frozen=True, slots=True)
class ConfigItem:
    """A normalized screen config.

    ``pattern`` never starts or ends with ``/`` and has no empty segments.
    ``screens`` holds the nested screens, already normalized against
    this item's pattern.
    """

    pattern: str
    stringify: StringifyConfig | None = None
    screens: Mapping[str, ConfigEntry] | None = None


@dataclass(frozen=True, slots=True)
class SingleEntry:
    """The only config registered for a screen name."""

    item: ConfigItem


@dataclass(frozen=True, slots=True)
class Alternatives:
    """Ordered candidate configs for one screen name. First match wins."""

    items: tuple[ConfigItem, ...]


ConfigEntry: TypeAlias = SingleEntry | Alternatives


def create_config_item(config: Any, parent_pattern: str | None = None) -> ConfigItem:
    """Normalize a single screen config against its parent pattern.

    A bare string is the pattern itself. An object's ``path`` is joined
    onto *parent_pattern*, unless ``exact`` is set, in which case it is
    used as-is.
    """
    if isinstance(config, str):
        pattern = join_paths(parent_pattern, config) if parent_pattern else config
        return ConfigItem(pattern=join_paths(pattern))

    if isinstance(config, Mapping):
        config = PathConfig.from_mapping(config)
    elif config is None:
        config = PathConfig()

    if config.exact and config.path is None:
        raise ConfigurationError(EXACT_WITHOUT_PATH)

    if config.exact:
        pattern = config.path or ""
    else:
        pattern = join_paths(parent_pattern or "", config.path or "")

    screens = create_normalized_configs(config.screens, pattern) if config.screens else None

    return ConfigItem(
        pattern=join_paths(pattern),
        stringify=config.stringify,
        screens=screens,
    )


def create_normalized_configs(
    screens: Mapping[str, Any],
    parent_pattern: str | None = None,
) -> dict[str, ConfigEntry]:
    """Normalize a screens mapping, preserving key and alternative order."""
    configs: dict[str, ConfigEntry] = {}
    for name, config in screens.items():
        if isinstance(config, Sequence) and not isinstance(config, str):
            configs[name] = Alternatives(
                items=tuple(create_config_item(c, parent_pattern) for c in config)
            )
        else:
            configs[name] = SingleEntry(item=create_config_item(config, parent_pattern))
    return configs
