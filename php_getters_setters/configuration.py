"""Read-only view over the user's phpGettersSetters settings."""

import json
import logging
import pathlib
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

from .exceptions import ConfigurationError

logger = logging.getLogger(__name__)

SECTION = "phpGettersSetters"

DEFAULTS: Mapping[str, Any] = MappingProxyType({
    "spacesAfterReturn": 2,
    "spacesAfterParam": 2,
    "spacesAfterParamVar": 2,
    "redirect": True,
})


def _flatten(settings: Mapping[str, Any]) -> dict[str, Any]:
    """
    Accept flat keys, a `phpGettersSetters` section, or dotted
    `phpGettersSetters.key` entries as written in an editor settings file.
    """
    flat = {}
    prefix = SECTION + "."
    for key, value in settings.items():
        if key == SECTION and isinstance(value, Mapping):
            flat.update(value)
        elif key.startswith(prefix):
            flat[key[len(prefix):]] = value
        else:
            flat[key] = value
    return flat


class Configuration:
    """Settings with documented defaults. Never mutated after construction."""

    def __init__(self, settings: Mapping[str, Any] | None = None):
        self._settings = MappingProxyType(_flatten(settings or {}))

    @classmethod
    def from_file(cls, path: str | pathlib.Path) -> "Configuration":
        """Load settings from a JSON file."""
        try:
            with open(path, 'r', encoding='utf-8') as f:
                settings = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise ConfigurationError(f"Could not load settings from {path}: {e}") from e

        if not isinstance(settings, dict):
            raise ConfigurationError(f"Settings file {path} must contain a JSON object")

        return cls(settings)

    def get(self, key: str, default: Any = None) -> Any:
        """Return a setting, falling back to the given default and then the documented one."""
        if key in self._settings and self._settings[key] is not None:
            return self._settings[key]
        return DEFAULTS.get(key) if default is None else default

    def get_int(self, key: str, default: int | None = None) -> int:
        fallback = DEFAULTS.get(key, 0) if default is None else default
        value = self.get(key, fallback)
        # bool is an int subclass but never a valid count
        if isinstance(value, bool) or not isinstance(value, int):
            logger.warning("Setting %s=%r is not an integer, using %d", key, value, fallback)
            return fallback
        return value

    def get_bool(self, key: str, default: bool | None = None) -> bool:
        fallback = DEFAULTS.get(key, False) if default is None else default
        value = self.get(key, fallback)
        if not isinstance(value, bool):
            logger.warning("Setting %s=%r is not a boolean, using %s", key, value, fallback)
            return fallback
        return value

    def spaces(self, key: str) -> str:
        """A run of N spaces for a spacing setting; negative counts give none."""
        return " " * max(0, self.get_int(key))

    @property
    def redirect(self) -> bool:
        return self.get_bool("redirect")

    def __repr__(self):
        return f"Configuration({dict(self._settings)!r})"
