# src/bem_classnames/utils/settings.py
"""
settings.

Does: Resolve the process-wide class-name namespace at read time:
      BEM_NAMESPACE env > "namespace" key of <data>/bem_classnames.json > "".
Returns: get_namespace(), load_settings(), temp_namespace().
Used by: naming.generate_class_names and BlockModule.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from types import TracebackType
from typing import Any

from .load_config import ConfigFileNotFound, ConfigTypeError, DataDirNotFound, load_config

__all__ = [
    "NAMESPACE_ENV",
    "SETTINGS_FILE",
    "Settings",
    "load_settings",
    "get_namespace",
    "temp_namespace",
]

__docformat__ = "google"

log = logging.getLogger(__name__)

NAMESPACE_ENV = "BEM_NAMESPACE"
SETTINGS_FILE = "bem_classnames"


@dataclass(frozen=True)
class Settings:
    namespace: str = ""


def _namespace_from(data: dict[str, Any]) -> str:
    namespace = data.get("namespace", "")
    if not isinstance(namespace, str):
        raise ConfigTypeError(
            f"{SETTINGS_FILE}.json: 'namespace' must be a string, got {type(namespace).__name__}"
        )
    return namespace


def load_settings() -> Settings:
    """
    Does: Read bem_classnames.json from the data directory (cached by mtime).
    Returns: Settings; defaults when no data dir or no settings file exists.
    Raises: ConfigParseError / ConfigTypeError for a malformed file.
    """
    try:
        data: dict[str, Any] = load_config(SETTINGS_FILE, mode="validated_dict")
    except (DataDirNotFound, ConfigFileNotFound) as e:
        log.debug("No settings file, using defaults (%s)", e.__class__.__name__)
        return Settings()
    return Settings(namespace=_namespace_from(data))


def get_namespace() -> str:
    """Does: Return the namespace currently in effect (read on every call)."""
    env_value = os.environ.get(NAMESPACE_ENV)
    if env_value is not None:
        log.debug("Namespace from %s: %r", NAMESPACE_ENV, env_value)
        return env_value
    return load_settings().namespace


class temp_namespace:
    """Temporarily set the namespace via env for the block.

    The override is process-wide: concurrent readers observe it too.
    """

    def __init__(self, namespace: str):
        self._new = namespace
        self._old: str | None = None

    def __enter__(self) -> temp_namespace:
        self._old = os.environ.get(NAMESPACE_ENV)
        os.environ[NAMESPACE_ENV] = self._new
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        if self._old is None:
            os.environ.pop(NAMESPACE_ENV, None)
        else:
            os.environ[NAMESPACE_ENV] = self._old
