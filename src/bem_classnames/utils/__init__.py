# bem_classnames/utils/__init__.py
"""

Does: Provide settings loading, namespace resolution and debug tracing for the library.
Returns: Public API via load_config/clear_config_cache, get_namespace/temp_namespace
         and debug/reload_topics.
Used by: Builder, naming helpers, demo CLI and tests.
"""

from __future__ import annotations

from .load_config import (
    ConfigFileNotFound,
    ConfigParseError,
    ConfigTypeError,
    DataDirNotFound,
    clear_config_cache,
    load_config,
    temp_data_dir,
)
from .log import (
    debug,
    reload_topics,
)
from .settings import (
    Settings,
    get_namespace,
    load_settings,
    temp_namespace,
)

__all__ = [
    # Config loading
    "load_config",
    "clear_config_cache",
    "temp_data_dir",
    "DataDirNotFound",
    "ConfigFileNotFound",
    "ConfigParseError",
    "ConfigTypeError",
    # Settings
    "Settings",
    "load_settings",
    "get_namespace",
    "temp_namespace",
    # Logging helpers
    "debug",
    "reload_topics",
]
