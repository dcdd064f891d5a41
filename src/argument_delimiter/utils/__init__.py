# argument_delimiter/utils/__init__.py
"""

Does: Provide data-file loading and lightweight debug logging utilities.
Returns: Public API via load_config/clear_config_cache and debug/reload_topics.
Used by: Presets, the demo CLI, and tests.
"""

from __future__ import annotations

from .load_config import (
    ConfigFileNotFound,
    ConfigParseError,
    ConfigTypeError,
    DataDirNotFound,
    clear_config_cache,
    list_config_files,
    load_config,
    resolve_data_dir,
)
from .log import (
    debug,
    reload_topics,
)

__all__ = [
    # Data files
    "load_config",
    "list_config_files",
    "clear_config_cache",
    "resolve_data_dir",
    "DataDirNotFound",
    "ConfigFileNotFound",
    "ConfigParseError",
    "ConfigTypeError",
    # Logging helpers
    "debug",
    "reload_topics",
]
