# src/argument_delimiter/delimiting/presets.py

"""
presets.py.

Does: Load named DelimiterConfigurations from <data>/presets/<name>.json.
Returns: A fresh, independently mutable configuration per call; list of names.
Used by: demo CLI (--preset) and callers wanting a ready-made setup.

File shape:
    {"delimiters": [" ", "\\t"], "quote_pairs": {"\\"": "\\""}}
A preset whose characters conflict (e.g. a delimiter that is also a quote)
fails to load with ConfigParseError.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from argument_delimiter.delimiting.configuration import DelimiterConfiguration
from argument_delimiter.utils.load_config import list_config_files, load_config

__all__ = ["PRESET_DIR", "load_preset", "list_presets"]

# ── Logging ──────────────────────────────────────────────────────────────────
log = logging.getLogger(__name__)

PRESET_DIR = "presets"


def _to_configuration(data: dict[str, Any]) -> DelimiterConfiguration:
    return DelimiterConfiguration.from_dict(data)


def load_preset(name: str, *, base_dir: Path | None = None) -> DelimiterConfiguration:
    """Does: Build the configuration stored as presets/<name>.json."""
    if not name or "/" in name or "\\" in name:
        raise ValueError(f"Invalid preset name: {name!r}")
    config = load_config(
        f"{PRESET_DIR}/{name}",
        base_dir=base_dir,
        validator=_to_configuration,
    )
    log.debug("Preset %r loaded: %r", name, config)
    return config


def list_presets(*, base_dir: Path | None = None) -> list[str]:
    """Does: Names accepted by load_preset, sorted."""
    return list_config_files(PRESET_DIR, base_dir=base_dir)
