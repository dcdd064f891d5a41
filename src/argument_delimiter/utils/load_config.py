# src/argument_delimiter/utils/load_config.py

"""Load JSON object files (presets) from a <data/> directory.

Each file must hold a JSON object; an optional validator turns a fresh copy
of it into the caller's type. Parsed JSON is cached per (path, mtime,
encoding) so edits on disk are picked up without restarting. Used by
presets, the demo CLI and tests.
"""

from __future__ import annotations

import json
import logging
import os
import threading
from collections.abc import Callable
from pathlib import Path
from typing import Any

# ── Public surface ────────────────────────────────────────────────────────────
__all__ = [
    "load_config",
    "list_config_files",
    "clear_config_cache",
    "resolve_data_dir",
    "DataDirNotFound",
    "ConfigFileNotFound",
    "ConfigParseError",
    "ConfigTypeError",
]

ENV_VAR = "ARGDELIM_DATA_DIR"


# ── Exceptions ───────────────────────────────────────────────────────────────
class DataDirNotFound(FileNotFoundError):
    """Raise when no 'data' directory is found while walking upwards."""


class ConfigFileNotFound(FileNotFoundError):
    """Raise when the requested data file cannot be read or resolved."""


class ConfigParseError(ValueError):
    """Raise when JSON parsing or validation fails for a data file."""


class ConfigTypeError(TypeError):
    """Raise when the parsed JSON doesn't match the expected structure."""


# ── Logging & cache ──────────────────────────────────────────────────────────
log = logging.getLogger(__name__)
_CACHE_LOCK = threading.RLock()
# key: path, mtime, encoding
_CONFIG_CACHE: dict[tuple[Path, float, str], Any] = {}


def clear_config_cache() -> None:
    """Empty the in-memory cache (useful for pytest/hot-reload)."""
    with _CACHE_LOCK:
        _CONFIG_CACHE.clear()
        log.debug("Config cache cleared.")


def _candidate_data_dirs(start: Path | None = None) -> list[Path]:
    """Candidate 'data' directories, walking up from `start` (default: this package)."""
    start = (start or Path(__file__).parent).resolve()
    return [(p / "data").resolve() for p in [start, *start.parents]]


def _default_data_dir(start: Path | None = None) -> Path:
    for cand in _candidate_data_dirs(start):
        if cand.is_dir():
            return cand
    raise DataDirNotFound(
        "No 'data' directory found.\n"
        "Tried:\n  " + "\n  ".join(str(p) for p in _candidate_data_dirs(start))
    )


def resolve_data_dir(base_dir: Path | None = None) -> Path:
    """Resolve the data dir: explicit `base_dir` > ARGDELIM_DATA_DIR > discovery."""
    if base_dir is not None:
        return Path(base_dir).resolve()
    env = os.environ.get(ENV_VAR)
    if env:
        return Path(os.path.expanduser(env)).resolve()
    return _default_data_dir()


def _resolve_file(data_dir: Path, file: str | os.PathLike[str]) -> Path:
    file_str = os.fspath(file)
    file_name = file_str if file_str.endswith(".json") else f"{file_str}.json"
    path = (data_dir / file_name).resolve()
    try:
        path.relative_to(data_dir)
    except ValueError as e:
        raise ConfigFileNotFound(
            f"Refusing to access file outside data dir: {path} (base={data_dir})"
        ) from e
    if not path.is_file():
        raise ConfigFileNotFound(f"Config file not found: {path}")
    return path


def load_config(
    file: str | os.PathLike[str],
    *,
    base_dir: Path | None = None,
    encoding: str = "utf-8",
    validator: Callable[[dict[str, Any]], Any] | None = None,
) -> Any:
    """Load the JSON object in <data>/<file>.json and return validator(copy) or the copy."""
    data_dir = resolve_data_dir(base_dir)
    path = _resolve_file(data_dir, file)

    try:
        mtime = path.stat().st_mtime
    except OSError as e:
        raise ConfigFileNotFound(f"Cannot stat {path}: {e}") from e

    cache_key = (path, mtime, encoding)

    with _CACHE_LOCK:
        cached = cache_key in _CONFIG_CACHE
        data = _CONFIG_CACHE.get(cache_key)
    if cached:
        log.debug("Config cache HIT: %s", path.name)
    else:
        data = _read_json(path, encoding=encoding)
        with _CACHE_LOCK:
            _CONFIG_CACHE[cache_key] = data
        log.debug("Config cache MISS → STORED: %s", path.name)

    if not isinstance(data, dict):
        raise ConfigTypeError(f"{path.name}: expected a JSON object, got {type(data).__name__}")
    if validator is None:
        return dict(data)
    # validators always run on a fresh copy; results are never cached
    try:
        return validator(dict(data))
    except Exception as e:
        raise ConfigParseError(f"{path.name}: validator failed: {e}") from e


def _read_json(path: Path, *, encoding: str) -> Any:
    try:
        with path.open("r", encoding=encoding, errors="strict", newline="") as f:
            return json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigParseError(f"Invalid JSON in {path}: {e}") from e
    except OSError as e:
        raise ConfigFileNotFound(f"Cannot read {path}: {e}") from e


def list_config_files(subdir: str = "", *, base_dir: Path | None = None) -> list[str]:
    """Sorted stems of the *.json files under <data>/<subdir> ([] if the folder is absent)."""
    data_dir = resolve_data_dir(base_dir)
    folder = (data_dir / subdir).resolve()
    if not folder.is_dir():
        return []
    return sorted(p.stem for p in folder.glob("*.json") if p.is_file())
