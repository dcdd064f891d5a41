# tests/test_utils.py
"""Tests for utils (load_config, log) with cache/env handling."""

from __future__ import annotations

import json
import sys
from importlib import import_module

import pytest

# the package re-exports a function named load_config, so import the modules by path
LC = import_module("argument_delimiter.utils.load_config")
LOG = import_module("argument_delimiter.utils.log")

DataDirNotFound = LC.DataDirNotFound
ConfigFileNotFound = LC.ConfigFileNotFound
ConfigParseError = LC.ConfigParseError
ConfigTypeError = LC.ConfigTypeError
load_config = LC.load_config
clear_config_cache = LC.clear_config_cache


# ---------- Fixtures ----------
@pytest.fixture
def tmp_data_dir(tmp_path, monkeypatch):
    """Provide an isolated data/ dir and point the loader at it via ARGDELIM_DATA_DIR."""
    data = tmp_path / "data"
    data.mkdir()
    monkeypatch.setenv("ARGDELIM_DATA_DIR", str(data))
    clear_config_cache()
    return data


@pytest.fixture(autouse=True)
def _reset_env_and_cache(monkeypatch):
    """Reset debug topics, data-dir env and config cache between tests."""
    monkeypatch.delenv("ARGDELIM_DEBUG_TOPICS", raising=False)
    monkeypatch.delenv("ARGDELIM_DATA_DIR", raising=False)
    clear_config_cache()
    LOG.reload_topics()
    yield
    LOG.reload_topics()


# ---------- load_config tests ----------
def test_load_config_returns_copy_and_caches(tmp_data_dir):
    p = tmp_data_dir / "settings.json"
    p.write_text(json.dumps({"a": 1}), encoding="utf-8")

    out1 = load_config("settings")
    assert out1 == {"a": 1}
    out1["a"] = 99  # callers get a copy, never the cached object
    assert load_config("settings") == {"a": 1}

    clear_config_cache()
    p.write_text(json.dumps({"b": 2}), encoding="utf-8")
    assert load_config("settings.json") == {"b": 2}


def test_load_config_cache_hit_skips_disk(tmp_data_dir, monkeypatch):
    (tmp_data_dir / "cached.json").write_text(json.dumps({"a": 1}), encoding="utf-8")
    assert load_config("cached") == {"a": 1}

    def _boom(*a, **k):
        raise AssertionError("disk read on cache hit")

    monkeypatch.setattr(LC, "_read_json", _boom)
    assert load_config("cached") == {"a": 1}


def test_load_config_validator_and_errors(tmp_data_dir):
    conf = tmp_data_dir / "settings.json"
    conf.write_text(json.dumps({"alpha": 1}), encoding="utf-8")

    def validator(d: dict) -> dict:
        d["beta"] = "ok"
        return d

    out = load_config("settings", validator=validator)
    assert out == {"alpha": 1, "beta": "ok"}
    # validator output never leaks into the cached data
    assert load_config("settings") == {"alpha": 1}

    def failing(d: dict) -> dict:
        raise ValueError("nope")

    with pytest.raises(ConfigParseError):
        load_config("settings", validator=failing)

    (tmp_data_dir / "lst.json").write_text(json.dumps([1, 2]), encoding="utf-8")
    with pytest.raises(ConfigTypeError):
        load_config("lst")

    with pytest.raises(ConfigFileNotFound):
        load_config("does_not_exist")


def test_load_config_invalid_json(tmp_data_dir):
    (tmp_data_dir / "broken.json").write_text("{not json", encoding="utf-8")
    with pytest.raises(ConfigParseError):
        load_config("broken")


def test_load_config_refuses_escape_from_data_dir(tmp_data_dir):
    outside = tmp_data_dir.parent / "secret.json"
    outside.write_text(json.dumps({"x": 1}), encoding="utf-8")
    with pytest.raises(ConfigFileNotFound):
        load_config("../secret")


def test_resolve_data_dir_precedence(tmp_path, monkeypatch):
    explicit = tmp_path / "explicit"
    explicit.mkdir()
    env_dir = tmp_path / "env"
    env_dir.mkdir()

    monkeypatch.setenv("ARGDELIM_DATA_DIR", str(env_dir))
    assert LC.resolve_data_dir(explicit) == explicit.resolve()
    assert LC.resolve_data_dir() == env_dir.resolve()

    monkeypatch.delenv("ARGDELIM_DATA_DIR")
    assert LC.resolve_data_dir() == LC._default_data_dir()


def test_generic_data_dir_env_is_ignored(tmp_path, monkeypatch):
    monkeypatch.setenv("DATA_DIR", str(tmp_path))
    assert LC.resolve_data_dir() != tmp_path.resolve()
    assert (LC.resolve_data_dir() / "presets").is_dir()


def test_default_data_dir_missing_raises(tmp_path, monkeypatch):
    monkeypatch.setattr(LC, "_candidate_data_dirs", lambda start=None: [tmp_path / "data"])
    with pytest.raises(DataDirNotFound):
        LC._default_data_dir(tmp_path)


def test_default_data_dir_is_packaged():
    assert (LC.resolve_data_dir() / "presets").is_dir()


def test_list_config_files(tmp_data_dir):
    sub = tmp_data_dir / "presets"
    sub.mkdir()
    for name in ("b", "a"):
        (sub / f"{name}.json").write_text("{}", encoding="utf-8")
    (sub / "notes.txt").write_text("", encoding="utf-8")

    assert LC.list_config_files("presets") == ["a", "b"]
    assert LC.list_config_files("missing") == []


# ---------- log.debug tests ----------
def test_log_debug_respects_topics_env(monkeypatch, capsys):
    monkeypatch.setenv("ARGDELIM_DEBUG_TOPICS", "split")
    LOG.reload_topics()

    LOG.debug("hello on split", topic="split")
    LOG.debug("should be silent", topic="other")

    captured = capsys.readouterr()
    assert "hello on split" in captured.err
    assert "[split][DEBUG]" in captured.err
    assert "should be silent" not in captured.err


def test_log_debug_all_topics(monkeypatch, capsys):
    monkeypatch.setenv("ARGDELIM_DEBUG_TOPICS", "all")
    LOG.reload_topics()

    LOG.debug("m1", topic="foo")
    LOG.debug("m2", topic="bar", level="warning")

    captured = capsys.readouterr()
    assert "m1" in captured.err and "[bar][WARNING] m2" in captured.err


def test_log_debug_silent_by_default(capsys):
    LOG.debug("quiet")
    assert capsys.readouterr().err == ""
    assert LOG.enabled("split") is False


def test_log_debug_custom_stream(monkeypatch):
    monkeypatch.setenv("ARGDELIM_DEBUG_TOPICS", "demo")
    LOG.reload_topics()

    class _Buf:
        def __init__(self):
            self.parts = []

        def write(self, s):
            self.parts.append(s)

    buf = _Buf()
    LOG.debug("to buffer", topic="demo", stream=buf)
    assert "to buffer" in "".join(buf.parts)
    assert sys.stderr is not buf


def test_reload_topics_accepts_explicit_topics(monkeypatch):
    monkeypatch.setenv("ARGDELIM_DEBUG_TOPICS", "split")
    LOG.reload_topics("Demo, preset")
    assert LOG.enabled("demo") and LOG.enabled("preset")
    assert not LOG.enabled("split")

    LOG.reload_topics()  # back to the environment
    assert LOG.enabled("split") and not LOG.enabled("demo")
