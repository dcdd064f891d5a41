# tests/test_demo.py
from __future__ import annotations

import io
import json
import os
from importlib import import_module

import pytest

from argument_delimiter import demo
from argument_delimiter.utils import clear_config_cache, reload_topics

LOG = import_module("argument_delimiter.utils.log")


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    monkeypatch.delenv("ARGDELIM_DEBUG_TOPICS", raising=False)
    monkeypatch.delenv("ARGDELIM_DATA_DIR", raising=False)
    clear_config_cache()
    reload_topics()
    yield
    reload_topics()


def _lines(out: str) -> list:
    return [json.loads(line) for line in out.splitlines() if line.strip()]


def test_demo_default_preset_splits_text(capsys):
    demo.main(["copy", "'a b'", "c"])
    assert _lines(capsys.readouterr().out) == [["copy", "a b", "c"]]


def test_demo_custom_delimiters_and_quotes(capsys):
    demo.main(["--delimiters", ",", "--quote", "<", ">", "a,<b,c>,d"])
    assert _lines(capsys.readouterr().out) == [["a", "b,c", "d"]]


def test_demo_reads_stdin_lines(capsys, monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("a,b\nx,,y\n"))
    demo.main(["--preset", "csv"])
    assert _lines(capsys.readouterr().out) == [["a", "b"], ["x", "", "y"]]


def test_demo_range(capsys):
    demo.main(["--preset", "csv", "--start", "2", "a,b,c"])
    assert _lines(capsys.readouterr().out) == [["b", "c"]]


def test_demo_list_presets(capsys):
    demo.main(["--list-presets"])
    assert "shell_like" in capsys.readouterr().out.split()


def test_demo_debug_lines_go_to_stderr(capsys):
    demo.main(["--debug", "--preset", "csv", "a,b"])
    captured = capsys.readouterr()
    assert _lines(captured.out) == [["a", "b"]]
    assert "[demo][DEBUG]" in captured.err


def test_demo_debug_leaves_environment_and_topics_alone(capsys):
    demo.main(["--debug", "--preset", "csv", "a,b"])
    assert "ARGDELIM_DEBUG_TOPICS" not in os.environ
    assert LOG.enabled("demo") is False
    capsys.readouterr()

    demo.main(["--preset", "csv", "a,b"])
    assert capsys.readouterr().err == ""


@pytest.mark.parametrize(
    "argv",
    [
        ["--preset", "csv", "--delimiters", '"', "a"],   # role conflict
        ["--preset", "does_not_exist", "a"],
        ["--preset", "csv", "--end", "99", "a,b"],        # out of range
    ],
)
def test_demo_errors_exit_1(capsys, argv):
    with pytest.raises(SystemExit) as exc:
        demo.main(argv)
    assert exc.value.code == 1
    assert "Error" in capsys.readouterr().err
