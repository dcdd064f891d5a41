# src/argument_delimiter/delimiting/tokenizer.py

"""
tokenizer.py.

Does: Split a string (or a half-open slice of it) into arguments in one
      left-to-right pass, using a DelimiterConfiguration's delimiters as
      boundaries and its quote pairs as opaque literal spans.
Returns: A new list[str] per call; the configuration is only read.
Used by: ArgumentDelimiter facade, demo CLI, any caller holding a configuration.

Emission rules:
- a delimiter ends the pending argument, even if it is empty ("a,,b" → a, "", b);
- a quote opener ends the pending argument only if it is non-empty, then
  everything up to the matching closer is one argument, quotes stripped;
- a delimiter right after a closing quote just separates (no extra "");
- the tail after the last boundary is emitted only if the scan saw at least
  one boundary: a slice without any delimiter or quote yields [];
- an unterminated quote is not an error; its content is dropped.
"""

from __future__ import annotations

import logging
from typing import Any

from argument_delimiter.delimiting.configuration import DelimiterConfiguration
from argument_delimiter.delimiting.errors import InvalidInput, OutOfRange

__all__ = [
    "split",
    "split_at",
    "split_at_to",
    "ArgumentDelimiter",
]

__docformat__ = "google"

# ── Logging ──────────────────────────────────────────────────────────────────
log = logging.getLogger(__name__)


# ─────────────────────────────────────────────────────────────────────────────
# Argument checks
# ─────────────────────────────────────────────────────────────────────────────


def _check_text(text: Any) -> str:
    if text is None:
        raise InvalidInput("input must not be None")
    if not isinstance(text, str):
        raise InvalidInput(f"input must be a str, got {type(text).__name__}")
    return text


def _check_config(config: Any) -> DelimiterConfiguration:
    if not isinstance(config, DelimiterConfiguration):
        raise InvalidInput(
            f"config must be a DelimiterConfiguration, got {type(config).__name__}"
        )
    return config


def _check_index(name: str, value: Any) -> int:
    # bool is an int subclass but never a meaningful position
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidInput(f"{name} must be an int, got {type(value).__name__}")
    return value


def _check_range(text: str, start: int, end: int) -> None:
    n = len(text)
    _check_index("start", start)
    _check_index("end", end)
    if start < 0 or start > n:
        raise OutOfRange("start", start, f"must be within [0, {n}]")
    if end < start or end > n:
        raise OutOfRange("end", end, f"must be within [{start}, {n}]")


# ─────────────────────────────────────────────────────────────────────────────
# Scan
# ─────────────────────────────────────────────────────────────────────────────


def _scan(text: str, start: int, end: int, config: DelimiterConfiguration) -> list[str]:
    is_delimiter = config.contains_delimiter
    close_quote_for = config.lookup_close_quote

    args: list[str] = []
    pending = start  # first index of the argument being collected
    closing: str | None = None  # set while inside a quoted span
    closed_at: int | None = None  # index of the most recent closing quote
    saw_boundary = False

    for i in range(start, end):
        ch = text[i]

        if closing is not None:
            if ch == closing:
                args.append(text[pending:i])
                pending = i + 1
                closed_at = i
                closing = None
            continue

        if is_delimiter(ch):
            saw_boundary = True
            if closed_at != i - 1:
                args.append(text[pending:i])
            pending = i + 1
            continue

        close = close_quote_for(ch)
        if close is not None:
            saw_boundary = True
            if i > pending:
                args.append(text[pending:i])
            pending = i + 1
            closing = close

    if closing is not None:
        log.debug("Unterminated quote (expecting %r); dropped %r", closing, text[pending:end])
    elif saw_boundary and closed_at != end - 1:
        args.append(text[pending:end])

    return args


# ─────────────────────────────────────────────────────────────────────────────
# Public entry points
# ─────────────────────────────────────────────────────────────────────────────


def split(
    text: str,
    config: DelimiterConfiguration,
    start: int = 0,
    end: int | None = None,
) -> list[str]:
    """
    Does: Split text[start:end] into arguments using `config`.
    Returns: list[str], empty when the slice holds no boundary at all.
    Raises: InvalidInput for a None/non-str input (checked first) or a
            non-int position,
            OutOfRange unless 0 <= start <= end <= len(text).
    """
    text = _check_text(text)
    config = _check_config(config)
    if end is None:
        end = len(text)
    _check_range(text, start, end)

    args = _scan(text, start, end, config)
    log.debug("split [%d:%d] of %d chars → %d args", start, end, len(text), len(args))
    return args


def split_at(text: str, config: DelimiterConfiguration, index: int, length: int) -> list[str]:
    """Split the `length` characters of `text` starting at `index`."""
    text = _check_text(text)
    _check_index("index", index)
    _check_index("length", length)
    if index < 0 or index > len(text):
        raise OutOfRange("index", index, f"must be within [0, {len(text)}]")
    if length < 0 or index + length > len(text):
        raise OutOfRange("length", length, f"must be within [0, {len(text) - index}]")
    return split(text, config, index, index + length)


def split_at_to(
    text: str, config: DelimiterConfiguration, index: int, end_index: int
) -> list[str]:
    """Split text[index:end_index]."""
    return split(text, config, index, end_index)


# ─────────────────────────────────────────────────────────────────────────────
# Facade
# ─────────────────────────────────────────────────────────────────────────────


class ArgumentDelimiter:
    """A configuration bundled with the split functions.

    Example:
        >>> splitter = ArgumentDelimiter()
        >>> splitter.delimiters.add(" ")
        True
        >>> splitter.quote_pairs.add('"', '"')
        >>> splitter.split('run "two words" x')
        ['run', 'two words', 'x']
    """

    def __init__(self, config: DelimiterConfiguration | None = None):
        self.config = _check_config(config) if config is not None else DelimiterConfiguration()

    @property
    def delimiters(self):
        return self.config.delimiters

    @property
    def quote_pairs(self):
        return self.config.quote_pairs

    def split(self, text: str) -> list[str]:
        return split(text, self.config)

    def split_at(self, text: str, index: int, length: int) -> list[str]:
        return split_at(text, self.config, index, length)

    def split_at_to(self, text: str, index: int, end_index: int) -> list[str]:
        return split_at_to(text, self.config, index, end_index)

    def __repr__(self) -> str:
        return f"ArgumentDelimiter({self.config!r})"
