# src/argument_delimiter/delimiting/configuration.py

"""
configuration.py.

Does: Hold the delimiter set and the open→close quote mapping behind one
      role table that rejects any edit giving a character two roles.
Returns: DelimiterConfiguration with `delimiters` (MutableSet view) and
         `quote_pairs` (MutableMapping view); both views validate through
         the same _RoleTable.
Used by: tokenizer.split* (read-only), presets, demo CLI.

Role rules (checked on every edit, never at scan time):
- a delimiter is never an open or close quote;
- an open quote is never the close quote of another pair;
- a close quote closes exactly one pair and is never another pair's opener.
A pair may use the same character to open and close (e.g. ' → ').
Bulk edits (constructor, |=, ^=, update) apply all of their entries or none.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Mapping, MutableMapping, MutableSet
from typing import Any

from argument_delimiter.delimiting.errors import InvalidInput, Role, RoleConflict

__all__ = [
    "DelimiterConfiguration",
    "DelimiterSet",
    "QuotePairMap",
]

__docformat__ = "google"

# ── Logging ──────────────────────────────────────────────────────────────────
log = logging.getLogger(__name__)


def _check_char(ch: Any, name: str = "char") -> str:
    if not isinstance(ch, str):
        raise InvalidInput(f"{name} must be a str of length 1, got {type(ch).__name__}")
    if len(ch) != 1:
        raise InvalidInput(f"{name} must be a single character, got {ch!r}")
    return ch


# ─────────────────────────────────────────────────────────────────────────────
# Shared validation authority
# ─────────────────────────────────────────────────────────────────────────────


class _RoleTable:
    """Both collections plus a close→open index, validated in one place."""

    __slots__ = ("delimiters", "quotes", "closers")

    def __init__(self) -> None:
        self.delimiters: set[str] = set()
        self.quotes: dict[str, str] = {}
        self.closers: dict[str, str] = {}

    def role_of(self, ch: str) -> Role | None:
        if ch in self.delimiters:
            return Role.DELIMITER
        if ch in self.quotes:
            return Role.OPEN_QUOTE
        if ch in self.closers:
            return Role.CLOSE_QUOTE
        return None

    def check_delimiter(self, ch: str) -> None:
        role = self.role_of(ch)
        if role is Role.OPEN_QUOTE or role is Role.CLOSE_QUOTE:
            log.debug("Rejected delimiter %r: already %s", ch, role.described)
            raise RoleConflict(ch, role)

    def check_quote_pair(self, open_: str, close: str, *, replacing: bool) -> None:
        """Raise RoleConflict unless open_→close can be stored.

        With `replacing`, the current entry for `open_` (if any) is ignored.
        """
        if open_ in self.delimiters:
            raise RoleConflict(open_, Role.DELIMITER)
        if close in self.delimiters:
            raise RoleConflict(close, Role.DELIMITER)
        if not replacing and open_ in self.quotes:
            raise RoleConflict(open_, Role.OPEN_QUOTE)
        if self.closers.get(open_, open_) != open_:
            raise RoleConflict(open_, Role.CLOSE_QUOTE)
        if self.closers.get(close, open_) != open_:
            raise RoleConflict(close, Role.CLOSE_QUOTE)
        if close != open_ and close in self.quotes:
            raise RoleConflict(close, Role.OPEN_QUOTE)

    def store_quote_pair(self, open_: str, close: str) -> None:
        old = self.quotes.get(open_)
        if old is not None:
            del self.closers[old]
        self.quotes[open_] = close
        self.closers[close] = open_

    def drop_quote_pair(self, open_: str) -> str | None:
        close = self.quotes.pop(open_, None)
        if close is not None:
            del self.closers[close]
        return close

    # ── Batches ──────────────────────────────────────────────────────────────
    def copy(self) -> _RoleTable:
        dup = _RoleTable()
        dup.delimiters = set(self.delimiters)
        dup.quotes = dict(self.quotes)
        dup.closers = dict(self.closers)
        return dup

    def commit(self, staged: _RoleTable) -> None:
        """Take over the contents of a fully validated scratch table."""
        self.delimiters = staged.delimiters
        self.quotes = staged.quotes
        self.closers = staged.closers


# ─────────────────────────────────────────────────────────────────────────────
# Collection views
# ─────────────────────────────────────────────────────────────────────────────


class DelimiterSet(MutableSet):
    """Set of boundary characters; `add` refuses characters reserved by quote pairs."""

    __slots__ = ("_table",)

    def __init__(self, table: _RoleTable):
        self._table = table

    @classmethod
    def _from_iterable(cls, it: Iterable[str]) -> set[str]:
        # results of &, |, - etc. are detached plain sets
        return set(it)

    def __contains__(self, ch: object) -> bool:
        return ch in self._table.delimiters

    def __iter__(self) -> Iterator[str]:
        return iter(self._table.delimiters)

    def __len__(self) -> int:
        return len(self._table.delimiters)

    def add(self, ch: str) -> bool:  # type: ignore[override]
        """Add `ch`; return True if it was not a delimiter before."""
        _check_char(ch)
        self._table.check_delimiter(ch)
        if ch in self._table.delimiters:
            return False
        self._table.delimiters.add(ch)
        log.debug("Delimiter added: %r", ch)
        return True

    def discard(self, ch: str) -> None:
        _check_char(ch)
        if ch in self._table.delimiters:
            self._table.delimiters.discard(ch)
            log.debug("Delimiter removed: %r", ch)

    # In-place operators that can add are all-or-nothing: the whole batch is
    # checked on a scratch table and only then committed.
    def __ior__(self, it: Iterable[str]) -> DelimiterSet:  # type: ignore[override]
        if it is self:
            return self
        staged = self._table.copy()
        for ch in it:
            _check_char(ch)
            staged.check_delimiter(ch)
            staged.delimiters.add(ch)
        added = staged.delimiters - self._table.delimiters
        self._table.commit(staged)
        if added:
            log.debug("Delimiters added: %r", sorted(added))
        return self

    def __ixor__(self, it: Iterable[str]) -> DelimiterSet:  # type: ignore[override]
        if it is self:
            self.clear()
            return self
        chars = {_check_char(ch) for ch in it}
        staged = self._table.copy()
        for ch in chars:
            if ch in staged.delimiters:
                staged.delimiters.discard(ch)
            else:
                staged.check_delimiter(ch)
                staged.delimiters.add(ch)
        self._table.commit(staged)
        return self

    def __repr__(self) -> str:
        return f"DelimiterSet({sorted(self._table.delimiters)!r})"


class QuotePairMap(MutableMapping):
    """Mapping open quote → close quote.

    `add` fails on an existing opener; item assignment replaces the pair
    for that opener. Both are validated against the delimiter set.
    """

    __slots__ = ("_table",)

    def __init__(self, table: _RoleTable):
        self._table = table

    def __getitem__(self, open_: str) -> str:
        return self._table.quotes[open_]

    def __setitem__(self, open_: str, close: str) -> None:
        self._put(open_, close, replacing=True)

    def __delitem__(self, open_: str) -> None:
        if self._table.drop_quote_pair(open_) is None:
            raise KeyError(open_)
        log.debug("Quote pair removed: %r", open_)

    def __contains__(self, open_: object) -> bool:
        return open_ in self._table.quotes

    def __iter__(self) -> Iterator[str]:
        return iter(self._table.quotes)

    def __len__(self) -> int:
        return len(self._table.quotes)

    def add(self, open_: str, close: str) -> None:
        """Add open_→close; RoleConflict if open_ already opens a pair."""
        self._put(open_, close, replacing=False)

    def close_quotes(self) -> frozenset[str]:
        return frozenset(self._table.closers)

    def opener_for(self, close: str) -> str | None:
        """Opening character whose pair is closed by `close`, if any."""
        return self._table.closers.get(close)

    def update(self, other: Any = (), /, **kwds: str) -> None:  # type: ignore[override]
        """Store every pair with replace semantics, or none of them on a conflict."""
        if isinstance(other, Mapping):
            pairs = list(other.items())
        elif hasattr(other, "keys"):
            pairs = [(k, other[k]) for k in other.keys()]
        else:
            pairs = list(other)
        self.put_all([*pairs, *kwds.items()], replacing=True)

    def put_all(self, pairs: Iterable[tuple[str, str]], *, replacing: bool) -> None:
        """Validate `pairs` in order on a scratch table, then commit them together."""
        staged = self._table.copy()
        stored = []
        for open_, close in pairs:
            _check_char(open_, "open")
            _check_char(close, "close")
            try:
                staged.check_quote_pair(open_, close, replacing=replacing)
            except RoleConflict as e:
                log.debug("Rejected quote pair batch at %r→%r: %s", open_, close, e)
                raise
            staged.store_quote_pair(open_, close)
            stored.append((open_, close))
        self._table.commit(staged)
        if stored:
            log.debug("Quote pairs stored: %r", stored)

    def _put(self, open_: str, close: str, *, replacing: bool) -> None:
        _check_char(open_, "open")
        _check_char(close, "close")
        try:
            self._table.check_quote_pair(open_, close, replacing=replacing)
        except RoleConflict as e:
            log.debug("Rejected quote pair %r→%r: %s", open_, close, e)
            raise
        self._table.store_quote_pair(open_, close)
        log.debug("Quote pair stored: %r→%r", open_, close)

    def __repr__(self) -> str:
        return f"QuotePairMap({dict(sorted(self._table.quotes.items()))!r})"


# ─────────────────────────────────────────────────────────────────────────────
# Owning configuration
# ─────────────────────────────────────────────────────────────────────────────


class DelimiterConfiguration:
    """Delimiters and quote pairs for the tokenizer, with role checks on every edit.

    Args:
        delimiters: initial boundary characters (a str is read char by char).
        quote_pairs: initial pairs, as a mapping or as (open, close) tuples.

    Initial values go through the same checks as later edits, so a
    conflicting combination raises RoleConflict from the constructor.
    """

    __hash__ = None  # type: ignore[assignment]

    def __init__(
        self,
        delimiters: Iterable[str] = (),
        quote_pairs: Mapping[str, str] | Iterable[tuple[str, str]] = (),
    ):
        self._table = _RoleTable()
        self._delimiters = DelimiterSet(self._table)
        self._quote_pairs = QuotePairMap(self._table)

        self._delimiters |= delimiters
        pairs = quote_pairs.items() if isinstance(quote_pairs, Mapping) else quote_pairs
        self._quote_pairs.put_all(pairs, replacing=False)

    # ── Views ────────────────────────────────────────────────────────────────
    @property
    def delimiters(self) -> DelimiterSet:
        return self._delimiters

    @property
    def quote_pairs(self) -> QuotePairMap:
        return self._quote_pairs

    # ── Edits ────────────────────────────────────────────────────────────────
    def add_delimiter(self, ch: str) -> bool:
        return self._delimiters.add(ch)

    def remove_delimiter(self, ch: str) -> bool:
        _check_char(ch)
        present = ch in self._delimiters
        self._delimiters.discard(ch)
        return present

    def add_quote_pair(self, open_: str, close: str) -> None:
        self._quote_pairs.add(open_, close)

    def replace_quote_pair(self, open_: str, close: str) -> str | None:
        """Store open_→close, overwriting any pair for open_; return the old closer."""
        old = self._table.quotes.get(open_)
        self._quote_pairs[open_] = close
        return old

    def remove_quote_pair(self, open_: str) -> str | None:
        _check_char(open_, "open")
        close = self._table.drop_quote_pair(open_)
        if close is not None:
            log.debug("Quote pair removed: %r→%r", open_, close)
        return close

    def clear(self) -> None:
        self._table.delimiters.clear()
        self._table.quotes.clear()
        self._table.closers.clear()

    # ── Queries ──────────────────────────────────────────────────────────────
    def contains_delimiter(self, ch: str) -> bool:
        return ch in self._table.delimiters

    def lookup_close_quote(self, open_: str) -> str | None:
        return self._table.quotes.get(open_)

    def role_of(self, ch: str) -> Role | None:
        """The role `ch` currently holds, or None for ordinary content."""
        return self._table.role_of(ch)

    # ── Conversions ──────────────────────────────────────────────────────────
    def copy(self) -> DelimiterConfiguration:
        return DelimiterConfiguration(self._table.delimiters, self._table.quotes)

    def to_dict(self) -> dict[str, Any]:
        return {
            "delimiters": sorted(self._table.delimiters),
            "quote_pairs": dict(sorted(self._table.quotes.items())),
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> DelimiterConfiguration:
        """Build from {"delimiters": [...] | "...", "quote_pairs": {...} | [[o, c], ...]}."""
        if not isinstance(data, Mapping):
            raise InvalidInput(f"expected a mapping, got {type(data).__name__}")
        unknown = set(data) - {"delimiters", "quote_pairs"}
        if unknown:
            raise InvalidInput(f"unknown keys: {', '.join(sorted(unknown))}")

        delimiters = data.get("delimiters", ())
        if not isinstance(delimiters, (str, list, tuple)):
            raise InvalidInput(
                f"'delimiters' must be a string or a list, got {type(delimiters).__name__}"
            )
        pairs = data.get("quote_pairs", {})
        if isinstance(pairs, Mapping):
            pairs = list(pairs.items())
        elif isinstance(pairs, (list, tuple)):
            if not all(isinstance(p, (list, tuple)) and len(p) == 2 for p in pairs):
                raise InvalidInput("'quote_pairs' entries must be [open, close] pairs")
            pairs = [tuple(p) for p in pairs]
        else:
            raise InvalidInput(
                f"'quote_pairs' must be a mapping or a list, got {type(pairs).__name__}"
            )
        return cls(delimiters, pairs)

    # ── Dunder ───────────────────────────────────────────────────────────────
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DelimiterConfiguration):
            return NotImplemented
        return (
            self._table.delimiters == other._table.delimiters
            and self._table.quotes == other._table.quotes
        )

    def __repr__(self) -> str:
        return (
            f"DelimiterConfiguration(delimiters={sorted(self._table.delimiters)!r}, "
            f"quote_pairs={dict(sorted(self._table.quotes.items()))!r})"
        )
