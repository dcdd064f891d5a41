"""
argument_delimiter
==================

Does: Root package for the configurable argument splitter.
Returns: Re-exports the public surface of `argument_delimiter.delimiting`.
Used by: Library callers (`from argument_delimiter import split, DelimiterConfiguration`).
"""

from argument_delimiter.delimiting import (
    ArgumentDelimiter,
    ArgumentDelimiterError,
    DelimiterConfiguration,
    DelimiterSet,
    InvalidInput,
    OutOfRange,
    QuotePairMap,
    Role,
    RoleConflict,
    list_presets,
    load_preset,
    split,
    split_at,
    split_at_to,
)

__all__: list[str] = [
    "ArgumentDelimiter",
    "ArgumentDelimiterError",
    "DelimiterConfiguration",
    "DelimiterSet",
    "InvalidInput",
    "OutOfRange",
    "QuotePairMap",
    "Role",
    "RoleConflict",
    "list_presets",
    "load_preset",
    "split",
    "split_at",
    "split_at_to",
]
__version__ = "0.1.0"
__docformat__ = "google"
