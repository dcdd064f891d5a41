# argument_delimiter/delimiting/__init__.py
"""
delimiting.
==========

Does: Expose the role-checked configuration, the split functions, and presets.
Exports: DelimiterConfiguration, DelimiterSet, QuotePairMap, ArgumentDelimiter,
         split, split_at, split_at_to, load_preset, list_presets, errors
Used by: The package root, the demo CLI, and library callers.
"""

from __future__ import annotations

from .configuration import (
    DelimiterConfiguration,
    DelimiterSet,
    QuotePairMap,
)
from .errors import (
    ArgumentDelimiterError,
    InvalidInput,
    OutOfRange,
    Role,
    RoleConflict,
)
from .presets import (
    list_presets,
    load_preset,
)
from .tokenizer import (
    ArgumentDelimiter,
    split,
    split_at,
    split_at_to,
)

__all__ = [
    # configuration
    "DelimiterConfiguration",
    "DelimiterSet",
    "QuotePairMap",
    # scanning
    "ArgumentDelimiter",
    "split",
    "split_at",
    "split_at_to",
    # presets
    "load_preset",
    "list_presets",
    # errors
    "ArgumentDelimiterError",
    "InvalidInput",
    "OutOfRange",
    "Role",
    "RoleConflict",
]
