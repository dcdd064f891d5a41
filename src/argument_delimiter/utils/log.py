"""
log.py.

Does: Topic-filtered debug printer controlled by ARGDELIM_DEBUG_TOPICS (comma-sep or 'all').
Returns: Timestamped stderr lines "[ts] [topic][LEVEL] msg" for enabled topics only.
Used by: demo CLI (--debug) and ad-hoc tracing of scans and configuration edits.
"""

from __future__ import annotations

import os
import sys
from datetime import datetime
from typing import TextIO

__all__ = ["debug", "enabled", "reload_topics"]

ENV_VAR = "ARGDELIM_DEBUG_TOPICS"


def _load_topics(raw: str | None = None) -> set[str]:
    if raw is None:
        raw = os.getenv(ENV_VAR, "")
    return {t.strip().lower() for t in raw.split(",") if t.strip()}


_DEBUG_TOPICS = _load_topics()


def reload_topics(topics: str | None = None) -> None:
    """Does: Reload topics from `topics` (comma-sep or 'all') or, when None,
    from the ARGDELIM_DEBUG_TOPICS environment variable.
    """
    global _DEBUG_TOPICS
    _DEBUG_TOPICS = _load_topics(topics)


def enabled(topic: str) -> bool:
    """Does: True when `topic` (or 'all') is listed in ARGDELIM_DEBUG_TOPICS."""
    topic_key = topic.lower().strip()
    return "all" in _DEBUG_TOPICS or topic_key in _DEBUG_TOPICS


def debug(
    msg: str,
    topic: str = "split",
    *,
    level: str = "DEBUG",
    stream: TextIO | None = None,
) -> None:
    """Does: Print a timestamped debug line with topic and level
    if the topic is enabled via ARGDELIM_DEBUG_TOPICS.
    """
    if not enabled(topic):
        return
    if stream is None:
        stream = sys.stderr
    ts = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
    print(f"[{ts}] [{topic.lower().strip()}][{level.upper()}] {msg}", file=stream)
