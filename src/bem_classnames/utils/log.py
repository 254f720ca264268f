"""
log.py.

Does: Topic-filtered debug tracer controlled by BEM_DEBUG_TOPICS (comma-sep or 'all').
Returns: Prints timestamped lines with topic + level. Used by builder/naming tracing.
"""

import os
import sys
from datetime import datetime
from typing import TextIO

__all__ = ["debug", "reload_topics", "is_enabled"]

DEBUG_TOPICS_ENV = "BEM_DEBUG_TOPICS"


def _load_topics() -> set[str]:
    raw = os.getenv(DEBUG_TOPICS_ENV, "")
    return {t.strip().lower() for t in raw.split(",") if t.strip()}


_DEBUG_TOPICS = _load_topics()


def reload_topics() -> None:
    """Does: Re-read topics from the BEM_DEBUG_TOPICS environment variable."""
    global _DEBUG_TOPICS
    _DEBUG_TOPICS = _load_topics()


def is_enabled(topic: str) -> bool:
    """Does: Tell whether `topic` would currently be printed."""
    topic_key = topic.lower().strip()
    return bool(_DEBUG_TOPICS) and ("all" in _DEBUG_TOPICS or topic_key in _DEBUG_TOPICS)


def debug(
    msg: str,
    topic: str = "builder",
    *,
    level: str = "DEBUG",
    stream: TextIO | None = None,
) -> None:
    """Does: Print a timestamped line with topic and level when the topic is enabled.

    Nothing is printed while BEM_DEBUG_TOPICS is unset.
    """
    if not is_enabled(topic):
        return
    if stream is None:
        stream = sys.stderr
    ts = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
    print(f"[{ts}] [{topic.lower().strip()}][{level.upper()}] {msg}", file=stream)
