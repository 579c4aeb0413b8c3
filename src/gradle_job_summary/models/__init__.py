"""Data models for the Gradle job summary."""

from __future__ import annotations

from .build_result import BuildResult
from .cache_entry import CacheEntryListener, CacheListener

__all__ = [
    "BuildResult",
    "CacheEntryListener",
    "CacheListener",
]
