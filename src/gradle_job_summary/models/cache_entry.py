"""Cache activity models consumed by the caching report."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from collections.abc import Iterable
from typing import Any


@dataclass
class CacheEntryListener:
    """Collect the restore/save activity of a single cache entry."""

    entry_name: str
    requested_key: str | None = None
    requested_restore_keys: list[str] | None = None
    restored_key: str | None = None
    restored_size: int | None = None
    not_restored: str | None = None
    saved_key: str | None = None
    saved_size: int | None = None
    not_saved: str | None = None

    def mark_requested(self, key: str, restore_keys: Iterable[str] = ()) -> CacheEntryListener:
        self.requested_key = key
        self.requested_restore_keys = list(restore_keys)
        return self

    def mark_restored(self, key: str, size: int | None) -> CacheEntryListener:
        self.restored_key = key
        self.restored_size = size
        return self

    def mark_not_restored(self, message: str) -> CacheEntryListener:
        self.not_restored = message
        return self

    def mark_saved(self, key: str, size: int | None) -> CacheEntryListener:
        self.saved_key = key
        self.saved_size = size
        return self

    def mark_already_exists(self, key: str) -> CacheEntryListener:
        self.saved_key = key
        self.saved_size = 0
        return self

    def mark_not_saved(self, message: str) -> CacheEntryListener:
        self.not_saved = message
        return self

    def was_requested_but_not_restored(self) -> bool:
        return self.requested_key is not None and self.restored_key is None

    def to_dict(self) -> dict[str, object]:
        data: dict[str, object] = {"entryName": self.entry_name}
        optional = {
            "requestedKey": self.requested_key,
            "requestedRestoreKeys": self.requested_restore_keys,
            "restoredKey": self.restored_key,
            "restoredSize": self.restored_size,
            "notRestored": self.not_restored,
            "savedKey": self.saved_key,
            "savedSize": self.saved_size,
            "notSaved": self.not_saved,
        }
        data.update({key: value for key, value in optional.items() if value is not None})
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> CacheEntryListener:
        restore_keys = data.get("requestedRestoreKeys")
        return cls(
            entry_name=str(data["entryName"]),
            requested_key=data.get("requestedKey"),
            requested_restore_keys=list(restore_keys) if restore_keys is not None else None,
            restored_key=data.get("restoredKey"),
            restored_size=data.get("restoredSize"),
            not_restored=data.get("notRestored"),
            saved_key=data.get("savedKey"),
            saved_size=data.get("savedSize"),
            not_saved=data.get("notSaved"),
        )


@dataclass
class CacheListener:
    """Aggregate of cache activity for one job, shared between action phases.

    The listener is serialised with :meth:`stringify` at the end of the setup
    phase and restored with :meth:`rehydrate` before the report is rendered.
    """

    cache_entries: list[CacheEntryListener] = field(default_factory=list)
    cache_read_only: bool = False
    cache_write_only: bool = False
    cache_disabled: bool = False
    cache_disabled_reason: str = "disabled"
    cache_available: bool = True

    @property
    def fully_restored(self) -> bool:
        return not any(entry.was_requested_but_not_restored() for entry in self.cache_entries)

    @property
    def cache_status(self) -> str:
        if not self.cache_available:
            return "not available"
        if self.cache_disabled:
            return self.cache_disabled_reason
        if self.cache_write_only:
            return "write-only"
        if self.cache_read_only:
            return "read-only"
        return "enabled"

    def entry(self, name: str) -> CacheEntryListener:
        for entry in self.cache_entries:
            if entry.entry_name == name:
                return entry
        new_entry = CacheEntryListener(name)
        self.cache_entries.append(new_entry)
        return new_entry

    def to_dict(self) -> dict[str, object]:
        return {
            "cacheEntries": [entry.to_dict() for entry in self.cache_entries],
            "cacheReadOnly": self.cache_read_only,
            "cacheWriteOnly": self.cache_write_only,
            "cacheDisabled": self.cache_disabled,
            "cacheDisabledReason": self.cache_disabled_reason,
            "cacheAvailable": self.cache_available,
        }

    def stringify(self) -> str:
        return json.dumps(self.to_dict())

    @classmethod
    def rehydrate(cls, text: str) -> CacheListener:
        """Restore a listener from :meth:`stringify` output; blank input gives a fresh one."""
        if not text.strip():
            return cls()

        data = json.loads(text)
        return cls(
            cache_entries=[
                CacheEntryListener.from_dict(entry) for entry in data.get("cacheEntries", [])
            ],
            cache_read_only=bool(data.get("cacheReadOnly", False)),
            cache_write_only=bool(data.get("cacheWriteOnly", False)),
            cache_disabled=bool(data.get("cacheDisabled", False)),
            cache_disabled_reason=str(data.get("cacheDisabledReason", "disabled")),
            cache_available=bool(data.get("cacheAvailable", True)),
        )
