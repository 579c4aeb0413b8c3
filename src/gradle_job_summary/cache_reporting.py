"""Caching report rendered alongside the build results table."""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence

from .log import end_group, start_group
from .models import CacheEntryListener, CacheListener
from .step_summary import SummarySink

logger = logging.getLogger(__name__)

_MB = 1024 * 1024

SizeOf = Callable[[CacheEntryListener], "int | None"]


def write_caching_report(listener: CacheListener, summary: SummarySink) -> None:
    entries = listener.cache_entries

    summary.add_raw(
        f"\n<details><summary><h4>{_report_title(listener)}</h4></summary>\n"
    )
    summary.add_raw(
        _render_counts_table(
            [
                (
                    "Entries Restored",
                    _get_count(entries, lambda e: e.restored_size),
                    _get_size(entries, lambda e: e.restored_size),
                ),
                (
                    "Entries Saved",
                    _get_count(entries, lambda e: e.saved_size),
                    _get_size(entries, lambda e: e.saved_size),
                ),
            ]
        ),
        add_eol=True,
    )
    summary.add_heading("Cache Entry Details", 5)
    summary.add_raw(
        f"""<pre>
{render_entry_details(listener)}
</pre>
</details>
"""
    )


def log_caching_report(listener: CacheListener) -> None:
    entries = listener.cache_entries

    start_group(logger, _report_title(listener))
    logger.info(
        "Entries Restored: %d (%d Mb)",
        _get_count(entries, lambda e: e.restored_size),
        _get_size(entries, lambda e: e.restored_size),
    )
    logger.info(
        "Entries Saved   : %d (%d Mb)",
        _get_count(entries, lambda e: e.saved_size),
        _get_size(entries, lambda e: e.saved_size),
    )
    logger.info("Cache Entry Details")
    logger.info(render_entry_details(listener))
    end_group(logger)


def _report_title(listener: CacheListener) -> str:
    return f"Caching for gradle-build-action was {listener.cache_status} - expand for details"


def _render_counts_table(rows: Sequence[tuple[str, int, int]]) -> str:
    lines = ["<table>", "<tr><th></th><th>Count</th><th>Total Size (Mb)</th></tr>"]
    for label, count, size in rows:
        lines.append(f"<tr><td>{label}</td><td>{count}</td><td>{size}</td></tr>")
    lines.append("</table>")
    return "".join(lines)


def render_entry_details(listener: CacheListener) -> str:
    details = []
    for entry in listener.cache_entries:
        details.append(
            f"""Entry: {entry.entry_name}
    Requested Key : {entry.requested_key or ''}
    Restored  Key : {entry.restored_key or ''}
              Size: {format_size(entry.restored_size)}
              {_restored_message(entry, listener.cache_write_only)}
    Saved     Key : {entry.saved_key or ''}
              Size: {format_size(entry.saved_size)}
              {_saved_message(entry, listener.cache_read_only)}
"""
        )
    return "---\n".join(details)


def _restored_message(entry: CacheEntryListener, cache_write_only: bool) -> str:
    if entry.not_restored:
        return f"(Entry not restored: {entry.not_restored})"
    if cache_write_only:
        return "(Entry not restored: cache is write-only)"
    if entry.requested_key is None:
        return "(Entry not restored: not requested)"
    if entry.restored_key is None:
        return "(Entry not restored: no match found)"
    if entry.restored_key == entry.requested_key:
        return "(Entry restored: exact match found)"
    return "(Entry restored: partial match found)"


def _saved_message(entry: CacheEntryListener, cache_read_only: bool) -> str:
    if entry.not_saved:
        return f"(Entry not saved: {entry.not_saved})"
    if entry.saved_key is None:
        if cache_read_only:
            return "(Entry not saved: cache is read-only)"
        if entry.not_restored:
            return "(Entry not saved: not restored)"
        return "(Entry not saved: reason unknown)"
    if entry.saved_size == 0:
        return "(Entry not saved: entry with key already exists)"
    return "(Entry saved)"


def _get_count(entries: Sequence[CacheEntryListener], size_of: SizeOf) -> int:
    return sum(1 for entry in entries if size_of(entry))


def _get_size(entries: Sequence[CacheEntryListener], size_of: SizeOf) -> int:
    total = sum(size_of(entry) or 0 for entry in entries)
    return round(total / _MB)


def format_size(size: int | None) -> str:
    if not size:
        return ""
    return f"{round(size / _MB)} MB ({size} B)"
