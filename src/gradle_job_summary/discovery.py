"""Build results directory discovery utilities."""

from __future__ import annotations

from pathlib import Path


RESULTS_SUBDIR = ".build-results"


def resolve_results_dir(runner_temp: Path | str) -> Path:
    """Return the directory the build step writes its result records into."""
    return Path(runner_temp) / RESULTS_SUBDIR


def discover_result_files(results_dir: Path) -> list[Path]:
    """Find build result records in results_dir, sorted by file name.

    Every entry in the directory is expected to be a result record; nothing is
    filtered out, so a stray sub-directory fails when it is read. A missing
    directory yields an empty list.
    """
    if not results_dir.is_dir():
        return []

    return sorted(results_dir.iterdir(), key=lambda p: p.name)
