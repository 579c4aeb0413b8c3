"""Buffered writer for the GitHub step summary file ($GITHUB_STEP_SUMMARY)."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol

from .config import ConfigError, STEP_SUMMARY_ENV_VAR, Settings


class SummarySink(Protocol):
    """Append-only rich content buffer with an explicit publish step.

    ``write`` publishes everything added so far. Callers invoke it exactly once,
    after all content has been added.
    """

    def add_heading(self, text: str, level: int = 1) -> SummarySink: ...

    def add_raw(self, text: str, add_eol: bool = False) -> SummarySink: ...

    def write(self) -> SummarySink: ...


class StepSummary:
    """In-memory summary buffer flushed to the step summary file."""

    def __init__(self, path: Path) -> None:
        self.path = Path(path)
        self._buffer = ""

    @classmethod
    def from_settings(cls, settings: Settings) -> StepSummary:
        if settings.step_summary_path is None:
            raise ConfigError(
                f"Unable to find environment variable for ${STEP_SUMMARY_ENV_VAR}. "
                "Check if your runtime environment supports job summaries."
            )
        return cls(settings.step_summary_path)

    def add_raw(self, text: str, add_eol: bool = False) -> StepSummary:
        self._buffer += text
        return self.add_eol() if add_eol else self

    def add_eol(self) -> StepSummary:
        return self.add_raw("\n")

    def add_heading(self, text: str, level: int = 1) -> StepSummary:
        tag = f"h{level}" if 1 <= level <= 6 else "h1"
        return self.add_raw(f"<{tag}>{text}</{tag}>", add_eol=True)

    def stringify(self) -> str:
        return self._buffer

    def is_empty_buffer(self) -> bool:
        return len(self._buffer) == 0

    def empty_buffer(self) -> StepSummary:
        self._buffer = ""
        return self

    def write(self, overwrite: bool = False) -> StepSummary:
        """Append (or overwrite) the buffer to the summary file, then empty it.

        OSError from the file system propagates to the caller.
        """
        mode = "w" if overwrite else "a"
        with self.path.open(mode, encoding="utf-8") as handle:
            handle.write(self._buffer)
        return self.empty_buffer()
