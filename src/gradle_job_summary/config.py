"""Runtime configuration for the job summary.

All environment lookups happen here, once, so the loader and renderers receive
plain values. ``RUNNER_TEMP`` is required; ``GITHUB_STEP_SUMMARY`` is only
needed when the summary is written, and ``RUNNER_DEBUG`` toggles debug logs.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from collections.abc import Mapping

from .discovery import resolve_results_dir


RUNNER_TEMP_ENV_VAR = "RUNNER_TEMP"
STEP_SUMMARY_ENV_VAR = "GITHUB_STEP_SUMMARY"
RUNNER_DEBUG_ENV_VAR = "RUNNER_DEBUG"


class ConfigError(RuntimeError):
    """Raised when a required configuration value is missing."""


@dataclass(slots=True, frozen=True)
class Settings:
    """Top-level settings container."""

    runner_temp: Path
    step_summary_path: Path | None = None
    debug: bool = False

    @property
    def results_dir(self) -> Path:
        return resolve_results_dir(self.runner_temp)


def load_settings(
    environ: Mapping[str, str] | None = None,
    *,
    runner_temp: Path | str | None = None,
    step_summary_path: Path | str | None = None,
) -> Settings:
    """Resolve settings from explicit arguments, falling back to the environment.

    Args:
        environ: Mapping to read variables from; defaults to ``os.environ``.
        runner_temp: Overrides ``RUNNER_TEMP``.
        step_summary_path: Overrides ``GITHUB_STEP_SUMMARY``.

    Raises:
        ConfigError: If no runner temp directory is configured.
    """
    env = os.environ if environ is None else environ

    temp = runner_temp or env.get(RUNNER_TEMP_ENV_VAR)
    if not temp:
        raise ConfigError(f"Missing required environment variable {RUNNER_TEMP_ENV_VAR}")

    summary = step_summary_path or env.get(STEP_SUMMARY_ENV_VAR) or None
    debug = env.get(RUNNER_DEBUG_ENV_VAR, "").strip() == "1"

    return Settings(
        runner_temp=Path(temp),
        step_summary_path=Path(summary) if summary else None,
        debug=debug,
    )
