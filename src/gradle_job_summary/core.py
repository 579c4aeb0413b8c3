"""Core job summary entrypoints.

This module MUST NOT read the process environment: configuration is resolved
once by the caller (see ``config.load_settings``) and passed in.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path

from .cache_reporting import log_caching_report, write_caching_report
from .config import ConfigError, RUNNER_TEMP_ENV_VAR
from .discovery import discover_result_files, resolve_results_dir
from .models import BuildResult, CacheListener
from .parsers.build_result import parse as parse_build_result
from .step_summary import SummarySink
from .summary import log_summary_table, write_summary_table

logger = logging.getLogger(__name__)


def write_job_summary(
    build_results: Sequence[BuildResult],
    cache_listener: CacheListener,
    summary: SummarySink,
) -> None:
    """Render the build table and caching report into summary, then publish it.

    ``summary.write()`` is the last step and runs exactly once; any error it
    raises propagates to the caller.
    """
    logger.info("Writing job summary")

    if not build_results:
        logger.debug("No Gradle build results found. Summary table will not be generated.")
    else:
        write_summary_table(build_results, summary)

    write_caching_report(cache_listener, summary)

    summary.write()


def log_job_summary(build_results: Sequence[BuildResult], cache_listener: CacheListener) -> None:
    """Log the plain-text build table and caching report."""
    if not build_results:
        logger.debug("No Gradle build results found. Summary table will not be logged.")
    else:
        log_summary_table(build_results)

    log_caching_report(cache_listener)


def load_build_results(runner_temp: Path | str | None) -> list[BuildResult]:
    """Load every build result recorded under runner_temp.

    Params:
        runner_temp: the job's temporary directory ($RUNNER_TEMP)

    Returns: results ordered by file name; empty when no build has run.

    Raises ConfigError when runner_temp is not set and BuildResultParseError
    for the first malformed record (no other records are returned).
    """
    if not runner_temp:
        raise ConfigError(f"Missing required environment variable {RUNNER_TEMP_ENV_VAR}")

    results_dir = resolve_results_dir(runner_temp)
    if not results_dir.exists():
        logger.debug("Build results directory %s does not exist", results_dir)
        return []

    return [parse_build_result(path) for path in discover_result_files(results_dir)]
