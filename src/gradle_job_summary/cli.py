"""Command-line entrypoint run in the post-build step of a workflow job.

Usage:
  gradle-job-summary [--mode write|log|both] [--cache-state PATH]
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .config import ConfigError, load_settings
from .core import load_build_results, log_job_summary, write_job_summary
from .log import configure_logging
from .models import CacheListener
from .parsers.build_result import BuildResultParseError
from .step_summary import StepSummary

MODES = ("write", "log", "both")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Report Gradle build results for a workflow job")
    parser.add_argument(
        "--mode",
        choices=MODES,
        default="both",
        help="Write the step summary, log the plain-text report, or both (default)",
    )
    parser.add_argument(
        "--cache-state",
        type=Path,
        default=None,
        help="File holding the serialised cache listener from the setup step",
    )
    return parser.parse_args(argv)


def _load_cache_listener(path: Path | None) -> CacheListener:
    if path is None or not path.exists():
        return CacheListener()
    return CacheListener.rehydrate(path.read_text(encoding="utf-8"))


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    try:
        settings = load_settings()
        configure_logging(debug=settings.debug)

        build_results = load_build_results(settings.runner_temp)
        cache_listener = _load_cache_listener(args.cache_state)

        if args.mode in ("log", "both"):
            log_job_summary(build_results, cache_listener)
        if args.mode in ("write", "both"):
            write_job_summary(build_results, cache_listener, StepSummary.from_settings(settings))
    except (ConfigError, BuildResultParseError, OSError) as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
