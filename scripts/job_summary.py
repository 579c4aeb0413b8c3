#!/usr/bin/env python3
"""Local entrypoint to render the job summary outside of the packaged CLI.

Usage:
  python scripts/job_summary.py [--mode write|log|both] [--cache-state PATH]

This calls the same core entrypoints as the ``gradle-job-summary`` command.
"""

from __future__ import annotations

from gradle_job_summary.cli import main


if __name__ == "__main__":
    raise SystemExit(main())
