"""Rendering of the Gradle build results table.

Two views are produced from the same records: HTML markup for the step
summary and pipe-delimited lines for the job log. Both apply the same
precedence when reporting the build scan: a failed publication wins over a
scan URI, and a missing URI means the scan was not published.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from urllib.parse import quote

from .models import BuildResult
from .step_summary import SummarySink

logger = logging.getLogger(__name__)

TABLE_TITLE = "Gradle Builds"
COLUMNS = ("Root Project", "Requested Tasks", "Gradle Version", "Build Outcome", "Build Scan™")

TROUBLESHOOTING_URL = "https://docs.gradle.com/enterprise/gradle-plugin/#troubleshooting"
SCANS_URL = "https://scans.gradle.com"
BADGE_URL = "https://img.shields.io/badge/Build%20Scan%E2%84%A2-{text}-{color}?logo=Gradle"

BANNER = "=" * 28
SEPARATOR = "-" * 28


def write_summary_table(results: Sequence[BuildResult], summary: SummarySink) -> None:
    summary.add_heading(TABLE_TITLE, 3)
    summary.add_raw(render_summary_table(results))


def render_summary_table(results: Sequence[BuildResult]) -> str:
    """Return the HTML table with one row per build, in input order."""
    header = "".join(f"\n        <th>{column}</th>" for column in COLUMNS)
    rows = "".join(render_build_result_row(result) for result in results)
    return f"""
<table>
    <tr>{header}
    </tr>{rows}
</table>
    """


def render_build_result_row(result: BuildResult) -> str:
    return f"""
    <tr>
        <td>{result.root_project_name}</td>
        <td>{result.requested_tasks}</td>
        <td align='center'>{result.gradle_version}</td>
        <td align='center'>{render_outcome(result)}</td>
        <td>{render_build_scan(result)}</td>
    </tr>"""


def render_outcome(result: BuildResult) -> str:
    return ":x:" if result.build_failed else ":white_check_mark:"


def render_build_scan(result: BuildResult) -> str:
    if result.build_scan_failed:
        return render_build_scan_badge("PUBLISH_FAILED", "orange", TROUBLESHOOTING_URL)
    if result.scan_published:
        return render_build_scan_badge("PUBLISHED", "06A0CE", result.build_scan_uri)
    return render_build_scan_badge("NOT_PUBLISHED", "lightgrey", SCANS_URL)


def render_build_scan_badge(outcome_text: str, outcome_color: str, target_url: str) -> str:
    badge_url = BADGE_URL.format(text=quote(outcome_text), color=outcome_color)
    badge_html = f'<img src="{badge_url}" alt="Build Scan {outcome_text}" />'
    return f'<a href="{target_url}" rel="nofollow">{badge_html}</a>'


def summary_table_lines(results: Sequence[BuildResult]) -> list[str]:
    """Return the plain-text mirror of the summary table, one entry per log line."""
    lines = [BANNER, TABLE_TITLE, SEPARATOR, " | ".join(COLUMNS), SEPARATOR]
    for result in results:
        outcome = "FAILED" if result.build_failed else "SUCCESS"
        scan = "Publish failed" if result.build_scan_failed else result.build_scan_uri
        lines.append(
            f"{result.root_project_name} | {result.requested_tasks} | "
            f"{result.gradle_version} | {outcome} | {scan}"
        )
    lines.append(BANNER)
    return lines


def log_summary_table(results: Sequence[BuildResult]) -> None:
    for line in summary_table_lines(results):
        logger.info(line)
