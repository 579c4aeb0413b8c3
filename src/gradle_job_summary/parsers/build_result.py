"""Parse a single build result record written by the build step."""

from __future__ import annotations

import json
from pathlib import Path

from gradle_job_summary.models import BuildResult
from gradle_job_summary.validators.build_results import validate_document


class BuildResultParseError(ValueError):
    """Raised when a result file is not valid JSON or does not match the schema."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Invalid build result {path}: {reason}")
        self.path = path
        self.reason = reason


def parse(path: Path) -> BuildResult:
    """Return the BuildResult stored in path.

    Read errors propagate unchanged; malformed content raises BuildResultParseError.
    """
    try:
        content = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise BuildResultParseError(path, f"invalid UTF-8 ({exc.reason})") from exc

    try:
        document = json.loads(content)
    except json.JSONDecodeError as exc:
        raise BuildResultParseError(path, f"invalid JSON ({exc.msg})") from exc

    try:
        validate_document(document)
    except ValueError as exc:
        raise BuildResultParseError(path, f"schema validation failed{exc}") from exc

    return BuildResult.from_dict(document)
