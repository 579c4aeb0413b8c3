"""Build result model."""

from __future__ import annotations

from dataclasses import dataclass
from collections.abc import Mapping
from typing import Any

# JSON key -> attribute name, in the order the records are written upstream.
_FIELDS = {
    "rootProjectName": "root_project_name",
    "rootProjectDir": "root_project_dir",
    "requestedTasks": "requested_tasks",
    "gradleVersion": "gradle_version",
    "gradleHomeDir": "gradle_home_dir",
    "buildFailed": "build_failed",
    "buildScanUri": "build_scan_uri",
    "buildScanFailed": "build_scan_failed",
}


@dataclass(frozen=True)
class BuildResult:
    """Outcome of a single Gradle invocation, as recorded by the build step."""

    root_project_name: str
    root_project_dir: str
    requested_tasks: str
    gradle_version: str
    gradle_home_dir: str
    build_failed: bool
    build_scan_uri: str
    build_scan_failed: bool

    @property
    def scan_published(self) -> bool:
        """True when a scan URI is available and publishing did not fail."""
        return not self.build_scan_failed and bool(self.build_scan_uri)

    def to_dict(self) -> dict[str, object]:
        return {key: getattr(self, attr) for key, attr in _FIELDS.items()}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> BuildResult:
        return cls(**{attr: data[key] for key, attr in _FIELDS.items()})
