"""Pytest configuration and fixtures for gradle-job-summary tests."""

import json
import logging

import pytest

from gradle_job_summary.discovery import RESULTS_SUBDIR
from gradle_job_summary.log import PACKAGE_LOGGER, ActionsLogHandler
from gradle_job_summary.models import BuildResult


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Undo configure_logging() so caplog sees records in every test."""
    yield
    logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(logger.handlers):
        if isinstance(handler, ActionsLogHandler):
            logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


@pytest.fixture
def record():
    """Factory for camelCase build result documents as the build step writes them."""

    def _record(**overrides):
        data = {
            "rootProjectName": "app",
            "rootProjectDir": "/home/runner/work/app",
            "requestedTasks": "build",
            "gradleVersion": "8.5",
            "gradleHomeDir": "/home/runner/.gradle",
            "buildFailed": False,
            "buildScanUri": "",
            "buildScanFailed": False,
        }
        data.update(overrides)
        return data

    return _record


@pytest.fixture
def build_result(record):
    """Factory for BuildResult objects."""

    def _build_result(**overrides):
        return BuildResult.from_dict(record(**overrides))

    return _build_result


@pytest.fixture
def runner_temp(tmp_path):
    """Job temp directory with an empty results directory inside."""
    (tmp_path / RESULTS_SUBDIR).mkdir()
    return tmp_path


@pytest.fixture
def write_record(runner_temp):
    """Write a result document (or raw text) into the results directory."""

    def _write(name, content):
        path = runner_temp / RESULTS_SUBDIR / name
        text = content if isinstance(content, str) else json.dumps(content)
        path.write_text(text, encoding="utf-8")
        return path

    return _write


class RecordingSummary:
    """Summary sink that records every call in order."""

    def __init__(self, fail_on_write=None):
        self.calls = []
        self.fail_on_write = fail_on_write

    def add_heading(self, text, level=1):
        self.calls.append(("heading", text, level))
        return self

    def add_raw(self, text, add_eol=False):
        self.calls.append(("raw", text))
        return self

    def write(self):
        self.calls.append(("write",))
        if self.fail_on_write is not None:
            raise self.fail_on_write
        return self

    @property
    def kinds(self):
        return [call[0] for call in self.calls]


@pytest.fixture
def recording_summary():
    return RecordingSummary()


@pytest.fixture
def failing_summary():
    return RecordingSummary(fail_on_write=OSError("summary upload rejected"))
