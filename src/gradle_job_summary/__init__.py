"""gradle-job-summary core package.

This package renders the results of the Gradle invocations of a workflow job
into the GitHub step summary and mirrors the same report into the job log.
"""

__all__ = [
    "core",
]
