"""CLI entrypoint for validating build result records against the schema."""

from __future__ import annotations

import argparse
import json
import sys
from functools import lru_cache
from pathlib import Path
from collections.abc import Iterable
from typing import Any

from jsonschema import Draft202012Validator

from gradle_job_summary.config import ConfigError, load_settings
from gradle_job_summary.discovery import discover_result_files

SCHEMA_PATH = Path(__file__).resolve().parents[1] / "schemas" / "build-result.schema.json"


@lru_cache(maxsize=1)
def _validator() -> Draft202012Validator:
    schema = json.loads(SCHEMA_PATH.read_text(encoding="utf-8"))
    return Draft202012Validator(schema)


def _format_errors(errors: Iterable) -> str:
    messages = []
    for error in errors:
        pointer = "/".join(str(p) for p in error.path)
        messages.append(f"- {pointer or '<root>'}: {error.message}")
    return "\n".join(messages)


def validate_document(document: Any) -> None:
    """Raise ValueError listing every schema violation in document."""
    errors = sorted(_validator().iter_errors(document), key=lambda e: list(e.path))
    if errors:
        raise ValueError("\n" + _format_errors(errors))


def validate_results_dir(results_dir: Path) -> list[Path]:
    """Validate every record in results_dir and return the files checked."""
    files = discover_result_files(results_dir)
    for path in files:
        document = json.loads(path.read_text(encoding="utf-8"))
        try:
            validate_document(document)
        except ValueError as exc:
            raise ValueError(f" {path.name}{exc}") from exc
    return files


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "--results-dir",
        type=Path,
        default=None,
        help="Directory holding build result records (default: $RUNNER_TEMP/.build-results)",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    try:
        results_dir = args.results_dir or load_settings().results_dir
        files = validate_results_dir(results_dir)
    except ConfigError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 1
    except (UnicodeDecodeError, OSError) as exc:
        print(f"ERROR: Failed to read build result: {exc}", file=sys.stderr)
        return 1
    except json.JSONDecodeError as exc:
        print(f"ERROR: Failed to read JSON: {exc}", file=sys.stderr)
        return 1
    except ValueError as exc:
        print(f"ERROR: Build result failed validation:{exc}", file=sys.stderr)
        return 1

    print(f"{len(files)} build result(s) in {results_dir} are valid against {SCHEMA_PATH.name}")
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
