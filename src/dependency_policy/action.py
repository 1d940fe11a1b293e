"""GitHub Action entrypoint.

Reads the action inputs from ``INPUT_*`` environment variables, checks
``$GITHUB_WORKSPACE/package.json`` and reports the outcome. Exit status is 0
when every check passes and 1 otherwise.
"""

from __future__ import annotations

import json
import os
import sys
from pathlib import Path
from collections.abc import Mapping

import structlog

from .config import (
    STEP_SUMMARY_ENV_VAR,
    VERBOSE_ENV_VAR,
    CheckOptions,
    is_truthy,
    load_options,
    resolve_manifest_path,
)
from .core import check_manifest_file
from .logging import configure_logging
from .models import CheckResult
from .summary import write_step_summary


log = structlog.get_logger(__name__)


def report(result: CheckResult) -> int:
    """Print the outcome of ``result`` and return the exit status."""
    if not result.success:
        print("❌ Dependency check failed:", file=sys.stderr)
        for error in result.errors:
            print(f"  - {error}", file=sys.stderr)
        return 1

    print("✅ All dependency checks passed!")
    return 0


def run(
    manifest_path: Path,
    options: CheckOptions,
    summary_path: Path | None = None,
) -> int:
    """Announce ``options``, check ``manifest_path`` and report the result."""
    print("Checking dependencies with options:", json.dumps(options.to_dict(), indent=2))

    result = check_manifest_file(manifest_path, options)

    status = report(result)

    if summary_path is not None:
        try:
            write_step_summary(summary_path, result, options)
        except OSError as exc:
            log.warning("step_summary_write_failed", path=str(summary_path), error=str(exc))

    return status


def main(environ: Mapping[str, str] | None = None) -> int:
    env = os.environ if environ is None else environ
    configure_logging(verbose=is_truthy(env.get(VERBOSE_ENV_VAR)))

    try:
        options = load_options(env)
        manifest_path = resolve_manifest_path(env)
        summary_env = env.get(STEP_SUMMARY_ENV_VAR)
        summary_path = Path(summary_env) if summary_env else None
        return run(manifest_path, options, summary_path)
    except Exception as exc:
        log.exception("unexpected_error")
        print(f"❌ An error occurred: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
