#!/usr/bin/env python3
"""Local CLI entrypoint to run the dependency check outside of GitHub Actions.

Usage:
  python scripts/check.py [--root .] [--manifest path] [--package-type T]
                          [--no-asterisk] [--additional-internal-modules a,b]
                          [--ignore-packages a,b] [--json] [--verbose]

Options not given on the command line are read from the same ``INPUT_*``
environment variables the Action uses.
"""

from __future__ import annotations

import argparse
import json
from pathlib import Path

from dependency_policy.action import report
from dependency_policy.config import (
    MANIFEST_FILENAME,
    PACKAGE_TYPES,
    load_options,
    parse_list,
)
from dependency_policy.core import check_manifest_file
from dependency_policy.logging import configure_logging


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser()
    parser.add_argument("--root", type=Path, default=Path("."))
    parser.add_argument("--manifest", type=Path, default=None)
    parser.add_argument("--package-type", choices=PACKAGE_TYPES, default=None)
    parser.add_argument(
        "--no-asterisk",
        dest="asterisk",
        action="store_false",
        default=None,
        help="do not require internal peer dependencies to use '*'",
    )
    parser.add_argument("--additional-internal-modules", default=None)
    parser.add_argument("--ignore-packages", default=None)
    parser.add_argument("--json", action="store_true", help="print the result as JSON")
    parser.add_argument("--verbose", action="store_true")
    args = parser.parse_args(argv)

    configure_logging(verbose=args.verbose, log_json=args.json)

    options = load_options().with_overrides(
        package_type=args.package_type,
        peer_deps_should_be_asterisk=args.asterisk,
        additional_internal_modules=(
            parse_list(args.additional_internal_modules)
            if args.additional_internal_modules is not None
            else None
        ),
        ignore_packages=(
            parse_list(args.ignore_packages) if args.ignore_packages is not None else None
        ),
    )
    manifest_path = args.manifest or args.root / MANIFEST_FILENAME

    result = check_manifest_file(manifest_path, options)

    if args.json:
        print(json.dumps({"options": options.to_dict(), **result.to_dict()}, indent=2))
        return 0 if result.success else 1

    print("Checking dependencies with options:", json.dumps(options.to_dict(), indent=2))
    return report(result)


if __name__ == "__main__":
    raise SystemExit(main())
