"""Core dependency policy checks.

This module MUST NOT contain GitHub-specific dependencies so it can be used by
both the Action wrapper and the local CLI.
"""

from __future__ import annotations

from pathlib import Path
from collections.abc import Iterator

import structlog

from .classifier import is_internal
from .config import BUNDLED_LIB, DEFAULT_OPTIONS, INTERNAL_LIB, CheckOptions
from .models import CheckResult, Manifest, Violation
from .parsers.manifest import ManifestReadError, load_manifest


log = structlog.get_logger(__name__)

_INTERNAL_LIB_DEPENDENCY = (
    'Internal module "{name}" found in dependencies. '
    "It should be in peerDependencies or devDependencies."
)
_INTERNAL_LIB_PEER_VERSION = 'Internal module "{name}" in peerDependencies should use "*" as version.'
_BUNDLED_LIB_DEPENDENCY = (
    'Internal module "{name}" found in dependencies. '
    "Bundled libs cannot have internal dependencies."
)
_BUNDLED_LIB_PEER = (
    'Internal module "{name}" found in peerDependencies. '
    "Bundled libs cannot have internal peer dependencies."
)


def _internal_entries(
    deps: dict[str, str], options: CheckOptions
) -> Iterator[tuple[str, str]]:
    """Yield internal, non-ignored (name, version) pairs in declaration order."""
    for name, version in deps.items():
        if name in options.ignore_packages:
            continue
        if is_internal(
            name,
            options.additional_internal_modules,
            options.internal_packages,
        ):
            yield name, version


def _check_internal_lib(manifest: Manifest, options: CheckOptions) -> list[Violation]:
    violations: list[Violation] = []
    for name, _version in _internal_entries(manifest.dependencies, options):
        violations.append(
            Violation(name, "dependencies", _INTERNAL_LIB_DEPENDENCY.format(name=name))
        )

    if options.peer_deps_should_be_asterisk:
        for name, version in _internal_entries(manifest.peer_dependencies, options):
            if version != "*":
                violations.append(
                    Violation(
                        name,
                        "peerDependencies",
                        _INTERNAL_LIB_PEER_VERSION.format(name=name),
                    )
                )

    return violations


def _check_bundled_lib(manifest: Manifest, options: CheckOptions) -> list[Violation]:
    violations: list[Violation] = []
    for name, _version in _internal_entries(manifest.dependencies, options):
        violations.append(
            Violation(name, "dependencies", _BUNDLED_LIB_DEPENDENCY.format(name=name))
        )
    for name, _version in _internal_entries(manifest.peer_dependencies, options):
        violations.append(
            Violation(name, "peerDependencies", _BUNDLED_LIB_PEER.format(name=name))
        )
    return violations


def check_dependencies(
    manifest: Manifest, options: CheckOptions = DEFAULT_OPTIONS
) -> CheckResult:
    """Apply the policy for ``options.package_type`` to ``manifest``.

    ``internal_lib`` packages must keep internal modules out of
    ``dependencies`` and, when ``peer_deps_should_be_asterisk`` is set, pin
    internal peer dependencies to ``"*"``. ``bundled_lib`` packages may not
    declare internal modules as dependencies or peer dependencies at all.
    ``devDependencies`` are never checked. Any other package type runs no
    rules and succeeds.
    """
    if options.package_type == INTERNAL_LIB:
        violations = _check_internal_lib(manifest, options)
    elif options.package_type == BUNDLED_LIB:
        violations = _check_bundled_lib(manifest, options)
    else:
        log.warning("unknown_package_type", package_type=options.package_type)
        violations = []

    for violation in violations:
        log.debug(
            "violation",
            package=violation.package,
            section=violation.section,
        )

    return CheckResult.from_violations(violations)


def check_manifest_file(
    path: Path, options: CheckOptions = DEFAULT_OPTIONS
) -> CheckResult:
    """Load the manifest at ``path`` and check it.

    A manifest that cannot be read or parsed yields a failed result carrying
    a single error; no rule is evaluated in that case.
    """
    try:
        manifest = load_manifest(path)
    except ManifestReadError as exc:
        log.warning("manifest_read_failed", path=str(path), error=str(exc))
        return CheckResult.failed_read(str(exc))

    log.debug(
        "manifest_loaded",
        path=str(path),
        dependencies=len(manifest.dependencies),
        peer_dependencies=len(manifest.peer_dependencies),
        dev_dependencies=len(manifest.dev_dependencies),
    )
    return check_dependencies(manifest, options)
