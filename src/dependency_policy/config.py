"""Check options and their environment-derived overrides.

Options start from :data:`DEFAULT_OPTIONS` and are overridden by the
``INPUT_*`` variables GitHub Actions exposes for the action's ``with:``
inputs. Every loader accepts an explicit ``environ`` mapping and falls back to
``os.environ`` when it is omitted.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from pathlib import Path
from collections.abc import Iterable, Mapping

from .classifier import INTERNAL_PACKAGES


INTERNAL_LIB = "internal_lib"
BUNDLED_LIB = "bundled_lib"
PACKAGE_TYPES = (INTERNAL_LIB, BUNDLED_LIB)

MANIFEST_FILENAME = "package.json"

PACKAGE_TYPE_ENV_VAR = "INPUT_PACKAGE_TYPE"
PEER_ASTERISK_ENV_VAR = "INPUT_PEER_DEPS_SHOULD_BE_ASTERISK"
ADDITIONAL_MODULES_ENV_VAR = "INPUT_ADDITIONAL_INTERNAL_MODULES"
IGNORE_PACKAGES_ENV_VAR = "INPUT_IGNORE_PACKAGES"
WORKSPACE_ENV_VAR = "GITHUB_WORKSPACE"
STEP_SUMMARY_ENV_VAR = "GITHUB_STEP_SUMMARY"
VERBOSE_ENV_VAR = "INPUT_VERBOSE"

_TRUTHY = {"1", "true", "yes", "y"}


@dataclass(slots=True, frozen=True)
class CheckOptions:
    """Effective configuration for a single check run."""

    package_type: str = INTERNAL_LIB
    peer_deps_should_be_asterisk: bool = True
    additional_internal_modules: frozenset[str] = frozenset()
    ignore_packages: frozenset[str] = frozenset()
    internal_packages: frozenset[str] = INTERNAL_PACKAGES

    def to_dict(self) -> dict[str, object]:
        return {
            "package_type": self.package_type,
            "peer_deps_should_be_asterisk": self.peer_deps_should_be_asterisk,
            "additional_internal_modules": sorted(self.additional_internal_modules),
            "ignore_packages": sorted(self.ignore_packages),
        }

    def with_overrides(
        self,
        *,
        package_type: str | None = None,
        peer_deps_should_be_asterisk: bool | None = None,
        additional_internal_modules: Iterable[str] | None = None,
        ignore_packages: Iterable[str] | None = None,
    ) -> CheckOptions:
        """Return a copy with every non-None argument applied."""
        changes: dict[str, object] = {}
        if package_type is not None:
            changes["package_type"] = package_type
        if peer_deps_should_be_asterisk is not None:
            changes["peer_deps_should_be_asterisk"] = peer_deps_should_be_asterisk
        if additional_internal_modules is not None:
            changes["additional_internal_modules"] = frozenset(additional_internal_modules)
        if ignore_packages is not None:
            changes["ignore_packages"] = frozenset(ignore_packages)
        return replace(self, **changes)


DEFAULT_OPTIONS = CheckOptions()


def parse_list(value: str | None) -> frozenset[str]:
    """Split a comma-separated input into a set of stripped names.

    An empty or missing value yields an empty set.
    """
    if not value:
        return frozenset()
    return frozenset(item.strip() for item in value.split(","))


def is_truthy(value: str | None) -> bool:
    return (value or "").strip().lower() in _TRUTHY


def load_options(
    environ: Mapping[str, str] | None = None,
    defaults: CheckOptions = DEFAULT_OPTIONS,
) -> CheckOptions:
    """Build check options from ``defaults`` overridden by the environment.

    ``INPUT_PEER_DEPS_SHOULD_BE_ASTERISK`` only overrides the default when it
    is set to a non-empty value; it is then true iff it equals ``"true"``.
    """
    env = os.environ if environ is None else environ

    package_type = env.get(PACKAGE_TYPE_ENV_VAR) or None

    asterisk_raw = env.get(PEER_ASTERISK_ENV_VAR)
    asterisk = asterisk_raw == "true" if asterisk_raw else None

    additional = env.get(ADDITIONAL_MODULES_ENV_VAR)
    ignore = env.get(IGNORE_PACKAGES_ENV_VAR)

    return defaults.with_overrides(
        package_type=package_type,
        peer_deps_should_be_asterisk=asterisk,
        additional_internal_modules=parse_list(additional) if additional else None,
        ignore_packages=parse_list(ignore) if ignore else None,
    )


def resolve_workspace(environ: Mapping[str, str] | None = None) -> Path:
    """Return ``GITHUB_WORKSPACE`` when set, else the current directory."""
    env = os.environ if environ is None else environ
    workspace = env.get(WORKSPACE_ENV_VAR)
    if workspace:
        return Path(workspace)
    return Path.cwd()


def resolve_manifest_path(environ: Mapping[str, str] | None = None) -> Path:
    return resolve_workspace(environ) / MANIFEST_FILENAME
