"""Data models for manifests and check results."""

from __future__ import annotations

from dataclasses import dataclass, field
from collections.abc import Iterable, Mapping

SECTIONS = ("dependencies", "peerDependencies", "devDependencies")


@dataclass(frozen=True)
class Manifest:
    """Dependency sections of a parsed package manifest.

    Each section maps package name to version specifier and keeps the order
    in which the manifest declares its entries.
    """

    dependencies: dict[str, str] = field(default_factory=dict)
    peer_dependencies: dict[str, str] = field(default_factory=dict)
    dev_dependencies: dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_sections(cls, sections: Mapping[str, Mapping[str, object]]) -> Manifest:
        def _coerce(name: str) -> dict[str, str]:
            deps = sections.get(name) or {}
            return {str(pkg): str(version) for pkg, version in deps.items()}

        return cls(
            dependencies=_coerce("dependencies"),
            peer_dependencies=_coerce("peerDependencies"),
            dev_dependencies=_coerce("devDependencies"),
        )


@dataclass(frozen=True)
class Violation:
    """A single policy infraction for one dependency entry."""

    package: str
    section: str
    message: str

    def to_dict(self) -> dict[str, str]:
        return {
            "package": self.package,
            "section": self.section,
            "message": self.message,
        }


@dataclass(frozen=True)
class CheckResult:
    """Outcome of a dependency check.

    ``violations`` holds policy infractions in the order they were found.
    ``read_error`` is set instead when the manifest could not be loaded, in
    which case no rule was evaluated.
    """

    violations: tuple[Violation, ...] = ()
    read_error: str | None = None

    @property
    def errors(self) -> list[str]:
        if self.read_error is not None:
            return [self.read_error]
        return [violation.message for violation in self.violations]

    @property
    def success(self) -> bool:
        return not self.errors

    def to_dict(self) -> dict[str, object]:
        return {
            "success": self.success,
            "errors": self.errors,
            "violations": [violation.to_dict() for violation in self.violations],
        }

    @classmethod
    def from_violations(cls, violations: Iterable[Violation]) -> CheckResult:
        return cls(violations=tuple(violations))

    @classmethod
    def failed_read(cls, reason: str) -> CheckResult:
        return cls(read_error=f"Error reading or parsing package.json: {reason}")
