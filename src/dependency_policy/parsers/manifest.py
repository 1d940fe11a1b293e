"""Read a package manifest and extract its dependency sections.

``package.json`` is parsed as JSON. pnpm's ``package.yaml`` (``.yaml`` or
``.yml``) is parsed with PyYAML; every other suffix is treated as JSON.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from ..models import SECTIONS, Manifest


YAML_SUFFIXES = {".yaml", ".yml"}


class ManifestReadError(RuntimeError):
    """Raised when the manifest is missing, unreadable or malformed."""


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Invalid JSON constant: {name}")


def parse_manifest(content: str, *, yaml_format: bool = False) -> Manifest:
    """Parse manifest text into a :class:`Manifest`.

    Raises:
        ManifestReadError: If the text is not valid structured data, the top
            level is not an object, or a dependency section is not an object.
    """
    if yaml_format:
        import yaml

        try:
            data: Any = yaml.safe_load(content)
        except yaml.YAMLError as exc:
            raise ManifestReadError(f"Invalid YAML: {exc}") from exc
    else:
        try:
            data = json.loads(content, parse_constant=_reject_constant)
        except ValueError as exc:
            raise ManifestReadError(str(exc)) from exc

    if not isinstance(data, dict):
        raise ManifestReadError("Manifest must be an object at the top level")

    for section in SECTIONS:
        deps = data.get(section)
        if deps is not None and not isinstance(deps, dict):
            raise ManifestReadError(f"'{section}' must be an object")

    return Manifest.from_sections(data)


def load_manifest(path: Path) -> Manifest:
    """Read and parse the manifest at ``path``."""
    try:
        content = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ManifestReadError(str(exc)) from exc
    except UnicodeDecodeError as exc:
        raise ManifestReadError(f"Manifest is not valid UTF-8: {exc}") from exc

    return parse_manifest(content, yaml_format=path.suffix in YAML_SUFFIXES)
