"""Manifest parsers."""

from .manifest import ManifestReadError, load_manifest, parse_manifest

__all__ = [
    "ManifestReadError",
    "load_manifest",
    "parse_manifest",
]
