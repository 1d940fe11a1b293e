"""dependency-policy core package.

This package provides the internal dependency checks that are callable from
both the GitHub Action wrapper and the local CLI in ``scripts/check.py``.
"""

__all__ = [
    "action",
    "classifier",
    "config",
    "core",
    "models",
    "summary",
]
