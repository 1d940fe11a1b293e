"""Classify package names as internal to the tscircuit ecosystem."""

from __future__ import annotations

from collections.abc import Collection


# Packages that are internal but match neither the scope nor the marker.
INTERNAL_PACKAGES: frozenset[str] = frozenset(
    {
        "schematic-symbols",
    }
)

INTERNAL_SCOPE = "@tscircuit/"
INTERNAL_MARKER = "circuit"


def is_internal(
    name: str,
    extra: Collection[str] = (),
    known: Collection[str] = INTERNAL_PACKAGES,
) -> bool:
    """Return True when ``name`` belongs to the internal ecosystem.

    A name is internal when it is listed in ``known``, lives under the
    ``@tscircuit/`` scope, contains ``circuit`` in any casing, or is listed
    in ``extra``. Matching against ``known`` and ``extra`` is exact and
    case-sensitive.
    """
    if name in known:
        return True
    if name.startswith(INTERNAL_SCOPE):
        return True
    if INTERNAL_MARKER in name.lower():
        return True
    return name in extra
