"""
Constants for Kythe inline metadata loading.
"""

from __future__ import annotations

from enum import Enum

__all__ = [
    "ANNOTATION_PREFIX",
    "ANNOTATION_PREFIX_STRING",
    "EdgeKind",
    "TABLE_TYPE",
]

# Leading bytes of a trailing comment that carries inline metadata.
ANNOTATION_PREFIX_STRING = "kythe-inline-metadata:"
ANNOTATION_PREFIX = ANNOTATION_PREFIX_STRING.encode("utf-8")

# Value of the ``type`` key in Arrow schema metadata.
TABLE_TYPE = "KYTHE_INLINE"


class EdgeKind(Enum):
    """Kythe edge kinds a metadata rule can emit."""

    GENERATES = "/kythe/edge/generates"
