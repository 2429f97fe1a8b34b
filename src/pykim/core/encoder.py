"""
Encoding of inline metadata comments, the inverse of the loader.
"""

from __future__ import annotations

import base64
from collections.abc import Iterable
from typing import Any

from ..constants import ANNOTATION_PREFIX
from ..proto import GeneratedCodeInfo

__all__ = ["encode_inline_metadata", "encode_rules"]


def encode_inline_metadata(info: Any) -> bytes:
    """Serialize a ``GeneratedCodeInfo`` into an inline metadata comment body.

    Args:
        info: GeneratedCodeInfo message to embed

    Returns:
        The marker followed by the base64 encoded message
    """
    return ANNOTATION_PREFIX + base64.b64encode(info.SerializeToString())


def encode_rules(rules: Iterable[tuple[int, int, Any]]) -> bytes:
    """Build and encode a ``GeneratedCodeInfo`` from ``(begin, end, vname)``."""
    info = GeneratedCodeInfo(type=GeneratedCodeInfo.KYTHE0)
    for begin, end, vname in rules:
        mapping = info.meta.add(begin=begin, end=end)
        mapping.vname.CopyFrom(vname)
    return encode_inline_metadata(info)
