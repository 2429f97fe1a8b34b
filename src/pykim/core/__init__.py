"""
Core loading components.
"""

from .encoder import encode_inline_metadata, encode_rules
from .loader import (
    GENERATES_EDGE,
    REVERSE_EDGE,
    KytheInlineMetadataLoader,
    MetadataLoader,
)
from .metadata import Metadata, Rule
from .registry import MetadataLoaders

__all__ = [
    "GENERATES_EDGE",
    "REVERSE_EDGE",
    "KytheInlineMetadataLoader",
    "Metadata",
    "MetadataLoader",
    "MetadataLoaders",
    "Rule",
    "encode_inline_metadata",
    "encode_rules",
]
