# SPDX-FileCopyrightText: 2025-present The pykim Authors
#
# SPDX-License-Identifier: Apache-2.0

"""
pykim: Kythe inline metadata loading for generated source files.
"""

from importlib.metadata import PackageNotFoundError, version

# Import configuration validation first to ensure constants are valid
from . import config_validation  # noqa: F401

from .api.loaders import metadata_to_table, read_inline_metadata
from .config import DEFAULT_CONFIG, BatchConfig, ParsingConfig, PyKIMConfig
from .constants import ANNOTATION_PREFIX, ANNOTATION_PREFIX_STRING, EdgeKind
from .core import (
    GENERATES_EDGE,
    REVERSE_EDGE,
    KytheInlineMetadataLoader,
    Metadata,
    MetadataLoader,
    MetadataLoaders,
    Rule,
    encode_inline_metadata,
    encode_rules,
)
from .exceptions import (
    KIMConfigurationError,
    KIMParseError,
    KIMPayloadError,
    KIMResourceLimitError,
)

try:
    __version__ = version("pykim")
except PackageNotFoundError:
    __version__ = "0.0.0"

__all__ = [
    "ANNOTATION_PREFIX",
    "ANNOTATION_PREFIX_STRING",
    "DEFAULT_CONFIG",
    "GENERATES_EDGE",
    "REVERSE_EDGE",
    "BatchConfig",
    "EdgeKind",
    "KIMConfigurationError",
    "KIMParseError",
    "KIMPayloadError",
    "KIMResourceLimitError",
    "KytheInlineMetadataLoader",
    "Metadata",
    "MetadataLoader",
    "MetadataLoaders",
    "ParsingConfig",
    "PyKIMConfig",
    "Rule",
    "__version__",
    "encode_inline_metadata",
    "encode_rules",
    "metadata_to_table",
    "read_inline_metadata",
]
