"""
High-level API for pykim.
"""

from .loaders import RULE_SCHEMA, metadata_to_table, read_inline_metadata

__all__ = ["RULE_SCHEMA", "metadata_to_table", "read_inline_metadata"]
