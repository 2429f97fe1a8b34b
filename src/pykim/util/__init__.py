"""Utility functions for working with PyArrow tables.

This module provides utilities for table metadata operations.
"""

from .metadata import get_metadata, set_metadata

__all__ = [
    "get_metadata",
    "set_metadata",
]
