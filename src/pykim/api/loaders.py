"""
High-level API functions for loading inline metadata from files.
"""

from __future__ import annotations

import hashlib
import logging
from pathlib import Path
from typing import Literal, overload

import pyarrow as pa

from ..config import DEFAULT_CONFIG, PyKIMConfig
from ..constants import TABLE_TYPE
from ..core import KytheInlineMetadataLoader, Metadata, MetadataLoader
from ..exceptions import KIMResourceLimitError
from ..util import set_metadata

__all__ = ["RULE_SCHEMA", "metadata_to_table", "read_inline_metadata"]

logger = logging.getLogger(__name__)

RULE_SCHEMA = pa.schema(
    [
        ("begin", pa.uint32()),
        ("end", pa.uint32()),
        ("signature", pa.string()),
        ("corpus", pa.string()),
        ("root", pa.string()),
        ("path", pa.string()),
        ("language", pa.string()),
        ("edge_kind", pa.string()),
        ("reverse_edge", pa.bool_()),
    ]
)


def metadata_to_table(metadata: Metadata | None) -> pa.Table:
    """Convert metadata rules into a table with one row per rule.

    ``None`` produces an empty table with the same schema.
    """
    rows = [rule.as_dict() for rule in metadata] if metadata is not None else []
    return pa.Table.from_pylist(rows, schema=RULE_SCHEMA)


@overload
def read_inline_metadata(
    path: str | Path,
    *,
    return_metadata: Literal[False] = False,
    config: PyKIMConfig | None = None,
    loader: MetadataLoader | None = None,
) -> pa.Table: ...


@overload
def read_inline_metadata(
    path: str | Path,
    *,
    return_metadata: Literal[True],
    config: PyKIMConfig | None = None,
    loader: MetadataLoader | None = None,
) -> tuple[Metadata | None, pa.Table]: ...


def read_inline_metadata(
    path: str | Path,
    *,
    return_metadata: bool = False,
    config: PyKIMConfig | None = None,
    loader: MetadataLoader | None = None,
) -> pa.Table | tuple[Metadata | None, pa.Table]:
    """
    Read the inline metadata carried by a file.

    Parameters
    ----------
    path : str or Path
        File holding the inline metadata comment body.
    return_metadata : bool, default False
        If True, return a ``(Metadata or None, table)`` tuple.
    config : PyKIMConfig, optional
        Limits to apply; defaults to ``DEFAULT_CONFIG``.
    loader : MetadataLoader, optional
        Loader to use; defaults to ``KytheInlineMetadataLoader``.

    Returns
    -------
    pa.Table or tuple[Metadata | None, pa.Table]
        Table of rules with ``file_metadata`` and ``type`` embedded in the
        schema metadata. Files without inline metadata give an empty table.

    Raises
    ------
    FileNotFoundError
        If the specified file does not exist
    KIMResourceLimitError
        If the file exceeds ``config.parsing.max_file_size_mb``

    Examples
    --------
    >>> from pykim import read_inline_metadata
    >>> import polars as pl
    >>> table = read_inline_metadata("Foo.java.meta")
    >>> df = pl.from_arrow(table)
    >>> df.select("begin", "end", "signature")
    """
    config = config or DEFAULT_CONFIG
    loader = loader or KytheInlineMetadataLoader()
    path = Path(path)

    file_size = path.stat().st_size
    if file_size > config.parsing.max_file_size_bytes:
        raise KIMResourceLimitError(
            f"File too large ({file_size} bytes > {config.parsing.max_file_size_mb} MB): {path}"
        )

    data = path.read_bytes()
    metadata = loader.parse(str(path), data)
    table = metadata_to_table(metadata)

    file_metadata = {
        "file": path.name,
        "has_metadata": metadata is not None,
        "rule_count": table.num_rows,
        "file_hash": {
            "method": "BLAKE2b",
            "hash": hashlib.blake2b(data).hexdigest(),
        },
    }
    logger.debug(f"Loaded {table.num_rows} rules from {path}")

    table = set_metadata(
        table, tbl_meta={"file_metadata": file_metadata, "type": TABLE_TYPE}
    )
    if return_metadata:
        return metadata, table
    return table
