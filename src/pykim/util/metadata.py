"""Arrow schema metadata helpers."""

import json
from typing import Any

import pyarrow as pa


def set_metadata(table: pa.Table, tbl_meta: dict[str, Any]) -> pa.Table:
    """Return ``table`` with ``tbl_meta`` merged into its schema metadata.

    Non-string values are stored as JSON so they survive a Parquet round trip.

    Args:
        table: Table to annotate
        tbl_meta: Key/value pairs to add

    Returns:
        A new table sharing the same columns
    """
    existing = dict(table.schema.metadata or {})
    for key, value in tbl_meta.items():
        encoded = value if isinstance(value, str) else json.dumps(value)
        existing[key.encode()] = encoded.encode()
    return table.replace_schema_metadata(existing)


def get_metadata(table: pa.Table, key: str) -> Any | None:
    """Read back a value stored with :func:`set_metadata`."""
    raw = (table.schema.metadata or {}).get(key.encode())
    if raw is None:
        return None
    try:
        return json.loads(raw)
    except json.JSONDecodeError:
        return raw.decode()
