"""
Loader for inline metadata appended to generated source files.
"""

from __future__ import annotations

import base64
import binascii
import logging
from typing import Any, Protocol, runtime_checkable

from google.protobuf.message import DecodeError

from ..constants import ANNOTATION_PREFIX, ANNOTATION_PREFIX_STRING, EdgeKind
from ..exceptions import KIMPayloadError
from ..proto import GeneratedCodeInfo, VName
from .metadata import Metadata, Rule

__all__ = [
    "GENERATES_EDGE",
    "KytheInlineMetadataLoader",
    "MetadataLoader",
    "REVERSE_EDGE",
]

logger = logging.getLogger(__name__)

# Every inline rule marks its span as generated by the target node.
GENERATES_EDGE = EdgeKind.GENERATES
REVERSE_EDGE = True


@runtime_checkable
class MetadataLoader(Protocol):
    """Something that can turn the contents of a file into metadata."""

    def parse(self, file_name: str, data: bytes | None) -> Metadata | None:
        """Return metadata for ``data``, or None if it carries none."""
        ...


class KytheInlineMetadataLoader:
    """Loads inline metadata from files produced by code generators.

    The generator writes its metadata as a comment on the last line of the
    output file: the marker ``kythe-inline-metadata:`` followed by a base64
    encoded ``GeneratedCodeInfo`` message. The message maps spans of the
    generated file to the symbols of the source it was generated from.
    Callers pass the bytes of that comment to :meth:`parse`.

    Example:
        >>> loader = KytheInlineMetadataLoader()
        >>> loader.parse("Foo.java", b"package foo;") is None
        True
        >>> metadata = loader.parse("Foo.java", comment_bytes)
        >>> [(r.begin, r.end) for r in metadata]
        [(12, 15)]

    Note:
        ``parse`` never raises for byte input. Files without the marker are
        ignored silently; undecodable payloads are logged as warnings.
    """

    def parse(self, file_name: str, data: bytes | None) -> Metadata | None:
        if not self._is_codegen_file(data):
            return None
        try:
            info = self._extract_metadata(data, file_name)
        except KIMPayloadError as e:
            logger.warning(
                "Error parsing GeneratedCodeInfo from file: %s",
                file_name,
                exc_info=e,
            )
            return None
        if info is None:
            logger.warning("Error parsing GeneratedCodeInfo from file: %s", file_name)
            return None
        return self._construct_metadata(info)

    @staticmethod
    def _is_codegen_file(data: bytes | None) -> bool:
        if data is None or len(data) < len(ANNOTATION_PREFIX):
            return False
        return data[: len(ANNOTATION_PREFIX)] == ANNOTATION_PREFIX

    @staticmethod
    def _extract_metadata(data: bytes, file_name: str) -> Any:
        """Decode the payload following the marker.

        Trailing ``=`` padding is optional. After it is stripped, a payload
        whose length is 1 modulo 4 cannot be base64 and is rejected.

        Raises:
            KIMPayloadError: If the payload is not valid base64 or not a
                serialized GeneratedCodeInfo message
        """
        text = bytes(data).decode("utf-8", errors="replace")
        encoded = text[len(ANNOTATION_PREFIX_STRING) :]
        unpadded = encoded.rstrip("=")
        if len(unpadded) % 4 == 1:
            raise KIMPayloadError(
                f"Invalid base64 payload: {len(unpadded)} characters "
                "is not a valid length",
                file_name,
            )
        try:
            proto_data = base64.b64decode(
                unpadded + "=" * (-len(unpadded) % 4), validate=True
            )
        except (binascii.Error, ValueError) as e:
            raise KIMPayloadError(f"Invalid base64 payload: {e}", file_name) from e
        try:
            return GeneratedCodeInfo.FromString(proto_data)
        except (DecodeError, UnicodeDecodeError) as e:
            # Pure-Python protobuf reports bad UTF-8 in string fields this way.
            raise KIMPayloadError(
                f"Invalid GeneratedCodeInfo payload: {e}", file_name
            ) from e

    @staticmethod
    def _construct_metadata(info: Any) -> Metadata:
        metadata = Metadata()
        for mapping in info.meta:
            vname = VName()
            vname.CopyFrom(mapping.vname)
            metadata.add_rule(
                Rule(
                    begin=mapping.begin,
                    end=mapping.end,
                    vname=vname,
                    edge_out=GENERATES_EDGE,
                    reverse_edge=REVERSE_EDGE,
                )
            )
        return metadata
