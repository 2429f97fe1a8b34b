"""
Shared fixtures for pykim tests.
"""

import base64

import pytest

from pykim.constants import ANNOTATION_PREFIX
from pykim.core import KytheInlineMetadataLoader, encode_rules
from pykim.proto import VName


def _make_vname(signature: str, path: str = "src/foo.proto") -> VName:
    return VName(
        signature=signature,
        corpus="kythe",
        root="",
        path=path,
        language="protobuf",
    )


@pytest.fixture
def make_vname():
    """Factory for VName messages."""
    return _make_vname


@pytest.fixture
def loader():
    """Fresh inline metadata loader."""
    return KytheInlineMetadataLoader()


@pytest.fixture
def sample_rules():
    """Three mapping rules in file order."""
    return [
        (12, 15, _make_vname("Foo")),
        (40, 47, _make_vname("Foo.bar")),
        (40, 52, _make_vname("Foo.bar_baz")),
    ]


@pytest.fixture
def sample_payload(sample_rules):
    """Inline metadata comment body carrying ``sample_rules``."""
    return encode_rules(sample_rules)


@pytest.fixture
def truncated_proto_payload():
    """Valid base64 whose bytes are a truncated GeneratedCodeInfo."""
    # Field 2 (meta), length-delimited, claims 5 bytes but carries 2.
    return ANNOTATION_PREFIX + base64.b64encode(b"\x12\x05ab")


@pytest.fixture
def write_file(tmp_path):
    """Write bytes to a file under ``tmp_path`` and return its path."""

    def _write(name: str, data: bytes):
        path = tmp_path / name
        path.write_bytes(data)
        return path

    return _write
