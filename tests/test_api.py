"""
Unit tests for pykim API functions.
"""

import hashlib

import polars as pl
import pyarrow as pa
import pyarrow.parquet as pq
import pytest

from pykim import read_inline_metadata
from pykim.api.cli import main
from pykim.api.loaders import RULE_SCHEMA, metadata_to_table
from pykim.config import ParsingConfig, PyKIMConfig
from pykim.constants import TABLE_TYPE
from pykim.core import Metadata
from pykim.exceptions import KIMResourceLimitError
from pykim.util import get_metadata


class TestReadInlineMetadata:
    """Test read_inline_metadata function."""

    def test_basic(self, write_file, sample_payload):
        """Rules come back as table rows with embedded file metadata."""
        path = write_file("Foo.java.meta", sample_payload)

        table = read_inline_metadata(path)

        assert isinstance(table, pa.Table)
        assert table.num_rows == 3
        assert table.column("begin").to_pylist() == [12, 40, 40]
        assert table.column("signature").to_pylist() == [
            "Foo",
            "Foo.bar",
            "Foo.bar_baz",
        ]
        assert set(table.column("edge_kind").to_pylist()) == {
            "/kythe/edge/generates"
        }
        assert all(table.column("reverse_edge").to_pylist())
        assert get_metadata(table, "type") == TABLE_TYPE

        file_metadata = get_metadata(table, "file_metadata")
        assert file_metadata["file"] == "Foo.java.meta"
        assert file_metadata["has_metadata"] is True
        assert file_metadata["rule_count"] == 3
        assert file_metadata["file_hash"]["method"] == "BLAKE2b"

    def test_plain_file(self, write_file):
        """Files without inline metadata give an empty table."""
        path = write_file("Plain.java", b"class Plain {}\n")

        metadata, table = read_inline_metadata(path, return_metadata=True)

        assert metadata is None
        assert table.num_rows == 0
        assert table.schema.names == RULE_SCHEMA.names
        assert get_metadata(table, "file_metadata")["has_metadata"] is False

    def test_return_metadata(self, write_file, sample_payload):
        """return_metadata=True also yields the Metadata object."""
        path = write_file("Foo.java.meta", sample_payload)

        metadata, table = read_inline_metadata(path, return_metadata=True)

        assert isinstance(metadata, Metadata)
        assert len(metadata) == table.num_rows

    def test_file_not_found(self, tmp_path):
        """Missing files raise."""
        with pytest.raises(FileNotFoundError):
            read_inline_metadata(tmp_path / "missing.meta")

    def test_file_too_large(self, write_file):
        """Files over the configured limit are refused."""
        path = write_file("Big.java", b"x" * (1024 * 1024 + 1))
        config = PyKIMConfig(parsing=ParsingConfig(max_file_size_mb=1))

        with pytest.raises(KIMResourceLimitError):
            read_inline_metadata(path, config=config)

    def test_hash_covers_file_bytes(self, write_file, sample_payload):
        """The embedded hash is the BLAKE2b digest of the bytes parsed."""
        path = write_file("Foo.java.meta", sample_payload)

        table = read_inline_metadata(path)

        file_hash = get_metadata(table, "file_metadata")["file_hash"]
        assert file_hash["hash"] == hashlib.blake2b(sample_payload).hexdigest()

    def test_custom_loader(self, write_file, sample_payload):
        """A different loader can be supplied."""
        path = write_file("Foo.java.meta", sample_payload)

        class NoMetadata:
            def parse(self, file_name, data):
                return None

        assert read_inline_metadata(path, loader=NoMetadata()).num_rows == 0


class TestMetadataToTable:
    """Test metadata_to_table function."""

    def test_none(self):
        table = metadata_to_table(None)
        assert table.num_rows == 0
        assert table.schema.equals(RULE_SCHEMA)

    def test_polars_roundtrip(self, loader, sample_payload):
        """Tables convert cleanly to polars."""
        df = pl.from_arrow(metadata_to_table(loader.parse("Foo.java", sample_payload)))
        assert df.height == 3
        assert df["end"].to_list() == [15, 47, 52]


class TestMainCLI:
    """Test main CLI function."""

    def test_help(self):
        """--help exits cleanly."""
        with pytest.raises(SystemExit) as exc:
            main(["--help"])
        assert exc.value.code == 0

    def test_parquet_output(self, write_file, sample_payload, tmp_path):
        """Default format writes one Parquet file per input."""
        path = write_file("Foo.meta", sample_payload)
        out = tmp_path / "out"

        assert main([str(path), "-o", str(out)]) == 0

        table = pq.read_table(out / "Foo.meta.rules.parquet")
        assert table.num_rows == 3
        assert not (out / "Foo.meta.rules.csv").exists()

    def test_all_formats(self, write_file, sample_payload, tmp_path):
        """-f all writes Parquet and CSV."""
        first = write_file("Foo.meta", sample_payload)
        second = write_file("Plain.java", b"class Plain {}")
        out = tmp_path / "out"

        assert main([str(first), str(second), "-o", str(out), "-f", "all"]) == 0

        assert pl.read_csv(out / "Foo.meta.rules.csv").height == 3
        assert (out / "Plain.java.rules.parquet").exists()

    def test_missing_input(self, tmp_path, caplog):
        """A missing input makes the run fail."""
        missing = tmp_path / "missing.meta"
        assert main([str(missing), "-o", str(tmp_path)]) == 1
        assert "does not exist" in caplog.text

    def test_skip_errors(self, write_file, sample_payload, tmp_path, monkeypatch):
        """PYKIM_SKIP_ERRORS keeps the exit code at zero."""
        monkeypatch.setenv("PYKIM_SKIP_ERRORS", "true")
        good = write_file("Foo.meta", sample_payload)
        missing = tmp_path / "missing.meta"
        out = tmp_path / "out"

        assert main([str(missing), str(good), "-o", str(out)]) == 0
        assert (out / "Foo.meta.rules.parquet").exists()

    def test_too_large_input(self, write_file, tmp_path, monkeypatch, caplog):
        """Size limit errors are reported and fail the run."""
        monkeypatch.setenv("PYKIM_MAX_FILE_SIZE_MB", "1")
        big = write_file("Big.java", b"x" * (1024 * 1024 + 1))

        assert main([str(big), "-o", str(tmp_path / "out")]) == 1
        assert "File too large" in caplog.text

    def test_skip_empty(self, write_file, sample_payload, tmp_path):
        """--skip-empty writes nothing for files without inline metadata."""
        first = write_file("Foo.meta", sample_payload)
        plain = write_file("Plain.java", b"class Plain {}")
        out = tmp_path / "out"

        assert main([str(first), str(plain), "-o", str(out), "--skip-empty"]) == 0

        assert (out / "Foo.meta.rules.parquet").exists()
        assert not (out / "Plain.java.rules.parquet").exists()

    def test_same_stem_inputs(self, write_file, sample_payload, tmp_path):
        """Inputs sharing a stem get separate rule tables."""
        java = write_file("Foo.java", sample_payload)
        kotlin = write_file("Foo.kt", b"class Foo")
        out = tmp_path / "out"

        assert main([str(java), str(kotlin), "-o", str(out)]) == 0

        assert pq.read_table(out / "Foo.java.rules.parquet").num_rows == 3
        assert pq.read_table(out / "Foo.kt.rules.parquet").num_rows == 0

    def test_invalid_environment(
        self, write_file, sample_payload, tmp_path, monkeypatch, caplog
    ):
        """A non-numeric size limit is reported instead of raising."""
        monkeypatch.setenv("PYKIM_MAX_FILE_SIZE_MB", "lots")
        path = write_file("Foo.meta", sample_payload)

        assert main([str(path), "-o", str(tmp_path / "out")]) == 1
        assert "Invalid configuration" in caplog.text
