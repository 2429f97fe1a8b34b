"""Command-line interface for pykim."""

import argparse
import logging
import sys
from pathlib import Path

import polars as pl
import pyarrow as pa
import pyarrow.parquet as pq

from ..config import PyKIMConfig
from ..exceptions import KIMParseError
from .loaders import read_inline_metadata

logger = logging.getLogger(__name__)

RULES_SUFFIX = ".rules"


def create_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser.

    Returns:
        Configured ArgumentParser instance
    """
    parser = argparse.ArgumentParser(
        description="Extract Kythe inline metadata rules from generated files"
    )
    parser.add_argument("inputs", nargs="+", help="Generated file(s) to read")
    parser.add_argument("-o", "--output", help="Output directory", default=".")
    parser.add_argument(
        "-f",
        "--format",
        choices=["parquet", "csv", "all"],
        default="parquet",
        help="Output format for the rule tables",
    )
    parser.add_argument(
        "--skip-empty",
        action="store_true",
        help="Do not write tables for files without inline metadata",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable verbose logging"
    )
    return parser


def rules_base_path(input_path: Path, output_dir: Path) -> Path:
    """Base path for the rule tables of ``input_path``.

    The full input name is kept so ``Foo.java`` and ``Foo.kt`` do not
    overwrite each other: ``out/Foo.java.rules``.
    """
    return output_dir / f"{input_path.name}{RULES_SUFFIX}"


def write_rules(rules: pa.Table, base_path: Path, output_format: str) -> list[Path]:
    """Write a rule table next to ``base_path`` in the requested format(s).

    Parquet keeps the embedded file metadata; CSV holds only the rule rows.

    Returns:
        Paths written
    """
    written = []
    if output_format in ("parquet", "all"):
        target = base_path.with_name(base_path.name + ".parquet")
        pq.write_table(rules, target, compression="snappy")
        written.append(target)
    if output_format in ("csv", "all"):
        target = base_path.with_name(base_path.name + ".csv")
        pl.from_arrow(rules).write_csv(target)
        written.append(target)
    for target in written:
        logger.debug(f"Wrote {rules.num_rows} rules to {target}")
    return written


def process_file(
    input_file: str,
    output_dir: Path,
    output_format: str,
    config: PyKIMConfig,
    skip_empty: bool = False,
) -> int:
    """Extract the rules of one file and write them out.

    Returns:
        Number of rules found
    """
    input_path = Path(input_file)
    metadata, rules = read_inline_metadata(
        input_path, config=config, return_metadata=True
    )
    if metadata is None:
        logger.info(f"No inline metadata in {input_file}")
        if skip_empty:
            return 0
    write_rules(rules, rules_base_path(input_path, output_dir), output_format)
    return rules.num_rows


def main(argv: list[str] | None = None) -> int:
    """Command-line interface for the inline metadata loader.

    Usage:
        python -m pykim input [input ...] [options]

    Examples:
        # Write Foo.java.rules.parquet into the current directory
        python -m pykim Foo.java

        # Write CSV for several files, skipping those without metadata
        python -m pykim gen/*.java -f csv --skip-empty -o out/

    Args:
        argv: Command-line arguments (defaults to sys.argv)

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(level=(logging.DEBUG if args.verbose else logging.INFO))

    try:
        config = PyKIMConfig.from_env()
        output_dir = Path(args.output)
        output_dir.mkdir(parents=True, exist_ok=True)
    except ValueError as e:
        logger.error(f"Invalid configuration: {e}")
        return 1
    except OSError as e:
        logger.error(f"Cannot create output directory {args.output}: {e}")
        return 1

    failed = 0
    total_rules = 0
    for input_file in args.inputs:
        try:
            total_rules += process_file(
                input_file, output_dir, args.format, config, args.skip_empty
            )
        except Exception as e:
            match e:
                case KIMParseError():
                    logger.error(str(e))
                case FileNotFoundError():
                    logger.error(f"Input file does not exist: {input_file}")
                case OSError():
                    logger.error(f"OS error while processing file {input_file}: {e}")
                case _:
                    logger.error(
                        f"Unexpected error while processing file {input_file}: {e}"
                    )
            failed += 1

    logger.info(
        f"Extracted {total_rules} rules from {len(args.inputs) - failed} of "
        f"{len(args.inputs)} files"
    )
    if failed and not config.batch.skip_errors:
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
