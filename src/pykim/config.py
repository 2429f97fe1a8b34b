"""Centralized configuration for pykim.

This module provides configuration classes for reading files and for
processing several files from the command line.
"""

import os
from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class ParsingConfig:
    """Configuration for reading files from disk.

    Attributes:
        max_file_size_mb: Maximum file size in MB to load (default: 64)
    """

    max_file_size_mb: int = 64

    def __post_init__(self) -> None:
        """Validate parsing configuration."""
        if self.max_file_size_mb <= 0:
            raise ValueError("max_file_size_mb must be positive")

    @property
    def max_file_size_bytes(self) -> int:
        return self.max_file_size_mb * 1024 * 1024


@dataclass(frozen=True, slots=True)
class BatchConfig:
    """Configuration for processing several files.

    Attributes:
        skip_errors: Whether to skip files with errors (default: False)
    """

    skip_errors: bool = False


@dataclass
class PyKIMConfig:
    """Main configuration container for pykim.

    Attributes:
        parsing: Configuration for reading files
        batch: Configuration for multi-file processing

    Examples:
        >>> config = PyKIMConfig()
        >>> config = PyKIMConfig(
        ...     parsing=ParsingConfig(max_file_size_mb=8),
        ...     batch=BatchConfig(skip_errors=True),
        ... )
        >>> config.parsing.max_file_size_mb
        8
    """

    parsing: ParsingConfig = field(default_factory=ParsingConfig)
    batch: BatchConfig = field(default_factory=BatchConfig)

    @classmethod
    def from_env(cls) -> "PyKIMConfig":
        """Create configuration from environment variables.

        Supported environment variables:
        - PYKIM_MAX_FILE_SIZE_MB: Maximum file size in MB
        - PYKIM_SKIP_ERRORS: Whether to skip files with errors (true/false)

        Returns:
            Configuration instance with values from environment
        """
        parsing_config = ParsingConfig(
            max_file_size_mb=int(os.getenv("PYKIM_MAX_FILE_SIZE_MB", "64"))
        )
        batch_config = BatchConfig(
            skip_errors=os.getenv("PYKIM_SKIP_ERRORS", "false").lower() == "true",
        )
        return cls(parsing=parsing_config, batch=batch_config)


# Global default configuration
DEFAULT_CONFIG = PyKIMConfig()


__all__ = [
    "DEFAULT_CONFIG",
    "BatchConfig",
    "ParsingConfig",
    "PyKIMConfig",
]
