"""
Custom exceptions for Kythe inline metadata loading.
"""

__all__ = [
    "KIMConfigurationError",
    "KIMParseError",
    "KIMPayloadError",
    "KIMResourceLimitError",
]


class KIMParseError(Exception):
    """Base exception for inline metadata errors."""


class KIMConfigurationError(KIMParseError):
    """Raised when configuration validation fails."""


class KIMPayloadError(KIMParseError):
    """Raised when an inline metadata payload cannot be decoded.

    Attributes:
        file_name: Name of the file the payload came from
    """

    def __init__(self, message: str, file_name: str | None = None) -> None:
        super().__init__(message)
        self.file_name = file_name


class KIMResourceLimitError(KIMParseError):
    """Raised when resource limit exceeded (file size, etc.)."""
