"""Configuration validation for pykim constants."""

import logging

logger = logging.getLogger(__name__)


def validate_prefix() -> None:
    """Validate the inline metadata marker at import time.

    Raises:
        KIMConfigurationError: If the marker is empty, not ASCII, or out of
            sync with its byte form
    """
    from pykim.constants import ANNOTATION_PREFIX, ANNOTATION_PREFIX_STRING
    from pykim.exceptions import KIMConfigurationError

    errors = []
    if not ANNOTATION_PREFIX_STRING:
        errors.append("ANNOTATION_PREFIX_STRING cannot be empty")
    if not ANNOTATION_PREFIX_STRING.isascii():
        errors.append(
            f"ANNOTATION_PREFIX_STRING ({ANNOTATION_PREFIX_STRING!r}) must be ASCII"
        )
    if ANNOTATION_PREFIX != ANNOTATION_PREFIX_STRING.encode("utf-8"):
        errors.append("ANNOTATION_PREFIX does not match ANNOTATION_PREFIX_STRING")

    if errors:
        raise KIMConfigurationError(
            "Invalid inline metadata marker:\n"
            + "\n".join(f"  - {e}" for e in errors)
        )


def validate_edge_kinds() -> None:
    """Validate that every edge kind is a Kythe edge.

    Raises:
        KIMConfigurationError: If an edge kind lacks the ``/kythe/edge/`` prefix
    """
    from pykim.constants import EdgeKind
    from pykim.exceptions import KIMConfigurationError

    errors = [
        f"Edge kind {kind.name} has invalid value '{kind.value}'"
        for kind in EdgeKind
        if not kind.value.startswith("/kythe/edge/")
    ]
    if errors:
        raise KIMConfigurationError(
            "Invalid EdgeKind values:\n" + "\n".join(f"  - {e}" for e in errors)
        )


def validate_all_configs() -> None:
    """Run all configuration validations.

    Raises:
        KIMConfigurationError: If any configuration validation fails
    """
    validate_prefix()
    validate_edge_kinds()
    logger.debug("All configuration validations passed")


# Run validation at import time
validate_all_configs()
