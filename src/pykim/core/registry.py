"""
Ordered registry of metadata loaders.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from .loader import MetadataLoader
from .metadata import Metadata

__all__ = ["MetadataLoaders"]

logger = logging.getLogger(__name__)


class MetadataLoaders:
    """Tries each registered loader in turn until one yields metadata.

    The registry is itself a :class:`MetadataLoader`, so it can be passed
    wherever a single loader is expected.

    Example:
        >>> loaders = MetadataLoaders([KytheInlineMetadataLoader()])
        >>> loaders.parse("Foo.java", data)
    """

    def __init__(self, loaders: Iterable[MetadataLoader] = ()) -> None:
        self._loaders: list[MetadataLoader] = []
        for loader in loaders:
            self.add_loader(loader)

    def add_loader(self, loader: MetadataLoader) -> None:
        if not isinstance(loader, MetadataLoader):
            raise TypeError(f"Not a metadata loader: {loader!r}")
        self._loaders.append(loader)

    @property
    def loaders(self) -> list[MetadataLoader]:
        return list(self._loaders)

    def parse(self, file_name: str, data: bytes | None) -> Metadata | None:
        for loader in self._loaders:
            metadata = loader.parse(file_name, data)
            if metadata is not None:
                logger.debug(
                    f"{type(loader).__name__} loaded {len(metadata)} rules from {file_name}"
                )
                return metadata
        return None

    def __len__(self) -> int:
        return len(self._loaders)
