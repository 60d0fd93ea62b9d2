"""Minimal asset store: resolve dependencies, load or generate, then write.

Each asset type is materialized at most once per store. Assets handed to the
store up front are generated from the state they were constructed with; all
other assets are first loaded from the store directory and only generated
when their files do not exist yet.

Example:
    >>> store = AssetStore(Path("assets"), InstallConfigAsset(install_config))
    >>> store.write(Networking)
    [PosixPath('assets/manifests/cluster-network-01-crd.yml'), ...]
"""

from __future__ import annotations

from pathlib import Path
from typing import TypeVar

import structlog

from cluster_manifests.asset import (
    Asset,
    DirectoryFileFetcher,
    Parents,
    WritableAsset,
    write_files,
)

logger = structlog.get_logger(__name__)

A = TypeVar("A", bound=Asset)


class AssetStore:
    """Directory-backed asset store.

    Attributes:
        directory: Root directory for asset files.
    """

    def __init__(self, directory: Path, *assets: Asset) -> None:
        self.directory = directory
        self._fetcher = DirectoryFileFetcher(directory)
        self._provided: dict[type[Asset], Asset] = {type(a): a for a in assets}
        self._resolved: dict[type[Asset], Asset] = {}

    def fetch(self, asset_type: type[A]) -> A:
        """Return a generated or loaded instance of asset_type.

        Dependencies are resolved depth-first before the asset itself.
        """
        if asset_type in self._resolved:
            return self._resolved[asset_type]  # type: ignore[return-value]

        provided = asset_type in self._provided
        asset = self._provided[asset_type] if provided else asset_type()

        parents = Parents()
        for dependency in asset.dependencies():
            parents.add(self.fetch(dependency))

        if not provided and isinstance(asset, WritableAsset) and asset.load(self._fetcher):
            logger.info("store.loaded", asset=asset.name)
        else:
            asset.generate(parents)
            logger.info("store.generated", asset=asset.name)

        self._resolved[asset_type] = asset
        return asset  # type: ignore[return-value]

    def write(self, asset_type: type[WritableAsset]) -> list[Path]:
        """Fetch asset_type and persist its files below the store directory."""
        asset = self.fetch(asset_type)
        return write_files(asset, self.directory)


__all__ = ["AssetStore"]
