"""cluster-manifests: networking and DNS operator manifests from an install config.

This package provides:
- Networking: NetworkConfig CRD + config manifest generator
- ClusterDNSOperator: DNS operator bundle + ClusterDNS config generator
- InstallConfig, InstallConfigAsset: the typed upstream input
- Asset, WritableAsset, Parents, FileFetcher: the asset contract
- AssetStore: dependency resolution with load-or-generate
- ManifestSettings: defaulting policy constants
- ManifestError and subclasses: error hierarchy

Example:
    >>> from cluster_manifests import AssetStore, InstallConfig, InstallConfigAsset, Networking
    >>> config = InstallConfig.model_validate(yaml.safe_load(text))
    >>> store = AssetStore(Path("assets"), InstallConfigAsset(config))
    >>> store.write(Networking)
"""

from __future__ import annotations

from typing import Any

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Asset contract
    "Asset",
    "DirectoryFileFetcher",
    "File",
    "FileFetcher",
    "Parents",
    "WritableAsset",
    "write_files",
    "AssetStore",
    # Install config
    "InstallConfig",
    "InstallConfigAsset",
    "NetworkingConfig",
    # Generators
    "ClusterDNSOperator",
    "Networking",
    # Settings
    "ManifestSettings",
    # Errors
    "ManifestError",
]

_ASSET_NAMES = {
    "Asset",
    "DirectoryFileFetcher",
    "File",
    "FileFetcher",
    "Parents",
    "WritableAsset",
    "write_files",
}
_INSTALL_CONFIG_NAMES = {"InstallConfig", "InstallConfigAsset", "NetworkingConfig"}


def __getattr__(name: str) -> Any:
    """Lazy import of public components."""
    if name in _ASSET_NAMES:
        from cluster_manifests import asset

        return getattr(asset, name)
    if name in _INSTALL_CONFIG_NAMES:
        from cluster_manifests import installconfig

        return getattr(installconfig, name)
    if name in {"ClusterDNSOperator", "Networking"}:
        from cluster_manifests import manifests

        return getattr(manifests, name)
    if name == "AssetStore":
        from cluster_manifests.store import AssetStore

        return AssetStore
    if name == "ManifestSettings":
        from cluster_manifests.settings import ManifestSettings

        return ManifestSettings
    if name == "ManifestError":
        from cluster_manifests.errors import ManifestError

        return ManifestError
    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
