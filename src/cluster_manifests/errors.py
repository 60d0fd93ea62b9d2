"""Exception types for cluster-manifests.

All exceptions inherit from ManifestError so callers (and the CLI) can use a
single catch-all for manifest generation failures.

Exception Hierarchy:
    ManifestError (base)
    ├── InstallConfigError - Install config missing, invalid or unusable
    ├── NetworkingNotSpecifiedError - Neither pod CIDR nor cluster networks set
    ├── ManifestSerializationError - Typed config could not be marshaled to YAML
    ├── ManifestLoadError - Previously written file could not be read or parsed
    ├── AssetDependencyError - Parent asset was not resolved before generate
    └── AssetNotInitializedError - Accessor called before generate/load

A missing file during load is NOT an error: load() returns False so the
caller falls back to generation.

Example:
    >>> from cluster_manifests.errors import ManifestError, ManifestLoadError
    >>> try:
    ...     networking.load(fetcher)
    ... except ManifestLoadError as e:
    ...     print(e)
"""

from __future__ import annotations

from typing import Any


class ManifestError(Exception):
    """Base exception for all cluster-manifests errors.

    Attributes:
        message: Human-readable error description.
        details: Optional dictionary with additional error context.
    """

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        """Return string representation of the error."""
        if self.details:
            details_str = ", ".join(f"{k}={v}" for k, v in self.details.items())
            return f"{self.message} ({details_str})"
        return self.message


class InstallConfigError(ManifestError):
    """Install config is missing, malformed, or cannot supply a derived value.

    Example:
        >>> raise InstallConfigError(
        ...     "Invalid YAML syntax in install-config.yaml",
        ...     details={"path": "install-config.yaml"},
        ... )
    """

    pass


class NetworkingNotSpecifiedError(ManifestError):
    """Neither cluster networks nor a usable pod CIDR were configured.

    This is a user-facing configuration error: the install config must name
    at least one pod address source.
    """

    def __init__(self, message: str = "Either PodCIDR or ClusterNetworks must be specified") -> None:
        super().__init__(message)


class ManifestSerializationError(ManifestError):
    """A typed manifest could not be marshaled to YAML.

    Attributes:
        asset_name: Human-friendly name of the asset being generated.
    """

    def __init__(
        self,
        message: str,
        asset_name: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        _details = details or {}
        if asset_name:
            _details["asset"] = asset_name
        super().__init__(message, _details)
        self.asset_name = asset_name


class ManifestLoadError(ManifestError):
    """A previously generated file exists but could not be read or parsed.

    Attributes:
        filename: Relative name of the offending file.
    """

    def __init__(
        self,
        message: str,
        filename: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, details)
        self.filename = filename


class AssetDependencyError(ManifestError):
    """A dependency was requested from Parents but never added.

    Attributes:
        asset_type: Name of the missing asset class.
    """

    def __init__(self, asset_type: str) -> None:
        super().__init__(
            f"Dependency {asset_type} has not been generated",
            {"asset_type": asset_type},
        )
        self.asset_type = asset_type


class AssetNotInitializedError(ManifestError):
    """A derived-state accessor was called before generate() or load()."""

    pass


__all__ = [
    "AssetDependencyError",
    "AssetNotInitializedError",
    "InstallConfigError",
    "ManifestError",
    "ManifestLoadError",
    "ManifestSerializationError",
    "NetworkingNotSpecifiedError",
]
