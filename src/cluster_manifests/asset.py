"""Asset contract for generated cluster manifests.

An asset is a unit of generated output with declared dependencies. Writable
assets additionally expose the files they produce and can re-load those files
from a previous run.

Lifecycle:
    dependencies() -> generate(parents) -> files()
    or, when output already exists on disk:
    load(fetcher) -> files()

Example:
    >>> from cluster_manifests.asset import Parents, DirectoryFileFetcher
    >>> from cluster_manifests.manifests import Networking
    >>> networking = Networking()
    >>> if not networking.load(DirectoryFileFetcher(Path("assets"))):
    ...     networking.generate(parents)
    >>> [f.filename for f in networking.files()]
    ['manifests/cluster-network-01-crd.yml', 'manifests/cluster-network-02-config.yml']
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import TypeVar

import structlog
from pydantic import BaseModel, ConfigDict, Field, field_validator

from cluster_manifests.errors import AssetDependencyError, ManifestLoadError

logger = structlog.get_logger(__name__)

A = TypeVar("A", bound="Asset")


class File(BaseModel):
    """A generated file: relative path plus raw content.

    Attributes:
        filename: Path relative to the asset directory, using forward slashes.
        data: Raw file content.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    filename: str = Field(..., min_length=1, description="Relative file path")
    data: bytes = Field(default=b"", description="Raw file content")

    @field_validator("filename", mode="after")
    @classmethod
    def validate_filename(cls, v: str) -> str:
        """Reject absolute paths and parent traversal."""
        path = Path(v)
        if path.is_absolute() or ".." in path.parts:
            raise ValueError(f"File name must be relative to the asset directory: {v}")
        return path.as_posix()


class Asset(ABC):
    """Abstract base class for a generated asset.

    Concrete assets must implement:
        - name property
        - dependencies() method
        - generate() method
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-friendly name of the asset."""
        ...

    @abstractmethod
    def dependencies(self) -> list[type[Asset]]:
        """Return the asset types that must be generated before this one."""
        ...

    @abstractmethod
    def generate(self, parents: Parents) -> None:
        """Generate the asset from its resolved dependencies.

        Args:
            parents: Container holding every dependency listed by
                dependencies(), already generated or loaded.
        """
        ...


class WritableAsset(Asset):
    """An asset whose output is a set of files."""

    @abstractmethod
    def files(self) -> list[File]:
        """Return the files produced by generate() or load()."""
        ...

    @abstractmethod
    def load(self, fetcher: FileFetcher) -> bool:
        """Load previously written files back into the asset.

        Args:
            fetcher: Source of previously written files.

        Returns:
            True if the asset was loaded, False if its files do not exist yet.
        """
        ...


class Parents:
    """Already-generated dependencies, keyed by asset class."""

    def __init__(self) -> None:
        self._assets: dict[type[Asset], Asset] = {}

    def add(self, *assets: Asset) -> None:
        """Store generated dependency instances."""
        for asset in assets:
            self._assets[type(asset)] = asset

    def get(self, asset_type: type[A]) -> A:
        """Return the stored instance of asset_type.

        Raises:
            AssetDependencyError: If asset_type was never added.
        """
        asset = self._assets.get(asset_type)
        if asset is None:
            raise AssetDependencyError(asset_type.__name__)
        return asset  # type: ignore[return-value]

    def __contains__(self, asset_type: object) -> bool:
        return asset_type in self._assets


class FileFetcher(ABC):
    """Source of previously written asset files."""

    @abstractmethod
    def fetch_by_name(self, name: str) -> File:
        """Fetch a single file by its relative name.

        Raises:
            FileNotFoundError: If the file does not exist.
        """
        ...

    @abstractmethod
    def fetch_by_pattern(self, pattern: str) -> list[File]:
        """Fetch all files matching a glob pattern, sorted by name."""
        ...


class DirectoryFileFetcher(FileFetcher):
    """FileFetcher that reads files below a directory on disk."""

    def __init__(self, directory: Path) -> None:
        self.directory = directory

    def fetch_by_name(self, name: str) -> File:
        data = (self.directory / name).read_bytes()
        logger.debug("fetcher.fetched", filename=name, size=len(data))
        return File(filename=name, data=data)

    def fetch_by_pattern(self, pattern: str) -> list[File]:
        matches = sorted(p for p in self.directory.glob(pattern) if p.is_file())
        return [
            File(filename=p.relative_to(self.directory).as_posix(), data=p.read_bytes())
            for p in matches
        ]


def fetch_optional(fetcher: FileFetcher, filename: str) -> File | None:
    """Fetch a file that may not have been generated yet.

    Returns:
        The file, or None if it does not exist.

    Raises:
        ManifestLoadError: For any read failure other than absence.
    """
    try:
        return fetcher.fetch_by_name(filename)
    except FileNotFoundError:
        logger.debug("fetcher.not_found", filename=filename)
        return None
    except OSError as e:
        raise ManifestLoadError(f"failed to read {filename}: {e}", filename=filename) from e


def write_files(asset: WritableAsset, directory: Path) -> list[Path]:
    """Write every file of a writable asset below directory.

    Parent directories are created as needed and existing files are
    overwritten.

    Args:
        asset: Generated or loaded asset.
        directory: Root directory for the asset files.

    Returns:
        List of written file paths, in asset order.
    """
    written: list[Path] = []
    for file in asset.files():
        path = directory / file.filename
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(file.data)
        written.append(path)

    logger.info("asset.written", asset=asset.name, files=len(written), directory=str(directory))
    return written


__all__ = [
    "Asset",
    "DirectoryFileFetcher",
    "File",
    "FileFetcher",
    "Parents",
    "WritableAsset",
    "fetch_optional",
    "write_files",
]
