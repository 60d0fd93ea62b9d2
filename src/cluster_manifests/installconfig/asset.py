"""Install config asset and YAML loader.

The install config is the single upstream input of every manifest generator.
It is read from install-config.yaml in the asset directory, or supplied
directly when the caller already has a validated config.
"""

from __future__ import annotations

from pathlib import Path

import structlog
import yaml
from pydantic import ValidationError

from cluster_manifests.asset import (
    Asset,
    File,
    FileFetcher,
    Parents,
    WritableAsset,
    fetch_optional,
)
from cluster_manifests.errors import InstallConfigError
from cluster_manifests.installconfig.schemas import InstallConfig
from cluster_manifests.serialization import from_yaml, to_yaml

logger = structlog.get_logger(__name__)

INSTALL_CONFIG_FILENAME = "install-config.yaml"


def parse_install_config(data: bytes, source: str = INSTALL_CONFIG_FILENAME) -> InstallConfig:
    """Parse and validate install config YAML content.

    Args:
        data: Raw YAML content.
        source: Name used in error messages.

    Raises:
        InstallConfigError: If the YAML is malformed or fails validation.
    """
    try:
        raw = from_yaml(data)
    except (yaml.YAMLError, TypeError) as e:
        raise InstallConfigError(
            f"Invalid YAML syntax: {e}",
            details={"path": source},
        ) from e

    try:
        return InstallConfig.model_validate(raw)
    except ValidationError as e:
        errors = "; ".join(
            f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in e.errors()
        )
        raise InstallConfigError(
            f"Invalid install config: {errors}",
            details={"path": source},
        ) from e


def load_install_config(path: Path) -> InstallConfig:
    """Load install-config.yaml from disk.

    Raises:
        InstallConfigError: If the file is missing, malformed, or invalid.
    """
    if not path.exists():
        raise InstallConfigError(
            "Install config file not found",
            details={"path": str(path)},
        )
    try:
        data = path.read_bytes()
    except OSError as e:
        raise InstallConfigError(
            f"Cannot read install config: {e}",
            details={"path": str(path)},
        ) from e
    return parse_install_config(data, source=path.name)


class InstallConfigAsset(WritableAsset):
    """Asset wrapping a validated InstallConfig.

    Attributes:
        config: The install config, set at construction, by generate() or by load().
    """

    def __init__(self, config: InstallConfig | None = None) -> None:
        self.config = config
        self._files: list[File] = []

    @property
    def name(self) -> str:
        return "Install Config"

    def dependencies(self) -> list[type[Asset]]:
        return []

    def generate(self, parents: Parents) -> None:  # noqa: ARG002
        """Serialize the supplied config to install-config.yaml.

        Raises:
            InstallConfigError: If no config was supplied.
        """
        if self.config is None:
            raise InstallConfigError(
                f"{INSTALL_CONFIG_FILENAME} not found and no install config was provided"
            )
        self._files = [
            File(filename=INSTALL_CONFIG_FILENAME, data=to_yaml(self.config.to_yaml_dict()))
        ]

    def files(self) -> list[File]:
        return list(self._files)

    def load(self, fetcher: FileFetcher) -> bool:
        file = fetch_optional(fetcher, INSTALL_CONFIG_FILENAME)
        if file is None:
            return False

        self.config = parse_install_config(file.data)
        self._files = [file]
        logger.debug("install_config.loaded", base_domain=self.config.base_domain)
        return True


__all__ = [
    "INSTALL_CONFIG_FILENAME",
    "InstallConfigAsset",
    "load_install_config",
    "parse_install_config",
]
