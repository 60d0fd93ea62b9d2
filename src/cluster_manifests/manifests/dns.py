"""Cluster DNS operator manifest generator.

Produces the DNS operator install bundle plus the ClusterDNS configuration:

    cluster-dns-operator/<asset>     operator bundle, sorted by name
    cluster-dns-operator-config.yml  generated ClusterDNS

Both live at the asset root, outside the manifest directory.

Example:
    >>> dns = ClusterDNSOperator()
    >>> dns.generate(parents)
    >>> dns.cluster_dns().spec.cluster_ip
    '172.30.0.10'
"""

from __future__ import annotations

from collections.abc import Callable

import structlog
import yaml
from opentelemetry import trace
from pydantic import ValidationError

from cluster_manifests.asset import (
    Asset,
    File,
    FileFetcher,
    Parents,
    WritableAsset,
    fetch_optional,
)
from cluster_manifests.errors import (
    AssetNotInitializedError,
    ManifestLoadError,
    ManifestSerializationError,
)
from cluster_manifests.installconfig import InstallConfigAsset, cluster_dns_ip
from cluster_manifests.manifests.dns_operator_assets import operator_asset_content
from cluster_manifests.schemas.dnsoperator import ClusterDNS, ClusterDNSSpec
from cluster_manifests.schemas.meta import ObjectMeta
from cluster_manifests.serialization import from_yaml, to_yaml
from cluster_manifests.settings import DEFAULT_SETTINGS, ManifestSettings

logger = structlog.get_logger(__name__)


def _get_tracer() -> trace.Tracer:
    """Return the module tracer; non-recording unless an SDK is installed."""
    return trace.get_tracer(__name__)


ASSET_DIR = "cluster-dns-operator"
CONFIG_FILENAME = "cluster-dns-operator-config.yml"


class ClusterDNSOperator(WritableAsset):
    """Generates the cluster-dns-operator-*.yml files.

    Attributes:
        settings: Generation policy settings.
        asset_source: Callable returning the operator bundle as name -> bytes.
    """

    def __init__(
        self,
        settings: ManifestSettings | None = None,
        asset_source: Callable[[], dict[str, bytes]] = operator_asset_content,
    ) -> None:
        self.settings = settings or DEFAULT_SETTINGS
        self.asset_source = asset_source
        self._config: ClusterDNS | None = None
        self._files: list[File] = []

    @property
    def name(self) -> str:
        return "Cluster DNS Operator"

    @property
    def asset_dir(self) -> str:
        return ASSET_DIR

    @property
    def config_filename(self) -> str:
        return CONFIG_FILENAME

    def dependencies(self) -> list[type[Asset]]:
        return [InstallConfigAsset]

    def generate(self, parents: Parents) -> None:
        """Generate the DNS operator bundle and its ClusterDNS config.

        Raises:
            AssetDependencyError: If the install config was not resolved.
            InstallConfigError: If the cluster DNS IP cannot be derived.
            ManifestSerializationError: If the config cannot be marshaled.
        """
        install_config = parents.get(InstallConfigAsset).config
        if install_config is None:
            raise AssetNotInitializedError("Install config asset has no config")

        with _get_tracer().start_as_current_span(
            "cluster_dns_operator.generate",
            attributes={"dns.cluster_domain": install_config.base_domain},
        ) as span:
            config = ClusterDNS(
                metadata=ObjectMeta(name=self.settings.dns_config_name),
                spec=ClusterDNSSpec(
                    cluster_ip=cluster_dns_ip(install_config),
                    cluster_domain=install_config.base_domain,
                ),
            )
            span.set_attribute("dns.cluster_ip", config.spec.cluster_ip)

            try:
                config_data = to_yaml(config.to_k8s_manifest())
            except yaml.YAMLError as e:
                raise ManifestSerializationError(
                    f"failed to create {self.name} manifests from InstallConfig: {e}",
                    asset_name=self.name,
                ) from e

            asset_data = self.asset_source()
            files = [
                File(filename=f"{self.asset_dir}/{key}", data=asset_data[key])
                for key in sorted(asset_data)
            ]
            files.append(File(filename=self.config_filename, data=config_data))
            span.set_attribute("dns.files_count", len(files))

        self._config = config
        self._files = files

        logger.info(
            "cluster_dns_operator.generate.completed",
            cluster_ip=config.spec.cluster_ip,
            cluster_domain=config.spec.cluster_domain,
            files=len(files),
        )

    def files(self) -> list[File]:
        """Return the files generated by the asset."""
        return list(self._files)

    def cluster_dns(self) -> ClusterDNS:
        """Return the derived ClusterDNS object.

        Raises:
            AssetNotInitializedError: If called before generate() or load().
        """
        if self._config is None:
            raise AssetNotInitializedError("ClusterDNS called before initialization")
        return self._config

    def load(self, fetcher: FileFetcher) -> bool:
        """Load the operator bundle and config back from disk.

        Returns:
            True if loaded, False if the config or the bundle does not exist.

        Raises:
            ManifestLoadError: If a file cannot be read or the config cannot be parsed.
        """
        with _get_tracer().start_as_current_span("cluster_dns_operator.load") as span:
            cfg_file = fetch_optional(fetcher, self.config_filename)
            if cfg_file is None:
                span.set_attribute("dns.loaded", False)
                return False

            try:
                asset_files = fetcher.fetch_by_pattern(f"{self.asset_dir}/*")
            except OSError as e:
                raise ManifestLoadError(
                    f"failed to read {self.asset_dir}: {e}", filename=self.asset_dir
                ) from e
            if not asset_files:
                logger.debug("manifest.not_found", filename=self.asset_dir)
                span.set_attribute("dns.loaded", False)
                return False

            try:
                config = ClusterDNS.from_k8s_manifest(from_yaml(cfg_file.data))
            except (yaml.YAMLError, TypeError, ValidationError) as e:
                raise ManifestLoadError(
                    f"failed to unmarshal {self.config_filename}: {e}",
                    filename=self.config_filename,
                ) from e

            span.set_attribute("dns.loaded", True)

        self._files = [*sorted(asset_files, key=lambda f: f.filename), cfg_file]
        self._config = config
        logger.debug("cluster_dns_operator.load.completed", filename=self.config_filename)
        return True


__all__ = ["ASSET_DIR", "CONFIG_FILENAME", "ClusterDNSOperator"]
