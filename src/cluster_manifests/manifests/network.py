"""Network operator manifest generator.

Produces the NetworkConfig CRD and the default NetworkConfig instance from the
install config networking section:

    manifests/cluster-network-01-crd.yml     fixed CRD definition
    manifests/cluster-network-02-config.yml  generated NetworkConfig

The operator's own CRD is normally installed by the cluster version operator,
but the installer creates the configuration instance, so the CRD has to be
shipped alongside it.

Example:
    >>> from cluster_manifests.asset import Parents
    >>> from cluster_manifests.installconfig import InstallConfigAsset
    >>> from cluster_manifests.manifests.network import Networking
    >>> parents = Parents()
    >>> parents.add(InstallConfigAsset(install_config))
    >>> networking = Networking()
    >>> networking.generate(parents)
    >>> networking.cluster_network().pods.cidr_blocks
    ['10.128.0.0/14']
"""

from __future__ import annotations

from typing import TYPE_CHECKING

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
    NetworkingNotSpecifiedError,
)
from cluster_manifests.installconfig import InstallConfigAsset
from cluster_manifests.schemas.cluster import ClusterNetworkingConfig, NetworkRanges
from cluster_manifests.schemas.meta import ObjectMeta
from cluster_manifests.schemas.networkoperator import (
    ClusterNetwork,
    DefaultNetworkDefinition,
    NetworkConfig,
    NetworkConfigSpec,
    NetworkType,
    OpenshiftSDNConfig,
)
from cluster_manifests.serialization import from_yaml, to_yaml
from cluster_manifests.settings import DEFAULT_SETTINGS, ManifestSettings

if TYPE_CHECKING:
    from cluster_manifests.installconfig.schemas import NetworkingConfig

logger = structlog.get_logger(__name__)


def _get_tracer() -> trace.Tracer:
    """Return the module tracer; non-recording unless an SDK is installed."""
    return trace.get_tracer(__name__)


CRD_FILENAME = "cluster-network-01-crd.yml"
CONFIG_FILENAME = "cluster-network-02-config.yml"

NETWORK_CONFIG_CRD = """
apiVersion: apiextensions.k8s.io/v1beta1
kind: CustomResourceDefinition
metadata:
  name: networkconfigs.networkoperator.openshift.io
spec:
  group: networkoperator.openshift.io
  names:
    kind: NetworkConfig
    listKind: NetworkConfigList
    plural: networkconfigs
    singular: networkconfig
  scope: Cluster
  versions:
    - name: v1
      served: true
      storage: true
"""


def resolve_cluster_networks(
    networking: NetworkingConfig,
    host_subnet_length: int = DEFAULT_SETTINGS.default_host_subnet_length,
) -> list[ClusterNetwork]:
    """Determine the pod address space.

    Explicit cluster networks win. Otherwise a single entry is synthesized
    from the legacy pod CIDR with a fixed host subnet length.

    Args:
        networking: Install config networking section.
        host_subnet_length: Host subnet length for the synthesized entry.

    Returns:
        Cluster network list for the NetworkConfig spec.

    Raises:
        NetworkingNotSpecifiedError: If neither source is configured.
    """
    if networking.cluster_networks:
        return list(networking.cluster_networks)

    if networking.pod_cidr is not None and networking.pod_cidr_specified:
        return [ClusterNetwork(cidr=networking.pod_cidr, host_subnet_length=host_subnet_length)]

    raise NetworkingNotSpecifiedError()


def default_network_definition(
    network_type: NetworkType,
    settings: ManifestSettings = DEFAULT_SETTINGS,
) -> DefaultNetworkDefinition:
    """Build the default network definition with per-plugin defaults.

    Only OpenshiftSDN is defaulted here (its isolation mode); the operator
    provides every other default.
    """
    if network_type is NetworkType.OPENSHIFT_SDN:
        return DefaultNetworkDefinition(
            type=network_type,
            openshift_sdn_config=OpenshiftSDNConfig(mode=settings.default_sdn_mode),
        )
    return DefaultNetworkDefinition(type=network_type)


class Networking(WritableAsset):
    """Generates the cluster-network-*.yml files.

    Attributes:
        settings: Generation policy settings.
    """

    def __init__(self, settings: ManifestSettings | None = None) -> None:
        self.settings = settings or DEFAULT_SETTINGS
        self._config: NetworkConfig | None = None
        self._files: list[File] = []

    @property
    def name(self) -> str:
        return "Network Config"

    @property
    def crd_filename(self) -> str:
        return f"{self.settings.manifest_dir}/{CRD_FILENAME}"

    @property
    def config_filename(self) -> str:
        return f"{self.settings.manifest_dir}/{CONFIG_FILENAME}"

    @property
    def config(self) -> NetworkConfig | None:
        """The derived NetworkConfig, or None before generate/load."""
        return self._config

    def dependencies(self) -> list[type[Asset]]:
        return [InstallConfigAsset]

    def generate(self, parents: Parents) -> None:
        """Generate the network operator config and its CRD.

        Raises:
            AssetDependencyError: If the install config was not resolved.
            NetworkingNotSpecifiedError: If no pod address source is configured.
            ManifestSerializationError: If the config cannot be marshaled.
        """
        install_config = parents.get(InstallConfigAsset).config
        if install_config is None:
            raise AssetNotInitializedError("Install config asset has no config")
        networking = install_config.networking

        with _get_tracer().start_as_current_span(
            "networking.generate",
            attributes={
                "networking.type": networking.type.value,
                "networking.cluster_networks_count": len(networking.cluster_networks),
            },
        ) as span:
            cluster_networks = resolve_cluster_networks(
                networking, self.settings.default_host_subnet_length
            )
            span.set_attribute("networking.resolved_networks_count", len(cluster_networks))

            config = NetworkConfig(
                metadata=ObjectMeta(name=self.settings.network_config_name),
                spec=NetworkConfigSpec(
                    service_network=networking.service_cidr,
                    cluster_networks=cluster_networks,
                    default_network=default_network_definition(networking.type, self.settings),
                ),
            )

            try:
                config_data = to_yaml(config.to_k8s_manifest())
            except yaml.YAMLError as e:
                raise ManifestSerializationError(
                    f"failed to create {self.name} manifests from InstallConfig: {e}",
                    asset_name=self.name,
                ) from e

        self._config = config
        self._files = [
            File(filename=self.crd_filename, data=NETWORK_CONFIG_CRD.encode("utf-8")),
            File(filename=self.config_filename, data=config_data),
        ]

        logger.info(
            "networking.generate.completed",
            network_type=networking.type.value,
            service_network=networking.service_cidr,
            cluster_networks=[cn.cidr for cn in cluster_networks],
        )

    def files(self) -> list[File]:
        """Return the files generated by the asset."""
        return list(self._files)

    def cluster_network(self) -> ClusterNetworkingConfig:
        """Return pod and service ranges for the cluster object.

        The cluster object captures generalized cluster state and should not
        need to be networking aware, so it reads ranges through this accessor.

        Raises:
            AssetNotInitializedError: If called before generate() or load().
        """
        if self._config is None:
            raise AssetNotInitializedError("ClusterNetwork called before initialization")

        spec = self._config.spec
        return ClusterNetworkingConfig(
            services=NetworkRanges(cidr_blocks=[spec.service_network]),
            pods=NetworkRanges(cidr_blocks=[cn.cidr for cn in spec.cluster_networks]),
        )

    def load(self, fetcher: FileFetcher) -> bool:
        """Load the already-rendered files back from disk.

        Returns:
            True if both files were loaded, False if either does not exist.

        Raises:
            ManifestLoadError: If a file cannot be read or the config cannot be parsed.
        """
        with _get_tracer().start_as_current_span("networking.load") as span:
            crd_file = fetch_optional(fetcher, self.crd_filename)
            if crd_file is None:
                span.set_attribute("networking.loaded", False)
                return False

            cfg_file = fetch_optional(fetcher, self.config_filename)
            if cfg_file is None:
                span.set_attribute("networking.loaded", False)
                return False

            try:
                config = NetworkConfig.from_k8s_manifest(from_yaml(cfg_file.data))
            except (yaml.YAMLError, TypeError, ValidationError) as e:
                raise ManifestLoadError(
                    f"failed to unmarshal {self.config_filename}: {e}",
                    filename=self.config_filename,
                ) from e

            span.set_attribute("networking.loaded", True)

        self._files = [crd_file, cfg_file]
        self._config = config
        logger.debug("networking.load.completed", filename=self.config_filename)
        return True


__all__ = [
    "CONFIG_FILENAME",
    "CRD_FILENAME",
    "NETWORK_CONFIG_CRD",
    "Networking",
    "default_network_definition",
    "resolve_cluster_networks",
]
