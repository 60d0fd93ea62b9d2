"""Unit tests for operator schemas, settings and the YAML codec."""

from __future__ import annotations

from typing import Any

import pytest
import yaml
from pydantic import ValidationError


class TestNetworkConfig:
    """Tests for the NetworkConfig schema."""

    def test_to_k8s_manifest_omits_unset(self) -> None:
        """Test optional plugin settings are left out of the manifest."""
        from cluster_manifests.schemas import (
            ClusterNetwork,
            DefaultNetworkDefinition,
            NetworkConfig,
            NetworkConfigSpec,
            NetworkType,
            ObjectMeta,
            OpenshiftSDNConfig,
            SDNMode,
        )

        config = NetworkConfig(
            metadata=ObjectMeta(name="default"),
            spec=NetworkConfigSpec(
                service_network="172.30.0.0/16",
                cluster_networks=[ClusterNetwork(cidr="10.128.0.0/14", host_subnet_length=9)],
                default_network=DefaultNetworkDefinition(
                    type=NetworkType.OPENSHIFT_SDN,
                    openshift_sdn_config=OpenshiftSDNConfig(mode=SDNMode.POLICY, mtu=1450),
                ),
            ),
        )

        assert config.to_k8s_manifest() == {
            "apiVersion": "networkoperator.openshift.io/v1",
            "kind": "NetworkConfig",
            "metadata": {"name": "default"},
            "spec": {
                "serviceNetwork": "172.30.0.0/16",
                "clusterNetworks": [{"cidr": "10.128.0.0/14", "hostSubnetLength": 9}],
                "defaultNetwork": {
                    "type": "OpenshiftSDN",
                    "openshiftSDNConfig": {"mode": "Networkpolicy", "mtu": 1450},
                },
            },
        }

    def test_from_k8s_manifest(self) -> None:
        """Test camelCase manifests parse into the typed model."""
        from cluster_manifests.schemas import NetworkConfig, NetworkType

        config = NetworkConfig.from_k8s_manifest(
            {
                "apiVersion": "networkoperator.openshift.io/v1",
                "kind": "NetworkConfig",
                "metadata": {"name": "default"},
                "spec": {
                    "serviceNetwork": "172.30.0.0/16",
                    "clusterNetworks": [{"cidr": "10.128.0.0/14", "hostSubnetLength": 9}],
                    "defaultNetwork": {"type": "OVNKubernetes"},
                },
            }
        )

        assert config.spec.default_network.type is NetworkType.OVN_KUBERNETES

    @pytest.mark.parametrize(
        "override",
        [
            {"kind": "ClusterDNS"},
            {"apiVersion": "networkoperator.openshift.io/v2"},
        ],
    )
    def test_wrong_type_meta_rejected(self, override: dict[str, str]) -> None:
        """Test manifests for another kind or version are rejected."""
        from cluster_manifests.schemas import NetworkConfig

        manifest = {
            "apiVersion": "networkoperator.openshift.io/v1",
            "kind": "NetworkConfig",
            "metadata": {"name": "default"},
            "spec": {
                "serviceNetwork": "172.30.0.0/16",
                "clusterNetworks": [],
                "defaultNetwork": {"type": "Raw"},
            },
            **override,
        }

        with pytest.raises(ValidationError):
            NetworkConfig.from_k8s_manifest(manifest)

    @pytest.mark.parametrize(
        ("section", "extra"),
        [
            ("spec", {"deployKubeProxy": False}),
            ("metadata", {"namespace": "openshift-network-operator"}),
            ("metadata", {"labels": {"app": "network"}}),
        ],
    )
    def test_unknown_fields_rejected(self, section: str, extra: dict[str, Any]) -> None:
        """Test fields the generator never emits are not accepted on load."""
        from cluster_manifests.schemas import NetworkConfig

        manifest: dict[str, Any] = {
            "apiVersion": "networkoperator.openshift.io/v1",
            "kind": "NetworkConfig",
            "metadata": {"name": "default"},
            "spec": {
                "serviceNetwork": "172.30.0.0/16",
                "clusterNetworks": [],
                "defaultNetwork": {"type": "Raw"},
            },
        }
        manifest[section].update(extra)

        with pytest.raises(ValidationError):
            NetworkConfig.from_k8s_manifest(manifest)

    def test_invalid_cidr_message(self) -> None:
        """Test CIDR validation names the offending value."""
        from cluster_manifests.schemas import ClusterNetwork

        with pytest.raises(ValidationError, match="Invalid CIDR: 10.128.0.0/99"):
            ClusterNetwork(cidr="10.128.0.0/99", host_subnet_length=9)


class TestClusterDNS:
    """Tests for the ClusterDNS schema."""

    def test_manifest_keys(self) -> None:
        from cluster_manifests.schemas import ClusterDNS, ClusterDNSSpec, ObjectMeta

        dns = ClusterDNS(
            metadata=ObjectMeta(name="default"),
            spec=ClusterDNSSpec(cluster_ip="172.30.0.10", cluster_domain="example.com"),
        )

        assert dns.to_k8s_manifest()["spec"] == {
            "clusterIP": "172.30.0.10",
            "clusterDomain": "example.com",
        }

    def test_invalid_cluster_ip(self) -> None:
        from cluster_manifests.schemas import ClusterDNSSpec

        with pytest.raises(ValidationError, match="Invalid cluster IP"):
            ClusterDNSSpec(cluster_ip="172.30.0.300", cluster_domain="example.com")


class TestManifestSettings:
    """Tests for ManifestSettings."""

    def test_defaults(self) -> None:
        from cluster_manifests.schemas import SDNMode
        from cluster_manifests.settings import DEFAULT_SETTINGS

        assert DEFAULT_SETTINGS.manifest_dir == "manifests"
        assert DEFAULT_SETTINGS.default_host_subnet_length == 9
        assert DEFAULT_SETTINGS.default_sdn_mode is SDNMode.POLICY

    def test_unknown_field_rejected(self) -> None:
        from cluster_manifests.settings import ManifestSettings

        with pytest.raises(ValidationError):
            ManifestSettings(manifest_directory="openshift")  # type: ignore[call-arg]


class TestSerialization:
    """Tests for the YAML codec."""

    def test_to_yaml_keeps_key_order(self) -> None:
        from cluster_manifests.serialization import to_yaml

        data = to_yaml({"kind": "NetworkConfig", "apiVersion": "v1", "spec": {"b": 1, "a": 2}})

        assert data == b"kind: NetworkConfig\napiVersion: v1\nspec:\n  b: 1\n  a: 2\n"

    def test_from_yaml_empty_document(self) -> None:
        from cluster_manifests.serialization import from_yaml

        assert from_yaml(b"") == {}

    def test_from_yaml_rejects_non_mapping(self) -> None:
        from cluster_manifests.serialization import from_yaml

        with pytest.raises(TypeError, match="Expected a YAML mapping"):
            from_yaml(b"- a\n")

    def test_from_yaml_invalid(self) -> None:
        from cluster_manifests.serialization import from_yaml

        with pytest.raises(yaml.YAMLError):
            from_yaml(b"a: [b")
