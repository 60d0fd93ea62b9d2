"""Shared pytest fixtures for cluster-manifests tests.

NOTE: Do NOT add __init__.py to test directories - pytest uses importlib mode
which can cause namespace collisions with __init__.py files.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import pytest
import structlog

if TYPE_CHECKING:
    from collections.abc import Callable, Generator

    from cluster_manifests.asset import Parents
    from cluster_manifests.installconfig import InstallConfig


@pytest.fixture(autouse=True)
def reset_structlog() -> Generator[None, None, None]:
    """Undo configure_logging() calls made by a test."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def install_config_data() -> dict[str, Any]:
    """Raw install-config.yaml content using explicit cluster networks."""
    return {
        "apiVersion": "v1beta1",
        "metadata": {"name": "demo"},
        "baseDomain": "example.com",
        "networking": {
            "type": "OpenshiftSDN",
            "serviceCIDR": "172.30.0.0/16",
            "clusterNetworks": [
                {"cidr": "10.128.0.0/14", "hostSubnetLength": 9},
                {"cidr": "10.132.0.0/14", "hostSubnetLength": 8},
            ],
        },
        "platform": {"aws": {"region": "us-east-1"}},
        "pullSecret": "{}",
    }


@pytest.fixture
def make_install_config() -> Callable[..., InstallConfig]:
    """Factory building an InstallConfig from networking keyword overrides.

    Usage:
        config = make_install_config(podCIDR="10.128.0.0/14")
    """
    from cluster_manifests.installconfig import InstallConfig

    def _make(base_domain: str = "example.com", **networking: Any) -> InstallConfig:
        return InstallConfig.model_validate(
            {"baseDomain": base_domain, "networking": networking}
        )

    return _make


@pytest.fixture
def make_parents() -> Callable[[InstallConfig], Parents]:
    """Factory wrapping an InstallConfig in a Parents container."""
    from cluster_manifests.asset import Parents
    from cluster_manifests.installconfig import InstallConfigAsset

    def _make(config: InstallConfig) -> Parents:
        parents = Parents()
        parents.add(InstallConfigAsset(config))
        return parents

    return _make
