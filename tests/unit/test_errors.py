"""Unit tests for the exception hierarchy."""

from __future__ import annotations

import pytest


class TestManifestError:
    """Tests for the base exception."""

    def test_str_without_details(self) -> None:
        from cluster_manifests.errors import ManifestError

        assert str(ManifestError("boom")) == "boom"

    def test_str_with_details(self) -> None:
        from cluster_manifests.errors import ManifestError

        error = ManifestError("boom", {"path": "a.yml", "line": 3})

        assert str(error) == "boom (path=a.yml, line=3)"
        assert error.message == "boom"


@pytest.mark.parametrize(
    "error_name",
    [
        "AssetDependencyError",
        "AssetNotInitializedError",
        "InstallConfigError",
        "ManifestLoadError",
        "ManifestSerializationError",
        "NetworkingNotSpecifiedError",
    ],
)
def test_subclasses_share_base(error_name: str) -> None:
    """Test every error can be caught as ManifestError."""
    from cluster_manifests import errors

    assert issubclass(getattr(errors, error_name), errors.ManifestError)


def test_networking_not_specified_default_message() -> None:
    from cluster_manifests.errors import NetworkingNotSpecifiedError

    assert str(NetworkingNotSpecifiedError()) == "Either PodCIDR or ClusterNetworks must be specified"


def test_load_error_records_filename() -> None:
    from cluster_manifests.errors import ManifestLoadError

    error = ManifestLoadError("failed to unmarshal", filename="manifests/a.yml")

    assert error.filename == "manifests/a.yml"
    assert error.details == {}


def test_serialization_error_records_asset() -> None:
    from cluster_manifests.errors import ManifestSerializationError

    error = ManifestSerializationError("failed", asset_name="Network Config")

    assert error.asset_name == "Network Config"
    assert str(error) == "failed (asset=Network Config)"
