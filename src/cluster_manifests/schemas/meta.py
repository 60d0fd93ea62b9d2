"""Shared Kubernetes object metadata and manifest conversion.

Operator configuration objects are modelled as frozen Pydantic models whose
Python attribute names are snake_case and whose YAML keys (aliases) follow the
upstream camelCase API field names.

Example:
    >>> from cluster_manifests.schemas.meta import ObjectMeta
    >>> ObjectMeta(name="default").name
    'default'
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from typing_extensions import Self


class ObjectMeta(BaseModel):
    """Subset of Kubernetes ObjectMeta used by generated manifests.

    Both generated objects are cluster-scoped singletons, so only the name is
    carried.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str = Field(..., min_length=1, description="Object name")


class K8sObject(BaseModel):
    """Base for typed Kubernetes objects with YAML round-trip helpers.

    Subclasses declare api_version/kind defaults plus their own spec.
    Unset optional fields are omitted from the manifest so the output only
    carries what was explicitly configured or defaulted by a generator.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)

    api_version: str = Field(..., alias="apiVersion", description="API group/version")
    kind: str = Field(..., description="Object kind")
    metadata: ObjectMeta = Field(..., description="Object metadata")

    def to_k8s_manifest(self) -> dict[str, Any]:
        """Convert to a K8s manifest dict with camelCase keys.

        Returns:
            Dictionary suitable for YAML serialization.
        """
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

    @classmethod
    def from_k8s_manifest(cls, manifest: dict[str, Any]) -> Self:
        """Parse a K8s manifest dict back into the typed model.

        Args:
            manifest: Dictionary with camelCase keys, as produced by
                to_k8s_manifest() or read from YAML.

        Raises:
            pydantic.ValidationError: If the manifest does not match the schema.
        """
        return cls.model_validate(manifest)


__all__ = ["K8sObject", "ObjectMeta"]
