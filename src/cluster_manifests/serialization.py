"""YAML codec for generated manifests.

Serialization uses yaml.safe_dump so only plain data types are ever emitted,
with insertion-ordered keys and block style for readable diffs.
"""

from __future__ import annotations

from typing import Any, cast

import yaml


def to_yaml(manifest: dict[str, Any]) -> bytes:
    """Marshal a manifest dict to YAML bytes.

    Raises:
        yaml.YAMLError: If the manifest contains values YAML cannot represent.
    """
    content = yaml.safe_dump(
        manifest,
        default_flow_style=False,
        allow_unicode=True,
        sort_keys=False,
    )
    return content.encode("utf-8")


def from_yaml(data: bytes) -> dict[str, Any]:
    """Parse a single YAML document into a dict.

    Returns:
        Parsed mapping, or an empty dict for an empty document.

    Raises:
        yaml.YAMLError: If the content is not valid YAML.
        TypeError: If the document is not a mapping.
    """
    parsed = yaml.safe_load(data)
    if parsed is None:
        return {}
    if not isinstance(parsed, dict):
        raise TypeError(f"Expected a YAML mapping, got {type(parsed).__name__}")
    return cast(dict[str, Any], parsed)


__all__ = ["from_yaml", "to_yaml"]
