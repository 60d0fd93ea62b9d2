"""Command-line interface for cluster-manifests."""

from __future__ import annotations

from cluster_manifests.cli.main import cli, main

__all__ = ["cli", "main"]
