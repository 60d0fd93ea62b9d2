"""Main entry point for the cluster-manifests CLI.

Commands:
    cluster-manifests generate: Write networking and DNS manifests from install-config.yaml
    cluster-manifests show-network: Print pod/service ranges from generated manifests

Example:
    $ cluster-manifests generate --install-config install-config.yaml --output assets
    $ cluster-manifests show-network --dir assets
"""

from __future__ import annotations

import sys
from importlib.metadata import version as get_version
from pathlib import Path

import click

from cluster_manifests.cli.utils import ExitCode, error_exit, info, success
from cluster_manifests.errors import ManifestError


def _get_version() -> str:
    """Return the installed package version, or 'unknown'."""
    try:
        return get_version("cluster-manifests")
    except Exception:
        return "unknown"


@click.group(
    name="cluster-manifests",
    help="Generate cluster networking and DNS operator manifests.",
    context_settings={"help_option_names": ["-h", "--help"]},
)
@click.version_option(version=_get_version(), prog_name="cluster-manifests")
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default="WARNING",
    show_default=True,
    help="Minimum log level written to stderr.",
)
def cli(log_level: str) -> None:
    """Root command group."""
    from cluster_manifests.logging import configure_logging

    configure_logging(log_level=log_level, json_output=False)


@cli.command(name="generate")
@click.option(
    "--install-config",
    "-c",
    "install_config_path",
    required=True,
    type=click.Path(exists=True, dir_okay=False, resolve_path=True, path_type=Path),
    help="Path to install-config.yaml.",
    metavar="PATH",
)
@click.option(
    "--output",
    "-o",
    type=click.Path(file_okay=False, resolve_path=True, path_type=Path),
    default=Path("assets"),
    show_default=True,
    help="Asset directory to write manifests into.",
    metavar="PATH",
)
@click.option(
    "--dry-run",
    is_flag=True,
    default=False,
    help="List the files that would be written without writing them.",
)
def generate_command(install_config_path: Path, output: Path, dry_run: bool) -> None:
    """Generate networking and DNS manifests from an install config.

    Manifests already present in the output directory are loaded and written
    back unchanged instead of being regenerated.
    """
    from cluster_manifests.asset import write_files
    from cluster_manifests.installconfig import InstallConfigAsset, load_install_config
    from cluster_manifests.manifests import ClusterDNSOperator, Networking
    from cluster_manifests.store import AssetStore

    info(f"Reading install config: {install_config_path}")

    try:
        store = AssetStore(output, InstallConfigAsset(load_install_config(install_config_path)))
        assets = [store.fetch(Networking), store.fetch(ClusterDNSOperator)]
    except ManifestError as e:
        error_exit(str(e), exit_code=ExitCode.VALIDATION_ERROR)

    for asset in assets:
        if dry_run:
            for file in asset.files():
                success(str(output / file.filename))
            continue
        for path in write_files(asset, output):
            success(str(path))


@cli.command(name="show-network")
@click.option(
    "--dir",
    "-d",
    "asset_dir",
    required=True,
    type=click.Path(exists=True, file_okay=False, resolve_path=True, path_type=Path),
    help="Asset directory containing generated manifests.",
    metavar="PATH",
)
def show_network_command(asset_dir: Path) -> None:
    """Print pod and service ranges from previously generated manifests."""
    from cluster_manifests.asset import DirectoryFileFetcher
    from cluster_manifests.manifests import Networking

    networking = Networking()
    try:
        loaded = networking.load(DirectoryFileFetcher(asset_dir))
    except ManifestError as e:
        error_exit(str(e), exit_code=ExitCode.VALIDATION_ERROR)

    if not loaded:
        error_exit(
            "Network manifests have not been generated",
            exit_code=ExitCode.FILE_NOT_FOUND,
            path=str(asset_dir),
        )

    ranges = networking.cluster_network()
    for cidr in ranges.services.cidr_blocks:
        success(f"service {cidr}")
    for cidr in ranges.pods.cidr_blocks:
        success(f"pod {cidr}")


def main(argv: list[str] | None = None) -> None:
    """Console script entry point."""
    try:
        cli(args=argv, standalone_mode=False)
    except click.ClickException as e:
        e.show()
        sys.exit(e.exit_code)
    except click.Abort:
        click.echo("Aborted!", err=True)
        sys.exit(1)
    except Exception as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(ExitCode.GENERAL_ERROR)


if __name__ == "__main__":
    main()
