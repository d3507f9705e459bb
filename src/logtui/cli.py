import asyncio
import logging
from pathlib import Path

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from logtui.core.config import RegistryConfig
from logtui.core.constants import DEFAULT_CACHE_PATH, NETWORKS_API_URL
from logtui.core.errors import NotFoundError
from logtui.core.models import Resolution
from logtui.presets import get_preset, list_presets, signature_topic0
from logtui.registry.networks import create_registry

console = Console()


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def _networks_table(resolution: Resolution) -> Table:
    table = Table(title=f"{len(resolution)} networks (source: {resolution.source})")
    table.add_column("network", style="bold")
    table.add_column("endpoint")
    for name in sorted(resolution.networks):
        table.add_row(name, resolution.networks[name])
    return table


@click.group()
@click.option(
    "--cache-file",
    type=click.Path(dir_okay=False, path_type=Path),
    default=DEFAULT_CACHE_PATH,
    show_default=True,
    help="JSON file holding the last fetched network list",
)
@click.option("--catalog-url", default=NETWORKS_API_URL, show_default=True, help="Active chains catalog endpoint")
@click.option("--timeout", "timeout_s", type=int, default=20, show_default=True, help="Catalog request timeout (s)")
@click.option("-v", "--verbose", is_flag=True, default=False, help="Log cache and catalog activity")
@click.pass_context
def cli(ctx: click.Context, cache_file: Path, catalog_url: str, timeout_s: int, verbose: bool) -> None:
    """logtui: HyperSync network endpoints and event signature presets."""
    _setup_logging(verbose)
    ctx.obj = RegistryConfig(catalog_url=catalog_url, cache_path=cache_file, timeout_s=timeout_s)


@cli.command("list-networks")
@click.option("--refresh", is_flag=True, default=False, help="Ignore the cache and query the catalog")
@click.pass_obj
def list_networks_cmd(config: RegistryConfig, refresh: bool) -> None:
    """List supported networks (cache first unless --refresh)."""

    async def run() -> Resolution:
        registry = await create_registry(config)
        return await registry.refresh(force_refresh=refresh)

    console.print(_networks_table(asyncio.run(run())))


@cli.command("refresh-networks")
@click.pass_obj
def refresh_networks_cmd(config: RegistryConfig) -> None:
    """Fetch the network list from the catalog and update the cache."""

    async def run() -> Resolution:
        registry = await create_registry(config)
        return await registry.force_refresh()

    resolution = asyncio.run(run())
    color = "green" if resolution.source == "remote" else "yellow"
    console.print(f"[bold]networks[/]: {len(resolution)} • source=[{color}]{resolution.source}[/]")


@cli.command("network-url")
@click.argument("name")
@click.pass_obj
def network_url_cmd(config: RegistryConfig, name: str) -> None:
    """Print the HyperSync endpoint for NAME."""
    registry = asyncio.run(create_registry(config))
    try:
        url = registry.resolve(name)
    except NotFoundError as e:
        raise click.ClickException(str(e)) from e
    click.echo(url)


@cli.command("list-presets")
def list_presets_cmd() -> None:
    """List event signature presets."""
    table = Table(title="event presets")
    table.add_column("id", style="bold")
    table.add_column("name")
    table.add_column("description")
    for p in list_presets():
        table.add_row(p.id, p.name, p.description)
    console.print(table)


@cli.command("preset")
@click.argument("preset_id")
@click.option("--topics/--no-topics", default=False, show_default=True, help="Also print topic0 hashes")
def preset_cmd(preset_id: str, topics: bool) -> None:
    """Print the event signatures of PRESET_ID, one per line."""
    try:
        preset = get_preset(preset_id)
    except NotFoundError as e:
        raise click.ClickException(str(e)) from e
    for sig in preset.signatures:
        click.echo(f"{signature_topic0(sig)}  {sig}" if topics else sig)


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
