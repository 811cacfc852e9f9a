"""nsautoload CLI - inspect how symbols map to files under registered namespaces."""

from __future__ import annotations

import dataclasses
import logging

import click

from nsautoload.config import (
    NamespacePathBinding,
    ResolutionStatus,
    ResolverSettings,
    load_autoload_config,
)
from nsautoload.strategies import configure_strategy, get_strategy, supported_strategies
from nsautoload.strategies.base import AutoloadingStrategy


@click.group()
def cli() -> None:
    """nsautoload - Resolve namespaced class names to source files."""
    pass


def _parse_maps(
    ctx: click.Context, param: click.Parameter, value: tuple[str, ...]
) -> list[NamespacePathBinding]:
    bindings = []
    for entry in value:
        prefix, sep, directory = entry.partition("=")
        if not sep or not directory:
            raise click.BadParameter(f"expected PREFIX=DIR, got {entry!r}")
        bindings.append(NamespacePathBinding(prefix=prefix, directories=(directory,)))
    return bindings


def _strategy_options(fn):
    """Options shared by every command that builds a strategy."""
    options = [
        click.option(
            "-s", "--strategy", "strategy_name", default="psr-4",
            type=click.Choice(supported_strategies()), help="Resolution convention",
        ),
        click.option(
            "-m", "--map", "maps", multiple=True, callback=_parse_maps,
            help="Namespace mapping as PREFIX=DIR (repeatable, tried in order)",
        ),
        click.option(
            "-c", "--config", "config_path", default=None,
            type=click.Path(exists=True, dir_okay=False),
            help="Composer-style JSON file with psr-0/psr-4 mappings",
        ),
        click.option("--extension", default=None, help="Source file extension (default .php)"),
        click.option("--verbose", is_flag=True, help="Log prefix matching decisions"),
    ]
    for option in reversed(options):
        fn = option(fn)
    return fn


def _configure_logging(verbose: bool) -> None:
    if not verbose:
        return
    from rich.console import Console
    from rich.logging import RichHandler

    logging.basicConfig(
        level=logging.DEBUG,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def _build_strategy(
    strategy_name: str,
    maps: list[NamespacePathBinding],
    config_path: str | None,
    extension: str | None,
) -> AutoloadingStrategy:
    settings = ResolverSettings()
    bindings: list[NamespacePathBinding] = []

    if config_path:
        try:
            config = load_autoload_config(config_path)
        except ValueError as e:
            raise click.ClickException(str(e)) from e
        settings = config.settings
        bindings.extend(config.bindings_for_strategy(strategy_name))

    if extension is not None:
        settings = dataclasses.replace(settings, file_extension=extension)

    # Command-line mappings are tried after the config file's.
    bindings.extend(maps)
    if not bindings:
        raise click.UsageError("No namespace mappings given; use --map or --config")

    return configure_strategy(get_strategy(strategy_name, settings=settings), bindings)


@cli.command("resolve")
@click.argument("symbol")
@_strategy_options
def resolve_cmd(
    symbol: str,
    strategy_name: str,
    maps: list[NamespacePathBinding],
    config_path: str | None,
    extension: str | None,
    verbose: bool,
) -> None:
    """Print the file that defines SYMBOL; exit 1 when it is unresolved."""
    from rich.console import Console
    from rich.markup import escape

    _configure_logging(verbose)
    strategy = _build_strategy(strategy_name, maps, config_path, extension)

    path = strategy.resolve(symbol)
    if path is None:
        Console(stderr=True).print(
            f"[red]{ResolutionStatus.UNRESOLVED.value}:[/red] {escape(symbol)}"
        )
        click.get_current_context().exit(1)

    click.echo(path)


@cli.command("candidates")
@click.argument("symbol")
@_strategy_options
def candidates_cmd(
    symbol: str,
    strategy_name: str,
    maps: list[NamespacePathBinding],
    config_path: str | None,
    extension: str | None,
    verbose: bool,
) -> None:
    """List every candidate path for SYMBOL, in the order they are checked."""
    from rich.console import Console
    from rich.markup import escape
    from rich.table import Table

    _configure_logging(verbose)
    strategy = _build_strategy(strategy_name, maps, config_path, extension)
    console = Console()

    candidates = list(strategy.candidates(symbol))
    if not candidates:
        console.print(f"[yellow]No registered prefix matches[/yellow] {escape(symbol)}")
        return

    table = Table(title=f"{strategy.name} candidates", show_edge=False)
    table.add_column("#", justify="right")
    table.add_column("Path", style="bold", overflow="fold")
    table.add_column("Exists", justify="center")

    for i, candidate in enumerate(candidates, start=1):
        exists = strategy.checker.is_file(candidate)
        table.add_row(str(i), escape(candidate), "[green]yes[/green]" if exists else "no")

    console.print(table)

    resolved = strategy.checker.first_existing(candidates)
    status = ResolutionStatus.RESOLVED if resolved else ResolutionStatus.UNRESOLVED
    console.print(f"Status: [bold]{status.value}[/bold]")


if __name__ == "__main__":
    cli()
