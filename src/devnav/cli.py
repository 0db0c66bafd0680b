"""CLI interface for DevNav.

Command-line tool for resolving shortcut sequences into URLs.
"""

import json
import logging
import sys
from pathlib import Path

import click

from devnav.config import Config
from devnav.core.constructor import construct
from devnav.core.parser import is_valid_format, parse
from devnav.core.patterns import strip_trigger
from devnav.core.suggestions import resolve_target, suggest
from devnav.exchange import export_config, load_export, render_tokens_toml

config_option = click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=True, path_type=Path),
    default=None,
    help="Path to configuration file (default: auto-discover devnav.toml)",
)


@click.group()
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable debug logging",
)
def cli(verbose: bool) -> None:
    """DevNav - shortcut-driven URL construction."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(levelname)s %(name)s: %(message)s",
        )


@cli.command()
@click.argument("text", nargs=-1, required=True)
@config_option
@click.option(
    "--search-fallback",
    is_flag=True,
    help="Print a web search URL instead of failing when no URL can be built",
)
def resolve(text: tuple[str, ...], config_path: Path | None, search_fallback: bool) -> None:
    """Resolve a shortcut sequence into a URL."""
    config = _load_config(config_path)
    raw = strip_trigger(" ".join(text), config.settings.trigger)

    if search_fallback:
        target = resolve_target(
            raw,
            config.shortcuts,
            disposition=config.settings.default_disposition,
            search_url=config.settings.search_url,
        )
        click.echo(f"Disposition: {target.disposition}", err=True)
        click.echo(target.url)
        return

    constructed = construct(parse(raw, config.shortcuts), config.shortcuts)
    if not constructed.is_valid:
        click.echo(click.style(f"Error: {constructed.description}", fg="red"), err=True)
        if constructed.url:
            click.echo(f"Constructed: {constructed.url}", err=True)
        sys.exit(1)

    if config.settings.show_descriptions:
        click.echo(constructed.description, err=True)
    click.echo(constructed.url)


@cli.command("suggest")
@click.argument("text", nargs=-1, required=True)
@config_option
@click.option(
    "--limit",
    "-n",
    type=click.IntRange(min=0),
    default=3,
    show_default=True,
    help="Maximum number of completions after the main suggestion",
)
def suggest_command(text: tuple[str, ...], config_path: Path | None, limit: int) -> None:
    """List URL suggestions for partially typed input."""
    config = _load_config(config_path)
    raw = strip_trigger(" ".join(text), config.settings.trigger)

    suggestions = suggest(raw, config.shortcuts, limit=limit)
    if not suggestions:
        click.echo("No suggestions", err=True)
        return

    for suggestion in suggestions:
        click.echo(suggestion.content)


@cli.command()
@click.argument("text", nargs=-1, required=True)
@config_option
def check(text: tuple[str, ...], config_path: Path | None) -> None:
    """Check input format without resolving shortcuts (exit 1 if malformed)."""
    config = _load_config(config_path)
    if is_valid_format(strip_trigger(" ".join(text), config.settings.trigger)):
        click.echo(click.style("✓ Valid format", fg="green"))
        return
    click.echo(click.style("✗ Invalid format", fg="red"), err=True)
    sys.exit(1)


@cli.command()
@config_option
def tokens(config_path: Path | None) -> None:
    """List configured shortcuts."""
    config = _load_config(config_path)
    if not config.tokens:
        click.echo("No shortcuts configured")
        return

    width = max(len(key) for key in config.tokens)
    for key, value in config.tokens.items():
        click.echo(f"{key.ljust(width)}  {value}")


@cli.command("export")
@config_option
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Write export to file instead of stdout",
)
def export_command(config_path: Path | None, output: Path | None) -> None:
    """Export shortcuts as JSON for sharing."""
    config = _load_config(config_path)
    payload = json.dumps(export_config(config), indent=2, ensure_ascii=False)

    if output is None:
        click.echo(payload)
        return

    output.write_text(payload + "\n", encoding="utf-8")
    click.echo(f"Exported {len(config.tokens)} shortcuts to {output}")


@cli.command("import")
@click.argument("export_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
def import_command(export_file: Path) -> None:
    """Validate an export file and print its shortcuts as TOML."""
    try:
        shortcuts = load_export(export_file)
    except ValueError as e:
        click.echo(click.style(f"Error: {e}", fg="red"), err=True)
        sys.exit(1)

    click.echo("Add these shortcuts to your devnav.toml:\n", err=True)
    click.echo(render_tokens_toml(shortcuts), nl=False)


@cli.command()
@config_option
@click.option(
    "--host",
    default=None,
    help="Host to bind to (overrides config)",
)
@click.option(
    "--port",
    "-p",
    type=int,
    default=None,
    help="Port to bind to (overrides config)",
)
@click.option(
    "--live-reload/--no-live-reload",
    default=None,
    help="Reload shortcuts when the config file changes (overrides config)",
)
def serve(
    config_path: Path | None,
    host: str | None,
    port: int | None,
    live_reload: bool | None,
) -> None:
    """Start the HTTP API server."""
    from devnav.server import run_server

    config = _load_config(config_path).with_overrides(
        host=host,
        port=port,
        live_reload_enabled=live_reload,
    )

    click.echo(f"Starting server on {config.server.host}:{config.server.port}")
    click.echo(f"Shortcuts: {len(config.tokens)}")
    if config.live_reload.enabled and config.config_path is not None:
        click.echo(f"Live reload: watching {config.config_path}")
    else:
        click.echo("Live reload: disabled")

    run_server(config)


def _load_config(config_path: Path | None) -> Config:
    """Load configuration, exiting with an error message on failure."""
    try:
        return Config.load(config_path)
    except (FileNotFoundError, ValueError) as e:
        click.echo(click.style(f"Error: {e}", fg="red"), err=True)
        sys.exit(1)


if __name__ == "__main__":
    cli()
