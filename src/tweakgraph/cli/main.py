"""CLI entry point for tweakgraph.

Invoked as::

    tweakgraph [OPTIONS] COMMAND [ARGS]...

or, during development::

    python -m tweakgraph.cli.main

Commands
--------
apps        List the demo applications
render      Render one demo application to JSON or YAML
check       Verify every demo application renders the same document
types       List registered resource types
version     Show version information
"""
from __future__ import annotations

import sys
from pathlib import Path

import click
from rich.console import Console
from rich.syntax import Syntax
from rich.table import Table

from tweakgraph.config import LinkPolicy, Settings, configure_logging
from tweakgraph.errors import TweakGraphError

console = Console()
err_console = Console(stderr=True)


def _settings(ctx: click.Context) -> Settings:
    settings: Settings = ctx.obj
    return settings


def _render_app(name: str, settings: Settings, fmt: str) -> str:
    """Build and serialize one demo app, exiting on error."""
    from tweakgraph.demo import APPS
    from tweakgraph.render import DocumentSerializer

    app = APPS.get(name)
    if app is None:
        err_console.print(
            f"[red]Error:[/red] Unknown app {name!r}. Available: {', '.join(APPS)}"
        )
        sys.exit(1)

    try:
        root = app.build(settings)
        return DocumentSerializer().render(root, fmt)
    except TweakGraphError as exc:
        err_console.print(f"[red]{type(exc).__name__}[/red] in app {name!r}: {exc}")
        sys.exit(1)


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------


@click.group()
@click.version_option(package_name="tweakgraph")
@click.option("--debug", is_flag=True, default=False, help="Log every link attempt to stderr")
@click.option("--strict", is_flag=True, default=False, help="Fail on linkables that match nothing")
@click.pass_context
def cli(ctx: click.Context, debug: bool, strict: bool) -> None:
    """Build construct trees from tweaks and render them deterministically."""
    settings = Settings.from_env()
    if debug or strict:
        settings = Settings(
            link_policy=LinkPolicy.STRICT if strict else settings.link_policy,
            debug=debug or settings.debug,
        )
    configure_logging(settings)
    ctx.obj = settings


# ---------------------------------------------------------------------------
# version command
# ---------------------------------------------------------------------------


@cli.command(name="version")
def version_command() -> None:
    """Show detailed version information."""
    from tweakgraph import __version__

    table = Table(show_header=False, box=None)
    table.add_row("[bold]tweakgraph[/bold]", f"v{__version__}")
    table.add_row("Python", f"{sys.version_info.major}.{sys.version_info.minor}.{sys.version_info.micro}")
    table.add_row("Platform", sys.platform)
    console.print(table)


# ---------------------------------------------------------------------------
# types command
# ---------------------------------------------------------------------------


@cli.command(name="types")
def types_command() -> None:
    """List registered resource types, including installed entry-points."""
    import tweakgraph.library  # noqa: F401  (registers built-in types)
    from tweakgraph.plugins import resource_types

    resource_types.load_entrypoints()

    table = Table(title="Resource types")
    table.add_column("Type", style="bold")
    table.add_column("Class")
    for resource_type in resource_types.list_types():
        cls = resource_types.get(resource_type)
        table.add_row(resource_type, f"{cls.__module__}.{cls.__qualname__}")
    console.print(table)


# ---------------------------------------------------------------------------
# apps command
# ---------------------------------------------------------------------------


@cli.command(name="apps")
def apps_command() -> None:
    """List the demo applications."""
    from tweakgraph.demo import APPS

    table = Table(title="Demo apps")
    table.add_column("Name", style="bold")
    table.add_column("Description")
    for app in APPS.values():
        table.add_row(app.name, app.description)
    console.print(table)


# ---------------------------------------------------------------------------
# render command
# ---------------------------------------------------------------------------


@cli.command(name="render")
@click.argument("app")
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["json", "yaml"], case_sensitive=False),
    default="json",
    help="Document output format",
)
@click.option("--output", "-o", default=None, help="Output file path (defaults to stdout)")
@click.pass_context
def render_command(ctx: click.Context, app: str, output_format: str, output: str | None) -> None:
    """Render a demo application.

    APP is the name shown by the ``apps`` command.
    """
    fmt = output_format.lower()
    text = _render_app(app, _settings(ctx), fmt)

    if output:
        Path(output).write_text(text, encoding="utf-8")
        console.print(f"[green]Document written to[/green] {output}")
    else:
        console.print(Syntax(text, fmt, line_numbers=True))


# ---------------------------------------------------------------------------
# check command
# ---------------------------------------------------------------------------


@cli.command(name="check")
@click.pass_context
def check_command(ctx: click.Context) -> None:
    """Verify that every demo application renders the same document."""
    from tweakgraph.demo import APPS

    settings = _settings(ctx)
    rendered = [(name, _render_app(name, settings, "json")) for name in APPS]
    baseline_name, baseline = rendered[0]

    mismatches = [(name, text) for name, text in rendered[1:] if text != baseline]
    if not mismatches:
        console.print(f"[green]OK[/green] {len(rendered)} app(s) render identically")
        return

    console.print(f"[bold]{baseline_name}[/bold] (baseline)")
    console.print(Syntax(baseline, "json"))
    for name, text in mismatches:
        console.print(f"[red]MISMATCH[/red] [bold]{name}[/bold]")
        console.print(Syntax(text, "json"))
    sys.exit(1)


if __name__ == "__main__":
    cli()
