"""Vitrine CLI - browse a catalog from the terminal.

Usage:
    vitrine users
    vitrine show max/dolls --highlight sally-ride --limit 2
    vitrine show max/dolls/neil-armstrong --manifest https://example.org/manifest.json
"""

import asyncio
from enum import Enum
from typing import Optional

import typer

from vitrine_catalog import ManifestLoader, split_path
from vitrine_common import (
    ExternalManifestError,
    ManifestValidationError,
    NotFoundError,
    configure_logging,
    get_settings,
)
from vitrine_cli.formatters import (
    format_collection_view,
    format_item_view,
    format_json,
    format_user,
    format_users,
)

app = typer.Typer(
    name="vitrine",
    help="Browse users, collections and 3D-scanned items from catalog manifests.",
    add_completion=False,
)

# 2 is taken by click for usage errors.
EXIT_NOT_FOUND = 1
EXIT_EXTERNAL_MANIFEST = 3
EXIT_FIRST_PARTY_MANIFEST = 4


class OutputFormat(str, Enum):
    """Output format options."""

    markdown = "markdown"
    json = "json"


def _run(coro):
    """Run a loader coroutine, mapping catalog errors to exit codes."""

    async def _with_loader():
        async with ManifestLoader() as loader:
            return await coro(loader)

    try:
        return asyncio.run(_with_loader())
    except NotFoundError as e:
        typer.echo(f"Not found: {e}", err=True)
        raise typer.Exit(EXIT_NOT_FOUND)
    except ExternalManifestError as e:
        typer.echo(f"Error: could not load third-party manifest {e.url}: {e.cause}", err=True)
        raise typer.Exit(EXIT_EXTERNAL_MANIFEST)
    except (ManifestValidationError, OSError) as e:
        typer.echo(f"Error: could not load first-party manifest: {e}", err=True)
        raise typer.Exit(EXIT_FIRST_PARTY_MANIFEST)


@app.callback()
def main_callback(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
):
    configure_logging(level="DEBUG" if verbose else "WARNING")


@app.command()
def users(
    manifest: Optional[str] = typer.Option(
        None, "--manifest", "-m", help="URL of a third-party manifest to merge in"
    ),
    format: OutputFormat = typer.Option(OutputFormat.markdown, "--format", "-f"),
):
    """List every user in the catalog.

    Examples:

        vitrine users --manifest https://example.org/manifest.json
    """
    result = _run(lambda loader: loader.load_users(manifest))
    typer.echo(format_json(result) if format == OutputFormat.json else format_users(result))


@app.command()
def show(
    path: str = typer.Argument(..., help="user, user/collection or user/collection/item"),
    manifest: Optional[str] = typer.Option(
        None, "--manifest", "-m", help="URL of a third-party manifest to merge in"
    ),
    highlight: Optional[str] = typer.Option(
        None, "--highlight", help="Item id whose page is shown in a collection"
    ),
    limit: Optional[int] = typer.Option(
        None, "--limit", "-n", min=1, help="Items per page in a collection (default: page_size setting)"
    ),
    format: OutputFormat = typer.Option(OutputFormat.markdown, "--format", "-f"),
):
    """Show a user, a collection page, or a single item.

    Examples:

        vitrine show max

        vitrine show max/dolls --highlight sally-ride --limit 2

        vitrine show max/dolls/neil-armstrong
    """
    try:
        segments = split_path(path)
    except ValueError as e:
        raise typer.BadParameter(str(e), param_hint="PATH")
    if not 1 <= len(segments) <= 3:
        raise typer.BadParameter(
            f"expected user[/collection[/item]], got {path!r}", param_hint="PATH"
        )
    page_size = limit if limit is not None else get_settings().page_size

    if len(segments) == 1:
        result = _run(lambda loader: loader.load_user(segments[0], manifest))
        text = format_user(result)
    elif len(segments) == 2:
        result = _run(
            lambda loader: loader.load_collection_view(
                segments[0], segments[1], highlighted=highlight, limit=page_size, manifest_url=manifest
            )
        )
        text = format_collection_view(result)
    else:
        result = _run(lambda loader: loader.load_item_view(*segments, manifest_url=manifest))
        text = format_item_view(result)

    typer.echo(format_json(result) if format == OutputFormat.json else text)


def main():
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
