"""CLI entry point for steam-openapi."""

import logging
from pathlib import Path

import click

from steam_openapi.catalog.base import ApiCatalog
from steam_openapi.catalog.loader import CatalogError, load_catalog, load_default_catalog
from steam_openapi.config import AUDIENCES, DEFAULT_AUDIENCE
from steam_openapi.openapi.document import build_document, count_callable, count_methods
from steam_openapi.openapi.render import FORMATS, render_document


def _load(catalog_path: Path | None) -> ApiCatalog:
    """Load the given catalog file, or the bundled one when none is given."""
    try:
        if catalog_path is None:
            return load_default_catalog()
        return load_catalog(catalog_path)
    except CatalogError as e:
        raise click.ClickException(str(e)) from e


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging on stderr.")
def main(verbose: bool):
    """Steam OpenAPI — generate OpenAPI 3.0 documents from the Steam Web API catalog."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@main.command()
@click.option("--catalog", "catalog_path", default=None, type=click.Path(exists=True, path_type=Path), help="Catalog file (JSON or YAML). Defaults to the bundled catalog.")
@click.option("--audience", default=DEFAULT_AUDIENCE, type=click.Choice(AUDIENCES), help="Which methods to include.")
@click.option("--format", "fmt", default="json", type=click.Choice(FORMATS), help="Output format.")
def generate(catalog_path: Path | None, audience: str, fmt: str):
    """Print the OpenAPI document for one audience to stdout."""
    catalog = _load(catalog_path)
    document = build_document(catalog, audience)
    click.echo(render_document(document, fmt))


@main.command()
@click.option("--catalog", "catalog_path", default=None, type=click.Path(exists=True, path_type=Path), help="Catalog file (JSON or YAML). Defaults to the bundled catalog.")
def services(catalog_path: Path | None):
    """List services with their callable method counts."""
    catalog = _load(catalog_path)

    for service_name, methods in catalog.services.items():
        click.echo(f"{service_name}: {count_callable(methods.values())} methods")

    totals = count_methods(catalog)
    click.echo(", ".join(f"{audience}={count}" for audience, count in totals.items()))
