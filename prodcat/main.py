"""CLI interface for the product catalogue."""

import json
import logging
import sys
from pathlib import Path

import typer
from pydantic import ValidationError

from .catalogue import Catalogue
from .config import CatalogueSettings, get_settings
from .errors import CatalogueError
from .model import Batch, ByKeyword, ByPrice, Product

app = typer.Typer(help="In-memory product catalogue tools")

logger = logging.getLogger(__name__)


def setup_logging(settings: CatalogueSettings) -> None:
    """Configure logging for the command line."""
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper()),
        format=settings.log_format,
        handlers=[
            logging.StreamHandler(sys.stderr),
        ],
    )


def read_products(path: Path) -> list[Product]:
    """Read products from a JSON file.

    The file holds either a list of product objects or a batch object
    (``{"type": "Batch", "products": [...]}``).
    """
    with path.open("r", encoding="utf-8") as f:
        raw = json.load(f)

    if isinstance(raw, dict):
        return Batch.model_validate(raw).products
    return [Product.model_validate(entry) for entry in raw]


def load_catalogue(path: Path, title: str | None) -> Catalogue:
    """Build a catalogue from a product file, exiting on bad input."""
    settings = get_settings()
    setup_logging(settings)

    catalogue = Catalogue(title or settings.title)
    try:
        products = read_products(path)
        added = catalogue.batch_add_products(products)
    except OSError as e:
        typer.echo(f"Error: Could not read '{path}': {e}", err=True)
        raise typer.Exit(1)
    except json.JSONDecodeError as e:
        typer.echo(f"Error: '{path}' is not valid JSON: {e}", err=True)
        raise typer.Exit(1)
    except (ValidationError, CatalogueError) as e:
        typer.echo(f"Error: Invalid products in '{path}': {e}", err=True)
        raise typer.Exit(1)

    logger.info(f"Loaded {added} of {len(products)} products from {path}")
    return catalogue


title_option = typer.Option(
    None,
    "--title",
    "-t",
    help="Catalogue title. Defaults to PRODCAT_TITLE or 'Product Catalogue'.",
)


@app.command()
def show(
    path: Path = typer.Argument(..., help="JSON file of products"),
    title: str | None = title_option,
):
    """List the products loaded from a file as JSON."""
    catalogue = load_catalogue(path, title)
    typer.echo(
        json.dumps(
            {
                "title": catalogue.title,
                "products": [p.model_dump(by_alias=True) for p in catalogue],
            },
            indent=2,
        )
    )


@app.command()
def reorders(
    path: Path = typer.Argument(..., help="JSON file of products"),
    title: str | None = title_option,
):
    """Report products at or below their reorder level."""
    catalogue = load_catalogue(path, title)
    result = catalogue.check_reorders()
    typer.echo(result.model_dump_json(indent=2))


@app.command()
def search(
    path: Path = typer.Argument(..., help="JSON file of products"),
    max_price: float | None = typer.Option(
        None,
        "--max-price",
        "-p",
        min=0,
        help="Match products priced at or below this amount.",
    ),
    keyword: str | None = typer.Option(
        None,
        "--keyword",
        "-k",
        help="Match products whose name contains this text (case-sensitive).",
    ),
    title: str | None = title_option,
):
    """Search products by maximum price or name keyword."""
    if max_price is not None:
        criteria: ByPrice | ByKeyword = ByPrice(max_price=max_price)
    elif keyword is not None:
        criteria = ByKeyword(keyword=keyword)
    else:
        typer.echo("Error: Specify --max-price or --keyword", err=True)
        raise typer.Exit(2)

    catalogue = load_catalogue(path, title)
    result = catalogue.search(criteria)
    typer.echo(result.model_dump_json(indent=2))


if __name__ == "__main__":
    app()
