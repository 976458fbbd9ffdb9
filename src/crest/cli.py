from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

import typer
from pydantic import ValidationError

from crest.adapters.config import config
from crest.analysis.finance import compute_metrics
from crest.analysis.scoring import classify
from crest.analysis.tax import resolve_tax_rate
from crest.domain.deal import Deal
from crest.services.comparison import ALL, compare, comparison_frame
from crest.services.deal_book import DealBook
from crest.services.export import write_csv

app = typer.Typer(help="Commercial real-estate deal analyzer (metrics, comparison, export).")


@app.command("tax-rate")
def tax_rate_cmd(location: str = typer.Argument(..., help="City/state text, e.g. 'Houston, TX'")) -> None:
    """
    Print the annual property tax rate (percent) used for a location.
    """
    typer.echo(f"{resolve_tax_rate(location):.2f}")


@app.command()
def analyze(
    deal_json: Path = typer.Argument(..., exists=True, dir_okay=False, help="JSON file with one deal"),
) -> None:
    """
    Compute metrics for a deal stored as JSON and print them as JSON.
    """
    try:
        deal = Deal.model_validate_json(deal_json.read_text(encoding="utf-8"))
    except ValidationError as e:
        typer.echo(f"invalid deal: {e}", err=True)
        raise typer.Exit(code=2) from e

    metrics = compute_metrics(deal)
    typer.echo(json.dumps({**metrics.to_dict(), **classify(metrics)}, indent=2))


@app.command()
def samples(
    sort_by: str = typer.Option(config.DEFAULT_SORT_METRIC, help="totalROI|cashOnCash|capRate|dscr|annualizedReturn"),
    property_type: str = typer.Option(ALL, help="Filter by property type key"),
    construction_type: str = typer.Option(ALL, help="Filter by construction type key"),
) -> None:
    """
    Rank the built-in sample deals.
    """
    book = DealBook()
    book.seed_samples()
    try:
        ranked = compare(
            book.records(),
            property_type=property_type,
            construction_type=construction_type,
            sort_by=sort_by,
        )
    except ValueError as e:
        raise typer.BadParameter(str(e), param_hint="--sort-by") from e

    df = comparison_frame(ranked)
    cols = ["name", "propertyType", "constructionType", "location", sort_by, "riskTier"]
    typer.echo(df[cols].to_string(index=False))


@app.command()
def export(
    output: Optional[Path] = typer.Argument(None, help=f"CSV path (default: {config.EXPORT_FILENAME})"),
) -> None:
    """
    Write the sample deals to a comparison CSV.
    """
    book = DealBook()
    book.seed_samples()
    path = write_csv(book.records(), output or Path(config.EXPORT_FILENAME))
    typer.echo(str(path))


if __name__ == "__main__":
    app()
