"""CLI for the Lopez rental listing search."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, List, Optional

from dotenv import load_dotenv

# Load .env from project root
load_dotenv(Path(__file__).resolve().parent.parent.parent / ".env")

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .config import get_storage_path, load_config
from .models import OccupantType, RankedListing, SearchParams
from .search import SearchEngine
from .storage import Storage, export_csv, export_json, read_listings_json

app = typer.Typer(
    name="rent-search",
    help="Search rental listings by barangay, price, rooms and amenities",
)
console = Console()


def _load_cfg(config_path: Optional[Path]) -> dict[str, Any]:
    """Config from --config, else $RENT_SEARCH_CONFIG, else config.yaml."""
    path = config_path or os.environ.get("RENT_SEARCH_CONFIG") or None
    try:
        return load_config(path)
    except FileNotFoundError as e:
        if path:
            console.print(f"[red]{e}[/red]")
            raise typer.Exit(1)
        console.print("[dim]No config.yaml found, using defaults[/dim]")
        return {}


def _get_storage(cfg: dict[str, Any], db_path: Optional[Path]) -> Storage:
    return Storage(db_path or get_storage_path(cfg))


def _display_results(ranked: list[RankedListing], limit: int = 20) -> None:
    """Display ranked listings table."""
    if not ranked:
        console.print("[yellow]No listings match.[/yellow]")
        return

    table = Table(title=f"Listings ({len(ranked)} found)")
    table.add_column("Rank", style="dim")
    table.add_column("Score", justify="right")
    table.add_column("Title", style="cyan")
    table.add_column("Barangay", style="dim")
    table.add_column("Price", justify="right")
    table.add_column("Rooms", justify="right")
    table.add_column("Type")
    table.add_column("Rental")

    for i, r in enumerate(ranked[:limit], 1):
        l = r.listing
        title = l.title or l.id
        title_display = title[:30] + "..." if len(title) > 30 else title
        table.add_row(
            str(i),
            str(r.score),
            title_display,
            l.barangay or "",
            f"₱{l.price:,.0f}" if l.price is not None else "-",
            str(l.rooms) if l.rooms is not None else "-",
            l.property_type or "",
            l.rental_type or "",
        )

    console.print(table)


@app.command("import-listings")
def import_listings(
    path: Path = typer.Argument(..., help="JSON file with an array of listings"),
    config_path: Optional[Path] = typer.Option(None, "--config", "-c", help="Path to config.yaml"),
    db_path: Optional[Path] = typer.Option(None, "--db", help="DuckDB file"),
) -> None:
    """Import listings from a JSON export."""
    cfg = _load_cfg(config_path)
    try:
        listings = read_listings_json(path)
    except (FileNotFoundError, ValueError) as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1)

    missing_id = [l for l in listings if not l.id]
    if missing_id:
        console.print(f"[yellow]Warning: skipping {len(missing_id)} listings without an id[/yellow]")
    listings = [l for l in listings if l.id]

    with _get_storage(cfg, db_path) as storage:
        storage.save_listings(listings)
        total = storage.count_listings()
    console.print(f"[green]Imported {len(listings)} listings ({total} stored)[/green]")


@app.command()
def search(
    text: Optional[str] = typer.Argument(None, help="Search phrase"),
    parse: bool = typer.Option(False, "--parse", "-p", help="Read rooms/price/barangay/amenities from the phrase instead of matching it as text"),
    location: Optional[str] = typer.Option(None, "--location", "-l", help="Barangay"),
    min_price: Optional[float] = typer.Option(None, "--min-price"),
    max_price: Optional[float] = typer.Option(None, "--max-price"),
    rooms: Optional[int] = typer.Option(None, "--rooms", "-r", help="Minimum rooms"),
    amenity: Optional[List[str]] = typer.Option(None, "--amenity", "-a", help="Required amenity (repeatable)"),
    property_type: Optional[str] = typer.Option(None, "--property-type", "-t"),
    occupant: Optional[OccupantType] = typer.Option(None, "--occupant", "-o"),
    limit: int = typer.Option(20, "--limit", "-n", help="Max listings to show"),
    export: Optional[Path] = typer.Option(None, "--export", "-e", help="Write results to .csv or .json"),
    config_path: Optional[Path] = typer.Option(None, "--config", "-c", help="Path to config.yaml"),
    db_path: Optional[Path] = typer.Option(None, "--db", help="DuckDB file"),
) -> None:
    """Filter and rank stored listings."""
    cfg = _load_cfg(config_path)
    engine = SearchEngine(config=cfg)
    explicit = SearchParams(
        location=location,
        min_price=min_price,
        max_price=max_price,
        rooms=rooms,
        amenities=list(amenity) if amenity else None,
        property_type=property_type,
        occupant_type=occupant,
    )
    if parse and text:
        params = engine.build_params(text, explicit, match_text=False)
        console.print(f"[dim]Parsed: {escape(str(params.to_dict()))}[/dim]")
    else:
        explicit.query = text
        params = explicit

    with _get_storage(cfg, db_path) as storage:
        listings = storage.load_listings()
        if not listings:
            console.print("[yellow]No listings in database. Run 'import-listings' first.[/yellow]")
            raise typer.Exit(1)
        if text:
            storage.record_search(text)

    ranked = engine.rank(listings, params=params)
    _display_results(ranked, limit=limit)

    if export:
        if export.suffix.lower() == ".csv":
            export_csv(ranked, export)
        else:
            export_json(ranked, export, params=params)
        console.print(f"[dim]Results saved to {export}[/dim]")


@app.command()
def suggest(
    text: Optional[str] = typer.Argument(None, help="Partial search input"),
    config_path: Optional[Path] = typer.Option(None, "--config", "-c", help="Path to config.yaml"),
    db_path: Optional[Path] = typer.Option(None, "--db", help="DuckDB file"),
) -> None:
    """Suggest barangays, amenities and recent/popular searches."""
    cfg = _load_cfg(config_path)
    engine = SearchEngine(config=cfg)
    with _get_storage(cfg, db_path) as storage:
        recent = storage.recent_terms(engine.suggestion_limit)
        popular = storage.popular_terms(engine.suggestion_limit)

    suggestions = engine.suggest(text, recent, popular)
    if not suggestions:
        console.print("[yellow]No suggestions.[/yellow]")
        return
    for s in suggestions:
        console.print(f"[dim]{s.kind.value:<9}[/dim] {escape(s.label)}")


@app.command()
def history(
    clear: bool = typer.Option(False, "--clear", help="Forget all searches"),
    limit: int = typer.Option(10, "--limit", "-n"),
    config_path: Optional[Path] = typer.Option(None, "--config", "-c", help="Path to config.yaml"),
    db_path: Optional[Path] = typer.Option(None, "--db", help="DuckDB file"),
) -> None:
    """Show recent and popular searches."""
    cfg = _load_cfg(config_path)
    with _get_storage(cfg, db_path) as storage:
        if clear:
            storage.clear_history()
            console.print("[green]Search history cleared.[/green]")
            return
        recent = storage.recent_terms(limit)
        popular = storage.popular_terms(limit)

    if not recent:
        console.print("[yellow]No searches yet.[/yellow]")
        return
    table = Table(title="Search history")
    table.add_column("Recent", style="cyan")
    table.add_column("Popular")
    for i in range(max(len(recent), len(popular))):
        table.add_row(
            recent[i] if i < len(recent) else "",
            popular[i] if i < len(popular) else "",
        )
    console.print(table)


if __name__ == "__main__":
    app()
