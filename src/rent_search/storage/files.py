"""Read listing exports and write ranked search results to CSV and JSON."""

from __future__ import annotations

import csv
import json
from datetime import datetime
from pathlib import Path
from typing import Any

from ..models import Listing, RankedListing, SearchParams


def _serialize(obj: Any) -> Any:
    """JSON serializer for datetime and other objects."""
    if isinstance(obj, datetime):
        return obj.isoformat()
    raise TypeError(f"Object of type {type(obj)} is not JSON serializable")


def read_listings_json(path: Path | str) -> list[Listing]:
    """Read listings from a JSON array, or an object with a "listings" array.

    Records that are not objects are skipped.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Listings file not found: {path}")
    with open(path, encoding="utf-8") as f:
        data = json.load(f)
    if isinstance(data, dict):
        data = data.get("listings")
    if not isinstance(data, list):
        raise ValueError(f"{path}: expected a JSON array of listings")
    return [Listing.from_dict(d) for d in data if isinstance(d, dict)]


def export_csv(results: list[RankedListing], path: Path | str) -> None:
    """Export ranked listings to CSV."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    fieldnames = [
        "rank",
        "score",
        "listing_id",
        "title",
        "barangay",
        "address",
        "price",
        "rooms",
        "property_type",
        "rental_type",
        "amenities",
    ]

    with open(path, "w", newline="", encoding="utf-8") as f:
        writer = csv.DictWriter(f, fieldnames=fieldnames)
        writer.writeheader()
        for i, r in enumerate(results, 1):
            writer.writerow({
                "rank": i,
                "score": r.score,
                "listing_id": r.listing.id,
                "title": r.listing.title or "",
                "barangay": r.listing.barangay or "",
                "address": r.listing.address or "",
                "price": r.listing.price if r.listing.price is not None else "",
                "rooms": r.listing.rooms if r.listing.rooms is not None else "",
                "property_type": r.listing.property_type or "",
                "rental_type": r.listing.rental_type or "",
                "amenities": " | ".join(r.listing.amenities or []),
            })


def export_json(
    results: list[RankedListing],
    path: Path | str,
    params: SearchParams | None = None,
) -> None:
    """Export ranked listings, and the params that produced them, to JSON."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    data = {
        "run_at": datetime.now().isoformat(),
        "params": params.to_dict() if params is not None else None,
        "count": len(results),
        "results": [dict(rank=i, **r.to_dict()) for i, r in enumerate(results, 1)],
    }

    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2, default=_serialize)
