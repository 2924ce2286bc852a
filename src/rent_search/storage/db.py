"""DuckDB storage for listings and search history."""

from __future__ import annotations

import json
from datetime import datetime
from pathlib import Path

import duckdb

from ..models import Listing

_LISTING_COLUMNS = [
    "id",
    "title",
    "location",
    "address",
    "description",
    "price",
    "rooms",
    "bathrooms",
    "property_type",
    "barangay",
    "amenities",
    "rental_type",
]


class Storage:
    """
    DuckDB storage for listings and search_history.
    """

    def __init__(self, db_path: Path | str = "rent_search.duckdb") -> None:
        self.db_path = Path(db_path)
        self._conn: duckdb.DuckDBPyConnection | None = None

    def _connect(self) -> duckdb.DuckDBPyConnection:
        if self._conn is None:
            self.db_path.parent.mkdir(parents=True, exist_ok=True)
            self._conn = duckdb.connect(str(self.db_path))
            self._init_schema()
        return self._conn

    def _init_schema(self) -> None:
        conn = self._conn
        conn.execute("""
            CREATE TABLE IF NOT EXISTS listings (
                id TEXT PRIMARY KEY,
                title TEXT,
                location TEXT,
                address TEXT,
                description TEXT,
                price DOUBLE,
                rooms INTEGER,
                bathrooms INTEGER,
                property_type TEXT,
                barangay TEXT,
                amenities TEXT,
                rental_type TEXT,
                seq BIGINT,
                saved_at TIMESTAMP
            )
        """)
        conn.execute("""
            CREATE TABLE IF NOT EXISTS search_history (
                seq BIGINT,
                term TEXT,
                searched_at TIMESTAMP
            )
        """)

    def _next_seq(self, table: str) -> int:
        conn = self._connect()
        return conn.execute(f"SELECT COALESCE(MAX(seq), 0) + 1 FROM {table}").fetchone()[0]

    def __enter__(self) -> Storage:
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()

    def save_listings(self, listings: list[Listing]) -> None:
        """Upsert listings by id. All or nothing: a failing row rolls back the batch."""
        conn = self._connect()
        now = datetime.now()
        seq = self._next_seq("listings")
        conn.begin()
        try:
            for i, l in enumerate(listings):
                amenities = json.dumps(l.amenities) if l.amenities is not None else None
                conn.execute(
                    """
                    INSERT OR REPLACE INTO listings
                    (id, title, location, address, description, price, rooms,
                     bathrooms, property_type, barangay, amenities, rental_type, seq, saved_at)
                    VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
                    """,
                    [
                        l.id,
                        l.title,
                        l.location,
                        l.address,
                        l.description,
                        l.price,
                        l.rooms,
                        l.bathrooms,
                        l.property_type,
                        l.barangay,
                        amenities,
                        l.rental_type,
                        seq + i,
                        now,
                    ],
                )
        except Exception:
            conn.rollback()
            raise
        conn.commit()

    def load_listings(self) -> list[Listing]:
        """Load all listings in insertion order."""
        conn = self._connect()
        rows = conn.execute(
            f"SELECT {', '.join(_LISTING_COLUMNS)} FROM listings ORDER BY seq"
        ).fetchall()
        listings = []
        for row in rows:
            d = dict(zip(_LISTING_COLUMNS, row))
            raw = d.get("amenities")
            if isinstance(raw, str):
                raw = json.loads(raw)
            listings.append(
                Listing(
                    id=d["id"],
                    title=d["title"],
                    location=d["location"],
                    address=d["address"],
                    description=d["description"],
                    price=d["price"],
                    rooms=d["rooms"],
                    bathrooms=d["bathrooms"],
                    property_type=d["property_type"],
                    barangay=d["barangay"],
                    amenities=raw,
                    rental_type=d["rental_type"],
                )
            )
        return listings

    def count_listings(self) -> int:
        conn = self._connect()
        return conn.execute("SELECT COUNT(*) FROM listings").fetchone()[0]

    def record_search(self, term: str) -> None:
        """Remember a search term. Blank terms are ignored."""
        term = (term or "").strip()
        if not term:
            return
        conn = self._connect()
        conn.execute(
            "INSERT INTO search_history (seq, term, searched_at) VALUES (?, ?, ?)",
            [self._next_seq("search_history"), term, datetime.now()],
        )

    def recent_terms(self, limit: int = 6) -> list[str]:
        """Distinct terms, most recently searched first."""
        conn = self._connect()
        rows = conn.execute(
            f"""
            SELECT term, MAX(seq) AS last_seq
            FROM search_history
            GROUP BY term
            ORDER BY last_seq DESC
            LIMIT {max(0, int(limit))}
            """
        ).fetchall()
        return [r[0] for r in rows]

    def popular_terms(self, limit: int = 6) -> list[str]:
        """Distinct terms, most searched first; ties go to the latest."""
        conn = self._connect()
        rows = conn.execute(
            f"""
            SELECT term, COUNT(*) AS n, MAX(seq) AS last_seq
            FROM search_history
            GROUP BY term
            ORDER BY n DESC, last_seq DESC
            LIMIT {max(0, int(limit))}
            """
        ).fetchall()
        return [r[0] for r in rows]

    def clear_history(self) -> None:
        conn = self._connect()
        conn.execute("DELETE FROM search_history")

    def close(self) -> None:
        """Close the database connection."""
        if self._conn:
            self._conn.close()
            self._conn = None
