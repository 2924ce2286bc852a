"""Storage layer for listings, search history and result files."""

from .db import Storage
from .files import export_csv, export_json, read_listings_json

__all__ = [
    "Storage",
    "export_csv",
    "export_json",
    "read_listings_json",
]
