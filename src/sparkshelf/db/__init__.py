# ABOUTME: Public API for the sparkshelf catalog database layer.
# ABOUTME: Exports connection management, catalog operations, and data types.

from sparkshelf.db.catalog import BookCatalog, DuplicateBookError
from sparkshelf.db.connection import DEFAULT_DB_PATH, open_catalog
from sparkshelf.db.mapping import BookRecord

__all__ = [
    "DEFAULT_DB_PATH",
    "BookCatalog",
    "BookRecord",
    "DuplicateBookError",
    "open_catalog",
]
