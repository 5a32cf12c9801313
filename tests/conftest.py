# ABOUTME: Shared pytest fixtures for sparkshelf tests.
# ABOUTME: Provides a temporary catalog database and a fully-populated BookMetadata.

import sqlite3
from collections.abc import Iterator
from pathlib import Path

import pytest

from sparkshelf.db.catalog import BookCatalog
from sparkshelf.db.connection import open_catalog
from sparkshelf.metadata.types import BookMetadata


@pytest.fixture
def db_path(tmp_path: Path) -> Path:
    """Path for a catalog database that does not exist yet."""
    return tmp_path / "catalog.db"


@pytest.fixture
def conn(db_path: Path) -> Iterator[sqlite3.Connection]:
    """An open catalog connection with the schema applied."""
    connection = open_catalog(db_path)
    yield connection
    connection.close()


@pytest.fixture
def catalog(conn: sqlite3.Connection) -> BookCatalog:
    """Provide a BookCatalog backed by a temporary database."""
    return BookCatalog(conn)


@pytest.fixture
def sample_metadata() -> BookMetadata:
    """A fully-populated BookMetadata for testing."""
    return BookMetadata(
        open_library_key="/works/OL456W",
        title="The Name of the Rose",
        authors=["Umberto Eco"],
        description="A mystery set in a medieval Italian monastery.",
        cover_small="https://covers.openlibrary.org/b/isbn/9780156001311-S.jpg",
        cover_medium="https://covers.openlibrary.org/b/isbn/9780156001311-M.jpg",
        cover_large="https://covers.openlibrary.org/b/isbn/9780156001311-L.jpg",
        published_date="1994",
        publisher="Harcourt",
        page_count=536,
        genres=["Fiction", "Historical fiction", "Mystery and detective stories"],
        subjects=["Fiction", "Historical fiction", "Mystery and detective stories", "Italy"],
        isbn13="9780156001311",
        isbn10="0156001314",
    )
