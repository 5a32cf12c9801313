# ABOUTME: CRUD operations for the sparkshelf book catalog.
# ABOUTME: Insert-once book rows keyed by Open Library work key, lookups, listing and FTS search.

import sqlite3

from sparkshelf.db.mapping import BookRecord, metadata_to_row, row_to_record
from sparkshelf.metadata.types import BookMetadata


class DuplicateBookError(Exception):
    """Raised when adding a book whose Open Library key is already cataloged."""


class BookCatalog:
    """Wraps a sqlite3 connection and provides typed CRUD for the books table."""

    def __init__(self, conn: sqlite3.Connection) -> None:
        self._conn = conn

    def add_book(self, metadata: BookMetadata) -> int:
        """Add a book to the catalog.

        Returns:
            The row ID of the inserted book.

        Raises:
            DuplicateBookError: If the Open Library key is already present,
                including when another writer inserted it a moment earlier.
        """
        row = metadata_to_row(metadata)
        columns = ", ".join(row.keys())
        placeholders = ", ".join("?" for _ in row)
        values = list(row.values())

        try:
            cursor = self._conn.execute(
                f"INSERT INTO books ({columns}) VALUES ({placeholders})",
                values,
            )
            self._conn.commit()
        except sqlite3.IntegrityError as exc:
            if "UNIQUE constraint failed: books.open_library_key" in str(exc):
                raise DuplicateBookError(
                    f"Book {metadata.open_library_key} already exists"
                ) from exc
            raise

        return cursor.lastrowid  # type: ignore[return-value]

    def get_by_id(self, book_id: int) -> BookRecord | None:
        """Retrieve a book by its row ID."""
        cursor = self._conn.execute("SELECT * FROM books WHERE id = ?", (book_id,))
        row = cursor.fetchone()
        return row_to_record(row) if row else None

    def get_by_open_library_key(self, open_library_key: str) -> BookRecord | None:
        """Retrieve a book by its Open Library work key."""
        cursor = self._conn.execute(
            "SELECT * FROM books WHERE open_library_key = ?", (open_library_key,)
        )
        row = cursor.fetchone()
        return row_to_record(row) if row else None

    def get_by_isbn(self, isbn: str) -> BookRecord | None:
        """Retrieve a book by ISBN-13 or ISBN-10."""
        cursor = self._conn.execute(
            "SELECT * FROM books WHERE isbn13 = ? OR isbn10 = ? ORDER BY id LIMIT 1",
            (isbn, isbn),
        )
        row = cursor.fetchone()
        return row_to_record(row) if row else None

    def list_all(self) -> list[BookRecord]:
        """Return all books in the catalog, ordered by title."""
        cursor = self._conn.execute("SELECT * FROM books ORDER BY title")
        return [row_to_record(row) for row in cursor.fetchall()]

    def list_by_genre(self, genre: str) -> list[BookRecord]:
        """Return books with a genre tag containing `genre`, case-insensitively."""
        cursor = self._conn.execute(
            "SELECT DISTINCT books.* FROM books, json_each(books.genres) "
            "WHERE lower(json_each.value) LIKE '%' || lower(?) || '%' "
            "ORDER BY books.title",
            (genre,),
        )
        return [row_to_record(row) for row in cursor.fetchall()]

    def search(self, query: str) -> list[BookRecord]:
        """Full-text search across title, authors, description, and subjects.

        Uses FTS5 MATCH syntax. Results are ranked by relevance (FTS5 rank).
        """
        cursor = self._conn.execute(
            "SELECT books.* FROM books "
            "JOIN books_fts ON books.id = books_fts.rowid "
            "WHERE books_fts MATCH ? "
            "ORDER BY books_fts.rank",
            (query,),
        )
        return [row_to_record(row) for row in cursor.fetchall()]

    def count(self) -> int:
        cursor = self._conn.execute("SELECT COUNT(*) FROM books")
        return cursor.fetchone()[0]
