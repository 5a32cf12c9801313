# ABOUTME: Work resolution pipeline: Open Library work key -> normalized, cataloged book.
# ABOUTME: Cache-or-fetch against the catalog, with best-edition merging and author enrichment.

import logging
from collections.abc import Sequence
from typing import Protocol

from sparkshelf.db.catalog import DuplicateBookError
from sparkshelf.db.mapping import BookRecord
from sparkshelf.metadata.covers import CoverSize, best_cover_url
from sparkshelf.metadata.http import MetadataFetchError
from sparkshelf.metadata.openlibrary import normalize_work_key
from sparkshelf.metadata.openlibrary_parser import (
    OpenLibraryAuthor,
    OpenLibraryEdition,
    OpenLibraryWork,
)
from sparkshelf.metadata.scoring import (
    first_isbn10,
    first_isbn13,
    first_page_count,
    first_publish_date,
    first_publisher,
    select_best_edition,
)
from sparkshelf.metadata.subjects import derive_genres
from sparkshelf.metadata.types import BookMetadata

logger = logging.getLogger(__name__)

EDITION_FETCH_LIMIT = 50
MAX_AUTHORS = 3
_SUBJECT_SCAN_LIMIT = 20
_STORED_SUBJECT_LIMIT = 10


class BookNotFoundError(Exception):
    """Raised when a work cannot be fetched from Open Library."""


class WorkSource(Protocol):
    """The slice of the Open Library client the resolver needs."""

    def get_work(self, work_key: str) -> OpenLibraryWork: ...

    def get_editions(self, work_key: str, limit: int = 10) -> list[OpenLibraryEdition]: ...

    def get_author(self, author_key: str) -> OpenLibraryAuthor: ...


class BookStore(Protocol):
    """The slice of the catalog the resolver needs."""

    def get_by_id(self, book_id: int) -> BookRecord | None: ...

    def get_by_open_library_key(self, open_library_key: str) -> BookRecord | None: ...

    def add_book(self, metadata: BookMetadata) -> int: ...


def _cover_urls(
    isbns: list[str], cover_id: int | None
) -> tuple[str | None, str | None, str | None]:
    sizes: tuple[CoverSize, ...] = ("S", "M", "L")
    small, medium, large = (best_cover_url(isbns, cover_id, size) for size in sizes)
    return small, medium, large


def build_book_metadata(
    work_key: str,
    work: OpenLibraryWork,
    editions: Sequence[OpenLibraryEdition],
    authors: Sequence[str],
) -> BookMetadata:
    """Merge a work, its editions and resolved author names into one record.

    The best-scoring edition supplies edition-level fields; any field it lacks
    comes from the first edition that has it.
    """
    best = select_best_edition(editions)

    isbn13 = first_isbn13(best, editions)
    isbn10 = first_isbn10(best, editions)

    if work.covers:
        cover_id: int | None = work.covers[0]
    elif best and best.covers:
        cover_id = best.covers[0]
    else:
        cover_id = None
    cover_small, cover_medium, cover_large = _cover_urls(
        [isbn for isbn in (isbn13, isbn10) if isbn], cover_id
    )

    subjects = work.subjects[:_SUBJECT_SCAN_LIMIT]
    if not subjects and best:
        subjects = best.subjects[:_SUBJECT_SCAN_LIMIT]

    return BookMetadata(
        open_library_key=work_key,
        title=work.title,
        authors=list(authors),
        description=work.description,
        cover_small=cover_small,
        cover_medium=cover_medium,
        cover_large=cover_large,
        published_date=first_publish_date(best, editions),
        publisher=first_publisher(best, editions),
        page_count=first_page_count(best, editions),
        genres=derive_genres(subjects),
        subjects=subjects[:_STORED_SUBJECT_LIMIT],
        isbn13=isbn13,
        isbn10=isbn10,
    )


class BookResolver:
    """Turns Open Library work keys into cataloged books.

    The catalog doubles as the cache: a key is fetched from Open Library at
    most once, and later calls return the stored row. Two processes racing
    to insert the same work both end up with the single stored row.
    """

    def __init__(self, client: WorkSource, catalog: BookStore) -> None:
        self._client = client
        self._catalog = catalog

    def resolve(self, work_key: str) -> BookRecord:
        """Return the cataloged book for a work key, fetching it on first use.

        Raises:
            BookNotFoundError: If the work itself cannot be fetched.
        """
        key = normalize_work_key(work_key)

        existing = self._catalog.get_by_open_library_key(key)
        if existing is not None:
            logger.debug("Catalog hit for %s (book %d)", key, existing.id)
            return existing

        metadata = self.fetch_metadata(key)

        try:
            book_id = self._catalog.add_book(metadata)
        except DuplicateBookError:
            logger.info("Book %s was cataloged concurrently, using the stored row", key)
            existing = self._catalog.get_by_open_library_key(key)
            if existing is None:
                raise
            return existing

        record = self._catalog.get_by_id(book_id)
        if record is None:
            raise LookupError(f"Book {book_id} vanished after insert")
        logger.info("Cataloged %s as book %d: %s", key, record.id, metadata.title)
        return record

    def fetch_metadata(self, work_key: str) -> BookMetadata:
        """Fetch and assemble a work's metadata without touching the catalog.

        Raises:
            BookNotFoundError: If the work itself cannot be fetched.
        """
        key = normalize_work_key(work_key)
        try:
            work = self._client.get_work(key)
        except MetadataFetchError as exc:
            raise BookNotFoundError(f"Work {key} not found on Open Library: {exc}") from exc

        editions = self._fetch_editions(key)
        authors = self._resolve_authors(work.author_keys)
        return build_book_metadata(key, work, editions, authors)

    def _fetch_editions(self, key: str) -> list[OpenLibraryEdition]:
        """Editions are enrichment: a failed fetch yields an empty list."""
        try:
            return self._client.get_editions(key, limit=EDITION_FETCH_LIMIT)
        except MetadataFetchError as exc:
            logger.warning("Failed to fetch editions for %s: %s", key, exc)
            return []

    def _resolve_authors(self, author_keys: Sequence[str]) -> list[str]:
        """Names for the first few authors; unresolvable authors are skipped."""
        names: list[str] = []
        for author_key in author_keys[:MAX_AUTHORS]:
            try:
                names.append(self._client.get_author(author_key).name)
            except MetadataFetchError as exc:
                logger.warning("Failed to fetch author %s: %s", author_key, exc)
        return names
