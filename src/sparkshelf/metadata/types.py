# ABOUTME: The normalized book record assembled from a work, its best edition and its authors.
# ABOUTME: BookMetadata is the interchange format between resolution, the catalog and the CLI.

from dataclasses import dataclass, field

DEFAULT_LANGUAGE = "en"
OPEN_LIBRARY_SOURCE = "open_library"


@dataclass
class BookMetadata:
    """A de-duplicated book, keyed by its Open Library work key.

    Everything except the key and title is optional enrichment: a work whose
    editions or authors failed to load still produces a usable record.
    """

    open_library_key: str
    title: str
    authors: list[str] = field(default_factory=list)
    description: str | None = None
    cover_small: str | None = None
    cover_medium: str | None = None
    cover_large: str | None = None
    published_date: str | None = None
    publisher: str | None = None
    page_count: int | None = None
    genres: list[str] = field(default_factory=list)
    subjects: list[str] = field(default_factory=list)
    isbn13: str | None = None
    isbn10: str | None = None
    language: str = DEFAULT_LANGUAGE
    source: str = OPEN_LIBRARY_SOURCE

    @property
    def author(self) -> str:
        """Convenience property: joined author string for display."""
        return ", ".join(self.authors) if self.authors else ""

    @property
    def isbns(self) -> list[str]:
        return [isbn for isbn in (self.isbn13, self.isbn10) if isbn]
