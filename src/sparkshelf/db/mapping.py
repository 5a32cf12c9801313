# ABOUTME: Converts between the BookMetadata dataclass and SQLite row dictionaries.
# ABOUTME: Handles JSON serialization for the list fields (authors, genres, subjects).

import json
from dataclasses import dataclass
from typing import Any

from sparkshelf.metadata.types import BookMetadata


@dataclass
class BookRecord:
    """A cataloged book: BookMetadata plus database-specific fields."""

    id: int
    metadata: BookMetadata
    fetched_at: str
    created_at: str


def metadata_to_row(metadata: BookMetadata) -> dict[str, Any]:
    """Convert a BookMetadata instance to a dict suitable for INSERT."""
    return {
        "open_library_key": metadata.open_library_key,
        "title": metadata.title,
        "authors": json.dumps(metadata.authors),
        "description": metadata.description,
        "cover_small": metadata.cover_small,
        "cover_medium": metadata.cover_medium,
        "cover_large": metadata.cover_large,
        "published_date": metadata.published_date,
        "publisher": metadata.publisher,
        "page_count": metadata.page_count,
        "genres": json.dumps(metadata.genres),
        "subjects": json.dumps(metadata.subjects),
        "isbn13": metadata.isbn13,
        "isbn10": metadata.isbn10,
        "language": metadata.language,
        "source": metadata.source,
    }


def _json_list(value: str | None) -> list[str]:
    return json.loads(value) if value else []


def row_to_metadata(row: Any) -> BookMetadata:
    """Convert a database row (dict-like) back to a BookMetadata instance."""
    return BookMetadata(
        open_library_key=row["open_library_key"],
        title=row["title"],
        authors=_json_list(row["authors"]),
        description=row["description"],
        cover_small=row["cover_small"],
        cover_medium=row["cover_medium"],
        cover_large=row["cover_large"],
        published_date=row["published_date"],
        publisher=row["publisher"],
        page_count=row["page_count"],
        genres=_json_list(row["genres"]),
        subjects=_json_list(row["subjects"]),
        isbn13=row["isbn13"],
        isbn10=row["isbn10"],
        language=row["language"],
        source=row["source"],
    )


def row_to_record(row: Any) -> BookRecord:
    """Convert a full database row to a BookRecord with metadata and DB fields."""
    return BookRecord(
        id=row["id"],
        metadata=row_to_metadata(row),
        fetched_at=row["fetched_at"],
        created_at=row["created_at"],
    )
