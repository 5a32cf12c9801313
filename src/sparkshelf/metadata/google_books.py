# ABOUTME: Google Books API client used as a secondary discovery source.
# ABOUTME: Parses volume payloads into GoogleBookResult records with upgraded cover URLs.

import logging
import re
from dataclasses import dataclass, field
from typing import Any, Literal

from sparkshelf.metadata.http import HttpClient, MetadataFetchError

logger = logging.getLogger(__name__)

GOOGLE_BOOKS_BASE = "https://www.googleapis.com/books/v1"

_MAX_RESULTS = 40
_YEAR_RE = re.compile(r"(\d{4})")
# Largest first.
_IMAGE_LINK_PREFERENCE = ("extraLarge", "large", "medium", "thumbnail", "smallThumbnail")

OrderBy = Literal["relevance", "newest"]


@dataclass
class GoogleBookResult:
    """A Google Books volume flattened to the fields sparkshelf displays."""

    key: str
    title: str
    authors: list[str] = field(default_factory=list)
    year: int | None = None
    cover_url: str | None = None
    page_count: int | None = None
    description: str | None = None
    publisher: str | None = None
    isbn13: str | None = None
    isbn10: str | None = None
    categories: list[str] = field(default_factory=list)
    rating: float | None = None
    ratings_count: int | None = None


def upgrade_cover_url(image_links: Any) -> str | None:
    """Pick the largest image link and ask for a sharper, curl-free rendition."""
    if not isinstance(image_links, dict):
        return None
    url = next(
        (image_links[name] for name in _IMAGE_LINK_PREFERENCE if image_links.get(name)),
        None,
    )
    if not isinstance(url, str):
        return None
    return url.replace("http://", "https://").replace("&edge=curl", "").replace("zoom=1", "zoom=2")


def extract_isbns(identifiers: Any) -> tuple[str | None, str | None]:
    """Return (isbn13, isbn10) from industryIdentifiers."""
    isbn13 = isbn10 = None
    for entry in identifiers if isinstance(identifiers, list) else []:
        if not isinstance(entry, dict):
            continue
        kind, value = entry.get("type"), entry.get("identifier")
        if kind == "ISBN_13" and isbn13 is None:
            isbn13 = value
        elif kind == "ISBN_10" and isbn10 is None:
            isbn10 = value
    return isbn13, isbn10


def extract_year(published_date: Any) -> int | None:
    if not isinstance(published_date, str):
        return None
    match = _YEAR_RE.search(published_date)
    return int(match.group(1)) if match else None


def parse_volume(volume: dict[str, Any]) -> GoogleBookResult:
    info = volume.get("volumeInfo")
    if not isinstance(info, dict):
        info = {}
    isbn13, isbn10 = extract_isbns(info.get("industryIdentifiers"))

    return GoogleBookResult(
        key=str(volume.get("id", "")),
        title=info.get("title") or "Unknown",
        authors=list(info.get("authors") or []),
        year=extract_year(info.get("publishedDate")),
        cover_url=upgrade_cover_url(info.get("imageLinks")),
        page_count=info.get("pageCount") or None,
        description=info.get("description") or None,
        publisher=info.get("publisher") or None,
        isbn13=isbn13,
        isbn10=isbn10,
        categories=list(info.get("categories") or []),
        rating=info.get("averageRating") or None,
        ratings_count=info.get("ratingsCount") or None,
    )


class GoogleBooksClient:
    """Client for the Google Books volumes API."""

    def __init__(self, http_client: HttpClient) -> None:
        self._http = http_client

    def search(
        self,
        query: str,
        limit: int = 20,
        start_index: int = 0,
        order_by: OrderBy = "relevance",
    ) -> tuple[list[GoogleBookResult], int]:
        """Search volumes. Returns (results, total_items)."""
        params = {
            "q": query,
            "maxResults": str(min(limit, _MAX_RESULTS)),
            "startIndex": str(start_index),
            "orderBy": order_by,
            "printType": "books",
        }
        data = self._http.get(f"{GOOGLE_BOOKS_BASE}/volumes", params=params)
        items = data.get("items") or []
        results = [parse_volume(item) for item in items if isinstance(item, dict)]
        return results, data.get("totalItems") or 0

    def get_book(self, volume_id: str) -> GoogleBookResult | None:
        """Fetch a volume by id; None when Google reports it missing."""
        try:
            data = self._http.get(f"{GOOGLE_BOOKS_BASE}/volumes/{volume_id}")
        except MetadataFetchError as exc:
            if exc.status_code == 404:
                logger.debug("Google Books volume %s not found", volume_id)
                return None
            raise
        return parse_volume(data)

    def search_by_isbn(self, isbn: str) -> GoogleBookResult | None:
        results, _ = self.search(f"isbn:{isbn}", limit=1)
        return results[0] if results else None

    def search_by_title_author(
        self, title: str, author: str | None = None
    ) -> list[GoogleBookResult]:
        query = f"intitle:{title}"
        if author:
            query += f"+inauthor:{author}"
        results, _ = self.search(query, limit=10)
        return results

    def get_books_by_category(
        self,
        category: str,
        limit: int = 20,
        start_index: int = 0,
        order_by: OrderBy = "relevance",
    ) -> tuple[list[GoogleBookResult], int]:
        return self.search(
            f"subject:{category}", limit=limit, start_index=start_index, order_by=order_by
        )

    def get_newest_books(self, query: str = "", limit: int = 20) -> list[GoogleBookResult]:
        results, _ = self.search(query or "fiction", limit=limit, order_by="newest")
        return results
