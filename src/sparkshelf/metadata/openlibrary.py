# ABOUTME: Open Library API client for works, editions, authors and discovery endpoints.
# ABOUTME: Typed wrapper over an injected HttpClient; bad responses raise MetadataFetchError.

import logging
import re
from typing import Any, Literal

from sparkshelf.metadata.http import HttpClient, MetadataFetchError
from sparkshelf.metadata.openlibrary_parser import (
    OpenLibraryAuthor,
    OpenLibraryEdition,
    OpenLibraryWork,
    SearchPage,
    SubjectPage,
    TrendingWork,
    parse_author,
    parse_edition,
    parse_editions_response,
    parse_search_response,
    parse_subject_response,
    parse_trending_response,
    parse_work,
)

logger = logging.getLogger(__name__)

OL_BASE = "https://openlibrary.org"

TrendingPeriod = Literal["daily", "weekly", "monthly", "yearly"]
SubjectSort = Literal["editions", "old", "new", "rating"]

_SEARCH_FIELDS = ",".join(
    [
        "key",
        "title",
        "author_name",
        "first_publish_year",
        "cover_i",
        "isbn",
        "subject",
        "language",
        "edition_count",
        "number_of_pages_median",
    ]
)

_WHITESPACE_RE = re.compile(r"\s+")


def _prefixed(key: str, prefix: str) -> str:
    """Accept both "/works/OL45804W" and bare "OL45804W"."""
    return key if key.startswith(prefix) else f"{prefix}{key}"


def normalize_work_key(key: str) -> str:
    return _prefixed(key.strip(), "/works/")


def subject_slug(subject: str) -> str:
    """Open Library subject path segment: lowercase, whitespace runs to underscores."""
    return _WHITESPACE_RE.sub("_", subject.lower())


class OpenLibraryClient:
    """Client for the Open Library JSON API.

    Every method raises MetadataFetchError when the underlying request fails;
    callers decide which failures are fatal.
    """

    def __init__(self, http_client: HttpClient) -> None:
        self._http = http_client

    def _get_object(self, url: str, params: dict[str, str] | None = None) -> dict[str, Any]:
        """GET a JSON endpoint whose body must be an object."""
        data = self._http.get(url, params=params)
        if not isinstance(data, dict):
            raise MetadataFetchError(
                f"Expected a JSON object from {url}, got {type(data).__name__}", status_code=200
            )
        return data

    def get_work(self, work_key: str) -> OpenLibraryWork:
        """Fetch a work by key (e.g. "/works/OL45804W")."""
        key = normalize_work_key(work_key)
        work = parse_work(self._get_object(f"{OL_BASE}{key}.json"))
        if not work.key:
            work.key = key
        return work

    def get_edition(self, edition_key: str) -> OpenLibraryEdition:
        key = _prefixed(edition_key.strip(), "/books/")
        edition = parse_edition(self._get_object(f"{OL_BASE}{key}.json"))
        if not edition.key:
            edition.key = key
        return edition

    def get_editions(self, work_key: str, limit: int = 10) -> list[OpenLibraryEdition]:
        """Fetch up to `limit` editions of a work, in Open Library's order."""
        key = normalize_work_key(work_key)
        data = self._get_object(f"{OL_BASE}{key}/editions.json", params={"limit": str(limit)})
        return parse_editions_response(data)

    def get_author(self, author_key: str) -> OpenLibraryAuthor:
        key = _prefixed(author_key.strip(), "/authors/")
        author = parse_author(self._get_object(f"{OL_BASE}{key}.json"))
        if not author.key:
            author.key = key
        return author

    def search(self, query: str, limit: int = 20, offset: int = 0) -> SearchPage:
        """Full-text search over works."""
        params = {
            "q": query,
            "limit": str(limit),
            "offset": str(offset),
            "fields": _SEARCH_FIELDS,
        }
        page = parse_search_response(self._get_object(f"{OL_BASE}/search.json", params=params))
        logger.debug("Search %r returned %d of %d results", query, len(page.results), page.total)
        return page

    def get_trending(self, period: TrendingPeriod = "daily", limit: int = 20) -> list[TrendingWork]:
        data = self._get_object(f"{OL_BASE}/trending/{period}.json", params={"limit": str(limit)})
        return parse_trending_response(data)

    def get_subject_books(
        self,
        subject: str,
        limit: int = 20,
        offset: int = 0,
        sort: SubjectSort = "editions",
    ) -> SubjectPage:
        """Fetch works filed under a subject.

        The sort parameter is only sent when it differs from the API default.
        """
        params = {"limit": str(limit), "offset": str(offset)}
        if sort != "editions":
            params["sort"] = sort
        data = self._get_object(f"{OL_BASE}/subjects/{subject_slug(subject)}.json", params=params)
        return parse_subject_response(data, subject)
