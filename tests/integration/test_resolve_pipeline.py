# ABOUTME: Integration tests for resolving works through the real HTTP client into a SQLite catalog.
# ABOUTME: Only the httpx transport is faked; parsing, scoring, covers and storage run for real.

from contextlib import closing
from pathlib import Path

import httpx
import pytest

from sparkshelf.core.resolver import BookNotFoundError, BookResolver
from sparkshelf.db.catalog import BookCatalog
from sparkshelf.db.connection import open_catalog
from sparkshelf.metadata.http import SparkshelfHttpClient
from sparkshelf.metadata.openlibrary import OpenLibraryClient
from tests.fixtures.openlibrary_responses import (
    AUTHOR_RESPONSE,
    EDITIONS_RESPONSE,
    EXAMPLE_AUTHOR,
    EXAMPLE_EDITIONS,
    EXAMPLE_WORK,
    WORK_RESPONSE,
)


class RoutingTransport(httpx.BaseTransport):
    """Serves canned JSON by exact URL path; anything else is a 404."""

    def __init__(self, routes: dict[str, object]) -> None:
        self._routes = routes
        self.paths: list[str] = []

    def handle_request(self, request: httpx.Request) -> httpx.Response:
        self.paths.append(request.url.path)
        body = self._routes.get(request.url.path)
        if body is None:
            return httpx.Response(404, json={"error": "notfound"})
        return httpx.Response(200, json=body)


def _resolver(transport: RoutingTransport, catalog: BookCatalog) -> BookResolver:
    http = SparkshelfHttpClient(transport=transport)
    return BookResolver(OpenLibraryClient(http), catalog)


@pytest.fixture
def example_transport() -> RoutingTransport:
    return RoutingTransport(
        {
            "/works/OL45804W.json": EXAMPLE_WORK,
            "/works/OL45804W/editions.json": EXAMPLE_EDITIONS,
            "/authors/OL1A.json": EXAMPLE_AUTHOR,
        }
    )


class TestResolvePipeline:
    """Resolving a work end to end."""

    def test_example_work(
        self, example_transport: RoutingTransport, catalog: BookCatalog
    ) -> None:
        record = _resolver(example_transport, catalog).resolve("/works/OL45804W")
        meta = record.metadata

        assert meta.open_library_key == "/works/OL45804W"
        assert meta.title == "Example Book"
        assert meta.authors == ["Jane Doe"]
        assert meta.page_count == 320
        assert meta.publisher == "Acme"
        assert meta.isbn13 == "9781234567890"
        assert meta.cover_small == "https://covers.openlibrary.org/b/isbn/9781234567890-S.jpg"
        assert meta.cover_medium == "https://covers.openlibrary.org/b/isbn/9781234567890-M.jpg"
        assert meta.cover_large == "https://covers.openlibrary.org/b/isbn/9781234567890-L.jpg"
        assert meta.genres == []
        assert catalog.count() == 1

    def test_second_resolve_is_served_from_catalog(
        self, example_transport: RoutingTransport, catalog: BookCatalog
    ) -> None:
        resolver = _resolver(example_transport, catalog)

        first = resolver.resolve("/works/OL45804W")
        requests_after_first = len(example_transport.paths)
        second = resolver.resolve("/works/OL45804W")

        assert requests_after_first == 3
        assert len(example_transport.paths) == requests_after_first
        assert second == first
        assert catalog.count() == 1

    def test_catalog_survives_reopen(
        self, example_transport: RoutingTransport, tmp_path: Path
    ) -> None:
        """A fresh process finds the stored row without going to the network."""
        path = tmp_path / "shared.db"
        with closing(open_catalog(path)) as conn:
            first = _resolver(example_transport, BookCatalog(conn)).resolve("OL45804W")

        offline = RoutingTransport({})
        with closing(open_catalog(path)) as conn:
            second = _resolver(offline, BookCatalog(conn)).resolve("/works/OL45804W")

        assert second.id == first.id
        assert offline.paths == []

    def test_missing_work(self, catalog: BookCatalog) -> None:
        with pytest.raises(BookNotFoundError):
            _resolver(RoutingTransport({}), catalog).resolve("/works/OL0W")
        assert catalog.count() == 0

    def test_best_edition_chosen_over_first(self, catalog: BookCatalog) -> None:
        """The English edition wins even though a Spanish one is listed first."""
        transport = RoutingTransport(
            {
                "/works/OL456W.json": WORK_RESPONSE,
                "/works/OL456W/editions.json": EDITIONS_RESPONSE,
                "/authors/OL123A.json": AUTHOR_RESPONSE,
            }
        )

        record = _resolver(transport, catalog).resolve("/works/OL456W")

        assert record.metadata.isbn13 == "9780156001311"
        assert record.metadata.publisher == "Harcourt"
        assert catalog.search("monastery")[0].id == record.id
        assert [r.id for r in catalog.list_by_genre("mystery")] == [record.id]

    def test_unreachable_editions_still_catalogs(self, catalog: BookCatalog) -> None:
        transport = RoutingTransport(
            {
                "/works/OL45804W.json": EXAMPLE_WORK,
                "/authors/OL1A.json": EXAMPLE_AUTHOR,
            }
        )

        record = _resolver(transport, catalog).resolve("/works/OL45804W")

        assert record.metadata.title == "Example Book"
        assert record.metadata.isbn13 is None
        assert record.metadata.cover_large is None


class TestMalformedResponses:
    """A 200 whose body is not a JSON object is treated as a failed fetch."""

    def test_malformed_author_is_skipped(self, catalog: BookCatalog) -> None:
        transport = RoutingTransport(
            {
                "/works/OL45804W.json": EXAMPLE_WORK,
                "/works/OL45804W/editions.json": EXAMPLE_EDITIONS,
                "/authors/OL1A.json": ["not", "an", "object"],
            }
        )

        record = _resolver(transport, catalog).resolve("/works/OL45804W")

        assert record.metadata.authors == []
        assert record.metadata.isbn13 == "9781234567890"

    def test_malformed_editions_are_skipped(self, catalog: BookCatalog) -> None:
        transport = RoutingTransport(
            {
                "/works/OL45804W.json": EXAMPLE_WORK,
                "/works/OL45804W/editions.json": [],
                "/authors/OL1A.json": EXAMPLE_AUTHOR,
            }
        )

        record = _resolver(transport, catalog).resolve("/works/OL45804W")

        assert record.metadata.authors == ["Jane Doe"]
        assert record.metadata.page_count is None

    def test_malformed_work_is_not_found(self, catalog: BookCatalog) -> None:
        transport = RoutingTransport({"/works/OL45804W.json": "oops"})

        with pytest.raises(BookNotFoundError):
            _resolver(transport, catalog).resolve("/works/OL45804W")
        assert catalog.count() == 0
