# ABOUTME: Unit tests for Open Library response parsing.
# ABOUTME: Parses works, editions, authors, search, trending and subject payloads.

from sparkshelf.metadata.openlibrary_parser import (
    extract_description,
    parse_author,
    parse_edition,
    parse_editions_response,
    parse_search_response,
    parse_subject_response,
    parse_trending_response,
    parse_work,
)
from tests.fixtures.openlibrary_responses import (
    AUTHOR_RESPONSE,
    EDITION_BARE,
    EDITION_ENGLISH,
    EDITION_SPANISH,
    EDITIONS_RESPONSE,
    EDITIONS_RESPONSE_EMPTY,
    SEARCH_RESPONSE,
    SEARCH_RESPONSE_EMPTY,
    SUBJECT_RESPONSE,
    TRENDING_RESPONSE,
    WORK_RESPONSE,
    WORK_RESPONSE_MINIMAL,
    WORK_RESPONSE_STR_DESCRIPTION,
)


class TestExtractDescription:
    """Tests for the OL description quirk."""

    def test_dict_description(self) -> None:
        assert extract_description({"type": "/type/text", "value": "Text"}) == "Text"

    def test_string_description(self) -> None:
        assert extract_description("Plain") == "Plain"

    def test_missing_or_empty(self) -> None:
        assert extract_description(None) is None
        assert extract_description("") is None
        assert extract_description({"type": "/type/text"}) is None


class TestParseWork:
    """Tests for parse_work."""

    def test_full_work(self) -> None:
        """All work fields are mapped, including nested author references."""
        work = parse_work(WORK_RESPONSE)

        assert work.key == "/works/OL456W"
        assert work.title == "The Name of the Rose"
        assert work.description == "A mystery set in a medieval Italian monastery."
        assert "Historical fiction" in work.subjects
        assert work.author_keys == ["/authors/OL123A"]

    def test_negative_cover_ids_dropped(self) -> None:
        """OL's -1 "no cover" marker is not a cover id."""
        assert parse_work(WORK_RESPONSE).covers == [240727]

    def test_string_description(self) -> None:
        work = parse_work(WORK_RESPONSE_STR_DESCRIPTION)
        assert work.description == "A mystery set in a medieval Italian monastery."

    def test_minimal_work_defaults(self) -> None:
        """Missing optional fields default to empty values."""
        work = parse_work(WORK_RESPONSE_MINIMAL)

        assert work.title == "Bare Minimum"
        assert work.subjects == []
        assert work.covers == []
        assert work.author_keys == []
        assert work.description is None

    def test_bare_author_reference_shape(self) -> None:
        """Older works list authors as bare {"key": ...} entries."""
        work = parse_work({"key": "/works/OL1W", "authors": [{"key": "/authors/OL9A"}]})
        assert work.author_keys == ["/authors/OL9A"]

    def test_malformed_fields_are_ignored(self) -> None:
        """Wrong types fall back to defaults instead of raising."""
        work = parse_work(
            {"key": "/works/OL1W", "title": 42, "subjects": "Fiction", "covers": ["x", True]}
        )

        assert work.title == "Unknown"
        assert work.subjects == []
        assert work.covers == []


class TestParseEdition:
    """Tests for parse_edition."""

    def test_full_edition(self) -> None:
        edition = parse_edition(EDITION_ENGLISH)

        assert edition.key == "/books/OL2M"
        assert edition.isbn_13 == ["9780156001311"]
        assert edition.isbn_10 == ["0156001314"]
        assert edition.number_of_pages == 536
        assert edition.publishers == ["Harcourt"]
        assert edition.publish_date == "1994"
        assert edition.covers == [8231856]
        assert edition.languages == ["/languages/eng"]
        assert edition.is_english

    def test_non_english_edition(self) -> None:
        edition = parse_edition(EDITION_SPANISH)
        assert not edition.is_english

    def test_bare_edition(self) -> None:
        edition = parse_edition(EDITION_BARE)

        assert edition.isbn_13 == []
        assert edition.number_of_pages is None
        assert edition.publishers == []
        assert not edition.is_english

    def test_non_positive_page_count_is_none(self) -> None:
        assert parse_edition({"key": "/books/X", "number_of_pages": 0}).number_of_pages is None
        assert parse_edition({"key": "/books/X", "number_of_pages": "300"}).number_of_pages is None


class TestParseEditionsResponse:
    """Tests for parse_editions_response."""

    def test_entries_in_order(self) -> None:
        editions = parse_editions_response(EDITIONS_RESPONSE)
        assert [e.key for e in editions] == ["/books/OL1M", "/books/OL2M", "/books/OL3M"]

    def test_empty_entries(self) -> None:
        assert parse_editions_response(EDITIONS_RESPONSE_EMPTY) == []

    def test_missing_entries(self) -> None:
        assert parse_editions_response({}) == []


class TestParseAuthor:
    """Tests for parse_author."""

    def test_author(self) -> None:
        author = parse_author(AUTHOR_RESPONSE)
        assert author.key == "/authors/OL123A"
        assert author.name == "Umberto Eco"

    def test_author_without_name(self) -> None:
        assert parse_author({"key": "/authors/OL1A"}).name == "Unknown"


class TestParseSearchResponse:
    """Tests for parse_search_response."""

    def test_results_and_totals(self) -> None:
        page = parse_search_response(SEARCH_RESPONSE)

        assert page.total == 2
        assert page.offset == 0
        assert len(page.results) == 2
        first = page.results[0]
        assert first.key == "/works/OL456W"
        assert first.author_names == ["Umberto Eco"]
        assert first.isbns == ["0156001314", "9780156001311"]
        assert first.cover_id == 240727
        assert first.first_publish_year == 1980
        assert first.median_page_count == 536

    def test_sparse_doc(self) -> None:
        second = parse_search_response(SEARCH_RESPONSE).results[1]

        assert second.cover_id is None
        assert second.isbns == []
        assert second.edition_count is None

    def test_empty_response(self) -> None:
        page = parse_search_response(SEARCH_RESPONSE_EMPTY)
        assert page.results == []
        assert page.total == 0

    def test_docs_without_key_are_dropped(self) -> None:
        page = parse_search_response({"numFound": 1, "docs": [{"title": "Keyless"}]})
        assert page.results == []
        assert page.total == 1


class TestDiscoveryResponses:
    """Tests for trending and subject payloads."""

    def test_trending(self) -> None:
        works = parse_trending_response(TRENDING_RESPONSE)

        assert len(works) == 1
        assert works[0].key == "/works/OL82563W"
        assert works[0].author_names == ["J. K. Rowling"]
        assert works[0].cover_id == 10521270
        assert works[0].edition_count == 352

    def test_trending_missing_works(self) -> None:
        assert parse_trending_response({}) == []

    def test_subject(self) -> None:
        page = parse_subject_response(SUBJECT_RESPONSE, "science fiction")

        assert page.name == "Science fiction"
        assert page.work_count == 120
        assert page.works[0].title == "Dune"
        assert page.works[0].author_names == ["Frank Herbert"]
        assert page.works[0].cover_id == 11481354

    def test_subject_name_falls_back_to_request(self) -> None:
        page = parse_subject_response({"works": []}, "poetry")
        assert page.name == "poetry"
        assert page.works == []
        assert page.work_count == 0
