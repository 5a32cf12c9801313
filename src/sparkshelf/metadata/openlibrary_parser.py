# ABOUTME: Parsing functions for Open Library API JSON responses.
# ABOUTME: Validates loosely-typed OL payloads into typed records, defaulting malformed fields.

from dataclasses import dataclass, field
from typing import Any

ENGLISH_LANGUAGE_KEY = "/languages/eng"


@dataclass
class OpenLibraryWork:
    """The abstract work: title, subjects, description and author references."""

    key: str
    title: str
    subjects: list[str] = field(default_factory=list)
    description: str | None = None
    covers: list[int] = field(default_factory=list)
    author_keys: list[str] = field(default_factory=list)


@dataclass
class OpenLibraryEdition:
    """One published edition of a work."""

    key: str
    title: str | None = None
    isbn_13: list[str] = field(default_factory=list)
    isbn_10: list[str] = field(default_factory=list)
    number_of_pages: int | None = None
    publishers: list[str] = field(default_factory=list)
    publish_date: str | None = None
    covers: list[int] = field(default_factory=list)
    languages: list[str] = field(default_factory=list)
    subjects: list[str] = field(default_factory=list)

    @property
    def is_english(self) -> bool:
        return ENGLISH_LANGUAGE_KEY in self.languages


@dataclass
class OpenLibraryAuthor:
    key: str
    name: str


@dataclass
class SearchResult:
    """A single doc from the search endpoint."""

    key: str
    title: str
    author_names: list[str] = field(default_factory=list)
    first_publish_year: int | None = None
    cover_id: int | None = None
    isbns: list[str] = field(default_factory=list)
    subjects: list[str] = field(default_factory=list)
    languages: list[str] = field(default_factory=list)
    edition_count: int | None = None
    median_page_count: int | None = None


@dataclass
class SearchPage:
    results: list[SearchResult]
    total: int
    offset: int


@dataclass
class TrendingWork:
    key: str
    title: str
    author_keys: list[str] = field(default_factory=list)
    author_names: list[str] = field(default_factory=list)
    cover_id: int | None = None
    first_publish_year: int | None = None
    edition_count: int = 0


@dataclass
class SubjectWork:
    key: str
    title: str
    author_names: list[str] = field(default_factory=list)
    cover_id: int | None = None
    first_publish_year: int | None = None
    edition_count: int = 0


@dataclass
class SubjectPage:
    works: list[SubjectWork]
    work_count: int
    name: str


def _str(value: Any) -> str | None:
    return value if isinstance(value, str) and value else None


def _int(value: Any) -> int | None:
    # bool is an int subclass; OL never means True as a page count
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    return value


def _positive_int(value: Any) -> int | None:
    number = _int(value)
    return number if number is not None and number > 0 else None


def _str_list(value: Any) -> list[str]:
    if not isinstance(value, list):
        return []
    return [item for item in value if isinstance(item, str) and item]


def _cover_ids(value: Any) -> list[int]:
    """Keep positive cover ids; OL uses -1 as a "no cover" marker."""
    if not isinstance(value, list):
        return []
    return [item for item in value if _positive_int(item) is not None]


def _keys(value: Any) -> list[str]:
    """Extract "key" strings from a list of {"key": ...} references."""
    if not isinstance(value, list):
        return []
    keys = []
    for entry in value:
        if isinstance(entry, dict):
            key = _str(entry.get("key"))
            if key:
                keys.append(key)
    return keys


def extract_description(desc: Any) -> str | None:
    """Unwrap an OL text field.

    Handles the OL quirk where description can be either a plain string
    or a dict with {"type": ..., "value": "actual text"}.
    """
    if isinstance(desc, str):
        return desc or None
    if isinstance(desc, dict):
        return _str(desc.get("value"))
    return None


def _work_author_keys(entries: Any) -> list[str]:
    """Author keys from a works response.

    Works usually store authors as [{author: {key: "/authors/..."}}], but
    older records use a bare [{key: "/authors/..."}].
    """
    if not isinstance(entries, list):
        return []
    keys = []
    for entry in entries:
        if not isinstance(entry, dict):
            continue
        author_ref = entry.get("author")
        if isinstance(author_ref, dict):
            key = _str(author_ref.get("key"))
        else:
            key = _str(entry.get("key"))
        if key:
            keys.append(key)
    return keys


def parse_work(data: dict[str, Any]) -> OpenLibraryWork:
    """Parse an Open Library Works endpoint response."""
    return OpenLibraryWork(
        key=_str(data.get("key")) or "",
        title=_str(data.get("title")) or "Unknown",
        subjects=_str_list(data.get("subjects")),
        description=extract_description(data.get("description")),
        covers=_cover_ids(data.get("covers")),
        author_keys=_work_author_keys(data.get("authors")),
    )


def parse_edition(data: dict[str, Any]) -> OpenLibraryEdition:
    """Parse a single edition record (edition endpoint or editions entry)."""
    return OpenLibraryEdition(
        key=_str(data.get("key")) or "",
        title=_str(data.get("title")),
        isbn_13=_str_list(data.get("isbn_13")),
        isbn_10=_str_list(data.get("isbn_10")),
        number_of_pages=_positive_int(data.get("number_of_pages")),
        publishers=_str_list(data.get("publishers")),
        publish_date=_str(data.get("publish_date")),
        covers=_cover_ids(data.get("covers")),
        languages=_keys(data.get("languages")),
        subjects=_str_list(data.get("subjects")),
    )


def parse_editions_response(data: dict[str, Any]) -> list[OpenLibraryEdition]:
    """Parse the entries of a work's editions listing."""
    entries = data.get("entries")
    if not isinstance(entries, list):
        return []
    return [parse_edition(entry) for entry in entries if isinstance(entry, dict)]


def parse_author(data: dict[str, Any]) -> OpenLibraryAuthor:
    """Parse an Open Library Author response."""
    return OpenLibraryAuthor(
        key=_str(data.get("key")) or "",
        name=_str(data.get("name")) or "Unknown",
    )


def parse_search_response(data: dict[str, Any]) -> SearchPage:
    """Parse an Open Library Search API response.

    Docs without a key are dropped since nothing downstream can resolve them.
    """
    docs = data.get("docs")
    results: list[SearchResult] = []
    for doc in docs if isinstance(docs, list) else []:
        if not isinstance(doc, dict):
            continue
        key = _str(doc.get("key"))
        if not key:
            continue
        results.append(
            SearchResult(
                key=key,
                title=_str(doc.get("title")) or "Unknown",
                author_names=_str_list(doc.get("author_name")),
                first_publish_year=_int(doc.get("first_publish_year")),
                cover_id=_positive_int(doc.get("cover_i")),
                isbns=_str_list(doc.get("isbn")),
                subjects=_str_list(doc.get("subject")),
                languages=_str_list(doc.get("language")),
                edition_count=_int(doc.get("edition_count")),
                median_page_count=_positive_int(doc.get("number_of_pages_median")),
            )
        )

    return SearchPage(
        results=results,
        total=_int(data.get("numFound")) or 0,
        offset=_int(data.get("start")) or 0,
    )


def parse_trending_response(data: dict[str, Any]) -> list[TrendingWork]:
    works = data.get("works")
    results: list[TrendingWork] = []
    for work in works if isinstance(works, list) else []:
        if not isinstance(work, dict) or not _str(work.get("key")):
            continue
        results.append(
            TrendingWork(
                key=work["key"],
                title=_str(work.get("title")) or "Unknown",
                author_keys=_str_list(work.get("author_key")),
                author_names=_str_list(work.get("author_name")),
                cover_id=_positive_int(work.get("cover_i")),
                first_publish_year=_int(work.get("first_publish_year")),
                edition_count=_int(work.get("edition_count")) or 0,
            )
        )
    return results


def parse_subject_response(data: dict[str, Any], subject: str) -> SubjectPage:
    """Parse a subjects endpoint response; `subject` is the fallback display name."""
    works = data.get("works")
    results: list[SubjectWork] = []
    for work in works if isinstance(works, list) else []:
        if not isinstance(work, dict) or not _str(work.get("key")):
            continue
        authors = work.get("authors")
        names = [
            author["name"]
            for author in (authors if isinstance(authors, list) else [])
            if isinstance(author, dict) and _str(author.get("name"))
        ]
        results.append(
            SubjectWork(
                key=work["key"],
                title=_str(work.get("title")) or "Unknown",
                author_names=names,
                cover_id=_positive_int(work.get("cover_id")),
                first_publish_year=_int(work.get("first_publish_year")),
                edition_count=_int(work.get("edition_count")) or 0,
            )
        )

    return SubjectPage(
        works=results,
        work_count=_int(data.get("work_count")) or 0,
        name=_str(data.get("name")) or subject,
    )
