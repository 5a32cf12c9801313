# ABOUTME: Multi-source cover URL resolution with ranked fallbacks.
# ABOUTME: Builds candidate URLs from ISBNs and cover ids, optionally validating them via HEAD.

import logging
from collections.abc import Iterable, Sequence
from typing import Literal

from sparkshelf.metadata.http import HeadClient, MetadataFetchError

logger = logging.getLogger(__name__)

OPEN_LIBRARY_COVERS = "https://covers.openlibrary.org"
ABEBOOKS_COVERS = "https://pictures.abebooks.com/isbn"

CoverSize = Literal["S", "M", "L"]

# Open Library answers a missing cover with a tiny placeholder GIF.
MIN_COVER_BYTES = 1000
# Decoded images smaller than this on either side are placeholders too.
MIN_COVER_PIXELS = 10

# US/UK registration groups. Not a real nationality check.
_ENGLISH_PREFIXES = ("9780", "9781", "0", "1")


def open_library_isbn_url(isbn: str, size: CoverSize = "L") -> str:
    return f"{OPEN_LIBRARY_COVERS}/b/isbn/{isbn}-{size}.jpg"


def open_library_cover_id_url(cover_id: int, size: CoverSize = "L") -> str:
    return f"{OPEN_LIBRARY_COVERS}/b/id/{cover_id}-{size}.jpg"


def abebooks_url(isbn: str) -> str:
    """AbeBooks only serves one size."""
    return f"{ABEBOOKS_COVERS}/{isbn}-L.jpg"


def select_best_isbn(isbns: Iterable[str] | None) -> tuple[str | None, str | None]:
    """Pick one ISBN-13 and one ISBN-10 from a mixed list.

    Within each length, the first ISBN with an English-publisher prefix wins;
    otherwise the first of that length.
    """
    isbn_list = list(isbns or [])
    isbn13s = [isbn for isbn in isbn_list if len(isbn) == 13]
    isbn10s = [isbn for isbn in isbn_list if len(isbn) == 10]

    def _pick(candidates: list[str]) -> str | None:
        english = next((i for i in candidates if i.startswith(_ENGLISH_PREFIXES)), None)
        return english or (candidates[0] if candidates else None)

    return _pick(isbn13s), _pick(isbn10s)


def best_cover_candidates(
    isbns: Iterable[str] | None = None,
    cover_id: int | None = None,
    size: CoverSize = "L",
) -> list[str]:
    """Ranked cover URLs to try, best first, without duplicates.

    Order: OL by ISBN-13, AbeBooks by ISBN-13, OL by ISBN-10, AbeBooks by
    ISBN-10, OL by cover id. Missing identifiers just shorten the list.
    """
    isbn13, isbn10 = select_best_isbn(isbns)
    urls: list[str] = []

    if isbn13:
        urls.append(open_library_isbn_url(isbn13, size))
        urls.append(abebooks_url(isbn13))
    if isbn10:
        urls.append(open_library_isbn_url(isbn10, size))
        urls.append(abebooks_url(isbn10))
    if cover_id:
        urls.append(open_library_cover_id_url(cover_id, size))

    return list(dict.fromkeys(urls))


def best_cover_url(
    isbns: Iterable[str] | None = None,
    cover_id: int | None = None,
    size: CoverSize = "L",
) -> str | None:
    """Single best-guess cover URL: ISBN-13, then ISBN-10, then cover id."""
    isbn13, isbn10 = select_best_isbn(isbns)
    if isbn13:
        return open_library_isbn_url(isbn13, size)
    if isbn10:
        return open_library_isbn_url(isbn10, size)
    if cover_id:
        return open_library_cover_id_url(cover_id, size)
    return None


def is_placeholder_image(width: int, height: int) -> bool:
    return width < MIN_COVER_PIXELS or height < MIN_COVER_PIXELS


class CoverCandidates:
    """Ordered cover URLs with a cursor for try-next-on-failure display.

    The presentation layer shows `current`, calls `advance()` when the image
    fails to load, and `report_loaded()` once it decodes, which also counts a
    placeholder-sized image as a failure.
    """

    def __init__(self, urls: Sequence[str]) -> None:
        self._urls = list(dict.fromkeys(urls))
        self._index = 0

    @classmethod
    def for_book(
        cls,
        isbns: Iterable[str] | None = None,
        cover_id: int | None = None,
        size: CoverSize = "L",
    ) -> "CoverCandidates":
        return cls(best_cover_candidates(isbns, cover_id, size))

    @property
    def urls(self) -> list[str]:
        return list(self._urls)

    @property
    def current(self) -> str | None:
        if self._index < len(self._urls):
            return self._urls[self._index]
        return None

    @property
    def exhausted(self) -> bool:
        return self.current is None

    def advance(self) -> str | None:
        """Give up on the current URL and return the next one (None when out)."""
        if self._index < len(self._urls):
            self._index += 1
        return self.current

    def report_loaded(self, width: int, height: int) -> bool:
        """Record a decoded image; returns False (and advances) for placeholders."""
        if is_placeholder_image(width, height):
            logger.debug("Placeholder-sized cover %dx%d at %s", width, height, self.current)
            self.advance()
            return False
        return True


class CoverValidator:
    """Confirms cover URLs point at real images using HEAD requests."""

    def __init__(self, http_client: HeadClient, min_bytes: int = MIN_COVER_BYTES) -> None:
        self._http = http_client
        self._min_bytes = min_bytes

    def is_valid(self, url: str) -> bool:
        """A URL is valid when it answers 2xx with an image of plausible size.

        A missing content-length is accepted; only a declared small size fails.
        """
        try:
            response = self._http.head(url)
        except MetadataFetchError as exc:
            logger.debug("Cover probe failed for %s: %s", url, exc)
            return False

        if not response.ok:
            return False
        if not (response.content_type or "").startswith("image/"):
            return False
        if response.content_length is not None and response.content_length < self._min_bytes:
            return False
        return True

    def best_valid_cover_url(
        self,
        isbns: Iterable[str] | None = None,
        cover_id: int | None = None,
        size: CoverSize = "L",
    ) -> str | None:
        """First candidate that validates, probing in rank order."""
        for url in best_cover_candidates(isbns, cover_id, size):
            if self.is_valid(url):
                return url
        return None
