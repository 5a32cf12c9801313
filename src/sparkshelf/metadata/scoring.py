# ABOUTME: Edition scoring: picks the most complete edition of a work.
# ABOUTME: Also provides first-match scans used when the chosen edition lacks a field.

from collections.abc import Sequence

from sparkshelf.metadata.openlibrary_parser import OpenLibraryEdition

# Edition completeness weights. These are part of observable behavior:
# changing them changes which edition a work resolves to.
_WEIGHT_ENGLISH = 10
_WEIGHT_PAGE_COUNT = 5
_WEIGHT_ISBN_13 = 3
_WEIGHT_ISBN_10 = 2
_WEIGHT_PUBLISHER = 2
_WEIGHT_COVER = 1


def score_edition(edition: OpenLibraryEdition) -> int:
    """Score an edition by language and completeness."""
    score = 0
    if edition.is_english:
        score += _WEIGHT_ENGLISH
    if edition.number_of_pages:
        score += _WEIGHT_PAGE_COUNT
    if edition.isbn_13:
        score += _WEIGHT_ISBN_13
    if edition.isbn_10:
        score += _WEIGHT_ISBN_10
    if edition.publishers:
        score += _WEIGHT_PUBLISHER
    if edition.covers:
        score += _WEIGHT_COVER
    return score


def select_best_edition(
    editions: Sequence[OpenLibraryEdition],
) -> OpenLibraryEdition | None:
    """Return the highest-scoring edition, or None for an empty list.

    sorted() is stable, so among equal scores the earliest edition wins and
    repeated resolution of the same edition list picks the same edition.
    """
    if not editions:
        return None
    ranked = sorted(editions, key=score_edition, reverse=True)
    return ranked[0]


def first_page_count(
    best: OpenLibraryEdition | None, editions: Sequence[OpenLibraryEdition]
) -> int | None:
    """Page count of the best edition, else of the first edition that has one."""
    if best and best.number_of_pages:
        return best.number_of_pages
    return next((e.number_of_pages for e in editions if e.number_of_pages), None)


def first_isbn13(
    best: OpenLibraryEdition | None, editions: Sequence[OpenLibraryEdition]
) -> str | None:
    if best and best.isbn_13:
        return best.isbn_13[0]
    return next((e.isbn_13[0] for e in editions if e.isbn_13), None)


def first_isbn10(
    best: OpenLibraryEdition | None, editions: Sequence[OpenLibraryEdition]
) -> str | None:
    if best and best.isbn_10:
        return best.isbn_10[0]
    return next((e.isbn_10[0] for e in editions if e.isbn_10), None)


def first_publisher(
    best: OpenLibraryEdition | None, editions: Sequence[OpenLibraryEdition]
) -> str | None:
    if best and best.publishers:
        return best.publishers[0]
    return next((e.publishers[0] for e in editions if e.publishers), None)


def first_publish_date(
    best: OpenLibraryEdition | None, editions: Sequence[OpenLibraryEdition]
) -> str | None:
    if best and best.publish_date:
        return best.publish_date
    return next((e.publish_date for e in editions if e.publish_date), None)
