# ABOUTME: Subject handling: genre tags derived from free-form OL subjects, browseable subjects.
# ABOUTME: The keyword filter is a deliberately loose substring heuristic.

from collections.abc import Iterable
from dataclasses import dataclass

GENRE_KEYWORDS: tuple[str, ...] = (
    "fiction",
    "non-fiction",
    "nonfiction",
    "mystery",
    "thriller",
    "romance",
    "fantasy",
    "science fiction",
    "horror",
    "biography",
    "memoir",
    "history",
    "self-help",
    "business",
    "philosophy",
    "poetry",
    "drama",
    "adventure",
)

MAX_GENRES = 5


def derive_genres(subjects: Iterable[str], limit: int = MAX_GENRES) -> list[str]:
    """Keep subjects containing any genre keyword, case-insensitively.

    Returns the original subject strings (not the keywords), in order, capped
    at `limit`. "Fiction, general" and "Historical fiction" both survive.
    """
    genres: list[str] = []
    for subject in subjects:
        lowered = subject.lower()
        if any(keyword in lowered for keyword in GENRE_KEYWORDS):
            genres.append(subject)
            if len(genres) >= limit:
                break
    return genres


@dataclass(frozen=True)
class Subject:
    id: str
    name: str
    icon: str


POPULAR_SUBJECTS: tuple[Subject, ...] = (
    Subject("fiction", "Fiction", "book"),
    Subject("mystery", "Mystery & Thriller", "search"),
    Subject("romance", "Romance", "heart"),
    Subject("science_fiction", "Science Fiction", "rocket"),
    Subject("fantasy", "Fantasy", "sparkles"),
    Subject("horror", "Horror", "skull"),
    Subject("biography", "Biography", "user"),
    Subject("history", "History", "clock"),
    Subject("self-help", "Self-Help", "lightbulb"),
    Subject("business", "Business", "briefcase"),
    Subject("philosophy", "Philosophy", "brain"),
    Subject("poetry", "Poetry", "feather"),
    Subject("young_adult", "Young Adult", "users"),
    Subject("children", "Children's Books", "baby"),
    Subject("classics", "Classics", "bookmark"),
    Subject("literary_fiction", "Literary Fiction", "book-open"),
)
