# ABOUTME: Canned Google Books API response fixtures for testing.
# ABOUTME: Volume payloads in the shape of the v1 volumes endpoint.

VOLUME = {
    "id": "zyTCAlFPjgYC",
    "volumeInfo": {
        "title": "The Google Story",
        "authors": ["David A. Vise", "Mark Malseed"],
        "publisher": "Random House Digital, Inc.",
        "publishedDate": "2005-11-15",
        "description": "Here is the story behind one of the most remarkable Internet successes.",
        "industryIdentifiers": [
            {"type": "ISBN_10", "identifier": "055380457X"},
            {"type": "ISBN_13", "identifier": "9780553804577"},
        ],
        "pageCount": 207,
        "categories": ["Browsers (Computer programs)"],
        "averageRating": 3.5,
        "ratingsCount": 136,
        "imageLinks": {
            "smallThumbnail": "http://books.google.com/books/content?id=zyTCAlFPjgYC&zoom=5&edge=curl",
            "thumbnail": "http://books.google.com/books/content?id=zyTCAlFPjgYC&zoom=1&edge=curl",
        },
        "language": "en",
    },
}

VOLUME_MINIMAL = {
    "id": "abc123",
    "volumeInfo": {"title": "Untitled Draft"},
}

SEARCH_RESPONSE = {
    "kind": "books#volumes",
    "totalItems": 2,
    "items": [VOLUME, VOLUME_MINIMAL],
}

SEARCH_RESPONSE_EMPTY = {"kind": "books#volumes", "totalItems": 0}
