# ABOUTME: SQL DDL statements for the sparkshelf book catalog.
# ABOUTME: Defines the books table, its unique work-key index, FTS5 table and sync triggers.

SCHEMA_V1 = """
-- Normalized books, one row per Open Library work
CREATE TABLE books (
    id                INTEGER PRIMARY KEY AUTOINCREMENT,
    open_library_key  TEXT NOT NULL,
    title             TEXT NOT NULL,
    authors           TEXT NOT NULL DEFAULT '[]',
    description       TEXT,
    cover_small       TEXT,
    cover_medium      TEXT,
    cover_large       TEXT,
    published_date    TEXT,
    publisher         TEXT,
    page_count        INTEGER,
    genres            TEXT NOT NULL DEFAULT '[]',
    subjects          TEXT NOT NULL DEFAULT '[]',
    isbn13            TEXT,
    isbn10            TEXT,
    language          TEXT NOT NULL DEFAULT 'en',
    source            TEXT NOT NULL DEFAULT 'open_library',
    fetched_at        TEXT NOT NULL DEFAULT (strftime('%Y-%m-%dT%H:%M:%S', 'now')),
    created_at        TEXT NOT NULL DEFAULT (strftime('%Y-%m-%dT%H:%M:%S', 'now'))
);

CREATE UNIQUE INDEX idx_books_open_library_key ON books(open_library_key);
CREATE INDEX idx_books_isbn13 ON books(isbn13) WHERE isbn13 IS NOT NULL;

-- FTS5 virtual table for full-text search
CREATE VIRTUAL TABLE books_fts USING fts5(
    title, authors, description, subjects,
    content='books',
    content_rowid='id'
);

-- Rows are immutable once written, so only inserts need syncing
CREATE TRIGGER books_ai AFTER INSERT ON books BEGIN
    INSERT INTO books_fts(rowid, title, authors, description, subjects)
    VALUES (new.id, new.title, new.authors, new.description, new.subjects);
END;

CREATE TABLE schema_version (
    version    INTEGER NOT NULL,
    applied_at TEXT NOT NULL DEFAULT (strftime('%Y-%m-%dT%H:%M:%S', 'now'))
);

INSERT INTO schema_version (version) VALUES (1);
"""
