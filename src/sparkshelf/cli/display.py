# ABOUTME: Rich rendering helpers shared by the book-oriented CLI commands.
# ABOUTME: Builds the field/value table for a single book.

from rich.markup import escape
from rich.table import Table

from sparkshelf.db.mapping import BookRecord
from sparkshelf.metadata.types import BookMetadata


def book_table(meta: BookMetadata, record: BookRecord | None = None) -> Table:
    """Field/value table for one book; catalog fields are shown when a record is given."""
    table = Table(show_header=False, box=None, pad_edge=False)
    table.add_column("Field", style="bold", width=14)
    table.add_column("Value", overflow="fold")

    if record is not None:
        table.add_row("ID", str(record.id))
    table.add_row("Key", meta.open_library_key)
    table.add_row("Title", escape(meta.title))
    table.add_row("Author", escape(meta.author) or "unknown")
    if meta.publisher:
        table.add_row("Publisher", escape(meta.publisher))
    if meta.published_date:
        table.add_row("Published", escape(meta.published_date))
    if meta.page_count:
        table.add_row("Pages", str(meta.page_count))
    if meta.isbn13:
        table.add_row("ISBN-13", meta.isbn13)
    if meta.isbn10:
        table.add_row("ISBN-10", meta.isbn10)
    if meta.genres:
        table.add_row("Genres", escape(", ".join(meta.genres)))
    if meta.description:
        table.add_row("Description", escape(meta.description))
    if meta.cover_large:
        table.add_row("Cover", meta.cover_large)
    table.add_row("Language", meta.language)
    if record is not None:
        table.add_row("Fetched", record.fetched_at)
    return table
