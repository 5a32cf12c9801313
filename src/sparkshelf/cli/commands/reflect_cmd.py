# ABOUTME: The `sparkshelf question` and `sparkshelf prompts` commands.
# ABOUTME: Pick a reflection question or spark prompts for a book's genres.

import random
from contextlib import closing
from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape

from sparkshelf.cli.options import db_option
from sparkshelf.db.catalog import BookCatalog
from sparkshelf.db.connection import DEFAULT_DB_PATH, open_catalog
from sparkshelf.reflections.prompts import (
    DEFAULT_PROMPTS,
    PROMPT_TYPES,
    SparkPrompt,
    load_prompts,
    pick_prompts,
)
from sparkshelf.reflections.questions import next_reflection_question

console = Console()

seed_option = click.option(
    "--seed", type=int, default=None, help="Random seed, for a repeatable pick."
)


@click.command("question")
@click.option("--genre", "genres", multiple=True, help="Genre tag; repeatable.")
@click.option("--book", "book_id", type=int, default=None, help="Use a cataloged book's genres.")
@click.option("--chapter", type=click.IntRange(min=1), default=None, help="Chapter just finished.")
@click.option("--total", type=click.IntRange(min=1), default=None, help="Chapters in the book.")
@seed_option
@db_option
def question(
    genres: tuple[str, ...],
    book_id: int | None,
    chapter: int | None,
    total: int | None,
    seed: int | None,
    db_path: Path | None,
) -> None:
    """Suggest a reflection question for what you are reading."""
    genre_list = list(genres)
    title = None
    if book_id is not None:
        with closing(open_catalog(db_path or DEFAULT_DB_PATH)) as conn:
            record = BookCatalog(conn).get_by_id(book_id)
        if record is None:
            console.print(f"[red]Book {book_id} not found.[/red]")
            raise SystemExit(1)
        genre_list.extend(record.metadata.genres)
        title = record.metadata.title

    rng = random.Random(seed) if seed is not None else None
    picked = next_reflection_question(genre_list, chapter, total, rng=rng)

    if title:
        console.print(f"[dim]{escape(title)}[/dim]")
    console.print(f"[bold]{escape(picked.question)}[/bold]")
    console.print(f"[dim]{escape(picked.rationale)}[/dim]")


@click.command("prompts")
@click.option("--genre", "genres", multiple=True, help="Genre tag; repeatable.")
@click.option(
    "--type",
    "prompt_type",
    type=click.Choice(PROMPT_TYPES),
    default=None,
    help="Only prompts of this type.",
)
@click.option("--limit", type=click.IntRange(min=1), default=5, show_default=True)
@click.option("--random", "randomize", is_flag=True, default=False, help="Shuffle before picking.")
@click.option(
    "--file",
    "prompts_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="JSON array of prompts to pick from (default: built-in prompts).",
)
@seed_option
def prompts(
    genres: tuple[str, ...],
    prompt_type: str | None,
    limit: int,
    randomize: bool,
    prompts_file: Path | None,
    seed: int | None,
) -> None:
    """Suggest spark prompts to write about."""
    if prompts_file is not None:
        try:
            available = load_prompts(prompts_file)
        except ValueError as exc:
            console.print(f"[red]Could not read prompts:[/red] {exc}")
            raise SystemExit(1) from exc
    else:
        available = [SparkPrompt(text) for text in DEFAULT_PROMPTS]

    rng = random.Random(seed) if seed is not None else None
    picked = pick_prompts(
        available, genres, prompt_type=prompt_type, limit=limit, randomize=randomize, rng=rng
    )
    for prompt in picked:
        console.print(f"- {escape(prompt.prompt)}")
