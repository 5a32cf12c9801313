# ABOUTME: Spark prompts: short writing nudges filtered by genre, with built-in defaults.
# ABOUTME: Used when a reader wants something to jot down about the current book.

import json
import random
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from pathlib import Path
from typing import Literal

from sparkshelf.reflections.questions import genre_matches

DEFAULT_PROMPTS: tuple[str, ...] = (
    "What surprised you in your reading today?",
    "Share a line that stuck with you.",
    "How are you feeling about the story so far?",
    "What would you ask the author right now?",
    "Describe this book in one emoji.",
    "What's one thing you've learned?",
    "Would you recommend this to a friend? Why?",
    "What character do you relate to most?",
    "Is this book what you expected?",
    "What's your favorite moment so far?",
    "What predictions do you have?",
    "How does this book make you feel?",
    "What themes are emerging?",
    "Who would love this book?",
    "What's the vibe of this book?",
)

PromptType = Literal["general", "genre", "daily"]
PROMPT_TYPES: tuple[PromptType, ...] = ("general", "genre", "daily")

# Prompt types that apply regardless of genre.
_UNIVERSAL_TYPES = frozenset({"general", "daily"})


@dataclass(frozen=True)
class SparkPrompt:
    prompt: str
    type: str = "general"
    genres: tuple[str, ...] = field(default_factory=tuple)


def load_prompts(path: Path) -> list[SparkPrompt]:
    """Read prompts from a JSON array of {"prompt", "type", "genres", "active"} objects.

    Inactive entries and entries without prompt text are skipped.
    """
    data = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(data, list):
        raise ValueError(f"{path}: expected a JSON array of prompts")

    prompts = []
    for entry in data:
        if not isinstance(entry, dict) or not entry.get("prompt"):
            continue
        if entry.get("active", True) is False:
            continue
        prompts.append(
            SparkPrompt(
                prompt=entry["prompt"],
                type=entry.get("type") or "general",
                genres=tuple(entry.get("genres") or ()),
            )
        )
    return prompts


def filter_prompts(prompts: Iterable[SparkPrompt], genres: Sequence[str]) -> list[SparkPrompt]:
    """Keep universal prompts and genre prompts matching any requested genre.

    With no genres requested, every prompt is kept.
    """
    prompts = list(prompts)
    if not genres:
        return prompts

    kept = []
    for prompt in prompts:
        if prompt.type in _UNIVERSAL_TYPES:
            kept.append(prompt)
        elif prompt.type == "genre" and any(
            genre_matches(wanted, tagged) for tagged in prompt.genres for wanted in genres
        ):
            kept.append(prompt)
    return kept


def default_prompts(limit: int, rng: random.Random | None = None) -> list[SparkPrompt]:
    """A shuffled sample of the built-in general prompts."""
    shuffled = list(DEFAULT_PROMPTS)
    (rng or random).shuffle(shuffled)
    return [SparkPrompt(prompt) for prompt in shuffled[:limit]]


def pick_prompts(
    prompts: Iterable[SparkPrompt],
    genres: Sequence[str] = (),
    *,
    prompt_type: PromptType | None = None,
    limit: int = 5,
    randomize: bool = False,
    rng: random.Random | None = None,
) -> list[SparkPrompt]:
    """Filter, optionally shuffle, and cap prompts, falling back to defaults.

    prompt_type, when given, keeps only prompts of that type before the genre
    filter runs. The fallback also applies when the filtered set is empty, so a
    reader always gets something to write about.
    """
    if prompt_type is not None:
        prompts = [prompt for prompt in prompts if prompt.type == prompt_type]
    picked = filter_prompts(prompts, genres)
    if randomize:
        (rng or random).shuffle(picked)
    picked = picked[:limit]
    if not picked:
        return default_prompts(limit, rng)
    return picked
