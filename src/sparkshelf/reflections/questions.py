# ABOUTME: Template-based reflection questions chosen by genre and reading progress.
# ABOUTME: A static question bank, genre bucket matching, and a random draw from the pool.

import random
from collections.abc import Iterable
from dataclasses import dataclass

LATE_READING_THRESHOLD = 0.8


@dataclass(frozen=True)
class ReflectionQuestion:
    """A question to put to a reader, with a line on why it is worth asking."""

    question: str
    rationale: str
    category: str = "general"


def _bucket(category: str, *pairs: tuple[str, str]) -> tuple[ReflectionQuestion, ...]:
    return tuple(ReflectionQuestion(q, r, category) for q, r in pairs)


QUESTION_BANK: dict[str, tuple[ReflectionQuestion, ...]] = {
    "general": _bucket(
        "general",
        ("What moment from this chapter stayed with you, and why?",
         "Reflecting on memorable moments deepens our connection to stories."),
        ("How did your understanding of the main character change in this section?",
         "Characters reveal themselves gradually through their choices and reactions."),
        ("What emotions did this chapter evoke in you?",
         "Our emotional responses often reveal what resonates most deeply with us."),
        ("If you could ask one of the characters a question, what would it be?",
         "The questions we want to ask reveal what we're curious about."),
        ("What themes are emerging in the story so far?",
         "Identifying themes helps us understand the deeper meaning of a narrative."),
        ("Was there a line or passage that particularly struck you? What made it memorable?",
         "Beautiful prose often captures truths we recognize but couldn't articulate."),
        ("How does this story connect to your own life or experiences?",
         "Stories become meaningful when we find ourselves reflected in them."),
        ("What do you predict will happen next, and why?",
         "Making predictions keeps us actively engaged with the narrative."),
        ("What surprised you in this chapter?",
         "Surprises reveal our assumptions and the author's craft."),
        ("How would you describe the mood or atmosphere of this section?",
         "Atmosphere shapes our emotional experience of a story."),
    ),
    "fiction": _bucket(
        "fiction",
        ("How did the setting influence the events of this chapter?",
         "Place and time shape characters and possibilities."),
        ("What conflicts are building in the story?",
         "Conflict drives narrative and reveals character."),
        ("Which character do you find most compelling right now, and why?",
         "Our affinities reveal what we value in people."),
        ("How is the author building tension or suspense?",
         "Understanding craft deepens our appreciation of storytelling."),
        ("What moral dilemmas are the characters facing?",
         "Ethical questions make stories resonate beyond the page."),
    ),
    "mystery": _bucket(
        "mystery",
        ("What clues have you noticed so far?",
         "Active reading in mysteries means playing detective."),
        ("Who do you suspect, and what's your evidence?",
         "Building theories engages us in the puzzle."),
        ("What questions remain unanswered?",
         "Good mysteries make us hungry for answers."),
        ("How is the author misdirecting your attention?",
         "Recognizing red herrings sharpens our reading."),
    ),
    "romance": _bucket(
        "romance",
        ("How is the relationship between the main characters evolving?",
         "Watching connections develop is the heart of romance."),
        ("What obstacles stand between the characters?",
         "Barriers create the tension that makes romance compelling."),
        ("What makes you root for (or against) this relationship?",
         "Our reactions reveal what we believe about love."),
    ),
    "science fiction": _bucket(
        "science fiction",
        ("How does this world differ from our own, and what does that reveal?",
         "Speculative fiction uses difference to illuminate truth."),
        ("What commentary on our society do you see in this story?",
         "Science fiction often critiques the present through the future."),
        ("How are the characters adapting to their extraordinary circumstances?",
         "Humanity persists even in inhuman conditions."),
    ),
    "fantasy": _bucket(
        "fantasy",
        ("How does magic (or the supernatural) function in this world?",
         "Understanding magical systems enriches the reading experience."),
        ("What real-world parallels do you see in this fantasy setting?",
         "Fantasy often addresses reality through metaphor."),
        ("How are power dynamics at play in this chapter?",
         "Fantasy frequently explores questions of power and its use."),
    ),
    "non-fiction": _bucket(
        "non-fiction",
        ("What new information or perspective did you gain?",
         "Non-fiction expands our understanding of the world."),
        ("Do you agree with the author's argument or interpretation? Why or why not?",
         "Critical engagement deepens learning."),
        ("How might you apply what you've learned?",
         "Knowledge becomes wisdom through application."),
        ("What questions does this raise for you?",
         "Good non-fiction sparks curiosity."),
    ),
    "biography": _bucket(
        "biography",
        ("What aspect of this person's character stands out to you?",
         "Biographies reveal the complexity of real lives."),
        ("How did their circumstances shape who they became?",
         "Context helps us understand achievement."),
        ("What can you learn from their experiences?",
         "Other lives offer lessons for our own."),
    ),
    "self-help": _bucket(
        "self-help",
        ("Which idea from this section resonates most with you?",
         "Resonance often indicates where growth is possible."),
        ("What would it look like to implement this advice in your life?",
         "Transformation requires moving from theory to practice."),
        ("What resistance or skepticism came up for you?",
         "Our objections often reveal important truths about ourselves."),
    ),
}

CONCLUSION_QUESTIONS: tuple[ReflectionQuestion, ...] = _bucket(
    "conclusion",
    ("How do you think the story will conclude?",
     "Anticipating endings keeps us invested in the journey."),
    ("Looking back, how have the characters grown?",
     "Character arcs reveal the story's deeper meaning."),
)


def genre_matches(genre: str, key: str) -> bool:
    """Two-way case-insensitive containment, so "Epic Fantasy" matches "fantasy"."""
    genre, key = genre.lower(), key.lower()
    return genre in key or key in genre


def questions_for_genres(genres: Iterable[str]) -> list[ReflectionQuestion]:
    """The general questions plus every bucket matched by any genre.

    A genre matching several buckets adds each of them; "Science Fiction"
    pulls in both the "science fiction" and "fiction" buckets. An empty genre
    is contained in every key, so it adds every bucket.
    """
    pool = list(QUESTION_BANK["general"])
    for genre in genres:
        for key, bucket in QUESTION_BANK.items():
            if genre_matches(genre, key):
                pool.extend(bucket)
    return pool


def _is_late_in_book(chapter_number: int | None, total_chapters: int | None) -> bool:
    if not chapter_number or not total_chapters:
        return False
    return chapter_number / total_chapters > LATE_READING_THRESHOLD


def question_pool(
    genres: Iterable[str] = (),
    chapter_number: int | None = None,
    total_chapters: int | None = None,
) -> list[ReflectionQuestion]:
    pool = questions_for_genres(genres)
    if _is_late_in_book(chapter_number, total_chapters):
        pool.extend(CONCLUSION_QUESTIONS)
    return pool


def next_reflection_question(
    genres: Iterable[str] = (),
    chapter_number: int | None = None,
    total_chapters: int | None = None,
    rng: random.Random | None = None,
) -> ReflectionQuestion:
    """Pick one reflection question for a reader.

    Past 80% of the book, two questions about the ending join the pool. The
    general bucket is never empty, so this always returns a question.

    Args:
        genres: Genre tags of the book, in any case.
        chapter_number: Chapter just finished, if known.
        total_chapters: Chapter count of the book, if known.
        rng: Random source; defaults to the module-level generator.
    """
    pool = question_pool(genres, chapter_number, total_chapters)
    return (rng or random).choice(pool)
