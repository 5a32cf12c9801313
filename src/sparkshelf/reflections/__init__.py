# ABOUTME: Reflection helpers: reflection questions and spark prompts for readers.
# ABOUTME: Both are pure selections over static reference data plus a random draw.

from sparkshelf.reflections.prompts import SparkPrompt, pick_prompts
from sparkshelf.reflections.questions import ReflectionQuestion, next_reflection_question

__all__ = [
    "ReflectionQuestion",
    "SparkPrompt",
    "next_reflection_question",
    "pick_prompts",
]
