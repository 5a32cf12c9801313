# ABOUTME: sparkshelf: book resolution, cover fallbacks and reflection prompts for readers.
# ABOUTME: Subpackages: metadata (API clients, scoring, covers), db, core, reflections, cli.
