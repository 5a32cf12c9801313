# ABOUTME: Metadata package: bibliographic API clients, edition scoring and cover resolution.
# ABOUTME: Exports the BookMetadata record and the public cover/scoring helpers.

from sparkshelf.metadata.covers import (
    CoverCandidates,
    CoverValidator,
    best_cover_candidates,
    best_cover_url,
)
from sparkshelf.metadata.scoring import score_edition, select_best_edition
from sparkshelf.metadata.types import BookMetadata

__all__ = [
    "BookMetadata",
    "CoverCandidates",
    "CoverValidator",
    "best_cover_candidates",
    "best_cover_url",
    "score_edition",
    "select_best_edition",
]
