"""
Result models - scored seeds and rendered result pages.
"""
from typing import Any

from pydantic import BaseModel, Field

from .criteria import SortKey
from .seed import Seed


class ScoredSeed(BaseModel):
    """A seed annotated with its composite score for one scoring pass."""
    seed: Seed
    score: float = Field(ge=0)


class ResultPage(BaseModel):
    """One page of ranked results plus pagination metadata."""
    items: list[ScoredSeed] = Field(default_factory=list)
    page: int
    per_page: int
    page_count: int = Field(ge=1)
    total: int = Field(description="Seeds that passed the filters")
    sort_by: SortKey = "score"
    generation: int = 0
    summary: dict[str, Any] = Field(default_factory=dict)

    @property
    def has_next(self) -> bool:
        return self.page < self.page_count

    @property
    def has_previous(self) -> bool:
        return self.page > 1


class ScoreBreakdown(BaseModel):
    """Normalized score components and the weighted total."""
    rarity_score: float = Field(ge=0, le=1)
    struct_score: float = Field(ge=0, le=1)
    biome_score: float = Field(ge=0, le=1)
    proximities: dict[str, float] = Field(
        default_factory=dict,
        description="Per-kind proximity in 0..1 for the scored kinds",
    )
    total: float = Field(ge=0)
