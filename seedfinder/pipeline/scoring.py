"""
Scoring engine - deterministic composite score per seed.
"""
import logging
import math
from typing import Collection, Optional

from ..models.criteria import Weights
from ..models.results import ScoreBreakdown, ScoredSeed
from ..models.seed import Seed
from .distance import nearest_distance
from .predicates import biome_matches


logger = logging.getLogger(__name__)

# Structures beyond this many meters give no proximity credit
PROXIMITY_WINDOW = 6000
# Stand-in for a missing structure so the normalization stays finite
MISSING_DISTANCE = 99999
# mansion and mushroom_island are shown on cards but never scored
SCORED_KINDS: tuple[str, ...] = (
    "village",
    "stronghold",
    "ancient_city",
    "ocean_monument",
    "trial_chambers",
)


def proximity(distance: float) -> float:
    """Map a distance onto 0..1, 1 at spawn and 0 at or beyond the window."""
    value = 1 - min(distance, PROXIMITY_WINDOW) / PROXIMITY_WINDOW
    return max(0.0, min(1.0, value))


class ScoringEngine:
    """
    Weighted sum of three normalized components:
    rarity (0..100 mapped to 0..1), mean structure proximity, and a binary
    spawn-biome match. Output lies in [0, weights.total], rounded to 4 decimals.
    """

    def __init__(self, weights: Optional[Weights] = None):
        self.weights = weights or Weights()

    def breakdown(self, seed: Seed, required_biomes: Collection[str] = ()) -> ScoreBreakdown:
        """Calculate every component of the score for one seed."""
        rarity = seed.rarity if seed.rarity is not None else 0
        rarity_score = max(0, min(100, rarity)) / 100

        proximities = {}
        for kind in SCORED_KINDS:
            distance = nearest_distance(seed.features.occurrences(kind))
            if math.isinf(distance):
                distance = MISSING_DISTANCE
            proximities[kind] = proximity(distance)
        struct_score = sum(proximities.values()) / len(proximities)

        biome_score = 1.0 if biome_matches(seed.spawn.biomes, required_biomes) else 0.0

        total = (
            self.weights.rarity * rarity_score
            + self.weights.struct * struct_score
            + self.weights.biome * biome_score
        )
        total = max(0.0, min(round(total, 4), self.weights.total))

        return ScoreBreakdown(
            rarity_score=rarity_score,
            struct_score=struct_score,
            biome_score=biome_score,
            proximities=proximities,
            total=total,
        )

    def score(self, seed: Seed, required_biomes: Collection[str] = ()) -> float:
        """Composite score for one seed."""
        return self.breakdown(seed, required_biomes).total

    def score_all(
        self,
        seeds: list[Seed],
        required_biomes: Collection[str] = (),
    ) -> list[ScoredSeed]:
        """Score every seed, keeping input order."""
        scored = [
            ScoredSeed(seed=seed, score=self.score(seed, required_biomes))
            for seed in seeds
        ]
        logger.info(f"Scored {len(scored)} seeds")
        return scored
