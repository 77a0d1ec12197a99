"""
Seed filter - reduce the dataset to seeds matching every active criterion.
"""
import logging

from ..models.criteria import FilterCriteria
from ..models.seed import Seed
from .predicates import (
    biome_matches,
    edition_matches,
    tags_match,
    version_matches,
    within_max,
)


logger = logging.getLogger(__name__)

# mushroom_island is displayed but has no distance threshold
FILTERABLE_KINDS: tuple[str, ...] = (
    "village",
    "stronghold",
    "ancient_city",
    "ocean_monument",
    "trial_chambers",
    "mansion",
)


class SeedFilter:
    """
    Applies the conjunction of edition, version, biome, tag and per-kind
    distance predicates. Output keeps dataset order.
    """

    def __init__(self, criteria: FilterCriteria):
        self.criteria = criteria

    def filter(self, seeds: list[Seed]) -> list[Seed]:
        """
        Filter seeds against the criteria.

        Args:
            seeds: The working dataset

        Returns:
            Matching seeds, in their original relative order
        """
        logger.info(f"Filtering {len(seeds)} seeds")

        if not seeds:
            return []

        filtered = [seed for seed in seeds if self.matches(seed)]

        logger.info(f"After filters: {len(filtered)} seeds")
        return filtered

    def matches(self, seed: Seed) -> bool:
        """Check a single seed against all predicates."""
        criteria = self.criteria

        if not edition_matches(seed.edition, criteria.editions):
            return False

        if not version_matches(seed.version, criteria.versions):
            return False

        if not biome_matches(seed.spawn.biomes, criteria.biomes):
            return False

        if not tags_match(seed.tags, criteria.tags):
            return False

        for kind in FILTERABLE_KINDS:
            if not within_max(seed.features.occurrences(kind), criteria.threshold(kind)):
                return False

        return True
