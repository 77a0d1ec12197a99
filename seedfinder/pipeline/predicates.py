"""
Predicate evaluators. Each one is pure and independent of the others,
so the filter may evaluate them in any order and stop at the first miss.
"""
from typing import Collection, Iterable, Optional

from ..models.seed import Occurrence
from .distance import nearest_distance


def edition_matches(seed_edition: str, required: Collection[str]) -> bool:
    """True if no edition is required or the seed's edition is one of them."""
    if not required:
        return True
    return seed_edition in required


def version_matches(seed_version: str, required: Collection[str]) -> bool:
    """True if no version is required or the seed's version is one of them."""
    if not required:
        return True
    return seed_version in required


def biome_matches(
    seed_biomes: Optional[Iterable[str]],
    required: Collection[str],
) -> bool:
    """Every required biome must appear among the spawn biomes (exact, case-sensitive)."""
    if not required:
        return True
    if not seed_biomes:
        return False
    present = set(seed_biomes)
    return all(biome in present for biome in required)


def tags_match(seed_tags: Optional[Iterable[str]], required: Collection[str]) -> bool:
    """Every required tag must be carried by the seed."""
    if not required:
        return True
    present = set(seed_tags or [])
    return all(tag in present for tag in required)


def within_max(
    occurrences: Optional[Iterable[Occurrence]],
    max_distance: Optional[float],
) -> bool:
    """
    Check the nearest occurrence against a maximum distance.

    A missing or non-positive maximum disables the constraint. With an active
    constraint a seed lacking the feature entirely never matches.
    """
    if not max_distance or max_distance <= 0:
        return True
    occurrences = list(occurrences or [])
    if not occurrences:
        return False
    return nearest_distance(occurrences) <= max_distance
