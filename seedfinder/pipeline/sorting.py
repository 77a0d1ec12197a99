"""
Sort engine - order scored seeds by one of the supported keys.

Every strategy relies on Python's stable sort, so seeds with equal keys
keep the order the filter produced them in.
"""
from typing import Callable

from ..models.criteria import SortKey
from ..models.results import ScoredSeed
from .distance import nearest_distance


def _rarity(item: ScoredSeed) -> int:
    return item.seed.rarity if item.seed.rarity is not None else 0


def _stronghold(item: ScoredSeed) -> float:
    return nearest_distance(item.seed.features.stronghold)


def _village(item: ScoredSeed) -> float:
    return nearest_distance(item.seed.features.village)


# key -> (key function, descending)
SORT_STRATEGIES: dict[str, tuple[Callable[[ScoredSeed], float], bool]] = {
    "score": (lambda item: item.score, True),
    "rarity": (_rarity, True),
    "stronghold": (_stronghold, False),
    "village": (_village, False),
}


def sort_seeds(seeds: list[ScoredSeed], key: SortKey = "score") -> list[ScoredSeed]:
    """
    Return a new list ordered by key.

    score and rarity sort highest first; stronghold and village sort
    nearest first, with seeds lacking the structure last.
    """
    key_func, descending = SORT_STRATEGIES.get(key, SORT_STRATEGIES["score"])
    return sorted(seeds, key=key_func, reverse=descending)
