"""
Distance resolver - nearest occurrence of a feature kind.
"""
import math
from typing import Iterable, Optional

from ..models.seed import FEATURE_KINDS, Occurrence, Seed


# Display labels for feature badges, in card order
FEATURE_LABELS: dict[str, str] = {
    "village": "Village",
    "stronghold": "Stronghold",
    "ancient_city": "Ancient City",
    "ocean_monument": "Monument",
    "trial_chambers": "Trial",
    "mansion": "Mansion",
    "mushroom_island": "Mushroom",
}


def nearest_distance(occurrences: Optional[Iterable[Occurrence]]) -> float:
    """
    Smallest distance among occurrences.

    An occurrence without a distance counts as infinitely far, and an empty
    or missing list returns +inf, meaning the feature does not exist.
    """
    if not occurrences:
        return math.inf
    return min(
        (o.distance if o.distance is not None else math.inf for o in occurrences),
        default=math.inf,
    )


def feature_summary(seed: Seed) -> list[tuple[str, int]]:
    """Label and rounded nearest distance for every feature kind the seed has."""
    summary = []
    for kind in FEATURE_KINDS:
        occurrences = seed.features.occurrences(kind)
        if not occurrences:
            continue
        distance = nearest_distance(occurrences)
        if math.isinf(distance):
            continue
        summary.append((FEATURE_LABELS[kind], round(distance)))
    return summary
