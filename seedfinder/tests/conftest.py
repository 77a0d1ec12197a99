"""
Shared fixtures for Seed Finder tests.
"""
from typing import Optional

import pytest

from seedfinder.models.seed import Seed


def build_seed(
    seed: str = "12345",
    edition: str = "Java",
    version: str = "1.21",
    rarity: Optional[int] = 50,
    biomes: Optional[list[str]] = None,
    tags: Optional[list[str]] = None,
    **distances: list[float],
) -> Seed:
    """Build a seed; keyword arguments map a feature kind to its occurrence distances."""
    features = {
        kind: [{"distance": d, "x": 0, "z": 0} for d in values]
        for kind, values in distances.items()
    }
    return Seed.model_validate({
        "seed": seed,
        "edition": edition,
        "version": version,
        "rarity": rarity,
        "tags": tags or [],
        "spawn": {"biomes": biomes or [], "x": 0, "z": 0},
        "features": features,
        "description": f"Test seed {seed}",
    })


@pytest.fixture
def make_seed():
    """Factory fixture for building test seeds."""
    return build_seed


@pytest.fixture
def showcase_seed() -> Seed:
    """Seed with a village and stronghold near a plains/cherry spawn."""
    return build_seed(
        seed="-4172144997902289642",
        rarity=88,
        biomes=["Plains", "Cherry Grove"],
        tags=["Rare", "Scenic"],
        village=[420],
        stronghold=[1250],
    )
