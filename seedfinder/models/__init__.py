"""
Pydantic models for Seed Finder.
All data contracts are defined here for strict validation.
"""

from .seed import (
    FEATURE_KINDS,
    FeatureKind,
    Occurrence,
    SpawnInfo,
    Features,
    Seed,
)
from .criteria import (
    DEFAULT_MAX_DISTANCE,
    PRESETS,
    SortKey,
    FilterCriteria,
    Weights,
    QueryState,
    Preset,
    CustomSeedForm,
)
from .results import ScoredSeed, ScoreBreakdown, ResultPage

__all__ = [
    # Seed
    "FEATURE_KINDS",
    "FeatureKind",
    "Occurrence",
    "SpawnInfo",
    "Features",
    "Seed",
    # Criteria
    "DEFAULT_MAX_DISTANCE",
    "PRESETS",
    "SortKey",
    "FilterCriteria",
    "Weights",
    "QueryState",
    "Preset",
    "CustomSeedForm",
    # Results
    "ScoredSeed",
    "ScoreBreakdown",
    "ResultPage",
]
