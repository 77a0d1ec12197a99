"""Pipeline modules for ranking seeds."""

from .distance import nearest_distance, feature_summary
from .predicates import (
    edition_matches,
    version_matches,
    biome_matches,
    tags_match,
    within_max,
)
from .filter import SeedFilter
from .scoring import ScoringEngine
from .sorting import sort_seeds
from .pagination import paginate, page_count
from .orchestrator import run_pipeline, summarize

__all__ = [
    "nearest_distance",
    "feature_summary",
    "edition_matches",
    "version_matches",
    "biome_matches",
    "tags_match",
    "within_max",
    "SeedFilter",
    "ScoringEngine",
    "sort_seeds",
    "paginate",
    "page_count",
    "run_pipeline",
    "summarize",
]
