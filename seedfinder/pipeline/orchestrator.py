"""
Pipeline orchestrator - filter, score, sort and paginate in one pass.
"""
import logging
from typing import Any

import numpy as np

from ..models.criteria import QueryState
from ..models.results import ResultPage, ScoredSeed
from ..models.seed import Seed

from .filter import SeedFilter
from .scoring import ScoringEngine
from .sorting import sort_seeds
from .pagination import page_count, paginate


logger = logging.getLogger(__name__)


def summarize(scored: list[ScoredSeed]) -> dict[str, Any]:
    """Overall statistics for a filtered result set."""
    if not scored:
        return {}

    rarities = [item.seed.rarity or 0 for item in scored]
    scores = [item.score for item in scored]
    return {
        "total_seeds": len(scored),
        "median_rarity": float(np.median(rarities)),
        "mean_score": round(float(np.mean(scores)), 4),
        "best_score": float(max(scores)),
    }


def run_pipeline(seeds: list[Seed], state: QueryState) -> ResultPage:
    """
    Run the full ranking pipeline.

    Pipeline steps:
    1. Filter the dataset with the state's criteria
    2. Score every surviving seed
    3. Sort by the selected key
    4. Cut out the requested page

    The function is pure: the same dataset and state always give the same page.

    Args:
        seeds: The working dataset
        state: Criteria, weights, sort key and page to render

    Returns:
        ResultPage with the page items and pagination metadata
    """
    logger.info(f"Starting pipeline generation {state.generation} with {len(seeds)} seeds")

    # Step 1: Filter
    filtered = SeedFilter(state.criteria).filter(seeds)

    # Step 2: Score
    scorer = ScoringEngine(state.weights)
    scored = scorer.score_all(filtered, state.criteria.biomes)

    # Step 3: Sort
    ordered = sort_seeds(scored, state.sort_by)

    # Step 4: Paginate
    items = paginate(ordered, state.page, state.per_page)

    result = ResultPage(
        items=items,
        page=state.page,
        per_page=state.per_page,
        page_count=page_count(len(ordered), state.per_page),
        total=len(ordered),
        sort_by=state.sort_by,
        generation=state.generation,
        summary=summarize(ordered),
    )

    logger.info(
        f"Pipeline completed: page {result.page}/{result.page_count}, "
        f"{len(items)} of {result.total} seeds"
    )
    return result
