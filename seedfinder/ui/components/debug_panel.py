"""
Debug panel component - transparency view for developers.
"""
import json
from typing import Optional

import streamlit as st

from ...models.criteria import QueryState
from ...models.results import ResultPage
from ...pipeline.scoring import ScoringEngine


def render_debug_panel(
    state: QueryState,
    result: Optional[ResultPage] = None,
):
    """
    Render the debug/transparency panel.
    Shows the pipeline state and score breakdowns.
    """
    st.markdown("---")
    st.markdown("### 🔧 Debug Panel")

    tabs = st.tabs(["Query State", "Score Breakdown", "Summary"])

    with tabs[0]:
        st.code(json.dumps(state.model_dump(mode="json"), indent=2), language="json")

    with tabs[1]:
        render_score_debug(state, result)

    with tabs[2]:
        if result is None or not result.summary:
            st.info("No results available")
        else:
            st.json(result.summary)


def render_score_debug(state: QueryState, result: Optional[ResultPage]):
    """Render the component scores for each seed on the page."""
    if result is None or not result.items:
        st.info("No results available")
        return

    scorer = ScoringEngine(state.weights)
    for item in result.items:
        breakdown = scorer.breakdown(item.seed, state.criteria.biomes)
        st.markdown(
            f"- `{item.seed.seed}`: rarity {breakdown.rarity_score:.2f}, "
            f"structures {breakdown.struct_score:.3f}, biome {breakdown.biome_score:.0f} "
            f"→ **{breakdown.total}**"
        )
