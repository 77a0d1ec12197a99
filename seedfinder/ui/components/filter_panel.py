"""
Filter panel component - criteria, weights, sort order and presets.
"""
import streamlit as st

from ...browser import SeedBrowser
from ...config import get_config
from ...models.criteria import PRESETS, FilterCriteria, Weights
from ...pipeline.filter import FILTERABLE_KINDS
from ...pipeline.distance import FEATURE_LABELS


SORT_LABELS = {
    "score": "Best score",
    "rarity": "Rarity",
    "stronghold": "Nearest stronghold",
    "village": "Nearest village",
}

KNOWN_TAGS = ["Rare", "Scenic", "Speedrun", "Hardcore", "Challenge", "Builder", "Explorer"]


def render_filter_panel(browser: SeedBrowser):
    """
    Render the sidebar filter panel and apply changes to the browser.

    Args:
        browser: The active seed browser session
    """
    state = browser.state
    criteria = state.criteria
    facets = browser.facets()

    st.sidebar.markdown("### 🎛️ Presets")
    cols = st.sidebar.columns(len(PRESETS))
    for col, name in zip(cols, PRESETS):
        if col.button(name.title(), key=f"preset_{name}", use_container_width=True):
            browser.apply_preset(name)
            st.rerun()

    with st.sidebar.form("filters"):
        st.markdown("### 🔎 Filters")
        editions = st.multiselect(
            "Edition",
            options=["Java", "Bedrock"],
            default=[e for e in criteria.editions if e in ("Java", "Bedrock")],
        )
        versions = st.multiselect(
            "Version",
            options=sorted(set(facets["versions"]) | set(criteria.versions)),
            default=criteria.versions,
        )
        biomes = st.multiselect(
            "Spawn biomes",
            options=sorted(set(facets["biomes"]) | set(criteria.biomes)),
            default=criteria.biomes,
        )

        st.markdown("**Tags**")
        tag_options = sorted(set(KNOWN_TAGS) | set(facets["tags"]) | set(criteria.tags))
        tags = [
            tag for tag in tag_options
            if st.checkbox(tag, value=tag in criteria.tags)
        ]

        st.markdown("**Max distance (m, 0 = off)**")
        max_distance = {}
        for kind in FILTERABLE_KINDS:
            value = st.number_input(
                FEATURE_LABELS[kind],
                min_value=0,
                value=int(criteria.threshold(kind) or 0),
                step=100,
            )
            if value > 0:
                max_distance[kind] = value

        st.markdown("**Score weights**")
        w_rarity = st.slider("Rarity", 0.0, 1.0, state.weights.rarity, 0.05)
        w_struct = st.slider("Structures", 0.0, 1.0, state.weights.struct, 0.05)
        w_biome = st.slider("Biome match", 0.0, 1.0, state.weights.biome, 0.05)

        if st.form_submit_button("Apply", type="primary", use_container_width=True):
            browser.apply_filters(
                FilterCriteria(
                    editions=editions,
                    versions=versions,
                    biomes=biomes,
                    tags=tags,
                    max_distance=max_distance,
                ),
                Weights(rarity=w_rarity, struct=w_struct, biome=w_biome),
            )
            st.rerun()

    sort_keys = list(SORT_LABELS)
    sort_by = st.sidebar.selectbox(
        "Sort by",
        options=sort_keys,
        index=sort_keys.index(state.sort_by),
        format_func=lambda key: SORT_LABELS[key],
    )
    if sort_by != state.sort_by:
        browser.set_sort(sort_by)
        st.rerun()

    options = get_config().pipeline.per_page_options
    per_page = st.sidebar.selectbox(
        "Per page",
        options=options,
        index=options.index(state.per_page) if state.per_page in options else 0,
    )
    if per_page != state.per_page:
        browser.set_per_page(per_page)
        st.rerun()

    if st.sidebar.button("↺ Reset", use_container_width=True):
        browser.reset()
        st.rerun()
