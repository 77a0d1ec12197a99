"""
Seed card component - displays ranked seeds.
"""
import html

import streamlit as st

from ...browser import SeedBrowser
from ...models.results import ScoredSeed
from ...pipeline.distance import feature_summary


def render_results_section(browser: SeedBrowser, results: list[ScoredSeed]):
    """
    Render the results section with seed cards.

    Args:
        browser: Session used for favorite lookups and toggles
        results: Scored seeds on the current page
    """
    if not results:
        st.info("No seeds matched. Try relaxing your filters or import more seeds.")
        return

    cols = st.columns(2)
    for index, result in enumerate(results):
        with cols[index % 2]:
            render_seed_card(browser, result, index)


def _badge(text: str, cls: str = "") -> str:
    return f'<span class="badge {cls}">{html.escape(text)}</span>'


def render_seed_card(browser: SeedBrowser, result: ScoredSeed, index: int):
    """Render a single seed card."""
    seed = result.seed
    tags_html = " ".join(_badge(tag, "rare" if tag == "Rare" else "") for tag in seed.tags)
    features_html = " ".join(
        f'<span class="feature">{label}: ~{distance}m</span>'
        for label, distance in feature_summary(seed)
    )
    biomes = ", ".join(seed.spawn.biomes) or "—"
    rarity = seed.rarity if seed.rarity is not None else 0

    card_html = f"""
    <div class="seed-card">
        <div class="seed-header">
            <div class="seed-title">{html.escape(seed.seed)}</div>
            <div>{tags_html}</div>
        </div>
        <div class="meta">Edition: {seed.edition} • Version: {html.escape(seed.version)} • Rarity: {rarity}/100</div>
        <div>{features_html}</div>
        <div class="desc">{html.escape(seed.description)}</div>
        <div class="meta">Spawn biomes: {html.escape(biomes)}
            <span class="score" style="float: right;">Score: {result.score:.2f}</span>
        </div>
    </div>
    """
    st.markdown(card_html, unsafe_allow_html=True)

    # st.code renders a copy button
    st.code(seed.seed, language=None)

    favorite = browser.is_favorite(seed)
    label = "★ Favorite" if favorite else "☆ Favorite"
    if st.button(label, key=f"fav_{index}_{seed.favorite_key}"):
        browser.toggle_favorite(seed)
        st.rerun()
