"""
Minecraft Seed Finder - browse, filter and rank seeds.

A Streamlit UI over the SeedBrowser session.
"""
import sys
import logging
from pathlib import Path

# Add project root to path for imports when running via streamlit
project_root = Path(__file__).parent.parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

import streamlit as st

from seedfinder.browser import SeedBrowser
from seedfinder.catalog.storage import JsonFileStorage
from seedfinder.config import get_config

from seedfinder.ui.styles import inject_custom_css
from seedfinder.ui.components.filter_panel import render_filter_panel
from seedfinder.ui.components.seed_card import render_results_section
from seedfinder.ui.components.pager import render_pager
from seedfinder.ui.components.data_panel import render_data_panel
from seedfinder.ui.components.debug_panel import render_debug_panel


def init_session_state():
    """Initialize session state variables."""
    config = get_config()
    if "browser" not in st.session_state:
        browser = SeedBrowser(
            storage=JsonFileStorage(config.catalog.storage_dir),
            catalog_source=config.catalog.source,
            timeout=config.catalog.timeout,
            per_page=config.pipeline.per_page,
        )
        with st.spinner("Loading seeds..."):
            browser.load()
        st.session_state.browser = browser
    if "show_debug" not in st.session_state:
        st.session_state.show_debug = False


def main():
    """Main application entry point."""
    config = get_config()
    logging.basicConfig(level=config.log_level)

    # Page config
    st.set_page_config(
        page_title=config.ui.page_title,
        page_icon=config.ui.page_icon,
        layout="wide",
    )

    inject_custom_css()
    init_session_state()
    browser: SeedBrowser = st.session_state.browser

    render_header()

    if browser.load_note:
        st.warning(f"Using built-in sample seeds. {browser.load_note}")

    render_filter_panel(browser)

    result = browser.result
    if result is not None:
        render_summary(result)
        render_results_section(browser, result.items)
        render_pager(browser, result)

    st.markdown("---")
    render_data_panel(browser)

    if config.enable_debug_panel and st.session_state.show_debug:
        render_debug_panel(state=browser.state, result=result)


def render_header():
    """Render the app header."""
    col1, col2, col3 = st.columns([1, 2, 1])

    with col2:
        st.markdown("""
        <div class="app-header">
            <h1>🌱 Minecraft Seed Finder</h1>
            <p class="subtitle">Filter and rank seeds by biomes, structures and rarity</p>
        </div>
        """, unsafe_allow_html=True)

    with col3:
        if get_config().enable_debug_panel:
            st.session_state.show_debug = st.checkbox(
                "🔧 Debug",
                value=st.session_state.show_debug,
                key="debug_toggle"
            )


def render_summary(result):
    """Render result counts and score statistics."""
    summary = result.summary
    col1, col2, col3, col4 = st.columns(4)
    col1.metric("Matching seeds", result.total)
    col2.metric("Page", f"{result.page}/{result.page_count}")
    col3.metric("Median rarity", f"{summary.get('median_rarity', 0):.0f}")
    col4.metric("Best score", f"{summary.get('best_score', 0):.2f}")


if __name__ == "__main__":
    main()
