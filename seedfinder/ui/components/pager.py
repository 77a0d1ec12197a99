"""
Pager component - page buttons under the results.
"""
import streamlit as st

from ...browser import SeedBrowser
from ...models.results import ResultPage


def render_pager(browser: SeedBrowser, result: ResultPage):
    """Render one button per page; the current page is highlighted."""
    if result.page_count <= 1:
        return

    cols = st.columns(min(result.page_count, 12))
    for page in range(1, result.page_count + 1):
        col = cols[(page - 1) % len(cols)]
        kind = "primary" if page == result.page else "secondary"
        if col.button(str(page), key=f"page_{page}", type=kind, use_container_width=True):
            browser.set_page(page)
            st.rerun()
