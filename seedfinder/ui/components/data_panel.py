"""
Data panel component - custom seed submission, import and export.
"""
import streamlit as st

from ...browser import SeedBrowser
from ...catalog.dataset import EXPORT_FILE_NAME
from ...errors import MalformedImport, MalformedUserSubmission
from ...models.criteria import CustomSeedForm


FEATURES_PLACEHOLDER = '{"village": [{"distance": 240, "x": 120, "z": -200}]}'


def render_data_panel(browser: SeedBrowser):
    """Render the add/import/export section."""
    tabs = st.tabs(["➕ Add seed", "📥 Import", "📤 Export"])

    with tabs[0]:
        render_custom_seed_form(browser)

    with tabs[1]:
        render_import(browser)

    with tabs[2]:
        st.download_button(
            "📤 Export dataset JSON",
            data=browser.export_dataset(),
            file_name=EXPORT_FILE_NAME,
            mime="application/json",
            use_container_width=True,
        )


def render_custom_seed_form(browser: SeedBrowser):
    """Form for adding a seed of your own."""
    with st.form("custom_seed", clear_on_submit=True):
        col1, col2, col3 = st.columns(3)
        with col1:
            seed = st.text_input("Seed")
        with col2:
            edition = st.selectbox("Edition", options=["Java", "Bedrock"])
        with col3:
            version = st.text_input("Version", placeholder="1.21")

        biomes = st.text_input("Spawn biomes (comma separated)", placeholder="Plains, Cherry Grove")
        tags = st.text_input("Tags (comma separated)", placeholder="Scenic, Builder")
        description = st.text_area("Description", height=80)
        features = st.text_area("Features JSON", placeholder=FEATURES_PLACEHOLDER, height=100)

        if st.form_submit_button("Add seed", type="primary"):
            form = CustomSeedForm(
                seed=seed,
                edition=edition,
                version=version,
                biomes=biomes,
                tags=tags,
                description=description,
                features=features,
            )
            try:
                added = browser.add_custom_seed(form)
            except MalformedUserSubmission as e:
                st.error(str(e))
            else:
                st.success(f"✓ Added seed {added.seed}")


def render_import(browser: SeedBrowser):
    """Upload a JSON file that replaces the whole dataset."""
    uploaded = st.file_uploader("Seed dataset (JSON array)", type=["json"])
    if uploaded is None:
        return

    if st.button("Replace dataset", type="primary"):
        try:
            browser.import_dataset(uploaded.getvalue())
        except MalformedImport as e:
            st.error(f"Could not import JSON: {e}")
        else:
            st.success(f"✓ Imported {len(browser.seeds)} seeds")
            st.rerun()
