"""
Custom CSS styles for Seed Finder.
Dark theme with grass and gold accents.
"""
import streamlit as st


# Color palette
COLORS = {
    "primary": "#3FA34D",      # grass green
    "primary_hover": "#2F7D3A",
    "accent": "#F2C14E",       # gold ore
    "background": "#0D1117",   # Dark background
    "surface": "#161B22",      # Card background
    "surface_hover": "#1F2937",
    "text": "#E6EDF3",         # Light text
    "text_muted": "#8B949E",
    "rare": "#A371F7",
    "border": "#30363D",
}


def inject_custom_css():
    """Inject custom CSS into the Streamlit app."""
    st.markdown(f"""
    <style>
    :root {{
        --primary: {COLORS['primary']};
        --primary-hover: {COLORS['primary_hover']};
        --accent: {COLORS['accent']};
        --bg: {COLORS['background']};
        --surface: {COLORS['surface']};
        --surface-hover: {COLORS['surface_hover']};
        --text: {COLORS['text']};
        --text-muted: {COLORS['text_muted']};
        --rare: {COLORS['rare']};
        --border: {COLORS['border']};
    }}

    .stApp {{
        background: linear-gradient(180deg, var(--bg) 0%, #161B22 100%);
    }}

    /* Header */
    .app-header {{
        text-align: center;
        padding: 1.5rem 0 1rem;
    }}

    .app-header h1 {{
        font-size: 2.3rem;
        font-weight: 700;
        color: var(--primary);
        margin-bottom: 0.25rem;
    }}

    .app-header .subtitle {{
        color: var(--text-muted);
        font-size: 1.05rem;
    }}

    /* Seed cards */
    .seed-card {{
        background: var(--surface);
        border: 1px solid var(--border);
        border-radius: 12px;
        padding: 1.1rem;
        margin-bottom: 0.5rem;
    }}

    .seed-card:hover {{
        background: var(--surface-hover);
        border-color: var(--primary);
    }}

    .seed-card .seed-header {{
        display: flex;
        justify-content: space-between;
        align-items: flex-start;
        gap: 0.5rem;
    }}

    .seed-card .seed-title {{
        font-family: monospace;
        font-size: 1.1rem;
        font-weight: 700;
        color: var(--text);
        word-break: break-all;
    }}

    .seed-card .meta {{
        color: var(--text-muted);
        font-size: 0.85rem;
        margin: 0.35rem 0;
    }}

    .seed-card .desc {{
        color: var(--text);
        font-size: 0.9rem;
        margin: 0.5rem 0;
    }}

    .seed-card .score {{
        font-weight: 700;
        color: var(--accent);
    }}

    /* Tags and feature badges */
    .badge {{
        display: inline-block;
        padding: 0.2rem 0.5rem;
        border-radius: 6px;
        font-size: 0.75rem;
        margin-right: 0.3rem;
        border: 1px solid var(--border);
        color: var(--text);
    }}

    .badge.rare {{
        color: var(--rare);
        border-color: var(--rare);
    }}

    .feature {{
        display: inline-block;
        padding: 0.15rem 0.45rem;
        border-radius: 6px;
        font-size: 0.75rem;
        margin: 0.15rem 0.3rem 0.15rem 0;
        background: rgba(63, 163, 77, 0.15);
        color: var(--primary);
    }}
    </style>
    """, unsafe_allow_html=True)
