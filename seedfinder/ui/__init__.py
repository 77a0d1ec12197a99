"""Streamlit front end for Seed Finder."""
