#!/usr/bin/env python
"""
Run script for Seed Finder.
Use: python run_seedfinder.py
Or: streamlit run seedfinder/ui/app.py
"""
import sys
import subprocess


def main():
    """Run the Streamlit app."""
    subprocess.run([
        sys.executable, "-m", "streamlit", "run",
        "seedfinder/ui/app.py",
        "--server.port=8501",
        "--browser.gatherUsageStats=false",
    ])


if __name__ == "__main__":
    main()
