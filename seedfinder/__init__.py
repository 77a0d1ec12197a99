"""
Seed Finder - browse, filter and rank a catalog of Minecraft world seeds.
"""

__version__ = "1.0.0"
