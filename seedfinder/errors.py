"""
Error types raised at the catalog and submission boundaries.
The pipeline itself never raises on well-formed input.
"""


class SeedFinderError(Exception):
    """Base class for all Seed Finder errors."""


class SourceUnavailable(SeedFinderError):
    """The dataset source could not be fetched or parsed."""


class MalformedImport(SeedFinderError):
    """An imported payload is not a valid sequence of seed records."""


class MalformedUserSubmission(SeedFinderError):
    """A custom seed submission could not be turned into a record."""
