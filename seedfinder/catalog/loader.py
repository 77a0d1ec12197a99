"""
Catalog loader - one fetch of the base dataset with an embedded fallback.
"""
import logging
from pathlib import Path
from typing import Optional, Union

import requests
from pydantic import BaseModel, Field

from ..errors import MalformedImport, SourceUnavailable
from ..models.seed import Seed
from .dataset import parse_records
from .defaults import DEFAULT_SEEDS


logger = logging.getLogger(__name__)


class CatalogLoad(BaseModel):
    """Outcome of a catalog load."""
    seeds: list[Seed] = Field(default_factory=list)
    source: str = Field(description="Where the seeds actually came from")
    fallback_reason: Optional[str] = Field(
        default=None,
        description="Why the embedded dataset was used instead of the configured source",
    )

    @property
    def used_fallback(self) -> bool:
        return self.fallback_reason is not None


def _is_url(source: str) -> bool:
    return source.startswith(("http://", "https://"))


def fetch_source(source: Union[str, Path], timeout: float = 10) -> bytes:
    """
    Read the raw catalog bytes from a URL or a local file. No retries.

    Raises:
        SourceUnavailable: the source cannot be read
    """
    source = str(source)
    if _is_url(source):
        try:
            response = requests.get(source, timeout=timeout)
            response.raise_for_status()
        except requests.RequestException as e:
            raise SourceUnavailable(f"Could not fetch {source}: {e}") from e
        return response.content

    try:
        return Path(source).read_bytes()
    except OSError as e:
        raise SourceUnavailable(f"Could not read {source}: {e}") from e


def load_catalog(
    source: Optional[Union[str, Path]] = None,
    timeout: float = 10,
) -> CatalogLoad:
    """
    Load the base catalog, falling back to the embedded sample seeds.

    Failures are never raised: they are logged and reported through
    CatalogLoad.fallback_reason so the app stays usable offline.
    """
    if source is None:
        return CatalogLoad(seeds=list(DEFAULT_SEEDS), source="embedded")

    try:
        payload = fetch_source(source, timeout=timeout)
        seeds = parse_records(payload)
    except SourceUnavailable as e:
        reason = str(e)
    except MalformedImport as e:
        reason = f"Catalog {source} is malformed: {e}"
    else:
        logger.info(f"Loaded {len(seeds)} seeds from {source}")
        return CatalogLoad(seeds=seeds, source=str(source))

    logger.warning(f"{reason}; using embedded dataset")
    return CatalogLoad(
        seeds=list(DEFAULT_SEEDS),
        source="embedded",
        fallback_reason=reason,
    )
