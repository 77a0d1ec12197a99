"""
Seed browser session - the query interface consumed by the UI.

Holds the working dataset and an immutable QueryState. Every change builds
a new state with a higher generation and re-runs the whole pipeline; a run
is only committed if no newer change arrived while it was computing.
"""
import logging
import threading
from pathlib import Path
from typing import Optional, Union

from pydantic import ValidationError

from .catalog.dataset import (
    build_custom_seed,
    export_records,
    merge,
    parse_records,
    user_subset,
)
from .catalog.loader import CatalogLoad, load_catalog
from .catalog.storage import FAVORITES_KEY, USER_SEEDS_KEY, StoragePort
from .models.criteria import (
    PRESETS,
    CustomSeedForm,
    FilterCriteria,
    QueryState,
    SortKey,
    Weights,
)
from .models.results import ResultPage
from .models.seed import Seed
from .pipeline.orchestrator import run_pipeline


logger = logging.getLogger(__name__)


class SeedBrowser:
    """
    Working dataset, user additions, favorites and the current result page.

    Args:
        storage: Where user seeds and favorites are persisted
        catalog_source: URL or path of the base catalog; None uses the embedded samples
        timeout: Seconds to wait for a remote catalog
        per_page: Initial page size
    """

    def __init__(
        self,
        storage: StoragePort,
        catalog_source: Optional[Union[str, Path]] = None,
        timeout: float = 10,
        per_page: int = 24,
    ):
        self.storage = storage
        self.catalog_source = catalog_source
        self.timeout = timeout
        self.default_per_page = per_page

        self._lock = threading.Lock()
        self._seeds: list[Seed] = []
        self._user_seeds: list[Seed] = []
        self._last_good_base: Optional[list[Seed]] = None
        self._state = QueryState(per_page=per_page)
        self._result: Optional[ResultPage] = None
        self.load_note: Optional[str] = None

    @property
    def seeds(self) -> list[Seed]:
        """The working dataset (base + user)."""
        return list(self._seeds)

    @property
    def user_seeds(self) -> list[Seed]:
        return list(self._user_seeds)

    @property
    def state(self) -> QueryState:
        return self._state

    @property
    def result(self) -> Optional[ResultPage]:
        """The last committed result page."""
        return self._result

    def facets(self) -> dict[str, list[str]]:
        """Distinct editions, versions, biomes and tags present in the dataset."""
        seeds = self._seeds
        return {
            "editions": sorted({seed.edition for seed in seeds}),
            "versions": sorted({seed.version for seed in seeds if seed.version}),
            "biomes": sorted({biome for seed in seeds for biome in seed.spawn.biomes}),
            "tags": sorted({tag for seed in seeds for tag in seed.tags}),
        }

    def load(self) -> CatalogLoad:
        """
        Acquire the base catalog, merge persisted user seeds and render page 1.

        A failed load never leaves a partial dataset: the last catalog that
        loaded successfully is kept, otherwise the embedded samples are used.
        """
        catalog = load_catalog(self.catalog_source, timeout=self.timeout)
        base = catalog.seeds
        if catalog.used_fallback and self._last_good_base is not None:
            logger.warning("Keeping last known good catalog")
            base = self._last_good_base
        elif not catalog.used_fallback:
            self._last_good_base = list(catalog.seeds)

        user = self._load_user_seeds()
        with self._lock:
            self._seeds = merge(base, user)
            self._user_seeds = user
        self.load_note = catalog.fallback_reason

        logger.info(f"Dataset ready: {len(base)} catalog seeds, {len(user)} user seeds")
        self._rerun(page=1)
        return catalog

    def _load_user_seeds(self) -> list[Seed]:
        stored = self.storage.load(USER_SEEDS_KEY)
        if stored is None:
            return []
        if not isinstance(stored, list):
            logger.warning("Stored user seeds are not a list; ignoring them")
            return []

        seeds = []
        for index, record in enumerate(stored):
            try:
                seed = Seed.model_validate(record)
            except ValidationError as e:
                logger.warning(f"Skipping invalid stored user seed {index}: {e.error_count()} errors")
                continue
            if not seed.user_added:
                seed = seed.model_copy(update={"user_added": True})
            seeds.append(seed)
        return seeds

    def _save_user_seeds(self) -> None:
        self.storage.save(USER_SEEDS_KEY, [seed.to_record() for seed in self._user_seeds])

    def _rerun(self, **changes) -> Optional[ResultPage]:
        with self._lock:
            self._state = self._state.evolve(**changes)
            state = self._state
            seeds = list(self._seeds)

        result = run_pipeline(seeds, state)
        return self._commit(result)

    def _commit(self, result: ResultPage) -> Optional[ResultPage]:
        with self._lock:
            if result.generation != self._state.generation:
                logger.debug(
                    f"Discarding stale run {result.generation} "
                    f"(latest is {self._state.generation})"
                )
                return self._result
            self._result = result
            return result

    def apply_filters(
        self,
        criteria: FilterCriteria,
        weights: Optional[Weights] = None,
    ) -> Optional[ResultPage]:
        """Run the pipeline with new criteria, back on page 1."""
        changes = {"criteria": criteria, "page": 1}
        if weights is not None:
            changes["weights"] = weights
        return self._rerun(**changes)

    def set_weights(self, weights: Weights) -> Optional[ResultPage]:
        return self._rerun(weights=weights, page=1)

    def set_sort(self, sort_by: SortKey) -> Optional[ResultPage]:
        return self._rerun(sort_by=sort_by)

    def set_page(self, page: int) -> Optional[ResultPage]:
        return self._rerun(page=page)

    def set_per_page(self, per_page: int) -> Optional[ResultPage]:
        return self._rerun(per_page=per_page, page=1)

    def apply_preset(self, name: str) -> Optional[ResultPage]:
        """
        Apply a named preset on top of the current thresholds.

        Raises:
            KeyError: unknown preset name
        """
        preset = PRESETS[name]
        criteria = preset.apply(self._state.criteria)
        return self._rerun(criteria=criteria, sort_by=preset.sort_by, page=1)

    def reset(self) -> Optional[ResultPage]:
        """Restore default thresholds, weights, sort order and page size."""
        return self._rerun(
            criteria=FilterCriteria.with_defaults(),
            weights=Weights(),
            sort_by="score",
            per_page=self.default_per_page,
            page=1,
        )

    def _favorites(self) -> list[str]:
        stored = self.storage.load(FAVORITES_KEY)
        if not isinstance(stored, list):
            return []
        return [str(key) for key in stored]

    @property
    def favorites(self) -> set[str]:
        return set(self._favorites())

    def is_favorite(self, seed: Seed) -> bool:
        return seed.favorite_key in self._favorites()

    def toggle_favorite(self, seed: Seed) -> bool:
        """Flip favorite membership. Returns True if the seed is now a favorite."""
        favorites = self._favorites()
        key = seed.favorite_key
        if key in favorites:
            favorites.remove(key)
            is_favorite = False
        else:
            favorites.append(key)
            is_favorite = True
        self.storage.save(FAVORITES_KEY, favorites)
        return is_favorite

    def add_custom_seed(self, form: CustomSeedForm) -> Seed:
        """
        Add a user-submitted seed and re-run from page 1.

        Raises:
            MalformedUserSubmission: the form could not be parsed; nothing is added
        """
        seed = build_custom_seed(form)
        with self._lock:
            self._seeds = [*self._seeds, seed]
            self._user_seeds = [*self._user_seeds, seed]
        self._save_user_seeds()
        self._rerun(page=1)
        return seed

    def export_dataset(self) -> bytes:
        """The full working dataset as pretty-printed JSON."""
        return export_records(self._seeds)

    def import_dataset(self, payload: Union[bytes, str]) -> Optional[ResultPage]:
        """
        Replace the working dataset wholesale.

        Only entries carrying the user-added marker become the user subset.

        Raises:
            MalformedImport: the payload was rejected; the dataset is unchanged
        """
        seeds = parse_records(payload)
        with self._lock:
            self._seeds = seeds
            self._user_seeds = user_subset(seeds)
        self._save_user_seeds()
        logger.info(f"Imported {len(seeds)} seeds ({len(self._user_seeds)} user-added)")
        return self._rerun(page=1)
