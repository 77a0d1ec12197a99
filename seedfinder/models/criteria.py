"""
Query models - filter criteria, score weights, presets and pipeline state.
"""
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from .seed import FeatureKind


SortKey = Literal["score", "rarity", "stronghold", "village"]

# Thresholds restored by "reset"; 0 or absent means unconstrained
DEFAULT_MAX_DISTANCE: dict[str, float] = {
    "village": 800,
    "stronghold": 1600,
    "ancient_city": 2500,
    "ocean_monument": 2500,
    "trial_chambers": 2500,
    "mansion": 6000,
}


class FilterCriteria(BaseModel):
    """
    Transient query object. Empty lists mean "no constraint";
    biome and tag lists are subset requirements.
    """
    model_config = ConfigDict(frozen=True)

    editions: list[str] = Field(default_factory=list)
    versions: list[str] = Field(default_factory=list)
    biomes: list[str] = Field(default_factory=list)
    tags: list[str] = Field(default_factory=list)
    max_distance: dict[FeatureKind, Optional[float]] = Field(
        default_factory=dict,
        description="Per-kind maximum distance; 0 or missing disables the constraint",
    )

    @classmethod
    def with_defaults(cls) -> "FilterCriteria":
        """Criteria matching the reset state of the filter panel."""
        return cls(max_distance=dict(DEFAULT_MAX_DISTANCE))

    def threshold(self, kind: str) -> Optional[float]:
        return self.max_distance.get(kind)


class Weights(BaseModel):
    """Score coefficients. They need not sum to 1."""
    model_config = ConfigDict(frozen=True)

    rarity: float = Field(default=0.6, ge=0)
    struct: float = Field(default=0.3, ge=0)
    biome: float = Field(default=0.1, ge=0)

    @property
    def total(self) -> float:
        """Upper bound of the composite score."""
        return self.rarity + self.struct + self.biome


class QueryState(BaseModel):
    """
    Immutable snapshot of everything the pipeline needs besides the dataset.
    Every change produces a new state with a higher generation.
    """
    model_config = ConfigDict(frozen=True)

    criteria: FilterCriteria = Field(default_factory=FilterCriteria)
    weights: Weights = Field(default_factory=Weights)
    sort_by: SortKey = "score"
    page: int = Field(default=1, description="1-indexed; pages outside the range render empty")
    per_page: int = Field(default=24, ge=1)
    generation: int = 0

    def evolve(self, **changes) -> "QueryState":
        """Return a validated copy with changes applied and the generation bumped."""
        values = dict(self)
        values.update(changes)
        values["generation"] = self.generation + 1
        return QueryState(**values)


class Preset(BaseModel):
    """A named bundle of biome/tag requirements and near-structure limits."""
    name: str
    biomes: list[str]
    tags: list[str]
    max_village: float
    max_stronghold: float
    sort_by: SortKey = "score"

    def apply(self, criteria: FilterCriteria) -> FilterCriteria:
        """
        Build criteria for this preset. Editions and versions are cleared,
        thresholds other than village and stronghold are kept.
        """
        max_distance = dict(criteria.max_distance)
        max_distance["village"] = self.max_village
        max_distance["stronghold"] = self.max_stronghold
        return FilterCriteria(
            biomes=list(self.biomes),
            tags=list(self.tags),
            max_distance=max_distance,
        )


PRESETS: dict[str, Preset] = {
    "speedrun": Preset(
        name="speedrun",
        biomes=["Plains"],
        tags=["Speedrun"],
        max_village=600,
        max_stronghold=1600,
        sort_by="stronghold",
    ),
    "hardcore": Preset(
        name="hardcore",
        biomes=["Taiga", "Snowy Plains"],
        tags=["Hardcore", "Challenge"],
        max_village=1200,
        max_stronghold=2500,
    ),
    "builder": Preset(
        name="builder",
        biomes=["Plains", "Meadow", "Cherry Grove"],
        tags=["Builder", "Scenic"],
        max_village=1000,
        max_stronghold=2500,
    ),
    "scenic": Preset(
        name="scenic",
        biomes=["Cherry Grove", "Meadow", "Jungle", "Dark Forest"],
        tags=["Scenic", "Explorer"],
        max_village=2000,
        max_stronghold=3000,
    ),
}


class CustomSeedForm(BaseModel):
    """Raw fields of the "add your own seed" form, before parsing."""
    seed: str = ""
    edition: str = "Java"
    version: str = ""
    biomes: str = Field(default="", description="Comma-separated biome names")
    tags: str = Field(default="", description="Comma-separated tags")
    description: str = ""
    features: str = Field(default="", description="JSON object of feature occurrences")
