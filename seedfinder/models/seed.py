"""
Seed models - catalog entries and the structures found around their spawn.
"""
from typing import Any, Literal, Optional, get_args

from pydantic import BaseModel, ConfigDict, Field, field_validator


FeatureKind = Literal[
    "village",
    "stronghold",
    "ancient_city",
    "ocean_monument",
    "trial_chambers",
    "mansion",
    "mushroom_island",
]

FEATURE_KINDS: tuple[str, ...] = get_args(FeatureKind)

Edition = Literal["Java", "Bedrock"]


def _none_as_empty(v: Any) -> Any:
    """Treat an explicit null as an empty sequence."""
    return [] if v is None else v


class Occurrence(BaseModel):
    """One concrete instance of a feature kind."""
    distance: Optional[float] = Field(
        default=None,
        ge=0,
        description="Meters from spawn; missing means effectively infinite",
    )
    x: Optional[int] = None
    z: Optional[int] = None


class SpawnInfo(BaseModel):
    """Spawn point and the biomes around it."""
    biomes: list[str] = Field(default_factory=list)
    x: int = 0
    z: int = 0

    @field_validator("biomes", mode="before")
    @classmethod
    def parse_biomes(cls, v: Any) -> Any:
        return _none_as_empty(v)


class Features(BaseModel):
    """Occurrences per feature kind. An empty list means the feature is absent."""
    model_config = ConfigDict(extra="forbid")

    village: list[Occurrence] = Field(default_factory=list)
    stronghold: list[Occurrence] = Field(default_factory=list)
    ancient_city: list[Occurrence] = Field(default_factory=list)
    ocean_monument: list[Occurrence] = Field(default_factory=list)
    trial_chambers: list[Occurrence] = Field(default_factory=list)
    mansion: list[Occurrence] = Field(default_factory=list)
    mushroom_island: list[Occurrence] = Field(default_factory=list)

    @field_validator(*FEATURE_KINDS, mode="before")
    @classmethod
    def parse_occurrences(cls, v: Any) -> Any:
        return _none_as_empty(v)

    def occurrences(self, kind: str) -> list[Occurrence]:
        """Get the occurrences for a feature kind by name."""
        if kind not in FEATURE_KINDS:
            raise KeyError(kind)
        return getattr(self, kind)


class Seed(BaseModel):
    """
    A catalog entry.

    The seed value is kept as text so negative values and values beyond the
    32-bit range survive unchanged. Keys outside the schema, such as a
    stored `_score` or a `source` note, are kept and written back on export.
    """
    model_config = ConfigDict(populate_by_name=True, extra="allow")

    seed: str
    edition: Edition
    version: str
    tags: list[str] = Field(default_factory=list)
    rarity: Optional[int] = Field(default=None, description="0-100, clamped only when scored")
    spawn: SpawnInfo = Field(default_factory=SpawnInfo)
    features: Features = Field(default_factory=Features)
    description: str = ""
    user_added: bool = Field(default=False, alias="_user")

    @field_validator("seed", mode="before")
    @classmethod
    def parse_seed(cls, v: Any) -> str:
        """
        Accept integer or text seeds, store the exact decimal text.

        Surrounding whitespace on text seeds is trimmed; the digits and sign
        are kept as written.
        """
        if isinstance(v, bool) or isinstance(v, float):
            raise ValueError("seed must be an integer or text")
        if isinstance(v, int):
            return str(v)
        if isinstance(v, str):
            v = v.strip()
            if not v:
                raise ValueError("seed must not be empty")
            return v
        raise ValueError("seed must be an integer or text")

    @field_validator("tags", mode="before")
    @classmethod
    def parse_tags(cls, v: Any) -> Any:
        return _none_as_empty(v)

    @field_validator("spawn", "features", mode="before")
    @classmethod
    def parse_missing_section(cls, v: Any) -> Any:
        return {} if v is None else v

    @property
    def favorite_key(self) -> str:
        """Composite key used for favorite membership."""
        return f"{self.seed}|{self.version}|{self.edition}"

    def to_record(self) -> dict[str, Any]:
        """Canonical textual form used for persistence and export."""
        record = self.model_dump(mode="json", by_alias=True, exclude_none=True)
        if not self.user_added:
            record.pop("_user", None)
        return record
