"""Catalog acquisition, import/export and persisted user state."""

from .dataset import (
    EXPORT_FILE_NAME,
    merge,
    user_subset,
    parse_records,
    export_records,
    build_custom_seed,
)
from .defaults import DEFAULT_SEEDS
from .loader import CatalogLoad, fetch_source, load_catalog
from .storage import (
    FAVORITES_KEY,
    USER_SEEDS_KEY,
    StoragePort,
    MemoryStorage,
    JsonFileStorage,
)

__all__ = [
    "EXPORT_FILE_NAME",
    "merge",
    "user_subset",
    "parse_records",
    "export_records",
    "build_custom_seed",
    "DEFAULT_SEEDS",
    "CatalogLoad",
    "fetch_source",
    "load_catalog",
    "FAVORITES_KEY",
    "USER_SEEDS_KEY",
    "StoragePort",
    "MemoryStorage",
    "JsonFileStorage",
]
