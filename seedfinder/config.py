"""
Configuration and environment handling for Seed Finder.
"""
import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field

# Load environment variables
load_dotenv()


class CatalogConfig(BaseModel):
    """Where the base catalog comes from and where user state is kept."""
    source: str = Field(
        default_factory=lambda: os.getenv("SEEDFINDER_DATASET_SOURCE", "seeds.json"),
        description="URL or local path of the base seed catalog",
    )
    timeout: float = Field(
        default_factory=lambda: float(os.getenv("SEEDFINDER_FETCH_TIMEOUT", "10")),
        description="Seconds to wait for a remote catalog",
    )
    storage_dir: Path = Field(
        default_factory=lambda: Path(os.getenv("SEEDFINDER_STORAGE_DIR", ".seedfinder")),
        description="Directory for persisted user seeds and favorites",
    )


class PipelineConfig(BaseModel):
    """Result paging configuration."""
    per_page: int = Field(default=24, description="Seeds per result page")
    per_page_options: list[int] = Field(default_factory=lambda: [12, 24, 48, 96])


class UIConfig(BaseModel):
    """UI configuration."""
    page_title: str = Field(default="Minecraft Seed Finder")
    page_icon: str = Field(default="🌱")
    theme_primary_color: str = Field(default="#3FA34D")  # grass green
    theme_accent_color: str = Field(default="#F2C14E")   # gold ore


class Config(BaseModel):
    """Main configuration."""
    catalog: CatalogConfig = Field(default_factory=CatalogConfig)
    pipeline: PipelineConfig = Field(default_factory=PipelineConfig)
    ui: UIConfig = Field(default_factory=UIConfig)

    log_level: str = Field(default_factory=lambda: os.getenv("SEEDFINDER_LOG_LEVEL", "INFO"))

    # Feature flags
    enable_debug_panel: bool = Field(default=True)


# Singleton config instance
_config: Optional[Config] = None


def get_config() -> Config:
    """Get or create the singleton config instance."""
    global _config
    if _config is None:
        _config = Config()
    return _config
