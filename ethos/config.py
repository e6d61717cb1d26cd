"""Configuration settings for the ethical alignment scorer."""

from pathlib import Path
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Paths
    base_dir: Path = Path(__file__).parent.parent
    data_dir: Path = base_dir / "data"
    catalog_path: Path = data_dir / "sample_catalog.json"

    # Scoring
    clamp_inputs: bool = True  # clamp confidence/weight to [0, 1] before scoring

    # Alternatives
    alternatives_threshold: float = -0.2
    max_alternatives: int = 5

    # Explanations
    top_tags_limit: int = 3
    max_sources: int = 5

    # Search
    search_limit: int = 20

    class Config:
        env_prefix = "ETHOS_"
        env_file = ".env"
        env_file_encoding = "utf-8"


settings = Settings()
