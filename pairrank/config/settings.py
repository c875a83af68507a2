"""
Global configuration settings for PairRank.

Loads configuration from environment variables (and a `.env` file when
present) and provides typed access to all system settings.
"""

import os
from typing import Optional, Dict, Any
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()


@dataclass
class Settings:
    """Global settings for PairRank."""

    # Randomness (None = seeded from the OS)
    seed: Optional[int] = None

    # Roster and result files used by the storage collaborators
    roster_path: str = "players.csv"
    results_path: str = "ratings.csv"

    # Scheduling
    target_link_count: Optional[int] = None

    # Logging
    log_level: str = "INFO"
    log_format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    log_file: Optional[str] = None
    log_components: Optional[str] = None  # e.g. "scheduling=DEBUG,ranking=WARNING"

    def __post_init__(self):
        """Load settings from environment variables."""
        self.log_level = os.getenv("LOG_LEVEL", self.log_level)
        self.log_file = os.getenv("PAIRRANK_LOG_FILE", self.log_file)
        self.log_components = os.getenv("PAIRRANK_LOG_COMPONENTS", self.log_components)
        self.roster_path = os.getenv("PAIRRANK_ROSTER_PATH", self.roster_path)
        self.results_path = os.getenv("PAIRRANK_RESULTS_PATH", self.results_path)

        # Load numeric settings if provided
        if os.getenv("PAIRRANK_SEED"):
            self.seed = int(os.getenv("PAIRRANK_SEED"))
        if os.getenv("PAIRRANK_TARGET_LINK_COUNT"):
            self.target_link_count = int(os.getenv("PAIRRANK_TARGET_LINK_COUNT"))

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "seed": self.seed,
            "roster_path": self.roster_path,
            "results_path": self.results_path,
            "target_link_count": self.target_link_count,
            "log_level": self.log_level,
            "log_file": self.log_file,
            "log_components": self.log_components,
        }


# Global settings instance
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get or create global settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def configure(**kwargs) -> Settings:
    """
    Configure global settings.

    Unknown keys are ignored.

    Args:
        **kwargs: Settings fields to override

    Returns:
        Configured Settings instance
    """
    settings = get_settings()

    for key, value in kwargs.items():
        if hasattr(settings, key):
            setattr(settings, key, value)

    return settings


def reset_settings() -> None:
    """Discard the global settings so the next access re-reads the environment."""
    global _settings
    _settings = None
