from dotenv import load_dotenv
from dataclasses import dataclass, fields
from typing import Optional
from pathlib import Path
import json
import math
import os

from blog_seo.constants import DEFAULT_CATEGORY_WEIGHTS, DEFAULT_WORDS_PER_MINUTE

load_dotenv()  # Loads variables from .env file


@dataclass
class Config:
    """Runtime configuration for the blog SEO scorer."""
    log_level: str = "INFO"
    log_file: Optional[str] = None
    words_per_minute: int = DEFAULT_WORDS_PER_MINUTE

    @classmethod
    def from_env(cls) -> "Config":
        """Load configuration from environment variables.

        Returns:
            Config: Configuration instance with values from environment
        """
        words_per_minute = DEFAULT_WORDS_PER_MINUTE
        raw_wpm = os.getenv("WORDS_PER_MINUTE")
        if raw_wpm:
            try:
                words_per_minute = max(1, int(raw_wpm))
            except ValueError:
                pass  # Keep default if conversion fails

        return cls(
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            log_file=os.getenv("LOG_FILE") or None,
            words_per_minute=words_per_minute,
        )


@dataclass(frozen=True)
class ScoringWeights:
    """Weight of each category in the overall SEO score.

    The defaults sum to 100. Other sums are scaled back to 0-100 by the
    score generator. Instances are immutable and safe to share between
    generators.
    """

    keyword: float = DEFAULT_CATEGORY_WEIGHTS["keyword"]
    content: float = DEFAULT_CATEGORY_WEIGHTS["content"]
    meta: float = DEFAULT_CATEGORY_WEIGHTS["meta"]
    structure: float = DEFAULT_CATEGORY_WEIGHTS["structure"]
    links: float = DEFAULT_CATEGORY_WEIGHTS["links"]
    images: float = DEFAULT_CATEGORY_WEIGHTS["images"]
    readability: float = DEFAULT_CATEGORY_WEIGHTS["readability"]

    def __post_init__(self):
        for f in fields(self):
            value = getattr(self, f.name)
            if not math.isfinite(value):
                raise ValueError(f"Weight for '{f.name}' must be a finite number")
            if value < 0:
                raise ValueError(f"Weight for '{f.name}' must not be negative")

    @property
    def total(self) -> float:
        """Sum of all category weights."""
        return sum(self.to_dict().values())

    def weight_for(self, category: str) -> float:
        """Get the weight of a single category."""
        return getattr(self, category)

    @classmethod
    def from_env(cls) -> "ScoringWeights":
        """Load weights from environment variables.

        Environment variables should be prefixed with SEO_WEIGHT_
        e.g., SEO_WEIGHT_KEYWORD=30

        Returns:
            ScoringWeights with values from environment
        """
        prefix = "SEO_WEIGHT_"
        overrides = {}

        for f in fields(cls):
            env_value = os.getenv(f"{prefix}{f.name.upper()}")
            if env_value is None:
                continue
            try:
                value = float(env_value)
            except ValueError:
                continue  # Keep default if conversion fails
            if math.isfinite(value) and value >= 0:
                overrides[f.name] = value

        return cls(**overrides)

    @classmethod
    def from_file(cls, path: str) -> "ScoringWeights":
        """Load weights from a JSON configuration file.

        Args:
            path: Path to JSON configuration file

        Returns:
            ScoringWeights with values from file

        Raises:
            ValueError: If the file is not valid JSON, names an unknown
                category or has a weight that is not a non-negative number
        """
        file_path = Path(path)

        if not file_path.exists():
            return cls()

        with open(file_path, 'r') as f:
            config = json.load(f)

        weight_config = config.get('weights', config) if isinstance(config, dict) else config
        if not isinstance(weight_config, dict):
            raise ValueError("Weights file must contain a JSON object of category weights")

        known = {f.name for f in fields(cls)}
        unknown = sorted(set(weight_config) - known)
        if unknown:
            raise ValueError(f"Unknown scoring categories: {', '.join(unknown)}")

        weights = {}
        for name, value in weight_config.items():
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise ValueError(f"Weight for '{name}' must be a number, got {value!r}")
            weights[name] = float(value)

        return cls(**weights)

    def to_dict(self) -> dict:
        """Convert weights to dictionary.

        Returns:
            Dictionary of category name to weight
        """
        return {f.name: getattr(self, f.name) for f in fields(self)}

    def save_to_file(self, path: str) -> None:
        """Save current weights to a JSON file.

        Args:
            path: Path to save configuration
        """
        with open(path, 'w') as f:
            json.dump({'weights': self.to_dict()}, f, indent=2)


# Global default weights instance
default_weights = ScoringWeights()
