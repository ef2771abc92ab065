"""
Configuration for the co-authorship network builder.
"""

import os
from dataclasses import dataclass
from typing import Optional

DEFAULT_TOP_N = 10


def _env_int(name: str) -> Optional[int]:
    value = os.getenv(name)
    if value is None or not value.strip():
        return None
    return int(value)


@dataclass
class NetworkConfig:
    """Bounds and classification settings for one build."""

    top_n: int = DEFAULT_TOP_N
    max_records: Optional[int] = None  # None means unbounded
    max_authors_per_record: Optional[int] = None

    def __post_init__(self) -> None:
        if self.top_n < 0:
            raise ValueError(f"top_n must be non-negative, got {self.top_n}")
        for name in ("max_records", "max_authors_per_record"):
            value = getattr(self, name)
            if value is not None and value < 1:
                raise ValueError(f"{name} must be positive, got {value}")

    @classmethod
    def from_env(cls) -> "NetworkConfig":
        """Load configuration from environment variables"""
        config = cls()
        top_n = _env_int("COAUTHOR_TOP_N")
        if top_n is not None:
            config.top_n = top_n
        config.max_records = _env_int("COAUTHOR_MAX_RECORDS")
        config.max_authors_per_record = _env_int("COAUTHOR_MAX_AUTHORS")
        config.__post_init__()
        return config
