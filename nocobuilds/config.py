"""Configuration management for nocobuilds."""

from __future__ import annotations

import os
from dataclasses import dataclass

from nocobuilds.exceptions import ConfigurationError
from nocobuilds.models.criteria import IncentiveFilterCriteria


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw == "":
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise ConfigurationError(f"{name} must be an integer, got {raw!r}") from exc


@dataclass
class DirectoryConfig:
    """Main configuration for the builder directory."""

    log_level: str = "INFO"
    log_format: str = "standard"
    expiring_soon_days: int = 30
    seed: int | None = None
    locale: str = "en_US"
    sample_builders: int = 25

    def __post_init__(self) -> None:
        if self.expiring_soon_days < 0:
            raise ConfigurationError("expiring_soon_days must be non-negative")
        if self.sample_builders < 0:
            raise ConfigurationError("sample_builders must be non-negative")

    def incentive_criteria(self) -> IncentiveFilterCriteria:
        """Default incentive criteria using the configured expiring-soon window."""
        return IncentiveFilterCriteria(expiring_soon_days=self.expiring_soon_days)

    @classmethod
    def from_env(cls) -> "DirectoryConfig":
        """Create config from environment variables."""
        seed_raw = os.getenv("NOCO_SEED")
        return cls(
            log_level=os.getenv("NOCO_LOG_LEVEL", "INFO"),
            log_format=os.getenv("NOCO_LOG_FORMAT", "standard"),
            expiring_soon_days=_int_env("NOCO_EXPIRING_SOON_DAYS", 30),
            seed=_int_env("NOCO_SEED", 0) if seed_raw else None,
            locale=os.getenv("NOCO_LOCALE", "en_US"),
            sample_builders=_int_env("NOCO_SAMPLE_BUILDERS", 25),
        )
