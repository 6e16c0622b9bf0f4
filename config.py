"""Configuration management with environment variable support."""

import logging
import os
from dataclasses import dataclass, field


def _parse_seed() -> int | None:
    """Parse BLACKJACK_SEED; unset or blank means an unseeded shuffle."""
    seed = os.getenv("BLACKJACK_SEED", "").strip()
    return int(seed) if seed else None


@dataclass(frozen=True)
class StorageConfig:
    """Locations of the account record and the deck configuration."""

    account_path: str = field(
        default_factory=lambda: os.getenv("BLACKJACK_ACCOUNT_PATH", "user.json")
    )
    deck_path: str = field(
        default_factory=lambda: os.getenv("BLACKJACK_DECK_PATH", "deck.json")
    )


@dataclass(frozen=True)
class GameConfig:
    """Game configuration. Dealer policy is fixed and not configurable."""

    starting_balance: int = field(
        default_factory=lambda: int(os.getenv("BLACKJACK_STARTING_BALANCE", "1000"))
    )
    seed: int | None = field(default_factory=_parse_seed)


@dataclass(frozen=True)
class LoggingConfig:
    """Logging configuration. Log records go to stderr."""

    level: str = field(
        default_factory=lambda: os.getenv("BLACKJACK_LOG_LEVEL", "WARNING").upper()
    )
    format: str = "%(asctime)s | %(levelname)-8s | %(name)-22s | %(message)s"
    datefmt: str = "%H:%M:%S"

    def configure(self) -> None:
        """Install the root handler with this level and format."""
        logging.basicConfig(
            level=getattr(logging, self.level, logging.WARNING),
            format=self.format,
            datefmt=self.datefmt,
        )


@dataclass(frozen=True)
class AppConfig:
    """Application configuration."""

    storage: StorageConfig = field(default_factory=StorageConfig)
    game: GameConfig = field(default_factory=GameConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


# Global configuration instance
config = AppConfig()
