"""Configuration management with environment variable support."""

import os
from dataclasses import dataclass, field
from typing import Literal

OutputFormat = Literal["text", "json"]


def _parse_seed() -> int | None:
    """Parse BLACKJACK_SEED environment variable."""
    raw = os.getenv("BLACKJACK_SEED", "").strip()
    return int(raw) if raw else None


def _parse_output() -> OutputFormat:
    """Parse BLACKJACK_OUTPUT environment variable."""
    output = os.getenv("BLACKJACK_OUTPUT", "text").strip().lower()
    return "json" if output == "json" else "text"


@dataclass(frozen=True)
class LoggingConfig:
    """Logging configuration."""

    level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "WARNING").upper())


@dataclass(frozen=True)
class SimulationConfig:
    """Simulation run configuration. Table rules are fixed and not listed here."""

    seed: int | None = field(default_factory=_parse_seed)
    output: OutputFormat = field(default_factory=_parse_output)


@dataclass(frozen=True)
class AppConfig:
    """Application configuration."""

    logging: LoggingConfig = field(default_factory=LoggingConfig)
    simulation: SimulationConfig = field(default_factory=SimulationConfig)


# Global configuration instance
config = AppConfig()
