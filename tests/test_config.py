"""Tests for configuration classes."""

import os
from unittest.mock import patch

import pytest


class TestLoggingConfig:
    """Tests for LoggingConfig class."""

    def test_default_level(self):
        with patch.dict(os.environ, {}, clear=True):
            from config import LoggingConfig

            assert LoggingConfig().level == "WARNING"

    def test_level_from_env(self):
        with patch.dict(os.environ, {"LOG_LEVEL": "debug"}):
            from config import LoggingConfig

            assert LoggingConfig().level == "DEBUG"


class TestSimulationConfig:
    """Tests for SimulationConfig class."""

    def test_defaults(self):
        with patch.dict(os.environ, {}, clear=True):
            from config import SimulationConfig

            config = SimulationConfig()

            assert config.seed is None
            assert config.output == "text"

    def test_seed_from_env(self):
        with patch.dict(os.environ, {"BLACKJACK_SEED": " 1234 "}):
            from config import SimulationConfig

            assert SimulationConfig().seed == 1234

    def test_invalid_seed_raises(self):
        with patch.dict(os.environ, {"BLACKJACK_SEED": "abc"}):
            from config import SimulationConfig

            with pytest.raises(ValueError):
                SimulationConfig()

    @pytest.mark.parametrize(
        "raw, expected",
        [("json", "json"), ("JSON", "json"), ("text", "text"), ("yaml", "text")],
    )
    def test_output_from_env(self, raw, expected):
        with patch.dict(os.environ, {"BLACKJACK_OUTPUT": raw}):
            from config import SimulationConfig

            assert SimulationConfig().output == expected

    def test_config_is_frozen(self):
        from dataclasses import FrozenInstanceError

        from config import SimulationConfig

        with pytest.raises(FrozenInstanceError):
            SimulationConfig().seed = 3  # type: ignore[misc]


class TestAppConfig:
    """Tests for AppConfig class."""

    def test_aggregates_sections(self):
        with patch.dict(os.environ, {"BLACKJACK_SEED": "7", "LOG_LEVEL": "INFO"}):
            from config import AppConfig

            config = AppConfig()

            assert config.simulation.seed == 7
            assert config.logging.level == "INFO"

    def test_global_instance_exists(self):
        from config import AppConfig, config

        assert isinstance(config, AppConfig)
