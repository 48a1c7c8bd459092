"""Unit tests for configuration management."""

import logging

import pytest
import yaml

from app_config import AppConfig, PortfolioConfig, LoggingConfig, load_config, get_config


class TestDefaultConfig:
    """Test suite for default configuration."""

    def test_defaults(self) -> None:
        config = AppConfig()
        assert config.solver.max_assets == 10
        assert config.portfolio.values == [1000.0, 600.0, 400.0]
        assert config.portfolio.targets == [0.5, 0.3, 0.2]
        assert config.portfolio.rebalance_threshold == 0.005
        assert config.logging.level == "INFO"
        assert config.logging.format == "text"

    def test_lowercase_log_level_accepted(self) -> None:
        assert LoggingConfig(level="debug").level == "DEBUG"


class TestPortfolioConfig:
    """Boundary validation of the configured portfolio."""

    def test_values_and_targets_must_match(self) -> None:
        with pytest.raises(ValueError, match="targets has 2"):
            PortfolioConfig(values=[1.0, 2.0, 3.0], targets=[0.5, 0.5])

    def test_symbols_must_match(self) -> None:
        with pytest.raises(ValueError, match="symbols has 1"):
            PortfolioConfig(values=[1.0, 2.0], targets=[0.5, 0.5], symbols=["BTC"])

    @pytest.mark.parametrize("values", [[0.0, 1.0], [-5.0, 1.0], [float("nan"), 1.0]])
    def test_values_must_be_positive(self, values) -> None:
        with pytest.raises(ValueError, match="index 0"):
            PortfolioConfig(values=values, targets=[0.5, 0.5])

    def test_targets_within_unit_interval(self) -> None:
        with pytest.raises(ValueError, match="within \\[0, 1\\]"):
            PortfolioConfig(values=[1.0, 2.0], targets=[1.5, -0.5])

    def test_threshold_below_one(self) -> None:
        with pytest.raises(ValueError):
            PortfolioConfig(rebalance_threshold=1.0)

    def test_portfolio_larger_than_solver_limit(self) -> None:
        with pytest.raises(ValueError, match="max_assets=2"):
            AppConfig(solver={"max_assets": 2})


class TestConfigLoader:
    """Test suite for YAML loading and singleton access."""

    def test_get_config_before_load(self) -> None:
        with pytest.raises(RuntimeError):
            get_config()

    def test_load_full_file(self, write_config) -> None:
        path = write_config(
            "solver:\n"
            "  max_assets: 4\n"
            "portfolio:\n"
            "  symbols: [BTC, ETH]\n"
            "  values: [900, 1100]\n"
            "  targets: [0.5, 0.5]\n"
            "  rebalance_threshold: 0.02\n"
            "logging:\n"
            "  level: warning\n"
            "  format: json\n"
        )

        config = load_config(path)

        assert config is get_config()
        assert config.solver.max_assets == 4
        assert config.portfolio.symbols == ["BTC", "ETH"]
        assert config.portfolio.values == [900.0, 1100.0]
        assert config.portfolio.rebalance_threshold == 0.02
        assert config.logging.level == "WARNING"
        assert config.logging.format == "json"

    def test_loaded_sections_logged(self, write_config, caplog) -> None:
        with caplog.at_level(logging.INFO, logger="app_config.loader"):
            load_config(write_config("solver:\n  max_assets: 4\n"))

        assert "solver: {'max_assets': 4" in caplog.text
        assert "portfolio: {'values': [1000.0, 600.0, 400.0]" in caplog.text
        assert "logging: {'level': 'INFO'" in caplog.text

    def test_empty_file_uses_defaults(self, write_config) -> None:
        config = load_config(write_config(""))
        assert config == AppConfig()

    def test_missing_file(self, tmp_path) -> None:
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "missing.yaml")

    def test_invalid_values_wrapped(self, write_config) -> None:
        path = write_config("portfolio:\n  values: [1, 2]\n  targets: [0.5]\n")
        with pytest.raises(ValueError, match="Invalid configuration"):
            load_config(path)

    def test_non_mapping_rejected(self, write_config) -> None:
        with pytest.raises(ValueError, match="mapping"):
            load_config(write_config("- 1\n- 2\n"))

    def test_malformed_yaml(self, write_config) -> None:
        with pytest.raises(yaml.YAMLError):
            load_config(write_config("portfolio: [unclosed\n"))
