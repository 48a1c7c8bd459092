"""Pytest configuration and shared fixtures."""

import logging

import pytest

from app_config import SolverConfig, reset_config
from rebalance_trigger import RebalanceFactorSolver
from rebalance_trigger.logger import StructuredFormatter


@pytest.fixture(autouse=True)
def clean_config():
    """Ensure no test sees configuration loaded by another."""
    reset_config()
    yield
    reset_config()


@pytest.fixture
def restore_root_logger():
    """Remove root logger handlers installed by configure_root_logger."""
    root = logging.getLogger()
    level = root.level
    yield root
    for handler in list(root.handlers):
        if isinstance(handler.formatter, StructuredFormatter):
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)


@pytest.fixture
def solver() -> RebalanceFactorSolver:
    """Solver with default limits, independent of any loaded config."""
    return RebalanceFactorSolver(config=SolverConfig())


@pytest.fixture
def three_asset_portfolio():
    """Portfolio sitting exactly on its targets."""
    return {
        "values": [1000.0, 600.0, 400.0],
        "targets": [0.5, 0.3, 0.2],
        "threshold": 0.005,
    }


@pytest.fixture
def write_config(tmp_path):
    """Write YAML text to a temporary config file and return its path."""
    def _write(text: str):
        path = tmp_path / "config.yaml"
        path.write_text(text)
        return path
    return _write
