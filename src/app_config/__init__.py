"""Application configuration management for the rebalance trigger calculator."""

from .models import (
    AppConfig,
    SolverConfig,
    PortfolioConfig,
    LoggingConfig,
)
from .loader import load_config, get_config, reset_config

__all__ = [
    "AppConfig",
    "SolverConfig",
    "PortfolioConfig",
    "LoggingConfig",
    "load_config",
    "get_config",
    "reset_config",
]
