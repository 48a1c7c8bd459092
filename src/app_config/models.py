"""Pydantic models for application configuration with validation."""

import math
from typing import List, Literal, Optional
from pydantic import BaseModel, Field, field_validator, model_validator


class SolverConfig(BaseModel):
    """Rebalance factor solver limits."""

    max_assets: int = Field(
        default=10,
        ge=1,
        le=100,
        description="Maximum number of assets accepted in a portfolio snapshot"
    )
    ratio_sum_tolerance: float = Field(
        default=1e-6,
        gt=0.0,
        le=0.1,
        description="Warn if target allocations differ from 100% by more than this"
    )


class PortfolioConfig(BaseModel):
    """Portfolio snapshot and rebalancing band evaluated by the driver."""

    values: List[float] = Field(
        default_factory=lambda: [1000.0, 600.0, 400.0],
        min_length=1,
        description="Current value held in each asset, in a single currency"
    )
    targets: List[float] = Field(
        default_factory=lambda: [0.5, 0.3, 0.2],
        min_length=1,
        description="Target allocation ratio for each asset (fractions of 1.0)"
    )
    symbols: Optional[List[str]] = Field(
        default=None,
        description="Optional display name for each asset"
    )
    rebalance_threshold: float = Field(
        default=0.005,
        ge=0.0,
        lt=1.0,
        description="Allowed deviation from target ratio before rebalancing triggers"
    )

    @field_validator("values")
    @classmethod
    def validate_values(cls, v: List[float]) -> List[float]:
        """Validate every asset value is a positive finite number."""
        for i, value in enumerate(v):
            if value <= 0 or not math.isfinite(value):
                raise ValueError(f"Asset value at index {i} must be positive and finite, got {value}")
        return v

    @field_validator("targets")
    @classmethod
    def validate_targets(cls, v: List[float]) -> List[float]:
        """Validate every target ratio lies within [0, 1]."""
        for i, target in enumerate(v):
            if not 0.0 <= target <= 1.0:
                raise ValueError(f"Target ratio at index {i} must be within [0, 1], got {target}")
        return v

    @model_validator(mode="after")
    def validate_lengths(self) -> "PortfolioConfig":
        """Validate values, targets and symbols describe the same assets."""
        if len(self.values) != len(self.targets):
            raise ValueError(
                f"values has {len(self.values)} entries but targets has {len(self.targets)}"
            )
        if self.symbols is not None and len(self.symbols) != len(self.values):
            raise ValueError(
                f"symbols has {len(self.symbols)} entries but values has {len(self.values)}"
            )
        return self


class LoggingConfig(BaseModel):
    """Logging output settings."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO",
        description="Root log level"
    )
    format: Literal["text", "json"] = Field(
        default="text",
        description="text=human readable lines, json=one JSON object per line"
    )
    file_path: Optional[str] = Field(
        default=None,
        description="Also write logs to this file, rotated daily"
    )

    @field_validator("level", mode="before")
    @classmethod
    def normalize_level(cls, v):
        """Accept lowercase level names."""
        return v.upper() if isinstance(v, str) else v


class AppConfig(BaseModel):
    """Root application configuration."""

    solver: SolverConfig = Field(
        default_factory=SolverConfig,
        description="Solver limits"
    )
    portfolio: PortfolioConfig = Field(
        default_factory=PortfolioConfig,
        description="Portfolio evaluated by the driver"
    )
    logging: LoggingConfig = Field(
        default_factory=LoggingConfig,
        description="Logging settings"
    )

    @model_validator(mode="after")
    def validate_portfolio_size(self) -> "AppConfig":
        """Validate the configured portfolio fits within the solver limit."""
        if len(self.portfolio.values) > self.solver.max_assets:
            raise ValueError(
                f"Portfolio has {len(self.portfolio.values)} assets, "
                f"more than max_assets={self.solver.max_assets}"
            )
        return self
