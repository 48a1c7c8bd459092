"""Closed-form solver for the price move that triggers a rebalance"""

from typing import List, Optional, Sequence
import logging
import math
import operator
from app_config import SolverConfig, get_config
from .models import FactorResult
from .exceptions import (
    InvalidIndexError,
    LengthMismatchError,
    PortfolioSizeError,
    NonPositiveTotalError,
    InvalidThresholdError,
    DegenerateBoundError,
    SingleAssetDegenerateError,
)

class RebalanceFactorSolver:
    """Calculate the price factors that push one asset across its rebalance band"""

    def __init__(self, logger: Optional[logging.Logger] = None, config: Optional[SolverConfig] = None):
        self.logger = logger or logging.getLogger(__name__)
        self.config = config or self._loaded_solver_config()

    def solve(self, values: Sequence[float], targets: Sequence[float], threshold: float,
              index: int, symbol: Optional[str] = None) -> FactorResult:
        """
        Solve for the multiplicative price change of asset `index` that moves its
        allocation ratio to target + threshold (increase) and target - threshold
        (decrease), with every other asset's value held fixed.

        Returns a FactorResult with null factors when the asset is already
        outside the band. Raises a RebalanceTriggerError subclass when the
        input makes the factors undefined.
        """
        index = self._validate_shape(values, targets, index)
        self._validate_threshold(threshold)

        value = values[index]
        target = targets[index]
        sum_others = self._validate_values(values, index)
        self._validate_target(target, index)
        self._validate_bounds(target, threshold, index)

        if sum_others <= 0:
            self.logger.error(f"No value held outside asset {index}")
            raise SingleAssetDegenerateError(
                f"Asset {index} holds the entire portfolio; scaling its price cannot change its ratio"
            )

        total = value + sum_others
        current_ratio = value / total

        if abs(current_ratio - target) > threshold:
            self.logger.debug(
                f"Asset {index} already outside band: current={current_ratio:.4%}, "
                f"target={target:.4%}, threshold={threshold:.4%}"
            )
            return FactorResult(
                index=index,
                symbol=symbol,
                current_ratio=current_ratio,
                target_ratio=target,
                threshold=threshold,
            )

        increase_factor = self._factor_for_ratio(target + threshold, value, sum_others)
        decrease_factor = self._factor_for_ratio(target - threshold, value, sum_others)

        self.logger.debug(
            f"Asset {index}: sum of others ${sum_others:,.2f}, "
            f"increase factor {increase_factor:.6f}, decrease factor {decrease_factor:.6f}"
        )

        return FactorResult(
            index=index,
            symbol=symbol,
            current_ratio=current_ratio,
            target_ratio=target,
            threshold=threshold,
            increase_factor=increase_factor,
            decrease_factor=decrease_factor,
            increase_percent=(increase_factor - 1) * 100,
            decrease_percent=(decrease_factor - 1) * 100,
        )

    def solve_all(self, values: Sequence[float], targets: Sequence[float], threshold: float,
                  symbols: Optional[Sequence[str]] = None) -> List[FactorResult]:
        """Solve for every asset in portfolio order"""
        if symbols is not None and len(symbols) != len(values):
            raise LengthMismatchError(
                f"Got {len(symbols)} symbols for {len(values)} assets"
            )

        total_target = math.fsum(targets)
        if abs(total_target - 1.0) > self.config.ratio_sum_tolerance:
            self.logger.warning(f"Target allocations sum to {total_target:.6f}, not 1.0")

        return [
            self.solve(values, targets, threshold, index, symbol=symbols[index] if symbols else None)
            for index in range(len(values))
        ]

    @staticmethod
    def _loaded_solver_config() -> SolverConfig:
        """Limits from the loaded application config, or defaults when none is loaded"""
        try:
            return get_config().solver
        except RuntimeError:
            return SolverConfig()

    @staticmethod
    def _factor_for_ratio(ratio: float, value: float, sum_others: float) -> float:
        """Exact solution of value*f / (sum_others + value*f) == ratio for f"""
        return (ratio * sum_others) / (value * (1 - ratio))

    def _validate_shape(self, values: Sequence[float], targets: Sequence[float], index: int) -> int:
        if len(values) != len(targets):
            self.logger.error(f"Length mismatch: {len(values)} values, {len(targets)} targets")
            raise LengthMismatchError(
                f"values has {len(values)} entries but targets has {len(targets)}"
            )

        if not 1 <= len(values) <= self.config.max_assets:
            self.logger.error(f"Portfolio size {len(values)} outside 1..{self.config.max_assets}")
            raise PortfolioSizeError(
                f"Portfolio must hold between 1 and {self.config.max_assets} assets, got {len(values)}"
            )

        try:
            position = None if isinstance(index, bool) else operator.index(index)
        except TypeError:
            position = None

        if position is None or not 0 <= position < len(values):
            self.logger.error(f"Invalid asset index {index!r} for {len(values)} assets")
            raise InvalidIndexError(
                f"Asset index {index!r} out of range for {len(values)} assets"
            )

        return position

    def _validate_threshold(self, threshold: float) -> None:
        if threshold < 0 or not math.isfinite(threshold):
            self.logger.error(f"Invalid rebalance threshold: {threshold}")
            raise InvalidThresholdError(
                f"Rebalance threshold must be a non-negative finite number, got {threshold}"
            )

    def _validate_values(self, values: Sequence[float], index: int) -> float:
        """Check asset values and return the sum of all assets other than `index`"""
        for i, value in enumerate(values):
            if not math.isfinite(value):
                self.logger.error(f"Invalid value for asset {i}: {value}")
                raise NonPositiveTotalError(f"Value for asset {i} is not finite: {value}")

        if values[index] <= 0:
            self.logger.error(f"Invalid value for asset {index}: {values[index]}")
            raise NonPositiveTotalError(
                f"Value for asset {index} must be positive, got {values[index]}"
            )

        try:
            sum_others = math.fsum(v for i, v in enumerate(values) if i != index)
        except OverflowError:
            sum_others = math.inf
        total = values[index] + sum_others
        if not math.isfinite(total):
            self.logger.error(f"Portfolio total overflows: {total}")
            raise NonPositiveTotalError("Portfolio total is too large to represent as a finite number")
        if total <= 0:
            self.logger.error(f"Portfolio total is not positive: {total}")
            raise NonPositiveTotalError(f"Portfolio total must be positive, got {total}")

        return sum_others

    def _validate_target(self, target: float, index: int) -> None:
        if not 0 <= target <= 1:
            self.logger.error(f"Invalid target ratio for asset {index}: {target}")
            raise DegenerateBoundError(
                f"Target ratio for asset {index} must be a finite number within [0, 1], got {target}"
            )

    def _validate_bounds(self, target: float, threshold: float, index: int) -> None:
        upper = target + threshold
        lower = target - threshold
        if upper >= 1:
            self.logger.error(f"Upper bound {upper} for asset {index} is not below 1")
            raise DegenerateBoundError(
                f"Threshold {threshold} is too wide for target {target} of asset {index}: "
                f"upper bound {upper} must be below 1"
            )
        if lower <= 0:
            self.logger.error(f"Lower bound {lower} for asset {index} is not above 0")
            raise DegenerateBoundError(
                f"Threshold {threshold} is too wide for target {target} of asset {index}: "
                f"lower bound {lower} must be above 0"
            )
