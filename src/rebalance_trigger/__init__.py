from .calculator import RebalanceFactorSolver
from .models import FactorResult
from .exceptions import (
    RebalanceTriggerError,
    InvalidIndexError,
    LengthMismatchError,
    PortfolioSizeError,
    NonPositiveTotalError,
    InvalidThresholdError,
    DegenerateBoundError,
    SingleAssetDegenerateError,
)

__version__ = "1.0.0"

__all__ = [
    "RebalanceFactorSolver",
    "FactorResult",
    "RebalanceTriggerError",
    "InvalidIndexError",
    "LengthMismatchError",
    "PortfolioSizeError",
    "NonPositiveTotalError",
    "InvalidThresholdError",
    "DegenerateBoundError",
    "SingleAssetDegenerateError",
    "__version__",
]
