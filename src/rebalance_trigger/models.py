from typing import Optional
from pydantic import BaseModel

class FactorResult(BaseModel):
    """Price factors at which an asset's allocation crosses the rebalance band"""
    index: int
    symbol: Optional[str] = None
    current_ratio: float
    target_ratio: float
    threshold: float
    # All four are None when the asset is already outside the band
    increase_factor: Optional[float] = None
    decrease_factor: Optional[float] = None
    increase_percent: Optional[float] = None
    decrease_percent: Optional[float] = None

    @property
    def rebalance_triggered(self) -> bool:
        """True when the current allocation already breaches the threshold"""
        return self.increase_factor is None

    @property
    def upper_ratio(self) -> float:
        return self.target_ratio + self.threshold

    @property
    def lower_ratio(self) -> float:
        return self.target_ratio - self.threshold

    @property
    def label(self) -> str:
        return self.symbol or f"asset {self.index}"
