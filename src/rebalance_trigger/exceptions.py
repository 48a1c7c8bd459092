class RebalanceTriggerError(ValueError):
    """Base class for invalid solver input"""
    pass

class InvalidIndexError(RebalanceTriggerError):
    """Raised when the asset index is out of bounds"""
    pass

class LengthMismatchError(RebalanceTriggerError):
    """Raised when values and targets have different lengths"""
    pass

class PortfolioSizeError(RebalanceTriggerError):
    """Raised when the portfolio is empty or exceeds the configured asset limit"""
    pass

class NonPositiveTotalError(RebalanceTriggerError):
    """Raised when the portfolio total or the asset value is not positive"""
    pass

class InvalidThresholdError(RebalanceTriggerError):
    """Raised when the rebalance threshold is negative or not finite"""
    pass

class DegenerateBoundError(RebalanceTriggerError):
    """Raised when target +/- threshold falls outside the open interval (0, 1)"""
    pass

class SingleAssetDegenerateError(RebalanceTriggerError):
    """Raised when no other asset holds value, so scaling cannot change the ratio"""
    pass
