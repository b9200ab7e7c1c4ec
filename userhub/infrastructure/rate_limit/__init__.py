from .usage_tracker import RateUsageTracker

__all__ = ["RateUsageTracker"]
