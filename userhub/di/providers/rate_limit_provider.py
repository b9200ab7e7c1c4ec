from typing import TYPE_CHECKING
from ...core.config import get_settings
from ...infrastructure.rate_limit import RateUsageTracker

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class RateLimitProvider:
    """Registers the per-client rate usage tracker"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        settings = get_settings()
        container.register_singleton(
            RateUsageTracker,
            RateUsageTracker(
                window_seconds=settings.rate_limit_window_seconds,
                max_requests=settings.rate_limit_max_requests,
            )
        )
