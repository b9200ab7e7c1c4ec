# Standard library imports
import logging

# Local application imports
from ...domain.models.rate_usage import RateUsage

logger = logging.getLogger(__name__)


def log_rate_usage(usage: RateUsage, operation: str) -> None:
    """
    Record the rate-usage snapshot of the current request

    Side effect only; the snapshot never changes what the operation does.

    Args:
        usage: Counters supplied by the rate tracker for this request
        operation: Name of the operation being served
    """
    logger.info(
        f"Current API usage for {usage.client_id}: {usage.current}/{usage.limit}",
        extra={"client_id": usage.client_id, "operation": operation},
    )
