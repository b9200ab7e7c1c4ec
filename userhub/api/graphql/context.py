# External package imports
from fastapi import Request
from strawberry.fastapi import BaseContext

# Local application imports
from ...domain.models.rate_usage import RateUsage
from ...infrastructure.rate_limit import RateUsageTracker
from ...di.container import get_container


class UserHubContext(BaseContext):
    """Per-request GraphQL context carrying the rate-usage snapshot"""

    def __init__(self, rate_usage: RateUsage) -> None:
        super().__init__()
        self.rate_usage = rate_usage


def client_id_for(request: Request) -> str:
    """Identify the caller by remote address"""
    return request.client.host if request.client else "unknown"


async def get_context(request: Request) -> UserHubContext:
    """
    FastAPI dependency building the GraphQL context

    Counts the request against the caller's window and attaches the
    resulting snapshot.
    """
    tracker = get_container().get(RateUsageTracker)
    return UserHubContext(rate_usage=tracker.hit(client_id_for(request)))
