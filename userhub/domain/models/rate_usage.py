from dataclasses import dataclass


@dataclass(frozen=True)
class RateUsage:
    """Read-only request counters for one client, produced per request by the rate tracker"""
    current: int
    limit: int
    client_id: str
