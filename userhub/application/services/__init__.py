from .usage_logger import log_rate_usage

__all__ = ["log_rate_usage"]
