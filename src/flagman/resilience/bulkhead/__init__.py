"""Resilience – bulkhead (concurrency limiting)."""
from flagman.resilience.bulkhead.limiters import ConcurrencyLimiter

__all__ = ["ConcurrencyLimiter"]
