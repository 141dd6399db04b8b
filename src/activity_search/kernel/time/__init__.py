"""Kernel time – Clock port + implementations."""
from activity_search.kernel.time.clock import Clock, FrozenClock, SystemClock

__all__ = ["Clock", "FrozenClock", "SystemClock"]
