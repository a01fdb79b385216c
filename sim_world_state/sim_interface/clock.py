import time
from typing import Callable

Clock = Callable[[], int]


def current_system_time_ms() -> int:
    """Monotonic host time in integer milliseconds."""
    return time.monotonic_ns() // 1_000_000
