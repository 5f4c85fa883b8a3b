"""Timing a single call of a function."""

from __future__ import annotations

import time
from typing import Any, Callable


def benchmark_function(name: str, func: Callable[..., Any], *args: Any) -> Any:
    """Call ``func(*args)``, print its result and the time taken, and return the result."""
    start = time.perf_counter()
    result = func(*args)
    elapsed = time.perf_counter() - start
    print(f"{name} result: {result}, Time: {elapsed} seconds")
    return result