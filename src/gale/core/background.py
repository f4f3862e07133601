"""Run a single call on a worker thread and hand its outcome back."""

from collections.abc import Callable
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Any


def run_in_background(func: Callable[..., Any], *args: Any, **kwargs: Any) -> Future:
    """Submit ``func(*args, **kwargs)`` to a one-worker executor.

    Returns a Future that receives either the return value or the raised
    exception. The caller blocks on ``future.result()``.
    """
    executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="gale-fetch")
    try:
        return executor.submit(func, *args, **kwargs)
    finally:
        executor.shutdown(wait=False)
