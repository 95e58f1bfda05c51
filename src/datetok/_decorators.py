"""Decorators shared by the batch conversion helpers."""

import functools
import logging
import time
from collections.abc import Callable, Sized

log = logging.getLogger(__name__)


def log_elapsed(func: Callable) -> Callable:
    """Log at debug level how long ``func`` took and how many results it returned."""

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        start = time.perf_counter()
        result = None
        try:
            result = func(*args, **kwargs)
            return result
        # timing is logged on failure too, without a result count
        finally:
            elapsed_ms = (time.perf_counter() - start) * 1000
            count = f"{len(result)} results" if isinstance(result, Sized) else "no result"
            log.debug(f"{func.__name__}: {count} in {elapsed_ms:.3f} ms")

    return wrapper
