import functools
import logging
import time
from typing import Callable, ParamSpec, TypeVar

import structlog

# Routed through the stdlib logger so the dictConfig in logging_utils applies
logger = structlog.wrap_logger(
    logging.getLogger(__name__),
    wrapper_class=structlog.stdlib.BoundLogger,
    processors=[
        structlog.stdlib.filter_by_level,
        structlog.processors.KeyValueRenderer(key_order=["event"]),
    ],
)

P = ParamSpec("P")
T = TypeVar("T")


def log_timing(func: Callable[P, T]) -> Callable[P, T]:
    """Decorator that logs the runtime of a grid computation at debug level."""

    @functools.wraps(func)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> T:
        start_time = time.perf_counter()
        try:
            return func(*args, **kwargs)
        finally:
            elapsed_ms = (time.perf_counter() - start_time) * 1000
            logger.debug(
                "timing", function=func.__qualname__, elapsed_ms=round(elapsed_ms, 3)
            )

    return wrapper
