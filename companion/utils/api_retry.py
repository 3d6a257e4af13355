"""Retry with exponential backoff for game-data loads."""

from __future__ import annotations

import logging
import time
from functools import wraps
from typing import Any, Callable, Optional, Tuple, Type

logger = logging.getLogger(__name__)

# Only transient failures are retried; corrupt or missing snapshots are not
TRANSIENT_ERRORS: Tuple[Type[Exception], ...] = (OSError, TimeoutError)

# Progress display receiving retry/failure lines while a live display is active
_progress_display = None


def set_progress_display(display) -> None:
    """Route retry and failure lines to a ProgressDisplay (None to reset)."""
    global _progress_display
    _progress_display = display


def _report(message: str, level: int) -> None:
    if _progress_display:
        _progress_display.add_line(message)
    else:
        logger.log(level, message)


def backoff_delay(
    attempt: int, base_delay: float, max_delay: float, exponential_base: float
) -> float:
    """Delay before retry number ``attempt + 1`` (attempt counts from 0)."""
    return min(base_delay * (exponential_base**attempt), max_delay)


def retry_with_backoff(
    max_retries: int = 2,
    base_delay: float = 0.5,
    max_delay: float = 5.0,
    exponential_base: float = 2.0,
    exceptions: Tuple[Type[Exception], ...] = TRANSIENT_ERRORS,
    silent: bool = False,
) -> Callable:
    """Decorator retrying a load function with exponential backoff.

    Args:
        max_retries: Retry attempts after the first call (default: 2)
        base_delay: Initial delay in seconds (default: 0.5)
        max_delay: Upper bound for any single delay (default: 5.0)
        exponential_base: Growth factor between delays (default: 2.0)
        exceptions: Exception types that trigger a retry (default: I/O errors)
        silent: If True, don't report retries or the final failure

    Returns:
        Decorated function; the last exception propagates once retries run out

    Example:
        @retry_with_backoff(max_retries=3, base_delay=0.2)
        def fetch_match(client, match_id):
            return client.get_match_details(match_id)
    """

    def decorator(func: Callable) -> Callable:
        @wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            last_exception: Optional[Exception] = None

            for attempt in range(max_retries + 1):
                try:
                    return func(*args, **kwargs)
                except exceptions as e:
                    last_exception = e

                    if attempt == max_retries:
                        if not silent:
                            _report(
                                f"[red]✗[/red] {func.__name__} failed after "
                                f"{max_retries + 1} attempts: {e}",
                                logging.ERROR,
                            )
                        raise

                    delay = backoff_delay(attempt, base_delay, max_delay, exponential_base)
                    if not silent:
                        _report(
                            f"[yellow]⚠[/yellow] {func.__name__} failed "
                            f"(attempt {attempt + 1}/{max_retries + 1}), "
                            f"retrying in {delay:.1f}s... ({type(e).__name__})",
                            logging.WARNING,
                        )
                    time.sleep(delay)

            if last_exception:
                raise last_exception
            return None

        return wrapper

    return decorator
