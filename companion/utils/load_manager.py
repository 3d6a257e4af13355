"""Runs game-data loads and surfaces failures as alerts."""

from __future__ import annotations

import logging
from typing import Callable, Optional, TypeVar

from rich.console import Console

from companion.config import settings
from companion.data.snapshot_client import SnapshotClient
from companion.errors import CompanionError
from companion.utils.api_retry import TRANSIENT_ERRORS, retry_with_backoff

logger = logging.getLogger(__name__)

ResultT = TypeVar("ResultT")
Alert = Callable[[str], None]


class LoadManager:
    """Executes load work against a snapshot client.

    Work is any callable taking the client. Transient I/O errors are retried
    with exponential backoff; once retries run out, or for any other
    CompanionError, the failure is logged and passed to the alert callback
    and load() returns None. Callers decide what to do with results (usually
    storing them in a LocalDataStore via on_success).
    """

    def __init__(
        self,
        client: SnapshotClient,
        alert: Optional[Alert] = None,
        console: Optional[Console] = None,
        max_retries: Optional[int] = None,
        base_delay: Optional[float] = None,
        max_delay: Optional[float] = None,
    ) -> None:
        self.client = client
        self.console = console or Console()
        self._alert = alert or self._print_alert
        self.max_retries = settings.load_max_retries if max_retries is None else max_retries
        self.base_delay = settings.load_base_delay if base_delay is None else base_delay
        self.max_delay = settings.load_max_delay if max_delay is None else max_delay

    def _print_alert(self, message: str) -> None:
        self.console.print(f"[red]✗[/red] {message}")

    def load(
        self,
        work: Callable[[SnapshotClient], ResultT],
        on_success: Optional[Callable[[ResultT], None]] = None,
        description: Optional[str] = None,
    ) -> Optional[ResultT]:
        """Run ``work(client)`` and report the outcome.

        Args:
            work: Load function receiving the snapshot client
            on_success: Called with the result when the load succeeds
            description: Human-readable name used in alerts and logs

        Returns:
            The work's result, or None if it failed
        """
        name = description or getattr(work, "__name__", "load")

        def attempt():
            return work(self.client)

        # retry lines name the load, not this wrapper
        attempt.__name__ = name
        retrying = retry_with_backoff(
            max_retries=self.max_retries,
            base_delay=self.base_delay,
            max_delay=self.max_delay,
            exceptions=TRANSIENT_ERRORS,
        )(attempt)

        try:
            result = retrying()
        except (CompanionError, *TRANSIENT_ERRORS) as err:
            logger.warning("Load %s failed: %s", name, err)
            self._alert(f"Could not load {name}: {err}")
            return None

        logger.debug("Load %s succeeded", name)
        if on_success is not None:
            on_success(result)
        return result
