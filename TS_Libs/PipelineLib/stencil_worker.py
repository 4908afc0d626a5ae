"""
Background execution of the stencil engine.

Interactive callers re-run the engine every time a slider moves. The
StencilWorker runs those calls on a single worker thread and only delivers
the result of the most recent submission; results of superseded jobs are
dropped when they finish. The engine itself has no notion of cancellation.

Example:
    >>> worker = StencilWorker(on_result=show_preview)
    >>> worker.submit(raster, settings)
    >>> worker.submit(raster, settings.with_changes(threshold=90))  # supersedes
    >>> worker.shutdown()
"""

import concurrent.futures
import logging
import threading
from typing import Callable, Optional

from TS_Libs.StencilEngineLib.raster_models import (
    ProcessingResult,
    Raster,
    StencilSettings,
)
from TS_Libs.StencilEngineLib.stencil_engine import process_raster

logger = logging.getLogger(__name__)

ResultCallback = Callable[[ProcessingResult], None]
ErrorCallback = Callable[[BaseException], None]


class StencilWorker:
    """Runs engine calls off the calling thread, latest submission wins."""

    def __init__(
        self,
        on_result: Optional[ResultCallback] = None,
        on_error: Optional[ErrorCallback] = None,
    ):
        self._executor = concurrent.futures.ThreadPoolExecutor(
            max_workers=1, thread_name_prefix="stencil-worker"
        )
        self._on_result = on_result
        self._on_error = on_error
        self._lock = threading.Lock()
        self._generation = 0
        self._latest_result: Optional[ProcessingResult] = None

    @property
    def generation(self) -> int:
        """Number of jobs submitted so far."""
        with self._lock:
            return self._generation

    def submit(
        self, raster: Raster, settings: StencilSettings
    ) -> "concurrent.futures.Future[ProcessingResult]":
        """
        Queue an engine call.

        Args:
            raster: Input raster (owned by the job until it finishes)
            settings: Settings for this call

        Returns:
            Future resolving to the job's ProcessingResult, whether or not
            it ends up being delivered

        Raises:
            RuntimeError: If the worker has been shut down
        """
        with self._lock:
            self._generation += 1
            generation = self._generation

        future = self._executor.submit(process_raster, raster, settings)
        future.add_done_callback(
            lambda done: self._deliver(generation, done)
        )
        return future

    def _deliver(
        self, generation: int, future: "concurrent.futures.Future[ProcessingResult]"
    ) -> None:
        with self._lock:
            is_latest = generation == self._generation

        if not is_latest:
            logger.debug(f"Discarding superseded stencil job {generation}")
            return

        error = future.exception()
        if error is not None:
            logger.error(f"Stencil job {generation} failed: {error}")
            if self._on_error is not None:
                self._on_error(error)
            return

        result = future.result()
        with self._lock:
            self._latest_result = result

        if self._on_result is not None:
            self._on_result(result)

    def latest_result(self) -> Optional[ProcessingResult]:
        """The most recently delivered result, or None."""
        with self._lock:
            return self._latest_result

    def shutdown(self, wait: bool = True) -> None:
        """Stop accepting jobs and optionally wait for queued ones."""
        self._executor.shutdown(wait=wait)

    def __enter__(self) -> "StencilWorker":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.shutdown(wait=True)
