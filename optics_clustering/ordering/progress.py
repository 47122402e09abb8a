"""Progress hooks for long ordering runs."""

from __future__ import annotations

import logging
from typing import Callable, Optional

from optics_clustering import config
from optics_clustering.errors import InvalidArgumentError, OrderingAborted
from .data_point import DataPoint


def _default_progress_logger() -> logging.Logger:
    return logging.getLogger("optics_clustering.ordering.optics")


class ProgressLogger:
    """Callable ``on_point_processed`` hook that logs the share of processed points.

    Parameters
    ----------
    total
        Number of points in the dataset.
    every
        Log once every ``every`` processed points.
    logger
        Target logger; defaults to the driver's logger.
    should_stop
        Optional predicate checked after each point. When it returns True the
        hook raises :class:`OrderingAborted`, which ends the run.
    """

    def __init__(
        self,
        total: int,
        every: int = config.PROGRESS_LOG_INTERVAL,
        logger: Optional[logging.Logger] = None,
        should_stop: Optional[Callable[[], bool]] = None,
    ):
        if every <= 0:
            raise InvalidArgumentError(f"every must be positive, got {every}.")
        self.total = int(total)
        self.every = int(every)
        self.logger = logger or _default_progress_logger()
        self.should_stop = should_stop
        self.n_processed = 0

    def __call__(self, point: DataPoint) -> None:
        if self.n_processed % self.every == 0:
            self.logger.info(
                "%.2f%% processed", 100.0 * self.n_processed / max(self.total, 1)
            )
        self.n_processed += 1
        if self.should_stop is not None and self.should_stop():
            raise OrderingAborted(
                f"Ordering aborted after {self.n_processed} of {self.total} points."
            )


__all__ = ["ProgressLogger"]
