"""
benchmarks.py - Batch runner for the elementary sorting benchmark

Every report row is the average of ``N_RUNS`` timed trials of one sorter on
one input case:

    RGM        - the digits of the user's identifier, re-copied each trial
    Aleatorio  - uniform random integers in [0, 10000), redrawn each trial

Per trial the runner resets the step counters, times the sort with
``time.perf_counter`` and accumulates the elapsed milliseconds together with
comparisons + swaps.  The batch average time is the arithmetic mean; the
average step count uses integer division so it stays an exact count.

Timing is wall-clock over the sort call only.  Buffer preparation (copy or
random fill) sits outside the timed region.
"""

from __future__ import annotations

import logging
import time
from typing import Callable, List, Optional, Sequence

import numpy as np

from sortbench.core.constants import BENCHMARK_SIZES, CASE_RANDOM, CASE_RGM, N_RUNS
from sortbench.core.data_structures import BatchMetrics, Metrics, ResultRow, ResultStore
from sortbench.core.inputs import fill_random
from sortbench.sorting.algorithms import DEFAULT_SORTERS, Sorter

logger = logging.getLogger(__name__)


class BenchmarkRunner:
    """
    Runs batches of timed sort trials and collects the averaged results.

    Parameters
    ----------
    store : ResultStore, optional
        Destination for result rows.  A fresh store with the default
        capacity is created when omitted.
    rng : np.random.Generator, optional
        Source of random input values.  Defaults to a generator seeded from
        the current time.
    sorters : sequence of Sorter
        Algorithms exercised by :meth:`run_suite`, in report order.
    sizes : sequence of int
        Random input sizes exercised by :meth:`run_suite`.
    n_runs : int
        Trials per batch.
    """

    def __init__(
        self,
        store: Optional[ResultStore] = None,
        rng: Optional[np.random.Generator] = None,
        sorters: Sequence[Sorter] = DEFAULT_SORTERS,
        sizes: Sequence[int] = BENCHMARK_SIZES,
        n_runs: int = N_RUNS,
    ) -> None:
        if n_runs <= 0:
            raise ValueError(f"n_runs must be positive, got {n_runs}")
        self.store = store if store is not None else ResultStore()
        self.rng = rng if rng is not None else np.random.default_rng(time.time_ns())
        self.sorters = tuple(sorters)
        self.sizes = tuple(sizes)
        self.n_runs = n_runs

    # ---- Core measurement -------------------------------------------------

    def execute_batch(
        self,
        sorter: Sorter,
        source: Optional[Sequence[int]],
        n: int,
        randomized: bool,
    ) -> BatchMetrics:
        """
        Time *sorter* over ``n_runs`` trials and return the averages.

        Parameters
        ----------
        sorter : Sorter
            Algorithm under test.
        source : sequence of int or None
            Fixed input for deterministic cases; the first *n* values are
            copied into the working buffer before every trial.  Ignored
            (may be ``None``) when *randomized* is true.
        n : int
            Input size.
        randomized : bool
            Redraw the working buffer with random values every trial.

        Returns
        -------
        BatchMetrics
            ``avg_steps = total_steps // n_runs`` and
            ``avg_time_ms = total_ms / n_runs``.
        """
        if not randomized:
            if source is None:
                raise ValueError("source is required for a deterministic case")
            if len(source) < n:
                raise ValueError(f"source has {len(source)} values, need {n}")

        metrics = Metrics()
        buffer: List[int] = [0] * n
        total_time_ms = 0.0
        total_steps = 0

        for _ in range(self.n_runs):
            if randomized:
                fill_random(buffer, n, self.rng)
            else:
                buffer[:] = source[:n]

            metrics.reset()
            t0 = time.perf_counter()
            sorter.sort(buffer, metrics)
            t1 = time.perf_counter()

            total_time_ms += (t1 - t0) * 1000.0
            total_steps += metrics.total

        result = BatchMetrics(
            avg_steps=total_steps // self.n_runs,
            avg_time_ms=total_time_ms / self.n_runs,
        )
        logger.debug(
            "%s n=%d randomized=%s: steps=%d time=%.4f ms",
            sorter.name, n, randomized, result.avg_steps, result.avg_time_ms,
        )
        return result

    def run_and_store(
        self,
        sorter: Sorter,
        source: Optional[Sequence[int]],
        n: int,
        case: str,
        randomized: bool,
    ) -> Optional[ResultRow]:
        """
        Run one batch and append its row to the store.

        Returns the new row, or ``None`` if the store was already full and
        dropped it.
        """
        res = self.execute_batch(sorter, source, n, randomized)
        row = ResultRow(
            method=sorter.name,
            n=n,
            case=case,
            steps=res.avg_steps,
            time_ms=res.avg_time_ms,
        )
        if not self.store.append(row):
            return None
        return row

    # ---- Orchestration ----------------------------------------------------

    def run_suite(
        self,
        digits: Sequence[int],
        on_size_done: Optional[Callable[[int], None]] = None,
    ) -> ResultStore:
        """
        Run the full benchmark matrix.

        First every sorter on the RGM digits, then, for each size in
        ``self.sizes``, every sorter on random input.  *on_size_done* is
        called with the size after each random size completes (the CLI
        prints a progress dot).
        """
        digits = list(digits)
        logger.info("Running RGM case (N=%d)", len(digits))
        for sorter in self.sorters:
            self.run_and_store(sorter, digits, len(digits), CASE_RGM, randomized=False)

        for n in self.sizes:
            logger.info("Running random case (N=%d)", n)
            for sorter in self.sorters:
                self.run_and_store(sorter, None, n, CASE_RANDOM, randomized=True)
            if on_size_done is not None:
                on_size_done(n)

        logger.info("Benchmark suite complete: %d rows stored", len(self.store))
        return self.store
