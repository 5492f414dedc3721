"""
Data structures for the sorting benchmark harness.

Structures
----------
Metrics       -- Mutable comparison/swap counters filled in by a sorter.
BatchMetrics  -- Averaged step count and time for one batch of trials.
ResultRow     -- One immutable line of the final report.
ResultStore   -- Append-only, capacity-bounded sequence of result rows.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterator, List, Tuple

import pandas as pd

from sortbench.core.constants import CSV_HEADER, MAX_RESULTS

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# 1. Metrics
# ---------------------------------------------------------------------------

@dataclass
class Metrics:
    """Step counters for a single sort run.

    Attributes
    ----------
    comparisons : int
        Element comparisons performed.
    swaps : int
        Element relocations performed.  Insertion sort counts every shift
        as one unit, so this is a relocation count rather than a literal
        exchange count.
    """
    comparisons: int = 0
    swaps: int = 0

    def reset(self) -> None:
        self.comparisons = 0
        self.swaps = 0

    @property
    def total(self) -> int:
        """Comparisons plus swaps, the "steps" reported per trial."""
        return self.comparisons + self.swaps


@dataclass(frozen=True)
class BatchMetrics:
    """Averages over one batch of trials."""
    avg_steps: int
    avg_time_ms: float


# ---------------------------------------------------------------------------
# 2. ResultRow
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ResultRow:
    """A single report line.

    Attributes
    ----------
    method : str
        Sorter name ("Bubble", "Selection", "Insertion").
    n : int
        Input size.
    case : str
        Case label, ``"RGM"`` or ``"Aleatorio"``.
    steps : int
        Average step count over the batch (integer division).
    time_ms : float
        Average wall-clock time over the batch, in milliseconds.
    """
    method: str
    n: int
    case: str
    steps: int
    time_ms: float

    def as_tuple(self) -> Tuple[str, int, str, int, float]:
        return (self.method, self.n, self.case, self.steps, self.time_ms)


# ---------------------------------------------------------------------------
# 3. ResultStore
# ---------------------------------------------------------------------------

class ResultStore:
    """Append-only result collection with a hard capacity.

    Rows are kept in insertion order.  Once ``capacity`` rows are stored
    any further ``append`` is ignored: it returns ``False`` and the row is
    dropped without raising.  There is no removal or update operation.

    Parameters
    ----------
    capacity : int
        Maximum number of rows retained.  Defaults to ``MAX_RESULTS``.
    """

    def __init__(self, capacity: int = MAX_RESULTS) -> None:
        if capacity <= 0:
            raise ValueError(f"capacity must be positive, got {capacity}")
        self._capacity: int = capacity
        self._rows: List[ResultRow] = []

    def append(self, row: ResultRow) -> bool:
        """Store *row* if there is room.

        Returns
        -------
        bool
            ``True`` if the row was stored, ``False`` if the store was full.
        """
        if len(self._rows) >= self._capacity:
            logger.debug("Result store full (%d rows), dropping %s", self._capacity, row)
            return False
        self._rows.append(row)
        return True

    @property
    def rows(self) -> Tuple[ResultRow, ...]:
        """Snapshot of the stored rows in insertion order."""
        return tuple(self._rows)

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def is_full(self) -> bool:
        return len(self._rows) >= self._capacity

    def to_dataframe(self) -> pd.DataFrame:
        """Return the rows as a DataFrame with the CSV column names."""
        return pd.DataFrame(
            [row.as_tuple() for row in self._rows],
            columns=list(CSV_HEADER),
        )

    def __iter__(self) -> Iterator[ResultRow]:
        return iter(self._rows)

    def __len__(self) -> int:
        return len(self._rows)

    def __repr__(self) -> str:
        return f"ResultStore(count={len(self._rows)}/{self._capacity})"
