"""
===============================================================================
SORTBENCH - Elementary Sorting Algorithms
===============================================================================
The three textbook O(n^2) sorts compared by the benchmark.  They are kept
deliberately naive: the point is to count the work each one does, not to
make it fast.

Every sorter shares one contract.  ``sort(data, metrics)`` rearranges the
mutable sequence *data* into non-descending order in place, adding one to
``metrics.comparisons`` for every element comparison and one to
``metrics.swaps`` for every element relocation.

    Bubble     - adjacent exchanges, boundary shrinks each pass, stops
                 early after a pass without exchanges.
    Selection  - select the minimum of the unsorted suffix, exchange it
                 into place (no exchange when it is already there).
    Insertion  - shift larger elements right, one swap unit per shift.
===============================================================================
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Dict, MutableSequence, Tuple

from sortbench.core.data_structures import Metrics


# =============================================================================
# ABSTRACT BASE: Sorter
# =============================================================================

class Sorter(ABC):
    """In-place sorting algorithm that reports its step counts.

    Subclasses set ``name`` (the label printed in reports) and implement
    ``sort``.
    """

    name: str = "base"

    @abstractmethod
    def sort(self, data: MutableSequence[int], metrics: Metrics) -> None:
        """Sort *data* ascending in place, updating *metrics*.

        Parameters
        ----------
        data : MutableSequence[int]
            Buffer to sort.  Mutated; ownership stays with the caller.
        metrics : Metrics
            Accumulator incremented for every comparison and relocation.
            It is not reset here.
        """

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"


# =============================================================================
# BUBBLE SORT
# =============================================================================

class BubbleSort(Sorter):
    """Repeated adjacent-pair passes.

    After pass *i* the largest *i* values sit at the tail, so the scan
    boundary shrinks by one each pass.  A pass with no exchange means the
    sequence is sorted and the loop stops.

    On ``[3, 2, 1]``: pass 1 makes 2 comparisons and 2 exchanges, pass 2
    makes 1 comparison and 1 exchange -- 3 comparisons, 3 swaps.
    """

    name = "Bubble"

    def sort(self, data: MutableSequence[int], metrics: Metrics) -> None:
        n = len(data)
        boundary = n - 1
        while boundary > 0:
            exchanged = False
            for j in range(boundary):
                metrics.comparisons += 1
                if data[j] > data[j + 1]:
                    data[j], data[j + 1] = data[j + 1], data[j]
                    metrics.swaps += 1
                    exchanged = True
            if not exchanged:
                break
            boundary -= 1


# =============================================================================
# SELECTION SORT
# =============================================================================

class SelectionSort(Sorter):
    """Place the minimum of the unsorted suffix at each position.

    Always makes n(n-1)/2 comparisons regardless of input order; at most
    n-1 exchanges.
    """

    name = "Selection"

    def sort(self, data: MutableSequence[int], metrics: Metrics) -> None:
        n = len(data)
        for i in range(n - 1):
            min_idx = i
            for j in range(i + 1, n):
                metrics.comparisons += 1
                if data[j] < data[min_idx]:
                    min_idx = j
            if min_idx != i:
                data[i], data[min_idx] = data[min_idx], data[i]
                metrics.swaps += 1


# =============================================================================
# INSERTION SORT
# =============================================================================

class InsertionSort(Sorter):
    """Shift preceding larger elements right until the key's slot is found.

    Each shift counts as one swap unit.  The comparison that ends the shift
    loop is counted; writing the key into its slot is not.  On sorted input
    this gives n-1 comparisons and zero swaps.
    """

    name = "Insertion"

    def sort(self, data: MutableSequence[int], metrics: Metrics) -> None:
        for i in range(1, len(data)):
            key = data[i]
            j = i - 1
            while j >= 0:
                metrics.comparisons += 1
                if data[j] <= key:
                    break
                data[j + 1] = data[j]
                metrics.swaps += 1
                j -= 1
            data[j + 1] = key


# =============================================================================
# REGISTRY
# =============================================================================

DEFAULT_SORTERS: Tuple[Sorter, ...] = (BubbleSort(), SelectionSort(), InsertionSort())

_BY_NAME: Dict[str, Sorter] = {s.name.lower(): s for s in DEFAULT_SORTERS}


def get_sorter(name: str) -> Sorter:
    """Look up one of the default sorters by name (case-insensitive)."""
    try:
        return _BY_NAME[name.lower()]
    except KeyError:
        known = ", ".join(s.name for s in DEFAULT_SORTERS)
        raise ValueError(f"Unknown sorter: {name}. Use one of: {known}.") from None
