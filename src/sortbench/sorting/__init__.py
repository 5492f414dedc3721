"""
sorting - Instrumented elementary sorting algorithms

    algorithms  - Sorter interface plus Bubble, Selection and Insertion
                  variants that count comparisons and relocations.
"""

from sortbench.sorting.algorithms import (
    DEFAULT_SORTERS,
    BubbleSort,
    InsertionSort,
    SelectionSort,
    Sorter,
    get_sorter,
)
