"""
sortbench - Elementary sorting algorithm benchmark

Measures comparison and swap counts and wall-clock time for bubble,
selection and insertion sort on a student's RGM digits and on random inputs,
then prints the averages as an aligned table and a CSV block.

    core         - constants, result data structures, input generation
    sorting      - the three instrumented O(n^2) sorts
    performance  - batch runner and report rendering
"""

__version__ = "1.0.0"
