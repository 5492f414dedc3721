"""
performance - Benchmark execution and reporting

    benchmarks  - Batch runner: N_RUNS timed trials per (sorter, case, size),
                  averaged into one result row per batch.

    report      - Aligned text table and CSV block renderings of the stored
                  result rows, in insertion order.
"""
