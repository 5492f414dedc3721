"""
===============================================================================
SORTBENCH - Benchmark Constants
===============================================================================
Central repository for every tunable used by the benchmark harness: trial
counts, input sizes, result capacity and the labels that appear in the
printed reports.

The labels are kept in Portuguese so the output matches the course
material the harness was written for.
===============================================================================
"""


# =============================================================================
# BENCHMARK PROTOCOL
# =============================================================================
N_RUNS = 5                              # Trials averaged into one result row
BENCHMARK_SIZES = (100, 1000, 10000)    # Randomized input sizes
RANDOM_VALUE_LIMIT = 10000              # Random values drawn from [0, limit)

# =============================================================================
# RESULT STORAGE
# =============================================================================
MAX_RESULTS = 30                        # Rows kept; further rows are dropped

# =============================================================================
# IDENTIFIER (RGM) INPUT
# =============================================================================
RGM_MAX_DIGITS = 8

# =============================================================================
# CASE LABELS
# =============================================================================
CASE_RGM = "RGM"
CASE_RANDOM = "Aleatorio"

# =============================================================================
# REPORT LAYOUT
# =============================================================================
CSV_HEADER = ("metodo", "N", "caso", "passos", "tempo_ms")
CSV_BEGIN = ">>> INICIO CSV <<<"
CSV_END = ">>> FIM CSV <<<"
TIME_DECIMALS = 4
