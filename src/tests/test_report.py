"""
===============================================================================
SORTBENCH - Report Rendering Test Suite
===============================================================================
Tests for the aligned text table and the CSV block: exact column layout,
size-change separators, four-decimal times and the copy-paste sentinels.
===============================================================================
"""

import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import pytest

from sortbench.core.data_structures import ResultRow, ResultStore
from sortbench.performance.report import (
    BORDER_RULE, HEADER_RULE, format_digits, render_csv, render_table,
)


@pytest.fixture
def store():
    s = ResultStore()
    s.append(ResultRow("Bubble", 3, "RGM", 6, 0.0012))
    s.append(ResultRow("Selection", 3, "RGM", 4, 0.00081))
    s.append(ResultRow("Bubble", 100, "Aleatorio", 7421, 0.51234))
    s.append(ResultRow("Insertion", 1000, "Aleatorio", 250123, 41.5))
    return s


# =============================================================================
# Test: Table
# =============================================================================

class TestRenderTable:

    def test_rules(self):
        assert BORDER_RULE == "=" * 75
        assert HEADER_RULE == "|------------|--------|------------|-----------------|--------------|"

    def test_layout(self, store):
        lines = render_table(store).split("\n")
        assert lines[0] == BORDER_RULE
        assert lines[1] == "| METODO     | N      | CASO       | PASSOS          | TEMPO (ms)   |"
        assert lines[2] == HEADER_RULE
        assert lines[3] == "| Bubble     | 3      | RGM        | 6               | 0.0012       |"
        assert lines[-1] == BORDER_RULE

    def test_separator_on_size_change(self, store):
        lines = render_table(store).split("\n")
        body = lines[3:-1]
        assert body == [
            "| Bubble     | 3      | RGM        | 6               | 0.0012       |",
            "| Selection  | 3      | RGM        | 4               | 0.0008       |",
            HEADER_RULE,
            "| Bubble     | 100    | Aleatorio  | 7421            | 0.5123       |",
            HEADER_RULE,
            "| Insertion  | 1000   | Aleatorio  | 250123          | 41.5000      |",
        ]

    def test_empty_store(self):
        lines = render_table(ResultStore()).split("\n")
        assert lines == [
            BORDER_RULE,
            "| METODO     | N      | CASO       | PASSOS          | TEMPO (ms)   |",
            HEADER_RULE,
            BORDER_RULE,
        ]


# =============================================================================
# Test: CSV block
# =============================================================================

class TestRenderCsv:

    def test_block(self, store):
        assert render_csv(store).split("\n") == [
            ">>> INICIO CSV <<<",
            "metodo,N,caso,passos,tempo_ms",
            "Bubble,3,RGM,6,0.0012",
            "Selection,3,RGM,4,0.0008",
            "Bubble,100,Aleatorio,7421,0.5123",
            "Insertion,1000,Aleatorio,250123,41.5000",
            ">>> FIM CSV <<<",
        ]

    def test_empty_store(self):
        assert render_csv(ResultStore()).split("\n") == [
            ">>> INICIO CSV <<<",
            "metodo,N,caso,passos,tempo_ms",
            ">>> FIM CSV <<<",
        ]


class TestFormatDigits:

    def test_listing(self):
        assert format_digits([1, 2, 3]) == "[1, 2, 3]"
        assert format_digits([7]) == "[7]"
