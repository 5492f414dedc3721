"""Text renderings of the benchmark results: aligned table and CSV block."""

from __future__ import annotations

from typing import Iterable, List, Sequence

from sortbench.core.constants import CSV_BEGIN, CSV_END, TIME_DECIMALS
from sortbench.core.data_structures import ResultStore

# Column widths: METODO, N, CASO, PASSOS, TEMPO (ms)
COLUMN_WIDTHS = (10, 6, 10, 15, 12)
TABLE_HEADER = ("METODO", "N", "CASO", "PASSOS", "TEMPO (ms)")

BORDER_RULE = "=" * 75
HEADER_RULE = "|" + "|".join("-" * (w + 2) for w in COLUMN_WIDTHS) + "|"


def _table_line(cells: Sequence[str]) -> str:
    padded = [f"{cell:<{width}}" for cell, width in zip(cells, COLUMN_WIDTHS)]
    return "| " + " | ".join(padded) + " |"


def render_table(store: ResultStore) -> str:
    """Render *store* as a bordered, pipe-delimited table.

    Rows keep insertion order.  A ``-`` rule separates consecutive rows
    whose input size differs.
    """
    rows = store.rows
    lines: List[str] = [BORDER_RULE, _table_line(TABLE_HEADER), HEADER_RULE]

    for i, row in enumerate(rows):
        lines.append(_table_line((
            row.method,
            str(row.n),
            row.case,
            str(row.steps),
            f"{row.time_ms:.{TIME_DECIMALS}f}",
        )))
        if i < len(rows) - 1 and row.n != rows[i + 1].n:
            lines.append(HEADER_RULE)

    lines.append(BORDER_RULE)
    return "\n".join(lines)


def render_csv(store: ResultStore) -> str:
    """Render *store* as a CSV block between copy-paste sentinels.

    The header is ``metodo,N,caso,passos,tempo_ms`` and times carry four
    decimals.
    """
    df = store.to_dataframe()
    body = df.to_csv(
        index=False,
        float_format=f"%.{TIME_DECIMALS}f",
        lineterminator="\n",
    )
    return "\n".join([CSV_BEGIN, body.rstrip("\n"), CSV_END])


def format_digits(digits: Iterable[int]) -> str:
    """``[1, 2, 3]`` style listing of a digit sequence."""
    return "[" + ", ".join(str(d) for d in digits) + "]"
