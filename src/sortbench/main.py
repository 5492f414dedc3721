#!/usr/bin/env python3
"""
===============================================================================
SORTBENCH - MAIN ENTRY POINT
===============================================================================
Interactive console session for the elementary sorting benchmark.

Reads the student's RGM identifier, benchmarks Bubble, Selection and
Insertion sort on the RGM digits and on random inputs of 100, 1000 and
10000 values (average of 5 runs each), then prints an aligned table and a
CSV block ready to paste into a spreadsheet.

USAGE:
    sortbench
    python -m sortbench.main

EXIT STATUS:
    0  results printed
    1  input closed before a valid RGM was entered

DEPENDENCIES:
    numpy, pandas
===============================================================================
"""

import argparse
import logging
import sys
from typing import List, Optional, TextIO

from sortbench.core.constants import N_RUNS, RGM_MAX_DIGITS
from sortbench.core.inputs import (
    EmptyIdentifierError,
    IdentifierTooLongError,
    InvalidIdentifierError,
    validate_identifier,
)
from sortbench.performance.benchmarks import BenchmarkRunner
from sortbench.performance.report import format_digits, render_csv, render_table

logger = logging.getLogger('sortbench')

PROMPT = f"Digite seu RGM (max {RGM_MAX_DIGITS} digitos): "


def read_identifier(
    stdin: TextIO,
    stdout: TextIO,
    stderr: TextIO,
) -> List[int]:
    """
    Prompt until a valid RGM is entered and return its digits.

    Empty lines re-prompt silently; non-numeric or over-long input prints
    an error to *stderr* and re-prompts.

    Raises:
        EOFError: if *stdin* is exhausted before a valid RGM is read.
    """
    while True:
        stdout.write(PROMPT)
        stdout.flush()

        line = stdin.readline()
        if not line:
            raise EOFError("input closed before a valid RGM was entered")

        try:
            return validate_identifier(line)
        except EmptyIdentifierError:
            continue
        except InvalidIdentifierError:
            logger.debug("Rejected non-numeric RGM %r", line)
            stderr.write(">> Erro: Entrada invalida. Use apenas numeros.\n\n")
        except IdentifierTooLongError as e:
            logger.debug("Rejected RGM with %d digits", e.n_digits)
            stderr.write(
                f">> Erro: RGM muito longo ({e.n_digits} digitos). "
                f"Maximo permitido e {e.max_digits}.\n\n"
            )


def run_session(
    stdin: TextIO,
    stdout: TextIO,
    stderr: TextIO,
    runner: Optional[BenchmarkRunner] = None,
) -> int:
    """
    Run one full interactive session and return the process exit status.
    """
    print("=" * 40, file=stdout)
    print("   ANALISE DE ALGORITMOS DE ORDENACAO   ", file=stdout)
    print("=" * 40, file=stdout)

    try:
        digits = read_identifier(stdin, stdout, stderr)
    except EOFError:
        logger.warning("No RGM entered, exiting")
        return 1

    print(f"\n[RGM N={len(digits)}: {format_digits(digits)}", file=stdout)
    print(f"\nProcessando... (Media de {N_RUNS} execucoes por caso)", file=stdout)
    print("Aguarde, testes pesados podem demorar...\n", file=stdout)

    if runner is None:
        runner = BenchmarkRunner()

    def progress(_n: int) -> None:
        stdout.write(". ")
        stdout.flush()

    store = runner.run_suite(digits, on_size_done=progress)
    print("Concluido!\n", file=stdout)

    print(render_table(store), file=stdout)
    print(file=stdout)
    print("Copie os dados abaixo para seu relatorio/excel:", file=stdout)
    print(render_csv(store), file=stdout)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point. Parses the (option-free) command line and runs the
    interactive session.
    """
    parser = argparse.ArgumentParser(
        description='Elementary sorting benchmark: Bubble vs Selection vs Insertion',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
The program asks for your RGM (up to 8 digits), sorts its digits and
random arrays of 100, 1000 and 10000 values with each algorithm, and
prints the average steps and time of 5 runs per case.
        """
    )
    parser.parse_args(argv)

    # stdout carries the report; log records go to stderr.
    logging.basicConfig(
        level=logging.WARNING,
        format='%(asctime)s [%(levelname)s] %(name)s: %(message)s',
        stream=sys.stderr,
    )

    return run_session(sys.stdin, sys.stdout, sys.stderr)


if __name__ == '__main__':
    sys.exit(main())
