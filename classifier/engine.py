"""
classifier/engine.py — jedno przejście po liniach dokumentu.

Architektura:
  lines → classify_line()
        → HEADER_START     → fold_header()      → ContextRegister.with_group()
        → OCCUPATION_START → emit_occupations() → records
        → PLAIN            → pominięcie (stopki, numery stron, wstęp)
  → ParseResult

Przejście nigdy nie rzuca wyjątku: linie nierozpoznane są pomijane,
a wynik zawiera wszystko, co udało się zebrać.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from data_model.occupations import OccupationRecord

from .context import ContextRegister
from .emitter import emit_occupations
from .folder import fold_header
from .patterns import LineKind, classify_line, match_header


@dataclass
class ParseResult:
    records:               list[OccupationRecord] = field(default_factory=list)
    occupation_code_count: int = 0
    # głębokość → liczba scalonych nagłówków
    header_counts:         dict[int, int] = field(default_factory=lambda: {1: 0, 2: 0, 3: 0, 4: 0})
    context:               ContextRegister = field(default_factory=ContextRegister)


def parse_lines(lines: Iterable[str]) -> ParseResult:
    """
    Buduje spłaszczone rekordy zawodów z uporządkowanej sekwencji linii
    (przyciętych, bez pustych).
    """
    seq = list(lines)
    result = ParseResult()
    context = ContextRegister()

    i = 0
    while i < len(seq):
        line = seq[i]
        kind = classify_line(line)

        if kind is LineKind.HEADER_START:
            header = match_header(line)
            if header is None:
                i += 1
                continue
            code, first_title_line = header
            group, i = fold_header(code, first_title_line, seq, i + 1)
            context = context.with_group(group)
            result.header_counts[group.depth] += 1
            continue

        if kind is LineKind.OCCUPATION_START:
            records, i = emit_occupations(seq, i, context)
            result.records.extend(records)
            result.occupation_code_count += len(records)
            continue

        i += 1

    result.context = context
    return result
