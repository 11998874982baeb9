"""
classifier/emitter.py — wyciąganie zawodów (kod 6-cyfrowy + tytuł).

Tytuł zawodu bywa złamany na kilka linii, a jedna linia może zawierać kilka
kodów, np.:
  "112001 Członek Rady Ministrów 112002 Prezes Rady"
  "Ministrów"
Najpierw scalamy linię logiczną, potem wyszukujemy wszystkie pary.
"""

from __future__ import annotations

from collections.abc import Sequence

from data_model.occupations import OccupationRecord

from .context import ContextRegister
from .patterns import OCCUPATION_RE, ends_occupation_block


def gather_occupation_line(lines: Sequence[str], pos: int) -> tuple[str, int]:
    """
    Dokleja do lines[pos] kolejne linie, dopóki następna nie zaczyna się
    kodem zawodu ani nie jest nagłówkiem grupy.

    Zwraca (linia_logiczna, indeks pierwszej nieskonsumowanej linii).
    """
    parts = [lines[pos]]
    j = pos + 1
    while j < len(lines) and not ends_occupation_block(lines[j]):
        parts.append(lines[j])
        j += 1
    return " ".join(parts), j


def extract_occupations(logical_line: str) -> list[tuple[str, str]]:
    """Wszystkie nienakładające się pary (kod, tytuł) w kolejności wystąpienia."""
    return [(m.group(1), m.group(2).strip()) for m in OCCUPATION_RE.finditer(logical_line)]


def emit_occupations(
    lines: Sequence[str],
    pos: int,
    context: ContextRegister,
) -> tuple[list[OccupationRecord], int]:
    """Jeden OccupationRecord na każdą parę z linii logicznej zaczynającej się w pos."""
    logical_line, next_pos = gather_occupation_line(lines, pos)
    records = [
        context.record_for(code, title)
        for code, title in extract_occupations(logical_line)
    ]
    return records, next_pos
