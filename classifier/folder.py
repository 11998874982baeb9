"""
classifier/folder.py — scalanie nagłówka grupy z liniami kontynuacji.

Układ w dokumencie:
  "1 PRZEDSTAWICIELE WŁADZ PUBLICZNYCH,"    ← linia nagłówka (kod + tytuł)
  "wyżsi urzędnicy i kierownicy"            ← kontynuacja tytułu (mała litera)
  "Przedstawiciele władz publicznych ..."   ← opis (do linii zaczynającej
  "... zarządzają przedsiębiorstwami."         się cyfrą)
  "11 PRZEDSTAWICIELE WŁADZ ..."            ← następny element
"""

from __future__ import annotations

from collections.abc import Sequence

from data_model.occupations import HeaderGroup

from .patterns import ends_header_block, starts_lowercase


def fold_header(
    code: str,
    first_title_line: str,
    lines: Sequence[str],
    pos: int,
) -> tuple[HeaderGroup, int]:
    """
    Składa HeaderGroup z linii nagłówka i linii następujących po nim.

    Args:
        code:             kod grupy (1–4 cyfry).
        first_title_line: reszta linii nagłówka po kodzie.
        lines:            cała sekwencja linii.
        pos:              indeks linii zaraz za linią nagłówka.

    Zwraca (grupa, indeks pierwszej nieskonsumowanej linii).
    """
    title_lines = [first_title_line]
    description_lines: list[str] = []
    j = pos

    # Tytuł na kilku liniach: kontynuacja zaczyna się małą literą
    while j < len(lines) and not ends_header_block(lines[j]):
        if not starts_lowercase(lines[j]):
            break
        title_lines.append(lines[j])
        j += 1

    # Opis: wszystko do pustej linii lub linii zaczynającej się cyfrą
    while j < len(lines) and not ends_header_block(lines[j]):
        description_lines.append(lines[j])
        j += 1

    group = HeaderGroup(
        code=code,
        title=" ".join(title_lines),
        description=" ".join(description_lines),
    )
    return group, j
