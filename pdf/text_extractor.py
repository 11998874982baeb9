"""
pdf/text_extractor.py — zamiana dokumentu na uporządkowaną listę linii.

Architektura:
  pdf_path → fitz.open() → strony (zakres 1-based, włącznie)
  → page.get_text("text") → jeden ciąg tekstu (granice stron pomijane)
  → split_lines() → linie przycięte, bez pustych

Układ strony (kolumny, tabele, fonty) jest ignorowany — klasyfikator
pracuje wyłącznie na kolejności linii.
"""

from __future__ import annotations

from pathlib import Path

import fitz  # PyMuPDF


# ---------------------------------------------------------------------------
# Publiczne API
# ---------------------------------------------------------------------------

def split_lines(text: str) -> list[str]:
    """Dzieli tekst na linie, przycina białe znaki i usuwa puste linie."""
    return [line.strip() for line in text.split("\n") if line.strip()]


def extract_text(
    path: str | Path,
    start_page: int | None = None,
    end_page: int | None = None,
) -> str:
    """
    Zwraca czysty tekst wybranych stron PDF.

    Args:
        path:       Ścieżka do pliku PDF.
        start_page: Pierwsza strona (1-based, domyślnie 1).
        end_page:   Ostatnia strona (1-based, włącznie; domyślnie ostatnia).
    """
    doc = fitz.open(str(path))
    try:
        first, last = _page_range(doc.page_count, start_page, end_page)
        return "\n".join(doc[n].get_text("text") for n in range(first, last))
    finally:
        doc.close()


def extract_lines(
    path: str | Path,
    start_page: int | None = None,
    end_page: int | None = None,
) -> list[str]:
    return split_lines(extract_text(path, start_page, end_page))


def read_text_lines(path: str | Path) -> list[str]:
    """Linie z pliku .txt (np. tekst wyciągnięty wcześniej innym narzędziem)."""
    return split_lines(Path(path).read_text(encoding="utf-8-sig"))


# ---------------------------------------------------------------------------
# Pomocnicze
# ---------------------------------------------------------------------------

def _page_range(
    page_count: int,
    start_page: int | None,
    end_page: int | None,
) -> tuple[int, int]:
    """Zamienia zakres 1-based włącznie na półotwarty zakres 0-based."""
    first = max(1, start_page or 1) - 1
    last = min(page_count, end_page or page_count)
    return first, max(first, last)
