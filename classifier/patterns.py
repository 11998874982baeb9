"""
classifier/patterns.py — wzorce i predykaty klasyfikacji pojedynczej linii.

Każda funkcja działa na JEDNEJ linii (już przyciętej) i nie ma efektów
ubocznych. Pętle scalające (folder, emitter) składają się wyłącznie z tych
predykatów.

Cyfry to zawsze ASCII [0-9] — Pythonowe \\d dopasowałoby też cyfry Unicode.
"""

from __future__ import annotations

import re
from enum import StrEnum

# Nagłówek grupy: 1–4 cyfry, biały znak, reszta tytułu.
HEADER_RE = re.compile(r"^([0-9]{1,4})\s+(.+)")
_HEADER_START_RE = re.compile(r"^[0-9]{1,4}\s")

# Kod zawodu: 6 cyfr gdziekolwiek w linii.
_OCCUPATION_CODE_RE = re.compile(r"[0-9]{6}")
_OCCUPATION_START_RE = re.compile(r"^[0-9]{6}")

# Para (kod, tytuł) — wyszukiwana globalnie w scalonej linii zawodu.
OCCUPATION_RE = re.compile(r"([0-9]{6})\s+([^0-9]+)")

_DIGIT_START_RE = re.compile(r"^[0-9]")


class LineKind(StrEnum):
    """Wynik klasyfikacji linii."""
    HEADER_START     = "header"
    OCCUPATION_START = "occupation"
    PLAIN            = "plain"


# ---------------------------------------------------------------------------
# Predykaty
# ---------------------------------------------------------------------------

def is_blank(line: str) -> bool:
    return line.strip() == ""


def starts_with_digit(line: str) -> bool:
    return _DIGIT_START_RE.match(line) is not None


def is_header_line(line: str) -> bool:
    """1–4 cyfry na początku linii, a zaraz po nich biały znak."""
    return _HEADER_START_RE.match(line) is not None


def match_header(line: str) -> tuple[str, str] | None:
    """Zwraca (kod, pierwsza_linia_tytułu) albo None."""
    m = HEADER_RE.match(line)
    if m is None:
        return None
    return m.group(1), m.group(2).strip()


def is_occupation_line(line: str) -> bool:
    """Linia zawiera 6 kolejnych cyfr (niekoniecznie na początku)."""
    return _OCCUPATION_CODE_RE.search(line) is not None


def starts_with_occupation_code(line: str) -> bool:
    return _OCCUPATION_START_RE.match(line) is not None


def starts_lowercase(line: str) -> bool:
    """
    Heurystyka kontynuacji tytułu: pierwszy znak równy swojej małej wersji.

    Porównanie jest proste (c == c.lower()), więc znaki bez wielkości liter
    (nawias, myślnik, cudzysłów) też liczą się jako „małe".
    """
    if not line:
        return False
    first = line[0]
    return first == first.lower()


def ends_header_block(line: str) -> bool:
    """Wspólny warunek stopu obu pętli scalających nagłówek."""
    return is_blank(line) or starts_with_digit(line)


def ends_occupation_block(line: str) -> bool:
    """Warunek stopu zbierania kontynuacji linii zawodu."""
    return starts_with_occupation_code(line) or is_header_line(line)


# ---------------------------------------------------------------------------
# Klasyfikacja
# ---------------------------------------------------------------------------

def classify_line(line: str) -> LineKind:
    """
    Klasyfikuje linię. Kolejność testów ma znaczenie: nagłówek wygrywa
    z zawodem, np. "1234 56 ..." to nagłówek grupy elementarnej.
    """
    if is_header_line(line):
        return LineKind.HEADER_START
    if is_occupation_line(line):
        return LineKind.OCCUPATION_START
    return LineKind.PLAIN
