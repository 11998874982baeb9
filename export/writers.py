"""
export/writers.py — zapis rekordów zawodów (CSV / XLSX / JSON / PostgreSQL).

Wszystkie formaty mają ten sam, stały układ 14 kolumn (RECORD_COLUMNS).
Puste pola przodków zapisywane są jako pusty string, nigdy jako NULL.
"""

from __future__ import annotations

import json
from collections.abc import Sequence
from pathlib import Path

import pandas as pd
import psycopg2.extras
from openpyxl.cell.cell import ILLEGAL_CHARACTERS_RE

from data_model.occupations import RECORD_COLUMNS, OccupationRecord

XLSX_SHEET = "occupations"

# Kolumny tabeli occupation_record w kolejności RECORD_COLUMNS.
DB_COLUMNS: list[str] = [
    "major_code", "major_title", "major_description",
    "sub_major_code", "sub_major_title", "sub_major_description",
    "minor_code", "minor_title", "minor_description",
    "unit_code", "unit_title", "unit_description",
    "occupation_code", "occupation_title",
]


# ---------------------------------------------------------------------------
# Pliki
# ---------------------------------------------------------------------------

def records_frame(records: Sequence[OccupationRecord]) -> pd.DataFrame:
    """DataFrame z kolumnami RECORD_COLUMNS (także dla pustej listy)."""
    return pd.DataFrame(
        [r.as_tuple() for r in records],
        columns=RECORD_COLUMNS,
        dtype=str,
    )


def write_csv(records: Sequence[OccupationRecord], path: Path) -> None:
    records_frame(records).to_csv(path, index=False, encoding="utf-8")


def write_xlsx(records: Sequence[OccupationRecord], path: Path) -> None:
    # openpyxl odrzuca znaki sterujące ASCII, które zostawia ekstrakcja PDF
    frame = records_frame(records).replace(ILLEGAL_CHARACTERS_RE, "", regex=True)
    frame.to_excel(path, index=False, sheet_name=XLSX_SHEET, engine="openpyxl")


def write_json(records: Sequence[OccupationRecord], path: Path) -> None:
    data = [r.to_row() for r in records]
    path.write_text(json.dumps(data, ensure_ascii=False, indent=2), encoding="utf-8")


# ---------------------------------------------------------------------------
# Baza danych
# ---------------------------------------------------------------------------

_DELETE_SQL = "DELETE FROM occupation_record WHERE doc_id = %s"

_INSERT_SQL = (
    "INSERT INTO occupation_record (doc_id, position, "
    + ", ".join(DB_COLUMNS)
    + ") VALUES %s"
)


def write_db(records: Sequence[OccupationRecord], doc_id: str, conn) -> int:
    """
    Zastępuje wszystkie wiersze dokumentu doc_id w jednej transakcji.
    Kolumna position zachowuje kolejność emisji. Zwraca liczbę wierszy.
    """
    rows = [
        (doc_id, position, *r.as_tuple())
        for position, r in enumerate(records, start=1)
    ]
    with conn, conn.cursor() as cur:
        cur.execute(_DELETE_SQL, (doc_id,))
        if rows:
            psycopg2.extras.execute_values(cur, _INSERT_SQL, rows)
    return len(rows)
