"""
export — zapis spłaszczonych rekordów zawodów.

Publiczne API:
  records_frame(records)              → pandas.DataFrame
  write_csv / write_xlsx / write_json (records, path)
  write_db(records, doc_id, conn)     → liczba zapisanych wierszy
  RECORD_COLUMNS, DB_COLUMNS
"""

from data_model.occupations import RECORD_COLUMNS

from .writers import (
    DB_COLUMNS,
    XLSX_SHEET,
    records_frame,
    write_csv,
    write_db,
    write_json,
    write_xlsx,
)

__all__ = [
    "RECORD_COLUMNS",
    "DB_COLUMNS",
    "XLSX_SHEET",
    "records_frame",
    "write_csv",
    "write_db",
    "write_json",
    "write_xlsx",
]
