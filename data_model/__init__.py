"""
data_model — struktury danych klasyfikacji zawodów.

Użycie:
  from data_model import HeaderGroup, OccupationRecord, RECORD_COLUMNS

Moduły:
  occupations — HeaderGroup, OccupationRecord, RECORD_COLUMNS, DEPTH_NAMES

Mapowanie na kolumny wyjściowe:
  4 × (Code, Title, Description) dla grup wielkiej / dużej / średniej /
  elementarnej + Occupation Code, Occupation Title → 14 kolumn
"""

from .occupations import (
    DEPTH_NAMES,
    RECORD_COLUMNS,
    HeaderGroup,
    OccupationRecord,
)

__all__ = [
    "DEPTH_NAMES",
    "RECORD_COLUMNS",
    "HeaderGroup",
    "OccupationRecord",
]
