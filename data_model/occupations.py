"""
data_model/occupations.py — model klasyfikacji zawodów (KZiS).

Hierarchia: grupa wielka → duża → średnia → elementarna → zawód.
Cztery poziomy nagłówków (HeaderGroup) rozpoznawane są po długości kodu
(1–4 cyfry); zawód ma zawsze kod 6-cyfrowy.

OccupationRecord to jedyny byt widoczny na zewnątrz: jeden spłaszczony wiersz
na każdy kod zawodu, z kontekstem wszystkich czterech przodków.
"""

from __future__ import annotations

from dataclasses import astuple, dataclass

# Głębokość nagłówka (= liczba cyfr kodu) → nazwa poziomu.
DEPTH_NAMES: dict[int, str] = {
    1: "major",
    2: "sub-major",
    3: "minor",
    4: "unit",
}

# Stała, uporządkowana lista kolumn wyjściowych (CSV / XLSX / JSON / DB).
RECORD_COLUMNS: list[str] = [
    "Major Group Code",
    "Major Group Title",
    "Major Group Description",
    "Sub-Major Group Code",
    "Sub-Major Group Title",
    "Sub-Major Group Description",
    "Minor Group Code",
    "Minor Group Title",
    "Minor Group Description",
    "Unit Group Code",
    "Unit Group Title",
    "Unit Group Description",
    "Occupation Code",
    "Occupation Title",
]


@dataclass(frozen=True, slots=True)
class HeaderGroup:
    """
    Nagłówek jednego z czterech poziomów hierarchii.

    - code:        1–4 cyfry; długość kodu = głębokość
    - title:       tytuł, scalony z linii kontynuacji
    - description: opis (może być pusty)
    """
    code: str
    title: str
    description: str = ""

    @property
    def depth(self) -> int:
        return len(self.code)


@dataclass(frozen=True, slots=True)
class OccupationRecord:
    """Spłaszczony wiersz wynikowy: 4 × (kod, tytuł, opis) przodków + zawód."""
    major_code:            str = ""
    major_title:           str = ""
    major_description:     str = ""
    sub_major_code:        str = ""
    sub_major_title:       str = ""
    sub_major_description: str = ""
    minor_code:            str = ""
    minor_title:           str = ""
    minor_description:     str = ""
    unit_code:             str = ""
    unit_title:            str = ""
    unit_description:      str = ""
    occupation_code:       str = ""
    occupation_title:      str = ""

    def as_tuple(self) -> tuple[str, ...]:
        """Wartości w kolejności RECORD_COLUMNS."""
        return astuple(self)

    def to_row(self) -> dict[str, str]:
        """Słownik kolumna → wartość, w kolejności RECORD_COLUMNS."""
        return dict(zip(RECORD_COLUMNS, self.as_tuple()))
