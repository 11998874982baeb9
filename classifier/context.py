"""
classifier/context.py — rejestr kontekstu (ostatni nagłówek na każdym poziomie).

Rejestr jest niemutowalny: with_group() zwraca nową instancję z podmienionym
JEDNYM slotem (tym o głębokości nagłówka). Sloty nigdy nie są czyszczone —
tekst źródłowy nie zawiera sygnału „koniec grupy", więc zawód może
odziedziczyć przodka z wcześniejszej, niepowiązanej sekcji.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass

from data_model.occupations import HeaderGroup, OccupationRecord

# Głębokość → nazwa pola w ContextRegister.
_SLOTS: dict[int, str] = {
    1: "major",
    2: "sub_major",
    3: "minor",
    4: "unit",
}


@dataclass(frozen=True, slots=True)
class ContextRegister:
    major:     HeaderGroup | None = None
    sub_major: HeaderGroup | None = None
    minor:     HeaderGroup | None = None
    unit:      HeaderGroup | None = None

    def slot(self, depth: int) -> HeaderGroup | None:
        return getattr(self, _SLOTS[depth])

    def with_group(self, group: HeaderGroup) -> ContextRegister:
        """Nadpisuje slot o głębokości group.depth; pozostałe bez zmian."""
        return dataclasses.replace(self, **{_SLOTS[group.depth]: group})

    def record_for(self, code: str, title: str) -> OccupationRecord:
        """Buduje wiersz wynikowy; pusty slot daje puste stringi."""
        fields: list[str] = []
        for depth in _SLOTS:
            group = self.slot(depth)
            if group is None:
                fields.extend(("", "", ""))
            else:
                fields.extend((group.code, group.title, group.description))
        return OccupationRecord(*fields, code, title)
