"""
School: root of the hierarchy.

Holds two independent collections:
- areas (keyed by name for removal)
- lecturers (keyed by contacts.email for removal)

Neither collection checks for duplicates on insert. Removal filters the
list in place, so every match goes at once and the list returned by the
`areas` / `lecturers` properties stays the live backing list.
"""

from __future__ import annotations

from schoolorg.area import Area
from schoolorg.model import Lecturer


class School:
    def __init__(self) -> None:
        self._areas: list[Area] = []
        self._lecturers: list[Lecturer] = []

    @property
    def areas(self) -> list[Area]:
        return self._areas

    @property
    def lecturers(self) -> list[Lecturer]:
        return self._lecturers

    def add_area(self, area: Area) -> None:
        self._areas.append(area)

    def remove_area(self, area_name: str) -> None:
        self._areas[:] = [a for a in self._areas if a.name != area_name]

    def add_lecturer(self, lecturer: Lecturer) -> None:
        self._lecturers.append(lecturer)

    def remove_lecturer(self, email: str) -> None:
        self._lecturers[:] = [lec for lec in self._lecturers if lec.contacts.email != email]

    def __repr__(self) -> str:
        return f"School(areas={len(self._areas)}, lecturers={len(self._lecturers)})"
