"""
Student entity: grades, attendance and the derived performance rating.

Performance rating:
    (average grade + attendance percentage) / 2
and 0 when no grades have been recorded at all.
"""

from __future__ import annotations

from datetime import date


def current_year() -> int:
    """
    Return the current calendar year from the system clock.

    Kept as a function so tests can patch the clock.
    """
    return date.today().year


class Student:
    def __init__(self, first_name: str, last_name: str, birth_year: int) -> None:
        self._first_name = first_name
        self._last_name = last_name
        self._birth_year = birth_year

        self._grades: dict[str, float] = {}
        self._visits: list[bool] = []

    @property
    def first_name(self) -> str:
        return self._first_name

    @property
    def last_name(self) -> str:
        return self._last_name

    @property
    def birth_year(self) -> int:
        return self._birth_year

    @property
    def full_name(self) -> str:
        return f"{self._last_name} {self._first_name}"

    @full_name.setter
    def full_name(self, value: str) -> None:
        """
        Split on the first whitespace run into (last name, first name).

        Missing parts become "", e.g. "Smith" -> last="Smith", first="".
        Everything after the first space stays in the first name.
        """
        parts = value.split(maxsplit=1)
        self._last_name = parts[0] if len(parts) > 0 else ""
        self._first_name = parts[1] if len(parts) > 1 else ""

    @property
    def age(self) -> int:
        # no month/day precision
        return current_year() - self._birth_year

    @property
    def grades(self) -> dict[str, float]:
        return dict(self._grades)

    @property
    def visits(self) -> list[bool]:
        return list(self._visits)

    def set_grade(self, work_name: str, mark: float) -> None:
        """Record a mark for a piece of work; the same work name overwrites."""
        self._grades[work_name] = mark

    def set_visit(self, present: bool) -> None:
        self._visits.append(present)

    def get_performance_rating(self) -> float:
        """
        Blend the average grade with the attendance percentage.

        No grades -> 0, regardless of attendance.
        No attendance records -> attendance contributes 0.
        """
        marks = list(self._grades.values())
        if not marks:
            return 0

        average_grade = sum(marks) / len(marks)

        if self._visits:
            attendance_percentage = sum(1 for present in self._visits if present) / len(self._visits) * 100
        else:
            attendance_percentage = 0

        return (average_grade + attendance_percentage) / 2

    def __repr__(self) -> str:
        return f"Student({self.full_name!r}, birth_year={self._birth_year})"
