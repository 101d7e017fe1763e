"""
Group: a cohort of students under a direction / level / area label.

`area`, `direction_name` and `level_name` are plain strings copied at
construction time. They are not references to Area/Level objects and can
drift from the real hierarchy.
"""

from __future__ import annotations

from schoolorg.model import GroupStatus
from schoolorg.student import Student


class Group:
    def __init__(self, direction_name: str, level_name: str, area: str) -> None:
        self.direction_name = direction_name
        self.level_name = level_name
        self._area = area
        self._status = GroupStatus.DRAFT
        self._students: list[Student] = []

    @property
    def area(self) -> str:
        return self._area

    @property
    def status(self) -> GroupStatus:
        return self._status

    @property
    def students(self) -> list[Student]:
        return self._students

    def set_status(self, status: GroupStatus) -> None:
        # any transition is accepted, including finished -> draft
        self._status = status

    def add_student(self, student: Student) -> None:
        self._students.append(student)

    def remove_student(self, index: int) -> None:
        """Remove the student at `index`; out-of-range indices are ignored."""
        if not (0 <= index < len(self._students)):
            return
        del self._students[index]

    def show_performance(self) -> list[Student]:
        """
        Return a new list of students ordered by descending rating.

        sorted() is stable (also with reverse=True), so students with the
        same rating keep their original relative order.
        """
        return sorted(self._students, key=lambda s: s.get_performance_rating(), reverse=True)

    def __repr__(self) -> str:
        return (
            f"Group({self.direction_name!r}, {self.level_name!r}, {self._area!r}, "
            f"status={self._status.value}, students={len(self._students)})"
        )
