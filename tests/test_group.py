"""
Unit tests for Group: status, student removal by index, performance view.
"""

import unittest

from schoolorg.group import Group
from schoolorg.model import GroupStatus
from schoolorg.student import Student


def _rated(name: str, mark: float) -> Student:
    # one grade + one present visit -> rating (mark + 100) / 2
    s = Student(name, "X", 2000)
    s.set_grade("exam", mark)
    s.set_visit(True)
    return s


class TestGroupStatus(unittest.TestCase):
    def test_new_group_is_draft(self) -> None:
        g = Group("Frontend", "Basic", "Programming")
        self.assertEqual(g.status, GroupStatus.DRAFT)

    def test_any_transition_is_accepted(self) -> None:
        g = Group("Frontend", "Basic", "Programming")
        g.set_status(GroupStatus.FINISHED)
        self.assertEqual(g.status, GroupStatus.FINISHED)
        g.set_status(GroupStatus.DRAFT)
        self.assertEqual(g.status, GroupStatus.DRAFT)
        g.set_status(GroupStatus.ACTIVE)
        self.assertEqual(g.status, GroupStatus.ACTIVE)

    def test_status_values(self) -> None:
        self.assertEqual([s.value for s in GroupStatus], ["draft", "active", "finished"])


class TestGroupLabels(unittest.TestCase):
    def test_labels_are_plain_strings(self) -> None:
        g = Group("Frontend", "Basic", "Programming")
        self.assertEqual(g.area, "Programming")
        g.direction_name = "Fullstack"
        g.level_name = "Advanced"
        self.assertEqual((g.direction_name, g.level_name), ("Fullstack", "Advanced"))

    def test_area_is_read_only(self) -> None:
        g = Group("Frontend", "Basic", "Programming")
        with self.assertRaises(AttributeError):
            g.area = "Design"  # type: ignore[misc]


class TestRemoveStudent(unittest.TestCase):
    def setUp(self) -> None:
        self.group = Group("Frontend", "Basic", "Programming")
        self.s1 = Student("A", "One", 2000)
        self.s2 = Student("B", "Two", 2000)
        self.s3 = Student("C", "Three", 2000)
        for s in (self.s1, self.s2, self.s3):
            self.group.add_student(s)

    def test_valid_index_removes_that_student(self) -> None:
        self.group.remove_student(1)
        self.assertEqual(self.group.students, [self.s1, self.s3])

    def test_out_of_range_is_ignored(self) -> None:
        for index in (-1, 3, 100):
            self.group.remove_student(index)
        self.assertEqual(self.group.students, [self.s1, self.s2, self.s3])


class TestShowPerformance(unittest.TestCase):
    def test_descending_and_stable(self) -> None:
        g = Group("Frontend", "Basic", "Programming")
        s1 = _rated("S1", 0)  # 50
        s2 = _rated("S2", 80)  # 90
        s3 = _rated("S3", 0)  # 50
        for s in (s1, s2, s3):
            g.add_student(s)

        self.assertEqual(g.show_performance(), [s2, s1, s3])
        # internal order untouched
        self.assertEqual(g.students, [s1, s2, s3])

    def test_returns_new_list(self) -> None:
        g = Group("Frontend", "Basic", "Programming")
        g.add_student(_rated("S1", 10))
        ranking = g.show_performance()
        ranking.clear()
        self.assertEqual(len(g.students), 1)

    def test_students_without_grades_go_last(self) -> None:
        g = Group("Frontend", "Basic", "Programming")
        no_grades = Student("N", "None", 2000)
        no_grades.set_visit(True)
        graded = _rated("G", 10)
        g.add_student(no_grades)
        g.add_student(graded)
        self.assertEqual(g.show_performance(), [graded, no_grades])


if __name__ == "__main__":
    unittest.main()
