"""
Unit tests for the Level and Area containers.

Contract:
- Level.remove_group(index) is bounds-checked, invalid indices are ignored
- Area.remove_level(name) removes every match and is idempotent
"""

import unittest

from schoolorg.area import Area
from schoolorg.group import Group
from schoolorg.level import Level


class TestLevel(unittest.TestCase):
    def setUp(self) -> None:
        self.level = Level("Basic", "Fundamentals")
        self.groups = [Group(f"G{i}", "Basic", "Programming") for i in range(4)]
        for g in self.groups:
            self.level.add_group(g)

    def test_name_and_description(self) -> None:
        self.assertEqual(self.level.name, "Basic")
        self.assertEqual(self.level.description, "Fundamentals")

    def test_remove_each_valid_index(self) -> None:
        for i in range(len(self.groups)):
            level = Level("Basic", "Fundamentals")
            for g in self.groups:
                level.add_group(g)
            level.remove_group(i)
            self.assertEqual(len(level.groups), len(self.groups) - 1)
            self.assertNotIn(self.groups[i], level.groups)
            expected = self.groups[:i] + self.groups[i + 1 :]
            self.assertEqual(level.groups, expected)

    def test_remove_out_of_range_is_noop(self) -> None:
        for index in (-1, -5, 4, 10):
            self.level.remove_group(index)
        self.assertEqual(self.level.groups, self.groups)

    def test_groups_is_live_list(self) -> None:
        groups = self.level.groups
        self.level.remove_group(0)
        self.assertIs(groups, self.level.groups)
        self.assertEqual(len(groups), 3)


class TestArea(unittest.TestCase):
    def test_add_and_remove_level(self) -> None:
        area = Area("Programming")
        basic = Level("Basic", "")
        advanced = Level("Advanced", "")
        area.add_level(basic)
        area.add_level(advanced)

        area.remove_level("Basic")
        self.assertEqual(area.levels, [advanced])

    def test_remove_level_removes_duplicates_and_is_idempotent(self) -> None:
        area = Area("Programming")
        keep = Level("Advanced", "")
        area.add_level(Level("Basic", "first"))
        area.add_level(keep)
        area.add_level(Level("Basic", "second"))

        area.remove_level("Basic")
        once = list(area.levels)
        area.remove_level("Basic")
        self.assertEqual(once, [keep])
        self.assertEqual(area.levels, once)

    def test_remove_unknown_level_is_noop(self) -> None:
        area = Area("Programming")
        basic = Level("Basic", "")
        area.add_level(basic)
        area.remove_level("Missing")
        self.assertEqual(area.levels, [basic])

    def test_name_is_read_only(self) -> None:
        area = Area("Programming")
        with self.assertRaises(AttributeError):
            area.name = "Design"  # type: ignore[misc]


if __name__ == "__main__":
    unittest.main()
