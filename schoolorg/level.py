from __future__ import annotations

from schoolorg.group import Group


class Level:
    """A proficiency tier within an area, owning an ordered list of groups."""

    def __init__(self, name: str, description: str) -> None:
        self._name = name
        self._description = description
        self._groups: list[Group] = []

    @property
    def name(self) -> str:
        return self._name

    @property
    def description(self) -> str:
        return self._description

    @property
    def groups(self) -> list[Group]:
        return self._groups

    def add_group(self, group: Group) -> None:
        self._groups.append(group)

    def remove_group(self, index: int) -> None:
        # negative indices are out of range too
        if not (0 <= index < len(self._groups)):
            return
        del self._groups[index]

    def __repr__(self) -> str:
        return f"Level({self._name!r}, groups={len(self._groups)})"
