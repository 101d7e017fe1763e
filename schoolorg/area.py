from __future__ import annotations

from schoolorg.level import Level


class Area:
    """Top-level subject category owning an ordered list of levels."""

    def __init__(self, name: str) -> None:
        self._name = name
        self._levels: list[Level] = []

    @property
    def name(self) -> str:
        return self._name

    @property
    def levels(self) -> list[Level]:
        return self._levels

    def add_level(self, level: Level) -> None:
        self._levels.append(level)

    def remove_level(self, level_name: str) -> None:
        """Remove every level called `level_name` (no-op if none match)."""
        self._levels[:] = [lv for lv in self._levels if lv.name != level_name]

    def __repr__(self) -> str:
        return f"Area({self._name!r}, levels={len(self._levels)})"
