"""
Console reporting with rich.

Builds renderables (tables / trees) for:
- the school structure (areas -> levels -> groups)
- the lecturer list
- the performance ranking of a group

Builders return the renderable so callers (and tests) can print it to any
Console; the print_* helpers fall back to a default Console.

Names and other domain text are escaped before they reach rich, so only
the fixed styling here is interpreted as markup.
"""

from __future__ import annotations

from typing import Any, Iterable, Optional

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.tree import Tree

from schoolorg.group import Group
from schoolorg.model import GroupStatus, Lecturer
from schoolorg.school import School

STATUS_STYLE = {
    GroupStatus.DRAFT: "yellow",
    GroupStatus.ACTIVE: "green",
    GroupStatus.FINISHED: "dim",
}


def _format_rating(rating: float) -> str:
    return f"{rating:.1f}"


def _status_text(status: Any) -> str:
    # set_status() does not check its argument
    return str(getattr(status, "value", status))


def _group_label(group: Group) -> str:
    style = STATUS_STYLE.get(group.status, "white")
    count = len(group.students)
    noun = "student" if count == 1 else "students"
    return (
        f"[bold]{escape(group.direction_name)}[/] "
        f"[{style}]{escape(_status_text(group.status))}[/] | {count} {noun}"
    )


def school_tree(school: School) -> Tree:
    """
    Render areas -> levels -> groups as a tree.

    Groups are shown under the Level that owns them, not under their
    own `area` / `level_name` strings.
    """
    tree = Tree("[bold]School[/]")
    if not school.areas:
        tree.add("(no areas)")
        return tree

    for area in school.areas:
        area_node = tree.add(f"[bold cyan]{escape(area.name)}[/]")
        for level in area.levels:
            level_node = area_node.add(f"{escape(level.name)} [dim]- {escape(level.description)}[/]")
            for group in level.groups:
                level_node.add(_group_label(group))
    return tree


def lecturer_table(lecturers: Iterable[Lecturer]) -> Table:
    table = Table(title="Lecturers", box=box.SIMPLE)
    table.add_column("Name")
    table.add_column("Position")
    table.add_column("Company")
    table.add_column("Exp.", justify="right")
    table.add_column("Courses")
    table.add_column("Email")
    table.add_column("Phone")

    for lec in lecturers:
        table.add_row(
            escape(f"{lec.name} {lec.surname}"),
            escape(lec.position),
            escape(lec.company),
            str(lec.experience),
            escape(", ".join(lec.courses)),
            escape(lec.contacts.email),
            escape(lec.contacts.phone),
        )
    return table


def performance_table(group: Group) -> Table:
    """
    Ranking of the group's students, best rating first.
    """
    title = escape(f"{group.area} / {group.level_name} / {group.direction_name}")
    table = Table(title=title, box=box.SIMPLE)
    table.add_column("#", justify="right")
    table.add_column("Student")
    table.add_column("Age", justify="right")
    table.add_column("Rating", justify="right")

    for i, student in enumerate(group.show_performance(), start=1):
        table.add_row(
            str(i), escape(student.full_name), str(student.age), _format_rating(student.get_performance_rating())
        )
    return table


def print_school_overview(school: School, console: Optional[Console] = None) -> None:
    console = console or Console()
    console.print(school_tree(school))
    if school.lecturers:
        console.print(lecturer_table(school.lecturers))
    else:
        console.print("No lecturers.")


def print_group_performance(group: Group, console: Optional[Console] = None) -> None:
    console = console or Console()
    if not group.students:
        console.print(f"{escape(group.direction_name)}: no students.")
        return
    console.print(performance_table(group))
