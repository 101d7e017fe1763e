"""
CLI (Command Line Interface).

Quick terminal commands on top of the in-memory school model, e.g.:

    schoolorg overview
    schoolorg performance [--area Programming]
    schoolorg rating --grade html=90 --grade css=80 --visits 1,0,1,1

Note:
- There is no persistence: overview/performance work on the built-in
  demo school from schoolorg/sample.py
- Output is printed with rich
"""

from __future__ import annotations

import argparse

from rich.console import Console
from rich.markup import escape

from schoolorg.report import print_group_performance, print_school_overview
from schoolorg.sample import build_sample_school
from schoolorg.school import School
from schoolorg.student import Student

console = Console()

_TRUE_VISITS = {"1", "y", "yes", "true", "present"}
_FALSE_VISITS = {"0", "n", "no", "false", "absent"}


def parse_grade(text: str) -> tuple[str, float]:
    """
    Parse 'WORK=MARK' into (work_name, mark).

    Raises ValueError for a missing '=', an empty work name or a
    non-numeric mark. The mark itself is not range-checked.
    """
    work, sep, mark = text.partition("=")
    work = work.strip()
    if not sep or not work:
        raise ValueError(f"Invalid grade (expected WORK=MARK): {text!r}")
    try:
        value = float(mark.strip())
    except ValueError:
        raise ValueError(f"Invalid mark in grade: {text!r}") from None
    return work, value


def parse_visits(text: str) -> list[bool]:
    """
    Parse a comma separated attendance list like '1,0,yes,no'.

    Blank input -> no records. Raises ValueError on unknown tokens.
    """
    out: list[bool] = []
    for raw in text.split(","):
        token = raw.strip().lower()
        if not token:
            continue
        if token in _TRUE_VISITS:
            out.append(True)
        elif token in _FALSE_VISITS:
            out.append(False)
        else:
            raise ValueError(f"Invalid visit value: {raw.strip()!r}")
    return out


def _cmd_overview(args: argparse.Namespace, school: School) -> int:
    """
    Print the school tree and the lecturer list.
    """
    print_school_overview(school, console)
    return 0


def _cmd_performance(args: argparse.Namespace, school: School) -> int:
    """
    Print the performance ranking of every group (optionally one area only).
    """
    area_name = (args.area or "").strip()
    areas = school.areas
    if area_name:
        areas = [a for a in school.areas if a.name.lower() == area_name.lower()]
        if not areas:
            console.print(f"Unknown area: {escape(area_name)}")
            return 1

    shown = 0
    for area in areas:
        for level in area.levels:
            for group in level.groups:
                print_group_performance(group, console)
                shown += 1

    if not shown:
        console.print("No groups.")
    return 0


def _cmd_rating(args: argparse.Namespace) -> int:
    """
    Build an ad-hoc student from --grade/--visits and print the rating.
    """
    try:
        grades = [parse_grade(g) for g in (args.grade or [])]
        visits = parse_visits(args.visits or "")
    except ValueError as exc:
        console.print(escape(str(exc)))
        return 1

    student = Student("", "", 0)
    for work, mark in grades:
        student.set_grade(work, mark)
    for present in visits:
        student.set_visit(present)

    rating = student.get_performance_rating()
    console.print(f"Rating: {rating:.1f} (grades: {len(student.grades)}, visits: {len(student.visits)})")
    return 0


def build_parser() -> argparse.ArgumentParser:
    """
    Build the argparse CLI parser with sub-commands.
    """
    parser = argparse.ArgumentParser(prog="schoolorg", description="SchoolOrg CLI")
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("overview", help="Show areas, levels, groups and lecturers of the demo school")

    p_perf = sub.add_parser("performance", help="Show group performance rankings")
    p_perf.add_argument("--area", type=str, default=None, help="Only groups of this area (e.g. Programming)")

    p_rating = sub.add_parser("rating", help="Compute a performance rating")
    p_rating.add_argument(
        "--grade", action="append", default=[], metavar="WORK=MARK", help="Grade for a piece of work (repeatable)"
    )
    p_rating.add_argument("--visits", type=str, default="", help="Attendance list, e.g. 1,0,1,1")

    return parser


def main(argv: list[str] | None = None) -> None:
    """
    CLI entry point. Parses args, dispatches to command handlers,
    and exits via SystemExit with a return code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command == "rating":
        raise SystemExit(_cmd_rating(args))

    school = build_sample_school()

    if args.command == "overview":
        raise SystemExit(_cmd_overview(args, school))
    if args.command == "performance":
        raise SystemExit(_cmd_performance(args, school))

    raise SystemExit(2)
