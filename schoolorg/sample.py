"""
Built-in demo school used by the CLI.

There is no persistence layer, so the CLI works on this in-memory school.
Birth years are relative to the current year so ages stay stable.
"""

from __future__ import annotations

from schoolorg.area import Area
from schoolorg.group import Group
from schoolorg.level import Level
from schoolorg.model import GroupStatus, Lecturer, LecturerContacts
from schoolorg.school import School
from schoolorg.student import Student, current_year


def _student(first: str, last: str, age: int, grades: dict[str, float], visits: str) -> Student:
    # visits: "1" = present, "0" = absent
    s = Student(first, last, current_year() - age)
    for work, mark in grades.items():
        s.set_grade(work, mark)
    for ch in visits:
        s.set_visit(ch == "1")
    return s


def build_sample_school() -> School:
    school = School()

    programming = Area("Programming")

    basic = Level("Basic", "Fundamentals of programming")
    frontend = Group("Frontend", "Basic", "Programming")
    frontend.set_status(GroupStatus.ACTIVE)
    frontend.add_student(_student("Anna", "Kovalenko", 19, {"html": 90, "css": 84, "js": 95}, "11110111"))
    frontend.add_student(_student("Ivan", "Petrenko", 22, {"html": 70, "css": 65}, "10101110"))
    frontend.add_student(_student("Olena", "Shevchenko", 20, {}, "11111111"))
    basic.add_group(frontend)

    advanced = Level("Advanced", "Architecture and large codebases")
    backend = Group("Backend", "Advanced", "Programming")
    backend.add_student(_student("Taras", "Bondar", 25, {"api": 88, "db": 92}, "1111"))
    backend.add_student(_student("Maria", "Melnyk", 24, {"api": 100, "db": 76}, "1101"))
    advanced.add_group(backend)

    programming.add_level(basic)
    programming.add_level(advanced)

    design = Area("Design")
    intro = Level("Intro", "Visual design basics")
    ui = Group("UI/UX", "Intro", "Design")
    ui.set_status(GroupStatus.FINISHED)
    ui.add_student(_student("Sofia", "Tkachenko", 21, {"wireframes": 80, "prototype": 100}, "1011"))
    intro.add_group(ui)
    design.add_level(intro)

    school.add_area(programming)
    school.add_area(design)

    school.add_lecturer(
        Lecturer(
            name="Oleh",
            surname="Moroz",
            position="Senior Developer",
            company="Acme Software",
            experience=8,
            courses=["Frontend Basics", "JavaScript"],
            contacts=LecturerContacts(email="oleh.moroz@example.com", phone="+380501112233"),
        )
    )
    school.add_lecturer(
        Lecturer(
            name="Iryna",
            surname="Lysenko",
            position="Product Designer",
            company="Pixel Studio",
            experience=5,
            courses=["UI/UX"],
            contacts=LecturerContacts(email="iryna.lysenko@example.com", phone="+380672223344"),
        )
    )

    return school
