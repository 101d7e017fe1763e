"""
SchoolOrg: in-memory model of a school's organizational hierarchy.

    School -> Area -> Level -> Group -> Student

plus a flat list of Lecturer records kept by the School.
"""

from schoolorg.area import Area
from schoolorg.group import Group
from schoolorg.level import Level
from schoolorg.model import GroupStatus, Lecturer, LecturerContacts
from schoolorg.school import School
from schoolorg.student import Student

__all__ = [
    "Area",
    "Group",
    "GroupStatus",
    "Lecturer",
    "LecturerContacts",
    "Level",
    "School",
    "Student",
]
