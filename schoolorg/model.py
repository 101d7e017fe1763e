"""
Shared record types used across the school hierarchy.

This module defines the plain data shapes that carry no behavior:
- the lifecycle status of a group
- lecturer records and their contact details

Lecturers are stored by the School as a flat list and have no structural
link to areas, levels or groups.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import List


class GroupStatus(Enum):
    """Lifecycle status of a group. Transitions are not validated."""

    DRAFT = "draft"
    ACTIVE = "active"
    FINISHED = "finished"


@dataclass
class LecturerContacts:
    email: str
    phone: str


@dataclass
class Lecturer:
    """
    Represents one lecturer as kept by the school.

    The email inside `contacts` is the key used by School.remove_lecturer().
    """

    name: str
    surname: str
    position: str
    company: str
    experience: float
    courses: List[str]
    contacts: LecturerContacts
