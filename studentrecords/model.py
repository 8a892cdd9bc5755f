"""
Central data model definitions used across the project.

This module defines the record types stored by the repositories so that:
- all modules share the same field names
- the JSON files use the same keys as the Python attributes
- every storable record exposes its lookup key as `record_id`

Enums are persisted by member name ("ComputerScience", "MSC"), never by value.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional, List


class Department(Enum):
    ComputerScience = 0
    BBA = 1
    English = 2


class Degree(Enum):
    BSC = 0
    BBA = 1
    BA = 2
    MSC = 3
    MBA = 4
    MA = 5


def _opt_str(x: Any) -> Optional[str]:
    return None if x is None else str(x)


def _required_str(d: dict[str, Any], key: str) -> str:
    # KeyError when missing, TypeError for null or any non-string
    raw = d[key]
    if not isinstance(raw, str):
        raise TypeError(f"{key!r} must be a string, got {type(raw).__name__}")
    return raw


def _enum_by_name(enum_cls: type[Any], d: dict[str, Any], key: str, default: Enum) -> Any:
    """
    Look up an enum member by name. Missing key means default;
    anything that is not a known member name raises.
    """
    raw = d.get(key, default.name)
    if not isinstance(raw, str):
        raise TypeError(f"{key!r} must be a member name, got {type(raw).__name__}")
    return enum_cls[raw]


def _list_of(d: dict[str, Any], key: str) -> list[Any]:
    """
    Return d[key] as a list. Missing or null means empty.
    Anything else that is not a list is a shape mismatch.
    """
    raw = d.get(key)
    if raw is None:
        return []
    if not isinstance(raw, list):
        raise TypeError(f"{key!r} must be a list, got {type(raw).__name__}")
    return raw


def _credits(d: dict[str, Any]) -> int:
    raw = d.get("number_of_credits", 0)
    # bool is an int subclass, but true/false is not a credit count
    if isinstance(raw, bool) or not isinstance(raw, int):
        raise TypeError(f"'number_of_credits' must be an integer, got {raw!r}")
    return raw


@dataclass
class Semester:
    """
    One academic term, e.g. Semester("Spring", "2024") -> "Spring 2024".
    """

    semester_code: Optional[str] = None
    year: Optional[str] = None

    def __str__(self) -> str:
        return f"{self.semester_code or ''} {self.year or ''}"

    def to_dict(self) -> dict[str, Any]:
        return {"semester_code": self.semester_code, "year": self.year}

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> Semester:
        return cls(semester_code=_opt_str(d.get("semester_code")), year=_opt_str(d.get("year")))


@dataclass
class Course:
    """
    Represents one course offering.

    instructor_name is free text and does not reference an Instructor record.
    """

    course_id: Optional[str] = None
    course_name: Optional[str] = None
    instructor_name: Optional[str] = None
    number_of_credits: int = 0

    @property
    def record_id(self) -> Optional[str]:
        return self.course_id

    def to_dict(self) -> dict[str, Any]:
        return {
            "course_id": self.course_id,
            "course_name": self.course_name,
            "instructor_name": self.instructor_name,
            "number_of_credits": self.number_of_credits,
        }

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> Course:
        return cls(
            course_id=_opt_str(d.get("course_id")),
            course_name=_opt_str(d.get("course_name")),
            instructor_name=_opt_str(d.get("instructor_name")),
            number_of_credits=_credits(d),
        )


@dataclass
class Person:
    """
    Name fields shared by students and instructors.
    """

    first_name: Optional[str] = None
    middle_name: Optional[str] = None
    last_name: Optional[str] = None

    @property
    def full_name(self) -> str:
        parts = [p.strip() for p in (self.first_name, self.middle_name, self.last_name) if p and p.strip()]
        return " ".join(parts)

    def _names_to_dict(self) -> dict[str, Any]:
        return {"first_name": self.first_name, "middle_name": self.middle_name, "last_name": self.last_name}


@dataclass
class Student(Person):
    """
    Represents one student as stored in students.json.

    courses_in_semester keeps insertion order; the same course may appear twice.
    """

    student_id: str = ""
    joining_batch: Optional[Semester] = None
    department: Department = Department.ComputerScience
    degree: Degree = Degree.BSC
    semesters_attended: List[Semester] = field(default_factory=list)
    courses_in_semester: List[Course] = field(default_factory=list)

    @property
    def record_id(self) -> str:
        return self.student_id

    def to_dict(self) -> dict[str, Any]:
        out = self._names_to_dict()
        out.update(
            {
                "student_id": self.student_id,
                "joining_batch": self.joining_batch.to_dict() if self.joining_batch else None,
                "department": self.department.name,
                "degree": self.degree.name,
                "semesters_attended": [s.to_dict() for s in self.semesters_attended],
                "courses_in_semester": [c.to_dict() for c in self.courses_in_semester],
            }
        )
        return out

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> Student:
        """
        Build a Student from its JSON dict.

        Raises KeyError for a missing student_id or an unknown enum label,
        TypeError for values of the wrong type (null IDs, numeric enums).
        """
        batch = d.get("joining_batch")
        return cls(
            first_name=_opt_str(d.get("first_name")),
            middle_name=_opt_str(d.get("middle_name")),
            last_name=_opt_str(d.get("last_name")),
            student_id=_required_str(d, "student_id"),
            joining_batch=Semester.from_dict(batch) if batch is not None else None,
            department=_enum_by_name(Department, d, "department", Department.ComputerScience),
            degree=_enum_by_name(Degree, d, "degree", Degree.BSC),
            semesters_attended=[Semester.from_dict(x) for x in _list_of(d, "semesters_attended")],
            courses_in_semester=[Course.from_dict(x) for x in _list_of(d, "courses_in_semester")],
        )


@dataclass
class Instructor(Person):
    """
    Represents one instructor as stored in instructors.json.
    """

    instructor_id: str = ""
    department: Department = Department.ComputerScience
    courses_taught: List[Course] = field(default_factory=list)

    @property
    def record_id(self) -> str:
        return self.instructor_id

    def to_dict(self) -> dict[str, Any]:
        out = self._names_to_dict()
        out.update(
            {
                "instructor_id": self.instructor_id,
                "department": self.department.name,
                "courses_taught": [c.to_dict() for c in self.courses_taught],
            }
        )
        return out

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> Instructor:
        return cls(
            first_name=_opt_str(d.get("first_name")),
            middle_name=_opt_str(d.get("middle_name")),
            last_name=_opt_str(d.get("last_name")),
            instructor_id=_required_str(d, "instructor_id"),
            department=_enum_by_name(Department, d, "department", Department.ComputerScience),
            courses_taught=[Course.from_dict(x) for x in _list_of(d, "courses_taught")],
        )
