"""
Course catalog and semester enrollment helpers.

The catalog is a fixed list of courses with no file behind it.
Enrollment only changes the Student object in memory; callers persist
via the student repository's save_changes().
"""

from __future__ import annotations

from typing import Iterable, Optional

from studentrecords.model import Course, Semester, Student


def get_all_courses() -> list[Course]:
    """
    Return a fresh list of all offered courses.
    """
    return [
        Course(
            course_id="CSC101",
            course_name="Introduction to Computer Science",
            instructor_name="Dr. Smith",
            number_of_credits=3,
        ),
        Course(course_id="ENG201", course_name="English Literature", instructor_name="Prof. Johnson", number_of_credits=4),
        Course(course_id="BBA301", course_name="Business Management", instructor_name="Mr. Brown", number_of_credits=3),
    ]


def get_course_by_id(courses: Iterable[Course], course_id: str) -> Optional[Course]:
    cid = course_id.strip()
    for c in courses:
        if c.course_id == cid:
            return c
    return None


def courses_not_taken(student: Student, courses: Iterable[Course]) -> list[Course]:
    taken = {c.course_id for c in student.courses_in_semester}
    return [c for c in courses if c.course_id not in taken]


def enroll_in_semester(
    student: Student, semester: Semester, course_ids: Iterable[str], courses: Iterable[Course]
) -> tuple[list[str], list[str]]:
    """
    Record `semester` as attended and append the requested catalog courses.

    Returns (added, missing) course IDs in request order.
    Blank IDs are skipped; duplicates are not filtered.
    """
    if semester not in student.semesters_attended:
        student.semesters_attended.append(semester)

    catalog = list(courses)
    added: list[str] = []
    missing: list[str] = []
    for raw in course_ids:
        cid = raw.strip()
        if not cid:
            continue
        course = get_course_by_id(catalog, cid)
        if course is None:
            missing.append(cid)
            continue
        student.courses_in_semester.append(course)
        added.append(cid)

    return added, missing
