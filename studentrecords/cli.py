"""
CLI (Command Line Interface).

This module provides quick terminal commands for scripting and testing, e.g.:

    studentrecords list [--instructors]
    studentrecords show <id> [--instructor]
    studentrecords delete <id> [--instructor]
    studentrecords add-student <id> --first Ada --department ComputerScience --degree BSC
    studentrecords add-instructor <id> --first Alan --department ComputerScience
    studentrecords enroll <id> --semester-code Spring --year 2024 CSC101 ENG201
    studentrecords courses
    studentrecords interactive

Note:
- The interactive UI lives in studentrecords/interactive.py
- Running without a command starts the interactive UI
- This CLI prints plain text (no rich formatting)
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from rich.logging import RichHandler

from studentrecords.catalog import enroll_in_semester, get_all_courses
from studentrecords.model import Degree, Department, Instructor, Semester, Student
from studentrecords.storage import (
    INSTRUCTORS_FILE,
    STUDENTS_FILE,
    JsonRepository,
    RepositoryLoadError,
    default_data_dir,
)

logger = logging.getLogger(__name__)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(show_path=False)],
    )


def open_repositories(data_dir: str | Path) -> tuple[JsonRepository[Student], JsonRepository[Instructor]]:
    """
    Load students.json and instructors.json from data_dir.
    Raises RepositoryLoadError if either file is malformed.
    """
    base = Path(data_dir)
    students = JsonRepository(base / STUDENTS_FILE, Student)
    instructors = JsonRepository(base / INSTRUCTORS_FILE, Instructor)
    return students, instructors


def _cmd_list(args: argparse.Namespace, students: JsonRepository[Student], instructors: JsonRepository[Instructor]) -> int:
    if args.instructors:
        rows = instructors.get_all_entities()
        if not rows:
            print("No instructors found.")
            return 0
        for i in rows:
            print(f"{i.instructor_id} | {i.full_name} | {i.department.name}")
        return 0

    rows_s = students.get_all_entities()
    if not rows_s:
        print("No students found.")
        return 0
    for s in rows_s:
        print(f"{s.student_id} | {s.full_name} | {s.department.name} | {s.degree.name}")
    return 0


def _cmd_show(args: argparse.Namespace, students: JsonRepository[Student], instructors: JsonRepository[Instructor]) -> int:
    repo = instructors if args.instructor else students
    kind = repo.record_type.__name__

    entity = repo.get_by_id(args.id.strip())
    if entity is None:
        print(f"{kind} not found.")
        return 1

    print(f"Name: {entity.full_name}")
    if isinstance(entity, Student):
        print(f"Student ID: {entity.student_id}")
        print(f"Joining Batch: {entity.joining_batch if entity.joining_batch else ''}")
        print(f"Department: {entity.department.name}")
        print(f"Degree: {entity.degree.name}")
        for sem in entity.semesters_attended:
            print(f"Semester: {sem}")
        for c in entity.courses_in_semester:
            print(f"Course: {c.course_id} | {c.course_name} | {c.number_of_credits} credits")
    else:
        print(f"Instructor ID: {entity.instructor_id}")
        print(f"Department: {entity.department.name}")
        for c in entity.courses_taught:
            print(f"Course: {c.course_id} | {c.course_name}")
    return 0


def _cmd_delete(args: argparse.Namespace, students: JsonRepository[Student], instructors: JsonRepository[Instructor]) -> int:
    repo = instructors if args.instructor else students
    kind = repo.record_type.__name__
    entity_id = args.id.strip()

    if repo.get_by_id(entity_id) is None:
        print(f"{kind} not found: {entity_id}")
        return 1

    if not repo.delete(entity_id):
        print(f"Could not delete {kind.lower()}: {entity_id}")
        return 1

    print(f"Deleted: {entity_id} ({kind.lower()}s left: {len(repo)})")
    return 0


def _cmd_add_student(args: argparse.Namespace, students: JsonRepository[Student]) -> int:
    sid = args.id.strip()
    if not sid:
        print("Please provide a student ID.")
        return 1

    # duplicates are allowed by the store, but warn
    if students.get_by_id(sid) is not None:
        print(f"Warning: student ID '{sid}' already exists (adding anyway).")

    batch = None
    if args.batch_code or args.batch_year:
        batch = Semester(semester_code=args.batch_code, year=args.batch_year)

    student = Student(
        first_name=args.first,
        middle_name=args.middle,
        last_name=args.last,
        student_id=sid,
        joining_batch=batch,
        department=Department[args.department],
        degree=Degree[args.degree],
    )
    try:
        students.add(student)
    except OSError as e:
        print(f"Error adding student: {e}")
        return 1

    print(f"Added: {sid} (students: {len(students)})")
    return 0


def _cmd_add_instructor(args: argparse.Namespace, instructors: JsonRepository[Instructor]) -> int:
    iid = args.id.strip()
    if not iid:
        print("Please provide an instructor ID.")
        return 1

    if instructors.get_by_id(iid) is not None:
        print(f"Warning: instructor ID '{iid}' already exists (adding anyway).")

    instructor = Instructor(
        first_name=args.first,
        middle_name=args.middle,
        last_name=args.last,
        instructor_id=iid,
        department=Department[args.department],
    )
    try:
        instructors.add(instructor)
    except OSError as e:
        print(f"Error adding instructor: {e}")
        return 1

    print(f"Added: {iid} (instructors: {len(instructors)})")
    return 0


def _cmd_enroll(args: argparse.Namespace, students: JsonRepository[Student]) -> int:
    student = students.get_by_id(args.id.strip())
    if student is None:
        print("Student not found.")
        return 1

    semester = Semester(semester_code=args.semester_code, year=args.year)
    added, missing = enroll_in_semester(student, semester, args.course_ids, get_all_courses())
    for cid in added:
        print(f"Added course {cid} to {semester}.")
    for cid in missing:
        print(f"Course with ID {cid} not found.")

    try:
        students.save_changes()
    except OSError as e:
        print(f"Error adding semester and courses: {e}")
        return 1

    return 0 if not missing else 1


def _cmd_courses() -> int:
    for c in get_all_courses():
        print(f"{c.course_id} | {c.course_name} | {c.instructor_name} | {c.number_of_credits} credits")
    return 0


def _add_name_args(p: argparse.ArgumentParser) -> None:
    p.add_argument("--first", type=str, default=None, help="First name")
    p.add_argument("--middle", type=str, default=None, help="Middle name")
    p.add_argument("--last", type=str, default=None, help="Last name")


def build_parser() -> argparse.ArgumentParser:
    """
    Build the argparse CLI parser with sub-commands.
    """
    departments = [d.name for d in Department]
    degrees = [d.name for d in Degree]

    parser = argparse.ArgumentParser(prog="studentrecords", description="Student and instructor records")
    parser.add_argument("--data-dir", type=str, default=None, help="Directory with students.json / instructors.json")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    sub = parser.add_subparsers(dest="command")

    p_list = sub.add_parser("list", help="List students (or instructors)")
    p_list.add_argument("--instructors", action="store_true", help="List instructors instead")

    p_show = sub.add_parser("show", help="Show one record by ID")
    p_show.add_argument("id", type=str, help="Student ID (e.g. S100)")
    p_show.add_argument("--instructor", action="store_true", help="Look up an instructor ID")

    p_delete = sub.add_parser("delete", help="Delete one record by ID")
    p_delete.add_argument("id", type=str, help="Student ID (e.g. S100)")
    p_delete.add_argument("--instructor", action="store_true", help="Delete an instructor ID")

    p_add_s = sub.add_parser("add-student", help="Add a student")
    p_add_s.add_argument("id", type=str, help="Student ID")
    _add_name_args(p_add_s)
    p_add_s.add_argument("--department", choices=departments, default=departments[0])
    p_add_s.add_argument("--degree", choices=degrees, default=degrees[0])
    p_add_s.add_argument("--batch-code", type=str, default=None, help="Joining batch semester code (e.g. Fall)")
    p_add_s.add_argument("--batch-year", type=str, default=None, help="Joining batch year")

    p_add_i = sub.add_parser("add-instructor", help="Add an instructor")
    p_add_i.add_argument("id", type=str, help="Instructor ID")
    _add_name_args(p_add_i)
    p_add_i.add_argument("--department", choices=departments, default=departments[0])

    p_enroll = sub.add_parser("enroll", help="Add a semester and courses to a student")
    p_enroll.add_argument("id", type=str, help="Student ID")
    p_enroll.add_argument("--semester-code", type=str, required=True, help="e.g. Spring, Summer, Fall")
    p_enroll.add_argument("--year", type=str, required=True)
    p_enroll.add_argument("course_ids", nargs="+", help="Course IDs from the catalog (e.g. CSC101)")

    sub.add_parser("courses", help="Show the course catalog")
    sub.add_parser("interactive", help="Interactive menu mode")

    return parser


def main(argv: list[str] | None = None) -> None:
    """
    CLI entry point. Parses args, loads the repositories, dispatches to
    command handlers, and exits via SystemExit with a return code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)

    if args.command == "courses":
        raise SystemExit(_cmd_courses())

    data_dir = Path(args.data_dir) if args.data_dir else default_data_dir()
    try:
        students, instructors = open_repositories(data_dir)
    except RepositoryLoadError as e:
        logger.error("%s", e)
        print(f"Cannot start: {e}")
        raise SystemExit(2)

    if args.command == "list":
        raise SystemExit(_cmd_list(args, students, instructors))
    if args.command == "show":
        raise SystemExit(_cmd_show(args, students, instructors))
    if args.command == "delete":
        raise SystemExit(_cmd_delete(args, students, instructors))
    if args.command == "add-student":
        raise SystemExit(_cmd_add_student(args, students))
    if args.command == "add-instructor":
        raise SystemExit(_cmd_add_instructor(args, instructors))
    if args.command == "enroll":
        raise SystemExit(_cmd_enroll(args, students))

    if args.command in (None, "interactive"):
        from studentrecords.interactive import run_interactive, wire_notifications

        wire_notifications(students, instructors)
        run_interactive(students, instructors)
        raise SystemExit(0)

    raise SystemExit(2)
