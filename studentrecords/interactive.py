from __future__ import annotations

from enum import Enum
from typing import Any, Optional, TypeVar

from rich import box
from rich.console import Console
from rich.table import Table

from studentrecords.catalog import courses_not_taken, enroll_in_semester, get_all_courses, get_course_by_id
from studentrecords.model import Course, Degree, Department, Instructor, Person, Semester, Student
from studentrecords.storage import JsonRepository

console = Console()

E = TypeVar("E", bound=Enum)


def _println(msg: str = "") -> None:
    # record data goes straight into messages, so no markup parsing
    console.print(msg, markup=False, highlight=False)


def _prompt(msg: str) -> str:
    return console.input(msg)


def _safe_str(x: Any) -> str:
    return "" if x is None else str(x)


def _opt(text: str) -> Optional[str]:
    text = text.strip()
    return text or None


def wire_notifications(students: JsonRepository[Student], instructors: JsonRepository[Instructor]) -> None:
    """
    Print a console line whenever a repository adds or deletes a record.
    """

    @students.entity_added.subscribe
    def _student_added(student: Student) -> None:
        _println(f"Student {_safe_str(student.first_name)} {_safe_str(student.last_name)} added.")

    @instructors.entity_added.subscribe
    def _instructor_added(instructor: Instructor) -> None:
        _println(f"Instructor {_safe_str(instructor.first_name)} {_safe_str(instructor.last_name)} added.")

    def _deleted(entity_id: str) -> None:
        _println(f"Entity with ID {entity_id} deleted.")

    students.entity_deleted.subscribe(_deleted)
    instructors.entity_deleted.subscribe(_deleted)


def run_interactive(students: JsonRepository[Student], instructors: JsonRepository[Instructor]) -> None:
    """
    Interactive menu loop. Returns when the operator picks Exit.
    """
    while True:
        _println(f"\n=== Student Records (students: {len(students)} | instructors: {len(instructors)}) ===")
        choice = _prompt(
            "[1] Add new student\n"
            "[2] View student details\n"
            "[3] Delete student\n"
            "[4] Add new semester and courses\n"
            "[5] Display student list\n"
            "[6] Add new instructor\n"
            "[7] View instructor details\n"
            "[8] Delete instructor\n"
            "[9] Display instructor list\n"
            "[0] Exit\n"
            "Select an option: "
        ).strip()

        if choice == "0":
            _println("Bye.")
            return

        if choice == "1":
            _flow_add_student(students)
        elif choice == "2":
            _flow_view(students)
        elif choice == "3":
            _flow_delete(students)
        elif choice == "4":
            _flow_add_semester(students)
        elif choice == "5":
            _flow_list_students(students)
        elif choice == "6":
            _flow_add_instructor(instructors)
        elif choice == "7":
            _flow_view(instructors)
        elif choice == "8":
            _flow_delete(instructors)
        elif choice == "9":
            _flow_list_instructors(instructors)
        else:
            _println("Invalid choice. Please try again.")


def _choose_enum(enum_cls: type[E], label: str) -> Optional[E]:
    """
    List the members by number and read a choice.
    Accepts the number or the exact member name; None if neither matches.
    """
    _println(f"Select {label}:")
    for m in enum_cls:
        _println(f"{m.value}. {m.name}")
    raw = _prompt(f"Enter {label} (by number): ").strip()

    if raw in enum_cls.__members__:
        return enum_cls[raw]
    if raw.isdigit():
        for m in enum_cls:
            if m.value == int(raw):
                return m
    return None


def _prompt_names(person: Person) -> None:
    person.first_name = _opt(_prompt("First Name: "))
    person.middle_name = _opt(_prompt("Middle Name: "))
    person.last_name = _opt(_prompt("Last Name: "))


def _prompt_course_ids(courses: list[Course], header: str) -> list[str]:
    _println(header)
    for c in courses:
        _println(f"{c.course_id}: {c.course_name}")
    raw = _prompt("Enter course IDs separated by comma: ")
    return [x.strip() for x in raw.split(",") if x.strip()]


def _flow_add_student(students: JsonRepository[Student]) -> None:
    try:
        student = Student()
        _prompt_names(student)

        student.student_id = _prompt("Student ID: ").strip()
        if not student.student_id:
            _println("Student ID is required.")
            return

        code = _prompt("Joining Batch (Semester Code): ").strip()
        year = _prompt("Joining Year: ").strip()
        student.joining_batch = Semester(semester_code=code, year=year)

        department = _choose_enum(Department, "Department")
        if department is None:
            _println("Invalid department choice.")
            return
        student.department = department

        degree = _choose_enum(Degree, "Degree")
        if degree is None:
            _println("Invalid degree choice.")
            return
        student.degree = degree

        students.add(student)
        _println("Student added successfully.")
    except Exception as e:
        _println(f"Error adding student: {e}")


def _flow_add_instructor(instructors: JsonRepository[Instructor]) -> None:
    try:
        instructor = Instructor()
        _prompt_names(instructor)

        instructor.instructor_id = _prompt("Instructor ID: ").strip()
        if not instructor.instructor_id:
            _println("Instructor ID is required.")
            return

        department = _choose_enum(Department, "Department")
        if department is None:
            _println("Invalid department choice.")
            return
        instructor.department = department

        catalog = get_all_courses()
        for cid in _prompt_course_ids(catalog, "Courses taught (blank = none):"):
            course = get_course_by_id(catalog, cid)
            if course is None:
                _println(f"Course with ID {cid} not found.")
            else:
                instructor.courses_taught.append(course)

        instructors.add(instructor)
        _println("Instructor added successfully.")
    except Exception as e:
        _println(f"Error adding instructor: {e}")


def _print_details(entity: Any) -> None:
    _println(f"Name: {entity.full_name}")
    if isinstance(entity, Student):
        _println(f"Student ID: {entity.student_id}")
        _println(f"Joining Batch: {_safe_str(entity.joining_batch)}")
        _println(f"Department: {entity.department.name}")
        _println(f"Degree: {entity.degree.name}")
        semesters = ", ".join(str(s) for s in entity.semesters_attended)
        _println(f"Semesters: {semesters or '-'}")
        courses = ", ".join(_safe_str(c.course_id) for c in entity.courses_in_semester)
        _println(f"Courses in semester: {courses or '-'}")
    elif isinstance(entity, Instructor):
        _println(f"Instructor ID: {entity.instructor_id}")
        _println(f"Department: {entity.department.name}")
        courses = ", ".join(_safe_str(c.course_id) for c in entity.courses_taught)
        _println(f"Courses taught: {courses or '-'}")


def _flow_view(repo: JsonRepository[Any]) -> None:
    kind = repo.record_type.__name__
    try:
        entity_id = _prompt(f"Enter {kind} ID: ").strip()
        entity = repo.get_by_id(entity_id)
        if entity is None:
            _println(f"{kind} not found.")
            return
        _println(f"{kind} Details:")
        _print_details(entity)
    except Exception as e:
        _println(f"Error viewing {kind.lower()} details: {e}")


def _flow_delete(repo: JsonRepository[Any]) -> None:
    kind = repo.record_type.__name__
    try:
        entity_id = _prompt(f"Enter {kind} ID to delete: ").strip()
        if repo.get_by_id(entity_id) is None:
            _println(f"{kind} not found.")
            return
        if repo.delete(entity_id):
            _println(f"{kind} deleted successfully.")
        else:
            _println(f"{kind} {entity_id} could not be deleted.")
    except Exception as e:
        _println(f"Error deleting {kind.lower()}: {e}")


def _flow_add_semester(students: JsonRepository[Student]) -> None:
    try:
        student_id = _prompt("Enter Student ID: ").strip()
        student = students.get_by_id(student_id)
        if student is None:
            _println("Student not found.")
            return

        _println("Enter Semester Information:")
        code = _prompt("Semester Code (e.g., Spring, Summer, Fall): ").strip()
        year = _prompt("Year: ").strip()
        semester = Semester(semester_code=code, year=year)

        catalog = get_all_courses()
        requested = _prompt_course_ids(courses_not_taken(student, catalog), "Courses not taken yet:")

        added, missing = enroll_in_semester(student, semester, requested, catalog)
        for cid in added:
            _println(f"Added course {cid} to {semester}.")
        for cid in missing:
            _println(f"Course with ID {cid} not found.")

        students.save_changes()
        _println("Semester and courses added successfully.")
    except Exception as e:
        _println(f"Error adding semester and courses: {e}")


def _flow_list_students(students: JsonRepository[Student]) -> None:
    try:
        rows = students.get_all_entities()
        if not rows:
            _println("No students found.")
            return

        table = Table(title="Student List", box=box.SIMPLE)
        table.add_column("ID", style="bold cyan")
        table.add_column("Name")
        table.add_column("Department")
        table.add_column("Degree")
        table.add_column("Joining Batch")
        table.add_column("Courses", justify="right")
        for s in rows:
            table.add_row(
                s.student_id,
                s.full_name,
                s.department.name,
                s.degree.name,
                _safe_str(s.joining_batch),
                str(len(s.courses_in_semester)),
            )
        console.print(table)
    except Exception as e:
        _println(f"Error displaying student list: {e}")


def _flow_list_instructors(instructors: JsonRepository[Instructor]) -> None:
    try:
        rows = instructors.get_all_entities()
        if not rows:
            _println("No instructors found.")
            return

        table = Table(title="Instructor List", box=box.SIMPLE)
        table.add_column("ID", style="bold cyan")
        table.add_column("Name")
        table.add_column("Department")
        table.add_column("Courses taught")
        for i in rows:
            taught = ", ".join(_safe_str(c.course_id) for c in i.courses_taught)
            table.add_row(i.instructor_id, i.full_name, i.department.name, taught)
        console.print(table)
    except Exception as e:
        _println(f"Error displaying instructor list: {e}")
