"""
Tests for CLI entry points.

Every test points --data-dir at a temporary directory
to avoid touching real records.
"""

import io
import json
import tempfile
import unittest
from contextlib import redirect_stdout
from pathlib import Path
from unittest import mock

from studentrecords.cli import main


def _run(argv: list[str]) -> tuple[int, str]:
    buf = io.StringIO()
    with redirect_stdout(buf):
        try:
            main(argv)
        except SystemExit as e:
            return int(e.code or 0), buf.getvalue()
    return 0, buf.getvalue()


class TestCLI(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.d = self._tmp.name

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def test_list_empty(self) -> None:
        code, out = _run(["--data-dir", self.d, "list"])
        self.assertEqual(code, 0)
        self.assertIn("No students found.", out)

    def test_add_show_delete_roundtrip(self) -> None:
        code, out = _run(
            [
                "--data-dir", self.d,
                "add-student", "S100",
                "--first", "Ada", "--last", "Lovelace",
                "--department", "ComputerScience", "--degree", "MSC",
                "--batch-code", "Fall", "--batch-year", "2023",
            ]
        )
        self.assertEqual(code, 0)
        self.assertIn("Added: S100", out)

        data = json.loads((Path(self.d) / "students.json").read_text(encoding="utf-8"))
        self.assertEqual(data[0]["student_id"], "S100")
        self.assertEqual(data[0]["degree"], "MSC")

        code, out = _run(["--data-dir", self.d, "show", "S100"])
        self.assertEqual(code, 0)
        self.assertIn("Name: Ada Lovelace", out)
        self.assertIn("Joining Batch: Fall 2023", out)

        code, out = _run(["--data-dir", self.d, "delete", "S100"])
        self.assertEqual(code, 0)

        code, out = _run(["--data-dir", self.d, "show", "S100"])
        self.assertEqual(code, 1)
        self.assertIn("Student not found.", out)

    def test_delete_missing_returns_nonzero(self) -> None:
        code, out = _run(["--data-dir", self.d, "delete", "NOPE"])
        self.assertEqual(code, 1)
        self.assertIn("not found", out)

    def test_add_duplicate_warns_but_adds(self) -> None:
        _run(["--data-dir", self.d, "add-student", "X", "--first", "One"])
        code, out = _run(["--data-dir", self.d, "add-student", "X", "--first", "Two"])
        self.assertEqual(code, 0)
        self.assertIn("already exists", out)

        data = json.loads((Path(self.d) / "students.json").read_text(encoding="utf-8"))
        self.assertEqual([s["first_name"] for s in data], ["One", "Two"])

    def test_instructor_commands(self) -> None:
        code, _ = _run(["--data-dir", self.d, "add-instructor", "I01", "--first", "Alan", "--department", "English"])
        self.assertEqual(code, 0)

        code, out = _run(["--data-dir", self.d, "list", "--instructors"])
        self.assertEqual(code, 0)
        self.assertIn("I01 | Alan | English", out)

        code, out = _run(["--data-dir", self.d, "show", "I01", "--instructor"])
        self.assertEqual(code, 0)
        self.assertIn("Instructor ID: I01", out)

        # students.json is untouched by instructor commands
        self.assertFalse((Path(self.d) / "students.json").exists())

    def test_enroll(self) -> None:
        _run(["--data-dir", self.d, "add-student", "S1"])
        code, out = _run(["--data-dir", self.d, "enroll", "S1", "--semester-code", "Spring", "--year", "2024", "CSC101", "ENG201"])
        self.assertEqual(code, 0)
        self.assertIn("Added course CSC101 to Spring 2024.", out)

        data = json.loads((Path(self.d) / "students.json").read_text(encoding="utf-8"))
        self.assertEqual([c["course_id"] for c in data[0]["courses_in_semester"]], ["CSC101", "ENG201"])
        self.assertEqual(data[0]["semesters_attended"], [{"semester_code": "Spring", "year": "2024"}])

    def test_enroll_unknown_course_returns_nonzero(self) -> None:
        _run(["--data-dir", self.d, "add-student", "S1"])
        code, out = _run(["--data-dir", self.d, "enroll", "S1", "--semester-code", "Fall", "--year", "2024", "XYZ"])
        self.assertEqual(code, 1)
        self.assertIn("Course with ID XYZ not found.", out)

    def test_courses(self) -> None:
        code, out = _run(["courses"])
        self.assertEqual(code, 0)
        self.assertIn("CSC101 | Introduction to Computer Science | Dr. Smith | 3 credits", out)

    def test_malformed_store_exits_with_2(self) -> None:
        (Path(self.d) / "students.json").write_text("[{", encoding="utf-8")
        code, out = _run(["--data-dir", self.d, "list"])
        self.assertEqual(code, 2)
        self.assertIn("Cannot start", out)

    def test_interactive_exit(self) -> None:
        with mock.patch("studentrecords.interactive._prompt", return_value="0"):
            code, _ = _run(["--data-dir", self.d, "interactive"])
        self.assertEqual(code, 0)


if __name__ == "__main__":
    unittest.main()
