import unittest

from studentrecords.model import Course, Degree, Department, Instructor, Semester, Student


class TestSemester(unittest.TestCase):
    def test_str(self) -> None:
        self.assertEqual(str(Semester("Spring", "2024")), "Spring 2024")

    def test_equality_by_fields(self) -> None:
        self.assertEqual(Semester("Fall", "2023"), Semester("Fall", "2023"))
        self.assertNotEqual(Semester("Fall", "2023"), Semester("Fall", "2024"))


class TestRecordIds(unittest.TestCase):
    def test_each_type_exposes_its_key(self) -> None:
        self.assertEqual(Student(student_id="S1").record_id, "S1")
        self.assertEqual(Instructor(instructor_id="I1").record_id, "I1")
        self.assertEqual(Course(course_id="CSC101").record_id, "CSC101")

    def test_full_name_skips_empty_parts(self) -> None:
        s = Student(first_name="Ada", middle_name=None, last_name="Lovelace", student_id="S1")
        self.assertEqual(s.full_name, "Ada Lovelace")
        self.assertEqual(Student(student_id="S2").full_name, "")


class TestStudentDict(unittest.TestCase):
    def test_to_dict_uses_enum_names(self) -> None:
        s = Student(student_id="S1", department=Department.ComputerScience, degree=Degree.MSC)
        d = s.to_dict()
        self.assertEqual(d["department"], "ComputerScience")
        self.assertEqual(d["degree"], "MSC")
        self.assertIsNone(d["joining_batch"])
        self.assertEqual(d["semesters_attended"], [])

    def test_from_dict_defaults_for_optional_fields(self) -> None:
        s = Student.from_dict({"student_id": "S1"})
        self.assertEqual(s.student_id, "S1")
        self.assertIsNone(s.first_name)
        self.assertIsNone(s.joining_batch)
        self.assertEqual(s.department, Department.ComputerScience)
        self.assertEqual(s.degree, Degree.BSC)
        self.assertEqual(s.courses_in_semester, [])

    def test_from_dict_keeps_course_order_and_duplicates(self) -> None:
        c = {"course_id": "CSC101", "course_name": "Intro", "instructor_name": "Dr. Smith", "number_of_credits": 3}
        e = {"course_id": "ENG201", "course_name": "Lit", "instructor_name": "Prof. Johnson", "number_of_credits": 4}
        s = Student.from_dict({"student_id": "S1", "courses_in_semester": [c, e, c]})
        self.assertEqual([x.course_id for x in s.courses_in_semester], ["CSC101", "ENG201", "CSC101"])

    def test_from_dict_rejects_unknown_enum(self) -> None:
        with self.assertRaises(KeyError):
            Student.from_dict({"student_id": "S1", "department": "Physics"})

    def test_from_dict_rejects_non_list(self) -> None:
        with self.assertRaises(TypeError):
            Student.from_dict({"student_id": "S1", "semesters_attended": "Fall 2023"})

    def test_from_dict_rejects_null_or_numeric_id(self) -> None:
        # null must not turn into the string "None"
        with self.assertRaises(TypeError):
            Student.from_dict({"student_id": None})
        with self.assertRaises(TypeError):
            Student.from_dict({"student_id": 100})

    def test_from_dict_rejects_numeric_enum_values(self) -> None:
        # 0 and "" are not "missing"; every non-name is rejected the same way
        with self.assertRaises(TypeError):
            Student.from_dict({"student_id": "S1", "department": 0})
        with self.assertRaises(TypeError):
            Student.from_dict({"student_id": "S1", "department": 1})
        with self.assertRaises(TypeError):
            Student.from_dict({"student_id": "S1", "degree": 0})
        with self.assertRaises(KeyError):
            Student.from_dict({"student_id": "S1", "department": ""})


class TestCourseDict(unittest.TestCase):
    def test_missing_credits_default_to_zero(self) -> None:
        self.assertEqual(Course.from_dict({"course_id": "CSC101"}).number_of_credits, 0)

    def test_non_integer_credits_rejected(self) -> None:
        for bad in (3.7, "3", None, True):
            with self.subTest(credits=bad):
                with self.assertRaises(TypeError):
                    Course.from_dict({"course_id": "CSC101", "number_of_credits": bad})


class TestInstructorDict(unittest.TestCase):
    def test_roundtrip(self) -> None:
        i = Instructor(
            first_name="Alan",
            last_name="Turing",
            instructor_id="I1",
            department=Department.English,
            courses_taught=[Course("ENG201", "English Literature", "Prof. Johnson", 4)],
        )
        self.assertEqual(Instructor.from_dict(i.to_dict()), i)

    def test_missing_id_raises(self) -> None:
        with self.assertRaises(KeyError):
            Instructor.from_dict({"first_name": "Alan"})

    def test_null_id_and_numeric_department_raise(self) -> None:
        with self.assertRaises(TypeError):
            Instructor.from_dict({"instructor_id": None})
        with self.assertRaises(TypeError):
            Instructor.from_dict({"instructor_id": "I1", "department": 0})


if __name__ == "__main__":
    unittest.main()
