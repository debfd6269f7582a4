import pytest

from coursedesk.course import Course, Point
from coursedesk.records import Student
from coursedesk.semester import Semester
from coursedesk.student_control import StudentRecord


def _student(stu_id, first="An", last="Tran"):
    return Student(stu_id, first, last, "Male", "01/01/2005", "S" + stu_id)


def _course(course_id, credits, enrolled, overall="?"):
    students = [_student(stu_id) for stu_id in enrolled]
    points = [Point(s.stu_id, s.full_name, overall, "7", "6", "5") for s in students]
    return Course(
        course_id=course_id,
        course_name="Name " + course_id,
        class_name="23CLC03",
        teacher_name="Teacher",
        num_of_credit=credits,
        day_of_week="MONDAY",
        session="7:30 -> 9:15",
        students=students,
        points=points,
    )


@pytest.fixture
def semester():
    return Semester(
        1,
        courses=[
            _course("CS1", 4, ["001", "002"], overall="8"),
            _course("CS2", 2, ["002"], overall="6"),
            _course("CS3", 3, ["001"], overall="8"),
        ],
    )


def test_load_courses_only_enrolled(semester):
    record = StudentRecord()
    courses = record.load_courses(semester, "001")
    assert [c.course_id for c in courses] == ["CS1", "CS3"]
    assert record.courses is courses


def test_load_courses_copies_course_and_point_fields(semester):
    record = StudentRecord()
    record.load_courses(semester, "002")
    first = record.courses[0]
    assert first.course_name == "Name CS1"
    assert first.num_of_credit == 4
    assert first.day_of_week == "MONDAY"
    assert first.stu_id == "002"
    assert first.overall == "8"
    assert first.final == "7"
    assert record.courses[1].overall == "6"


def test_load_courses_unknown_student(semester):
    record = StudentRecord()
    assert record.load_courses(semester, "999") == []


def test_gpa_without_courses_is_minus_one():
    assert StudentRecord().calc_gpa() == -1


def test_gpa_ignores_ungraded():
    semester = Semester(1, courses=[_course("CS1", 4, ["001"])])
    record = StudentRecord()
    record.load_courses(semester, "001")
    assert record.calc_gpa() == -1


def test_gpa_equal_scores_give_that_score(semester):
    record = StudentRecord()
    record.load_courses(semester, "001")
    assert record.calc_gpa() == pytest.approx(8.0)


def test_gpa_lies_between_scores(semester):
    record = StudentRecord()
    record.load_courses(semester, "002")
    assert 6.0 < record.calc_gpa() < 8.0


def test_courses_table_shape(semester):
    record = StudentRecord()
    record.load_courses(semester, "001")
    lines = record.courses_table().splitlines()
    assert len(lines) == 3 + 2 * 2
    assert len({len(line) for line in lines}) == 1
    assert "CS3" in lines[5]
    assert lines[1].startswith("| No |      Course ID")


def test_scoreboard_table_values(semester):
    record = StudentRecord()
    record.load_courses(semester, "002")
    lines = record.scoreboard_table().splitlines()
    assert len(lines) == 3 + 2 * 2
    assert len({len(line) for line in lines}) == 1
    assert lines[3].startswith("|  1 | Name CS1")
    assert lines[3].rstrip().endswith("8 |")