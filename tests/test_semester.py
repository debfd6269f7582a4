import pytest

from coursedesk.course import Course
from coursedesk.records import Student
from coursedesk.schoolyear import create_school_year
from coursedesk.semester import (
    Semester,
    SemesterError,
    parse_day,
    parse_session,
    semester_exists,
)
from coursedesk.storage import create_basic_data

YEAR = "2023-2024"
COURSE_ID = "CSC161-23CLC03"


@pytest.fixture
def root(tmp_path):
    base = create_basic_data(tmp_path / "Data")
    create_school_year(base, YEAR)
    return base


def _course(course_id=COURSE_ID):
    return Course(
        course_id,
        "Programming Techniques",
        "23CLC03",
        "Teacher",
        4,
        50,
        parse_day("MON"),
        parse_session("S1"),
    )


@pytest.fixture
def semester(root):
    sem = Semester.create(root, YEAR, 1, "05/09/2023", "20/01/2024")
    sem.create_course(root, YEAR, _course())
    return sem


def test_parse_day_known_codes():
    assert parse_day("MON") == "MONDAY"
    assert parse_day("SAT") == "SATURDAY"


def test_parse_day_invalid():
    with pytest.raises(SemesterError):
        parse_day("SUN")


def test_parse_session_known_codes():
    assert parse_session("S1") == "7:30 -> 9:15"
    assert parse_session("S4") == "15:30 -> 17:15"


def test_parse_session_invalid():
    with pytest.raises(SemesterError):
        parse_session("S5")


def test_create_records_semester(root):
    Semester.create(root, YEAR, 1, "05/09/2023", "20/01/2024")
    assert (root / YEAR / "Semester1").is_dir()
    assert (root / YEAR / "Semester.txt").read_text() == "1,05/09/2023,20/01/2024"
    assert semester_exists(root, YEAR, 1)
    assert not semester_exists(root, YEAR, 2)


def test_create_appends_second_semester(root):
    Semester.create(root, YEAR, 1, "05/09/2023", "20/01/2024")
    Semester.create(root, YEAR, 2, "01/02/2024", "30/06/2024")
    lines = (root / YEAR / "Semester.txt").read_text().split("\n")
    assert lines == ["1,05/09/2023,20/01/2024", "2,01/02/2024,30/06/2024"]
    assert semester_exists(root, YEAR, 2)


def test_create_existing_semester_fails(root):
    Semester.create(root, YEAR, 1, "05/09/2023", "20/01/2024")
    with pytest.raises(SemesterError):
        Semester.create(root, YEAR, 1, "05/09/2023", "20/01/2024")


def test_semester_exists_without_year(tmp_path):
    assert semester_exists(tmp_path, YEAR, 1) is False


def test_create_course_makes_empty_files(root, semester):
    folder = root / YEAR / "Semester1" / COURSE_ID
    assert (folder / "StudentList.csv").read_text() == ""
    assert (folder / "Point.csv").read_text() == ""
    assert semester.find_course(COURSE_ID).course_name == "Programming Techniques"


def test_create_course_twice_fails(root, semester):
    with pytest.raises(SemesterError):
        semester.create_course(root, YEAR, _course())


def test_find_course_unknown(semester):
    assert semester.find_course("NOPE") is None


def test_save_and_load_round_trip(root, semester):
    semester.create_course(root, YEAR, _course("MTH00-23CLC03"))
    semester.save(root, YEAR)
    loaded = Semester.load(root, YEAR, 1)
    assert loaded.courses == semester.courses
    listing = (root / YEAR / "Semester1" / "CourseList.txt").read_text()
    assert listing.split() == [COURSE_ID, "MTH00-23CLC03"]


def test_load_without_course_list(root):
    assert Semester.load(root, YEAR, 3).courses == []


def test_load_course_data_reads_students(root, semester):
    course = semester.find_course(COURSE_ID)
    student = Student("23127001", "An", "Nguyen", "Male", "01/01/2005", "000000001")
    course.add_student(student)
    course.save_data(root, YEAR, 1)
    semester.save(root, YEAR)

    loaded = Semester.load(root, YEAR, 1)
    loaded.load_course_data(root, YEAR)
    loaded_course = loaded.find_course(COURSE_ID)
    assert [s.stu_id for s in loaded_course.students] == ["23127001"]
    assert loaded_course.find_point("23127001").overall == "?"


def test_update_course_fields(semester):
    course = semester.update_course(COURSE_ID, teacher_name="Someone", session="S2")
    assert course.teacher_name == "Someone"
    assert course.session == "9:30 -> 11:15"


def test_update_course_unknown_session_uses_last(semester):
    course = semester.update_course(COURSE_ID, session="X")
    assert course.session == parse_session("S4")


def test_update_course_unknown_field(semester):
    with pytest.raises(TypeError):
        semester.update_course(COURSE_ID, colour="red")


def test_update_missing_course(semester):
    with pytest.raises(SemesterError):
        semester.update_course("NOPE", teacher_name="Someone")


def test_delete_course(root, semester):
    folder = root / YEAR / "Semester1" / COURSE_ID
    assert semester.delete_course(root, YEAR, COURSE_ID) is True
    assert not folder.exists()
    assert semester.find_course(COURSE_ID) is None
    assert semester.delete_course(root, YEAR, COURSE_ID) is False


def test_course_list_table_empty():
    lines = Semester(1).course_list_table().splitlines()
    assert len(lines) == 3
    assert "Session" in lines[1]