"""General (home-room) classes of a school year and their student lists."""

from __future__ import annotations

from pathlib import Path
from typing import Iterator, List

from .accounts import create_class_accounts
from .course import STUDENT_HEADER, _STUDENT_RULE, _STUDENT_TITLE
from .records import Student, insert_ordered
from .semester import Semester
from .storage import PathLike
from .student_control import StudentRecord

_SCORE_RULE = "+----+----------+-----------+-----------+-------+\n"
_SCORE_TITLE = "| No | Stu ID   | First Name| Last Name | GPA   |\n"


class ClassError(Exception):
    """Raised when a general class or one of its files cannot be used."""


def _class_dir(root: PathLike, year: str) -> Path:
    return Path(root) / "GeneralClasses" / year


def _class_file(root: PathLike, year: str, classname: str) -> Path:
    return _class_dir(root, year) / f"{classname}.csv"


def _read(path: Path) -> str:
    try:
        return path.read_text()
    except OSError as exc:
        raise ClassError(f"Can't open {path.name}") from exc


def _rows(text: str) -> Iterator[List[str]]:
    """Split the data lines after the header into seven fields each."""
    for line in text.split("\n")[1:]:
        if not line.strip():
            continue
        fields = line.split(",", 6)
        fields += [""] * (7 - len(fields))
        yield fields


def _by_id(student: Student) -> str:
    return student.stu_id


def _write_class(path: Path, students: List[Student]) -> None:
    rows = [f"{no},{student.csv_line()}" for no, student in enumerate(students, 1)]
    path.write_text("\n".join([STUDENT_HEADER, *rows]))


def class_exists(root: PathLike, year: str, classname: str) -> bool:
    """Tell whether the class has a student list in ``year``."""
    return _class_file(root, year, classname).is_file()


def read_class_students(root: PathLike, year: str, classname: str) -> List[Student]:
    """The students of a class, ordered by student ID."""
    students: List[Student] = []
    for fields in _rows(_read(_class_file(root, year, classname))):
        insert_ordered(students, Student.from_csv_fields(fields[1:]), key=_by_id)
    return students


def student_table(root: PathLike, year: str, classname: str) -> str:
    """The class list as a text table, numbered as in the file."""
    parts = [_STUDENT_RULE, _STUDENT_TITLE, _STUDENT_RULE]
    for no, stu_id, first, last, gender, born, soci_id in _rows(
        _read(_class_file(root, year, classname))
    ):
        parts.append(
            f"| {no:>2} | {stu_id:>11} | {first:>12} | {last:>11} | "
            f"{gender:>6} | {born:>14} | {soci_id:>15} |\n"
        )
        parts.append(_STUDENT_RULE)
    return "".join(parts)


def list_general_classes(root: PathLike, year: str) -> List[str]:
    """The names of the general classes recorded for ``year``."""
    return _read(_class_dir(root, year) / "GeneralClass.txt").split()


def create_general_class(root: PathLike, year: str, classname: str) -> Path:
    """Record a class in the year's list and make its (empty) student file."""
    listing = _class_dir(root, year) / "GeneralClass.txt"
    classes = [line for line in _read(listing).splitlines() if line]
    classes.append(classname)
    listing.write_text("\n".join(classes))
    path = _class_file(root, year, classname)
    if not path.exists():
        path.write_text("")
    return path


def student_in_class(root: PathLike, year: str, classname: str, stu_id: str) -> bool:
    """Tell whether ``stu_id`` is in the class list; False if there is no list."""
    try:
        text = _class_file(root, year, classname).read_text()
    except OSError:
        return False
    return any(fields[1] == stu_id for fields in _rows(text))


def add_student_to_class(
    root: PathLike, year: str, classname: str, student: Student
) -> List[Student]:
    """Add one student to the class, create missing accounts, return the list."""
    if student_in_class(root, year, classname, student.stu_id):
        raise ClassError(f"Student_ID {student.stu_id} has been already existed")
    students = read_class_students(root, year, classname)
    insert_ordered(students, student, key=_by_id)
    _write_class(_class_file(root, year, classname), students)
    create_class_accounts(root, classname)
    return students


def import_students(
    root: PathLike, year: str, classname: str, source: PathLike
) -> List[Student]:
    """Add the students of a CSV file not yet in the class; return those added."""
    students = read_class_students(root, year, classname)
    known = {student.stu_id for student in students}
    added: List[Student] = []
    for fields in _rows(_read(Path(source))):
        if fields[1] in known:
            continue
        student = Student.from_csv_fields(fields[1:])
        insert_ordered(students, student, key=_by_id)
        added.append(student)
    _write_class(_class_file(root, year, classname), students)
    create_class_accounts(root, classname)
    return added


def class_scoreboard(root: PathLike, year: str, classname: str, semester: Semester) -> str:
    """Each class member's GPA in a loaded semester, as a text table."""
    text = _read(_class_file(root, year, classname))
    parts = [_SCORE_RULE, _SCORE_TITLE, _SCORE_RULE]
    for line in text.split("\n")[1:]:
        fields = line.split(",", 4)
        if fields[0] == "":
            break
        fields += [""] * (5 - len(fields))
        no, stu_id, first, last, _ = fields
        record = StudentRecord()
        record.load_courses(semester, stu_id)
        gpa = record.calc_gpa()
        shown = f"{gpa:5.2f}" if gpa != -1 else f"{'?':>5}"
        parts.append(f"| {no:>2} | {stu_id:>8} | {first:>9} | {last:>9} | {shown} |\n")
    parts.append(_SCORE_RULE)
    return "".join(parts)