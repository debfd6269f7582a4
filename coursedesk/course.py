"""Courses: enrolled students and their points."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from .records import Student, insert_ordered, remove_first
from .storage import PathLike

UNGRADED = "?"

STUDENT_HEADER = "no,stu_id,first_name,last_name,gender,date_of_birth,soci_id"
SCOREBOARD_HEADER = "No,StudentID,FullName,Overall,Final,Midterm,Others"

_SCORE_RULE = (
    "+----+-------------+-----------------+---------------+"
    "--------------+---------------+-------------+\n"
)
_SCORE_TITLE = (
    "| No | Student ID  |    Full Name    | Overall Point |"
    " Final Point  | Midterm Point |    Others   |\n"
)
_STUDENT_RULE = (
    "+----+-------------+--------------+-------------+--------+"
    "----------------+-----------------+\n"
)
_STUDENT_TITLE = (
    "| No | Student ID  |  First name  |  Last name  | Gender |"
    " Date of birth  |    Social ID    |\n"
)


@dataclass(eq=False)
class Point:
    """A student's points in one course; identity is the student ID."""

    stu_id: str = ""
    full_name: str = ""
    overall: str = ""
    final: str = ""
    midterm: str = ""
    others: str = ""

    __hash__ = None  # type: ignore[assignment]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        return self.stu_id == other.stu_id

    @classmethod
    def ungraded(cls, student: Student) -> "Point":
        """A point entry for ``student`` with every score still unknown."""
        return cls(student.stu_id, student.full_name, UNGRADED, UNGRADED, UNGRADED, UNGRADED)


def _by_id(record) -> str:
    return record.stu_id


def _data_lines(path: PathLike) -> Optional[List[str]]:
    """Lines of a CSV file after its header, or None if it cannot be read."""
    try:
        text = Path(path).read_text()
    except OSError:
        return None
    return text.split("\n")[1:]


@dataclass
class Course:
    """A course of a semester with its students and scoreboard."""

    course_id: str = ""
    course_name: str = ""
    class_name: str = ""
    teacher_name: str = ""
    num_of_credit: int = 0
    max_student: int = 50
    day_of_week: str = ""
    session: str = ""
    students: List[Student] = field(default_factory=list)
    points: List[Point] = field(default_factory=list)

    def has_student(self, stu_id: str) -> bool:
        """Tell whether a student with this ID is enrolled."""
        return any(student.stu_id == stu_id for student in self.students)

    def load_students(self, path: PathLike) -> bool:
        """Add the students of a CSV list, skipping IDs already enrolled.

        Returns False when the file cannot be read.
        """
        lines = _data_lines(path)
        if lines is None:
            return False
        for line in lines:
            fields = line.split(",", 6)
            number = fields[0]
            stu_id = fields[1] if len(fields) > 1 else ""
            if self.has_student(stu_id) or number == "":
                continue
            insert_ordered(self.students, Student.from_csv_fields(fields[1:]), key=_by_id)
        return True

    def save_students(self, path: PathLike) -> None:
        """Write the enrolled students as a numbered CSV list."""
        rows = [STUDENT_HEADER]
        rows += [f"{no},{student.csv_line()}" for no, student in enumerate(self.students, 1)]
        Path(path).write_text("".join(f"{row}\n" for row in rows))

    def import_scoreboard(self, path: PathLike) -> int:
        """Take points from a scoreboard CSV for students already listed.

        Rows for unknown students are ignored; reading stops at the first row
        without a number. Returns how many entries were updated.
        """
        updated = 0
        for line in Path(path).read_text().split("\n")[1:]:
            fields = line.split(",", 6)
            if fields[0] == "":
                break
            fields += [""] * (7 - len(fields))
            point = self.find_point(fields[1])
            if point is None:
                continue
            point.full_name, point.overall, point.final, point.midterm, point.others = fields[2:]
            updated += 1
        return updated

    def load_scoreboard(self, path: PathLike) -> bool:
        """Add every row of a scoreboard CSV; False when it cannot be read."""
        lines = _data_lines(path)
        if lines is None:
            return False
        for line in lines:
            fields = line.split(",", 6)
            if fields[0] == "":
                break
            fields += [""] * (7 - len(fields))
            insert_ordered(self.points, Point(*fields[1:]), key=_by_id)
        return True

    def export_scoreboard(self, path: PathLike) -> None:
        """Write the scoreboard as CSV; the last row has no line ending."""
        rows = [SCOREBOARD_HEADER]
        rows += [
            ",".join((str(no), p.stu_id, p.full_name, p.overall, p.final, p.midterm, p.others))
            for no, p in enumerate(self.points, 1)
        ]
        text = rows[0] + "\n" + "\n".join(rows[1:])
        Path(path).write_text(text)

    def scoreboard_table(self) -> str:
        """The scoreboard as a text table; empty when there are no points."""
        if not self.points:
            return ""
        parts = [_SCORE_RULE, _SCORE_TITLE, _SCORE_RULE]
        for no, p in enumerate(self.points, 1):
            parts.append(
                f"| {no:>2} | {p.stu_id:>11} | {p.full_name:>15} | {p.overall:>13} | "
                f"{p.final:>12} | {p.midterm:>13} | {p.others:>11} |\n"
            )
            parts.append(_SCORE_RULE)
        return "".join(parts)

    def student_table(self) -> str:
        """The enrolled students as a text table; empty when there are none."""
        if not self.students:
            return ""
        parts = [_STUDENT_RULE, _STUDENT_TITLE, _STUDENT_RULE]
        for no, s in enumerate(self.students, 1):
            parts.append(
                f"| {no:>2} | {s.stu_id:>11} | {s.first_name:>12} | {s.last_name:>11} | "
                f"{s.gender:>6} | {s.date_of_birth:>14} | {s.soci_id:>15} |\n"
            )
            parts.append(_STUDENT_RULE)
        return "".join(parts)

    def find_point(self, stu_id: str) -> Optional[Point]:
        """The point entry of a student, or None."""
        return next((p for p in self.points if p.stu_id == stu_id), None)

    def update_result(
        self,
        stu_id: str,
        others: Optional[str] = None,
        midterm: Optional[str] = None,
        final: Optional[str] = None,
        overall: Optional[str] = None,
    ) -> Point:
        """Change the given scores of a student; KeyError if there is no entry."""
        point = self.find_point(stu_id)
        if point is None:
            raise KeyError(f"Student {stu_id!r} does not exist")
        if others is not None:
            point.others = others
        if midterm is not None:
            point.midterm = midterm
        if final is not None:
            point.final = final
        if overall is not None:
            point.overall = overall
        return point

    def add_student(self, student: Student) -> Point:
        """Enrol a student with an ungraded entry; ValueError if already enrolled."""
        if self.has_student(student.stu_id):
            raise ValueError(f"Student {student.stu_id!r} already exists")
        insert_ordered(self.students, student, key=_by_id)
        point = Point.ungraded(student)
        insert_ordered(self.points, point, key=_by_id)
        return point

    def delete_student(self, stu_id: str) -> bool:
        """Remove a student and their points; False if they were not enrolled."""
        if not remove_first(self.students, lambda s: s.stu_id == stu_id):
            return False
        remove_first(self.points, lambda p: p.stu_id == stu_id)
        return True

    def match_student_points(self) -> None:
        """Give every enrolled student without points an ungraded entry."""
        for student in self.students:
            if self.find_point(student.stu_id) is None:
                insert_ordered(self.points, Point.ungraded(student), key=_by_id)

    def course_dir(self, root: PathLike, year: str, semester: int) -> Path:
        """Folder holding this course's files for a year and semester."""
        return Path(root) / year / f"Semester{semester}" / self.course_id

    def load_data(self, root: PathLike, year: str, semester: int) -> None:
        """Read the student list and scoreboard from the course folder."""
        folder = self.course_dir(root, year, semester)
        self.load_students(folder / "StudentList.csv")
        self.load_scoreboard(folder / "Point.csv")

    def save_data(self, root: PathLike, year: str, semester: int) -> None:
        """Write the student list and scoreboard to the course folder."""
        folder = self.course_dir(root, year, semester)
        self.save_students(folder / "StudentList.csv")
        self.export_scoreboard(folder / "Point.csv")