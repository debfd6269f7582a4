"""Semesters of a school year and the courses they hold."""

from __future__ import annotations

import re
import shutil
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import List, Optional, Tuple

from .course import Course
from .storage import PathLike, create_directory

COURSE_HEADER = (
    "ID,Course Name,Class name,Teacher name,num_of_credit,max student,day of week,session "
)

DAYS = {
    "MON": "MONDAY",
    "TUE": "TUESDAY",
    "WED": "WEDNESDAY",
    "THU": "THURSDAY",
    "FRI": "FRIDAY",
    "SAT": "SATURDAY",
}

SESSIONS = {
    "S1": "7:30 -> 9:15",
    "S2": "9:30 -> 11:15",
    "S3": "13:30 -> 15:15",
    "S4": "15:30 -> 17:15",
}

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")

_COLUMNS = (
    ("No", 4),
    ("ID of Course", 14),
    ("Course Name", 19),
    ("Class Name", 14),
    ("Teacher Name", 19),
    ("Credits", 9),
    ("Max Student", 14),
    ("Day Of Week", 14),
)
_SESSION_WIDTH = 16
_TABLE_RULE = "+" + "+".join("-" * (width + 1) for _, width in _COLUMNS) + "+" + "-" * (
    _SESSION_WIDTH + 1
) + "+\n"

_UPDATABLE = {f.name for f in fields(Course)} - {"students", "points"}


class SemesterError(Exception):
    """Raised when a semester or one of its courses cannot be worked on."""


def _leading_int(text: str) -> int:
    match = _INT_PREFIX.match(text)
    return int(match.group(1)) if match else 0


def _parse_semester_line(line: str) -> Optional[Tuple[int, str, str]]:
    """Split a ``number,start,end`` record; None when it has no number."""
    match = _INT_PREFIX.match(line)
    if match is None:
        return None
    rest = line[match.end():].lstrip()[1:]
    start, _, end = rest.partition(",")
    return int(match.group(1)), start, end


def _semester_records(listing: Path) -> List[Tuple[int, str, str]]:
    records = []
    for line in listing.read_text().splitlines():
        if not line.strip():
            continue
        parsed = _parse_semester_line(line)
        if parsed is None:
            break
        records.append(parsed)
    return records


def semester_exists(root: PathLike, year: str, number: int) -> bool:
    """Tell whether semester ``number`` is recorded for ``year``."""
    listing = Path(root) / year / "Semester.txt"
    try:
        text = listing.read_text()
    except OSError:
        return False
    for line in text.splitlines():
        if not line.strip():
            continue
        parsed = _parse_semester_line(line)
        if parsed is None or parsed[0] == 0:
            break
        if parsed[0] == number:
            return True
    return False


def parse_day(code: str) -> str:
    """Turn a three-letter day code such as MON into the full day name."""
    try:
        return DAYS[code]
    except KeyError:
        raise SemesterError(f"Invalid day of week input: {code!r}") from None


def parse_session(code: str) -> str:
    """Turn a session code S1 to S4 into its time range."""
    try:
        return SESSIONS[code]
    except KeyError:
        raise SemesterError(f"Invalid session input: {code!r}") from None


def _session_or_last(code: str) -> str:
    return SESSIONS.get(code, SESSIONS["S4"])


@dataclass
class Semester:
    """A numbered semester with its dates and courses."""

    number: int = 0
    start_day: str = ""
    end_day: str = ""
    courses: List[Course] = field(default_factory=list)

    @staticmethod
    def _folder(root: PathLike, year: str, number: int) -> Path:
        return Path(root) / year / f"Semester{number}"

    @classmethod
    def load(cls, root: PathLike, year: str, number: int) -> "Semester":
        """Read the courses listed for a semester; missing files give no courses."""
        semester = cls(number)
        folder = cls._folder(root, year, number)
        try:
            course_ids = (folder / "CourseList.txt").read_text().split()
        except OSError:
            return semester
        for course_id in course_ids:
            try:
                lines = (folder / course_id / f"{course_id}.csv").read_text().split("\n")
            except OSError:
                continue
            row = lines[1] if len(lines) > 1 else ""
            values = row.split(",", 7)
            values += [""] * (8 - len(values))
            ident, name, class_name, teacher, credits, maximum, day, session = values
            semester.courses.append(
                Course(
                    ident,
                    name,
                    class_name,
                    teacher,
                    _leading_int(credits),
                    _leading_int(maximum),
                    day,
                    session,
                )
            )
        return semester

    def load_course_data(self, root: PathLike, year: str) -> None:
        """Read the student list and scoreboard of every course."""
        for course in self.courses:
            course.load_data(root, year, self.number)

    @classmethod
    def create(
        cls, root: PathLike, year: str, number: int, start_day: str, end_day: str
    ) -> "Semester":
        """Record a new semester in the year's Semester.txt and make its folder."""
        if semester_exists(root, year, number):
            raise SemesterError(f"Semester {number} already exists in {year}")
        create_directory(cls._folder(root, year, number))
        listing = Path(root) / year / "Semester.txt"
        try:
            records = _semester_records(listing)
        except OSError as exc:
            raise SemesterError(f"Cannot read {listing}") from exc
        semester = cls(number, start_day, end_day)
        records.append((number, start_day, end_day))
        listing.write_text("\n".join(f"{num},{start},{end}" for num, start, end in records))
        return semester

    def create_course(self, root: PathLike, year: str, course: Course) -> Path:
        """Add a course and create its folder with empty student and point lists."""
        if self.find_course(course.course_id) is not None:
            raise SemesterError(f"Course {course.course_id!r} already exists")
        self.courses.append(course)
        folder = course.course_dir(root, year, self.number)
        create_directory(folder)
        (folder / "StudentList.csv").write_text("")
        (folder / "Point.csv").write_text("")
        return folder

    def course_list_table(self) -> str:
        """The courses of the semester as a text table."""
        title = "".join(f"| {name:<{width}}" for name, width in _COLUMNS)
        parts = [_TABLE_RULE, f"{title}| {'Session':<9}       |\n", _TABLE_RULE]
        for no, course in enumerate(self.courses, 1):
            values = (
                no,
                course.course_id,
                course.course_name,
                course.class_name,
                course.teacher_name,
                course.num_of_credit,
                course.max_student,
                course.day_of_week,
            )
            row = "".join(
                f"| {str(value):<{width}}" for value, (_, width) in zip(values, _COLUMNS)
            )
            parts.append(f"{row}| {course.session:<{_SESSION_WIDTH}}|\n")
            parts.append(_TABLE_RULE)
        return "".join(parts)

    def update_course(self, course_id: str, **kwargs) -> Course:
        """Change the given fields of a course.

        A session is given as a code; S1 to S3 map to their times and any
        other code to the last session.
        """
        unknown = set(kwargs) - _UPDATABLE
        if unknown:
            raise TypeError(f"Unknown course fields: {', '.join(sorted(unknown))}")
        course = self.find_course(course_id)
        if course is None:
            raise SemesterError(f"Course {course_id!r} is not found")
        for name, value in kwargs.items():
            if name == "session":
                value = _session_or_last(value)
            setattr(course, name, value)
        return course

    def delete_course(self, root: PathLike, year: str, course_id: str) -> bool:
        """Remove a course and its folder; report whether it was listed."""
        found = False
        for pos, course in enumerate(self.courses):
            if course.course_id == course_id:
                del self.courses[pos]
                found = True
                break
        shutil.rmtree(self._folder(root, year, self.number) / course_id, ignore_errors=True)
        return found

    def find_course(self, course_id: str) -> Optional[Course]:
        """The course with this ID, or None."""
        return next((c for c in self.courses if c.course_id == course_id), None)

    def save(self, root: PathLike, year: str) -> None:
        """Write the course list and each course's data file."""
        folder = self._folder(root, year, self.number)
        try:
            listing = (folder / "CourseList.txt").open("w")
        except OSError as exc:
            raise SemesterError("Unable to open the course list for writing") from exc
        with listing:
            for course in self.courses:
                row = ",".join(
                    (
                        course.course_id,
                        course.course_name,
                        course.class_name,
                        course.teacher_name,
                        str(course.num_of_credit),
                        str(course.max_student),
                        course.day_of_week,
                        course.session,
                    )
                )
                data_path = folder / course.course_id / f"{course.course_id}.csv"
                try:
                    data_path.write_text(f"{COURSE_HEADER}\n{row}\n")
                except OSError as exc:
                    raise SemesterError(
                        f"Unable to open course data file {data_path} for writing"
                    ) from exc
                listing.write(f"{course.course_id}\n")