"""A student's view of the courses they take in a semester."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import List

from .course import UNGRADED
from .records import StudentCourse
from .score import _to_float
from .semester import Semester

_COURSES_RULE = (
    "+----+----------------------+----------------------+----------------------+"
    "----------------------+-------------------+-------------+-------------------+\n"
)
_COURSES_TITLE = (
    "| No |      Course ID       |     Course name      |      Class name      |"
    "     Teacher name     | Number of credits | Day of week |      Session      |\n"
)
_SCORE_RULE = "+----+--------------------+-----------+-----------+-----------+-----------+\n"
_SCORE_TITLE = "| No |    Course name     |  Midterm  |   Final   |  Others   |  Overall  |\n"


@dataclass
class StudentRecord:
    """The courses one student takes, with the points earned in each."""

    courses: List[StudentCourse] = field(default_factory=list)

    def load_courses(self, semester: Semester, stu_id: str) -> List[StudentCourse]:
        """Collect every course of ``semester`` the student is enrolled in.

        Point fields are taken from the course scoreboard; when a course has
        no entry for the student, the values of the previous match are kept.
        """
        current = StudentCourse()
        for course in semester.courses:
            current.course_id = ""
            if course.has_student(stu_id):
                current.course_id = course.course_id
                current.class_name = course.class_name
                current.course_name = course.course_name
                current.teacher_name = course.teacher_name
                current.num_of_credit = course.num_of_credit
                current.day_of_week = course.day_of_week
                current.session = course.session
            point = course.find_point(stu_id)
            if point is not None:
                current.stu_id = point.stu_id
                current.full_name = point.full_name
                current.overall = point.overall
                current.final = point.final
                current.midterm = point.midterm
                current.others = point.others
            if current.course_id:
                self.courses.append(replace(current))
        return self.courses

    def calc_gpa(self) -> float:
        """Credit-weighted average of graded overall scores; -1 when none are graded."""
        total_score = 0.0
        total_credit = 0.0
        for course in self.courses:
            if course.overall != UNGRADED:
                total_score += _to_float(course.overall) * course.num_of_credit
                total_credit += course.num_of_credit
        if total_credit == 0:
            return -1.0
        return total_score / total_credit

    def courses_table(self) -> str:
        """The student's courses as a text table."""
        parts = [_COURSES_RULE, _COURSES_TITLE, _COURSES_RULE]
        for no, c in enumerate(self.courses, 1):
            parts.append(
                f"| {no:>2} | {c.course_id:<20} | {c.course_name:<20} | "
                f"{c.class_name:>20} | {c.teacher_name:>20} | {c.num_of_credit:>17} | "
                f"{c.day_of_week:>11} | {c.session:>17} |\n"
            )
            parts.append(_COURSES_RULE)
        return "".join(parts)

    def scoreboard_table(self) -> str:
        """The student's points in every course as a text table."""
        parts = [_SCORE_RULE, _SCORE_TITLE, _SCORE_RULE]
        for no, c in enumerate(self.courses, 1):
            parts.append(
                f"| {no:>2} | {c.course_name:<18} | {c.midterm:>9} | "
                f"{c.final:>9} | {c.others:>9} | {c.overall:>9} |\n"
            )
            parts.append(_SCORE_RULE)
        return "".join(parts)