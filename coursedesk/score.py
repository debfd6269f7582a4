"""Overall scores and grade averages, kept as text like the data files."""

from __future__ import annotations

import math
import re
from typing import Iterable

from .records import StudentCourse

_FLOAT_PREFIX = re.compile(
    r"\s*[+-]?(?:\d+\.?\d*(?:[eE][+-]?\d+)?|\.\d+(?:[eE][+-]?\d+)?|infinity|inf|nan)",
    re.IGNORECASE,
)


def _to_float(text: str) -> float:
    """Read the leading number of ``text``; 0.0 when there is none."""
    match = _FLOAT_PREFIX.match(text)
    return float(match.group()) if match else 0.0


def _format(value: float) -> str:
    return f"{value:g}"


def _divide(numerator: float, denominator: float) -> float:
    if denominator:
        return numerator / denominator
    if numerator == 0 or math.isnan(numerator):
        return math.nan
    return math.copysign(math.inf, numerator)


def calc_overall(final: str, midterm: str, others: str) -> str:
    """Weight final 50%, midterm 30% and others 20% into an overall score."""
    overall = _to_float(final) * 0.5 + _to_float(midterm) * 0.3 + _to_float(others) * 0.2
    return _format(overall)


def calc_overall_gpa(courses: Iterable[StudentCourse]) -> str:
    """Sum of overall scores divided by the total number of credits."""
    total_score = 0.0
    total_credit = 0.0
    for course in courses:
        total_score += _to_float(course.overall)
        total_credit += course.num_of_credit
    return _format(_divide(total_score, total_credit))