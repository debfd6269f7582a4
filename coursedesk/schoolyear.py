"""School years: validation, listing and creation."""

from __future__ import annotations

import re
from pathlib import Path
from typing import List

from .records import insert_ordered
from .storage import PathLike, create_directory

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")


class InvalidYearError(ValueError):
    """Raised when a school year is not of the form YYYY-YYYY with sane years."""


def _leading_int(text: str) -> int:
    match = _INT_PREFIX.match(text)
    if match is None:
        raise ValueError(f"not a number: {text!r}")
    return int(match.group(1))


def list_school_years(root: PathLike) -> List[str]:
    """Return the school years recorded in the data directory."""
    return (Path(root) / "SchoolYear.txt").read_text().split()


def year_exists(root: PathLike, year: str) -> bool:
    """Tell whether ``year`` is listed in SchoolYear.txt."""
    return year in list_school_years(root)


def year_valid(year: str) -> bool:
    """Check a year of the form YYYY-YYYY, both from 1996 and increasing.

    Raises ValueError when either part does not start with a number.
    """
    if len(year) != 9:
        return False
    start = _leading_int(year[:4])
    end = _leading_int(year[5:9])
    return not (start < 1996 or end < 1996 or start >= end)


def create_school_year(root: PathLike, year: str) -> Path:
    """Record a new school year and create its folders and empty files."""
    if not year_valid(year):
        raise InvalidYearError(f"Invalid year: {year!r}")
    base = Path(root)
    listing = base / "SchoolYear.txt"
    years = [line for line in listing.read_text().splitlines() if line]
    insert_ordered(years, year)

    year_dir = base / year
    class_dir = base / "GeneralClasses" / year
    create_directory(year_dir)
    create_directory(class_dir)
    (class_dir / "GeneralClass.txt").write_text("")
    (year_dir / "Semester.txt").write_text("")

    listing.write_text("\n".join(years))
    return year_dir