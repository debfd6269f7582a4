"""Layout of the data directory."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Union

PathLike = Union[str, "os.PathLike[str]"]


def create_directory(path: PathLike) -> bool:
    """Create one directory; return False if it exists or cannot be made."""
    try:
        os.mkdir(path)
    except OSError:
        return False
    return True


def create_basic_data(root: PathLike) -> Path:
    """Set up the data directory ``root`` with its folders and starting files."""
    base = Path(root)
    base.mkdir(parents=True, exist_ok=True)
    for sub in ("Account", "Account/AcademicStaff", "Account/Student", "GeneralClasses"):
        create_directory(base / sub)

    years = base / "SchoolYear.txt"
    if not years.exists():
        years.write_text("")

    staff_dir = base / "Account" / "AcademicStaff"
    if not (staff_dir / "admin.txt").exists():
        (staff_dir / "adminaccount.txt").write_text("adminaccount\n")
    return base