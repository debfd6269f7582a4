"""Creation of staff and student login accounts."""

from __future__ import annotations

from dataclasses import astuple, dataclass
from pathlib import Path
from typing import List

from .storage import PathLike

INITIAL_STUDENT_CODE = "12345678"
MIN_PASSWORD_LENGTH = 8


class AccountError(Exception):
    """Raised when an account cannot be created."""


@dataclass
class Profile:
    """Personal details written after the password in an account file."""

    user_id: str = ""
    first_name: str = ""
    last_name: str = ""
    gender: str = ""
    date_of_birth: str = ""
    soci_id: str = ""


def _account_text(secret: str, profile: Profile) -> str:
    return "".join(f"{value}," for value in (secret, *astuple(profile)))


def add_one(year: str) -> str:
    """Advance a two-digit year prefix by one, carrying into the tens digit."""
    digits = list(year)
    if year[1] == "9":
        digits[0] = chr(ord(year[0]) + 1)
        digits[1] = "0"
    else:
        digits[1] = chr(ord(year[1]) + 1)
    return "".join(digits)


def create_staff_account(
    root: PathLike, username: str, password: str, confirm: str, profile: Profile
) -> Path:
    """Create an academic staff account file and return its path."""
    if len(confirm) < MIN_PASSWORD_LENGTH:
        raise AccountError("Password must be longer than 8 characters")
    if confirm != password:
        raise AccountError("Passwords do not match")
    path = Path(root) / "Account" / "AcademicStaff" / f"{username}.txt"
    if path.exists():
        raise AccountError(f"The username {username!r} already exists")
    path.write_text(_account_text(password, profile))
    return path


def create_student_account(root: PathLike, username: str, profile: Profile) -> Path:
    """Create a student account with the initial code and return its path."""
    path = Path(root) / "Account" / "Student" / f"{username}.txt"
    if path.exists():
        raise AccountError(f"The username {username!r} already exists")
    path.write_text(_account_text(INITIAL_STUDENT_CODE, profile))
    return path


def create_class_accounts(root: PathLike, classname: str) -> List[Path]:
    """Create missing student accounts for everyone listed in a general class.

    The class file lives in the school year that starts with the two digits
    the class name begins with. Returns the paths of the accounts created.
    """
    base = Path(root)
    start = classname[:2]
    year = f"20{start}-20{add_one(start)}"
    source = base / "GeneralClasses" / year / f"{classname}.csv"
    if not source.is_file():
        return []

    account_dir = base / "Account" / "Student"
    created = []
    for token in source.read_text().split()[1:]:
        fields = token.split(",", 6)
        fields += [""] * (7 - len(fields))
        _, user_id, first_name, last_name, gender, date_of_birth, soci_id = fields
        path = account_dir / f"{user_id}.txt"
        if path.exists():
            continue
        path.write_text(
            ",".join(
                (INITIAL_STUDENT_CODE, user_id, first_name, last_name, gender, date_of_birth, soci_id)
            )
        )
        created.append(path)
    return created