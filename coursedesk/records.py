"""Student records and helpers for keeping record lists in order."""

from __future__ import annotations

from dataclasses import astuple, dataclass
from functools import total_ordering
from typing import Any, Callable, Iterable, MutableSequence, Optional, TypeVar

T = TypeVar("T")


@total_ordering
@dataclass(eq=False)
class Student:
    """A student as stored in class and course lists; identity is the student ID."""

    stu_id: str = ""
    first_name: str = ""
    last_name: str = ""
    gender: str = ""
    date_of_birth: str = ""
    soci_id: str = ""

    __hash__ = None  # type: ignore[assignment]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Student):
            return NotImplemented
        return self.stu_id == other.stu_id

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Student):
            return NotImplemented
        return self.stu_id < other.stu_id

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    def csv_line(self) -> str:
        """Return the record as one comma separated line, without a line ending."""
        return ",".join(astuple(self))

    @classmethod
    def from_csv_fields(cls, fields: Iterable[str]) -> "Student":
        """Build a student from split CSV fields.

        Missing fields become empty; anything past the sixth field belongs to
        the social ID, which runs to the end of the line.
        """
        values = list(fields)
        head = values[:5]
        head += [""] * (5 - len(head))
        return cls(*head, ",".join(values[5:]))


@dataclass
class StudentCourse:
    """One course a student takes, joined with the student's points in it."""

    stu_id: str = ""
    full_name: str = ""
    overall: str = ""
    final: str = ""
    midterm: str = ""
    others: str = ""
    course_id: str = ""
    course_name: str = ""
    class_name: str = ""
    teacher_name: str = ""
    num_of_credit: int = 0
    day_of_week: str = ""
    session: str = ""


def insert_ordered(
    items: MutableSequence[T],
    item: T,
    key: Optional[Callable[[T], Any]] = None,
) -> int:
    """Insert ``item`` into ``items`` in ascending order of ``key``.

    The new item goes before the first element (after the head) whose key is
    not smaller, or at the front if the head's key is larger. Returns the
    index it was placed at.
    """
    key_of = key if key is not None else (lambda value: value)
    item_key = key_of(item)
    if not items or key_of(items[0]) > item_key:
        index = 0
    else:
        index = next(
            (pos for pos, other in enumerate(items[1:], start=1) if not key_of(other) < item_key),
            len(items),
        )
    items.insert(index, item)
    return index


def remove_first(items: MutableSequence[T], predicate: Callable[[T], bool]) -> bool:
    """Remove the first element matching ``predicate``; report whether one was found."""
    for pos, value in enumerate(items):
        if predicate(value):
            del items[pos]
            return True
    return False