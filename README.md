# coursedesk

A small course management library that keeps its records in plain text and
CSV files below one data directory. It covers:

- **School years** (`coursedesk.schoolyear`): `year_valid` checks names such
  as `2023-2024`; `list_school_years`, `year_exists` and `create_school_year`
  read and extend `SchoolYear.txt`.
- **Semesters** (`coursedesk.semester`): `Semester.create` records a numbered
  semester with its start and end dates; `Semester.load`,
  `create_course`, `find_course`, `update_course`, `delete_course`,
  `course_list_table` and `save` manage its courses. `parse_day` and
  `parse_session` turn codes such as `MON` and `S1` into full values.
- **Courses** (`coursedesk.course`): `Course` holds enrolled `Student`s and
  `Point`s (overall, final, midterm, others). It reads and writes student
  lists and scoreboards as CSV, adds and deletes students, updates results and
  renders text tables.
- **General classes** (`coursedesk.general_class`): creating classes in a
  school year, reading, adding or importing students, and `class_scoreboard`,
  a text table of each member's GPA in a loaded semester.
- **Student view** (`coursedesk.student_control`): `StudentRecord` gathers the
  courses a student takes in a semester, computes a credit-weighted GPA
  (`-1.0` when nothing is graded) and renders course and score tables.
- **Scores** (`coursedesk.score`): `calc_overall` weights final 50%, midterm
  30% and others 20%; `calc_overall_gpa` divides summed overall scores by total
  credits. Both return text.
- **Accounts** (`coursedesk.accounts`): `create_staff_account`,
  `create_student_account` and `create_class_accounts` write one file per user
  under `Account/`.
- **Console text** (`coursedesk.console`): the banner, menus and prompts of a
  text interface, returned as strings.

## Data layout

Every function takes the data directory `root` as its first argument.
`coursedesk.storage.create_basic_data(root)` prepares it:

```
<root>/
    SchoolYear.txt
    Account/AcademicStaff/
    Account/Student/
    GeneralClasses/
```

`create_school_year` adds `<root>/<year>/Semester.txt` and
`<root>/GeneralClasses/<year>/GeneralClass.txt`. Courses live in
`<root>/<year>/Semester<n>/<course id>/` with `StudentList.csv`,
`Point.csv` and `<course id>.csv`; the semester's `CourseList.txt` sits beside
them. A general class is `<root>/GeneralClasses/<year>/<class>.csv`.

## Example

```python
from pathlib import Path

from coursedesk.course import Course
from coursedesk.general_class import class_exists, create_general_class
from coursedesk.records import Student
from coursedesk.schoolyear import create_school_year, list_school_years, year_valid
from coursedesk.score import calc_overall
from coursedesk.semester import Semester
from coursedesk.storage import create_basic_data

root = Path("campus")
create_basic_data(root)

if year_valid("2023-2024"):
    create_school_year(root, "2023-2024")
print(list_school_years(root))           # ['2023-2024']

semester = Semester.create(root, "2023-2024", 1, "05/09/2023", "20/01/2024")
course = Course("CSC161-23CLC03", "Programming", "23CLC03", "Teacher", 4)
semester.create_course(root, "2023-2024", course)
course.add_student(Student("23120001", "An", "Nguyen", "F", "01/01/2005", "000000000"))
course.update_result("23120001", final="9", midterm="8", others="7",
                     overall=calc_overall("9", "8", "7"))
course.save_data(root, "2023-2024", 1)
semester.save(root, "2023-2024")
print(course.scoreboard_table())

create_general_class(root, "2023-2024", "23CLC03")
print(class_exists(root, "2023-2024", "23CLC03"))   # True
```

## Errors

Problems are raised as exceptions: `InvalidYearError` (a `ValueError`) for
badly formed school years, `SemesterError` for semesters, courses, day and
session codes, `ClassError` for general class files that cannot be read or
students already listed, and `AccountError` for account creation. `Course`
raises `KeyError` when updating a student without points and `ValueError`
when adding a student already enrolled.

## What it does not do

The package has no command and no interactive menu loop: `coursedesk.console`
only builds the text of screens, and reading choices from a user is left to
the caller. It does not log users in, check passwords, change passwords or
show profiles; account files are only created.

## Running the tests

Install the package with its `test` extra and run `pytest` from the project
directory.