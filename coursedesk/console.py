"""Text of the menus, prompts and banners shown by the console interface."""

from __future__ import annotations

from .general_class import list_general_classes
from .schoolyear import list_school_years
from .storage import PathLike

RED = "\x1b[31m"
GREEN = "\x1b[32m"
YELLOW = "\x1b[33m"
BLUE = "\x1b[34m"
MAGENTA = "\x1b[35m"
CYAN = "\x1b[36m"
RESET = "\x1b[0m"

BANNER_WIDTH = 69
CHOICE_PROMPT = "- Your choice: "


def _menu(title: str, *options: str) -> str:
    body = "".join(f"{line}\n" for line in options)
    return f"{title}{body}\n{CHOICE_PROMPT}"


def _retry(message: str, back: str = "Back to previous page") -> str:
    return _menu(f"\t{message}\n", "1. Re-enter it ", f"0. {back} ")


def _heading(text: str, indent: int = 1) -> str:
    return "\t" * indent + text + "\n"


def _centered(text: str, color: str) -> str:
    gap = BANNER_WIDTH - len(text)
    left = " " * (gap // 2)
    right = " " * (gap // 2 + gap % 2)
    return f"*{left}{RESET}{color}{text}{right}{RESET}{GREEN}*\n"


def home_page() -> str:
    """The coloured welcome banner with its picture."""
    rule = "*" * (BANNER_WIDTH + 2)
    parts = [
        GREEN,
        rule + "\n",
        _centered("COURSE MANAGEMENT", BLUE),
        _centered("SYSTEM", MAGENTA),
        rule + "\n\n\n\n",
        RESET,
    ]
    art = (
        ("                      ", "/^--^\\", "     /^--^\\", "     /^--^\\ \n"),
        ("                      ", "\\____/", "     \\____/", "     \\____/   \n"),
        ("                     ", "/      \\", "   /      \\", "   /      \\  \n"),
        ("                    ", "|        |", " |        |", " |        |  \n"),
    )
    for lead, first, second, third in art:
        parts.append(
            f"{lead}{RESET}{BLUE}{first}{RESET}{YELLOW}{second}{RESET}{MAGENTA}{third}"
        )
    parts.append(
        f"                     {RESET}{BLUE}\\__  __/{RESET}{YELLOW}   \\__  __/"
        f"{RESET}{MAGENTA}   \\__  __/   \n{RESET}"
    )
    fence = (
        ("|^|^|^|^|^|^|^|^|^|^|^|^", "\\ \\", "^|^|^|^", "/ /", "^|^|^|^|^", "\\ \\",
         "^|^|^|^|^|^|^|^|^|^|^|\n"),
        ("| | | | | | | | | | | | |", "\\ \\", "| | |", "/ /", "| | | | | |", "\\ \\",
         "| | | | | | | | | | |\n"),
        ("#########################", "/ /", "#####", "\\ \\", "###########", "/ /",
         "#####################\n"),
        ("| | | | | | | | | | | | |", "\\/", "| | | |", "\\/", "| | | | | |", "\\/",
         " | | | | | | | | | | |\n"),
    )
    for a, b, c, d, e, f, g in fence:
        parts.append(
            f"{a}{RESET}{BLUE}{b}{RESET}{c}{YELLOW}{d}{RESET}{e}{MAGENTA}{f}{RESET}{g}"
        )
    parts.append("|_" * 35 + "|\n")
    return "".join(parts)


def program_interface() -> str:
    return _menu("\tWhat would you like to do?\n", "1. Log in", "0. Stop program")


def login_fail() -> str:
    return _menu("", "1. Re-login", "0. Back to previous page")


def staff_main_menu(username: str) -> str:
    return _menu(
        "\t\tMAIN MENU\n",
        "1. Create a new school year",
        "2. Edit an existed school year",
        "3. Change password",
        "4. View your profile",
        "5. Create Staff Account",
        "0. Log out",
    )


def change_password_fail() -> str:
    return _menu("", "1. Re-enter it ", "0. Back to MAIN MENU ")


def create_new_school_year() -> str:
    return _heading(" CREATING A NEW SCHOOL YEAR", indent=2)


def edit_school_year_menu() -> str:
    return _menu(
        "\tWhat would you like to do?\n",
        "1. Work on General Classes",
        "2. Work on Semester",
        "3. Go back to the previous page to choose another year",
        "4. Go back to the Main Menu",
        "0. Log out",
    )


def general_class_menu() -> str:
    return _menu(
        "\tWhat would you like to do?\n",
        "1. Create a new general class",
        "2. Edit an existed general class",
        "3. Go back to the previous page to choose another class",
        "4. Go back to the Main Menu",
        "0. Log out",
    )


def input_school_year_fail() -> str:
    return _retry("This school year is not existed!")


def school_year_listing(root: PathLike) -> str:
    """The recorded school years, one numbered line each."""
    return "".join(f"{no}. {year}\n" for no, year in enumerate(list_school_years(root), 1))


def general_class_listing(root: PathLike, year: str) -> str:
    """The general classes of ``year``, one per line."""
    return "".join(f"{name}\n" for name in list_general_classes(root, year))


def input_class_fail() -> str:
    return _retry("This class is not existed!")


def edit_general_class_menu() -> str:
    return _menu(
        "\tWhat would you like to do?\n",
        "1. View list of students in the class",
        "2. Import the list of students from .csv file into the general class",
        "3. Add a student to class",
        "4. View scoreboard of class",
        "5. Go back to the previous page to choose another class",
        "6. Go back to the Main Menu",
        "0. Log out",
    )


def create_school_year_fail() -> str:
    return _retry("This school year is existed!")


def semester_main_menu() -> str:
    return _menu(
        "\tWhat would you like to do?\n",
        "1. Create a new semesters",
        "2. Edit an existed semesters",
        "3. Go back to the previous page",
        "4. Go back to the Main Menu",
        "0. Log out",
    )


def input_semester_fail() -> str:
    return _retry("This semester is not existed!")


def create_semester_fail() -> str:
    return _retry("This semester has been already existed!")


def create_class_fail() -> str:
    return _retry("This general class has been already existed!")


def edit_semester_menu() -> str:
    return _menu(
        "\tWhat would you like to do?\n",
        "1. Create new courses",
        "2. View all courses in this semester ",
        "3. Modify a course",
        "4. Go back to the previous page to work on Semesters",
        "5. Go back to MAIN MENU",
        "0. Log out",
    )


def input_course_fail() -> str:
    return _retry("This course is not existed!")


def create_course_fail() -> str:
    return _retry("This course has been already existed!")


def modify_course_menu() -> str:
    return _menu(
        "\tWhat would you like to do?\n",
        "1. View all students in this course",
        "2. Import students into this course",
        "3. Export list of students in class",
        "4. Delete a student",
        "5. Manage points of course",
        "6. Delete this course",
        "7. Update information for this course",
        "8. Go back to the previous page",
        "9. Go back to MAIN MENU",
        "0. Log out",
    )


def import_student_menu() -> str:
    return _menu(
        "\tImport Student: \n",
        "1.Import a list of student by CSV file",
        "2.Import a student",
        "0.Go back",
    )


def input_student_fail() -> str:
    return _retry("This student has been already existed!")


def edit_course_point_menu() -> str:
    return _menu(
        "\tWhat would you like to do?\n",
        "1. Import a point .csv file for a course",
        "2. View scoreboard of a course",
        "3. Update a student's result",
        "4. Go back to the previous page",
        "5. Go back to MAIN MENU",
        "0. Log out",
    )


def student_choose_year(username: str) -> str:
    """The heading shown before a student picks a school year."""
    return _heading("What school year which you want to check:")


def student_menu() -> str:
    return _menu(
        "\tWhat would you like to do?\n",
        "1. View your profile",
        "2. View courses and scoreboard",
        "3. Change password",
        "0. Log out",
    )


def student_view() -> str:
    return _menu(
        "\tWhat would you like to do?\n",
        "1. View your scoreboard",
        "2. View list of your courses",
        "3. Back to Main Menu",
        "0. Log out",
    )