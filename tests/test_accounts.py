import pytest

from coursedesk.accounts import (
    AccountError,
    Profile,
    add_one,
    create_class_accounts,
    create_staff_account,
    create_student_account,
)


@pytest.fixture
def root(tmp_path):
    base = tmp_path / "Data"
    (base / "Account" / "AcademicStaff").mkdir(parents=True)
    (base / "Account" / "Student").mkdir(parents=True)
    return base


@pytest.fixture
def profile():
    return Profile("S001", "Ann", "Lee", "F", "01/01/2000", "SOC001")


@pytest.mark.parametrize("year, expected", [("23", "24"), ("19", "20"), ("09", "10")])
def test_add_one(year, expected):
    assert add_one(year) == expected


def test_staff_account_written(root, profile):
    password = "password"
    path = create_staff_account(root, "staff1", password, password, profile)
    assert path == root / "Account" / "AcademicStaff" / "staff1.txt"
    assert path.read_text().split(",") == [
        password, "S001", "Ann", "Lee", "F", "01/01/2000", "SOC001", ""
    ]


def test_staff_account_short_confirmation(root, profile):
    password = "password"
    with pytest.raises(AccountError, match="longer than 8"):
        create_staff_account(root, "staff1", password, "token", profile)
    assert not (root / "Account" / "AcademicStaff" / "staff1.txt").exists()


def test_staff_account_mismatch(root, profile):
    password = "password"
    with pytest.raises(AccountError, match="do not match"):
        create_staff_account(root, "staff1", password, "placeholder", profile)


def test_staff_account_existing_username(root, profile):
    password = "password"
    create_staff_account(root, "staff1", password, password, profile)
    with pytest.raises(AccountError, match="already exists"):
        create_staff_account(root, "staff1", password, password, profile)


def test_student_account_uses_initial_code(root, profile):
    path = create_student_account(root, "S001", profile)
    assert path.read_text() == "12345678,S001,Ann,Lee,F,01/01/2000,SOC001,"


def test_student_account_existing(root, profile):
    create_student_account(root, "S001", profile)
    with pytest.raises(AccountError):
        create_student_account(root, "S001", profile)


def _write_class(root, text):
    class_dir = root / "GeneralClasses" / "2023-2024"
    class_dir.mkdir(parents=True)
    (class_dir / "23CLC01.csv").write_text(text)


def test_class_accounts_created(root):
    _write_class(
        root,
        "no,stu_id,first_name,last_name,gender,date_of_birth,soci_id\n"
        "1,S001,Ann,Lee,F,01/01/2000,SOC001\n"
        "2,S002,Bob,Kim,M,02/02/2000,SOC002\n",
    )
    created = create_class_accounts(root, "23CLC01")
    student_dir = root / "Account" / "Student"
    assert created == [student_dir / "S001.txt", student_dir / "S002.txt"]
    assert (student_dir / "S002.txt").read_text() == "12345678,S002,Bob,Kim,M,02/02/2000,SOC002"


def test_class_accounts_not_overwritten(root):
    _write_class(
        root,
        "no,stu_id,first_name,last_name,gender,date_of_birth,soci_id\n"
        "1,S001,Ann,Lee,F,01/01/2000,SOC001\n",
    )
    existing = root / "Account" / "Student" / "S001.txt"
    existing.write_text("kept")
    assert create_class_accounts(root, "23CLC01") == []
    assert existing.read_text() == "kept"


def test_class_accounts_second_run_creates_nothing(root):
    _write_class(
        root,
        "no,stu_id,first_name,last_name,gender,date_of_birth,soci_id\n"
        "1,S001,Ann,Lee,F,01/01/2000,SOC001\n",
    )
    assert len(create_class_accounts(root, "23CLC01")) == 1
    assert create_class_accounts(root, "23CLC01") == []


def test_class_accounts_missing_class_file(root):
    assert create_class_accounts(root, "23CLC09") == []