from coursedesk.storage import create_basic_data, create_directory


def test_create_directory_new(tmp_path):
    target = tmp_path / "new"
    assert create_directory(target) is True
    assert target.is_dir()


def test_create_directory_existing(tmp_path):
    target = tmp_path / "new"
    target.mkdir()
    assert create_directory(target) is False


def test_create_directory_missing_parent(tmp_path):
    assert create_directory(tmp_path / "a" / "b") is False
    assert not (tmp_path / "a").exists()


def test_create_basic_data_layout(tmp_path):
    root = create_basic_data(tmp_path / "Data")
    for sub in ("Account/AcademicStaff", "Account/Student", "GeneralClasses"):
        assert (root / sub).is_dir()
    assert (root / "SchoolYear.txt").read_text() == ""
    assert (root / "Account/AcademicStaff/adminaccount.txt").read_text() == "adminaccount\n"


def test_create_basic_data_keeps_school_years(tmp_path):
    root = tmp_path / "Data"
    root.mkdir()
    (root / "SchoolYear.txt").write_text("2023-2024")
    create_basic_data(root)
    assert (root / "SchoolYear.txt").read_text() == "2023-2024"


def test_create_basic_data_skips_admin_when_present(tmp_path):
    root = tmp_path / "Data"
    (root / "Account" / "AcademicStaff").mkdir(parents=True)
    (root / "Account" / "AcademicStaff" / "admin.txt").write_text("x")
    create_basic_data(root)
    assert not (root / "Account/AcademicStaff/adminaccount.txt").exists()