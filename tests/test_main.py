import pytest

from school_folders.io.config_store import config_path, load_configuration
from school_folders.main import EXIT_FAILED, EXIT_INVALID, EXIT_OK, main


def _create_university(tmp_path, *extra):
    return main(
        [
            "create",
            "-e", "university",
            "-y", "2024-2025",
            "-s", "2",
            "--subjects", "Math, Physics",
            "--subjects", "Biology",
            "-a", "exams",
            "-o", str(tmp_path),
            *extra,
        ]
    )


def test_create_university(tmp_path, capsys):
    assert _create_university(tmp_path) == EXIT_OK

    root = tmp_path / "2024-2025"
    assert (root / "Semester_1" / "Physics" / "Exams").is_dir()
    assert (root / "Semester_2" / "Biology" / "Exams").is_dir()
    assert load_configuration(root).ok
    assert "Operation completed successfully." in capsys.readouterr().out


def test_create_school_with_track(tmp_path):
    code = main(
        ["create", "-e", "school", "-y", "1446-1447", "--high-school-year", "second", "-t", "cs", "-o", str(tmp_path)]
    )

    root = tmp_path / "Second Secondary - Computer Science and Engineering 1446-1447"
    assert code == EXIT_OK
    assert (root / "Semester_1" / "Programming").is_dir()
    assert (root / "Semester_3").is_dir()


def test_dry_run_prints_plan_only(tmp_path, capsys):
    assert _create_university(tmp_path, "--dry-run") == EXIT_OK

    out = capsys.readouterr().out
    assert out.startswith("2024-2025/\n")
    assert "        Math/" in out
    assert list(tmp_path.iterdir()) == []


@pytest.mark.parametrize(
    "argv",
    [
        ["create", "-e", "university", "-y", "2024-2026", "--subjects", "A", "--subjects", "B"],
        ["create", "-e", "university", "-y", "2024-2025", "-s", "3", "--subjects", "A"],
        ["create", "-e", "school", "-y", "1446-1447"],
        ["create", "-e", "school", "-y", "1446-1447", "--high-school-year", "third"],
        ["create", "-e", "university", "-y", "2024-2025", "-s", "1", "--subjects", "A", "-a", "homework"],
    ],
)
def test_invalid_input_exit_code(tmp_path, argv):
    assert main([*argv, "-o", str(tmp_path)]) == EXIT_INVALID
    assert list(tmp_path.iterdir()) == []


def test_edit_add_then_remove(tmp_path):
    _create_university(tmp_path, "-q")
    root = tmp_path / "2024-2025"

    assert main(["edit", "--root", str(root), "--semester", "2", "--add", "Chemistry"]) == EXIT_OK
    assert (root / "Semester_2" / "Chemistry" / "Exams").is_dir()

    assert main(["edit", "--root", str(root), "--semester", "Semester_2", "--remove", "Chemistry"]) == EXIT_FAILED
    assert (root / "Semester_2" / "Chemistry").is_dir()

    assert main(["edit", "--root", str(root), "--semester", "2", "--remove", "Chemistry", "--yes"]) == EXIT_OK
    assert not (root / "Semester_2" / "Chemistry").exists()
    assert load_configuration(root).params.per_semester_subjects == [["Math", "Physics"], ["Biology"]]


def test_edit_duplicate_is_invalid(tmp_path):
    _create_university(tmp_path, "-q")

    assert main(["edit", "--root", str(tmp_path / "2024-2025"), "--semester", "1", "--add", "Math"]) == EXIT_INVALID


def test_edit_missing_root(tmp_path):
    assert main(["edit", "--root", str(tmp_path / "nope"), "--semester", "1", "--add", "X"]) == EXIT_FAILED


def test_edit_without_config_needs_fallback(tmp_path):
    (tmp_path / "Semester_1").mkdir()

    assert main(["edit", "--root", str(tmp_path), "--semester", "Semester_1", "--add", "Math"]) == EXIT_FAILED
    assert not (tmp_path / "Semester_1" / "Math").exists()

    code = main(["edit", "--root", str(tmp_path), "--semester", "Semester_1", "--add", "Math", "--fallback"])

    assert code == EXIT_OK
    assert (tmp_path / "Semester_1" / "Math").is_dir()
    assert not config_path(tmp_path).exists()


def test_fallback_remove_needs_confirmation(tmp_path):
    (tmp_path / "Semester_1" / "Math").mkdir(parents=True)
    argv = ["edit", "--root", str(tmp_path), "--semester", "Semester_1", "--remove", "Math", "--fallback"]

    assert main(argv) == EXIT_FAILED
    assert (tmp_path / "Semester_1" / "Math").is_dir()

    assert main([*argv, "--yes"]) == EXIT_OK
    assert not (tmp_path / "Semester_1" / "Math").exists()
