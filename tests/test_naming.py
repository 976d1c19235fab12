import pytest

from school_folders.models.academic import HighSchoolYear, Language, OptionalFolderKind, TrackKind
from school_folders.process_folders.naming import (
    looks_like_semester_folder,
    resolve_calendar_label,
    resolve_optional_folder_label,
    resolve_semester_label,
    resolve_track_year_label,
)


def test_english_semester_labels_use_underscore():
    assert resolve_semester_label(1, Language.EN) == "Semester_1"
    assert resolve_semester_label(12, Language.EN) == "Semester_12"


def test_arabic_semester_ordinals_then_numeric_fallback():
    assert resolve_semester_label(1, Language.AR) == "الترم الأول"
    assert resolve_semester_label(2, Language.AR) == "الترم الثاني"
    assert resolve_semester_label(3, Language.AR) == "الترم الثالث"
    assert resolve_semester_label(4, Language.AR) == "الترم 4"
    assert resolve_semester_label(10, Language.AR) == "الترم 10"


def test_semester_index_must_be_positive():
    with pytest.raises(ValueError):
        resolve_semester_label(0, Language.EN)


@pytest.mark.parametrize("language", list(Language))
def test_every_optional_folder_has_a_label(language):
    labels = {resolve_optional_folder_label(kind, language) for kind in OptionalFolderKind}
    assert len(labels) == len(OptionalFolderKind)
    assert all(label.strip() for label in labels)


def test_optional_folder_labels():
    assert resolve_optional_folder_label(OptionalFolderKind.PROJECTS_RESEARCH, Language.EN) == "Projects & Research"
    assert resolve_optional_folder_label(OptionalFolderKind.EXAMS, Language.AR) == "الاختبارات"
    assert resolve_optional_folder_label(OptionalFolderKind.GENERAL, Language.AR) == "عام"
    assert resolve_calendar_label(Language.EN) == "Calendar & Deadlines"


def test_track_year_label():
    assert resolve_track_year_label(HighSchoolYear.FIRST, Language.AR) == "أول ثانوي"
    assert (
        resolve_track_year_label(HighSchoolYear.SECOND, Language.EN, TrackKind.COMPUTER_SCIENCE)
        == "Second Secondary - Computer Science and Engineering"
    )


@pytest.mark.parametrize(
    "name, expected",
    [
        ("Semester_1", True),
        ("Semester-2", True),
        ("الترم الأول", True),
        ("الترم 5", True),
        ("General", False),
        ("semester_1", False),
    ],
)
def test_looks_like_semester_folder(name, expected):
    assert looks_like_semester_folder(name) is expected
