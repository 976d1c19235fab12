import json

import pytest

from school_folders.io.config_store import config_path, load_configuration, save_configuration
from school_folders.models.academic import HighSchoolYear, Language, OptionalFolderKind, TrackKind
from school_folders.models.config import LoadStatus
from school_folders.models.exceptions import ErrCode, SchoolFoldersError
from school_folders.process_folders.subjects_catalog import school_parameters


def test_round_trip(tmp_path, university_params):
    save_configuration(tmp_path, university_params)

    result = load_configuration(tmp_path)

    assert result.status is LoadStatus.OK
    assert result.params == university_params


def test_round_trip_school_arabic(tmp_path):
    params = school_parameters(
        year="1446-1447",
        high_school_year=HighSchoolYear.SECOND,
        track=TrackKind.SHARIAH,
        language=Language.AR,
        optional_folders={OptionalFolderKind.GENERAL},
    )
    save_configuration(tmp_path, params)

    assert load_configuration(tmp_path).params == params
    # UTF-8 lisible, pas d'échappement \u
    assert "الفقه" in config_path(tmp_path).read_text(encoding="utf-8")


def test_file_is_hidden_pretty_json_with_expected_keys(tmp_path, university_params):
    target = save_configuration(tmp_path, university_params)

    assert target.name == ".school-folders-config.json"
    text = target.read_text(encoding="utf-8")
    assert text.startswith("{\n  ")
    assert json.loads(text) == {
        "institutionType": "university",
        "language": "en",
        "year": "2024-2025",
        "semesterCount": 2,
        "perSemesterSubjects": [["Biology", "Math"], ["Physics"]],
        "optionalFolders": ["exams"],
    }


def test_save_is_full_overwrite(tmp_path, university_params):
    save_configuration(tmp_path, university_params)
    university_params.per_semester_subjects[1].clear()

    save_configuration(tmp_path, university_params)

    assert load_configuration(tmp_path).params.per_semester_subjects == [["Biology", "Math"], []]
    assert [p.name for p in tmp_path.iterdir()] == [".school-folders-config.json"]


def test_missing_file_is_not_found(tmp_path):
    result = load_configuration(tmp_path)

    assert result.status is LoadStatus.NOT_FOUND
    assert result.params is None
    assert not result.ok


@pytest.mark.parametrize(
    "content",
    [
        "{not json",
        "[]",
        json.dumps({"institutionType": "university", "language": "en"}),
        json.dumps(
            {
                "institutionType": "university",
                "language": "en",
                "year": "2024-2025",
                "semesterCount": 3,
                "perSemesterSubjects": [["Math"]],
                "optionalFolders": [],
            }
        ),
        json.dumps(
            {
                "institutionType": "college",
                "language": "en",
                "year": "2024-2025",
                "semesterCount": 1,
                "perSemesterSubjects": [["Math"]],
            }
        ),
    ],
)
def test_corrupt_file_is_distinct_from_not_found(tmp_path, content):
    config_path(tmp_path).write_text(content, encoding="utf-8")

    result = load_configuration(tmp_path)

    assert result.status is LoadStatus.CORRUPT
    assert result.error


def test_save_into_missing_root_fails(tmp_path, university_params):
    with pytest.raises(SchoolFoldersError) as excinfo:
        save_configuration(tmp_path / "missing", university_params)

    assert excinfo.value.code is ErrCode.FILEERROR


@pytest.mark.parametrize("bad_subject", ["..", "a/b", "", 42])
def test_hand_edited_subject_names_are_checked(tmp_path, university_params, bad_subject):
    save_configuration(tmp_path, university_params)
    data = json.loads(config_path(tmp_path).read_text(encoding="utf-8"))
    data["perSemesterSubjects"][0].append(bad_subject)
    config_path(tmp_path).write_text(json.dumps(data), encoding="utf-8")

    assert load_configuration(tmp_path).status is LoadStatus.CORRUPT


def test_failed_write_leaves_no_temp_file(tmp_path, university_params, monkeypatch):
    from school_folders.io import paths

    def broken_fsync(fd):
        raise OSError(28, "No space left on device")

    monkeypatch.setattr(paths.os, "fsync", broken_fsync)

    with pytest.raises(SchoolFoldersError) as excinfo:
        save_configuration(tmp_path, university_params)

    assert excinfo.value.code is ErrCode.FILEERROR
    assert list(tmp_path.iterdir()) == []
