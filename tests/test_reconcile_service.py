import json
import shutil

import pytest

from school_folders.io.config_store import config_path, load_configuration
from school_folders.models.config import LoadStatus
from school_folders.models.exceptions import (
    DirectoryNotFoundError,
    ErrCode,
    SchoolFoldersError,
    SubjectNotFoundError,
    ValidationError,
)
from school_folders.models.reconcile import ReconcileAction, ReconcileState
from school_folders.services.generate_service import generate_structure
from school_folders.services.reconcile_service import SubjectReconciler, add_subject, remove_subject
from school_folders.utils.logger import get_logger


@pytest.fixture
def generated_root(tmp_path, single_semester_params):
    return generate_structure(single_semester_params, tmp_path).root_path


def _loaded(root):
    reconciler = SubjectReconciler(root)
    reconciler.resolve_directory()
    reconciler.load_configuration()
    return reconciler


def test_add_subject_creates_folders_and_updates_config(generated_root):
    result = add_subject(generated_root, "Semester_1", "Chemistry")

    assert result.applied
    assert result.action is ReconcileAction.ADD_SUBJECT
    chemistry = generated_root / "Semester_1" / "Chemistry"
    assert chemistry.is_dir()
    assert (chemistry / "Exams").is_dir()
    assert (chemistry / "Study Materials").is_dir()
    assert load_configuration(generated_root).params.per_semester_subjects == [["Biology", "Chemistry"]]


def test_add_subject_by_index_trims_name(generated_root):
    result = add_subject(generated_root, 1, "  Chemistry  ")

    assert result.subject == "Chemistry"
    assert (generated_root / "Semester_1" / "Chemistry").is_dir()


@pytest.mark.parametrize("name", ["Biology", " Biology ", "", "   "])
def test_add_rejects_duplicates_and_empty_names(generated_root, snapshot, name):
    before = snapshot(generated_root)
    config_before = config_path(generated_root).read_text(encoding="utf-8")
    reconciler = _loaded(generated_root)

    with pytest.raises(ValidationError):
        reconciler.add_subject("Semester_1", name)

    assert reconciler.state is ReconcileState.ABORTED
    assert snapshot(generated_root) == before
    assert config_path(generated_root).read_text(encoding="utf-8") == config_before


def test_unknown_semester_is_rejected(generated_root):
    with pytest.raises(ValidationError):
        add_subject(generated_root, "Semester_9", "Chemistry")


def test_remove_subject_deletes_subtree_and_updates_config(generated_root):
    (generated_root / "Semester_1" / "Biology" / "Exams" / "notes.txt").write_text("x", encoding="utf-8")

    result = remove_subject(generated_root, "Semester_1", "Biology", confirmed=True)

    assert result.applied
    assert result.removed_path == generated_root / "Semester_1" / "Biology"
    assert not result.removed_path.exists()
    assert load_configuration(generated_root).params.per_semester_subjects == [[]]


def test_remove_unknown_subject_mutates_nothing(generated_root, snapshot):
    before = snapshot(generated_root)
    config_before = config_path(generated_root).read_text(encoding="utf-8")

    with pytest.raises(SubjectNotFoundError):
        remove_subject(generated_root, "Semester_1", "Chemistry", confirmed=True)

    assert snapshot(generated_root) == before
    assert config_path(generated_root).read_text(encoding="utf-8") == config_before


def test_remove_requires_confirmation(generated_root):
    result = remove_subject(generated_root, "Semester_1", "Biology", confirmed=False)

    assert result.state is ReconcileState.ABORTED
    assert (generated_root / "Semester_1" / "Biology").is_dir()
    assert load_configuration(generated_root).params.per_semester_subjects == [["Biology"]]


def test_remove_when_folder_already_gone_updates_config(generated_root):
    shutil.rmtree(generated_root / "Semester_1" / "Biology")

    result = remove_subject(generated_root, 1, "Biology", confirmed=True)

    assert result.applied
    assert load_configuration(generated_root).params.per_semester_subjects == [[]]


def test_missing_directory(tmp_path):
    with pytest.raises(DirectoryNotFoundError):
        add_subject(tmp_path / "nope", 1, "Chemistry")


def test_missing_config_is_not_reconcilable(tmp_path):
    (tmp_path / "Semester_1").mkdir()

    result = add_subject(tmp_path, 1, "Chemistry")

    assert result.state is ReconcileState.ABORTED
    assert result.config_status is LoadStatus.NOT_FOUND
    assert not (tmp_path / "Semester_1" / "Chemistry").exists()


def test_corrupt_config_is_not_reconcilable(generated_root):
    config_path(generated_root).write_text("{oops", encoding="utf-8")

    result = remove_subject(generated_root, 1, "Biology", confirmed=True)

    assert result.config_status is LoadStatus.CORRUPT
    assert (generated_root / "Semester_1" / "Biology").is_dir()


def test_no_semester_folders_and_declined(generated_root):
    shutil.rmtree(generated_root / "Semester_1")

    result = add_subject(generated_root, 1, "Chemistry")

    assert result.state is ReconcileState.ABORTED
    assert not (generated_root / "Semester_1").exists()
    assert load_configuration(generated_root).params.per_semester_subjects == [["Biology"]]


def test_no_semester_folders_recreated_on_request(generated_root):
    shutil.rmtree(generated_root / "Semester_1")

    result = add_subject(generated_root, 1, "Chemistry", create_missing_semesters=True)

    assert result.applied
    assert (generated_root / "Semester_1" / "Biology" / "Exams").is_dir()
    assert (generated_root / "Semester_1" / "Chemistry").is_dir()


def test_state_machine_transitions(generated_root):
    reconciler = SubjectReconciler(generated_root)
    assert reconciler.state is ReconcileState.IDLE

    with pytest.raises(SchoolFoldersError):
        reconciler.load_configuration()

    reconciler.resolve_directory()
    assert reconciler.state is ReconcileState.DIRECTORY_RESOLVED
    reconciler.load_configuration()
    assert reconciler.state is ReconcileState.CONFIG_LOADED
    assert reconciler.existing_semesters() == ["Semester_1"]

    reconciler.add_subject(1, "Chemistry")
    assert reconciler.state is ReconcileState.APPLIED

    # une seule action par invocation
    with pytest.raises(SchoolFoldersError):
        reconciler.remove_subject(1, "Chemistry", confirmed=True)


def test_failed_subject_creation_keeps_config(generated_root, monkeypatch):
    from school_folders.process_folders import materializer

    def deny(path):
        raise PermissionError(13, "Permission denied", str(path))

    monkeypatch.setattr(materializer, "_create_dir", deny)

    result = add_subject(generated_root, 1, "Chemistry")

    assert result.state is ReconcileState.ABORTED
    assert result.report is not None and not result.report.ok
    assert load_configuration(generated_root).params.per_semester_subjects == [["Biology"]]


def test_hand_edited_dotdot_subject_cannot_remove_root(generated_root, snapshot):
    data = json.loads(config_path(generated_root).read_text(encoding="utf-8"))
    data["perSemesterSubjects"][0].append("..")
    config_path(generated_root).write_text(json.dumps(data), encoding="utf-8")
    before = snapshot(generated_root)

    result = remove_subject(generated_root, 1, "..", confirmed=True)

    assert result.state is ReconcileState.ABORTED
    assert result.config_status is LoadStatus.CORRUPT
    assert snapshot(generated_root) == before
    assert config_path(generated_root).is_file()


def test_remove_refuses_path_outside_semester(generated_root, snapshot):
    reconciler = _loaded(generated_root)
    reconciler.params.per_semester_subjects[0].append("..")
    before = snapshot(generated_root)

    with pytest.raises(SchoolFoldersError) as excinfo:
        reconciler.remove_subject(1, "..", confirmed=True)

    assert excinfo.value.code is ErrCode.FILEERROR
    assert reconciler.state is ReconcileState.ABORTED
    assert snapshot(generated_root) == before
    assert load_configuration(generated_root).params.per_semester_subjects == [["Biology"]]


def test_reconciler_log_is_the_given_logger(generated_root):
    parent = get_logger("tests.reconcile")

    assert SubjectReconciler(generated_root, logger=parent).log is parent
    assert SubjectReconciler(generated_root).log is not None
