from __future__ import annotations

import os
from pathlib import Path
import tempfile

# Avant tout import du paquet : logs dans un dossier temporaire, pas de .env local.
os.environ["LOG_FILE_PATH"] = tempfile.mkdtemp(prefix="school-folders-logs-")
os.environ["SCHOOL_FOLDERS_ENV_FILE"] = str(Path(tempfile.gettempdir()) / "school-folders-tests-missing.env")

import pytest  # noqa: E402

from school_folders.models.academic import (  # noqa: E402
    AcademicParameters,
    InstitutionType,
    Language,
    OptionalFolderKind,
)


@pytest.fixture
def university_params() -> AcademicParameters:
    return AcademicParameters(
        institution_type=InstitutionType.UNIVERSITY,
        language=Language.EN,
        year="2024-2025",
        semester_count=2,
        per_semester_subjects=[["Biology", "Math"], ["Physics"]],
        optional_folders={OptionalFolderKind.EXAMS},
    )


@pytest.fixture
def single_semester_params() -> AcademicParameters:
    return AcademicParameters(
        institution_type=InstitutionType.UNIVERSITY,
        language=Language.EN,
        year="2024-2025",
        semester_count=1,
        per_semester_subjects=[["Biology"]],
        optional_folders={OptionalFolderKind.EXAMS, OptionalFolderKind.STUDY_MATERIALS},
    )


@pytest.fixture
def snapshot():
    def _snapshot(base: Path) -> list[str]:
        return sorted(p.relative_to(base).as_posix() for p in base.rglob("*") if p.is_dir())

    return _snapshot
