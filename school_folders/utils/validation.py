"""
validation.py - contrôles des saisies utilisateur (avant appel du cœur).
"""

from __future__ import annotations

import re

from school_folders.models.academic import HighSchoolYear, OptionalFolderKind, TrackKind
from school_folders.models.exceptions import ValidationError

_GREGORIAN_RANGE = re.compile(r"^(20\d{2})-(20\d{2})$")
_HIJRI_RANGE = re.compile(r"^(14\d{2})-(14\d{2})$")

_OPTIONAL_FOLDER_ALIASES: dict[str, OptionalFolderKind] = {
    "study materials": OptionalFolderKind.STUDY_MATERIALS,
    "projects & research": OptionalFolderKind.PROJECTS_RESEARCH,
    "projects and research": OptionalFolderKind.PROJECTS_RESEARCH,
}


def _consecutive(value: str, pattern: re.Pattern[str], calendar: str) -> str:
    year = value.strip()
    match = pattern.match(year)
    if not match:
        raise ValidationError(f"plage d'années {calendar} invalide", ctx={"year": value})
    start, end = (int(g) for g in match.groups())
    if end != start + 1:
        raise ValidationError("l'année de fin doit suivre l'année de début", ctx={"year": value})
    return year


def validate_university_year(value: str) -> str:
    """2023-2024 : grégorien, années consécutives."""
    return _consecutive(value, _GREGORIAN_RANGE, "grégorienne")


def validate_school_year(value: str) -> str:
    """1445-1446 : hégirien, années consécutives."""
    return _consecutive(value, _HIJRI_RANGE, "hégirienne")


def validate_semester_count(value: int | str) -> int:
    try:
        count = int(value)
    except (TypeError, ValueError) as exc:
        raise ValidationError("nombre de semestres invalide", ctx={"semesters": value}) from exc
    if count < 1:
        raise ValidationError("nombre de semestres invalide", ctx={"semesters": value})
    return count


def validate_track(year: HighSchoolYear, track: TrackKind | None) -> TrackKind | None:
    if year.has_tracks and track is None:
        raise ValidationError("filière requise en 2e/3e année", ctx={"year": str(year)})
    if not year.has_tracks and track is not None:
        raise ValidationError("pas de filière en 1re année", ctx={"track": str(track)})
    return track


def parse_optional_folders(raw: str | None) -> set[OptionalFolderKind]:
    """
    Liste séparée par des virgules : valeurs (`exams`) ou libellés anglais (`Study Materials`).
    """
    kinds: set[OptionalFolderKind] = set()
    for item in (raw or "").split(","):
        token = item.strip().lower()
        if not token:
            continue
        kind = _OPTIONAL_FOLDER_ALIASES.get(token)
        if kind is None:
            try:
                kind = OptionalFolderKind(token.replace(" ", "_"))
            except ValueError as exc:
                raise ValidationError("dossier complémentaire inconnu", ctx={"folder": item.strip()}) from exc
        kinds.add(kind)
    return kinds


def parse_subject_list(raw: str) -> list[str]:
    """
    `"Math, Physics"` → `["Math", "Physics"]`. Une entrée vide est refusée.
    """
    subjects = [s.strip() for s in raw.split(",")]
    if not subjects or any(not s for s in subjects):
        raise ValidationError("nom de matière vide", ctx={"subjects": raw})
    return subjects
