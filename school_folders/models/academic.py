"""
# models/academic.py
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from school_folders.models.exceptions import ValidationError


class InstitutionType(str, Enum):
    SCHOOL = "school"
    UNIVERSITY = "university"

    def __str__(self) -> str:
        return self.value


class Language(str, Enum):
    EN = "en"
    AR = "ar"

    def __str__(self) -> str:
        return self.value


class OptionalFolderKind(str, Enum):
    """
    Dossiers complémentaires proposés à l'utilisateur.

    GENERAL est créé une seule fois à la racine de l'année, les autres dans chaque matière.
    """

    STUDY_MATERIALS = "study_materials"
    PROJECTS_RESEARCH = "projects_research"
    PRESENTATIONS = "presentations"
    EXAMS = "exams"
    GENERAL = "general"

    def __str__(self) -> str:
        return self.value

    @property
    def per_subject(self) -> bool:
        return self is not OptionalFolderKind.GENERAL


class TrackKind(str, Enum):
    GENERAL = "general"
    COMPUTER_SCIENCE = "cs"
    HEALTH_AND_LIFE = "health"
    BUSINESS_ADMINISTRATION = "business"
    SHARIAH = "shariah"

    def __str__(self) -> str:
        return self.value


class HighSchoolYear(str, Enum):
    FIRST = "first"
    SECOND = "second"
    THIRD = "third"

    def __str__(self) -> str:
        return self.value

    @property
    def has_tracks(self) -> bool:
        return self is not HighSchoolYear.FIRST


def ordered_optional_folders(kinds: Iterable[OptionalFolderKind]) -> list[OptionalFolderKind]:
    """
    Ordre stable (ordre de déclaration de l'Enum), indépendant de l'ordre du set.
    """
    wanted = set(kinds)
    return [kind for kind in OptionalFolderKind if kind in wanted]


def _enum_value(enum_cls: type[Enum], raw: Any, key: str) -> Any:
    try:
        return enum_cls(raw)
    except ValueError as exc:
        raise ValidationError(f"valeur invalide pour {key}: {raw!r}", ctx={"key": key, "value": raw}) from exc


@dataclass(slots=True, kw_only=True)
class AcademicParameters:
    """
    Paramètres ayant produit une arborescence (contenu du fichier de configuration).

    Attributes:
        institution_type: école ou université.
        language: langue des libellés générés.
        year: plage d'années telle que saisie (ex. 2024-2025 ou 1446-1447).
        semester_count: nombre de semestres (== len(per_semester_subjects)).
        per_semester_subjects: matières, une liste ordonnée par semestre.
        optional_folders: dossiers complémentaires choisis.
        school_track: filière (école, 2e/3e année uniquement).
        high_school_year: année de lycée (école uniquement).
    """

    institution_type: InstitutionType
    language: Language
    year: str
    semester_count: int
    per_semester_subjects: list[list[str]]
    optional_folders: set[OptionalFolderKind] = field(default_factory=set)
    school_track: TrackKind | None = None
    high_school_year: HighSchoolYear | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.year, str) or not self.year.strip():
            raise ValidationError("année vide", ctx={"year": self.year})
        if isinstance(self.semester_count, bool) or not isinstance(self.semester_count, int):
            raise ValidationError("semesterCount doit être un entier", ctx={"semesterCount": self.semester_count})
        if self.semester_count < 1:
            raise ValidationError("semesterCount doit être >= 1", ctx={"semesterCount": self.semester_count})
        if len(self.per_semester_subjects) != self.semester_count:
            raise ValidationError(
                "perSemesterSubjects ne correspond pas à semesterCount",
                ctx={"semesterCount": self.semester_count, "found": len(self.per_semester_subjects)},
            )
        if self.institution_type is InstitutionType.SCHOOL:
            if self.high_school_year is None:
                raise ValidationError("highSchoolYear requis pour une école")
            if self.high_school_year.has_tracks and self.school_track is None:
                raise ValidationError("schoolTrack requis en 2e/3e année", ctx={"year": str(self.high_school_year)})
            if not self.high_school_year.has_tracks and self.school_track is not None:
                raise ValidationError("pas de filière en 1re année", ctx={"track": str(self.school_track)})
        elif self.school_track is not None or self.high_school_year is not None:
            raise ValidationError("schoolTrack/highSchoolYear réservés aux écoles")

    # --- Helpers pratiques -----------------------------------------------------

    @property
    def subject_folder_kinds(self) -> list[OptionalFolderKind]:
        """
        Dossiers complémentaires à créer dans chaque matière (tout sauf GENERAL).
        """
        return [kind for kind in ordered_optional_folders(self.optional_folders) if kind.per_subject]

    def to_dict(self) -> dict[str, Any]:
        """
        Représentation JSON (clés camelCase, enums en valeur).
        """
        data: dict[str, Any] = {
            "institutionType": self.institution_type.value,
            "language": self.language.value,
            "year": self.year,
            "semesterCount": self.semester_count,
            "perSemesterSubjects": [list(subjects) for subjects in self.per_semester_subjects],
            "optionalFolders": [kind.value for kind in ordered_optional_folders(self.optional_folders)],
        }
        if self.school_track is not None:
            data["schoolTrack"] = self.school_track.value
        if self.high_school_year is not None:
            data["highSchoolYear"] = self.high_school_year.value
        return data

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> AcademicParameters:
        """
        Construit depuis le JSON persisté.

        Lève ValidationError si une clé manque ou a un type inattendu.
        """
        if not isinstance(data, Mapping):
            raise ValidationError("la configuration doit être un objet JSON")
        missing = [
            key
            for key in ("institutionType", "language", "year", "semesterCount", "perSemesterSubjects")
            if key not in data
        ]
        if missing:
            raise ValidationError("clés manquantes", ctx={"missing": missing})

        subjects = data["perSemesterSubjects"]
        if not isinstance(subjects, list) or not all(
            isinstance(sem, list) and all(isinstance(s, str) for s in sem) for sem in subjects
        ):
            raise ValidationError("perSemesterSubjects doit être une liste de listes de chaînes")

        optional_raw = data.get("optionalFolders", [])
        if not isinstance(optional_raw, list):
            raise ValidationError("optionalFolders doit être une liste")

        track_raw = data.get("schoolTrack")
        year_raw = data.get("highSchoolYear")
        return cls(
            institution_type=_enum_value(InstitutionType, data["institutionType"], "institutionType"),
            language=_enum_value(Language, data["language"], "language"),
            year=data["year"],
            semester_count=data["semesterCount"],
            per_semester_subjects=[list(sem) for sem in subjects],
            optional_folders={_enum_value(OptionalFolderKind, raw, "optionalFolders") for raw in optional_raw},
            school_track=_enum_value(TrackKind, track_raw, "schoolTrack") if track_raw is not None else None,
            high_school_year=(
                _enum_value(HighSchoolYear, year_raw, "highSchoolYear") if year_raw is not None else None
            ),
        )
