"""
# process_folders/plan_builder.py

Construction du plan de dossiers (arbre FolderNode) à partir des paramètres académiques.
Aucune I/O : même entrée → même arbre.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import replace

from school_folders.models.academic import AcademicParameters, InstitutionType, OptionalFolderKind
from school_folders.models.exceptions import ValidationError
from school_folders.models.folders import FolderNode
from school_folders.process_folders.naming import (
    resolve_calendar_label,
    resolve_optional_folder_label,
    resolve_semester_label,
    resolve_track_year_label,
)

_FORBIDDEN_NAMES = {".", ".."}
_FORBIDDEN_CHARS = ("/", "\\", "\x00")


def clean_subject_name(raw: str) -> str:
    """
    Nom de matière nettoyé (strip).

    Lève ValidationError si le nom est vide après nettoyage ou ne peut pas être un segment de chemin.
    """
    name = raw.strip() if isinstance(raw, str) else ""
    if not name:
        raise ValidationError("nom de matière vide", ctx={"subject": raw})
    if name in _FORBIDDEN_NAMES or any(ch in name for ch in _FORBIDDEN_CHARS):
        raise ValidationError("nom de matière invalide", ctx={"subject": raw})
    return name


def merge_subject_names(names: Iterable[str]) -> list[str]:
    """
    Nettoie et fusionne les doublons (après strip), en gardant la première occurrence.
    """
    merged: list[str] = []
    for raw in names:
        name = clean_subject_name(raw)
        if name not in merged:
            merged.append(name)
    return merged


def normalize_parameters(params: AcademicParameters) -> AcademicParameters:
    """
    Copie des paramètres avec les listes de matières telles qu'elles seront créées.
    """
    return replace(
        params,
        per_semester_subjects=[merge_subject_names(subjects) for subjects in params.per_semester_subjects],
        optional_folders=set(params.optional_folders),
    )


def root_folder_name(params: AcademicParameters) -> str:
    """
    École : `<année/filière> <year>` ; université : `<year>`.
    """
    year = params.year.strip()
    if params.institution_type is InstitutionType.SCHOOL and params.high_school_year is not None:
        label = resolve_track_year_label(params.high_school_year, params.language, params.school_track)
        return f"{label} {year}"
    return year


def build_subject_node(subject: str, params: AcademicParameters) -> FolderNode:
    node = FolderNode(clean_subject_name(subject))
    for kind in params.subject_folder_kinds:
        node.add_child(FolderNode(resolve_optional_folder_label(kind, params.language)))
    return node


def build_semester_node(index: int, subjects: Iterable[str], params: AcademicParameters) -> FolderNode:
    node = FolderNode(resolve_semester_label(index, params.language))
    for subject in subjects:
        # doublon → fusion silencieuse (pas de « Math (1) »)
        node.add_child(build_subject_node(subject, params))
    return node


def build_general_node(params: AcademicParameters) -> FolderNode:
    return FolderNode(
        resolve_optional_folder_label(OptionalFolderKind.GENERAL, params.language),
        [FolderNode(resolve_calendar_label(params.language))],
    )


def build_plan(params: AcademicParameters, root_label: str | None = None) -> FolderNode:
    """
    Plan complet : racine → (Général) → semestres → matières → dossiers complémentaires.

    Args:
        params: paramètres validés.
        root_label: nom de racine imposé (sinon dérivé du type d'établissement).

    Returns:
        FolderNode racine.
    """
    if len(params.per_semester_subjects) != params.semester_count:
        raise ValidationError(
            "perSemesterSubjects ne correspond pas à semesterCount",
            ctx={"semesterCount": params.semester_count, "found": len(params.per_semester_subjects)},
        )

    root = FolderNode(root_label if root_label is not None else root_folder_name(params))
    if not root.name:
        raise ValidationError("nom de racine vide", ctx={"year": params.year})

    if OptionalFolderKind.GENERAL in params.optional_folders:
        root.add_child(build_general_node(params))

    for index, subjects in enumerate(params.per_semester_subjects, start=1):
        root.add_child(build_semester_node(index, subjects, params))
    return root
