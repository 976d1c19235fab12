"""
# process_folders/naming.py

Libellés affichés (semestres, année/filière, dossiers complémentaires), en anglais ou en arabe.
Fonctions pures : aucune lecture d'état externe.
"""

from __future__ import annotations

from functools import cache

from school_folders.models.academic import HighSchoolYear, Language, OptionalFolderKind, TrackKind

SEMESTER_PREFIX_EN = "Semester_"
SEMESTER_WORD_AR = "الترم"

_AR_SEMESTER_ORDINALS = ("الترم الأول", "الترم الثاني", "الترم الثالث")

_OPTIONAL_FOLDER_LABELS: dict[Language, dict[OptionalFolderKind, str]] = {
    Language.EN: {
        OptionalFolderKind.STUDY_MATERIALS: "Study Materials",
        OptionalFolderKind.PROJECTS_RESEARCH: "Projects & Research",
        OptionalFolderKind.PRESENTATIONS: "Presentations",
        OptionalFolderKind.EXAMS: "Exams",
        OptionalFolderKind.GENERAL: "General",
    },
    Language.AR: {
        OptionalFolderKind.STUDY_MATERIALS: "مواد دراسية",
        OptionalFolderKind.PROJECTS_RESEARCH: "مشاريع والأبحاث",
        OptionalFolderKind.PRESENTATIONS: "العروض التقديمية",
        OptionalFolderKind.EXAMS: "الاختبارات",
        OptionalFolderKind.GENERAL: "عام",
    },
}

_CALENDAR_LABELS: dict[Language, str] = {
    Language.EN: "Calendar & Deadlines",
    Language.AR: "التقويم والمواعيد النهائية",
}

_YEAR_LABELS: dict[Language, dict[HighSchoolYear, str]] = {
    Language.EN: {
        HighSchoolYear.FIRST: "First Secondary",
        HighSchoolYear.SECOND: "Second Secondary",
        HighSchoolYear.THIRD: "Third Secondary",
    },
    Language.AR: {
        HighSchoolYear.FIRST: "أول ثانوي",
        HighSchoolYear.SECOND: "ثاني ثانوي",
        HighSchoolYear.THIRD: "ثالث ثانوي",
    },
}

_TRACK_LABELS: dict[Language, dict[TrackKind, str]] = {
    Language.EN: {
        TrackKind.GENERAL: "General Track",
        TrackKind.COMPUTER_SCIENCE: "Computer Science and Engineering",
        TrackKind.HEALTH_AND_LIFE: "Health and Life",
        TrackKind.BUSINESS_ADMINISTRATION: "Business Administration",
        TrackKind.SHARIAH: "Shariah Track",
    },
    Language.AR: {
        TrackKind.GENERAL: "المسار العام",
        TrackKind.COMPUTER_SCIENCE: "مسار علوم الحاسب والهندسة",
        TrackKind.HEALTH_AND_LIFE: "مسار الصحة والحياة",
        TrackKind.BUSINESS_ADMINISTRATION: "مسار إدارة الأعمال",
        TrackKind.SHARIAH: "المسار الشرعي",
    },
}

# Tables totales : une traduction manquante casse à l'import, pas à l'exécution.
for _lang in Language:
    for _table, _enum in (
        (_OPTIONAL_FOLDER_LABELS, OptionalFolderKind),
        (_YEAR_LABELS, HighSchoolYear),
        (_TRACK_LABELS, TrackKind),
    ):
        _missing = set(_enum) - set(_table[_lang])  # type: ignore[arg-type]
        if _missing:
            raise RuntimeError(f"libellés manquants ({_lang}): {sorted(m.value for m in _missing)}")
    if _lang not in _CALENDAR_LABELS:
        raise RuntimeError(f"libellé calendrier manquant ({_lang})")


@cache
def resolve_semester_label(index: int, language: Language) -> str:
    """
    Libellé du semestre `index` (1..N).

    - en : `Semester_<index>`
    - ar : ordinal fixe pour 1..3, sinon `الترم <index>`
    """
    if index < 1:
        raise ValueError(f"index de semestre invalide: {index}")
    if language is Language.AR:
        if index <= len(_AR_SEMESTER_ORDINALS):
            return _AR_SEMESTER_ORDINALS[index - 1]
        return f"{SEMESTER_WORD_AR} {index}"
    return f"{SEMESTER_PREFIX_EN}{index}"


def resolve_track_year_label(year: HighSchoolYear, language: Language, track: TrackKind | None = None) -> str:
    label = _YEAR_LABELS[language][year]
    if track is not None:
        label = f"{label} - {resolve_track_label(track, language)}"
    return label


def resolve_track_label(track: TrackKind, language: Language) -> str:
    return _TRACK_LABELS[language][track]


def resolve_optional_folder_label(kind: OptionalFolderKind, language: Language) -> str:
    return _OPTIONAL_FOLDER_LABELS[language][kind]


def resolve_calendar_label(language: Language) -> str:
    return _CALENDAR_LABELS[language]


_SEMESTER_FOLDER_PREFIXES = (SEMESTER_PREFIX_EN, "Semester-", SEMESTER_WORD_AR)


def looks_like_semester_folder(name: str) -> bool:
    """
    Nom de dossier ressemblant à un semestre, toutes langues confondues (mode dégradé).
    """
    return name.startswith(_SEMESTER_FOLDER_PREFIXES)
