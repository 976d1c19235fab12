"""
# process_folders/subjects_catalog.py

Matières du lycée (système des filières), trois semestres par année.
Chaque matière est un couple (en, ar).
"""

from __future__ import annotations

from collections.abc import Iterable

from school_folders.models.academic import (
    AcademicParameters,
    HighSchoolYear,
    InstitutionType,
    Language,
    OptionalFolderKind,
    TrackKind,
)
from school_folders.models.exceptions import ValidationError

SCHOOL_SEMESTER_COUNT = 3

Subject = tuple[str, str]
SemesterTable = tuple[tuple[Subject, ...], tuple[Subject, ...], tuple[Subject, ...]]

QURAN: Subject = ("Quran and Islamic Studies", "القرآن الكريم والدراسات الإسلامية")
ARABIC: Subject = ("Arabic Language", "اللغة العربية")
ENGLISH: Subject = ("English Language", "اللغة الإنجليزية")
MATH: Subject = ("Mathematics", "الرياضيات")
PHYSICS: Subject = ("Physics", "الفيزياء")
CHEMISTRY: Subject = ("Chemistry", "الكيمياء")
BIOLOGY: Subject = ("Biology", "الأحياء")
EARTH: Subject = ("Earth and Space Science", "علم الأرض والفضاء")
ECOLOGY: Subject = ("Environmental Science", "علم البيئة")
DIGITAL: Subject = ("Digital Skills", "المهارات الرقمية")
CRITICAL: Subject = ("Critical Thinking", "التفكير الناقد")
FITNESS: Subject = ("Physical and Health Education", "التربية البدنية والدفاع عن النفس")
LIFE_SKILLS: Subject = ("Life and Family Skills", "المهارات الحياتية والأسرية")
FINANCE: Subject = ("Financial Literacy", "المعرفة المالية")
SOCIAL: Subject = ("Social Studies", "الدراسات الاجتماعية")
CITIZENSHIP: Subject = ("Citizenship Education", "التربية الوطنية")
HISTORY: Subject = ("History", "التاريخ")
GEOGRAPHY: Subject = ("Geography", "الجغرافيا")
PSYCHOLOGY: Subject = ("Psychology", "علم النفس")
LAW: Subject = ("Principles of Law", "مبادئ القانون")
PROGRAMMING: Subject = ("Programming", "البرمجة")
AI: Subject = ("Artificial Intelligence", "الذكاء الاصطناعي")
IOT: Subject = ("Internet of Things", "إنترنت الأشياء")
DATA_SCIENCE: Subject = ("Data Science", "علم البيانات")
CYBERSECURITY: Subject = ("Cybersecurity", "الأمن السيبراني")
ENGINEERING: Subject = ("Engineering Design", "التصميم الهندسي")
HEALTH: Subject = ("Health Sciences", "مبادئ العلوم الصحية")
FIRST_AID: Subject = ("First Aid", "الإسعافات الأولية")
MANAGEMENT: Subject = ("Principles of Management", "مبادئ الإدارة")
ECONOMICS: Subject = ("Economics", "الاقتصاد")
ACCOUNTING: Subject = ("Accounting", "المحاسبة")
MARKETING: Subject = ("Marketing", "التسويق")
FEASIBILITY: Subject = ("Feasibility Studies", "دراسات الجدوى")
STATISTICS: Subject = ("Statistics", "الإحصاء")
FIQH: Subject = ("Fiqh", "الفقه")
HADITH: Subject = ("Hadith", "الحديث")
TAFSIR: Subject = ("Tafsir", "التفسير")
TAWHID: Subject = ("Tawhid", "التوحيد")
FARAID: Subject = ("Inheritance Law", "الفرائض")
USUL: Subject = ("Principles of Fiqh", "أصول الفقه")
TAJWID: Subject = ("Tajwid", "التجويد")
ARTS: Subject = ("Art Education", "التربية الفنية")
RESEARCH: Subject = ("Research Methodology", "البحث ومصادر المعلومات")

_FIRST_YEAR: SemesterTable = (
    (QURAN, ARABIC, ENGLISH, MATH, DIGITAL, FITNESS, CRITICAL),
    (QURAN, ARABIC, ENGLISH, MATH, PHYSICS, SOCIAL, LIFE_SKILLS),
    (QURAN, ARABIC, ENGLISH, MATH, CHEMISTRY, BIOLOGY, FINANCE),
)

_CATALOG: dict[tuple[HighSchoolYear, TrackKind | None], SemesterTable] = {
    (HighSchoolYear.FIRST, None): _FIRST_YEAR,
    # --- Deuxième année ---
    (HighSchoolYear.SECOND, TrackKind.GENERAL): (
        (QURAN, ARABIC, ENGLISH, MATH, PHYSICS, HISTORY, FITNESS),
        (QURAN, ARABIC, ENGLISH, MATH, CHEMISTRY, GEOGRAPHY, DIGITAL),
        (QURAN, ARABIC, ENGLISH, MATH, BIOLOGY, CITIZENSHIP, ARTS),
    ),
    (HighSchoolYear.SECOND, TrackKind.COMPUTER_SCIENCE): (
        (QURAN, ARABIC, ENGLISH, MATH, PHYSICS, PROGRAMMING, FITNESS),
        (QURAN, ARABIC, ENGLISH, MATH, CHEMISTRY, IOT, ENGINEERING),
        (QURAN, ARABIC, ENGLISH, MATH, PHYSICS, DATA_SCIENCE, CITIZENSHIP),
    ),
    (HighSchoolYear.SECOND, TrackKind.HEALTH_AND_LIFE): (
        (QURAN, ARABIC, ENGLISH, MATH, PHYSICS, BIOLOGY, FITNESS),
        (QURAN, ARABIC, ENGLISH, MATH, CHEMISTRY, HEALTH, DIGITAL),
        (QURAN, ARABIC, ENGLISH, MATH, BIOLOGY, FIRST_AID, CITIZENSHIP),
    ),
    (HighSchoolYear.SECOND, TrackKind.BUSINESS_ADMINISTRATION): (
        (QURAN, ARABIC, ENGLISH, MATH, MANAGEMENT, ECONOMICS, FITNESS),
        (QURAN, ARABIC, ENGLISH, MATH, ACCOUNTING, DIGITAL, HISTORY),
        (QURAN, ARABIC, ENGLISH, STATISTICS, MARKETING, CITIZENSHIP, GEOGRAPHY),
    ),
    (HighSchoolYear.SECOND, TrackKind.SHARIAH): (
        (ARABIC, ENGLISH, MATH, TAWHID, TAJWID, HISTORY, FITNESS),
        (ARABIC, ENGLISH, MATH, FIQH, HADITH, DIGITAL, GEOGRAPHY),
        (ARABIC, ENGLISH, TAFSIR, FIQH, PSYCHOLOGY, CITIZENSHIP, RESEARCH),
    ),
    # --- Troisième année ---
    (HighSchoolYear.THIRD, TrackKind.GENERAL): (
        (QURAN, ARABIC, ENGLISH, MATH, EARTH, PSYCHOLOGY, FITNESS),
        (QURAN, ARABIC, ENGLISH, MATH, ECOLOGY, LAW, RESEARCH),
        (QURAN, ARABIC, ENGLISH, STATISTICS, CYBERSECURITY, FINANCE, ARTS),
    ),
    (HighSchoolYear.THIRD, TrackKind.COMPUTER_SCIENCE): (
        (QURAN, ARABIC, ENGLISH, MATH, PHYSICS, AI, FITNESS),
        (QURAN, ARABIC, ENGLISH, MATH, CYBERSECURITY, ENGINEERING, RESEARCH),
        (QURAN, ARABIC, ENGLISH, STATISTICS, EARTH, PROGRAMMING, LAW),
    ),
    (HighSchoolYear.THIRD, TrackKind.HEALTH_AND_LIFE): (
        (QURAN, ARABIC, ENGLISH, MATH, CHEMISTRY, BIOLOGY, FITNESS),
        (QURAN, ARABIC, ENGLISH, MATH, PHYSICS, HEALTH, RESEARCH),
        (QURAN, ARABIC, ENGLISH, STATISTICS, EARTH, ECOLOGY, LAW),
    ),
    (HighSchoolYear.THIRD, TrackKind.BUSINESS_ADMINISTRATION): (
        (QURAN, ARABIC, ENGLISH, MATH, ACCOUNTING, ECONOMICS, FITNESS),
        (QURAN, ARABIC, ENGLISH, FEASIBILITY, MARKETING, LAW, RESEARCH),
        (QURAN, ARABIC, ENGLISH, STATISTICS, MANAGEMENT, EARTH, PSYCHOLOGY),
    ),
    (HighSchoolYear.THIRD, TrackKind.SHARIAH): (
        (ARABIC, ENGLISH, MATH, TAWHID, HADITH, USUL, FITNESS),
        (ARABIC, ENGLISH, TAFSIR, FARAID, FIQH, LAW, RESEARCH),
        (ARABIC, ENGLISH, STATISTICS, TAJWID, USUL, EARTH, PSYCHOLOGY),
    ),
}


def school_subjects(year: HighSchoolYear, track: TrackKind | None, language: Language) -> list[list[str]]:
    """
    Matières par semestre pour une année (et une filière en 2e/3e année).

    Lève ValidationError si la combinaison année/filière n'existe pas.
    """
    key = (year, track if year.has_tracks else None)
    if year.has_tracks and track is None:
        raise ValidationError("filière requise", ctx={"year": str(year)})
    table = _CATALOG.get(key)
    if table is None:
        raise ValidationError("année/filière inconnue", ctx={"year": str(year), "track": str(track)})
    column = 1 if language is Language.AR else 0
    return [[subject[column] for subject in semester] for semester in table]


def school_parameters(
    *,
    year: str,
    high_school_year: HighSchoolYear,
    track: TrackKind | None,
    language: Language,
    optional_folders: Iterable[OptionalFolderKind] = (),
    subjects: list[list[str]] | None = None,
) -> AcademicParameters:
    """
    Paramètres « école » : trois semestres, matières tirées du catalogue sauf si fournies.
    """
    per_semester = subjects if subjects is not None else school_subjects(high_school_year, track, language)
    return AcademicParameters(
        institution_type=InstitutionType.SCHOOL,
        language=language,
        year=year,
        semester_count=SCHOOL_SEMESTER_COUNT,
        per_semester_subjects=per_semester,
        optional_folders=set(optional_folders),
        school_track=track,
        high_school_year=high_school_year,
    )
