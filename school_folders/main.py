#!/usr/bin/env python3
"""
main.py.

Création et édition d'arborescences scolaires / universitaires.

Commandes
---------
create : année → semestres → matières → dossiers complémentaires, puis configuration cachée
         dans la racine générée.
edit   : ajout OU suppression d'une matière dans une racine existante, à partir de sa configuration.
         `--fallback` autorise l'édition par listing des dossiers quand la configuration manque.

Sécurité
--------
- `--dry-run` affiche le plan sans rien créer.
- `edit --remove` ne supprime rien sans `--yes`.
"""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from pathlib import Path

from school_folders.models.academic import (
    AcademicParameters,
    HighSchoolYear,
    InstitutionType,
    Language,
    TrackKind,
)
from school_folders.models.config import LoadStatus
from school_folders.models.exceptions import SchoolFoldersError, ValidationError
from school_folders.models.reconcile import ReconcileResult
from school_folders.process_folders.subjects_catalog import school_parameters
from school_folders.services import fallback_editor
from school_folders.services.generate_service import generate_structure, preview_structure
from school_folders.services.reconcile_service import add_subject, remove_subject
from school_folders.utils.config import DEFAULT_BASE_DIR, DEFAULT_LANGUAGE
from school_folders.utils.logger import LoggerProtocol, get_logger
from school_folders.utils.safe_runner import safe_main
from school_folders.utils.validation import (
    parse_optional_folders,
    parse_subject_list,
    validate_school_year,
    validate_semester_count,
    validate_track,
    validate_university_year,
)

EXIT_OK = 0
EXIT_FAILED = 1
EXIT_INVALID = 2

logger: LoggerProtocol = get_logger("school_folders")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="school-folders",
        description="Crée des dossiers organisés pour l'école ou l'université",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    create = sub.add_parser("create", help="Créer une nouvelle arborescence")
    create.add_argument(
        "-e", "--education-type", required=True, choices=[t.value for t in InstitutionType], help="school/university"
    )
    create.add_argument(
        "-l", "--language", default=DEFAULT_LANGUAGE, choices=[lang.value for lang in Language], help="en/ar"
    )
    create.add_argument("-y", "--year", required=True, help="Année (ex. 2024-2025 ou 1446-1447)")
    create.add_argument(
        "--high-school-year", choices=[y.value for y in HighSchoolYear], help="Année de lycée (first/second/third)"
    )
    create.add_argument("-t", "--track", choices=[t.value for t in TrackKind], help="Filière (2e/3e année)")
    create.add_argument("-s", "--semesters", default="2", help="Nombre de semestres (université)")
    create.add_argument(
        "--subjects",
        action="append",
        default=[],
        help="Matières d'un semestre, séparées par des virgules (répéter une fois par semestre)",
    )
    create.add_argument("-a", "--additional-folders", default="", help="Dossiers complémentaires (ex. exams,general)")
    create.add_argument("-o", "--output", default=DEFAULT_BASE_DIR, help="Dossier de base")
    create.add_argument("-q", "--quiet", action="store_true", help="Moins de sortie console")
    create.add_argument("-f", "--force", action="store_true", help="Dossiers déjà présents sans avertissement")
    create.add_argument("--dry-run", action="store_true", help="Afficher le plan sans rien créer")

    edit = sub.add_parser("edit", help="Ajouter ou supprimer une matière")
    edit.add_argument("--root", required=True, type=Path, help="Racine générée (contient la configuration)")
    edit.add_argument("--semester", required=True, help="Libellé du semestre ou index (1..N)")
    action = edit.add_mutually_exclusive_group(required=True)
    action.add_argument("--add", metavar="SUBJECT", help="Matière à ajouter")
    action.add_argument("--remove", metavar="SUBJECT", help="Matière à supprimer (irréversible)")
    edit.add_argument("--yes", action="store_true", help="Confirmer la suppression")
    edit.add_argument("--create-semesters", action="store_true", help="Recréer les semestres absents")
    edit.add_argument("--fallback", action="store_true", help="Édition par listing si pas de configuration")
    edit.add_argument("-q", "--quiet", action="store_true", help="Moins de sortie console")
    return parser


def params_from_args(args: argparse.Namespace) -> AcademicParameters:
    """
    Valide les options et construit les paramètres (ValidationError si refus).
    """
    language = Language(args.language)
    optional = parse_optional_folders(args.additional_folders)
    subjects = [parse_subject_list(raw) for raw in args.subjects]

    if args.education_type == InstitutionType.SCHOOL.value:
        if args.high_school_year is None:
            raise ValidationError("--high-school-year est requis pour une école")
        year = HighSchoolYear(args.high_school_year)
        track = validate_track(year, TrackKind(args.track) if args.track else None)
        return school_parameters(
            year=validate_school_year(args.year),
            high_school_year=year,
            track=track,
            language=language,
            optional_folders=optional,
            subjects=subjects or None,
        )

    count = validate_semester_count(args.semesters)
    if len(subjects) != count:
        raise ValidationError("une option --subjects par semestre", ctx={"semesters": count, "found": len(subjects)})
    return AcademicParameters(
        institution_type=InstitutionType.UNIVERSITY,
        language=language,
        year=validate_university_year(args.year),
        semester_count=count,
        per_semester_subjects=subjects,
        optional_folders=optional,
    )


def run_create(args: argparse.Namespace) -> int:
    params = params_from_args(args)
    if args.dry_run:
        print(preview_structure(params).render())
        return EXIT_OK

    result = generate_structure(params, args.output, quiet=args.quiet, force=args.force, logger=logger)
    if not args.quiet:
        print(f"{result.root_path}: {result.report.summary()}")
    if not result.ok:
        for entry in result.report.failed:
            print(f"❌ {entry.path}: {entry.error_detail}")
        return EXIT_FAILED
    if not args.quiet:
        print("Operation completed successfully.")
    return EXIT_OK


def run_fallback_edit(args: argparse.Namespace) -> int:
    """
    Mode dégradé : dossiers listés, aucune configuration lue ni écrite.
    """
    semesters = fallback_editor.list_semester_folders(args.root)
    if args.semester not in semesters:
        if not (args.add and args.create_semesters):
            logger.warning("Semestre introuvable (%s), opération annulée. Semestres : %s", args.semester, semesters)
            return EXIT_FAILED
        fallback_editor.create_semester_folder(args.root, args.semester, logger=logger)

    if args.add:
        fallback_editor.add_subject_folder(args.root, args.semester, args.add, logger=logger)
        return EXIT_OK
    if not args.yes:
        logger.warning("Suppression non confirmée (--yes), rien n'a été supprimé.")
        return EXIT_FAILED
    fallback_editor.remove_subject_folder(args.root, args.semester, args.remove, logger=logger)
    return EXIT_OK


def _report_edit(result: ReconcileResult, quiet: bool) -> int:
    if result.applied:
        if not quiet:
            print(f"{result.action}: {result.subject} ({result.semester})")
        return EXIT_OK
    print(f"Opération annulée : {result.reason}")
    return EXIT_FAILED


def run_edit(args: argparse.Namespace) -> int:
    semester: int | str = int(args.semester) if args.semester.isdigit() else args.semester
    if args.add:
        result = add_subject(
            args.root,
            semester,
            args.add,
            create_missing_semesters=args.create_semesters,
            quiet=args.quiet,
            logger=logger,
        )
    else:
        result = remove_subject(args.root, semester, args.remove, confirmed=args.yes, quiet=args.quiet, logger=logger)

    if result.config_status in (LoadStatus.NOT_FOUND, LoadStatus.CORRUPT):
        if args.fallback:
            logger.warning("Pas de configuration exploitable (%s) : édition par listing", result.config_status)
            return run_fallback_edit(args)
        print("Aucune configuration pour ce dossier. Est-il créé par cet outil ? (--fallback pour forcer)")
        return EXIT_FAILED
    return _report_edit(result, args.quiet)


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        if args.command == "create":
            return run_create(args)
        return run_edit(args)
    except ValidationError as exc:
        logger.error("Saisie refusée : %s %s", exc, exc.ctx)
        return EXIT_INVALID
    except SchoolFoldersError as exc:
        logger.error("Erreur : %s %s", exc, exc.ctx)
        return EXIT_FAILED


@safe_main
def run() -> int:
    """
    Point d'entrée console (code retour via sys.exit).
    """
    return main()


if __name__ == "__main__":
    run()
