# school_folders/services/fallback_editor.py
"""
Édition en mode dégradé, sans configuration.

Travaille uniquement sur le listing des dossiers : semestres reconnus à leur préfixe
(`Semester_`, `Semester-`, `الترم`), matières = sous-dossiers directs. Aucune règle de nettoyage
ni de dédoublonnage n'est appliquée ici ; utilisé seulement quand la réconciliation est impossible.
"""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path
import shutil

from school_folders.io.paths import iter_child_dirs
from school_folders.models.exceptions import DirectoryNotFoundError, ErrCode, SchoolFoldersError, SubjectNotFoundError
from school_folders.models.types import StrOrPath
from school_folders.process_folders.naming import looks_like_semester_folder
from school_folders.utils.logger import LoggerProtocol, ensure_logger, with_child_logger


def _root(root: StrOrPath) -> Path:
    p = Path(root).expanduser()
    if not p.is_dir():
        raise DirectoryNotFoundError("dossier introuvable", ctx={"root": str(p)})
    return p


def list_semester_folders(root: StrOrPath) -> list[str]:
    return [p.name for p in iter_child_dirs(_root(root)) if looks_like_semester_folder(p.name)]


def list_subject_folders(root: StrOrPath, semester_folder: str) -> list[str]:
    semester = _root(root) / semester_folder
    if not semester.is_dir():
        raise DirectoryNotFoundError("semestre introuvable", ctx={"semester": str(semester)})
    return [p.name for p in iter_child_dirs(semester)]


@with_child_logger
def create_semester_folder(root: StrOrPath, name: str, *, logger: LoggerProtocol | None = None) -> Path:
    logger = ensure_logger(logger, __name__)
    target = _root(root) / name
    try:
        target.mkdir(exist_ok=True)
    except OSError as exc:
        raise SchoolFoldersError("mkdir KO", code=ErrCode.FILEERROR, ctx={"path": str(target)}) from exc
    logger.info("[FALLBACK] Semestre créé : %s", target)
    return target


@with_child_logger
def add_subject_folder(
    root: StrOrPath,
    semester_folder: str,
    name: str,
    subfolders: Iterable[str] = (),
    *,
    logger: LoggerProtocol | None = None,
) -> Path:
    """
    Crée `<root>/<semestre>/<name>` et ses sous-dossiers tels quels.
    """
    logger = ensure_logger(logger, __name__)
    target = _root(root) / semester_folder / name
    try:
        target.mkdir(parents=True, exist_ok=True)
        for sub in subfolders:
            (target / sub).mkdir(exist_ok=True)
    except OSError as exc:
        raise SchoolFoldersError("mkdir KO", code=ErrCode.FILEERROR, ctx={"path": str(target)}) from exc
    logger.info("[FALLBACK] Matière ajoutée : %s", target)
    return target


@with_child_logger
def remove_subject_folder(
    root: StrOrPath,
    semester_folder: str,
    name: str,
    *,
    logger: LoggerProtocol | None = None,
) -> Path:
    """
    Supprime récursivement `<root>/<semestre>/<name>` (irréversible).
    """
    logger = ensure_logger(logger, __name__)
    target = _root(root) / semester_folder / name
    if not target.is_dir():
        raise SubjectNotFoundError("matière introuvable", ctx={"path": str(target)})
    try:
        shutil.rmtree(target)
    except OSError as exc:
        raise SchoolFoldersError("rmtree KO", code=ErrCode.FILEERROR, ctx={"path": str(target)}) from exc
    logger.info("[FALLBACK] 🗑️ Matière supprimée : %s", target)
    return target
