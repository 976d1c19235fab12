"""
config_store.py - Persistance des paramètres académiques dans la racine générée.

Un fichier JSON caché par racine (`.school-folders-config.json` par défaut), UTF-8, indenté,
modifiable à la main.
"""

from __future__ import annotations

import json
from pathlib import Path

from school_folders.io.paths import write_text_atomic
from school_folders.models.academic import AcademicParameters
from school_folders.models.config import ConfigLoadResult, LoadStatus
from school_folders.models.exceptions import ErrCode, SchoolFoldersError, ValidationError
from school_folders.models.types import StrOrPath
from school_folders.process_folders.plan_builder import clean_subject_name
from school_folders.utils.config import CONFIG_FILE_NAME
from school_folders.utils.logger import LoggerProtocol, ensure_logger, with_child_logger


def config_path(root_path: StrOrPath) -> Path:
    return Path(root_path).expanduser() / CONFIG_FILE_NAME


def dumps_parameters(params: AcademicParameters) -> str:
    return json.dumps(params.to_dict(), indent=2, ensure_ascii=False) + "\n"


@with_child_logger
def save_configuration(
    root_path: StrOrPath,
    params: AcademicParameters,
    *,
    logger: LoggerProtocol | None = None,
) -> Path:
    """
    Écrase complètement la configuration de `root_path` (pas de fusion).

    Lève SchoolFoldersError(FILEERROR) si l'écriture échoue.
    """
    logger = ensure_logger(logger, __name__)
    target = config_path(root_path)
    if not target.parent.is_dir():
        raise SchoolFoldersError(
            "racine absente, configuration non écrite", code=ErrCode.FILEERROR, ctx={"root": str(target.parent)}
        )
    try:
        write_text_atomic(target, dumps_parameters(params))
    except OSError as exc:
        logger.error("[CONFIG] Échec écriture %s : %s", target, exc)
        raise SchoolFoldersError("write config KO", code=ErrCode.FILEERROR, ctx={"path": str(target)}) from exc
    logger.info("[CONFIG] Configuration enregistrée : %s", target)
    return target


def _check_subject_names(params: AcademicParameters) -> None:
    # fichier édité à la main : mêmes règles de nom que le plan
    for subjects in params.per_semester_subjects:
        for subject in subjects:
            clean_subject_name(subject)


@with_child_logger
def load_configuration(root_path: StrOrPath, *, logger: LoggerProtocol | None = None) -> ConfigLoadResult:
    """
    Lit la configuration de `root_path`.

    - fichier absent → NOT_FOUND (arbre créé à la main ou avant la config) ;
    - JSON illisible, schéma invalide ou nom de matière refusé → CORRUPT ;
    - sinon OK avec les paramètres.
    """
    logger = ensure_logger(logger, __name__)
    target = config_path(root_path)
    if not target.is_file():
        logger.info("[CONFIG] Aucune configuration trouvée : %s", target)
        return ConfigLoadResult(LoadStatus.NOT_FOUND, target)

    try:
        raw = json.loads(target.read_text(encoding="utf-8"))
        params = AcademicParameters.from_dict(raw)
        _check_subject_names(params)
    except (OSError, UnicodeDecodeError, json.JSONDecodeError, TypeError, ValidationError) as exc:
        logger.warning("[CONFIG] Configuration illisible %s : %s", target, exc)
        return ConfigLoadResult(LoadStatus.CORRUPT, target, error=str(exc))

    logger.debug("[CONFIG] Configuration lue : %s", target)
    return ConfigLoadResult(LoadStatus.OK, target, params=params)
