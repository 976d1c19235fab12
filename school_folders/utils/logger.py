"""2025-09-04 - logger du projet."""

from __future__ import annotations

import functools
import logging
import logging.handlers
import os
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Optional, ParamSpec, Protocol, TypeVar, cast

from school_folders.utils.config import LOG_FILE_PATH, LOG_LEVEL, LOG_ROTATION_DAYS
from school_folders.utils.log_rotation import rotate_logs


# ---------- Protocole (contrat) ----------
class LoggerProtocol(Protocol):
    """
    Interface minimale d'un logger du projet.

    Les méthodes `debug`, `info`, `warning`, `error` et `exception` journalisent aux différents niveaux ;
    `get_child` crée un logger enfant (nom suffixé).
    """

    def debug(self, msg: str, *args: object, **kwargs: Any) -> None: ...

    def info(self, msg: str, *args: object, **kwargs: Any) -> None: ...

    def warning(self, msg: str, *args: object, **kwargs: Any) -> None: ...

    def error(self, msg: str, *args: object, **kwargs: Any) -> None: ...

    def exception(self, msg: str, *args: object, **kwargs: Any) -> None: ...

    def get_child(self, suffix: str) -> LoggerProtocol: ...


# ---------- Classe concrète (instanciable) ----------


@dataclass(frozen=True)
class SchoolFoldersLogger:
    """
    Enveloppe fine autour de `logging.Logger` qui respecte LoggerProtocol.

    Attributes:
        _base: Le logger standard sous-jacent.
    """

    _base: logging.Logger

    def debug(self, msg: str, *args: object, **kwargs: Any) -> None:
        self._base.debug(msg, *args, **kwargs)

    def info(self, msg: str, *args: object, **kwargs: Any) -> None:
        self._base.info(msg, *args, **kwargs)

    def warning(self, msg: str, *args: object, **kwargs: Any) -> None:
        self._base.warning(msg, *args, **kwargs)

    def error(self, msg: str, *args: object, **kwargs: Any) -> None:
        self._base.error(msg, *args, **kwargs)

    def exception(self, msg: str, *args: object, **kwargs: Any) -> None:
        self._base.exception(msg, *args, **kwargs)

    def get_child(self, suffix: str) -> LoggerProtocol:
        """
        Crée un logger enfant avec le suffixe donné.

        Args:
        - suffix (str): suffixe ajouté au nom du logger courant.

        Returns:
        Une nouvelle instance SchoolFoldersLogger enfant de celle-ci.
        """
        return SchoolFoldersLogger(self._base.getChild(suffix))


def _ensure_handlers(base: logging.Logger, global_log_file: str, script_log_file: str) -> None:
    if getattr(base, "_school_folders_configured", False):
        return

    formatter = logging.Formatter("%(asctime)s - %(levelname)s - [%(name)s] %(message)s")

    stream = logging.StreamHandler()
    stream.setFormatter(formatter)
    base.addHandler(stream)

    # Global log: rotation quotidienne à minuit, conserver 14 jours
    fh_global = logging.handlers.TimedRotatingFileHandler(
        filename=global_log_file,
        when="midnight",
        backupCount=14,
        encoding="utf-8",
        utc=False,
    )
    fh_global.setFormatter(formatter)
    base.addHandler(fh_global)

    # Script log: rotation quotidienne à minuit, conserver 14 jours
    fh_script = logging.handlers.TimedRotatingFileHandler(
        filename=script_log_file,
        when="midnight",
        backupCount=14,
        encoding="utf-8",
        utc=False,
    )
    fh_script.setFormatter(formatter)
    base.addHandler(fh_script)

    # Évite double impression si root a des handlers
    base.propagate = False

    setattr(base, "_school_folders_configured", True)


def _level() -> int:
    level = logging.getLevelName(LOG_LEVEL)
    return level if isinstance(level, int) else logging.INFO


def get_logger(script_name: str) -> LoggerProtocol:
    """
    Constructeur de logger.

    Crée le dossier de logs si besoin, fait tourner les anciens fichiers, configure les handlers (une seule fois par
    nom de logger).

    :param script_name: Nom du script / module.
    :return: Instance de logger.
    """
    os.makedirs(LOG_FILE_PATH, exist_ok=True)
    global_log_file = os.path.join(LOG_FILE_PATH, "SchoolFolders.log")
    script_log_file = os.path.join(LOG_FILE_PATH, f"{script_name}.log")

    base = logging.getLogger(script_name)
    base.setLevel(_level())
    _ensure_handlers(base, global_log_file, script_log_file)

    try:
        rotate_logs(LOG_FILE_PATH, LOG_ROTATION_DAYS, logf=script_log_file)
    except OSError as exc:
        SchoolFoldersLogger(base).warning("Rotation des logs échouée: %s", exc)

    return SchoolFoldersLogger(base)


# ---------- Utilities ----------
def ensure_logger(logger: LoggerProtocol | None, module: str) -> LoggerProtocol:
    """
    Retourne le logger fourni, ou un nouveau logger pour `module` si None.
    """
    if logger is None:
        return get_logger(module)
    return logger


# ---------- Décorateur type-safe ----------
P = ParamSpec("P")
R = TypeVar("R")


def with_child_logger(func: Callable[P, R]) -> Callable[P, R]:
    """
    Injecte un logger enfant (module.fonction) quand l'appelant n'en passe pas.

    :param func: La fonction à décorer
    :return: La fonction décorée
    """

    @functools.wraps(func)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
        current = cast(Optional[LoggerProtocol], kwargs.get("logger"))
        if current is None:
            # Premier hop : on prend le nom de module pour initialiser
            base = ensure_logger(current, func.__module__)
            kwargs["logger"] = _get_or_child(base, func.__name__)
        # Sinon on ne touche pas au logger transmis (pas d'empilement)
        return func(*args, **kwargs)

    return wrapper


def _get_or_child(logger: LoggerProtocol, suffix: str) -> LoggerProtocol:
    base = getattr(logger, "_base", None)
    base_name = base.name if isinstance(base, logging.Logger) else ""
    if base_name.endswith(f".{suffix}") or base_name == suffix:
        return logger
    return logger.get_child(suffix)
