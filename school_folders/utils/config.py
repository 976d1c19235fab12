"""2025-09-04 - module config en lien avec env."""

# config.py
from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv

# Chargement du .env (absent = pas d'erreur)
load_dotenv(os.getenv("SCHOOL_FOLDERS_ENV_FILE", ".env"))


class ConfigError(Exception):
    """
    Erreur de configuration (.env / variables d'environnement).
    """


# --- Fonctions utilitaires ---


def get_str(key: str, default: str = "") -> str:
    """
    Retourne la variable env sous forme de chaîne.
    """
    return os.getenv(key, default)


def get_int(key: str, default: int = 0) -> int:
    """
    Retourne la variable env convertie en entier.

    Lève ConfigError si conversion impossible.
    """
    raw = os.getenv(key, str(default))
    try:
        return int(raw)
    except ValueError as exc:
        raise ConfigError(f"[CONFIG ERROR] La variable {key} doit être un entier (valeur: {raw!r}).") from exc


def get_path(key: str, default: str) -> str:
    """
    Retourne un chemin (str) lu depuis l'env, `~` développé.
    """
    return str(Path(get_str(key, default).strip()).expanduser())


# --- Variables d'environnement accessibles globalement ---

# LOGS
LOG_FILE_PATH: str = get_path("LOG_FILE_PATH", "~/.school-folders/logs")
LOG_ROTATION_DAYS: int = get_int("LOG_ROTATION_DAYS", 30)
LOG_LEVEL: str = get_str("LOG_LEVEL", "INFO").upper()

# STRUCTURE
CONFIG_FILE_NAME: str = get_str("CONFIG_FILE_NAME", ".school-folders-config.json")
DEFAULT_BASE_DIR: str = get_path("DEFAULT_BASE_DIR", "~/Desktop")
DEFAULT_LANGUAGE: str = get_str("DEFAULT_LANGUAGE", "en").lower()

if not CONFIG_FILE_NAME.startswith("."):
    raise ConfigError(f"[CONFIG ERROR] CONFIG_FILE_NAME doit être un fichier caché (valeur: {CONFIG_FILE_NAME!r}).")
