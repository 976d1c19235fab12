# school_folders/models/exceptions.py
from __future__ import annotations

from collections.abc import Mapping
from enum import StrEnum  # py>=3.11
from typing import Any


class ErrCode(StrEnum):
    VALIDATION = "VALIDATION"
    NODIR = "NODIR"
    NOTFOUND = "NOTFOUND"
    CONFIG = "CONFIG"
    FILEERROR = "FILEERROR"
    UNEXPECTED = "UNEXPECTED"


class SchoolFoldersError(RuntimeError):
    """
    Erreur métier avec code + contexte structuré.
    """

    __slots__ = ("code", "ctx")

    def __init__(self, message: str, *, code: ErrCode, ctx: Mapping[str, Any] | None = None) -> None:
        super().__init__(message)
        self.code = code
        self.ctx: dict[str, Any] = dict(ctx or {})

    def with_context(self, extra: dict[str, Any]) -> SchoolFoldersError:
        # N'écrase pas ce qui existe déjà
        for k, v in extra.items():
            self.ctx.setdefault(k, v)
        return self

    def __str__(self) -> str:  # utile dans les logs
        return f"{self.code}: {super().__str__()}"


class ValidationError(SchoolFoldersError):
    """Paramètres refusés (année, nom de matière, semestre...)."""

    def __init__(self, message: str, *, ctx: Mapping[str, Any] | None = None) -> None:
        super().__init__(message, code=ErrCode.VALIDATION, ctx=ctx)


class DirectoryNotFoundError(SchoolFoldersError):
    """Le dossier racine demandé n'existe pas sur le disque."""

    def __init__(self, message: str, *, ctx: Mapping[str, Any] | None = None) -> None:
        super().__init__(message, code=ErrCode.NODIR, ctx=ctx)


class SubjectNotFoundError(SchoolFoldersError):
    def __init__(self, message: str, *, ctx: Mapping[str, Any] | None = None) -> None:
        super().__init__(message, code=ErrCode.NOTFOUND, ctx=ctx)
