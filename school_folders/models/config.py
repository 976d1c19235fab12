# school_folders/models/config.py

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from school_folders.models.academic import AcademicParameters


class LoadStatus(str, Enum):
    OK = "ok"
    NOT_FOUND = "not_found"
    CORRUPT = "corrupt"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class ConfigLoadResult:
    """
    Issue d'une lecture de configuration : NOT_FOUND et CORRUPT sont des valeurs, pas des exceptions.
    """

    status: LoadStatus
    path: Path
    params: AcademicParameters | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.status is LoadStatus.OK and self.params is not None
