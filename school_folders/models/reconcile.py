from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from school_folders.models.config import LoadStatus
from school_folders.models.report import MaterializationReport


class ReconcileState(str, Enum):
    IDLE = "idle"
    DIRECTORY_RESOLVED = "directory_resolved"
    CONFIG_LOADED = "config_loaded"
    ACTION_CHOSEN = "action_chosen"
    APPLIED = "applied"
    ABORTED = "aborted"

    def __str__(self) -> str:
        return self.value


class ReconcileAction(str, Enum):
    ADD_SUBJECT = "add_subject"
    REMOVE_SUBJECT = "remove_subject"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class ReconcileResult:
    state: ReconcileState
    action: ReconcileAction | None = None
    semester: str | None = None
    subject: str | None = None
    report: MaterializationReport | None = None
    removed_path: Path | None = None
    config_path: Path | None = None
    reason: str | None = None
    config_status: LoadStatus | None = None

    @property
    def applied(self) -> bool:
        return self.state is ReconcileState.APPLIED
