from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path


class Outcome(str, Enum):
    CREATED = "created"
    ALREADY_EXISTS = "already_exists"
    FAILED = "failed"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class ReportEntry:
    path: Path
    outcome: Outcome
    error_detail: str | None = None


@dataclass
class MaterializationReport:
    """
    Résultat d'une matérialisation, une entrée par nœud tenté, dans l'ordre de parcours.

    Les nœuds d'un sous-arbre dont le parent a échoué ne figurent pas dans le rapport.
    """

    entries: list[ReportEntry] = field(default_factory=list)
    warnings: list[Path] = field(default_factory=list)

    def add(self, path: Path, outcome: Outcome, error_detail: str | None = None) -> ReportEntry:
        entry = ReportEntry(path=path, outcome=outcome, error_detail=error_detail)
        self.entries.append(entry)
        return entry

    def _with(self, outcome: Outcome) -> list[ReportEntry]:
        return [e for e in self.entries if e.outcome is outcome]

    @property
    def created(self) -> list[ReportEntry]:
        return self._with(Outcome.CREATED)

    @property
    def already_exists(self) -> list[ReportEntry]:
        return self._with(Outcome.ALREADY_EXISTS)

    @property
    def failed(self) -> list[ReportEntry]:
        return self._with(Outcome.FAILED)

    @property
    def ok(self) -> bool:
        return not self.failed

    def outcome_for(self, path: Path) -> Outcome | None:
        return next((e.outcome for e in self.entries if e.path == path), None)

    def summary(self) -> str:
        return (
            f"{len(self.created)} created, {len(self.already_exists)} already existed, "
            f"{len(self.failed)} failed"
        )
