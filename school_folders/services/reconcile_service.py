# school_folders/services/reconcile_service.py
"""
Réconciliation d'une arborescence existante à partir de sa configuration.

Une invocation = un ajout OU une suppression de matière, appliqué au disque puis à la configuration.

États : IDLE → DIRECTORY_RESOLVED → CONFIG_LOADED → ACTION_CHOSEN → APPLIED | ABORTED
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
import shutil
from typing import cast

from school_folders.io.config_store import load_configuration, save_configuration
from school_folders.models.academic import AcademicParameters
from school_folders.models.config import ConfigLoadResult
from school_folders.models.exceptions import (
    DirectoryNotFoundError,
    ErrCode,
    SchoolFoldersError,
    SubjectNotFoundError,
    ValidationError,
)
from school_folders.models.reconcile import ReconcileAction, ReconcileResult, ReconcileState
from school_folders.models.report import MaterializationReport, Outcome
from school_folders.models.types import StrOrPath
from school_folders.process_folders.materializer import materialize
from school_folders.process_folders.naming import resolve_semester_label
from school_folders.process_folders.plan_builder import build_plan, build_subject_node, clean_subject_name
from school_folders.utils.logger import LoggerProtocol, ensure_logger, with_child_logger

SemesterRef = int | str


@dataclass
class SubjectReconciler:
    """
    Machine à états de réconciliation pour une racine générée.

    Attributes:
        root: racine générée (celle qui contient le fichier de configuration).
        quiet: journalisation par dossier en DEBUG.
        force: dossiers déjà présents non signalés en WARNING.
    """

    root: Path
    quiet: bool = False
    force: bool = False
    logger: LoggerProtocol | None = None
    state: ReconcileState = field(default=ReconcileState.IDLE, init=False)
    params: AcademicParameters | None = field(default=None, init=False)
    load_result: ConfigLoadResult | None = field(default=None, init=False)
    reason: str | None = field(default=None, init=False)

    def __post_init__(self) -> None:
        self.logger = ensure_logger(self.logger, __name__)
        self.root = Path(self.root).expanduser()

    @property
    def log(self) -> LoggerProtocol:
        return cast(LoggerProtocol, self.logger)

    # --------------------
    # Transitions
    # --------------------
    def _expect(self, *states: ReconcileState) -> None:
        if self.state not in states:
            raise SchoolFoldersError(
                "transition invalide",
                code=ErrCode.UNEXPECTED,
                ctx={"state": str(self.state), "expected": [str(s) for s in states]},
            )

    def _abort(
        self,
        reason: str,
        action: ReconcileAction | None = None,
        *,
        semester: str | None = None,
        subject: str | None = None,
        report: MaterializationReport | None = None,
    ) -> ReconcileResult:
        self.state = ReconcileState.ABORTED
        self.reason = reason
        self.log.warning("[RECONCILE] Abandon (%s) : %s", reason, self.root)
        return ReconcileResult(
            state=self.state, action=action, semester=semester, subject=subject, report=report, reason=reason
        )

    def resolve_directory(self) -> Path:
        """
        IDLE → DIRECTORY_RESOLVED. Lève DirectoryNotFoundError si la racine n'existe pas.
        """
        self._expect(ReconcileState.IDLE)
        if not self.root.is_dir():
            raise DirectoryNotFoundError("dossier introuvable", ctx={"root": str(self.root)})
        self.state = ReconcileState.DIRECTORY_RESOLVED
        self.log.debug("[RECONCILE] Racine : %s", self.root)
        return self.root

    def load_configuration(self) -> ConfigLoadResult:
        """
        DIRECTORY_RESOLVED → CONFIG_LOADED, ou ABORTED si configuration absente/corrompue.

        Dans ce dernier cas l'appelant peut basculer sur l'éditeur par listing (fallback_editor).
        """
        self._expect(ReconcileState.DIRECTORY_RESOLVED)
        result = load_configuration(self.root, logger=self.log)
        self.load_result = result
        if not result.ok:
            self._abort(f"configuration {result.status}")
            return result
        self.params = result.params
        self.state = ReconcileState.CONFIG_LOADED
        return result

    @property
    def reconcilable(self) -> bool:
        return self.params is not None and self.state is not ReconcileState.ABORTED

    # --------------------
    # Semestres
    # --------------------
    def semester_labels(self) -> list[str]:
        params = self._params()
        return [resolve_semester_label(i, params.language) for i in range(1, params.semester_count + 1)]

    def existing_semesters(self) -> list[str]:
        return [label for label in self.semester_labels() if (self.root / label).is_dir()]

    def ensure_semesters(self, *, create_missing: bool) -> list[str]:
        """
        Vérifie qu'au moins un dossier de semestre existe.

        Aucun présent : `create_missing=False` → ABORTED sans rien toucher ; sinon les semestres sont recréés
        depuis la configuration.
        """
        self._expect(ReconcileState.CONFIG_LOADED)
        existing = self.existing_semesters()
        if existing:
            return existing
        if not create_missing:
            self._abort("aucun dossier de semestre")
            return []
        plan = build_plan(self._params(), root_label=self.root.name)
        for node in plan.children:
            if node.name in self.semester_labels():
                materialize(node, self.root, quiet=self.quiet, force=self.force, logger=self.log)
        return self.existing_semesters()

    def _params(self) -> AcademicParameters:
        if self.params is None:
            raise SchoolFoldersError("configuration non chargée", code=ErrCode.CONFIG, ctx={"root": str(self.root)})
        return self.params

    def semester_index(self, semester: SemesterRef) -> int:
        """
        Index 1..N depuis un index ou un libellé (`Semester_2`, `الترم الثاني`, `"2"`).
        """
        labels = self.semester_labels()
        if isinstance(semester, str):
            wanted = semester.strip()
            if wanted in labels:
                return labels.index(wanted) + 1
            if not wanted.isdigit():
                raise ValidationError("semestre inconnu", ctx={"semester": semester, "known": labels})
            semester = int(wanted)
        if not 1 <= semester <= len(labels):
            raise ValidationError("semestre hors limites", ctx={"semester": semester, "count": len(labels)})
        return semester

    # --------------------
    # Actions
    # --------------------
    def add_subject(self, semester: SemesterRef, name: str) -> ReconcileResult:
        """
        Ajoute une matière (dossier + dossiers complémentaires) puis réécrit la configuration.
        """
        self._expect(ReconcileState.CONFIG_LOADED)
        self.state = ReconcileState.ACTION_CHOSEN
        action = ReconcileAction.ADD_SUBJECT
        params = self._params()
        try:
            index = self.semester_index(semester)
            subject = clean_subject_name(name)
            current = params.per_semester_subjects[index - 1]
            if subject in (s.strip() for s in current):
                raise ValidationError("matière déjà présente", ctx={"subject": subject, "semester": index})
        except ValidationError as exc:
            self._abort("paramètres refusés", action)
            raise exc.with_context({"root": str(self.root)})

        label = resolve_semester_label(index, params.language)
        semester_path = self.root / label
        report = materialize(
            build_subject_node(subject, params), semester_path, quiet=self.quiet, force=self.force, logger=self.log
        )
        if report.outcome_for(semester_path / subject) is Outcome.FAILED:
            return self._abort("création du dossier impossible", action, semester=label, subject=subject, report=report)

        current.append(subject)
        cfg = self._save(action)
        self.state = ReconcileState.APPLIED
        self.log.info("[RECONCILE] ➕ %s ajouté à %s", subject, label)
        return ReconcileResult(
            state=self.state, action=action, semester=label, subject=subject, report=report, config_path=cfg
        )

    def remove_subject(self, semester: SemesterRef, name: str, *, confirmed: bool) -> ReconcileResult:
        """
        Supprime une matière (sous-arbre complet, irréversible) puis réécrit la configuration.

        `confirmed` doit être vrai : sans confirmation rien n'est modifié.
        """
        self._expect(ReconcileState.CONFIG_LOADED)
        self.state = ReconcileState.ACTION_CHOSEN
        action = ReconcileAction.REMOVE_SUBJECT
        params = self._params()
        try:
            index = self.semester_index(semester)
        except ValidationError:
            self._abort("paramètres refusés", action)
            raise
        label = resolve_semester_label(index, params.language)
        if not confirmed:
            return self._abort("suppression non confirmée", action, semester=label, subject=name)

        current = params.per_semester_subjects[index - 1]
        wanted = name.strip()
        position = next((i for i, s in enumerate(current) if s.strip() == wanted), None)
        if not wanted or position is None:
            self._abort("matière introuvable", action)
            raise SubjectNotFoundError("matière introuvable", ctx={"subject": name, "semester": label})

        target = self.root / label / wanted
        if target.resolve().parent != (self.root / label).resolve():
            self._abort("chemin hors du semestre", action)
            raise SchoolFoldersError(
                "la matière sort du dossier de semestre", code=ErrCode.FILEERROR, ctx={"path": str(target)}
            )
        if target.is_dir():
            try:
                shutil.rmtree(target)
            except OSError as exc:
                self._abort("suppression impossible", action)
                raise SchoolFoldersError("rmtree KO", code=ErrCode.FILEERROR, ctx={"path": str(target)}) from exc
            self.log.info("[RECONCILE] 🗑️ Supprimé : %s", target)
        elif target.exists():
            self._abort("pas un dossier", action)
            raise SchoolFoldersError("la matière n'est pas un dossier", code=ErrCode.FILEERROR, ctx={"path": str(target)})
        else:
            self.log.warning("[RECONCILE] Dossier déjà absent, configuration seule mise à jour : %s", target)

        del current[position]
        cfg = self._save(action)
        self.state = ReconcileState.APPLIED
        return ReconcileResult(
            state=self.state, action=action, semester=label, subject=wanted, removed_path=target, config_path=cfg
        )

    def _save(self, action: ReconcileAction) -> Path:
        try:
            return save_configuration(self.root, self._params(), logger=self.log)
        except SchoolFoldersError as exc:
            self._abort("configuration non enregistrée", action)
            self.log.error("[RECONCILE] Disque modifié mais configuration non à jour : %s", exc)
            raise


def _open(root: StrOrPath, *, quiet: bool, force: bool, logger: LoggerProtocol) -> SubjectReconciler:
    reconciler = SubjectReconciler(Path(root), quiet=quiet, force=force, logger=logger)
    reconciler.resolve_directory()
    reconciler.load_configuration()
    return reconciler


def _not_reconcilable(reconciler: SubjectReconciler, action: ReconcileAction) -> ReconcileResult:
    status = reconciler.load_result.status if reconciler.load_result is not None else None
    return ReconcileResult(state=reconciler.state, action=action, reason=reconciler.reason, config_status=status)


@with_child_logger
def add_subject(
    root: StrOrPath,
    semester: SemesterRef,
    name: str,
    *,
    create_missing_semesters: bool = False,
    quiet: bool = False,
    force: bool = False,
    logger: LoggerProtocol | None = None,
) -> ReconcileResult:
    """
    Point d'entrée : ajout d'une matière dans une racine configurée.
    """
    logger = ensure_logger(logger, __name__)
    reconciler = _open(root, quiet=quiet, force=force, logger=logger)
    if not reconciler.reconcilable:
        return _not_reconcilable(reconciler, ReconcileAction.ADD_SUBJECT)
    if not reconciler.ensure_semesters(create_missing=create_missing_semesters):
        return ReconcileResult(state=reconciler.state, action=ReconcileAction.ADD_SUBJECT, reason=reconciler.reason)
    return reconciler.add_subject(semester, name)


@with_child_logger
def remove_subject(
    root: StrOrPath,
    semester: SemesterRef,
    name: str,
    *,
    confirmed: bool,
    quiet: bool = False,
    logger: LoggerProtocol | None = None,
) -> ReconcileResult:
    """
    Point d'entrée : suppression d'une matière dans une racine configurée.
    """
    logger = ensure_logger(logger, __name__)
    reconciler = _open(root, quiet=quiet, force=False, logger=logger)
    if not reconciler.reconcilable:
        return _not_reconcilable(reconciler, ReconcileAction.REMOVE_SUBJECT)
    if not reconciler.ensure_semesters(create_missing=False):
        return ReconcileResult(state=reconciler.state, action=ReconcileAction.REMOVE_SUBJECT, reason=reconciler.reason)
    return reconciler.remove_subject(semester, name, confirmed=confirmed)
