# school_folders/services/generate_service.py
"""
Création initiale : paramètres → plan → disque → configuration.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from school_folders.io.config_store import save_configuration
from school_folders.models.academic import AcademicParameters
from school_folders.models.folders import FolderNode
from school_folders.models.report import MaterializationReport
from school_folders.models.types import StrOrPath
from school_folders.process_folders.materializer import materialize
from school_folders.process_folders.plan_builder import build_plan, normalize_parameters
from school_folders.utils.logger import LoggerProtocol, ensure_logger, with_child_logger


@dataclass(frozen=True)
class GenerationResult:
    root_path: Path
    params: AcademicParameters
    plan: FolderNode
    report: MaterializationReport
    config_path: Path | None = None

    @property
    def ok(self) -> bool:
        return self.report.ok and self.config_path is not None


def preview_structure(params: AcademicParameters) -> FolderNode:
    """
    Plan seul (dry-run), sans toucher au disque.
    """
    return build_plan(normalize_parameters(params))


@with_child_logger
def generate_structure(
    params: AcademicParameters,
    base_path: StrOrPath,
    *,
    quiet: bool = False,
    force: bool = False,
    logger: LoggerProtocol | None = None,
) -> GenerationResult:
    """
    Crée l'arborescence sous `base_path` puis enregistre la configuration dans la racine générée.

    Succès partiel possible : les échecs sont dans le rapport ; la configuration est écrite dès que la
    racine existe, pour qu'une relance ou une réconciliation reste possible.
    """
    logger = ensure_logger(logger, __name__)
    normalized = normalize_parameters(params)
    plan = build_plan(normalized)
    base = Path(base_path).expanduser()
    root_path = base / plan.name

    logger.info("=== CRÉATION %s (%d dossiers prévus) ===", root_path, plan.count())
    report = materialize(plan, base, quiet=quiet, force=force, logger=logger)

    cfg: Path | None = None
    if root_path.is_dir():
        cfg = save_configuration(root_path, normalized, logger=logger)
    else:
        logger.error("[GENERATE] Racine non créée, configuration ignorée : %s", root_path)

    if report.failed:
        logger.warning("⚠️  %d échec(s) - relancer la commande après correction", len(report.failed))
    return GenerationResult(root_path=root_path, params=normalized, plan=plan, report=report, config_path=cfg)
