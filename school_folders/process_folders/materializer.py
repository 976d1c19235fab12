"""
# process_folders/materializer.py

Exécution d'un plan FolderNode sur le disque, parent avant enfants.
Création idempotente : un dossier existant est rapporté, jamais une erreur.
"""

from __future__ import annotations

from pathlib import Path

from school_folders.models.folders import FolderNode
from school_folders.models.report import MaterializationReport, Outcome
from school_folders.models.types import StrOrPath
from school_folders.utils.logger import LoggerProtocol, ensure_logger, with_child_logger


def _create_dir(path: Path) -> None:
    # parents=True : le parent peut avoir disparu entre deux nœuds
    path.mkdir(parents=True, exist_ok=True)


def _ensure_directory(
    path: Path,
    node: FolderNode,
    report: MaterializationReport,
    *,
    quiet: bool,
    force: bool,
    logger: LoggerProtocol,
) -> Outcome:
    log_ok = logger.debug if quiet else logger.info
    try:
        if path.is_dir():
            report.add(path, Outcome.ALREADY_EXISTS)
            if node.is_leaf and not force:
                report.warnings.append(path)
                logger.warning("[FOLDER] déjà présent : %s", path)
            else:
                logger.debug("[FOLDER] déjà présent : %s", path)
            return Outcome.ALREADY_EXISTS
        if path.exists():
            report.add(path, Outcome.FAILED, "exists and is not a directory")
            logger.error("[FOLDER] ❌ %s existe mais n'est pas un dossier", path)
            return Outcome.FAILED
        _create_dir(path)
    except (OSError, ValueError) as exc:
        # ValueError : nom invalide pour l'OS (octet nul)
        report.add(path, Outcome.FAILED, f"{type(exc).__name__}: {exc}")
        logger.error("[FOLDER] ❌ Échec création %s : %s", path, exc)
        return Outcome.FAILED

    report.add(path, Outcome.CREATED)
    log_ok("[FOLDER] créé : %s", path)
    return Outcome.CREATED


@with_child_logger
def materialize(
    root: FolderNode,
    base_path: StrOrPath,
    *,
    quiet: bool = False,
    force: bool = False,
    logger: LoggerProtocol | None = None,
) -> MaterializationReport:
    """
    Crée l'arbre `root` sous `base_path`.

    - parcours préfixe : un parent est toujours traité avant ses enfants ;
    - échec d'un nœud → `Failed`, sous-arbre ignoré, les frères continuent ;
    - jamais d'arrêt anticipé : le rapport décrit exactement ce qui a été fait.

    Args:
        root: racine du plan (ou d'un sous-arbre).
        base_path: dossier dans lequel `root` est créé.
        quiet: journalise chaque nœud en DEBUG au lieu de INFO.
        force: un dossier feuille déjà présent n'est pas signalé en WARNING.

    Returns:
        MaterializationReport ordonné.
    """
    logger = ensure_logger(logger, __name__)
    base = Path(base_path).expanduser()
    report = MaterializationReport()

    stack: list[tuple[Path, FolderNode]] = [(base, root)]
    while stack:
        parent, node = stack.pop()
        path = parent / node.name
        outcome = _ensure_directory(path, node, report, quiet=quiet, force=force, logger=logger)
        if outcome is Outcome.FAILED:
            if node.children:
                logger.warning("[FOLDER] %d sous-dossier(s) ignoré(s) sous %s", node.count() - 1, path)
            continue
        for c in reversed(node.children):
            stack.append((path, c))

    failures = len(report.failed)
    if failures:
        logger.error("[FOLDER] %d échec(s) sur %d dossier(s) : %s", failures, len(report.entries), report.summary())
    else:
        logger.info("[FOLDER] %s", report.summary())
    return report
