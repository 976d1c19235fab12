# school_folders/io/paths.py
"""
Helpers chemins / écriture sûre.
"""

from __future__ import annotations

from collections.abc import Iterator
import os
from pathlib import Path
import tempfile

from school_folders.models.types import StrOrPath


def is_hidden_path(p: StrOrPath) -> bool:
    return Path(p).name.startswith(".")


def iter_child_dirs(root: StrOrPath) -> Iterator[Path]:
    """
    Sous-dossiers directs, non cachés, triés par nom.
    """
    for p in sorted(Path(root).iterdir(), key=lambda x: x.name):
        if p.is_dir() and not is_hidden_path(p):
            yield p


def write_text_atomic(path: StrOrPath, content: str, *, encoding: str = "utf-8") -> Path:
    """
    Écrit de façon atomique (tmp -> replace) pour éviter les demi-fichiers.

    Le dossier parent doit exister.
    """
    final_p = Path(path)
    tmp = tempfile.NamedTemporaryFile(
        mode="w", encoding=encoding, dir=final_p.parent, prefix=f".{final_p.name}.", suffix=".tmp", delete=False
    )
    tmp_p = Path(tmp.name)
    try:
        with tmp:
            tmp.write(content)
            tmp.flush()
            os.fsync(tmp.fileno())
        os.replace(tmp_p, final_p)
    except OSError:
        tmp_p.unlink(missing_ok=True)
        raise
    return final_p
