"""
# models/folders.py
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field


@dataclass(slots=True)
class FolderNode:
    """
    Nœud du plan de dossiers (arbre en mémoire, jamais persisté).

    Attributes:
        name: Nom du dossier (dernier segment, déjà nettoyé).
        children: Sous-dossiers, dans l'ordre de création.
    """

    name: str
    children: list[FolderNode] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.name = self.name.strip()

    # --- Helpers pratiques -----------------------------------------------------

    def child(self, name: str) -> FolderNode | None:
        wanted = name.strip()
        return next((c for c in self.children if c.name == wanted), None)

    def add_child(self, node: FolderNode) -> FolderNode:
        """
        Ajoute `node` sauf si un frère du même nom existe déjà.

        Retourne le nœud effectivement présent dans l'arbre (l'existant en cas de doublon).
        """
        existing = self.child(node.name)
        if existing is not None:
            return existing
        self.children.append(node)
        return node

    @property
    def is_leaf(self) -> bool:
        return not self.children

    def iter_preorder(self) -> Iterator[tuple[tuple[str, ...], FolderNode]]:
        """
        Parcours parent avant enfants : (chaîne des noms depuis la racine, nœud).
        """
        stack: list[tuple[tuple[str, ...], FolderNode]] = [((self.name,), self)]
        while stack:
            chain, node = stack.pop()
            yield chain, node
            for c in reversed(node.children):
                stack.append((chain + (c.name,), c))

    def count(self) -> int:
        return sum(1 for _ in self.iter_preorder())

    def render(self, indent: str = "    ") -> str:
        """
        Arbre texte indenté (aperçu / dry-run).
        """
        return "\n".join(f"{indent * (len(chain) - 1)}{node.name}/" for chain, node in self.iter_preorder())
